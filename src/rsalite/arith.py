"""Fixed-width modular arithmetic, the foundation the rest of the engine is built upon.

All values handled here live in an unsigned 64-bit domain. Python integers never overflow, so every intermediate
product is naturally carried in a "wider accumulator"; what we must do ourselves is refuse inputs that fall outside of
the domain and detect products that would not fit back into it.

Typical usage example:

    mod_pow(2, 10, 1000)
    gcd(54, 24)
    mod_inverse(7, 40)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging

DOMAIN_BITS: int = 64
DOMAIN_MAX: int = (1 << DOMAIN_BITS) - 1

logger = logging.getLogger(__name__)


def in_domain(value: int) -> bool:
    """Whether `value` is representable as an unsigned `DOMAIN_BITS` integer."""
    return 0 <= value <= DOMAIN_MAX


def check_domain(name: str, value: int) -> None:
    """Raise if `value` is not a domain value.

    Raises:
        ValueError: If `value` is negative or wider than `DOMAIN_BITS`.
    """
    if not in_domain(value):
        raise ValueError(f"{name} must be in range [0, {DOMAIN_MAX}], got {value}")


def checked_mul(a: int, b: int) -> int | None:
    """Multiply two domain values, refusing to wrap.

    Args:
        a: First factor.
        b: Second factor.

    Returns:
        The product, or None if it does not fit the domain.
    """
    check_domain("a", a)
    check_domain("b", b)
    res = a * b
    if res > DOMAIN_MAX:
        logger.debug("Product %d * %d overflows %d bits", a, b, DOMAIN_BITS)
        return None
    return res


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Computes `base**exponent % modulus` by binary square-and-multiply.

    Walks the exponent from its least significant bit, squaring the base on every step and folding it into the
    result whenever the current bit is set. Both products are reduced immediately.

    Args:
        base: The base. Reduced modulo `modulus` before starting.
        exponent: The exponent.
        modulus: The modulus. Must be >= 1.

    Returns:
        The residue. 0 if `modulus` is 1, otherwise 1 for a zero exponent (even with a zero base).

    Raises:
        ValueError: If any argument is outside the domain or `modulus` is 0.
    """
    check_domain("base", base)
    check_domain("exponent", exponent)
    check_domain("modulus", modulus)
    if modulus == 0:
        raise ValueError("modulus must be >= 1")
    result = 1 % modulus
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1
    return result


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm.

    Args:
        a: First domain value.
        b: Second domain value.

    Returns:
        gcd(a, b), with gcd(a, 0) == a and gcd(0, 0) == 0.
    """
    check_domain("a", a)
    check_domain("b", b)
    while b > 0:
        a, b = b, a % b
    return a


def are_coprime(a: int, b: int) -> bool:
    """Whether `a` and `b` share no factor but 1. Note that (0, 0) is not coprime."""
    return gcd(a, b) == 1


def eea(a: int, b: int) -> tuple[int, int, int]:
    """Implements the Extended Euclidean Algorithm.

    Such that a*s0 + b*t0 = r0 = gcd(a, b).

    Args:
        a: The first natural number.
        b: The second natural number.

    Returns:
        Greatest common divisor of two integers.
        As well as the Bezout coefficients.
    """
    r0, r1 = a, b
    s0, s1, t0, t1 = 1, 0, 0, 1
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        s0, s1 = s1, s0 - q * s1
        t0, t1 = t1, t0 - q * t1
    return r0, s0, t0


def mod_inverse(e: int, phi: int) -> int | None:
    """Find the multiplicative inverse of `e` modulo `phi`.

    Uses the Extended Euclidean Algorithm. The inverse is unique in `[1, phi)` when it exists, so the result is the
    same the exhaustive `mod_inverse_search` would find, without walking the whole range.

    Args:
        e: The value to invert.
        phi: The modulus.

    Returns:
        The smallest `d` in `[1, phi)` with `e*d % phi == 1`, or None if none exists.
    """
    check_domain("e", e)
    check_domain("phi", phi)
    if phi <= 1:
        return None
    g, s, _ = eea(e % phi, phi)
    if g != 1:
        logger.debug("No inverse of %d modulo %d: gcd is %d", e, phi, g)
        return None
    return s % phi


def mod_inverse_search(e: int, phi: int) -> int | None:
    """Exhaustively search for the multiplicative inverse of `e` modulo `phi`.

    Linear in `phi`. Only sensible for small moduli; `mod_inverse` computes the same value directly.

    Args:
        e: The value to invert.
        phi: The modulus.

    Returns:
        The smallest `d` in `[1, phi)` with `e*d % phi == 1`, or None if none exists.
    """
    check_domain("e", e)
    check_domain("phi", phi)
    for d in range(1, phi):
        if (e * d) % phi == 1:
            return d
    return None
