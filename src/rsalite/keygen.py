"""Core Key Generation Utility, focusing on the generation of random primes within the 64-bit domain.

Prime candidates are drawn uniformly and screened with a fixed-witness Fermat test. Two distinct primes are then
combined into a textbook RSA key pair. Every bounded search reports exhaustion by returning None, it is up to the
caller whether to retry with a different bound.

Typical usage example:

    is_probably_prime(104729)
    p = generate_random_prime(10000)
    (n, e), (_, d) = generate_key_pair(10000)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import secrets
from typing import Protocol

from rsalite.arith import are_coprime
from rsalite.arith import check_domain
from rsalite.arith import checked_mul
from rsalite.arith import mod_inverse
from rsalite.arith import mod_pow

WITNESSES: tuple[int, ...] = (2, 3, 5, 7)
MAX_ATTEMPTS: int = 1000
DEFAULT_PUBLIC_EXPONENT: int = 65537

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything able to draw a uniform integer from an inclusive range, e.g. `random.Random`."""

    def randint(self, a: int, b: int) -> int:
        ...


_SYSTEM_RANDOM: RandomSource = secrets.SystemRandom()


def is_probably_prime(p: int) -> bool:
    """Performs a Fermat primality test against a fixed set of witnesses.

    Each witness below `p` must satisfy `w**(p-1) % p == 1`. Witnesses that are not below `p` cannot be used and are
    skipped, which lets the witnesses themselves through. Carmichael numbers coprime to every witness (29341 being the
    smallest) are reported as prime.

    Args:
        p: The candidate to test.

    Returns:
        True if `p` is probably prime, False if it is certainly composite (or below 2).
    """
    check_domain("p", p)
    if p < 2:
        return False
    for w in WITNESSES:
        if w >= p:
            continue
        if mod_pow(w, p - 1, p) != 1:
            return False
    return True


def generate_random_prime(n: int, rng: RandomSource | None = None) -> int | None:
    """Draw a random probable prime from `[2, n]`.

    Samples uniformly up to `MAX_ATTEMPTS` times and returns the first candidate passing `is_probably_prime`.

    Args:
        n: Inclusive upper bound.
        rng: Source of randomness. Defaults to the system CSPRNG.

    Returns:
        A probable prime no greater than `n`, or None if `n < 2` or every attempt failed.
    """
    check_domain("n", n)
    if n < 2:
        return None
    rng = rng or _SYSTEM_RANDOM
    for _ in range(MAX_ATTEMPTS):
        candidate = rng.randint(2, n)
        if is_probably_prime(candidate):
            return candidate
    logger.debug("No prime found below %d in %d attempts", n, MAX_ATTEMPTS)
    return None


def choose_public_exponent(phi: int, rng: RandomSource | None = None) -> int | None:
    """Pick a public exponent coprime to the totient.

    The conventional 65537 is preferred whenever it fits below `phi` and is coprime to it. Otherwise, exponents are
    sampled uniformly from `(1, phi)` until a coprime one turns up, at most `MAX_ATTEMPTS` times.

    Args:
        phi: The totient of the modulus.
        rng: Source of randomness. Defaults to the system CSPRNG.

    Returns:
        A suitable exponent, or None if the range is empty or sampling was exhausted.
    """
    check_domain("phi", phi)
    if phi > DEFAULT_PUBLIC_EXPONENT and are_coprime(DEFAULT_PUBLIC_EXPONENT, phi):
        return DEFAULT_PUBLIC_EXPONENT
    if phi <= 2:
        logger.debug("No exponent exists strictly between 1 and %d", phi)
        return None
    rng = rng or _SYSTEM_RANDOM
    for _ in range(MAX_ATTEMPTS):
        e = rng.randint(2, phi - 1)
        if are_coprime(e, phi):
            return e
    logger.debug("No exponent coprime to %d found in %d attempts", phi, MAX_ATTEMPTS)
    return None


def generate_key_pair(bound: int, rng: RandomSource | None = None) -> tuple[tuple[int, int], tuple[int, int]] | None:
    """Generates an RSA key pair from two random primes no greater than `bound`.

    Fully generates a valid RSA Key, including the public and private exponents. The modulus and totient must fit the
    domain, which in practice limits `bound` to 32 bits. Larger bounds are accepted but fail whenever the drawn primes
    overflow.

    Args:
        bound: Inclusive upper bound for both primes.
        rng: Source of randomness. Defaults to the system CSPRNG.

    Returns:
        A tuple of (public, private) sub-tuples (modulus, exponent), or None if any step came up empty.
    """
    rng = rng or _SYSTEM_RANDOM
    p = generate_random_prime(bound, rng)
    if p is None:
        logger.debug("Key generation failed: no first prime below %d", bound)
        return None
    for _ in range(MAX_ATTEMPTS):
        q = generate_random_prime(bound, rng)
        if q is None:
            logger.debug("Key generation failed: no second prime below %d", bound)
            return None
        if q != p:
            break
    else:
        logger.debug("Key generation failed: no prime distinct from %d below %d", p, bound)
        return None
    n = checked_mul(p, q)
    phi = checked_mul(p - 1, q - 1)
    if n is None or phi is None:
        logger.debug("Key generation failed: modulus of %d and %d overflows", p, q)
        return None
    e = choose_public_exponent(phi, rng)
    if e is None:
        return None
    d = mod_inverse(e, phi)
    if d is None:
        logger.debug("Key generation failed: %d has no inverse modulo %d", e, phi)
        return None
    logger.info("Generated key pair with modulus %d and public exponent %d", n, e)
    return (n, e), (n, d)
