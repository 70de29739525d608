# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math

import pytest

from rsalite import arith
from rsalite.arith import DOMAIN_MAX

out_of_domain = [-1, -27358709381728, DOMAIN_MAX + 1, 2**128]


def mod_pow_brute(x, n, m):
    """Helper function multiplying step by step."""
    result = 1 % m
    for _ in range(n):
        result = (result * x) % m
    return result


@pytest.mark.parametrize("base,exponent,modulus,expected", [
    (2, 3, 5, 3),
    (10, 0, 7, 1),
    (10, 5, 1, 0),
    (0, 0, 1, 0),
    (0, 0, 13, 1),
    (0, 5, 13, 0),
    (65, 17, 3233, 2790),
    (2790, 2753, 3233, 65),
])
def test_mod_pow_known(base, exponent, modulus, expected):
    assert arith.mod_pow(base, exponent, modulus) == expected


def test_mod_pow_brute():
    for x in (0, 1, 2, 7, 123, 4096):
        for n in range(0, 40, 3):
            for m in (1, 2, 9, 97, 1000):
                assert arith.mod_pow(x, n, m) == mod_pow_brute(x, n, m)


def test_mod_pow_large_concrete():
    assert arith.mod_pow(123456789, 12345, 1000000007) == mod_pow_brute(123456789, 12345, 1000000007)


@pytest.mark.parametrize("base,exponent,modulus", [
    (DOMAIN_MAX, DOMAIN_MAX, DOMAIN_MAX - 1),
    (DOMAIN_MAX - 1, DOMAIN_MAX, 18446744073709551557),
    (2**63 + 12345, 2**62 + 7, 2**64 - 59),
    (3, 2**64 - 60, 2**64 - 59),
])
def test_mod_pow_full_width(base, exponent, modulus):
    # Products of two 64-bit residues have to be reduced in a wider accumulator.
    assert arith.mod_pow(base, exponent, modulus) == pow(base, exponent, modulus)


@pytest.mark.parametrize("x", [0, 1, 5, DOMAIN_MAX])
def test_mod_pow_conventions(x):
    assert arith.mod_pow(x, 0, 1) == 0
    assert arith.mod_pow(x, 0, 101) == 1
    assert arith.mod_pow(x, 12345, 1) == 0


def test_mod_pow_reduces_base():
    assert arith.mod_pow(3233 + 65, 17, 3233) == arith.mod_pow(65, 17, 3233)


def test_mod_pow_zero_modulus():
    with pytest.raises(ValueError):
        arith.mod_pow(2, 3, 0)


@pytest.mark.parametrize("value", out_of_domain)
def test_mod_pow_validates(value):
    with pytest.raises(ValueError):
        arith.mod_pow(value, 3, 7)
    with pytest.raises(ValueError):
        arith.mod_pow(3, value, 7)
    with pytest.raises(ValueError):
        arith.mod_pow(3, 7, value)


@pytest.mark.parametrize("a,b,expected", [
    (54, 24, 6),
    (48, 18, 6),
    (101, 10, 1),
    (0, 5, 5),
    (5, 0, 5),
    (0, 0, 0),
    (7, 7, 7),
    (100, 100, 100),
    (DOMAIN_MAX, 2**32 + 1, 2**32 + 1),
])
def test_gcd(a, b, expected):
    assert arith.gcd(a, b) == expected
    assert arith.gcd(b, a) == expected


def test_gcd_against_math():
    for a in range(0, 200, 7):
        for b in range(0, 300, 11):
            assert arith.gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("value", out_of_domain)
def test_gcd_validates(value):
    with pytest.raises(ValueError):
        arith.gcd(value, 1)


@pytest.mark.parametrize("a,b,expected", [
    (14, 15, True),
    (17, 31, True),
    (1, 100, True),
    (13, 27, True),
    (14, 21, False),
    (100, 10, False),
    (12, 18, False),
    (0, 5, False),
    (0, 1, True),
    (0, 0, False),
])
def test_are_coprime(a, b, expected):
    assert arith.are_coprime(a, b) == expected


@pytest.mark.parametrize("a,b,expected", [
    (0, DOMAIN_MAX, 0),
    (2**32 - 1, 2**32 + 1, DOMAIN_MAX),
    (2**32, 2**32, None),
    (DOMAIN_MAX, 2, None),
    (61, 53, 3233),
])
def test_checked_mul(a, b, expected):
    assert arith.checked_mul(a, b) == expected


@pytest.mark.parametrize("a,b", [(240, 46), (46, 240), (17, 3120), (0, 9), (9, 0), (DOMAIN_MAX, 65537)])
def test_eea_bezout(a, b):
    g, s, t = arith.eea(a, b)
    assert g == math.gcd(a, b)
    assert a * s + b * t == g


@pytest.mark.parametrize("e,phi,expected", [
    (7, 40, 23),
    (3, 10, 7),
    (17, 3120, 2753),
    (47, 40, 23),
    (1, 2, 1),
    (2, 4, None),
    (0, 7, None),
    (5, 1, None),
    (5, 0, None),
])
def test_mod_inverse(e, phi, expected):
    assert arith.mod_inverse(e, phi) == expected
    assert arith.mod_inverse_search(e, phi) == expected


def test_mod_inverse_matches_search():
    for phi in range(60):
        for e in range(60):
            assert arith.mod_inverse(e, phi) == arith.mod_inverse_search(e, phi)


def test_mod_inverse_full_width():
    phi = (2**32 - 6) * (2**32 - 18)
    d = arith.mod_inverse(65537, phi)
    assert d is not None
    assert 1 <= d < phi
    assert (65537 * d) % phi == 1


@pytest.mark.parametrize("value", out_of_domain)
def test_mod_inverse_validates(value):
    with pytest.raises(ValueError):
        arith.mod_inverse(value, 40)
    with pytest.raises(ValueError):
        arith.mod_inverse_search(7, value)
