"""Elementary RSA over a 64-bit integer domain, in an Academic Sense.

Provides random prime generation, textbook RSA key pair derivation and raw (unpadded) signing, decoding and
verification of single integer messages. Furthermore, provides the modular arithmetic it is built upon.

Typical usage example:

    p = generate_random_prime(1844674407370955)
    kp = KeyPair.generate(10000)
    s = kp.priv.sign(42)
    kp.pub.verify(42, s)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsalite.arith import are_coprime
from rsalite.arith import gcd
from rsalite.arith import mod_inverse
from rsalite.arith import mod_pow
from rsalite.keygen import generate_key_pair
from rsalite.keygen import generate_random_prime
from rsalite.keygen import is_probably_prime
from rsalite.rsa import decode
from rsalite.rsa import KeyPair
from rsalite.rsa import RSAPrivKey
from rsalite.rsa import RSAPubKey
from rsalite.rsa import sign
from rsalite.rsa import verify

__version__ = "0.1.0"
__all__ = [
    "KeyPair",
    "RSAPrivKey",
    "RSAPubKey",
    "mod_pow",
    "gcd",
    "are_coprime",
    "mod_inverse",
    "is_probably_prime",
    "generate_random_prime",
    "generate_key_pair",
    "sign",
    "decode",
    "verify",
]
