"""Provides textbook RSA signing, decoding and verification over single integer messages.

No padding or hashing is applied, the message is the raw integer payload. Keys are plain immutable (modulus, exponent)
tuples, so any `(n, d)` or `(n, e)` pair obtained elsewhere can be passed in directly.

Typical usage example:

    kp = KeyPair.generate(10000)
    s = kp.priv.sign(42)
    kp.pub.verify(42, s)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
from typing import NamedTuple
import warnings

from rsalite import keygen
from rsalite.arith import check_domain
from rsalite.arith import mod_pow

logger = logging.getLogger(__name__)


class RSAKey(NamedTuple):
    """The overall RSA key implementation.

    Acts as the template for both halves of a pair, as each consists solely of a modulus and an exponent.

    Attributes:
        mod: The modulus of the keypair.
        expo: The exponent of the key, whether private or public.
    """
    mod: int
    expo: int

    def c_rsa(self, value: int) -> int:
        """Performs core RSA operation. (Sign/Decode)

        Args:
            value: The integer to exponentiate.

        Returns:
            `value**expo % mod`

        Raises:
            ValueError: If the key or value are out of the domain or the modulus is 0.
        """
        check_domain("value", value)
        if self.mod == 0:
            raise ValueError("Modulus must be >= 1")
        return mod_pow(value, self.expo, self.mod)


class RSAPubKey(RSAKey):
    """Public half of a key pair, (n, e)."""
    __slots__ = ()

    def decode(self, signature: int) -> int:
        """Recover the message a signature was made over."""
        return self.c_rsa(signature)

    def verify(self, message: int, signature: int) -> bool:
        """Verify the signature against the message.

        Messages are compared modulo the key modulus, just as they were signed.

        Args:
            message: The message the signature claims to cover.
            signature: The signature to check.

        Returns:
            True if the signature decodes to the message, False otherwise.
        """
        check_domain("message", message)
        return self.decode(signature) == message % self.mod


class RSAPrivKey(RSAKey):
    """Private half of a key pair, (n, d)."""
    __slots__ = ()

    def sign(self, message: int) -> int:
        """Signs the message using the private key.

        Args:
            message: The raw integer payload. Should be below the modulus, larger values alias.

        Returns:
            The signature.
        """
        if 0 < self.mod <= message:
            warnings.warn(f"Message {message} is not below modulus {self.mod} and will alias.", RuntimeWarning)
        return self.c_rsa(message)


class KeyPair(NamedTuple):
    """A generated (public, private) pair sharing a modulus."""
    pub: RSAPubKey
    priv: RSAPrivKey

    @classmethod
    def generate(cls, bound: int, rng: keygen.RandomSource | None = None) -> "KeyPair | None":
        """Generates an RSA key pair from primes no greater than `bound`.

        Args:
            bound: Inclusive upper bound for both primes.
            rng: Source of randomness. Defaults to the system CSPRNG.

        Returns:
            A new key pair, or None if generation came up empty.
        """
        res = keygen.generate_key_pair(bound, rng)
        if res is None:
            return None
        (n, e), (_, d) = res
        return cls(RSAPubKey(n, e), RSAPrivKey(n, d))


def sign(message: int, priv: tuple[int, int]) -> int:
    """Sign `message` with the private key `(n, d)`."""
    return RSAPrivKey(*priv).sign(message)


def decode(signature: int, pub: tuple[int, int]) -> int:
    """Decode `signature` with the public key `(n, e)`."""
    return RSAPubKey(*pub).decode(signature)


def verify(message: int, signature: int, pub: tuple[int, int]) -> bool:
    """Check that `signature` decodes to `message` under the public key `(n, e)`."""
    res = RSAPubKey(*pub).verify(message, signature)
    if not res:
        logger.debug("Signature %d does not match message %d", signature, message)
    return res
