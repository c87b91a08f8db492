"""Hashing utilities using pycryptodome."""

from Crypto.Hash import keccak


def keccak256(data: bytes) -> bytes:
    """Compute Keccak-256 hash (NOT SHA3-256)."""
    k = keccak.new(digest_bits=256)
    k.update(data)
    return k.digest()
