"""
Module 02 - Hashing Utilities
Hash primitives and digest helpers for the Merkle tree engine.

This module provides:
- SHA3-256 (default), SHA-256 and BLAKE2s-256 over raw bytes
- Pair hashing H(left || right) for parent nodes
- Hex encoding/decoding with 0x prefix
- Digest validation (exactly 32 bytes)

Every supported algorithm yields a 32-byte digest, so nodes produced by
any of them fit the same fixed-size arena.
"""
from __future__ import annotations

import hashlib
from typing import Callable

from arraymerkle.schemas.errors import ConfigurationException, DigestFormatException


DIGEST_SIZE: int = 32

DEFAULT_HASH_ALGORITHM: str = "sha3_256"

PairHasher = Callable[[bytes, bytes], bytes]


def sha3_256(data: bytes) -> bytes:
    """
    Compute SHA3-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA3-256 digest

    Example:
        >>> sha3_256(b"").hex()[:16]
        'a7ffc6f8bf1ed766'
    """
    return hashlib.sha3_256(data).digest()


def sha256(data: bytes) -> bytes:
    """Compute SHA-256 hash of raw bytes."""
    return hashlib.sha256(data).digest()


def blake2s(data: bytes) -> bytes:
    """Compute BLAKE2s hash of raw bytes (32-byte digest)."""
    return hashlib.blake2s(data, digest_size=DIGEST_SIZE).digest()


_HASH_CONSTRUCTORS = {
    "sha3_256": hashlib.sha3_256,
    "sha256": hashlib.sha256,
    "blake2s": hashlib.blake2s,
}

SUPPORTED_HASH_ALGORITHMS: tuple[str, ...] = tuple(_HASH_CONSTRUCTORS)


def get_pair_hasher(algorithm: str = DEFAULT_HASH_ALGORITHM) -> PairHasher:
    """
    Return a function computing H(left || right) for the given algorithm.

    The returned function feeds both halves to one hasher object instead
    of building the concatenated bytes first.

    Args:
        algorithm: One of SUPPORTED_HASH_ALGORITHMS

    Returns:
        Callable taking (left, right) and returning a 32-byte digest

    Raises:
        ConfigurationException: If the algorithm is not supported
    """
    try:
        constructor = _HASH_CONSTRUCTORS[algorithm]
    except KeyError:
        raise ConfigurationException(
            f"Unknown hash algorithm: {algorithm!r}. "
            f"Supported: {', '.join(SUPPORTED_HASH_ALGORITHMS)}",
            parameter="hash_algorithm",
        ) from None

    def hash_pair(left: bytes, right: bytes) -> bytes:
        hasher = constructor()
        hasher.update(left)
        hasher.update(right)
        return hasher.digest()

    hash_pair.__name__ = f"hash_pair_{algorithm}"
    return hash_pair


def hash_concat(left: bytes, right: bytes, algorithm: str = DEFAULT_HASH_ALGORITHM) -> bytes:
    """
    Hash the concatenation of two byte sequences.

    This is the parent rule of the tree: parent = H(left || right),
    left child's bytes first.

    Args:
        left: Left child digest
        right: Right child digest
        algorithm: Hash algorithm name

    Returns:
        32-byte digest of the concatenation
    """
    return get_pair_hasher(algorithm)(left, right)


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert hexadecimal string to bytes.

    The 0x prefix is optional so reference vectors can be pasted as-is.

    Args:
        hex_string: Hex string, with or without 0x prefix

    Returns:
        Decoded bytes

    Raises:
        DigestFormatException: If the string has odd length or
                               contains invalid hex characters
    """
    hex_content = hex_string[2:] if hex_string[:2].lower() == "0x" else hex_string

    if len(hex_content) % 2 != 0:
        raise DigestFormatException(
            f"Hex string must have even length, got length {len(hex_content)}",
            details={"value": hex_string[:20]},
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise DigestFormatException(
            f"Invalid hex characters in string: {e}",
            details={"value": hex_string[:20]},
        ) from e


def ensure_digest(value: bytes | bytearray | memoryview) -> bytes:
    """
    Validate that a value is a 32-byte digest and return it as bytes.

    Raises:
        DigestFormatException: If the value is not bytes-like or not 32 bytes
    """
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise DigestFormatException(
            f"Digest must be bytes, got {type(value).__name__}",
        )
    digest = bytes(value)
    if len(digest) != DIGEST_SIZE:
        raise DigestFormatException(
            f"Digest must be {DIGEST_SIZE} bytes, got {len(digest)}",
            details={"length": len(digest)},
        )
    return digest


def digest_from_hex(hex_string: str) -> bytes:
    """Decode a hex string and check that it is exactly one digest."""
    return ensure_digest(from_hex(hex_string))


def repeat_byte(value: int) -> bytes:
    """
    Build a digest made of one byte value repeated 32 times.

    Example:
        >>> repeat_byte(0xab).hex()[:8]
        'abababab'
    """
    return bytes([value & 0xFF]) * DIGEST_SIZE


__all__ = [
    "DIGEST_SIZE",
    "DEFAULT_HASH_ALGORITHM",
    "SUPPORTED_HASH_ALGORITHMS",
    "PairHasher",
    "sha3_256",
    "sha256",
    "blake2s",
    "get_pair_hasher",
    "hash_concat",
    "to_hex",
    "from_hex",
    "ensure_digest",
    "digest_from_hex",
    "repeat_byte",
]
