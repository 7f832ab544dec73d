"""
Core cryptographic utilities.

Module 02 provides the hash primitives the tree engine is built on.
"""
from .hashing import (
    DIGEST_SIZE,
    DEFAULT_HASH_ALGORITHM,
    SUPPORTED_HASH_ALGORITHMS,
    PairHasher,
    sha3_256,
    sha256,
    blake2s,
    get_pair_hasher,
    hash_concat,
    to_hex,
    from_hex,
    ensure_digest,
    digest_from_hex,
    repeat_byte,
)

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
