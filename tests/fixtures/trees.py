"""
Tree fixtures and reference vectors.

Reference vectors (SHA3-256):
- depth 5, zero initial leaves, leaf i set to (i * 0x11) repeated
- depth 20, every leaf 0xab repeated
"""

from arraymerkle.crypto.hashing import DEFAULT_HASH_ALGORITHM, repeat_byte
from arraymerkle.merkle import MerkleTree


PATTERN_DEPTH5_ROOT = bytes.fromhex(
    "57054e43fa56333fd51343b09460d48b9204999c376624f52480c5593b91eff4"
)

PATTERN_DEPTH5_PROOF_3 = [
    (bytes.fromhex("2222222222222222222222222222222222222222222222222222222222222222"), False),
    (bytes.fromhex("35e794f1b42c224a8e390ce37e141a8d74aa53e151c1d1b9a03f88c65adb9e10"), False),
    (bytes.fromhex("26fca7737f48fa702664c8b468e34c858e62f51762386bd0bddaa7050e0dd7c0"), True),
    (bytes.fromhex("e7e11a86a0c1d8d8624b1629cb58e39bb4d0364cb8cb33c4029662ab30336858"), True),
]

UNIFORM_AB_DEPTH20_ROOT = bytes.fromhex(
    "d4490f4d374ca8a44685fe9471c5b8dbe58cdffd13d30d9aba15dd29efb92930"
)


def make_pattern_tree(
    depth: int = 5,
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM,
) -> MerkleTree:
    """
    Create a tree with zero initial leaves, then set leaf i to (i * 0x11) repeated.

    With the defaults the root is PATTERN_DEPTH5_ROOT.
    """
    tree = MerkleTree(depth, bytes(32), hash_algorithm=hash_algorithm)
    for i in range(tree.num_leaves()):
        tree.set(i, repeat_byte(i * 0x11))
    return tree


def make_leaf(seed: int) -> bytes:
    """A distinct, arbitrary-looking 32-byte leaf derived from a seed."""
    return bytes((seed * 37 + i * 11) & 0xFF for i in range(32))
