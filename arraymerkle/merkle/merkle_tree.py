"""
Module 02 - Merkle Tree Engine
Fixed-depth, array-backed binary Merkle tree.

This module provides:
- Construction from a single initial leaf value in O(depth) hashes
- Leaf update with incremental recomputation of the leaf-to-root path
- Inclusion proof generation (sibling digests + left/right flags)
- Inclusion proof verification against the tree's hash algorithm

Commitment Rules (Hard Contracts):
1. Every node is a 32-byte digest.
2. Parent hashing: parent = H(left || right), left child first.
3. Node (layer, offset) lives at flat index (2**layer - 1) + offset.
4. Depth is fixed at construction; the node list never grows or shrinks.

Proof Format:
- A list of (sibling_digest, is_left) pairs ordered leaf-to-root.
- is_left describes the node on the proven path, not the sibling.
- A tree of depth d yields exactly d - 1 pairs; the root has no sibling.
"""
from __future__ import annotations

import logging
import operator
from typing import Sequence

from arraymerkle.crypto.hashing import (
    DEFAULT_HASH_ALGORITHM,
    ensure_digest,
    get_pair_hasher,
)
from arraymerkle.merkle.layout import (
    first_child_index,
    index,
    nodes_in_tree,
    sibling_offset,
)
from arraymerkle.merkle.merkle_proofs import Proof, fold_proof
from arraymerkle.schemas.errors import ConfigurationException, LeafIndexException


logger = logging.getLogger(__name__)


# Upper bound on depth; a depth-33 tree would need 2**33 - 1 list slots.
MAX_DEPTH: int = 32


class MerkleTree:
    """
    A binary Merkle tree of fixed depth stored in breadth-first order.

    Example:
        >>> tree = MerkleTree(3, bytes(32))
        >>> tree.num_leaves()
        4
        >>> tree.set(1, b"\\x11" * 32)
        >>> proof = tree.create_proof(1)
        >>> tree.verify_proof(b"\\x11" * 32, proof) == tree.root_hash()
        True
    """

    __slots__ = ("_depth", "_hash_algorithm", "_hash_pair", "_nodes")

    def __init__(
        self,
        depth: int,
        initial_value: bytes,
        hash_algorithm: str = DEFAULT_HASH_ALGORITHM,
        max_depth: int = MAX_DEPTH,
    ) -> None:
        """
        Create a tree whose every leaf holds `initial_value`.

        All leaves start identical, so every node within a layer is
        identical too: one hash per layer is computed and copied across
        the whole layer.

        Args:
            depth: Number of layers including root and leaves (>= 1)
            initial_value: 32-byte digest stored in every leaf
            hash_algorithm: Name of the pair hash (see SUPPORTED_HASH_ALGORITHMS)
            max_depth: Largest depth accepted

        Raises:
            ConfigurationException: If depth is not an int in [1, max_depth]
                                    or the hash algorithm is unknown
            DigestFormatException: If initial_value is not 32 bytes
        """
        if isinstance(depth, bool) or not isinstance(depth, int):
            raise ConfigurationException(
                f"Merkle tree depth must be an integer, got {type(depth).__name__}",
                parameter="depth",
            )
        if depth < 1:
            raise ConfigurationException(
                f"Merkle tree depth must be at least 1, got {depth}",
                parameter="depth",
                details={"depth": depth},
            )
        if depth > max_depth:
            raise ConfigurationException(
                f"Merkle tree depth must be at most {max_depth}, got {depth}",
                parameter="depth",
                details={"depth": depth, "max_depth": max_depth},
            )

        initial_value = ensure_digest(initial_value)
        hash_pair = get_pair_hasher(hash_algorithm)

        nodes = [initial_value] * nodes_in_tree(depth)
        for layer in range(depth - 2, -1, -1):
            child = nodes[first_child_index(layer, 0)]
            digest = hash_pair(child, child)
            start = index(layer, 0)
            width = 1 << layer
            nodes[start:start + width] = [digest] * width

        self._depth = depth
        self._hash_algorithm = hash_algorithm
        self._hash_pair = hash_pair
        self._nodes = nodes

        logger.debug(
            f"Built Merkle tree depth={depth} algorithm={hash_algorithm} "
            f"nodes={len(nodes)} root={nodes[0].hex()}"
        )

    @classmethod
    def from_config(cls, depth: int, initial_value: bytes, config=None) -> "MerkleTree":
        """Create a tree using hash algorithm and depth cap from runtime config."""
        if config is None:
            from arraymerkle.config.runtime import get_default_config
            config = get_default_config()
        return cls(
            depth,
            initial_value,
            hash_algorithm=config.tree.hash_algorithm,
            max_depth=config.tree.max_depth,
        )

    # -------------------------------------------------------------------------
    # Read accessors
    # -------------------------------------------------------------------------

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def hash_algorithm(self) -> str:
        return self._hash_algorithm

    @property
    def root(self) -> bytes:
        return self._nodes[0]

    def root_hash(self) -> bytes:
        """Return the root digest."""
        return self._nodes[0]

    def num_leaves(self) -> int:
        """Return the number of leaves: 2**(depth - 1)."""
        return 1 << (self._depth - 1)

    def get(self, offset: int) -> bytes:
        """Return the current value of the leaf at `offset`."""
        offset = self._check_offset(offset)
        return self._nodes[index(self._depth - 1, offset)]

    def leaves(self) -> list[bytes]:
        """Return a copy of the leaf layer, left to right."""
        start = index(self._depth - 1, 0)
        return self._nodes[start:]

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(depth={self._depth}, "
            f"hash_algorithm={self._hash_algorithm!r}, root=0x{self._nodes[0].hex()})"
        )

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def set(self, offset: int, value: bytes) -> None:
        """
        Overwrite the leaf at `offset` and recompute its ancestors.

        Only nodes on the path from the leaf to the root can become stale,
        so exactly depth - 1 hashes are computed. Both arguments are
        validated before anything is written.

        Raises:
            LeafIndexException: If offset is outside [0, num_leaves)
            DigestFormatException: If value is not 32 bytes
        """
        offset = self._check_offset(offset)
        value = ensure_digest(value)

        nodes = self._nodes
        hash_pair = self._hash_pair

        node = index(self._depth - 1, offset)
        nodes[node] = value
        while node > 0:
            # parent of flat index i is (i - 1) // 2; its children are 2p+1, 2p+2
            node = (node - 1) >> 1
            nodes[node] = hash_pair(nodes[2 * node + 1], nodes[2 * node + 2])

    # -------------------------------------------------------------------------
    # Proofs
    # -------------------------------------------------------------------------

    def create_proof(self, offset: int) -> Proof:
        """
        Create an inclusion proof for the leaf at `offset`.

        Returns:
            List of (sibling_digest, is_left) pairs ordered leaf-to-root,
            where is_left is True when the path node (not the sibling)
            is the left child at that layer. Length is depth - 1.

        Raises:
            LeafIndexException: If offset is outside [0, num_leaves)
        """
        current = self._check_offset(offset)
        proof: Proof = []
        layer = self._depth - 1
        while layer > 0:
            sibling = self._nodes[index(layer, sibling_offset(current))]
            proof.append((sibling, current % 2 == 0))
            current //= 2
            layer -= 1
        return proof

    def verify_proof(self, value: bytes, proof: Sequence[tuple[bytes, bool]]) -> bytes:
        """
        Recompute the root implied by `value` and `proof`.

        The result is not compared with this tree's root; callers decide
        acceptance against whichever root they trust.
        """
        return fold_proof(value, proof, self._hash_pair)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _check_offset(self, offset: int) -> int:
        offset = operator.index(offset)
        num_leaves = self.num_leaves()
        if offset < 0 or offset >= num_leaves:
            raise LeafIndexException(offset, num_leaves)
        return offset


__all__ = [
    "MAX_DEPTH",
    "MerkleTree",
]
