"""
Module 02 - Merkle Tree Engine
Fixed-depth, array-backed binary Merkle tree with inclusion proofs.

This module provides:
- MerkleTree: the engine (construct, set, create_proof, verify_proof)
- verify_proof: recompute a root from a leaf and proof, no tree needed
- verify_inclusion / check_proof_length: acceptance helpers
- build_merkle_root / uniform_root: reference root computations
- Breadth-first index arithmetic (layout)

Usage:
    from arraymerkle.merkle import MerkleTree, verify_proof
    from arraymerkle.crypto import repeat_byte

    tree = MerkleTree(5, bytes(32))
    for i in range(tree.num_leaves()):
        tree.set(i, repeat_byte(i * 0x11))

    proof = tree.create_proof(5)
    assert verify_proof(repeat_byte(5 * 0x11), proof) == tree.root_hash()
"""
from .layout import (
    nodes_in_tree,
    index,
    parent_index,
    first_child_index,
    second_child_index,
    sibling_offset,
    log2_floor,
    layer_offset,
)

from .merkle_proofs import (
    Proof,
    fold_proof,
    verify_proof,
    check_proof_length,
    verify_inclusion,
    build_merkle_root,
    uniform_root,
    MerkleProver,
    MerkleVerifier,
)

from .merkle_tree import (
    MAX_DEPTH,
    MerkleTree,
)


__all__ = [
    # Engine
    "MerkleTree",
    "MAX_DEPTH",
    "Proof",
    # Verification
    "fold_proof",
    "verify_proof",
    "check_proof_length",
    "verify_inclusion",
    "build_merkle_root",
    "uniform_root",
    # Convenience classes
    "MerkleProver",
    "MerkleVerifier",
    # Layout
    "nodes_in_tree",
    "index",
    "parent_index",
    "first_child_index",
    "second_child_index",
    "sibling_offset",
    "log2_floor",
    "layer_offset",
]
