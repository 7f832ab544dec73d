"""
arraymerkle - fixed-depth, array-backed binary Merkle trees.

Usage:
    from arraymerkle import MerkleTree, verify_proof

    tree = MerkleTree(20, bytes.fromhex("ab" * 32))
    proof = tree.create_proof(0)
    assert verify_proof(tree.get(0), proof) == tree.root_hash()
"""

from arraymerkle.merkle import (
    MerkleTree,
    MerkleProver,
    MerkleVerifier,
    build_merkle_root,
    verify_inclusion,
    verify_proof,
)
from arraymerkle.schemas.errors import (
    ConfigurationException,
    DigestFormatException,
    LeafIndexException,
    MerkleTreeException,
    ProofLengthException,
)

__version__ = "0.1.0"

__all__ = [
    "MerkleTree",
    "MerkleProver",
    "MerkleVerifier",
    "build_merkle_root",
    "verify_inclusion",
    "verify_proof",
    "ConfigurationException",
    "DigestFormatException",
    "LeafIndexException",
    "MerkleTreeException",
    "ProofLengthException",
    "__version__",
]
