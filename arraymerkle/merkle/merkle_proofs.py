"""
Module 02 - Merkle Proofs
Tree-independent proof verification and reference root computation.

Verification needs only the candidate leaf, the proof and the hash
algorithm; no tree instance is involved. verify_proof() returns the
recomputed root instead of a boolean so that the caller can compare it
with whichever root it trusts.

Proof Length Policy:
- verify_proof() trusts the proof length. A proof of the wrong length
  simply recomputes a digest that matches no meaningful root.
- Strict checks are opt-in: check_proof_length(), verify_inclusion(depth=...)
  and MerkleVerifier(strict=True) raise ProofLengthException instead.
"""
from __future__ import annotations

import hmac
from typing import TYPE_CHECKING, Sequence

from arraymerkle.crypto.hashing import (
    DEFAULT_HASH_ALGORITHM,
    PairHasher,
    ensure_digest,
    get_pair_hasher,
)
from arraymerkle.schemas.errors import ConfigurationException, ProofLengthException

if TYPE_CHECKING:
    from arraymerkle.merkle.merkle_tree import MerkleTree
    from arraymerkle.schemas.proof import InclusionProof


Proof = list[tuple[bytes, bool]]


def fold_proof(
    value: bytes,
    proof: Sequence[tuple[bytes, bool]],
    hash_pair: PairHasher,
) -> bytes:
    """
    Fold a leaf value through a proof with an already-resolved pair hasher.

    For each (sibling, is_left) step:
    - is_left: the accumulator is the left child -> H(acc || sibling)
    - otherwise: the accumulator is the right child -> H(sibling || acc)
    """
    current = bytes(value)
    for sibling, is_left in proof:
        if is_left:
            current = hash_pair(current, sibling)
        else:
            current = hash_pair(sibling, current)
    return current


def verify_proof(
    value: bytes,
    proof: Sequence[tuple[bytes, bool]],
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM,
) -> bytes:
    """
    Recompute the root implied by a leaf value and its inclusion proof.

    Args:
        value: Candidate leaf value
        proof: (sibling, is_left) pairs ordered leaf-to-root
        hash_algorithm: Hash algorithm the tree was built with

    Returns:
        The recomputed root digest. An empty proof returns the value itself.
    """
    return fold_proof(value, proof, get_pair_hasher(hash_algorithm))


def check_proof_length(proof: Sequence[tuple[bytes, bool]], depth: int) -> None:
    """
    Check that a proof has exactly depth - 1 steps.

    Raises:
        ProofLengthException: On mismatch
    """
    expected = depth - 1
    if len(proof) != expected:
        raise ProofLengthException(actual=len(proof), expected=expected)


def verify_inclusion(
    value: bytes,
    proof: Sequence[tuple[bytes, bool]],
    root: bytes,
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM,
    depth: int | None = None,
) -> bool:
    """
    Decide whether `value` is included under a trusted `root`.

    Args:
        value: Candidate leaf value
        proof: (sibling, is_left) pairs ordered leaf-to-root
        root: Trusted root digest
        hash_algorithm: Hash algorithm the tree was built with
        depth: If given, the proof length is checked first

    Returns:
        True if the recomputed root equals `root`

    Raises:
        ProofLengthException: If depth is given and the proof does not fit it
    """
    if depth is not None:
        check_proof_length(proof, depth)
    computed = verify_proof(value, proof, hash_algorithm)
    return hmac.compare_digest(computed, bytes(root))


def build_merkle_root(
    leaves: Sequence[bytes],
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM,
) -> bytes:
    """
    Compute a root from scratch by hashing every layer.

    This is the O(num_leaves) reference computation; a tree kept up to
    date with MerkleTree.set() must always agree with it.

    Args:
        leaves: Leaf digests, left to right; count must be a power of two

    Returns:
        32-byte root digest

    Raises:
        ConfigurationException: If the leaf count is zero or not a power of two
    """
    count = len(leaves)
    if count == 0 or count & (count - 1):
        raise ConfigurationException(
            f"Leaf count must be a non-zero power of two, got {count}",
            parameter="leaves",
        )

    hash_pair = get_pair_hasher(hash_algorithm)
    current_level: list[bytes] = [ensure_digest(leaf) for leaf in leaves]
    while len(current_level) > 1:
        current_level = [
            hash_pair(current_level[i], current_level[i + 1])
            for i in range(0, len(current_level), 2)
        ]
    return current_level[0]


def uniform_root(
    depth: int,
    value: bytes,
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM,
) -> bytes:
    """
    Root of a tree of `depth` whose leaves all equal `value`.

    Equivalent to MerkleTree(depth, value).root_hash() without
    allocating the node list.
    """
    if depth < 1:
        raise ConfigurationException(
            f"Merkle tree depth must be at least 1, got {depth}",
            parameter="depth",
        )
    hash_pair = get_pair_hasher(hash_algorithm)
    current = ensure_digest(value)
    for _ in range(depth - 1):
        current = hash_pair(current, current)
    return current


class MerkleProver:
    """
    Convenience class for generating proofs and proof documents.

    Example:
        >>> tree = MerkleTree(5, bytes(32))
        >>> doc = MerkleProver.prove_document(tree, 3)
        >>> len(doc.steps)
        4
    """

    @staticmethod
    def prove(tree: "MerkleTree", offset: int) -> Proof:
        """Generate the (sibling, is_left) proof for a leaf."""
        return tree.create_proof(offset)

    @staticmethod
    def prove_document(
        tree: "MerkleTree",
        offset: int,
        include_leaf: bool = True,
        include_root: bool = True,
    ) -> "InclusionProof":
        """
        Generate a serializable InclusionProof for a leaf.

        Raises:
            LeafIndexException: If offset is out of range
        """
        from arraymerkle.schemas.proof import InclusionProof

        pairs = tree.create_proof(offset)
        return InclusionProof.from_pairs(
            pairs,
            depth=tree.depth,
            offset=offset,
            hash_algorithm=tree.hash_algorithm,
            leaf=tree.get(offset) if include_leaf else None,
            root=tree.root_hash() if include_root else None,
        )


class MerkleVerifier:
    """
    Verifies proofs against a trusted root with a fixed algorithm and policy.

    In strict mode a proof whose length does not match `depth` raises
    ProofLengthException; otherwise it is just another mismatch.
    """

    def __init__(
        self,
        hash_algorithm: str = DEFAULT_HASH_ALGORITHM,
        strict: bool = False,
        depth: int | None = None,
    ) -> None:
        if strict and depth is None:
            raise ConfigurationException(
                "Strict verification requires the tree depth",
                parameter="depth",
            )
        self.hash_algorithm = hash_algorithm
        self.strict = strict
        self.depth = depth
        self._hash_pair = get_pair_hasher(hash_algorithm)

    @classmethod
    def from_config(cls, depth: int | None = None, config=None) -> "MerkleVerifier":
        if config is None:
            from arraymerkle.config.runtime import get_default_config
            config = get_default_config()
        strict = config.tree.strict_proof_length and depth is not None
        return cls(
            hash_algorithm=config.tree.hash_algorithm,
            strict=strict,
            depth=depth,
        )

    def compute_root(self, value: bytes, proof: Sequence[tuple[bytes, bool]]) -> bytes:
        if self.strict:
            check_proof_length(proof, self.depth)
        return fold_proof(value, proof, self._hash_pair)

    def verify(
        self,
        value: bytes,
        proof: Sequence[tuple[bytes, bool]],
        root: bytes,
    ) -> bool:
        """Return True if `value` with `proof` recomputes `root`."""
        return hmac.compare_digest(self.compute_root(value, proof), bytes(root))

    def verify_document(
        self,
        document: "InclusionProof",
        value: bytes | None = None,
        root: bytes | None = None,
    ) -> bool:
        """
        Verify an InclusionProof document.

        Explicit `value` and `root` take precedence over the ones embedded
        in the document; a trusted root should always be passed explicitly.

        Raises:
            ConfigurationException: If the document's algorithm differs from
                                    this verifier's, or leaf/root are missing
        """
        if document.hash_algorithm != self.hash_algorithm:
            raise ConfigurationException(
                f"Proof uses {document.hash_algorithm!r}, "
                f"verifier uses {self.hash_algorithm!r}",
                parameter="hash_algorithm",
            )
        value = value if value is not None else document.leaf_bytes
        root = root if root is not None else document.root_bytes
        if value is None or root is None:
            raise ConfigurationException(
                "Both a leaf value and a root are required for verification",
                parameter="leaf" if value is None else "root",
            )
        return self.verify(value, document.to_pairs(), root)


__all__ = [
    "Proof",
    "fold_proof",
    "verify_proof",
    "check_proof_length",
    "verify_inclusion",
    "build_merkle_root",
    "uniform_root",
    "MerkleProver",
    "MerkleVerifier",
]
