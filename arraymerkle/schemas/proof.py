"""
Module 01 - Schemas & Errors
File: proof.py

Purpose: Serializable inclusion-proof documents.

The engine itself works on plain lists of (sibling, is_left) pairs.
These models carry the same data as 0x-prefixed hex so a proof can be
handed to a verifier that never sees the tree.
"""

from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .versioning import SCHEMA_VERSION, assert_supported_schema_version


_HEX_DIGEST_PATTERN = r"^0x[0-9a-f]{64}$"


def _normalize_hex(value: str) -> str:
    value = value.strip().lower()
    if not value.startswith("0x"):
        value = "0x" + value
    return value


class ProofStep(BaseModel):
    """One layer of an inclusion proof, ordered leaf-to-root."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    sibling: str = Field(
        ...,
        description="Digest of the sibling node at this layer (0x-prefixed hex)",
        pattern=_HEX_DIGEST_PATTERN,
    )
    is_left: bool = Field(
        ...,
        description="Whether the node on the proven path is the left child at this layer",
    )

    @field_validator("sibling", mode="before")
    @classmethod
    def _normalize_sibling(cls, v):
        if isinstance(v, (bytes, bytearray)):
            return "0x" + bytes(v).hex()
        if isinstance(v, str):
            return _normalize_hex(v)
        return v

    def to_pair(self) -> tuple[bytes, bool]:
        return bytes.fromhex(self.sibling[2:]), self.is_left


class InclusionProof(BaseModel):
    """
    A self-describing inclusion proof for one leaf of a fixed-depth tree.

    `leaf` and `root` are optional: a prover may publish the path alone and
    let the verifier supply both the candidate leaf and the trusted root.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default=SCHEMA_VERSION)
    hash_algorithm: str = Field(default="sha3_256", min_length=1)
    depth: int = Field(..., ge=1, description="Depth of the tree the proof was taken from")
    offset: int = Field(..., ge=0, description="Leaf offset within the leaf layer")
    leaf: str | None = Field(default=None, pattern=_HEX_DIGEST_PATTERN)
    root: str | None = Field(default=None, pattern=_HEX_DIGEST_PATTERN)
    steps: list[ProofStep] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def _check_version(cls, v: str) -> str:
        assert_supported_schema_version(v)
        return v

    @field_validator("leaf", "root", mode="before")
    @classmethod
    def _normalize_digest(cls, v):
        if isinstance(v, (bytes, bytearray)):
            return "0x" + bytes(v).hex()
        if isinstance(v, str):
            return _normalize_hex(v)
        return v

    @classmethod
    def from_pairs(
        cls,
        pairs: Sequence[tuple[bytes, bool]],
        *,
        depth: int,
        offset: int,
        hash_algorithm: str = "sha3_256",
        leaf: bytes | None = None,
        root: bytes | None = None,
    ) -> "InclusionProof":
        """Build a document from the engine's (sibling, is_left) pairs."""
        return cls(
            hash_algorithm=hash_algorithm,
            depth=depth,
            offset=offset,
            leaf=leaf,
            root=root,
            steps=[ProofStep(sibling=sibling, is_left=is_left) for sibling, is_left in pairs],
        )

    def to_pairs(self) -> list[tuple[bytes, bool]]:
        """Return the proof in the form accepted by verify_proof()."""
        return [step.to_pair() for step in self.steps]

    @property
    def leaf_bytes(self) -> bytes | None:
        return bytes.fromhex(self.leaf[2:]) if self.leaf else None

    @property
    def root_bytes(self) -> bytes | None:
        return bytes.fromhex(self.root[2:]) if self.root else None


__all__ = [
    "ProofStep",
    "InclusionProof",
]
