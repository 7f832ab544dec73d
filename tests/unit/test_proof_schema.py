"""
Module 01 - Proof Document Unit Tests
Tests for arraymerkle/schemas/proof.py
"""
import json

import pytest
from pydantic import ValidationError

from arraymerkle.schemas.proof import InclusionProof, ProofStep
from arraymerkle.schemas.versioning import SCHEMA_VERSION
from fixtures import PATTERN_DEPTH5_PROOF_3, PATTERN_DEPTH5_ROOT


class TestProofStep:
    """Tests for ProofStep normalization and validation."""

    def test_accepts_bytes(self):
        step = ProofStep(sibling=b"\x22" * 32, is_left=False)
        assert step.sibling == "0x" + "22" * 32
        assert step.to_pair() == (b"\x22" * 32, False)

    def test_normalizes_hex(self):
        step = ProofStep(sibling="AB" * 32, is_left=True)
        assert step.sibling == "0x" + "ab" * 32

    def test_rejects_short_digest(self):
        with pytest.raises(ValidationError):
            ProofStep(sibling="0x" + "ab" * 31, is_left=True)

    def test_frozen(self):
        step = ProofStep(sibling=b"\x00" * 32, is_left=True)
        with pytest.raises(ValidationError):
            step.is_left = False


class TestInclusionProof:
    """Tests for InclusionProof documents."""

    def _make(self, **overrides) -> InclusionProof:
        kwargs = dict(
            depth=5,
            offset=3,
            leaf=b"\x33" * 32,
            root=PATTERN_DEPTH5_ROOT,
        )
        kwargs.update(overrides)
        return InclusionProof.from_pairs(PATTERN_DEPTH5_PROOF_3, **kwargs)

    def test_from_pairs_round_trip(self):
        doc = self._make()
        assert doc.schema_version == SCHEMA_VERSION
        assert doc.to_pairs() == PATTERN_DEPTH5_PROOF_3
        assert doc.leaf_bytes == b"\x33" * 32
        assert doc.root_bytes == PATTERN_DEPTH5_ROOT

    def test_json_document_shape(self):
        data = json.loads(self._make().model_dump_json())

        assert data["depth"] == 5
        assert data["hash_algorithm"] == "sha3_256"
        assert data["root"] == "0x57054e43fa56333fd51343b09460d48b9204999c376624f52480c5593b91eff4"
        assert data["steps"][0] == {"sibling": "0x" + "22" * 32, "is_left": False}
        assert [s["is_left"] for s in data["steps"]] == [False, False, True, True]

    def test_parse_json(self):
        doc = self._make()
        parsed = InclusionProof.model_validate_json(doc.model_dump_json())
        assert parsed == doc

    def test_optional_leaf_and_root(self):
        doc = self._make(leaf=None, root=None)
        assert doc.leaf_bytes is None
        assert doc.root_bytes is None

    def test_rejects_unknown_schema_version(self):
        with pytest.raises(ValidationError, match="Unsupported schema version"):
            InclusionProof(schema_version="v9", depth=2, offset=0)

    def test_rejects_depth_zero(self):
        with pytest.raises(ValidationError):
            InclusionProof(depth=0, offset=0)

    def test_rejects_negative_offset(self):
        with pytest.raises(ValidationError):
            InclusionProof(depth=2, offset=-1)

    def test_length_not_validated(self):
        """The document carries whatever steps it was given; checks happen at verify time."""
        doc = InclusionProof.from_pairs(PATTERN_DEPTH5_PROOF_3[:2], depth=5, offset=3)
        assert len(doc.steps) == 2
