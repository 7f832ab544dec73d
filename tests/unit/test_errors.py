"""
Module 01 - Error Taxonomy Unit Tests
Tests for arraymerkle/schemas/errors.py
"""
import pytest
from pydantic import ValidationError

from arraymerkle.schemas.errors import (
    ConfigurationException,
    DigestFormatException,
    ErrorCodes,
    LeafIndexException,
    MerkleError,
    MerkleTreeException,
    ProofLengthException,
)


class TestExceptionHierarchy:
    """Each exception is catchable as both the base and the matching builtin."""

    def test_configuration_exception(self):
        exc = ConfigurationException("bad depth", parameter="depth")
        assert isinstance(exc, MerkleTreeException)
        assert isinstance(exc, ValueError)
        assert exc.code == ErrorCodes.CONFIGURATION_ERROR
        assert exc.details == {"parameter": "depth"}

    def test_leaf_index_exception(self):
        exc = LeafIndexException(offset=9, num_leaves=8)
        assert isinstance(exc, MerkleTreeException)
        assert isinstance(exc, IndexError)
        assert exc.code == ErrorCodes.LEAF_INDEX_OUT_OF_RANGE
        assert str(exc) == "Leaf offset 9 out of range for 8 leaves"

    def test_digest_format_exception(self):
        exc = DigestFormatException("too short")
        assert isinstance(exc, ValueError)
        assert exc.code == ErrorCodes.DIGEST_FORMAT_ERROR
        assert exc.details == {}

    def test_proof_length_exception(self):
        exc = ProofLengthException(actual=3, expected=4)
        assert not isinstance(exc, ValueError)
        assert exc.code == ErrorCodes.PROOF_LENGTH_MISMATCH
        assert "3 steps, expected 4" in exc.message

    def test_none_retryable(self):
        for exc in [
            ConfigurationException("x"),
            LeafIndexException(1, 1),
            DigestFormatException("x"),
            ProofLengthException(1, 2),
        ]:
            assert exc.retryable is False

    def test_repr(self):
        exc = LeafIndexException(offset=2, num_leaves=2)
        assert repr(exc).startswith("LeafIndexException(code='LEAF_INDEX_OUT_OF_RANGE'")


class TestErrorModel:
    """Conversion between exceptions and the pydantic MerkleError model."""

    def test_to_error_model(self):
        model = LeafIndexException(offset=5, num_leaves=4).to_error_model()
        assert isinstance(model, MerkleError)
        assert model.code == ErrorCodes.LEAF_INDEX_OUT_OF_RANGE
        assert model.details == {"offset": 5, "num_leaves": 4}

    def test_round_trip_to_exception(self):
        model = MerkleError(code=ErrorCodes.ROOT_MISMATCH, message="roots differ")
        exc = model.to_exception()

        assert isinstance(exc, MerkleTreeException)
        assert exc.code == ErrorCodes.ROOT_MISMATCH
        assert exc.message == "roots differ"

    def test_model_forbids_extra_fields(self):
        with pytest.raises(ValidationError):
            MerkleError(code="X", message="y", unexpected=True)

    def test_model_json(self):
        model = ConfigurationException("bad", parameter="depth").to_error_model()
        payload = model.model_dump()
        assert payload == {
            "code": "CONFIGURATION_ERROR",
            "message": "bad",
            "details": {"parameter": "depth"},
            "retryable": False,
        }
