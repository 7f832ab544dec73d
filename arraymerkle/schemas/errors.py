"""
Module 01 - Schemas & Errors
File: errors.py

Purpose: Error taxonomy for the Merkle tree engine.
Defines both Pydantic models for structured error reporting
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the engine and CLI."""

    # Construction & Configuration Errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    UNSUPPORTED_VERSION = "UNSUPPORTED_VERSION"

    # Addressing Errors
    LEAF_INDEX_OUT_OF_RANGE = "LEAF_INDEX_OUT_OF_RANGE"

    # Value Errors
    DIGEST_FORMAT_ERROR = "DIGEST_FORMAT_ERROR"

    # Merkle & Commitment Errors
    PROOF_LENGTH_MISMATCH = "PROOF_LENGTH_MISMATCH"
    ROOT_MISMATCH = "ROOT_MISMATCH"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class MerkleError(BaseModel):
    """
    Error model for structured error reporting.

    The CLI emits this model when asked for machine-readable output,
    so callers never have to parse exception strings.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.LEAF_INDEX_OUT_OF_RANGE],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "MerkleTreeException":
        """Convert this error model to a raisable exception."""
        return MerkleTreeException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class MerkleTreeException(Exception):
    """
    Base exception for all Merkle tree errors.

    Carries structured error information and can be converted
    to/from MerkleError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "MERKLE_TREE_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> MerkleError:
        """Convert this exception to a MerkleError model."""
        return MerkleError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class ConfigurationException(MerkleTreeException, ValueError):
    """Raised when a tree cannot be built with the requested parameters."""

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if parameter:
            full_details["parameter"] = parameter
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIGURATION_ERROR,
            details=full_details,
            retryable=False,
        )


class LeafIndexException(MerkleTreeException, IndexError):
    """Raised when a leaf offset falls outside [0, num_leaves)."""

    def __init__(
        self,
        offset: int,
        num_leaves: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["offset"] = offset
        full_details["num_leaves"] = num_leaves
        super().__init__(
            message=f"Leaf offset {offset} out of range for {num_leaves} leaves",
            code=ErrorCodes.LEAF_INDEX_OUT_OF_RANGE,
            details=full_details,
            retryable=False,
        )


class DigestFormatException(MerkleTreeException, ValueError):
    """Raised when a value is not a well-formed 32-byte digest."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.DIGEST_FORMAT_ERROR,
            details=details,
            retryable=False,
        )


class ProofLengthException(MerkleTreeException):
    """Raised by strict verification when a proof does not fit the tree depth."""

    def __init__(
        self,
        actual: int,
        expected: int,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["actual"] = actual
        full_details["expected"] = expected
        super().__init__(
            message=f"Proof has {actual} steps, expected {expected}",
            code=ErrorCodes.PROOF_LENGTH_MISMATCH,
            details=full_details,
            retryable=False,
        )


__all__ = [
    "ErrorCodes",
    "MerkleError",
    "MerkleTreeException",
    "ConfigurationException",
    "LeafIndexException",
    "DigestFormatException",
    "ProofLengthException",
]
