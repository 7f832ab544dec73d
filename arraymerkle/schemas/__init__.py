"""
Module 01 - Schemas & Errors
File: __init__.py

Purpose: Export the public API for the schemas module.
"""

# Version constants
from .versioning import (
    SCHEMA_VERSION,
    SUPPORTED_SCHEMA_VERSIONS,
    SchemaVersion,
    UnsupportedSchemaVersionError,
    assert_supported_schema_version,
    is_compatible_schema_version,
)

# Error models and exceptions
from .errors import (
    ConfigurationException,
    DigestFormatException,
    ErrorCodes,
    LeafIndexException,
    MerkleError,
    MerkleTreeException,
    ProofLengthException,
)

# Proof documents
from .proof import (
    InclusionProof,
    ProofStep,
)

__all__ = [
    # Versioning
    "SCHEMA_VERSION",
    "SUPPORTED_SCHEMA_VERSIONS",
    "SchemaVersion",
    "UnsupportedSchemaVersionError",
    "assert_supported_schema_version",
    "is_compatible_schema_version",
    # Errors
    "ConfigurationException",
    "DigestFormatException",
    "ErrorCodes",
    "LeafIndexException",
    "MerkleError",
    "MerkleTreeException",
    "ProofLengthException",
    # Proofs
    "InclusionProof",
    "ProofStep",
]
