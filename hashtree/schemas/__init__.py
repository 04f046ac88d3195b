"""
Schemas for structured errors and versioned wire documents.

The proof document lives in ``hashtree.schemas.proof``; it is not imported
here because it depends on ``hashtree.crypto``, which depends on this package.
"""

from .errors import (
    ErrorCodes,
    HashTreeError,
    HashTreeException,
    UnsupportedHashAlgorithmException,
    ProofFormatException,
    ConfigException,
)
from .versioning import (
    SCHEMA_VERSION,
    SUPPORTED_SCHEMA_VERSIONS,
    UnsupportedSchemaVersionError,
    assert_supported_schema_version,
    is_compatible_schema_version,
)

__all__ = [
    # Errors
    "ErrorCodes",
    "HashTreeError",
    "HashTreeException",
    "UnsupportedHashAlgorithmException",
    "ProofFormatException",
    "ConfigException",
    # Versioning
    "SCHEMA_VERSION",
    "SUPPORTED_SCHEMA_VERSIONS",
    "UnsupportedSchemaVersionError",
    "assert_supported_schema_version",
    "is_compatible_schema_version",
]
