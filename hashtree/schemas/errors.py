"""
Schemas
File: errors.py

Purpose: Error taxonomy for the layers around the hash tree core.
Defines both Pydantic models for structured error reporting
and Python exceptions for control flow.

The tree builder, proof generation and proof verification never raise these:
lookups return None and verification returns a bool. They are used where
untrusted input is parsed (algorithm names, proof documents, config files).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    UNSUPPORTED_HASH_ALGORITHM = "UNSUPPORTED_HASH_ALGORITHM"
    PROOF_FORMAT_INVALID = "PROOF_FORMAT_INVALID"
    UNSUPPORTED_VERSION = "UNSUPPORTED_VERSION"
    CONFIG_INVALID = "CONFIG_INVALID"

    # Reported by the CLI, never raised by the core
    RECORD_NOT_FOUND = "RECORD_NOT_FOUND"
    ROOT_MISMATCH = "ROOT_MISMATCH"
    LEAF_MISMATCH = "LEAF_MISMATCH"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class HashTreeError(BaseModel):
    """
    Base error model for structured error reporting.

    Used by the CLI to emit machine-readable failures with ``--json``.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.PROOF_FORMAT_INVALID],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class HashTreeException(Exception):
    """
    Base exception for hashtree errors.

    Carries structured error information and can be converted
    to a HashTreeError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "HASHTREE_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> HashTreeError:
        """Convert this exception to a HashTreeError model."""
        return HashTreeError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class UnsupportedHashAlgorithmException(HashTreeException):
    """Exception raised when a hash algorithm name is not registered."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.UNSUPPORTED_HASH_ALGORITHM,
            details=details,
        )


class ProofFormatException(HashTreeException):
    """Exception raised when a proof document cannot be decoded."""

    def __init__(
        self,
        message: str,
        field_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field_path:
            full_details["field_path"] = field_path
        super().__init__(
            message=message,
            code=ErrorCodes.PROOF_FORMAT_INVALID,
            details=full_details,
        )


class ConfigException(HashTreeException):
    """Exception raised when a configuration file or value is invalid."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if path:
            full_details["path"] = path
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIG_INVALID,
            details=full_details,
        )


__all__ = [
    "ErrorCodes",
    "HashTreeError",
    "HashTreeException",
    "UnsupportedHashAlgorithmException",
    "ProofFormatException",
    "ConfigException",
]
