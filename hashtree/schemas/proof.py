"""
Schemas
File: proof.py

Purpose: JSON wire form of an inclusion proof.

A ProofDocument carries everything MerkleProof.verify() needs: the hash
algorithm name, the leaf digest and the ordered sibling steps. Digests are
0x-prefixed lowercase hex. The root the proof was generated from is included
for reference; a verifier must still compare against a root it trusts.

Example document:
    {
      "schema_version": "v1",
      "hash_alg": "sha256",
      "leaf": "0x0f61...",
      "steps": [{"sibling": "0x1f93...", "side": "left"}, ...],
      "root": "0xedf8..."
    }
"""

from __future__ import annotations

import json
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from hashtree.crypto.hashing import from_hex, get_hash_algorithm, to_hex
from hashtree.merkle.merkle_proofs import MerkleProof, ProofStep, Side

from .errors import ProofFormatException
from .versioning import SCHEMA_VERSION, assert_supported_schema_version


def _check_hex(value: str) -> str:
    # from_hex raises ValueError, which pydantic reports as a validation error
    from_hex(value)
    return value.lower()


class ProofStepModel(BaseModel):
    """One sibling digest and the side it sits on."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    sibling: str = Field(..., description="Sibling digest, 0x-prefixed hex")
    side: Literal["left", "right"] = Field(..., description="Side of the sibling")

    @field_validator("sibling")
    @classmethod
    def _validate_sibling(cls, v: str) -> str:
        return _check_hex(v)


class ProofDocument(BaseModel):
    """Serializable inclusion proof."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default=SCHEMA_VERSION)
    hash_alg: str = Field(..., description="Registered hash algorithm name", min_length=1)
    leaf: str = Field(..., description="Leaf digest, 0x-prefixed hex")
    steps: list[ProofStepModel] = Field(default_factory=list)
    root: str | None = Field(
        default=None,
        description="Root the proof was generated from (informational)",
    )

    @field_validator("leaf")
    @classmethod
    def _validate_leaf(cls, v: str) -> str:
        return _check_hex(v)

    @field_validator("root")
    @classmethod
    def _validate_root(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _check_hex(v)

    @property
    def depth(self) -> int:
        return len(self.steps)

    @classmethod
    def from_proof(cls, proof: MerkleProof) -> "ProofDocument":
        """Build a document from an in-memory proof."""
        return cls(
            hash_alg=proof.hash_algorithm.name,
            leaf=to_hex(proof.leaf),
            steps=[
                ProofStepModel(sibling=to_hex(step.sibling), side=step.side.value)
                for step in proof.steps
            ],
            root=to_hex(proof.root) if proof.root is not None else None,
        )

    def to_proof(self) -> MerkleProof:
        """
        Decode into a MerkleProof.

        Raises:
            UnsupportedSchemaVersionError: If schema_version is not supported
            UnsupportedHashAlgorithmException: If hash_alg is not registered
            ProofFormatException: If a digest length does not match the algorithm
        """
        assert_supported_schema_version(self.schema_version)
        algorithm = get_hash_algorithm(self.hash_alg)

        leaf = from_hex(self.leaf)
        _check_digest_size(leaf, algorithm.digest_size, "leaf")

        steps: list[ProofStep] = []
        for i, step in enumerate(self.steps):
            sibling = from_hex(step.sibling)
            _check_digest_size(sibling, algorithm.digest_size, f"steps[{i}].sibling")
            steps.append(ProofStep(sibling=sibling, side=Side(step.side)))

        root = None
        if self.root is not None:
            root = from_hex(self.root)
            _check_digest_size(root, algorithm.digest_size, "root")

        return MerkleProof(
            leaf=leaf,
            steps=tuple(steps),
            hash_algorithm=algorithm,
            root=root,
        )

    def to_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(indent=indent)

    @classmethod
    def from_json(cls, text: str | bytes) -> "ProofDocument":
        """
        Parse a document from JSON text.

        Raises:
            ProofFormatException: If the text is not valid JSON or does not
                match the document schema
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ProofFormatException(f"Proof is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ProofFormatException("Proof document must be a JSON object")
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            first = e.errors()[0]
            field_path = ".".join(str(p) for p in first["loc"])
            raise ProofFormatException(
                f"Invalid proof document: {first['msg']}",
                field_path=field_path or None,
                details={"error_count": e.error_count()},
            ) from e


def _check_digest_size(digest: bytes, expected: int, field_path: str) -> None:
    if len(digest) != expected:
        raise ProofFormatException(
            f"Digest length {len(digest)} does not match algorithm size {expected}",
            field_path=field_path,
        )


__all__ = [
    "ProofStepModel",
    "ProofDocument",
]
