"""
Runtime Configuration

Central configuration for the hash primitive, record handling and logging.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from hashtree.crypto.hashing import HashAlgorithm, get_hash_algorithm
from hashtree.schemas.errors import ConfigException

load_dotenv()


# Environment variable prefix
ENV_PREFIX = "HASHTREE_"


def default_config_paths() -> list[Path]:
    """Config file locations searched when no explicit path is given."""
    return [
        Path.cwd() / "hashtree.yaml",
        Path.cwd() / ".hashtree.yaml",
        Path.home() / ".config" / "hashtree" / "config.yaml",
    ]


@dataclass
class TreeConfig:
    """Configuration for tree construction."""
    hash_alg: str = "sha256"
    # Encoding used when records arrive as text (CLI input files, --record)
    record_encoding: str = "utf-8"


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"
    file: Optional[str] = None


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    tree: TreeConfig = field(default_factory=TreeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - HASHTREE_HASH_ALG: Hash algorithm name (sha256, sha512, sha3_256, blake2b)
        - HASHTREE_RECORD_ENCODING: Text encoding for records
        - HASHTREE_LOG_LEVEL: Log level
        - HASHTREE_LOG_FILE: Optional log file path
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}HASH_ALG"):
            overrides.setdefault("tree", {})["hash_alg"] = os.getenv(f"{ENV_PREFIX}HASH_ALG")
        if os.getenv(f"{ENV_PREFIX}RECORD_ENCODING"):
            overrides.setdefault("tree", {})["record_encoding"] = os.getenv(
                f"{ENV_PREFIX}RECORD_ENCODING"
            )

        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides.setdefault("logging", {})["file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigException(f"Invalid YAML: {e}", path=str(path)) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigException("Config file must contain a mapping", path=str(path))

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        unknown = sorted(set(data) - {"tree", "logging"})
        if unknown:
            raise ConfigException(
                f"Unknown configuration section: {', '.join(map(str, unknown))}"
            )

        tree_data = data.get("tree") or {}
        logging_data = data.get("logging") or {}

        try:
            tree = TreeConfig(**tree_data)
            logging_config = LoggingConfig(**logging_data)
        except TypeError as e:
            raise ConfigException(f"Unknown configuration key: {e}") from e

        return cls(
            tree=tree,
            logging=logging_config,
        )

    @classmethod
    def load(cls, path: str | Path | None = None) -> "RuntimeConfig":
        """
        Load configuration from a file and overlay environment variables.

        If path is None, the first existing default location is used
        (./hashtree.yaml, ./.hashtree.yaml, ~/.config/hashtree/config.yaml);
        with no file at all, defaults apply.
        """
        if path is not None:
            return cls.from_yaml(path).with_env_overrides()

        for default_path in default_config_paths():
            if default_path.exists():
                return cls.from_yaml(default_path).with_env_overrides()

        return cls().with_env_overrides()

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)

        if "tree" in overrides:
            for key, value in overrides["tree"].items():
                setattr(new_config.tree, key, value)

        if "logging" in overrides:
            for key, value in overrides["logging"].items():
                setattr(new_config.logging, key, value)

        return new_config

    def hash_algorithm(self) -> HashAlgorithm:
        """Resolve the configured hash algorithm name."""
        return get_hash_algorithm(self.tree.hash_alg)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "tree": {
                "hash_alg": self.tree.hash_alg,
                "record_encoding": self.tree.record_encoding,
            },
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
        }

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_dict(), sort_keys=False)


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.from_env()
    return _default_config


def set_default_config(config: RuntimeConfig | None) -> None:
    """Set (or with None, reset) the default runtime configuration."""
    global _default_config
    _default_config = config
