"""
Runtime Configuration Unit Tests
Tests for hashtree/config/runtime.py
"""
import pytest

from hashtree.config import (
    LoggingConfig,
    RuntimeConfig,
    TreeConfig,
    get_default_config,
    set_default_config,
)
from hashtree.crypto.hashing import SHA3_256, SHA256
from hashtree.schemas.errors import ConfigException, ErrorCodes, UnsupportedHashAlgorithmException


class TestDefaults:
    """Tests for default configuration values."""

    def test_defaults(self):
        config = RuntimeConfig()

        assert config.tree == TreeConfig(hash_alg="sha256", record_encoding="utf-8")
        assert config.logging == LoggingConfig(level="INFO", file=None)
        assert config.hash_algorithm() is SHA256

    def test_to_dict(self):
        data = RuntimeConfig().to_dict()

        assert data["tree"]["hash_alg"] == "sha256"
        assert data["logging"]["level"] == "INFO"


class TestEnvOverrides:
    """Tests for HASHTREE_* environment variables."""

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("HASHTREE_HASH_ALG", "sha3_256")
        monkeypatch.setenv("HASHTREE_LOG_LEVEL", "DEBUG")

        config = RuntimeConfig.from_env()

        assert config.tree.hash_alg == "sha3_256"
        assert config.logging.level == "DEBUG"
        assert config.hash_algorithm() is SHA3_256

    def test_with_env_overrides_returns_copy(self, monkeypatch):
        base = RuntimeConfig()
        monkeypatch.setenv("HASHTREE_RECORD_ENCODING", "latin-1")

        overridden = base.with_env_overrides()

        assert overridden.tree.record_encoding == "latin-1"
        assert base.tree.record_encoding == "utf-8"

    def test_no_overrides_returns_same_object(self):
        config = RuntimeConfig()

        assert config.with_env_overrides() is config

    def test_unknown_algorithm_fails_on_resolve(self, monkeypatch):
        monkeypatch.setenv("HASHTREE_HASH_ALG", "md5")

        config = RuntimeConfig.from_env()

        with pytest.raises(UnsupportedHashAlgorithmException):
            config.hash_algorithm()


class TestYaml:
    """Tests for YAML loading."""

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("tree:\n  hash_alg: blake2b\nlogging:\n  level: WARNING\n")

        config = RuntimeConfig.from_yaml(path)

        assert config.tree.hash_alg == "blake2b"
        assert config.tree.record_encoding == "utf-8"
        assert config.logging.level == "WARNING"

    def test_empty_yaml_uses_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert RuntimeConfig.from_yaml(path) == RuntimeConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            RuntimeConfig.from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("tree: [unclosed\n")

        with pytest.raises(ConfigException) as exc_info:
            RuntimeConfig.from_yaml(path)

        assert exc_info.value.code == ErrorCodes.CONFIG_INVALID
        assert exc_info.value.details["path"] == str(path)

    def test_non_mapping_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n")

        with pytest.raises(ConfigException, match="mapping"):
            RuntimeConfig.from_yaml(path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("tree:\n  fanout: 4\n")

        with pytest.raises(ConfigException, match="Unknown configuration key"):
            RuntimeConfig.from_yaml(path)

    def test_unknown_section(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("tree:\n  hash_alg: sha256\nextra:\n  anything: 1\n")

        with pytest.raises(ConfigException, match="Unknown configuration section: extra"):
            RuntimeConfig.from_yaml(path)

    def test_to_yaml_round_trip(self, tmp_path):
        config = RuntimeConfig(tree=TreeConfig(hash_alg="sha512"))
        path = tmp_path / "config.yaml"
        path.write_text(config.to_yaml())

        assert RuntimeConfig.from_yaml(path) == config


class TestLoad:
    """Tests for RuntimeConfig.load()."""

    def test_load_without_files_uses_defaults(self):
        assert RuntimeConfig.load() == RuntimeConfig()

    def test_load_finds_file_in_cwd(self, tmp_path):
        (tmp_path / "hashtree.yaml").write_text("tree:\n  hash_alg: sha512\n")

        assert RuntimeConfig.load().tree.hash_alg == "sha512"

    def test_load_finds_user_config(self, tmp_path):
        user_dir = tmp_path / "home" / ".config" / "hashtree"
        user_dir.mkdir(parents=True)
        (user_dir / "config.yaml").write_text("logging:\n  level: ERROR\n")

        assert RuntimeConfig.load().logging.level == "ERROR"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        path.write_text("tree:\n  hash_alg: sha512\n")
        monkeypatch.setenv("HASHTREE_HASH_ALG", "sha256")

        assert RuntimeConfig.load(path).tree.hash_alg == "sha256"


class TestDefaultConfig:
    """Tests for the process-wide default configuration."""

    def test_get_default_config_is_cached(self):
        assert get_default_config() is get_default_config()

    def test_set_default_config(self):
        config = RuntimeConfig(tree=TreeConfig(hash_alg="blake2b"))
        set_default_config(config)

        assert get_default_config() is config
