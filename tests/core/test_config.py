"""Tests for configuration management."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

import polymarket_gamma.core.config as config_module
from polymarket_gamma.core.config import ConfigError, ConfigLoader, get_config

EXPECTED_TIMEOUT_MS = 30000
EXPECTED_LOCAL_TIMEOUT_MS = 5000


class TestConfigLoader:
    """Test suite for ConfigLoader."""

    def test_load_default_config(self) -> None:
        """Test loading the bundled configuration."""
        loader = ConfigLoader()
        assert loader.get("gamma.base_url") == "https://gamma-api.polymarket.com"

    def test_default_config_env_override(self) -> None:
        """Test the bundled settings read GAMMA_* variables."""
        with patch.dict(os.environ, {"GAMMA_BASE_URL": "https://mirror.test"}):
            loader = ConfigLoader()
        assert loader.get("gamma.base_url") == "https://mirror.test"

    def test_get_with_dot_notation(self, tmp_path: Path) -> None:
        """Test getting config values with dot notation."""
        (tmp_path / "settings.yaml").write_text("""
gamma:
  base_url: https://test.gamma.com
  timeout_ms: 1000
""")

        loader = ConfigLoader(config_dir=tmp_path)
        assert loader.get("gamma.base_url") == "https://test.gamma.com"
        assert loader.get("gamma.timeout_ms") == 1000

    def test_get_with_default(self, tmp_path: Path) -> None:
        """Test getting non-existent key returns default."""
        (tmp_path / "settings.yaml").write_text("gamma: {}")

        loader = ConfigLoader(config_dir=tmp_path)
        assert loader.get("nonexistent.key", "default_value") == "default_value"

    def test_missing_settings_file(self, tmp_path: Path) -> None:
        """Test an empty directory yields an empty configuration."""
        loader = ConfigLoader(config_dir=tmp_path)
        assert loader.get("gamma") is None
        assert loader.get_gamma_config() == {}

    def test_env_var_substitution(self, tmp_path: Path) -> None:
        """Test environment variable substitution."""
        (tmp_path / "settings.yaml").write_text("""
gamma:
  base_url: ${TEST_GAMMA_URL}
  timeout_ms: ${TEST_GAMMA_TIMEOUT:2500}
""")

        with patch.dict(os.environ, {"TEST_GAMMA_URL": "https://env.gamma.com"}):
            loader = ConfigLoader(config_dir=tmp_path)
            assert loader.get("gamma.base_url") == "https://env.gamma.com"
            assert loader.get("gamma.timeout_ms") == "2500"

    def test_local_settings_override(self, tmp_path: Path) -> None:
        """Test that local settings deep-merge over base settings."""
        (tmp_path / "settings.yaml").write_text("""
gamma:
  base_url: https://base.com
  timeout_ms: 30000
  headers:
    User-Agent: base
""")
        (tmp_path / "settings.local.yaml").write_text("""
gamma:
  timeout_ms: 5000
  headers:
    X-API-Key: local
""")

        loader = ConfigLoader(config_dir=tmp_path)
        assert loader.get("gamma.base_url") == "https://base.com"
        assert loader.get("gamma.timeout_ms") == EXPECTED_LOCAL_TIMEOUT_MS
        assert loader.get("gamma.headers") == {"User-Agent": "base", "X-API-Key": "local"}

    def test_full_string_unresolved_env_var_raises_config_error(self, tmp_path: Path) -> None:
        """Raise ConfigError when env var is unset and has no default."""
        (tmp_path / "settings.yaml").write_text("""
gamma:
  base_url: ${NONEXISTENT_POLYMARKET_GAMMA_VAR}
""")

        with pytest.raises(ConfigError, match="Required environment variable"):
            ConfigLoader(config_dir=tmp_path)

    def test_embedded_env_var_reference_is_expanded(self, tmp_path: Path) -> None:
        """Test references inside a longer string are substituted in place."""
        (tmp_path / "settings.yaml").write_text("""
gamma:
  base_url: https://${TEST_GAMMA_HOST}/${TEST_GAMMA_PREFIX:api}
""")

        with patch.dict(os.environ, {"TEST_GAMMA_HOST": "mirror.test"}):
            loader = ConfigLoader(config_dir=tmp_path)
        assert loader.get("gamma.base_url") == "https://mirror.test/api"

    def test_embedded_unset_env_var_raises_config_error(self, tmp_path: Path) -> None:
        """Raise ConfigError when an embedded reference has no value or default."""
        (tmp_path / "settings.yaml").write_text("""
gamma:
  base_url: https://api.example.com/${NONEXISTENT_PATH_VAR}/v1
""")

        with pytest.raises(ConfigError, match="NONEXISTENT_PATH_VAR"):
            ConfigLoader(config_dir=tmp_path)

    def test_malformed_reference_raises_config_error(self, tmp_path: Path) -> None:
        """Raise ConfigError when a reference is not a valid variable name."""
        (tmp_path / "settings.yaml").write_text("gamma:\n  base_url: https://${9-bad}/v1\n")

        with pytest.raises(ConfigError, match="Unresolved environment variable reference"):
            ConfigLoader(config_dir=tmp_path)

    def test_local_settings_must_be_a_mapping(self, tmp_path: Path) -> None:
        """Raise ConfigError when a settings file holds a scalar."""
        (tmp_path / "settings.yaml").write_text("gamma: {}\n")
        (tmp_path / "settings.local.yaml").write_text("just a string\n")

        with pytest.raises(ConfigError, match="settings.local.yaml must contain a mapping"):
            ConfigLoader(config_dir=tmp_path)


class TestGetGammaConfig:
    """Test suite for ConfigLoader.get_gamma_config."""

    def test_timeout_coerced_to_int(self, tmp_path: Path) -> None:
        """Test a string timeout from the environment becomes an int."""
        (tmp_path / "settings.yaml").write_text('gamma:\n  timeout_ms: "30000"\n')
        gamma = ConfigLoader(config_dir=tmp_path).get_gamma_config()
        assert gamma["timeout_ms"] == EXPECTED_TIMEOUT_MS

    def test_non_numeric_timeout(self, tmp_path: Path) -> None:
        """Test a non-numeric timeout is rejected."""
        (tmp_path / "settings.yaml").write_text("gamma:\n  timeout_ms: soon\n")
        with pytest.raises(ConfigError, match="must be an integer"):
            ConfigLoader(config_dir=tmp_path).get_gamma_config()

    def test_non_positive_timeout(self, tmp_path: Path) -> None:
        """Test a zero timeout is rejected."""
        (tmp_path / "settings.yaml").write_text("gamma:\n  timeout_ms: 0\n")
        with pytest.raises(ConfigError, match="must be positive"):
            ConfigLoader(config_dir=tmp_path).get_gamma_config()

    def test_gamma_not_a_mapping(self, tmp_path: Path) -> None:
        """Test a scalar gamma section is rejected."""
        (tmp_path / "settings.yaml").write_text("gamma: oops\n")
        with pytest.raises(ConfigError, match="gamma config must be a dict"):
            ConfigLoader(config_dir=tmp_path).get_gamma_config()

    def test_headers_not_a_mapping(self, tmp_path: Path) -> None:
        """Test a list of headers is rejected."""
        (tmp_path / "settings.yaml").write_text("gamma:\n  headers: [a, b]\n")
        with pytest.raises(ConfigError, match="headers must be a mapping"):
            ConfigLoader(config_dir=tmp_path).get_gamma_config()


class TestGetConfig:
    """Test suite for the lazy singleton get_config() function."""

    def test_returns_same_instance(self) -> None:
        """Test get_config caches the loader."""
        assert get_config() is get_config()

    def test_lazy_creation(self) -> None:
        """Test nothing is loaded until get_config is first called."""
        assert config_module._config is None
        loader = get_config()
        assert config_module._config is loader
