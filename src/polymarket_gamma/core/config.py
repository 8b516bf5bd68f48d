"""Configuration management for the Gamma client.

Settings come from ``settings.yaml`` in the config directory, with an
optional ``settings.local.yaml`` deep-merged on top.  String values may
reference environment variables as ``${NAME}`` or ``${NAME:default}``,
either as the whole value or inside a longer string such as a URL.
"""

import os
import re
from pathlib import Path
from typing import Any, cast

import yaml
from dotenv import load_dotenv

SETTINGS_FILES = ("settings.yaml", "settings.local.yaml")

_ENV_REFERENCE = re.compile(r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::(?P<default>[^}]*))?\}")


class ConfigError(Exception):
    """Raise when configuration loading or validation fails."""


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with path.open() as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"{path.name} must contain a mapping, got {type(data).__name__}"
        raise ConfigError(msg)
    return cast("dict[str, Any]", data)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> None:
    """Merge ``override`` into ``base`` in place, recursing into nested dicts."""
    for key, value in override.items():
        if isinstance(base.get(key), dict) and isinstance(value, dict):
            _deep_merge(base[key], cast("dict[str, Any]", value))
        else:
            base[key] = value


def _expand(value: str) -> str:
    """Replace every ``${NAME}`` / ``${NAME:default}`` reference in ``value``.

    Raises:
        ConfigError: If a referenced variable is unset and has no default,
            or a ``${`` sequence is not a well-formed reference.

    """

    def _resolve(match: re.Match[str]) -> str:
        name, default = match.group("name"), match.group("default")
        resolved = os.getenv(name, default)
        if resolved is None:
            msg = f"Required environment variable ${{{name}}} is not set and has no default"
            raise ConfigError(msg)
        return resolved

    expanded = _ENV_REFERENCE.sub(_resolve, value)
    if "${" in _ENV_REFERENCE.sub("", value):
        msg = f"Unresolved environment variable reference in: {value}"
        raise ConfigError(msg)
    return expanded


def _substitute(config: Any) -> Any:
    if isinstance(config, dict):
        items = cast("dict[str, Any]", config).items()
        return {key: _substitute(value) for key, value in items}
    if isinstance(config, list):
        return [_substitute(item) for item in cast("list[Any]", config)]
    if isinstance(config, str):
        return _expand(config)
    return config


class ConfigLoader:
    """Load settings files and answer dot-notation lookups."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config loader.

        Load environment variables from a ``.env`` file (if present) and
        then read the settings files from the given directory.

        Args:
            config_dir: Directory containing config files. Defaults to the
                ``config`` directory shipped inside the package.

        """
        load_dotenv()
        if config_dir is None:
            config_dir = Path(__file__).parent.parent / "config"
        self.config_dir = Path(config_dir)
        self._config: dict[str, Any] = {}
        for name in SETTINGS_FILES:
            _deep_merge(self._config, _read_yaml(self.config_dir / name))
        self._config = _substitute(self._config)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot-notation key.

        Args:
            key: Configuration key in dot notation (e.g., 'gamma.base_url').
            default: Default value if key not found.

        Returns:
            Configuration value.

        """
        current: Any = self._config
        for part in key.split("."):
            if not isinstance(current, dict):
                return default
            current = cast("dict[str, Any]", current).get(part)
            if current is None:
                return default
        return current

    def get_gamma_config(self) -> dict[str, Any]:
        """Get Gamma API client configuration.

        Returns:
            Dictionary with the ``base_url``, ``timeout_ms`` and
            ``headers`` settings that are present.

        Raises:
            ConfigError: If the gamma config value is not a dictionary,
                or its timeout is not a positive integer.

        """
        result: Any = self.get("gamma", {})
        if not isinstance(result, dict):
            msg = f"gamma config must be a dict, got {type(result).__name__}"
            raise ConfigError(msg)
        gamma = dict(cast("dict[str, Any]", result))

        if "timeout_ms" in gamma:
            try:
                timeout_ms = int(gamma["timeout_ms"])
            except (TypeError, ValueError) as exc:
                msg = f"gamma.timeout_ms must be an integer, got {gamma['timeout_ms']!r}"
                raise ConfigError(msg) from exc
            if timeout_ms <= 0:
                msg = f"gamma.timeout_ms must be positive, got {timeout_ms}"
                raise ConfigError(msg)
            gamma["timeout_ms"] = timeout_ms

        headers = gamma.get("headers")
        if headers is not None and not isinstance(headers, dict):
            msg = f"gamma.headers must be a mapping, got {type(headers).__name__}"
            raise ConfigError(msg)
        return gamma


_config: ConfigLoader | None = None


def get_config() -> ConfigLoader:
    """Return the global ``ConfigLoader`` singleton, creating it on first use.

    Returns:
        The shared ``ConfigLoader`` instance.

    """
    global _config  # noqa: PLW0603
    if _config is None:
        _config = ConfigLoader()
    return _config
