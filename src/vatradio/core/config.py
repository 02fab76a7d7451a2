"""Read-only access to the radio client's YAML settings.

Settings are nested mappings addressed with dotted keys, so the registry can
ask for ``"registry.history_limit"`` without caring whether the section exists.

Typical usage example:
    from vatradio.core.config import ConfigLoader

    config = ConfigLoader.load("config/radio.yaml")
    registry = RadioRegistry.from_config(config, SessionStore.from_config(config))
"""

from pathlib import Path
from typing import Any

import yaml

from vatradio.core.logging_system import get_logger

logger = get_logger(__name__)

KEY_SEPARATOR = "."


class ConfigError(Exception):
    """Raised when a settings file cannot be used."""


class ConfigLoader:
    """Settings tree with dotted-key lookup.

    Examples:
        >>> config = ConfigLoader({"ordering": {"position_order": ["DEL", "GND"]}})
        >>> config.get("ordering.position_order")
        ['DEL', 'GND']
        >>> config.get("session.station_callsign", "")
        ''
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Read settings from a YAML file.

        An empty file yields empty settings.

        Raises:
            ConfigError: If the file is missing, is not valid YAML, or its
                top level is not a mapping.
        """
        path = Path(path)
        if not path.is_file():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration {path}: {e}") from e

        if data is None:
            data = {}
        elif not isinstance(data, dict):
            raise ConfigError(
                f"Configuration root must be a mapping, got {type(data).__name__}: {path}"
            )

        logger.info("Loaded configuration from: %s", path)
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key, returning ``default`` for any missing step."""
        node: Any = self._data
        for part in key.split(KEY_SEPARATOR):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node
