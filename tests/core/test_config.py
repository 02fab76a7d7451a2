"""Tests for the YAML settings loader."""

from pathlib import Path

import pytest

from vatradio.core.config import ConfigError, ConfigLoader

REPO_CONFIG = Path(__file__).resolve().parents[2] / "config" / "radio.yaml"


class TestConfigLoad:
    """Test loading settings files."""

    def test_load_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "radio.yaml"
        path.write_text("registry:\n  history_limit: 3\n", encoding="utf-8")

        assert ConfigLoader.load(path).get("registry.history_limit") == 3

    def test_load_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty file gives empty settings."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert ConfigLoader.load(path).get("registry", "missing") == "missing"

    def test_load_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            ConfigLoader.load(tmp_path / "missing.yaml")

    def test_load_directory(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            ConfigLoader.load(tmp_path)

    def test_load_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("registry: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="Failed to load"):
            ConfigLoader.load(path)

    def test_load_non_mapping(self, tmp_path: Path) -> None:
        """Test that a YAML list at the top level is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="mapping, got list"):
            ConfigLoader.load(path)

    def test_shipped_config(self) -> None:
        """Test the settings shipped with the project."""
        config = ConfigLoader.load(REPO_CONFIG)

        assert config.get("registry.history_limit") == 5
        assert config.get("ordering.position_order")[:3] == ["DEL", "GND", "TWR"]
        assert config.get("session.station_callsign") == ""


class TestConfigGet:
    """Test dotted-key lookup."""

    def test_nested_value(self) -> None:
        config = ConfigLoader({"registry": {"history_limit": 5}})
        assert config.get("registry.history_limit") == 5

    def test_missing_key_returns_default(self) -> None:
        config = ConfigLoader({"registry": {}})

        assert config.get("registry.history_limit", default=5) == 5
        assert config.get("nothing.here") is None

    def test_descending_into_scalar_returns_default(self) -> None:
        config = ConfigLoader({"registry": 3})
        assert config.get("registry.history_limit", "x") == "x"

    def test_whole_section(self) -> None:
        config = ConfigLoader({"registry": {"history_limit": 5}})
        assert config.get("registry") == {"history_limit": 5}

    def test_falsy_value_is_returned(self) -> None:
        """Test that stored falsy values are not replaced by the default."""
        config = ConfigLoader({"session": {"station_callsign": ""}})
        assert config.get("session.station_callsign", "default") == ""

    def test_no_data(self) -> None:
        assert ConfigLoader().get("registry.history_limit", 5) == 5
