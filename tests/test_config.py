"""Tests for configuration management."""

from pathlib import Path

import pytest

from part_picker.config import ConfigManager
from part_picker.models import ALL_CATEGORIES, UNCATEGORIZED
from part_picker.table_ingester import NAME_HEADERS, QTY_HEADERS


@pytest.fixture
def config_file(tmp_path):
    """Create a temporary config file."""
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        """
[labels]
uncategorized = "기타"
all = "전체"

[headers]
name = ["모델명", " Model "]
quantity = ["개수"]

[data]
catalog_file = "~/parts.xlsx"

[clipboard]
enabled = false
""",
        encoding="utf-8",
    )
    return config_path


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_labels(self, config_file):
        """Load label configuration."""
        manager = ConfigManager(config_path=config_file)

        assert manager.labels.uncategorized == "기타"
        assert manager.labels.all == "전체"

    def test_headers_extend_builtins(self, config_file):
        """Extra header words are added, lowercased, to the built-ins."""
        manager = ConfigManager(config_path=config_file)

        assert manager.headers.name_vocabulary == NAME_HEADERS | {"모델명", "model"}
        assert manager.headers.quantity_vocabulary == QTY_HEADERS | {"개수"}

    def test_data_config(self, config_file):
        """Catalog file paths are expanded."""
        manager = ConfigManager(config_path=config_file)

        assert manager.data.catalog_file == Path.home() / "parts.xlsx"

    def test_clipboard_config(self, config_file):
        """Load clipboard configuration."""
        manager = ConfigManager(config_path=config_file)

        assert manager.clipboard.enabled is False

    def test_missing_file_uses_defaults(self, tmp_path):
        """Use defaults when config file doesn't exist."""
        manager = ConfigManager(config_path=tmp_path / "nonexistent.toml")

        assert manager.labels.uncategorized == UNCATEGORIZED
        assert manager.labels.all == ALL_CATEGORIES
        assert manager.headers.name_vocabulary == NAME_HEADERS
        assert manager.data.catalog_file is None
        assert manager.clipboard.enabled is True

    def test_partial_file(self, tmp_path):
        """Missing sections fall back to defaults."""
        config_path = tmp_path / "config.toml"
        config_path.write_text('[labels]\nall = "Every"\n')
        manager = ConfigManager(config_path=config_path)

        assert manager.labels.all == "Every"
        assert manager.labels.uncategorized == UNCATEGORIZED
        assert manager.headers.quantity_vocabulary == QTY_HEADERS


class TestConfigGet:
    """Tests for dot-notation access."""

    def test_get_nested(self, config_file):
        """Get value by dot path."""
        manager = ConfigManager(config_path=config_file)

        assert manager.get("labels.all") == "전체"
        assert manager.get("clipboard.enabled") is False

    def test_get_missing_returns_default(self, config_file):
        """Unknown paths return the default."""
        manager = ConfigManager(config_path=config_file)

        assert manager.get("labels.missing", "fallback") == "fallback"
        assert manager.get("nope.nothing") is None


class TestFindConfig:
    """Tests for config file discovery."""

    def test_finds_file_in_cwd(self, tmp_path, monkeypatch):
        """A part-picker.toml in the working directory is picked up."""
        (tmp_path / "part-picker.toml").write_text('[labels]\nall = "Cwd"\n')
        monkeypatch.chdir(tmp_path)

        manager = ConfigManager()

        assert manager.config_path == tmp_path / "part-picker.toml"
        assert manager.labels.all == "Cwd"
