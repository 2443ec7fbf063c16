"""Configuration management for Part Picker."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .models import ALL_CATEGORIES, UNCATEGORIZED
from .table_ingester import NAME_HEADERS, QTY_HEADERS


@dataclass
class LabelsConfig:
    """Category label configuration."""

    uncategorized: str = UNCATEGORIZED
    all: str = ALL_CATEGORIES


@dataclass
class HeadersConfig:
    """Extra header words recognized on import."""

    name: list[str] = field(default_factory=list)
    quantity: list[str] = field(default_factory=list)

    @property
    def name_vocabulary(self) -> frozenset[str]:
        """Built-in name headers plus configured ones."""
        return NAME_HEADERS | {word.strip().lower() for word in self.name if word.strip()}

    @property
    def quantity_vocabulary(self) -> frozenset[str]:
        """Built-in quantity headers plus configured ones."""
        return QTY_HEADERS | {word.strip().lower() for word in self.quantity if word.strip()}


@dataclass
class DataConfig:
    """Catalog source configuration."""

    catalog_file: Path | None = None


@dataclass
class ClipboardConfig:
    """Clipboard configuration."""

    enabled: bool = True


@dataclass
class Config:
    """Complete application configuration."""

    labels: LabelsConfig
    headers: HeadersConfig
    data: DataConfig
    clipboard: ClipboardConfig


class ConfigManager:
    """Manages application configuration from TOML files."""

    def __init__(self, config_path: Path | None = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional explicit path to config file.
                        If not provided, searches standard locations.
        """
        self.config_path = config_path or self._find_config()
        self._config = self._load_config()

    @property
    def labels(self) -> LabelsConfig:
        """Get labels configuration."""
        return self._config.labels

    @property
    def headers(self) -> HeadersConfig:
        """Get headers configuration."""
        return self._config.headers

    @property
    def data(self) -> DataConfig:
        """Get data configuration."""
        return self._config.data

    @property
    def clipboard(self) -> ClipboardConfig:
        """Get clipboard configuration."""
        return self._config.clipboard

    def _find_config(self) -> Path:
        """Find config file in standard locations."""
        locations = [
            Path.cwd() / "part-picker.toml",
            Path.home() / ".config" / "part-picker" / "config.toml",
            Path.home() / ".part-picker" / "config.toml",
        ]

        for loc in locations:
            if loc.exists():
                return loc

        # Return default location if none found
        return Path.home() / ".config" / "part-picker" / "config.toml"

    def _load_config(self) -> Config:
        """Load configuration from TOML file."""
        if not self.config_path.exists():
            return self._default_config()

        with open(self.config_path, "rb") as f:
            data = tomllib.load(f)

        labels = data.get("labels", {})
        headers = data.get("headers", {})
        catalog_file = data.get("data", {}).get("catalog_file")

        return Config(
            labels=LabelsConfig(
                uncategorized=labels.get("uncategorized", UNCATEGORIZED),
                all=labels.get("all", ALL_CATEGORIES),
            ),
            headers=HeadersConfig(
                name=list(headers.get("name", [])),
                quantity=list(headers.get("quantity", [])),
            ),
            data=DataConfig(
                catalog_file=Path(catalog_file).expanduser() if catalog_file else None,
            ),
            clipboard=ClipboardConfig(
                enabled=data.get("clipboard", {}).get("enabled", True),
            ),
        )

    def _default_config(self) -> Config:
        """Return default configuration."""
        return Config(
            labels=LabelsConfig(),
            headers=HeadersConfig(),
            data=DataConfig(),
            clipboard=ClipboardConfig(),
        )

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get config value by dot-notation path.

        Args:
            key_path: Dot-separated path like 'labels.all'
            default: Default value if path not found

        Returns:
            Configuration value or default
        """
        keys = key_path.split(".")
        value: Any = self._config

        for key in keys:
            if hasattr(value, key):
                value = getattr(value, key)
            elif isinstance(value, dict):
                value = value.get(key)
                if value is None:
                    return default
            else:
                return default

        return value if value is not None else default
