"""Configuration loading for docs-list (.docs-list.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional

import yaml

from .report import REMINDER
from .walker import DEFAULT_EXCLUDED_DIRS

CONFIG_FILENAME = ".docs-list.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class DocsListConfig:
    """Represents the settings defined in .docs-list.yml."""

    root: Path
    exclude_dirs: FrozenSet[str] = field(default_factory=lambda: DEFAULT_EXCLUDED_DIRS)
    reminder: str = REMINDER
    source: Optional[Path] = None

    @property
    def docs_dir(self) -> Path:
        return self.root / "docs"


def load_config(config_path: Path) -> DocsListConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent

    if not config_file.is_file():
        return DocsListConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = DocsListConfig(root=root, source=config_file)

    exclude_dirs = _as_str_set(data.get("exclude_dirs"))
    if exclude_dirs is not None:
        config.exclude_dirs = exclude_dirs

    reminder = data.get("reminder")
    if isinstance(reminder, str) and reminder.strip():
        config.reminder = reminder

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return config_path / CONFIG_FILENAME
    return config_path


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str_set(value: Any) -> Optional[FrozenSet[str]]:
    if isinstance(value, str):
        return frozenset({value})
    if isinstance(value, list):
        return frozenset(str(item) for item in value if isinstance(item, (str, int, float)))
    return None


__all__ = ["CONFIG_FILENAME", "ConfigError", "DocsListConfig", "load_config"]
