"""Centralized path management for struk configuration files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _get_config_root() -> Path:
    """Config directory: $STRUK_CONFIG_DIR, else ~/.config/struk."""
    override = os.environ.get("STRUK_CONFIG_DIR")
    if override:
        return Path(override).expanduser()
    return Path("~/.config/struk").expanduser()


@dataclass
class ProjectPaths:
    """Container for all configuration paths."""

    config: Path = field(default_factory=_get_config_root)

    def __post_init__(self) -> None:
        self.config = self.config.resolve()

    @property
    def settings(self) -> Path:
        """Scan settings TOML file."""
        return self.config / "settings.toml"

    @property
    def category_rules(self) -> Path:
        """User categorization rules TOML file."""
        return self.config / "category_rules.toml"


_paths: ProjectPaths | None = None


def get_paths() -> ProjectPaths:
    """Get the singleton ProjectPaths instance."""
    global _paths
    if _paths is None:
        _paths = ProjectPaths()
    return _paths


def reset_paths() -> None:
    """Forget the cached paths so the next get_paths() re-reads the environment."""
    global _paths
    _paths = None
