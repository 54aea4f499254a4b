"""Path resolution for pantryscan configuration files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _get_project_root() -> Path:
    """Project root: $PANTRYSCAN_HOME if set, otherwise the working directory."""
    home = os.environ.get("PANTRYSCAN_HOME")
    return Path(home) if home else Path.cwd()


@dataclass
class ProjectPaths:
    """Container for project-related paths, computed relative to one root."""

    root: Path = field(default_factory=_get_project_root)

    def __post_init__(self) -> None:
        self.root = self.root.resolve()

    @property
    def config(self) -> Path:
        """Configuration directory (config/)."""
        return self.root / "config"

    @property
    def category_rules(self) -> Path:
        """Extra category keyword layers TOML file."""
        return self.config / "categories.toml"

    @property
    def store_names(self) -> Path:
        """Known store names TOML file."""
        return self.config / "store_names.toml"


def get_paths(root: Path | None = None) -> ProjectPaths:
    """Return project paths for root (or the default root)."""
    if root is None:
        return ProjectPaths()
    return ProjectPaths(root=root)
