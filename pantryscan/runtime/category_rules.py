"""Runtime loader for category keyword layers."""

from __future__ import annotations

import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from pantryscan.receipt.taxonomy import CategoryTaxonomy, build_category_taxonomy
from pantryscan.runtime.logging import get_logger
from pantryscan.runtime.paths import get_paths

logger = get_logger(__name__)


def _load_toml(path: Path) -> dict[str, Any]:
    """Load TOML file and return parsed dict; missing files map to empty dict."""
    if not path.exists():
        logger.debug("No category rules at %s", path)
        return {}

    with open(path, "rb") as f:
        data = tomllib.load(f)
    return data if isinstance(data, dict) else {}


@lru_cache(maxsize=8)
def load_category_taxonomy(rule_paths: tuple[str, ...] | None = None) -> CategoryTaxonomy:
    """Load category keyword layers from TOML files into an in-memory taxonomy.

    Args:
        rule_paths: TOML files applied in order. If None, uses config/categories.toml.
    """
    if rule_paths is None:
        files = [get_paths().category_rules]
    else:
        files = [Path(path) for path in rule_paths]

    configs = tuple(_load_toml(path) for path in files)
    return build_category_taxonomy(configs)
