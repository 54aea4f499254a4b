"""Runtime loader for known store names."""

from __future__ import annotations

import tomllib
from functools import lru_cache
from pathlib import Path

from pantryscan.runtime.paths import get_paths


@lru_cache(maxsize=4)
def load_known_store_names(config_path: str | None = None) -> tuple[str, ...]:
    """
    Load known store names from store_names.toml.

    Expected layout::

        [[stores]]
        names = ["WHOLE FOODS", "WHOLE FOODS MARKET"]

    Args:
        config_path: Optional TOML path override. If None, uses config/store_names.toml.

    Returns:
        Tuple of store names from all entries, preserving file order.
    """
    path = Path(config_path) if config_path is not None else get_paths().store_names
    if not path.exists():
        return tuple()

    with open(path, "rb") as f:
        config = tomllib.load(f)

    names: list[str] = []
    for store in config.get("stores", []):
        for name in store.get("names", []):
            name = str(name).strip()
            if name:
                names.append(name)
    return tuple(names)
