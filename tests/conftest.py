"""Shared pytest fixtures for pantryscan tests."""

from __future__ import annotations

import pytest

from pantryscan.runtime import load_category_taxonomy, load_known_store_names


@pytest.fixture(autouse=True)
def isolated_project_root(tmp_path, monkeypatch):
    """Point default config lookups at an empty temporary project root."""
    monkeypatch.setenv("PANTRYSCAN_HOME", str(tmp_path))
    load_category_taxonomy.cache_clear()
    load_known_store_names.cache_clear()
    yield tmp_path
    load_category_taxonomy.cache_clear()
    load_known_store_names.cache_clear()
