"""Public smoke tests for basic module wiring.

Keep these minimal and free of any real-world data.
"""

from __future__ import annotations


def test_imports() -> None:
    import pantryscan
    import pantryscan.cli.main
    import pantryscan.domain
    import pantryscan.receipt
    import pantryscan.runtime

    assert pantryscan.parse is not None
    assert pantryscan.cli.main is not None
    assert pantryscan.domain is not None
    assert pantryscan.receipt is not None
    assert pantryscan.runtime is not None


def test_runtime_imported_before_receipt() -> None:
    import importlib

    runtime = importlib.import_module("pantryscan.runtime")
    receipt = importlib.import_module("pantryscan.receipt")

    assert runtime.load_category_taxonomy is not None
    assert receipt.parse is not None
