"""Runtime infrastructure for pantryscan.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Path resolution via get_paths(), ProjectPaths
- Rule loading via load_category_taxonomy(), load_known_store_names()
- The OCR service client via fetch_receipt_text()

Usage:
    from pantryscan.runtime import get_logger, get_paths

    logger = get_logger(__name__)
    paths = get_paths()
    print(paths.root, paths.config)
"""

from pantryscan.runtime.category_rules import load_category_taxonomy
from pantryscan.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)
from pantryscan.runtime.ocr_service import (
    DEFAULT_OCR_URL,
    OCRServiceUnavailable,
    fetch_receipt_text,
    ocr_result_to_text,
)
from pantryscan.runtime.paths import ProjectPaths, get_paths
from pantryscan.runtime.store_rules import load_known_store_names

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Rules
    "load_category_taxonomy",
    "load_known_store_names",
    # OCR
    "DEFAULT_OCR_URL",
    "OCRServiceUnavailable",
    "fetch_receipt_text",
    "ocr_result_to_text",
    # Paths
    "get_paths",
    "ProjectPaths",
]
