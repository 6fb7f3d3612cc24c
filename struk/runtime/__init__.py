"""Runtime infrastructure for struk.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Config path resolution via get_paths(), ProjectPaths
- Settings and categorization rule loading from TOML
- The OCR service client

Usage:
    from struk.runtime import get_logger, load_scan_settings

    logger = get_logger(__name__)
    settings = load_scan_settings()
"""

from struk.runtime.category_rules import load_category_rules
from struk.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)
from struk.runtime.ocr_client import OCRError, OCRServiceUnavailable, recognize
from struk.runtime.paths import ProjectPaths, get_paths, reset_paths
from struk.runtime.settings import OcrConfig, ScanSettings, load_scan_settings

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Config
    "get_paths",
    "reset_paths",
    "ProjectPaths",
    "OcrConfig",
    "ScanSettings",
    "load_scan_settings",
    "load_category_rules",
    # OCR
    "OCRError",
    "OCRServiceUnavailable",
    "recognize",
]
