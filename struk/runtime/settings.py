"""Runtime loader for scan settings and OCR configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from struk.receipt.categories import normalize_keywords
from struk.runtime.logging import get_logger
from struk.runtime.paths import get_paths

logger = get_logger(__name__)

DEFAULT_OCR_URL = "http://localhost:8001"
DEFAULT_OCR_LANGUAGE = "ind+eng"
DEFAULT_OCR_WHITELIST = (
    "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
    ".,:-/()[]{}@#$%&*+=<>?!\"'`~^|\\"
)


@dataclass(frozen=True)
class OcrConfig:
    """Options passed explicitly to every OCR call."""

    language: str = DEFAULT_OCR_LANGUAGE
    whitelist: str | None = DEFAULT_OCR_WHITELIST
    blacklist: str | None = None


@dataclass(frozen=True)
class ScanSettings:
    """User-facing scan settings."""

    default_currency: str = "IDR"
    auto_categorize: bool = True
    ocr_language: str = "ind"
    ocr_url: str = DEFAULT_OCR_URL
    ocr_whitelist: str | None = DEFAULT_OCR_WHITELIST
    merchant_keywords: tuple[str, ...] = ()

    def ocr_config(self) -> OcrConfig:
        return OcrConfig(language=ocr_language_code(self.ocr_language), whitelist=self.ocr_whitelist)


def ocr_language_code(setting: str) -> str:
    """Map the language setting to engine codes; Indonesian receipts also print English."""
    return DEFAULT_OCR_LANGUAGE if setting == "ind" else "eng"


def load_toml(path: Path) -> dict[str, Any]:
    """Load TOML file and return parsed dict; missing files map to empty dict."""
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

    if not path.exists():
        return {}

    with open(path, "rb") as f:
        data = tomllib.load(f)
    return data if isinstance(data, dict) else {}


def _toml_bool(table: dict[str, Any], key: str, default: bool, path: Path) -> bool:
    value = table.get(key, default)
    if isinstance(value, bool):
        return value
    logger.warning("Ignoring non-boolean %s = %r in %s; using %s", key, value, path, default)
    return default


@lru_cache(maxsize=4)
def load_scan_settings(config_path: str | None = None) -> ScanSettings:
    """
    Load scan settings from settings.toml.

    Args:
        config_path: Optional TOML path override. If None, uses the default config path.

    Returns:
        ScanSettings; keys missing from the file keep their defaults.
    """
    path = Path(config_path) if config_path is not None else get_paths().settings
    data = load_toml(path)
    scan = data.get("scan", {}) if isinstance(data.get("scan", {}), dict) else {}
    ocr = data.get("ocr", {}) if isinstance(data.get("ocr", {}), dict) else {}

    settings = ScanSettings(
        default_currency=str(scan.get("default_currency", "IDR")).upper(),
        auto_categorize=_toml_bool(scan, "auto_categorize", True, path),
        ocr_language=str(scan.get("ocr_language", "ind")),
        ocr_url=str(ocr.get("url") or os.environ.get("OCR_SERVICE_URL") or DEFAULT_OCR_URL),
        ocr_whitelist=str(ocr["whitelist"]) if ocr.get("whitelist") else DEFAULT_OCR_WHITELIST,
        merchant_keywords=normalize_keywords(scan.get("merchant_keywords")),
    )
    logger.debug("Loaded scan settings from %s: %s", path, settings)
    return settings
