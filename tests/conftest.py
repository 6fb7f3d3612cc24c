"""Shared pytest fixtures for struk tests."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date
from pathlib import Path

import pytest
from struk.runtime import load_category_rules, load_scan_settings, reset_paths

FIXED_TODAY = date(2024, 3, 1)


@pytest.fixture
def fixed_clock():
    """Clock returning a fixed date for the receipt-date fallback."""
    return lambda: FIXED_TODAY


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point STRUK_CONFIG_DIR at an empty temp dir and drop cached config."""
    monkeypatch.setenv("STRUK_CONFIG_DIR", str(tmp_path))
    monkeypatch.delenv("OCR_SERVICE_URL", raising=False)
    reset_paths()
    load_scan_settings.cache_clear()
    load_category_rules.cache_clear()
    yield tmp_path
    reset_paths()
    load_scan_settings.cache_clear()
    load_category_rules.cache_clear()
