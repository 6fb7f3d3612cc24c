from pathlib import Path

import pytest
from struk.runtime import get_paths, load_scan_settings
from struk.runtime.settings import DEFAULT_OCR_URL, DEFAULT_OCR_WHITELIST, OcrConfig, ScanSettings


def test_defaults_without_settings_file(config_dir: Path) -> None:
    settings = load_scan_settings()

    assert settings == ScanSettings()
    assert settings.ocr_url == DEFAULT_OCR_URL
    assert settings.ocr_config() == OcrConfig(language="ind+eng", whitelist=DEFAULT_OCR_WHITELIST)


def test_settings_file_overrides_defaults(config_dir: Path) -> None:
    (config_dir / "settings.toml").write_text(
        """
[scan]
default_currency = "usd"
auto_categorize = false
ocr_language = "eng"
merchant_keywords = ["gofood", " ", "grabfood"]

[ocr]
url = "http://ocr.internal:8001"
whitelist = "0123456789"
""".lstrip(),
        encoding="utf-8",
    )

    settings = load_scan_settings()

    assert settings.default_currency == "USD"
    assert settings.auto_categorize is False
    assert settings.merchant_keywords == ("gofood", "grabfood")
    assert settings.ocr_url == "http://ocr.internal:8001"
    assert settings.ocr_config() == OcrConfig(language="eng", whitelist="0123456789")


def test_ocr_url_falls_back_to_environment(config_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OCR_SERVICE_URL", "http://from-env:8001")

    assert load_scan_settings().ocr_url == "http://from-env:8001"


def test_explicit_settings_path(tmp_path: Path) -> None:
    path = tmp_path / "other.toml"
    path.write_text('[scan]\nocr_language = "eng"\n', encoding="utf-8")

    assert load_scan_settings(str(path)).ocr_language == "eng"


def test_paths_follow_config_dir_env(config_dir: Path) -> None:
    paths = get_paths()

    assert paths.settings == config_dir.resolve() / "settings.toml"
    assert paths.category_rules == config_dir.resolve() / "category_rules.toml"


def test_single_string_merchant_keyword(config_dir: Path) -> None:
    (config_dir / "settings.toml").write_text('[scan]\nmerchant_keywords = "GoFood"\n', encoding="utf-8")

    assert load_scan_settings().merchant_keywords == ("gofood",)


def test_non_boolean_auto_categorize_keeps_default(config_dir: Path) -> None:
    (config_dir / "settings.toml").write_text('[scan]\nauto_categorize = "false"\n', encoding="utf-8")

    assert load_scan_settings().auto_categorize is True
