"""Receipt scan workflow orchestration."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from struk.receipt.date_utils import Clock
from struk.receipt.receipt_parser import parse_receipt_text
from struk.runtime import get_logger, load_category_rules, load_scan_settings
from struk.runtime.ocr_client import OCRError, recognize
from struk.runtime.settings import ocr_language_code

if TYPE_CHECKING:
    from struk.domain.receipt import ParsedReceipt
    from struk.runtime.settings import ScanSettings

logger = get_logger(__name__)

ScanStatus = Literal[
    "file_not_found",
    "ocr_unavailable",
    "parsed",
]


@dataclass(frozen=True)
class ReceiptScanRequest:
    """Inputs for running receipt scan workflow."""

    image_path: Path
    ocr_url: str | None = None
    ocr_language: str | None = None
    settings: ScanSettings | None = None


@dataclass(frozen=True)
class ReceiptScanResult:
    """Outcome from receipt scan workflow."""

    status: ScanStatus
    receipt: ParsedReceipt | None = None
    error: str | None = None


def _log_parsed(receipt: ParsedReceipt) -> None:
    logger.debug(
        "Parsed receipt: merchant=%r date=%s total=%s items=%d category=%s",
        receipt.merchant,
        receipt.date.isoformat(),
        receipt.total,
        len(receipt.items),
        receipt.category,
    )


def run_text_parse(
    text: str,
    confidence: float | None = None,
    settings: ScanSettings | None = None,
    today: Clock | None = None,
) -> ParsedReceipt:
    """Parse OCR or manually entered text with the configured keywords and rules."""
    settings = settings or load_scan_settings()
    receipt = parse_receipt_text(
        text,
        confidence,
        today=today,
        merchant_keywords=settings.merchant_keywords,
        category_rules=load_category_rules(),
        auto_categorize=settings.auto_categorize,
    )
    _log_parsed(receipt)
    return receipt


def run_receipt_scan(request: ReceiptScanRequest) -> ReceiptScanResult:
    """Run scan flow: OCR -> parse -> categorize."""
    if not request.image_path.exists():
        return ReceiptScanResult(
            status="file_not_found",
            error=f"Receipt file not found: {request.image_path}",
        )

    settings = request.settings or load_scan_settings()
    config = settings.ocr_config()
    if request.ocr_language is not None:
        config = replace(config, language=ocr_language_code(request.ocr_language))

    try:
        ocr_text = recognize(request.image_path, config, request.ocr_url or settings.ocr_url)
    except OCRError as exc:
        return ReceiptScanResult(
            status="ocr_unavailable",
            error=str(exc),
        )

    receipt = run_text_parse(ocr_text.text, ocr_text.confidence, settings=settings)
    return ReceiptScanResult(status="parsed", receipt=receipt)
