"""Receipt workflows."""

from struk.application.scan import ReceiptScanRequest, ReceiptScanResult, run_receipt_scan, run_text_parse

__all__ = [
    "ReceiptScanRequest",
    "ReceiptScanResult",
    "run_receipt_scan",
    "run_text_parse",
]
