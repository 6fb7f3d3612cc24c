"""Client for the external OCR service (image -> text)."""

import time
from pathlib import Path

import httpx

from struk.domain.receipt import OcrText
from struk.receipt.ocr_helpers import resize_image_bytes, transform_ocr_response
from struk.runtime.logging import get_logger
from struk.runtime.settings import DEFAULT_OCR_URL, OcrConfig

logger = get_logger(__name__)

OCR_TIMEOUT_SECONDS = 60.0


class OCRError(RuntimeError):
    """Raised when a receipt image cannot be turned into text."""


class OCRServiceUnavailable(OCRError):
    """Raised when the OCR service cannot be reached or returns an error."""


def recognize(image_path: Path, config: OcrConfig | None = None, ocr_url: str = DEFAULT_OCR_URL) -> OcrText:
    """
    Send a receipt image to the OCR service and return its text and confidence.

    Args:
        image_path: Receipt image on disk
        config: Language/whitelist options for the engine
        ocr_url: Base URL of the OCR service

    Raises:
        OCRError: when the image cannot be read.
        OCRServiceUnavailable: when the service is unreachable, errors, or
            returns an unreadable payload.
    """
    config = config or OcrConfig()
    ocr_url = ocr_url.rstrip("/")
    logger.info("Sending receipt to OCR service at %s (language=%s)...", ocr_url, config.language)

    form: dict[str, str] = {"language": config.language}
    if config.whitelist:
        form["whitelist"] = config.whitelist
    if config.blacklist:
        form["blacklist"] = config.blacklist

    try:
        image_bytes = resize_image_bytes(image_path.read_bytes())
    except OSError as e:
        logger.error("Failed to read receipt image %s: %s", image_path, e)
        raise OCRError(f"Failed to process receipt image: {e}") from e

    try:
        start_time = time.time()
        response = httpx.post(
            f"{ocr_url}/ocr",
            files={"file": (image_path.name, image_bytes, "image/jpeg")},
            data=form,
            timeout=OCR_TIMEOUT_SECONDS,
        )
        logger.info("OCR service returned in %.2f seconds", time.time() - start_time)

        if response.status_code != 200:
            # Response body can echo receipt text; keep it out of the logs.
            logger.error("OCR service error: %s", response.status_code)
            raise OCRServiceUnavailable(f"OCR service error: {response.status_code}")

        ocr_text = transform_ocr_response(response.json())

    except httpx.RequestError as e:
        logger.error("Failed to connect to OCR service: %s", e)
        raise OCRServiceUnavailable(f"Failed to connect to OCR service: {e}") from e
    except (ValueError, TypeError, KeyError) as e:
        logger.error("OCR service returned an unreadable payload: %s", e)
        raise OCRServiceUnavailable(f"OCR service returned an unreadable payload: {e}") from e

    logger.debug("OCR confidence %.2f, %d characters", ocr_text.confidence, len(ocr_text.text))
    return ocr_text
