"""Pure OCR transformation helpers: image preparation and response decoding."""

import io
from typing import Any

from struk.domain.receipt import OcrText

MAX_IMAGE_DIMENSION = 3000  # Resize if either dimension exceeds this
OCR_IMAGE_PADDING = 50  # White padding around image to prevent edge truncation
MIN_DETECTION_CONFIDENCE = 0.5  # Drop detections below this before line grouping
MIN_LINE_OVERLAP_RATIO = 0.5  # Vertical overlap needed to join a detection to a line


def resize_image_bytes(
    image_bytes: bytes, max_dimension: int = MAX_IMAGE_DIMENSION, padding: int = OCR_IMAGE_PADDING
) -> bytes:
    """
    Downscale image bytes to max_dimension and add white padding.

    Args:
        image_bytes: Image data as bytes
        max_dimension: Maximum allowed dimension (width or height)
        padding: White padding to add around image (pixels)

    Returns:
        JPEG bytes ready to send to the OCR engine
    """
    from PIL import Image, ImageOps

    img = Image.open(io.BytesIO(image_bytes))
    # Phone photos carry EXIF rotation; OCR needs upright text.
    img = ImageOps.exif_transpose(img)

    if max(img.size) > max_dimension:
        img.thumbnail((max_dimension, max_dimension), Image.Resampling.LANCZOS)

    if padding > 0:
        img = ImageOps.expand(img, border=padding, fill="white")

    buffer = io.BytesIO()
    img.convert("RGB").save(buffer, format="JPEG", quality=95)
    return buffer.getvalue()


def normalize_confidence(value: Any) -> float:
    """Map engine confidence onto [0, 1]; Tesseract reports 0..100."""
    try:
        confidence = float(value)
    except (TypeError, ValueError):
        return 0.0
    if confidence > 1.0:
        confidence /= 100.0
    return max(0.0, min(1.0, confidence))


def _is_valid_bbox(bbox: Any) -> bool:
    """A bbox is a non-empty list of [x, y, ...] points."""
    return (
        isinstance(bbox, list)
        and len(bbox) > 0
        and all(isinstance(point, (list, tuple)) and len(point) >= 2 for point in bbox)
    )


def _detection_geometry(bbox: list[list[float]]) -> dict[str, float]:
    y_coords = [point[1] for point in bbox]
    return {
        "center_y": sum(y_coords) / len(y_coords),
        "y_min": min(y_coords),
        "y_max": max(y_coords),
        "min_x": min(point[0] for point in bbox),
    }


def _overlaps_line(det: dict[str, Any], line: list[dict[str, Any]]) -> bool:
    """Return True if det shares enough vertical span with the line."""
    line_min = min(d["y_min"] for d in line)
    line_max = max(d["y_max"] for d in line)
    overlap = min(det["y_max"], line_max) - max(det["y_min"], line_min)
    if overlap <= 0:
        return False
    smaller_height = min(det["y_max"] - det["y_min"], line_max - line_min)
    # Degenerate boxes only join when their centers fall inside the line.
    if smaller_height <= 0:
        return line_min <= det["center_y"] <= line_max
    return overlap / smaller_height >= MIN_LINE_OVERLAP_RATIO


def _group_detections_into_lines(detections: list[dict[str, Any]]) -> list[list[dict[str, Any]]]:
    """Group detections top to bottom into rows, each row sorted left to right."""
    lines: list[list[dict[str, Any]]] = []
    for det in sorted(detections, key=lambda d: (d["center_y"], d["min_x"])):
        if lines and _overlaps_line(det, lines[-1]):
            lines[-1].append(det)
        else:
            lines.append([det])

    for line in lines:
        line.sort(key=lambda d: d["min_x"])
    return lines


def transform_ocr_response(raw_result: dict[str, Any]) -> OcrText:
    """
    Convert an OCR service response into text plus confidence.

    Accepts either a plain ``{"text", "confidence"}`` payload or a
    PaddleOCR-style ``{"detections": [[bbox, [text, confidence]], ...]}``
    payload. Bounding boxes are only used to rebuild lines and are dropped.

    Raises:
        ValueError: when the payload is not an object or a bounding box is malformed.
    """
    if not isinstance(raw_result, dict):
        raise ValueError(f"expected a JSON object, got {type(raw_result).__name__}")
    if "text" in raw_result:
        return OcrText(
            text=str(raw_result.get("text") or ""),
            confidence=normalize_confidence(raw_result.get("confidence", 0.0)),
        )

    detection_data: list[dict[str, Any]] = []
    for detection in raw_result.get("detections", []):
        bbox, (text, confidence) = detection
        if not _is_valid_bbox(bbox):
            raise ValueError(f"malformed detection bounding box: {bbox!r}")
        if confidence < MIN_DETECTION_CONFIDENCE or not str(text).strip():
            continue
        detection_data.append({"text": str(text).strip(), "confidence": float(confidence), **_detection_geometry(bbox)})

    if not detection_data:
        return OcrText(text="", confidence=0.0)

    lines = _group_detections_into_lines(detection_data)
    full_text = "\n".join(" ".join(det["text"] for det in line) for line in lines)
    average = sum(det["confidence"] for det in detection_data) / len(detection_data)
    return OcrText(text=full_text, confidence=normalize_confidence(average))
