"""Client for the external OCR service that turns receipt images into text."""

import time
from pathlib import Path
from typing import Any

import httpx

from pantryscan.runtime.logging import get_logger

logger = get_logger(__name__)

DEFAULT_OCR_URL = "http://localhost:8001"
OCR_TIMEOUT_SECONDS = 60.0

_MIME_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".webp": "image/webp",
}


class OCRServiceUnavailable(RuntimeError):
    """Raised when the OCR service cannot be reached or returns an error."""


def ocr_result_to_text(result: dict[str, Any]) -> str:
    """
    Flatten an OCR service response into multi-line text.

    Accepts either ``{"full_text": "..."}`` or PaddleOCR-style
    ``{"detections": [[bbox, [text, confidence]], ...]}``, whose texts are
    joined one per line in detection order.
    """
    full_text = result.get("full_text")
    if isinstance(full_text, str):
        return full_text

    lines: list[str] = []
    for detection in result.get("detections", []):
        try:
            _bbox, (text, _confidence) = detection
        except (TypeError, ValueError):
            logger.debug("Skipping malformed OCR detection: %r", detection)
            continue
        lines.append(str(text))
    return "\n".join(lines)


def fetch_receipt_text(image_path: Path, ocr_url: str = DEFAULT_OCR_URL) -> str:
    """
    Send a receipt image to the OCR service and return the recognized text.

    Raises:
        OCRServiceUnavailable: if the service is unreachable, answers with a
            non-200 status, or returns a body that is not JSON.
    """
    ocr_url = ocr_url.rstrip("/")
    logger.info("Sending receipt to OCR service at %s...", ocr_url)

    image_bytes = image_path.read_bytes()
    mime_type = _MIME_TYPES.get(image_path.suffix.lower(), "image/jpeg")

    try:
        start_time = time.time()
        response = httpx.post(
            f"{ocr_url}/ocr",
            files={"file": (image_path.name, image_bytes, mime_type)},
            timeout=OCR_TIMEOUT_SECONDS,
        )
        elapsed_time = time.time() - start_time
        logger.info("OCR service returned in %.2f seconds", elapsed_time)
    except httpx.RequestError as e:
        logger.error("Failed to connect to OCR service: %s", e)
        raise OCRServiceUnavailable(f"Failed to connect to OCR service: {e}") from e

    if response.status_code != 200:
        logger.error("OCR service error: %s", response.status_code)
        raise OCRServiceUnavailable(f"OCR service error: {response.status_code}")

    try:
        result = response.json()
    except ValueError as e:
        raise OCRServiceUnavailable("OCR service returned a non-JSON body") from e
    if not isinstance(result, dict):
        raise OCRServiceUnavailable("OCR service returned an unexpected payload")

    return ocr_result_to_text(result)
