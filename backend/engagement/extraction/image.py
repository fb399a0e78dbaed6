"""
OCR text extractor for images.
"""
from __future__ import annotations

import asyncio
import logging
from io import BytesIO

import pytesseract
from PIL import Image, UnidentifiedImageError

from engagement.config import OCR_LANG, OCR_TIMEOUT_SECONDS
from engagement.extraction.common import ExtractionError

logger = logging.getLogger(__name__)


class ImageExtractor:
    """Runs Tesseract OCR over an uploaded image."""

    def __init__(self, lang: str = OCR_LANG, timeout: int = OCR_TIMEOUT_SECONDS):
        self.lang = lang
        self.timeout = timeout

    def _extract(self, content: bytes) -> str:
        try:
            with Image.open(BytesIO(content)) as image:
                image.load()
                text = pytesseract.image_to_string(image, lang=self.lang, timeout=self.timeout)
        except UnidentifiedImageError as e:
            raise ExtractionError(f"Failed to extract text from image: unreadable image ({e})") from e
        except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError, OSError) as e:
            raise ExtractionError(f"Failed to extract text from image: {e}") from e
        except RuntimeError as e:
            # pytesseract signals its timeout with a bare RuntimeError
            if "timeout" in str(e).lower():
                raise ExtractionError(
                    f"Failed to extract text from image: OCR timed out after {self.timeout}s"
                ) from e
            raise ExtractionError(f"Failed to extract text from image: OCR failed ({e})") from e

        logger.debug("OCR (%s) produced %d characters", self.lang, len(text or ""))
        return text or ""

    async def extract(self, content: bytes) -> str:
        """
        Extract text from image bytes with OCR.

        Args:
            content: Raw image file content

        Returns:
            Recognized text

        Raises:
            ExtractionError: If the image is unreadable or OCR fails
        """
        return await asyncio.to_thread(self._extract, content)
