"""
Extraction coordinator that routes uploads to the right extractor.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional, Protocol

from engagement.config import OCR_LANG, OCR_TIMEOUT_SECONDS
from engagement.extraction.common import DocumentKind, detect_document_kind
from engagement.extraction.image import ImageExtractor
from engagement.extraction.pdf import PdfExtractor
from engagement.extraction.text import PlainTextExtractor

logger = logging.getLogger(__name__)


class Extractor(Protocol):
    async def extract(self, content: bytes) -> str: ...


class DocumentExtractor:
    """Turns uploaded documents into plain text.

    OCR settings are passed in explicitly so different callers (or tests) can
    run with their own language data and timeout.
    """

    def __init__(self, ocr_lang: str = OCR_LANG, ocr_timeout: int = OCR_TIMEOUT_SECONDS):
        self.extractors: Dict[DocumentKind, Extractor] = {
            DocumentKind.PDF: PdfExtractor(),
            DocumentKind.IMAGE: ImageExtractor(lang=ocr_lang, timeout=ocr_timeout),
            DocumentKind.TEXT: PlainTextExtractor(),
        }

    async def extract(
        self,
        content: bytes,
        filename: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> str:
        """
        Extract text from an uploaded document.

        Args:
            content: Raw file bytes
            filename: Client-supplied file name
            content_type: Client-supplied MIME type

        Returns:
            Extracted text (may be empty)

        Raises:
            UnsupportedDocumentError: If the document type is unknown
            ExtractionError: If the matching extractor fails
        """
        kind = detect_document_kind(filename, content_type)
        logger.info("Extracting text from %s as %s (%d bytes)", filename or "upload", kind.value, len(content))
        return await self.extractors[kind].extract(content)
