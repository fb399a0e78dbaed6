"""
PDF text extractor.
"""
from __future__ import annotations

import asyncio
import logging
from io import BytesIO
from typing import List

import pypdf
from pypdf.errors import PyPdfError

from engagement.extraction.common import ExtractionError

logger = logging.getLogger(__name__)


class PdfExtractor:
    """Extracts the embedded text layer of a PDF with pypdf."""

    def _extract(self, content: bytes) -> str:
        try:
            reader = pypdf.PdfReader(BytesIO(content))
            pages: List[str] = []
            for page in reader.pages:
                pages.append(page.extract_text() or "")
        except (PyPdfError, ValueError, KeyError, TypeError) as e:
            raise ExtractionError(f"Failed to extract text from PDF: {e}") from e

        logger.debug("Extracted %d page(s) from PDF", len(pages))
        return "\n\n".join(pages)

    async def extract(self, content: bytes) -> str:
        """
        Extract text from PDF bytes.

        Args:
            content: Raw PDF file content

        Returns:
            Text of all pages separated by blank lines ("" for image-only PDFs)

        Raises:
            ExtractionError: If the PDF cannot be parsed
        """
        return await asyncio.to_thread(self._extract, content)
