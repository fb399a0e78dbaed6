"""
Plain text "extractor".
"""
from __future__ import annotations

from engagement.extraction.common import ExtractionError


class PlainTextExtractor:
    """Decodes text uploads as UTF-8 (a leading BOM is dropped)."""

    async def extract(self, content: bytes) -> str:
        try:
            return content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ExtractionError(f"Failed to read text file: not valid UTF-8 ({e.reason})") from e
