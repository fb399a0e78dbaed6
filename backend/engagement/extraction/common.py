"""
Common utilities for document text extractors.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from engagement.config import IMAGE_EXTENSIONS, PDF_EXTENSIONS, TEXT_EXTENSIONS


class ExtractionError(Exception):
    """Raised when text cannot be extracted from an uploaded document."""


class UnsupportedDocumentError(ExtractionError):
    """Raised when the document type is not one we can read."""


class DocumentKind(str, Enum):
    PDF = "pdf"
    IMAGE = "image"
    TEXT = "text"


def detect_document_kind(filename: Optional[str], content_type: Optional[str]) -> DocumentKind:
    """
    Decide which extractor handles a document.

    The content type wins when it is specific; the file extension is used
    for generic types such as ``application/octet-stream``.

    Args:
        filename: Client-supplied file name, may be None
        content_type: Client-supplied MIME type, may be None

    Returns:
        The matching DocumentKind

    Raises:
        UnsupportedDocumentError: If neither hint matches a known kind
    """
    mimetype = (content_type or "").split(";")[0].strip().lower()
    name = (filename or "").lower()

    if mimetype == "application/pdf" or name.endswith(PDF_EXTENSIONS):
        return DocumentKind.PDF
    if mimetype.startswith("image/") or name.endswith(IMAGE_EXTENSIONS):
        return DocumentKind.IMAGE
    if mimetype.startswith("text/") or name.endswith(TEXT_EXTENSIONS):
        return DocumentKind.TEXT

    raise UnsupportedDocumentError(
        f"Unsupported document type: {content_type or 'unknown'} ({filename or 'unnamed'})"
    )
