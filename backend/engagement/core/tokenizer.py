"""
Text normalization and tokenization.
"""
from __future__ import annotations

import re
from typing import List

_RE_TOKEN = re.compile(r"[#@]*[a-z0-9](?:[a-z0-9#@']*[a-z0-9])?")
_RE_BLANK_RUN = re.compile(r"\n{3,}")


def normalize(raw: str) -> str:
    """
    Bring extracted text into a canonical whitespace form.

    Line endings become ``\\n``, trailing whitespace is stripped from every
    line, runs of three or more newlines collapse to a single blank line and
    the result is trimmed. Applying it twice gives the same result as once.

    Args:
        raw: Text as handed over by the extraction layer (may be empty)

    Returns:
        Normalized text, ``""`` for empty or whitespace-only input
    """
    if not raw:
        return ""

    text = raw.replace("\r\n", "\n").replace("\r", "\n")
    text = "\n".join(line.rstrip() for line in text.split("\n"))
    text = _RE_BLANK_RUN.sub("\n\n", text)
    return text.strip()


def tokenize(text: str) -> List[str]:
    """
    Split text into lowercase tokens of letters, digits, ``#``, ``@`` and ``'``.

    Tokens may start with ``#`` or ``@`` but start and end on a letter or
    digit, so quotes around a word (``'follow'``) are not part of it.

    Args:
        text: Any string

    Returns:
        Tokens in document order, duplicates kept
    """
    if not text:
        return []
    return _RE_TOKEN.findall(text.lower())
