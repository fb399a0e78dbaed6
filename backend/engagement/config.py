"""
Application configuration with environment variable support.
"""
from __future__ import annotations

import os


def _get_env_int(key: str, default: int) -> int:
    """Get integer value from environment variable with fallback."""
    try:
        return int(os.getenv(key, default))
    except (ValueError, TypeError):
        return default


def _get_env_list(key: str, default: list[str], separator: str = ",") -> list[str]:
    """Get list value from environment variable with fallback."""
    value = os.getenv(key)
    if not value:
        return default
    return [item.strip() for item in value.split(separator) if item.strip()]


def _get_env_choice(key: str, default: str, choices: tuple[str, ...]) -> str:
    """Get a lowercase value restricted to ``choices``, falling back to ``default``."""
    value = (os.getenv(key) or "").strip().lower()
    return value if value in choices else default


# Suggestion Settings
# "minimal" runs the 4 core rules, "extended" adds 9 copywriting checks
SUGGESTION_RULE_SET: str = _get_env_choice("SUGGESTION_RULE_SET", "minimal", ("minimal", "extended"))

# Upload Settings
MAX_UPLOAD_MB: int = _get_env_int("MAX_UPLOAD_MB", 15)
MAX_UPLOAD_BYTES: int = MAX_UPLOAD_MB * 1024 * 1024

# OCR Settings
OCR_LANG: str = os.getenv("OCR_LANG", "eng")
OCR_TIMEOUT_SECONDS: int = _get_env_int("OCR_TIMEOUT_SECONDS", 30)

# Extensions accepted when the client sends a generic content type
PDF_EXTENSIONS = (".pdf",)
IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".bmp", ".tif", ".tiff", ".gif", ".webp")
TEXT_EXTENSIONS = (".txt", ".md")

# CORS Configuration
CORS_ALLOW_ORIGINS: list[str] = _get_env_list("CORS_ALLOW_ORIGINS", ["*"])

# Logging Configuration
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT: str = os.getenv(
    "LOG_FORMAT",
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
