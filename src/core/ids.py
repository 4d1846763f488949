"""
ID and timestamp generation.

- document id: UUID v4 (hex, file-name safe)
- timestamps: ISO-8601 UTC
"""

import uuid
from datetime import UTC, datetime


def generate_document_id() -> str:
    """
    Document ID.

    Unique, not derived from content: duplicating a document
    yields a new id.

    Returns:
        32-char hex string
    """
    return uuid.uuid4().hex


def now_iso() -> str:
    """Current UTC time, ISO-8601 with milliseconds ("...Z")."""
    now = datetime.now(UTC)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def is_safe_id(value: str) -> bool:
    """True when value can be used as a file name (no path tricks)."""
    if not value or len(value) > 64:
        return False
    return all(c.isascii() and (c.isalnum() or c in "-_") for c in value)
