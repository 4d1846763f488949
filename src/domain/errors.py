"""
Error definitions for the storage and template layers.

Rules:
- Core presentation functions (codec, merger, palette, renderer) never raise;
  bad data degrades to documented defaults.
- Storage/registry failures raise explicitly with an error code.
"""

from typing import Any


class DomainError(Exception):
    """
    Base error carrying a machine-readable code.

    Usage:
        raise StoreError("DOCUMENT_NOT_FOUND", "Document not found", document_id=doc_id)
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(f"[{code}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """For logs / JSON error bodies."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


class TemplateError(DomainError):
    """Template lookup / load error."""


class StoreError(DomainError):
    """Document storage error."""


class PaletteError(DomainError):
    """Unknown palette preset."""


class ExportError(DomainError):
    """Print export (DOCX) failure."""


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """Error code constants."""

    # === Templates ===
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
    INVALID_TEMPLATE_ID = "INVALID_TEMPLATE_ID"
    INVALID_TEMPLATE = "INVALID_TEMPLATE"

    # === Documents ===
    DOCUMENT_NOT_FOUND = "DOCUMENT_NOT_FOUND"
    DOCUMENT_CORRUPT = "DOCUMENT_CORRUPT"
    MISSING_TEMPLATE_ID = "MISSING_TEMPLATE_ID"
    INDEX_LOCK_TIMEOUT = "INDEX_LOCK_TIMEOUT"

    # === Palettes ===
    PALETTE_NOT_FOUND = "PALETTE_NOT_FOUND"

    # === Export ===
    EXPORT_FAILED = "EXPORT_FAILED"


def is_not_found(error: DomainError) -> bool:
    """True for any *_NOT_FOUND code."""
    return error.code.endswith("_NOT_FOUND")
