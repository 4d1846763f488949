"""Domain layer: errors and schemas."""

from .errors import (
    DomainError,
    ErrorCodes,
    ExportError,
    PaletteError,
    StoreError,
    TemplateError,
)
from .schemas import (
    Document,
    DocumentIndexEntry,
    FieldStyle,
    FieldType,
    Template,
    TemplateColors,
    TemplateField,
)

__all__ = [
    "DomainError",
    "ErrorCodes",
    "ExportError",
    "PaletteError",
    "StoreError",
    "TemplateError",
    "Document",
    "DocumentIndexEntry",
    "FieldStyle",
    "FieldType",
    "Template",
    "TemplateColors",
    "TemplateField",
]
