"""
Document Service: template resolution + normalization around the store.

Rules:
- create: templateId required and must resolve to a loaded template
- save: list/tags fields normalized before persistence (no empty items)
- templateId is resolved at read time; a template removed later does not
  block reads or saves (values are then stored as given)
"""

import logging
from collections import Counter
from typing import Any

from src.core.multivalue import as_string, normalize_document_data
from src.core.palette import apply_palette, get_preset
from src.documents.store import DocumentStore
from src.domain.constants import DUPLICATE_TITLE_SUFFIX
from src.domain.errors import ErrorCodes, StoreError
from src.domain.schemas import Document, DocumentIndexEntry, FieldStyle, Template
from src.templates.registry import TemplateRegistry

logger = logging.getLogger(__name__)

TITLE_FIELD_KEY = "title"


def clean_styles(styles: dict[str, Any] | None) -> dict[str, dict[str, Any]]:
    """Drop non-dict and empty overrides, strip unknown style properties."""
    cleaned: dict[str, dict[str, Any]] = {}
    for key, value in (styles or {}).items():
        style = FieldStyle.from_dict(value)
        if not style.is_empty():
            cleaned[key] = style.to_dict()
    return cleaned


def clean_theme(theme: dict[str, Any] | None) -> dict[str, str]:
    return {k: v for k, v in (theme or {}).items() if isinstance(v, str) and v}


class DocumentService:
    """
    Document use cases.

    Usage:
        service = DocumentService(store, registry)
        doc = service.create_document("sido-orange", title="Candide")
        service.save_document(doc.id, data={"themes": "a, b ,c"})
    """

    def __init__(self, store: DocumentStore, registry: TemplateRegistry):
        self.store = store
        self.registry = registry

    # =========================================================================
    # Read
    # =========================================================================

    def list_documents(self) -> list[DocumentIndexEntry]:
        return self.store.list_index()

    def count_by_template(self) -> dict[str, int]:
        """Number of documents per template id (home page)."""
        return dict(Counter(entry.template_id for entry in self.store.list_index()))

    def open_document(self, document_id: str) -> tuple[Document, Template]:
        """
        Document + its template.

        Raises:
            StoreError: DOCUMENT_NOT_FOUND
            TemplateError: TEMPLATE_NOT_FOUND
        """
        document = self.store.get(document_id)
        template = self.registry.get(document.template_id)
        return document, template

    # =========================================================================
    # Write
    # =========================================================================

    def create_document(
        self,
        template_id: str | None,
        title: str | None = None,
        data: dict[str, Any] | None = None,
        styles: dict[str, Any] | None = None,
        theme: dict[str, Any] | None = None,
    ) -> Document:
        """
        Create a document from a template.

        Raises:
            StoreError: MISSING_TEMPLATE_ID
            TemplateError: TEMPLATE_NOT_FOUND
        """
        if not isinstance(template_id, str) or not template_id:
            raise StoreError(
                ErrorCodes.MISSING_TEMPLATE_ID,
                "templateId is required",
            )

        template = self.registry.get(template_id)

        return self.store.create(
            template,
            title=title,
            data=normalize_document_data(template, data or {}),
            styles=clean_styles(styles),
            theme=clean_theme(theme) if theme is not None else None,
        )

    def save_document(
        self,
        document_id: str,
        title: str | None = None,
        data: dict[str, Any] | None = None,
        styles: dict[str, Any] | None = None,
        theme: dict[str, Any] | None = None,
    ) -> Document:
        """
        Save edits: full replace of the given parts, updatedAt refreshed.

        When no title is given and the template has a "title" field, the
        listing title follows that field.

        Raises:
            StoreError: DOCUMENT_NOT_FOUND
        """
        existing = self.store.get(document_id)
        template = self.registry.find(existing.template_id)

        if data is not None and template is not None:
            data = normalize_document_data(template, data)

        if title is None and data is not None and template is not None:
            if template.field(TITLE_FIELD_KEY) is not None:
                field_title = as_string(data.get(TITLE_FIELD_KEY)).strip()
                if field_title:
                    title = field_title

        return self.store.update(
            document_id,
            title=title,
            data=data,
            styles=clean_styles(styles) if styles is not None else None,
            theme=clean_theme(theme) if theme is not None else None,
        )

    def duplicate_document(self, document_id: str) -> Document:
        """Copy of a document under a new id ("<title> (copie)")."""
        source = self.store.get(document_id)
        template = self.registry.get(source.template_id)

        return self.store.create(
            template,
            title=f"{source.title}{DUPLICATE_TITLE_SUFFIX}",
            data=source.data,
            styles=source.styles,
            theme=source.theme,
        )

    def apply_palette_preset(self, document_id: str, preset_id: str) -> Document:
        """
        Merge a palette preset's theme into the document theme and save.

        Raises:
            PaletteError: PALETTE_NOT_FOUND
            StoreError: DOCUMENT_NOT_FOUND
        """
        preset = get_preset(preset_id)
        document = self.store.get(document_id)
        theme = apply_palette(document.theme, preset.colors)
        logger.info(f"Applying palette '{preset_id}' to document {document_id}")
        return self.store.update(document_id, theme=theme)

    def reset_field_style(self, document_id: str, key: str) -> Document:
        """Drop a field's style override."""
        document = self.store.get(document_id)
        styles = {k: v for k, v in document.styles.items() if k != key}
        return self.store.update(document_id, styles=styles)
