"""
Word (DOCX) print export: python-docx based.

One section per template field, in template order:
- heading: field label
- body: text paragraphs, or one bullet per item for list/tags fields
- runs carry the effective field style (font, size, weight, color)
"""

import io
from pathlib import Path

from docx import Document as DocxDocument
from docx.document import Document as WordDocument
from docx.shared import Pt, RGBColor

from src.core.multivalue import as_string_list, serialize_value
from src.core.palette import parse_hex
from src.core.styles import effective_style
from src.domain.errors import ErrorCodes, ExportError
from src.domain.schemas import Document, FieldStyle, Template, TemplateField
from src.render.context import PLACEHOLDER
from src.render.renderer import base_style

# CSS generic families -> fonts Word knows
FONT_FAMILY_MAP = {
    "ui-sans-serif": "Arial",
    "ui-serif": "Georgia",
    "ui-monospace": "Courier New",
}

BOLD_WEIGHT_THRESHOLD = 600


def word_font_name(font_family: str | None) -> str | None:
    """CSS font-family value -> Word font name."""
    if not font_family:
        return None
    first = font_family.split(",")[0].strip().strip("\"'")
    return FONT_FAMILY_MAP.get(first, first) or None


class DocxRenderer:
    """
    Word export of a document.

    Usage:
        renderer = DocxRenderer(template)
        renderer.render(document, output_path)
    """

    def __init__(self, template: Template):
        """
        Args:
            template: resolved template of the documents to export
        """
        self.template = template

    def render(self, document: Document, output_path: Path) -> Path:
        """
        Write the document to a .docx file.

        Returns:
            Saved file path

        Raises:
            ExportError: EXPORT_FAILED
        """
        try:
            doc = self._build(document)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            doc.save(output_path)
            return output_path
        except ExportError:
            raise
        except Exception as e:
            raise ExportError(
                ErrorCodes.EXPORT_FAILED,
                "DOCX export failed",
                document_id=document.id,
                error=str(e),
            ) from e

    def render_bytes(self, document: Document) -> bytes:
        """Same as render(), in memory (HTTP download)."""
        try:
            doc = self._build(document)
            buffer = io.BytesIO()
            doc.save(buffer)
            return buffer.getvalue()
        except Exception as e:
            raise ExportError(
                ErrorCodes.EXPORT_FAILED,
                "DOCX export failed",
                document_id=document.id,
                error=str(e),
            ) from e

    def _build(self, document: Document) -> WordDocument:
        doc = DocxDocument()
        doc.add_heading(document.title, 0)
        doc.add_paragraph(self.template.name)

        for template_field in self.template.fields:
            doc.add_heading(template_field.label, level=2)
            style = effective_style(
                self.template,
                document,
                template_field.key,
                base_style(self.template.id, template_field.key),
            )
            self._add_value(doc, document, template_field, style)

        return doc

    def _add_value(
        self,
        doc: WordDocument,
        document: Document,
        template_field: TemplateField,
        style: FieldStyle,
    ) -> None:
        value = document.data.get(template_field.key)

        if template_field.type.is_multi_value:
            items = as_string_list(value)
            if not items:
                self._styled_run(doc.add_paragraph(), PLACEHOLDER, style)
            for item in items:
                self._styled_run(doc.add_paragraph(style="List Bullet"), item, style)
            return

        text = serialize_value(template_field.type, value) or PLACEHOLDER
        for line in text.splitlines() or [text]:
            self._styled_run(doc.add_paragraph(), line, style)

    def _styled_run(self, paragraph, text: str, style: FieldStyle) -> None:
        run = paragraph.add_run(text)
        font_name = word_font_name(style.font_family)
        if font_name:
            run.font.name = font_name
        if style.font_size is not None:
            run.font.size = Pt(style.font_size)
        if style.font_weight is not None:
            run.font.bold = style.font_weight >= BOLD_WEIGHT_THRESHOLD
        rgb = parse_hex(style.text_color)
        if rgb is not None:
            run.font.color.rgb = RGBColor(*rgb)


def render_docx(document: Document, template: Template, output_path: Path) -> Path:
    """
    Word export (shortcut).

    Args:
        document: document to export
        template: its template
        output_path: target .docx path

    Returns:
        Saved file path
    """
    renderer = DocxRenderer(template)
    return renderer.render(document, output_path)
