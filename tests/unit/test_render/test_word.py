"""
test_word.py - Word (DOCX) export tests

Targets:
- DocxRenderer: headings per field, bullets for list/tags, run styles
- render_docx: shortcut
"""

import io
from pathlib import Path

import pytest
from docx import Document
from docx.shared import Pt, RGBColor

from src.render.word import DocxRenderer, render_docx, word_font_name

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def filled_document(make_document):
    return make_document(
        title="Candide",
        data={
            "title": "Candide",
            "author": "Voltaire",
            "context": "Conte philosophique.\nParu en 1759.",
            "themes": ["optimisme", "voyage"],
            "quotes": ["Il faut cultiver notre jardin."],
        },
        styles={"author": {"fontSize": 18, "fontWeight": 700, "textColor": "#ff0000"}},
    )


def _paragraph_texts(content: bytes) -> list[str]:
    return [p.text for p in Document(io.BytesIO(content)).paragraphs]


# =============================================================================
# DocxRenderer
# =============================================================================


class TestDocxRenderer:
    def test_render_bytes(self, sido_orange, filled_document):
        content = DocxRenderer(sido_orange).render_bytes(filled_document)

        texts = _paragraph_texts(content)
        assert texts[0] == "Candide"
        assert "Sido orange" in texts
        for label in ("Titre", "Auteur", "Thèmes", "Citations"):
            assert label in texts

    def test_list_items_as_bullets(self, sido_orange, filled_document):
        content = DocxRenderer(sido_orange).render_bytes(filled_document)

        doc = Document(io.BytesIO(content))
        bullets = [p.text for p in doc.paragraphs if p.style.name == "List Bullet"]
        assert bullets == ["optimisme", "voyage", "Il faut cultiver notre jardin."]

    def test_multiline_text_split(self, sido_orange, filled_document):
        texts = _paragraph_texts(DocxRenderer(sido_orange).render_bytes(filled_document))

        assert "Conte philosophique." in texts
        assert "Paru en 1759." in texts

    def test_empty_field_placeholder(self, sido_orange, make_document):
        texts = _paragraph_texts(DocxRenderer(sido_orange).render_bytes(make_document()))
        assert "…" in texts

    def test_run_style(self, sido_orange, filled_document):
        content = DocxRenderer(sido_orange).render_bytes(filled_document)

        doc = Document(io.BytesIO(content))
        run = next(p.runs[0] for p in doc.paragraphs if p.text == "Voltaire")
        assert run.font.size == Pt(18)
        assert run.font.bold is True
        assert run.font.color.rgb == RGBColor(0xFF, 0x00, 0x00)
        assert run.font.name == "Arial"

    def test_render_to_path(self, sido_orange, filled_document, tmp_path: Path):
        output = tmp_path / "out" / "candide.docx"

        result = DocxRenderer(sido_orange).render(filled_document, output)

        assert result == output
        assert output.exists()


def test_render_docx_shortcut(sido_orange, make_document, tmp_path: Path):
    output = render_docx(make_document(), sido_orange, tmp_path / "doc.docx")
    assert output.exists()


class TestWordFontName:
    def test_generic_families_mapped(self):
        assert word_font_name("ui-serif") == "Georgia"
        assert word_font_name("ui-monospace") == "Courier New"

    def test_first_family_unquoted(self):
        assert word_font_name('"Times New Roman", serif') == "Times New Roman"

    def test_empty(self):
        assert word_font_name(None) is None
        assert word_font_name("") is None
