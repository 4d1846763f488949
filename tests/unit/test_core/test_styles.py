"""
test_styles.py - style merger tests

DoD:
- per-property merge, override wins
- absent properties omitted (surface default applies)
- no validation: unknown families / odd numbers pass through
"""

from src.core.styles import (
    displayed_style,
    effective_style,
    resolve_style,
    style_to_css,
)
from src.domain.constants import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE, DEFAULT_FONT_WEIGHT
from src.domain.schemas import FieldStyle

# =============================================================================
# resolve_style
# =============================================================================


class TestResolveStyle:
    """resolve(default, override)."""

    def test_override_wins(self):
        style = resolve_style({"fontSize": 12}, {"fontSize": 18})
        assert style.font_size == 18

    def test_default_used_when_override_empty(self):
        style = resolve_style({"fontSize": 12}, {})
        assert style.font_size == 12

    def test_per_property(self):
        style = resolve_style(
            {"fontFamily": "ui-serif", "fontSize": 12},
            {"textColor": "#ff0000"},
        )
        assert style == FieldStyle(font_family="ui-serif", font_size=12, text_color="#ff0000")

    def test_absent_everywhere_is_omitted(self):
        style = resolve_style(None, None)
        assert style.to_dict() == {}

    def test_no_validation(self):
        style = resolve_style({"fontFamily": "Comic Whatever"}, {"fontWeight": 950})
        assert style.font_family == "Comic Whatever"
        assert style.font_weight == 950

    def test_garbage_override_ignored(self):
        style = resolve_style({"fontSize": 12}, {"fontSize": "huge", "fontWeight": True})
        assert style.font_size == 12
        assert style.font_weight is None

    def test_inputs_not_mutated(self):
        default = {"fontSize": 12}
        override = {"fontSize": 18}
        resolve_style(default, override)
        assert default == {"fontSize": 12}
        assert override == {"fontSize": 18}


# =============================================================================
# effective_style / CSS
# =============================================================================


class TestEffectiveStyle:
    """Layout base → field defaultStyle → document override."""

    def test_field_default_style(self, sample_template, make_document):
        doc = make_document("sample")
        assert effective_style(sample_template, doc, "summary").font_size == 14

    def test_document_override(self, sample_template, make_document):
        doc = make_document("sample", styles={"summary": {"fontSize": 20}})
        assert effective_style(sample_template, doc, "summary").font_size == 20

    def test_layout_base_lowest(self, sample_template, make_document):
        doc = make_document("sample")
        style = effective_style(
            sample_template,
            doc,
            "summary",
            base={"fontSize": 10, "fontFamily": "ui-serif"},
        )
        assert style.font_size == 14
        assert style.font_family == "ui-serif"

    def test_unknown_key(self, sample_template, make_document):
        doc = make_document("sample")
        assert effective_style(sample_template, doc, "missing").is_empty()


class TestStyleToCss:
    def test_all_properties(self):
        css = style_to_css(
            FieldStyle(font_family="ui-serif", font_size=18, font_weight=700, text_color="#112233")
        )
        assert css == {
            "font-family": "ui-serif",
            "font-size": "18px",
            "font-weight": "700",
            "color": "#112233",
        }

    def test_empty(self):
        assert style_to_css(FieldStyle()) == {}


class TestDisplayedStyle:
    """Style panel values: defaults filled in."""

    def test_defaults_filled(self, sample_template, make_document):
        doc = make_document("sample")
        shown = displayed_style(sample_template, doc, "title")

        assert shown == {
            "fontFamily": DEFAULT_FONT_FAMILY,
            "fontSize": DEFAULT_FONT_SIZE,
            "fontWeight": DEFAULT_FONT_WEIGHT,
            "textColor": "#000000",
        }

    def test_theme_text_color(self, sample_template, make_document):
        doc = make_document("sample", theme={"text": "#333333"})
        assert displayed_style(sample_template, doc, "title")["textColor"] == "#333333"

    def test_override_shown(self, sample_template, make_document):
        doc = make_document("sample", styles={"title": {"fontSize": 30}})
        assert displayed_style(sample_template, doc, "title")["fontSize"] == 30
