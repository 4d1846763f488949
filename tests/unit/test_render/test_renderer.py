"""
test_renderer.py - template renderer tests

DoD:
- dispatch by template id, unknown id → placeholder (never raises)
- every template field has a selectable region
- selection highlight + activation callback
- values read through the codec (legacy fan-out), styles through the merger
"""

import pytest

from src.render.context import PLACEHOLDER
from src.render.renderer import (
    LAYOUTS,
    UNKNOWN_TEMPLATE_CLASS,
    activate,
    base_style,
    registered_template_ids,
    render,
)

# =============================================================================
# Dispatch
# =============================================================================


class TestDispatch:
    def test_registered_ids(self):
        assert registered_template_ids() == ["cahiers-mint", "sido-orange", "sido-vrilles"]

    def test_unknown_template_placeholder(self, sample_template, make_document):
        tree = render(make_document("sample"), sample_template)

        assert tree.has_class(UNKNOWN_TEMPLATE_CLASS)
        assert "sample" in tree.text_content()
        assert tree.attrs["data-template-id"] == "sample"
        assert tree.regions() == []

    def test_unknown_template_logs_warning(self, sample_template, make_document, caplog):
        render(make_document("sample"), sample_template)
        assert "sample" in caplog.text

    @pytest.mark.parametrize("template_id", sorted(LAYOUTS))
    def test_sheet_root(self, registry, make_document, template_id):
        template = registry.get(template_id)

        tree = render(make_document(template_id), template)

        assert tree.has_class("sheet")
        assert tree.has_class(f"sheet-{template_id}")


# =============================================================================
# Regions / Selection
# =============================================================================


class TestRegions:
    @pytest.mark.parametrize("template_id", sorted(LAYOUTS))
    def test_every_field_has_a_region(self, registry, make_document, template_id):
        template = registry.get(template_id)

        tree = render(make_document(template_id), template)

        region_keys = {node.field_key for node in tree.regions()}
        assert set(template.field_keys()) <= region_keys

    def test_selected_region_marked(self, sido_orange, make_document):
        tree = render(make_document(), sido_orange, selected_key="quotes")

        selected = [n.field_key for n in tree.regions() if n.selected]
        assert selected == ["quotes"]
        assert tree.find_region("quotes").has_class("selected")

    def test_no_selection(self, sido_orange, make_document):
        tree = render(make_document(), sido_orange)
        assert not any(n.selected for n in tree.regions())

    def test_also_selected_by(self, registry, make_document):
        template = registry.get("sido-vrilles")

        tree = render(make_document("sido-vrilles"), template, selected_key="authorFacts")

        assert tree.find_region("author").selected

    def test_activate_calls_back_with_key(self, sido_orange, make_document):
        clicked = []

        tree = render(make_document(), sido_orange, on_select=clicked.append)

        assert activate(tree, "themes")
        assert clicked == ["themes"]
        assert tree.find_region("themes").has_class("clickable")

    def test_activate_without_callback(self, sido_orange, make_document):
        tree = render(make_document(), sido_orange)

        assert not activate(tree, "themes")
        assert not tree.find_region("themes").has_class("clickable")

    def test_activate_unknown_key(self, sido_orange, make_document):
        tree = render(make_document(), sido_orange, on_select=lambda key: None)
        assert not activate(tree, "nope")


# =============================================================================
# Values / Styles / Theme
# =============================================================================


class TestValues:
    def test_empty_fields_show_placeholder(self, sido_orange, make_document):
        tree = render(make_document(), sido_orange)

        assert PLACEHOLDER in tree.find_region("context").text_content()
        assert PLACEHOLDER in tree.find_region("quotes").text_content()

    def test_list_items_rendered(self, sido_orange, make_document):
        doc = make_document(data={"quotes": ["first", "second"]})

        tree = render(doc, sido_orange)

        items = [n.text for n in tree.find_region("quotes").walk() if n.tag == "li"]
        assert items == ["first", "second"]

    def test_legacy_tags_fanned_out(self, sido_orange, make_document):
        doc = make_document(data={"themes": ["a, b", "c"]})

        tree = render(doc, sido_orange)

        chips = [n.text for n in tree.find_region("themes").walk() if n.has_class("chip")]
        assert chips == ["a", "b", "c"]

    def test_text_value(self, sido_orange, make_document):
        doc = make_document(data={"title": "Candide", "author": "Voltaire"})

        tree = render(doc, sido_orange)

        assert "Candide" in tree.find_region("title").text_content()
        assert "Voltaire" in tree.find_region("author").text_content()


class TestStylesAndTheme:
    def test_layout_base_style(self, sido_orange, make_document):
        tree = render(make_document(), sido_orange)

        styled = [n for n in tree.find_region("author").walk() if n.style]
        assert styled[0].style["font-size"] == f"{base_style('sido-orange', 'author')['fontSize']}px"

    def test_override_applied(self, sido_orange, make_document):
        doc = make_document(styles={"author": {"fontSize": 18, "textColor": "#ff0000"}})

        tree = render(doc, sido_orange)

        styled = [n for n in tree.find_region("author").walk() if n.style]
        assert styled[0].style["font-size"] == "18px"
        assert styled[0].style["color"] == "#ff0000"

    def test_title_follows_theme_text(self, sido_orange, make_document):
        tree = render(make_document(theme={"text": "#123456"}), sido_orange)

        styled = [n for n in tree.find_region("title").walk() if n.style]
        assert styled[0].style["color"] == "#123456"

    def test_title_color_override_wins(self, sido_orange, make_document):
        doc = make_document(theme={"text": "#123456"}, styles={"title": {"textColor": "#ff0000"}})

        tree = render(doc, sido_orange)

        styled = [n for n in tree.find_region("title").walk() if n.style]
        assert styled[0].style["color"] == "#ff0000"

    def test_theme_override(self, sido_orange, make_document):
        doc = make_document(theme={"background": "#000000"})

        tree = render(doc, sido_orange)

        assert tree.style["background"] == "#000000"

    def test_template_colors_by_default(self, sido_orange, make_document):
        tree = render(make_document(), sido_orange)
        assert tree.style["background"] == sido_orange.colors.background

    def test_document_not_mutated(self, sido_orange, make_document):
        doc = make_document(data={"themes": ["a, b"]})

        render(doc, sido_orange, selected_key="themes")

        assert doc.data == {"themes": ["a, b"]}
        assert doc.theme == {}
