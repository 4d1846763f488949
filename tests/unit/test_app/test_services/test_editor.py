"""
test_editor.py - editor form tests

DoD:
- form values applied to a copy (document untouched)
- list/tags keep a just-typed trailing separator while editing
- style override written only for properties that changed
- overrides carried by the form survive a change of selection
- theme accepts valid hex only
"""

from src.app.services.editor import (
    apply_edit_form,
    carried_overrides,
    editor_fields,
    form_payload,
    resolve_selected_key,
)


class TestEditorFields:
    def test_rows_in_template_order(self, sido_orange, make_document):
        doc = make_document(data={"themes": ["a", "b"], "quotes": ["x", "y"]})

        rows = editor_fields(sido_orange, doc, "themes")

        assert [r.key for r in rows] == sido_orange.field_keys()
        by_key = {r.key: r for r in rows}
        assert by_key["themes"].raw == "a, b"
        assert by_key["quotes"].raw == "x\ny"
        assert by_key["themes"].selected
        assert by_key["quotes"].multiline
        assert not by_key["title"].multiline


class TestResolveSelectedKey:
    def test_known(self, sido_orange):
        assert resolve_selected_key(sido_orange, "quotes") == "quotes"

    def test_unknown_falls_back_to_first(self, sido_orange):
        assert resolve_selected_key(sido_orange, "nope") == "title"
        assert resolve_selected_key(sido_orange, None) == "title"


class TestApplyEditForm:
    def test_document_not_mutated(self, sido_orange, make_document):
        doc = make_document(data={"author": "Voltaire"})

        apply_edit_form(doc, sido_orange, {"field.author": "Arouet"})

        assert doc.data == {"author": "Voltaire"}

    def test_tags_keep_trailing_separator(self, sido_orange, make_document):
        edited = apply_edit_form(make_document(), sido_orange, {"field.themes": "x,\n"})
        assert edited.data["themes"] == ["x", ""]

    def test_title_input_syncs_title_field(self, sido_orange, make_document):
        doc = make_document(title="Old", data={"title": "Old"})

        edited = apply_edit_form(
            doc,
            sido_orange,
            {"title": "New", "field.title": "Old"},
        )

        assert edited.title == "New"
        assert edited.data["title"] == "New"

    def test_title_field_syncs_title(self, sido_orange, make_document):
        doc = make_document(title="Old", data={"title": "Old"})

        edited = apply_edit_form(doc, sido_orange, {"title": "Old", "field.title": "Candide"})

        assert edited.title == "Candide"

    def test_unchanged_style_not_written(self, sido_orange, make_document):
        doc = make_document()

        edited = apply_edit_form(
            doc,
            sido_orange,
            {
                "style.title.fontSize": "22",
                "style.title.fontFamily": "ui-serif",
                "style.title.fontWeight": "800",
            },
        )

        assert edited.styles == {}

    def test_changed_style_written(self, sido_orange, make_document):
        edited = apply_edit_form(make_document(), sido_orange, {"style.title.fontSize": "30"})
        assert edited.styles == {"title": {"fontSize": 30}}

    def test_font_size_clamped(self, sido_orange, make_document):
        edited = apply_edit_form(make_document(), sido_orange, {"style.author.fontSize": "500"})
        assert edited.styles["author"]["fontSize"] == 48

    def test_text_color_case_insensitive(self, sido_orange, make_document):
        doc = make_document(theme={"text": "#1F2937"})

        edited = apply_edit_form(doc, sido_orange, {"style.author.textColor": "#1f2937"})

        assert edited.styles == {}

    def test_carried_overrides_replace_stored(self, sido_orange, make_document):
        doc = make_document(styles={"author": {"fontSize": 20}})

        edited = apply_edit_form(
            doc,
            sido_orange,
            {"overrides": "1", "override.title.fontSize": "30", "override.title.fontWeight": "x"},
        )

        assert edited.styles == {"title": {"fontSize": 30}}

    def test_stored_overrides_kept_without_marker(self, sido_orange, make_document):
        doc = make_document(styles={"author": {"fontSize": 20}})

        edited = apply_edit_form(doc, sido_orange, {"override.title.fontSize": "30"})

        assert edited.styles == {"author": {"fontSize": 20}}

    def test_compared_against_shown_values(self, sido_orange, make_document):
        """Panel rendered with an unsaved title size of 30: 30 is not a change, 22 is."""
        form = {
            "overrides": "1",
            "override.title.fontSize": "30",
            "shown.title.fontSize": "30",
            "style.title.fontSize": "30",
        }

        assert apply_edit_form(make_document(), sido_orange, form).styles == {"title": {"fontSize": 30}}

        form["style.title.fontSize"] = "22"
        assert apply_edit_form(make_document(), sido_orange, form).styles == {"title": {"fontSize": 22}}

    def test_theme_text_shown_in_panel_not_pinned(self, sido_orange, make_document):
        edited = apply_edit_form(
            make_document(),
            sido_orange,
            {
                "theme.text": "#123456",
                "shown.author.textColor": "#123456",
                "style.author.textColor": "#123456",
            },
        )

        assert edited.styles == {}
        assert edited.theme == {"text": "#123456"}

    def test_theme_valid_hex_only(self, sido_orange, make_document):
        edited = apply_edit_form(
            make_document(),
            sido_orange,
            {"theme.primary": "#123456", "theme.accent": "red"},
        )

        assert edited.theme == {"primary": "#123456"}

    def test_theme_unchanged_not_written(self, sido_orange, make_document):
        edited = apply_edit_form(
            make_document(),
            sido_orange,
            {"theme.background": sido_orange.colors.background.lower()},
        )

        assert edited.theme == {}


def test_form_payload(make_document):
    doc = make_document(title="T", data={"a": "b"})

    assert form_payload(doc) == {
        "title": "T",
        "data": {"a": "b"},
        "styles": {},
        "theme": {},
    }


def test_carried_overrides(make_document):
    doc = make_document(styles={"title": {"fontSize": 30, "textColor": "#ff0000"}, "author": {}})

    assert carried_overrides(doc) == [("title", "fontSize", 30), ("title", "textColor", "#ff0000")]
