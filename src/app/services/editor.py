"""
Editor Service: form state <-> document (edit time, no persistence).

Form field names:
- title
- field.<key>                 raw text of a field
- style.<key>.<property>      fontFamily / fontSize / fontWeight / textColor
- theme.<role>                primary / accent / background / text
- selected                    selected field key
- overrides                   marker: the form carries every style override
- override.<key>.<property>   style override the form was rendered with
- shown.<key>.<property>      value the style panel displayed for <key>

Raw list/tags text is parsed with keep_trailing_empty so the re-rendered
input keeps a separator the user just typed. The strict normalization
happens on save (DocumentService.save_document).
"""

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from src.core.multivalue import parse_text, serialize_value
from src.core.palette import merge_theme, parse_hex
from src.core.styles import displayed_style
from src.domain.constants import COLOR_ROLES, FONT_SIZE_MAX, FONT_SIZE_MIN
from src.domain.schemas import Document, FieldType, Template
from src.render.renderer import base_style

FIELD_PREFIX = "field."
STYLE_PREFIX = "style."
THEME_PREFIX = "theme."
OVERRIDE_PREFIX = "override."
SHOWN_PREFIX = "shown."
OVERRIDES_MARKER = "overrides"

STYLE_PROPERTIES = ("fontFamily", "fontSize", "fontWeight", "textColor")


@dataclass
class EditorField:
    """One form row of the editor."""
    key: str
    label: str
    type: str
    raw: str
    placeholder: str
    help_text: str
    required: bool
    selected: bool

    @property
    def multiline(self) -> bool:
        return self.type in (FieldType.TEXTAREA.value, FieldType.LIST.value)


def editor_fields(
    template: Template,
    document: Document,
    selected_key: str | None,
) -> list[EditorField]:
    """Form rows in template order, values serialized for editing."""
    rows = []
    for template_field in template.fields:
        rows.append(
            EditorField(
                key=template_field.key,
                label=template_field.label,
                type=template_field.type.value,
                raw=serialize_value(template_field.type, document.data.get(template_field.key)),
                placeholder=template_field.placeholder,
                help_text=template_field.help_text,
                required=template_field.required,
                selected=template_field.key == selected_key,
            )
        )
    return rows


def resolve_selected_key(template: Template, requested: str | None) -> str | None:
    """Requested key when the template has it, else the first field."""
    if requested and template.field(requested) is not None:
        return requested
    return template.fields[0].key if template.fields else None


# =============================================================================
# Form parsing
# =============================================================================


def _int_or_none(value: Any) -> int | None:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def _style_value(prop: str, raw: Any) -> Any:
    """Form input -> style property value (None = ignore)."""
    if raw is None or str(raw).strip() == "":
        return None
    if prop == "fontSize":
        size = _int_or_none(raw)
        if size is None:
            return None
        return min(FONT_SIZE_MAX, max(FONT_SIZE_MIN, size))
    if prop == "fontWeight":
        return _int_or_none(raw)
    if prop == "textColor":
        return raw.strip() if parse_hex(raw) is not None else None
    return str(raw).strip()


def _same(value: Any, shown: Any) -> bool:
    # color inputs report lowercase hex
    if isinstance(value, str) and isinstance(shown, str):
        return value.strip().lower() == shown.strip().lower()
    return value == shown


def carried_overrides(document: Document) -> list[tuple[str, str, Any]]:
    """(key, property, value) of every style override, for hidden inputs."""
    rows = []
    for key, override in document.styles.items():
        for prop in STYLE_PROPERTIES:
            value = (override or {}).get(prop)
            if value is not None:
                rows.append((key, prop, value))
    return rows


def _form_overrides(template: Template, form: Mapping[str, Any]) -> dict[str, dict[str, Any]]:
    """Style overrides carried by override.<key>.<property> inputs."""
    styles: dict[str, dict[str, Any]] = {}
    for template_field in template.fields:
        override = {}
        for prop in STYLE_PROPERTIES:
            value = _style_value(prop, form.get(f"{OVERRIDE_PREFIX}{template_field.key}.{prop}"))
            if value is not None:
                override[prop] = value
        if override:
            styles[template_field.key] = override
    return styles


def apply_edit_form(
    document: Document,
    template: Template,
    form: Mapping[str, Any],
) -> Document:
    """
    Apply editor form values to a copy of the document.

    Only inputs present in the form are applied. When the form carries
    its style overrides (unsaved edits of other fields included), they
    replace the stored ones. A style property is written to the override
    only when it differs from the value the style panel displayed
    (shown.<key>.<property>, else the style of the document).

    Args:
        document: document being edited (not mutated)
        template: its template
        form: submitted form values

    Returns:
        Edited copy of the document
    """
    edited = copy.deepcopy(document)

    for template_field in template.fields:
        name = f"{FIELD_PREFIX}{template_field.key}"
        if name in form:
            edited.data[template_field.key] = parse_text(
                template_field.type,
                form.get(name) or "",
                keep_trailing_empty=True,
            )

    # listing title and the "title" field stay in sync
    has_title_field = template.field("title") is not None
    title = form.get("title")
    if isinstance(title, str) and title != document.title:
        edited.title = title
        if has_title_field:
            edited.data["title"] = title
    elif has_title_field:
        field_title = str(edited.data.get("title") or "").strip()
        if field_title:
            edited.title = field_title

    if OVERRIDES_MARKER in form:
        edited.styles = _form_overrides(template, form)

    for template_field in template.fields:
        key = template_field.key
        current = displayed_style(template, edited, key, base_style(template.id, key))
        override = dict(edited.styles.get(key) or {})
        changed = False
        for prop in STYLE_PROPERTIES:
            name = f"{STYLE_PREFIX}{key}.{prop}"
            if name not in form:
                continue
            value = _style_value(prop, form.get(name))
            rendered = form.get(f"{SHOWN_PREFIX}{key}.{prop}")
            previous = _style_value(prop, rendered) if rendered is not None else current.get(prop)
            if value is None or _same(value, previous):
                continue
            override[prop] = value
            changed = True
        if changed:
            edited.styles[key] = override

    theme = merge_theme(template.colors.to_dict(), document.theme)
    for role in COLOR_ROLES:
        value = form.get(f"{THEME_PREFIX}{role}")
        if isinstance(value, str) and parse_hex(value) is not None and not _same(value, theme[role]):
            edited.theme[role] = value.strip()

    return edited


def form_payload(document: Document) -> dict[str, Any]:
    """Saved parts of an edited document (DocumentService.save_document kwargs)."""
    return {
        "title": document.title,
        "data": document.data,
        "styles": document.styles,
        "theme": document.theme,
    }
