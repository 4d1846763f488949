"""
Multi-value codec: free-form text <-> ordered list of short strings.

Used by "list" (one item per line) and "tags" (comma separated) fields.

Directions:
- serialize_value(): stored value -> editor text
- parse_text():      editor text -> value (edit time, may keep a trailing "")
- normalize_value(): value -> persisted list (no empty entries, idempotent)

Separators: any run of newline, carriage return, comma, semicolon.
Stored lists may hold legacy items with embedded separators
(["a, b, c"]); every read path fans them out.
"""

import re
from typing import Any

from src.domain.constants import LIST_JOINER, MULTI_VALUE_SEPARATORS, TAGS_JOINER
from src.domain.schemas import FieldType, Template

SEPARATOR_RE = re.compile(f"[{re.escape(MULTI_VALUE_SEPARATORS)}]+")
TRAILING_SEPARATOR_RE = re.compile(f"[{re.escape(MULTI_VALUE_SEPARATORS)}]\\s*$")


# =============================================================================
# Display accessors
# =============================================================================


def as_string(value: Any) -> str:
    """Total string accessor: None -> "", scalars -> str()."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def split_values(text: str) -> list[str]:
    """Split on separators, trim, drop empties."""
    return [part.strip() for part in SEPARATOR_RE.split(text) if part.strip()]


def as_string_list(value: Any) -> list[str]:
    """
    Total list accessor for display.

    - list: every element re-split (legacy fan-out), empties dropped
    - str: split on separators
    - anything else: []
    """
    if isinstance(value, (list, tuple)):
        items: list[str] = []
        for element in value:
            if element is None:
                continue
            items.extend(split_values(as_string(element)))
        return items
    if isinstance(value, str):
        return split_values(value)
    return []


# =============================================================================
# Codec
# =============================================================================


def serialize_value(field_type: FieldType | str, value: Any) -> str:
    """
    Stored value -> editor text.

    Args:
        field_type: template field type
        value: stored value (str, list, scalar or None)

    Returns:
        list: items joined by newline; tags: joined by ", ";
        other types: string passthrough / str() of scalars
    """
    field_type = FieldType.coerce(field_type)

    if isinstance(value, (list, tuple)):
        items = [as_string(v) for v in value if v is not None]
        if field_type == FieldType.TAGS:
            return TAGS_JOINER.join(items)
        return LIST_JOINER.join(items)

    return as_string(value)


def parse_text(
    field_type: FieldType | str,
    raw: str,
    keep_trailing_empty: bool = False,
) -> str | list[str]:
    """
    Editor text -> value.

    keep_trailing_empty: when the raw text ends with a separator (optionally
    followed by whitespace) append one "" so a re-rendered input keeps the
    separator the user just typed.

    Args:
        field_type: template field type
        raw: text typed by the user
        keep_trailing_empty: edit-time behaviour (see above)

    Returns:
        list[str] for list/tags fields, the raw string otherwise
    """
    field_type = FieldType.coerce(field_type)
    raw = as_string(raw)

    if not field_type.is_multi_value:
        return raw

    items = split_values(raw)
    if keep_trailing_empty and TRAILING_SEPARATOR_RE.search(raw):
        items.append("")
    return items


def normalize_value(value: Any) -> list[str]:
    """
    Value -> persisted list.

    Accepts a list of raw strings or a single string; re-splits every
    element and drops every empty result. Idempotent.
    """
    return as_string_list(value)


def normalize_document_data(template: Template, data: dict[str, Any]) -> dict[str, Any]:
    """
    Normalize a document's data map before persistence.

    - list/tags fields -> clean list
    - text/textarea fields -> string
    - keys unknown to the template pass through untouched
    """
    normalized: dict[str, Any] = {}
    for key, value in data.items():
        template_field = template.field(key)
        if template_field is None:
            normalized[key] = value
        elif template_field.type.is_multi_value:
            normalized[key] = normalize_value(value)
        else:
            normalized[key] = serialize_value(template_field.type, value)
    return normalized
