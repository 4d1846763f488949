"""
Core layer: pure presentation logic + persistence helpers.

Role:
- style merging, multi-value codec, palette -> theme
- ids / timestamps, atomic JSON files
"""

from .ids import generate_document_id, now_iso
from .multivalue import (
    as_string,
    as_string_list,
    normalize_document_data,
    normalize_value,
    parse_text,
    serialize_value,
)
from .palette import (
    apply_palette,
    get_preset,
    list_presets,
    merge_theme,
    palette_to_theme,
)
from .storage import atomic_write_json, read_json_file
from .styles import effective_style, resolve_style, style_to_css

__all__ = [
    # ids
    "generate_document_id",
    "now_iso",
    # multivalue
    "as_string",
    "as_string_list",
    "normalize_document_data",
    "normalize_value",
    "parse_text",
    "serialize_value",
    # palette
    "apply_palette",
    "get_preset",
    "list_presets",
    "merge_theme",
    "palette_to_theme",
    # storage
    "atomic_write_json",
    "read_json_file",
    # styles
    "effective_style",
    "resolve_style",
    "style_to_css",
]
