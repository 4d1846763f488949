"""
Style merging: field default style + document override -> effective style.

Merge rules:
- shallow, per property: fontFamily, fontSize, fontWeight, textColor
- override wins when present, else default, else omitted
- no validation of font families; numbers passed through unchanged
"""

from typing import Any

from src.core.palette import merge_theme
from src.domain.constants import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE, DEFAULT_FONT_WEIGHT
from src.domain.schemas import Document, FieldStyle, Template

StyleLike = FieldStyle | dict[str, Any] | None


def resolve_style(default: StyleLike, override: StyleLike) -> FieldStyle:
    """
    Merge a field default style with a document override.

    Args:
        default: template-declared style (FieldStyle, wire dict or None)
        override: document style override (FieldStyle, wire dict or None)

    Returns:
        Effective FieldStyle (absent properties stay None)
    """
    base = FieldStyle.from_dict(default)
    top = FieldStyle.from_dict(override)

    return FieldStyle(
        font_family=top.font_family if top.font_family is not None else base.font_family,
        font_size=top.font_size if top.font_size is not None else base.font_size,
        font_weight=top.font_weight if top.font_weight is not None else base.font_weight,
        text_color=top.text_color if top.text_color is not None else base.text_color,
    )


def effective_style(
    template: Template,
    document: Document,
    key: str,
    base: StyleLike = None,
) -> FieldStyle:
    """
    Resolve the style of one field region.

    Precedence (lowest first): layout base style -> field defaultStyle ->
    document override.
    """
    template_field = template.field(key)
    default = resolve_style(
        base,
        template_field.default_style if template_field else None,
    )
    return resolve_style(default, document.styles.get(key))


def style_to_css(style: FieldStyle) -> dict[str, str]:
    """CSS declarations for the HTML surface."""
    css: dict[str, str] = {}
    if style.font_family:
        css["font-family"] = style.font_family
    if style.font_size is not None:
        css["font-size"] = f"{style.font_size}px"
    if style.font_weight is not None:
        css["font-weight"] = str(style.font_weight)
    if style.text_color:
        css["color"] = style.text_color
    return css


def displayed_style(
    template: Template,
    document: Document,
    key: str,
    base: StyleLike = None,
) -> dict[str, Any]:
    """
    Values shown by the editor style panel for a field.

    Unlike effective_style(), absent properties are filled with the
    surface defaults so every input has a value. An absent text color
    shows the theme text color (what the region inherits).
    """
    style = effective_style(template, document, key, base)
    theme = merge_theme(template.colors.to_dict(), document.theme)
    return {
        "fontFamily": style.font_family or DEFAULT_FONT_FAMILY,
        "fontSize": style.font_size if style.font_size is not None else DEFAULT_FONT_SIZE,
        "fontWeight": style.font_weight if style.font_weight is not None else DEFAULT_FONT_WEIGHT,
        "textColor": style.text_color or theme["text"],
    }
