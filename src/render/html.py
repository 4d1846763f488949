"""
Visual tree -> HTML.

- text and attribute values escaped (markupsafe)
- inline CSS from Node.style
- field regions carry data-field-key (+ extra attributes from
  region_attrs, e.g. HTMX selection hooks in the editor)
"""

from collections.abc import Callable

from markupsafe import Markup, escape

from src.render.nodes import Node

RegionAttrs = Callable[[str], dict[str, str]]


def css_text(style: dict[str, str]) -> str:
    return "; ".join(f"{prop}: {value}" for prop, value in style.items())


def _attributes(node: Node, region_attrs: RegionAttrs | None) -> str:
    attrs: dict[str, str] = {}
    if node.classes:
        attrs["class"] = " ".join(node.classes)
    if node.style:
        attrs["style"] = css_text(node.style)
    if node.field_key is not None:
        attrs["data-field-key"] = node.field_key
        if region_attrs is not None:
            attrs.update(region_attrs(node.field_key))
    attrs.update(node.attrs)

    return "".join(f' {name}="{escape(value)}"' for name, value in attrs.items())


def _render(node: Node, region_attrs: RegionAttrs | None, out: list[str]) -> None:
    tag = node.tag
    out.append(f"<{tag}{_attributes(node, region_attrs)}>")
    if node.text is not None:
        out.append(str(escape(node.text)))
    for child in node.children:
        _render(child, region_attrs, out)
    out.append(f"</{tag}>")


def to_html(node: Node, region_attrs: RegionAttrs | None = None) -> Markup:
    """
    Serialize a visual tree.

    Args:
        node: root node
        region_attrs: extra attributes for field regions (key -> attrs)

    Returns:
        Markup safe to embed in a Jinja2 page
    """
    out: list[str] = []
    _render(node, region_attrs, out)
    return Markup("".join(out))
