"""Building blocks shared by the layouts."""

from typing import Any

from src.render.context import PLACEHOLDER, RenderContext
from src.render.nodes import Node, el


def section_label(text: str, cls: str = "section-label") -> Node:
    return el("div", cls=cls, text=text)


def paragraph(ctx: RenderContext, key: str, base: dict[str, Any] | None = None) -> Node:
    """Multi-line text, whitespace preserved; "…" when empty."""
    return el(
        "div",
        cls="pre-wrap",
        style=ctx.style(key, base),
        text=ctx.text(key) or PLACEHOLDER,
    )


def bullets(
    ctx: RenderContext,
    key: str,
    base: dict[str, Any] | None = None,
    items: list[str] | None = None,
) -> Node:
    """Bulleted list of a list field; a single muted "…" item when empty."""
    values = ctx.items(key) if items is None else items
    if values:
        children = [el("li", text=value) for value in values]
    else:
        children = [el("li", cls="muted", text=PLACEHOLDER)]
    return el("ul", *children, cls="bullets", style=ctx.style(key, base))


def chips(
    ctx: RenderContext,
    key: str,
    chip_style: dict[str, str],
    cls: str = "chips",
    chip_cls: str = "chip",
    empty_text: str = PLACEHOLDER,
) -> list[Node]:
    """One chip per tag value."""
    values = ctx.items(key)
    if not values:
        return [el("span", cls="muted", text=empty_text)]
    return [el("span", cls=chip_cls, style=chip_style, text=value) for value in values]
