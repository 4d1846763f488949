"""
Template renderer: (document, template, selection) -> visual tree.

Dispatch is keyed by template id; each id maps to a pure layout function.
Adding a template = adding a JSON file under templates/ AND a layout
registered in LAYOUTS.

Unknown template ids render a placeholder, never raise.
"""

import logging
from collections.abc import Callable

from src.domain.schemas import Document, Template
from src.render.context import RenderContext, SelectCallback
from src.render.layouts import cahiers_mint, sido_orange, sido_vrilles
from src.render.nodes import Node, el

logger = logging.getLogger(__name__)

LayoutFn = Callable[[RenderContext], Node]

LAYOUTS: dict[str, LayoutFn] = {
    sido_orange.TEMPLATE_ID: sido_orange.render,
    cahiers_mint.TEMPLATE_ID: cahiers_mint.render,
    sido_vrilles.TEMPLATE_ID: sido_vrilles.render,
}

UNKNOWN_TEMPLATE_CLASS = "unknown-template"

LAYOUT_BASE_STYLES: dict[str, dict[str, dict]] = {
    sido_orange.TEMPLATE_ID: sido_orange.BASE_STYLES,
    cahiers_mint.TEMPLATE_ID: cahiers_mint.BASE_STYLES,
    sido_vrilles.TEMPLATE_ID: sido_vrilles.BASE_STYLES,
}


def registered_template_ids() -> list[str]:
    return sorted(LAYOUTS)


def base_style(template_id: str, key: str) -> dict | None:
    """Layout base style of a field region (None when the layout has none)."""
    return LAYOUT_BASE_STYLES.get(template_id, {}).get(key)


def unknown_template(template_id: str) -> Node:
    """Placeholder for a template without a layout."""
    return el(
        "div",
        el("span", text="Template inconnu:"),
        el("span", cls="mono", text=template_id),
        cls=UNKNOWN_TEMPLATE_CLASS,
        data_template_id=template_id,
    )


def render(
    document: Document,
    template: Template,
    selected_key: str | None = None,
    on_select: SelectCallback | None = None,
) -> Node:
    """
    Render a document with its template's layout.

    Args:
        document: document to show (not mutated)
        template: resolved template of the document
        selected_key: field to mark as selected
        on_select: called with a field key when a region is activated

    Returns:
        Root Node of the visual tree
    """
    layout = LAYOUTS.get(template.id)
    if layout is None:
        logger.warning(f"No layout for template '{template.id}'")
        return unknown_template(template.id)

    ctx = RenderContext(
        document=document,
        template=template,
        selected_key=selected_key,
        on_select=on_select,
    )
    return layout(ctx)


def activate(tree: Node, key: str) -> bool:
    """
    Activate the region of a field (user click).

    Returns:
        True when a region with a bound callback was found
    """
    region = tree.find_region(key)
    if region is None or region.on_select is None:
        return False
    region.on_select()
    return True
