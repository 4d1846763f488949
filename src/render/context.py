"""
Shared data-access contract for every layout.

Each layout reads:
- the effective theme (template colors overridden by document theme)
- field values through the multi-value codec
- field styles through the style merger
and marks the selected field / routes activation to on_select.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial
from typing import Any

from src.core.multivalue import as_string_list, serialize_value
from src.core.palette import merge_theme, with_alpha
from src.core.styles import effective_style, style_to_css
from src.domain.schemas import Document, FieldType, Template
from src.render.nodes import Node

SelectCallback = Callable[[str], None]

PLACEHOLDER = "…"


@dataclass
class RenderContext:
    """Inputs of one render pass (never mutated by layouts)."""
    document: Document
    template: Template
    selected_key: str | None = None
    on_select: SelectCallback | None = None
    theme: dict[str, str] = field(init=False)

    def __post_init__(self) -> None:
        self.theme = merge_theme(self.template.colors.to_dict(), self.document.theme)

    # =========================================================================
    # Values
    # =========================================================================

    def text(self, key: str) -> str:
        """Field value as display text (serialize direction)."""
        template_field = self.template.field(key)
        field_type = template_field.type if template_field else FieldType.TEXT
        return serialize_value(field_type, self.document.data.get(key))

    def items(self, key: str) -> list[str]:
        """Field value as a list (legacy items fanned out)."""
        return as_string_list(self.document.data.get(key))

    def lines(self, key: str) -> list[str]:
        """Non-empty trimmed lines of a text field."""
        return [line.strip() for line in self.text(key).splitlines() if line.strip()]

    # =========================================================================
    # Styles
    # =========================================================================

    def style(self, key: str, base: dict[str, Any] | None = None) -> dict[str, str]:
        """CSS of a field region: layout base -> defaultStyle -> override."""
        return style_to_css(effective_style(self.template, self.document, key, base))

    def tint(self, role: str, alpha_hex: str) -> str:
        return with_alpha(self.theme[role], alpha_hex)

    # =========================================================================
    # Selection
    # =========================================================================

    def is_selected(self, *keys: str) -> bool:
        return self.selected_key is not None and self.selected_key in keys

    def region(
        self,
        key: str,
        *children: Node,
        cls: str = "",
        also_selected_by: tuple[str, ...] = (),
        framed: bool = True,
    ) -> Node:
        """
        Selectable field region.

        Args:
            key: field key reported on activation
            children: region content
            cls: extra CSS classes
            also_selected_by: other keys that highlight this region
            framed: draw the selectable frame (border + padding)
        """
        selected = self.is_selected(key, *also_selected_by)
        classes = ["region"]
        if framed:
            classes.append("framed")
        if selected:
            classes.append("selected")
        if self.on_select is not None:
            classes.append("clickable")
        classes.extend(cls.split())

        return Node(
            tag="div",
            classes=classes,
            children=list(children),
            field_key=key,
            selected=selected,
            on_select=partial(self.on_select, key) if self.on_select else None,
        )
