"""
Visual tree produced by the layouts.

A Node is surface-independent: html.py serializes it for the browser,
tests inspect it directly.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class Node:
    """
    One element of the visual tree.

    field_key marks a selectable field region; on_select is bound by the
    render context when a selection callback was given.
    """
    tag: str = "div"
    classes: list[str] = field(default_factory=list)
    style: dict[str, str] = field(default_factory=dict)
    attrs: dict[str, str] = field(default_factory=dict)
    text: str | None = None
    children: list["Node"] = field(default_factory=list)
    field_key: str | None = None
    selected: bool = False
    on_select: Callable[[], None] | None = field(default=None, repr=False, compare=False)

    def walk(self) -> Iterator["Node"]:
        """Depth-first, self first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def find_region(self, key: str) -> "Node | None":
        """Outermost region bound to a field key."""
        for node in self.walk():
            if node.field_key == key:
                return node
        return None

    def regions(self) -> list["Node"]:
        return [node for node in self.walk() if node.field_key is not None]

    def text_content(self) -> str:
        """Concatenated text of the subtree (tests / debugging)."""
        parts = []
        for node in self.walk():
            if node.text:
                parts.append(node.text)
        return " ".join(parts)


def el(
    tag: str,
    *children: Node,
    cls: str = "",
    style: dict[str, str] | None = None,
    text: str | None = None,
    **attrs: str,
) -> Node:
    """
    Node factory.

    Usage:
        el("ul", el("li", text="a"), cls="bullets")
    """
    return Node(
        tag=tag,
        classes=cls.split(),
        style=dict(style or {}),
        attrs={k.replace("_", "-"): v for k, v in attrs.items()},
        text=text,
        children=list(children),
    )
