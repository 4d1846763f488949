"""
Render layer: document + template -> visual tree / HTML / DOCX.

Role:
- one pure layout per template id (layouts/)
- HTML serialization for preview and print pages
- python-docx export
"""

from .html import to_html
from .nodes import Node
from .renderer import LAYOUTS, activate, render, unknown_template
from .word import DocxRenderer, render_docx

__all__ = [
    "LAYOUTS",
    "Node",
    "activate",
    "render",
    "to_html",
    "unknown_template",
    "DocxRenderer",
    "render_docx",
]
