"""
Templates layer: template definitions loader.

Note: folder names
- src/templates/ -> code (this module)
- templates/ (root) -> template JSON files
- src/app/templates/ -> UI (Jinja2 HTML)
"""

from .registry import (
    TemplateRegistry,
    parse_template,
    validate_template_id,
)

__all__ = [
    "TemplateRegistry",
    "parse_template",
    "validate_template_id",
]
