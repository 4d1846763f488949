"""
Jinja2 page rendering shared by routes.

src/app/templates/ holds the HTML (HTMX) pages, not document templates.
"""

from pathlib import Path

from fastapi.templating import Jinja2Templates

from src.domain.constants import COLOR_ROLES, FONT_CHOICES, FONT_SIZE_MAX, FONT_SIZE_MIN

templates_dir = Path(__file__).parent / "templates"
jinja_templates = Jinja2Templates(directory=templates_dir)

jinja_templates.env.globals.update(
    COLOR_ROLES=COLOR_ROLES,
    FONT_CHOICES=FONT_CHOICES,
    FONT_SIZE_MIN=FONT_SIZE_MIN,
    FONT_SIZE_MAX=FONT_SIZE_MAX,
)
