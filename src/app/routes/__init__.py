"""
FastAPI Routes.

Page routes (HTML, HTMX) + API routes (JSON)
"""

from . import documents, templates

__all__ = ["documents", "templates"]
