"""
App layer: UI server (FastAPI + HTMX).

Role:
- home, editor (form + live preview), print pages
- JSON API for templates and documents
- no persistence logic here (delegated to documents/ and core/)

Note: folder names
- src/app/templates/ -> Jinja2 HTML (HTMX)
- src/templates/ -> code (registry.py)
- templates/ (root) -> template JSON files
"""
