"""
Application Services.

Role:
- documents: create / save / duplicate / palette presets
- editor: editor form <-> document (edit time, no persistence)
"""

from .documents import DocumentService
from .editor import apply_edit_form, editor_fields

__all__ = [
    "DocumentService",
    "apply_edit_form",
    "editor_fields",
]
