"""
Domain Constants: application-wide constants.

File layout, separators, defaults shared by storage, codec and renderer.
"""

# =============================================================================
# Data Directory Structure
# =============================================================================
# data/
# ├── documents/<id>.json
# ├── index.json
# └── .locks/

DOCUMENTS_DIR = "documents"
INDEX_FILENAME = "index.json"
LOCKS_DIR = ".locks"
INDEX_LOCK_FILENAME = "index.lock"

TEMPLATE_FILE_SUFFIX = ".json"

# =============================================================================
# Documents
# =============================================================================

DEFAULT_DOCUMENT_TITLE = "Nouvelle fiche"
DUPLICATE_TITLE_SUFFIX = " (copie)"

# =============================================================================
# Theme
# =============================================================================

# Order matters: editor color inputs follow it.
COLOR_ROLES = ("primary", "accent", "background", "text")

# Used only when a palette or template leaves a role unresolved.
FALLBACK_THEME = {
    "primary": "#6b7280",
    "accent": "#9ca3af",
    "background": "#ffffff",
    "text": "#111827",
}

# =============================================================================
# Styles
# =============================================================================

DEFAULT_FONT_SIZE = 12
DEFAULT_FONT_FAMILY = "ui-sans-serif"
DEFAULT_FONT_WEIGHT = 400

FONT_SIZE_MIN = 8
FONT_SIZE_MAX = 48

FONT_CHOICES = (
    ("Sans (system)", "ui-sans-serif"),
    ("Serif", "ui-serif"),
    ("Mono", "ui-monospace"),
    ("Georgia", "Georgia"),
    ("Times", '"Times New Roman"'),
)

# =============================================================================
# Multi-value fields
# =============================================================================

MULTI_VALUE_SEPARATORS = "\n\r,;"
LIST_JOINER = "\n"
TAGS_JOINER = ", "

# =============================================================================
# MIME Types
# =============================================================================

DOCX_MIME_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)
