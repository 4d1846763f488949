"""
Template registry: one JSON file per template, read-only at runtime.

Rules:
- templates/<any>.json, one template per file
- template id: lowercase alnum with "-" or "_", max 50 chars
- invalid files are skipped with a warning (the rest still load)
- listing sorted by name
"""

import json
import logging
import re
from pathlib import Path

from src.domain.constants import TEMPLATE_FILE_SUFFIX
from src.domain.errors import ErrorCodes, TemplateError
from src.domain.schemas import Template

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

TEMPLATE_ID_PATTERN = re.compile(r"^[a-z0-9][a-z0-9_-]*[a-z0-9]$")
TEMPLATE_ID_MAX_LENGTH = 50
FORBIDDEN_CHARS = set('/\\:*?"<>| ')


# =============================================================================
# Validation
# =============================================================================

def validate_template_id(template_id: str) -> None:
    """
    Validate a template id.

    Rules:
    - lowercase letters, digits, "-" and "_"
    - starts/ends with a letter or digit
    - max 50 chars
    - forbidden: / \\ : * ? " < > | space

    Args:
        template_id: id to check

    Raises:
        TemplateError: INVALID_TEMPLATE_ID
    """
    if not template_id:
        raise TemplateError(
            ErrorCodes.INVALID_TEMPLATE_ID,
            "template id cannot be empty",
        )

    if len(template_id) > TEMPLATE_ID_MAX_LENGTH:
        raise TemplateError(
            ErrorCodes.INVALID_TEMPLATE_ID,
            f"template id exceeds {TEMPLATE_ID_MAX_LENGTH} characters",
            length=len(template_id),
        )

    found_forbidden = set(template_id) & FORBIDDEN_CHARS
    if found_forbidden:
        raise TemplateError(
            ErrorCodes.INVALID_TEMPLATE_ID,
            f"template id contains forbidden characters: {sorted(found_forbidden)}",
            forbidden=sorted(found_forbidden),
        )

    if not TEMPLATE_ID_PATTERN.match(template_id):
        raise TemplateError(
            ErrorCodes.INVALID_TEMPLATE_ID,
            "template id must be lowercase alphanumeric with '-' or '_', "
            "start/end with alphanumeric",
            pattern=TEMPLATE_ID_PATTERN.pattern,
        )


def parse_template(data: object, source: str = "<memory>") -> Template:
    """
    Build a Template from decoded JSON.

    Presence checks only: id, field keys, unique field keys.

    Raises:
        TemplateError: INVALID_TEMPLATE_ID, INVALID_TEMPLATE
    """
    if not isinstance(data, dict) or not isinstance(data.get("id"), str):
        raise TemplateError(
            ErrorCodes.INVALID_TEMPLATE,
            "template must be an object with a string 'id'",
            source=source,
        )

    validate_template_id(data["id"])

    raw_fields = data.get("fields") or []
    if not isinstance(raw_fields, list):
        raise TemplateError(
            ErrorCodes.INVALID_TEMPLATE,
            "'fields' must be a list",
            source=source,
        )

    seen: set[str] = set()
    for raw in raw_fields:
        key = raw.get("key") if isinstance(raw, dict) else None
        if not isinstance(key, str) or not key:
            raise TemplateError(
                ErrorCodes.INVALID_TEMPLATE,
                "every field needs a string 'key'",
                source=source,
            )
        if key in seen:
            raise TemplateError(
                ErrorCodes.INVALID_TEMPLATE,
                f"duplicate field key '{key}'",
                source=source,
                key=key,
            )
        seen.add(key)

    return Template.from_dict(data)


# =============================================================================
# Registry
# =============================================================================

class TemplateRegistry:
    """
    Templates loaded from a directory.

    Layout:
    templates/
    ├── sido-orange.json
    ├── cahiers-mint.json
    └── ...
    """

    def __init__(self, templates_dir: Path):
        """
        Args:
            templates_dir: directory holding the template JSON files
        """
        self.templates_dir = templates_dir
        self._templates: dict[str, Template] = {}
        self._loaded = False

    def load(self) -> None:
        """Load every template file (once)."""
        if self._loaded:
            return

        self._templates = {}
        if not self.templates_dir.exists():
            logger.warning(f"Templates directory not found: {self.templates_dir}")
            self._loaded = True
            return

        for path in sorted(self.templates_dir.glob(f"*{TEMPLATE_FILE_SUFFIX}")):
            if not path.is_file():
                continue
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
                template = parse_template(data, source=path.name)
            except json.JSONDecodeError as e:
                logger.warning(f"Skipping template {path.name}: invalid JSON ({e})")
                continue
            except TemplateError as e:
                logger.warning(f"Skipping template {path.name}: {e}")
                continue

            if template.id in self._templates:
                logger.warning(
                    f"Skipping template {path.name}: id '{template.id}' already loaded"
                )
                continue
            self._templates[template.id] = template

        self._loaded = True
        logger.info(f"Loaded {len(self._templates)} templates from {self.templates_dir}")

    def reload(self) -> None:
        """Drop the cache and read the directory again."""
        self._loaded = False
        self.load()

    def list_templates(self) -> list[Template]:
        """All templates, sorted by name."""
        self.load()
        return sorted(self._templates.values(), key=lambda t: t.name.casefold())

    def find(self, template_id: str) -> Template | None:
        self.load()
        return self._templates.get(template_id)

    def get(self, template_id: str) -> Template:
        """
        Template by id.

        Raises:
            TemplateError: TEMPLATE_NOT_FOUND
        """
        template = self.find(template_id)
        if template is None:
            raise TemplateError(
                ErrorCodes.TEMPLATE_NOT_FOUND,
                f"Template '{template_id}' not found",
                template_id=template_id,
            )
        return template
