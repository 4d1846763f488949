"""
Data schemas: templates, documents, index entries.

Rules:
- Wire format (JSON files + API) uses camelCase keys.
- from_dict() is tolerant: missing/garbage values degrade to defaults.
- Templates are immutable after load.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from src.domain.constants import COLOR_ROLES, FALLBACK_THEME

# =============================================================================
# Field Type
# =============================================================================

class FieldType(str, Enum):
    """Template field type."""
    TEXT = "text"
    TEXTAREA = "textarea"
    LIST = "list"      # one item per line
    TAGS = "tags"      # comma separated

    @classmethod
    def coerce(cls, value: Any) -> "FieldType":
        """Unknown types render as plain text."""
        try:
            return cls(value)
        except ValueError:
            return cls.TEXT

    @property
    def is_multi_value(self) -> bool:
        return self in (FieldType.LIST, FieldType.TAGS)


def _number(value: Any) -> int | float | None:
    # bool is an int subclass; a style never means True/False
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _text(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


# =============================================================================
# Styles
# =============================================================================

@dataclass(frozen=True)
class FieldStyle:
    """
    Partial field style.

    Every property is optional; an absent property falls back to the
    field default, then to the rendering surface default.
    """
    font_family: str | None = None
    font_size: int | float | None = None
    font_weight: int | float | None = None
    text_color: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.font_family is not None:
            data["fontFamily"] = self.font_family
        if self.font_size is not None:
            data["fontSize"] = self.font_size
        if self.font_weight is not None:
            data["fontWeight"] = self.font_weight
        if self.text_color is not None:
            data["textColor"] = self.text_color
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "FieldStyle":
        if isinstance(data, FieldStyle):
            return data
        if not isinstance(data, dict):
            return cls()
        return cls(
            font_family=_text(data.get("fontFamily")),
            font_size=_number(data.get("fontSize")),
            font_weight=_number(data.get("fontWeight")),
            text_color=_text(data.get("textColor")),
        )

    def is_empty(self) -> bool:
        return not self.to_dict()


# =============================================================================
# Templates
# =============================================================================

@dataclass(frozen=True)
class TemplateColors:
    """Template default colors (4 roles)."""
    primary: str
    accent: str
    background: str
    text: str

    def to_dict(self) -> dict[str, str]:
        return {
            "primary": self.primary,
            "accent": self.accent,
            "background": self.background,
            "text": self.text,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "TemplateColors":
        data = data if isinstance(data, dict) else {}
        values = {}
        for role in COLOR_ROLES:
            values[role] = _text(data.get(role)) or FALLBACK_THEME[role]
        return cls(**values)


@dataclass(frozen=True)
class TemplateField:
    """One named, typed slot of a template."""
    key: str
    label: str
    type: FieldType = FieldType.TEXT
    required: bool = False
    placeholder: str = ""
    help_text: str = ""
    default_style: FieldStyle = field(default_factory=FieldStyle)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "key": self.key,
            "label": self.label,
            "type": self.type.value,
        }
        if self.required:
            data["required"] = True
        if self.placeholder:
            data["placeholder"] = self.placeholder
        if self.help_text:
            data["helpText"] = self.help_text
        if not self.default_style.is_empty():
            data["defaultStyle"] = self.default_style.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TemplateField":
        return cls(
            key=data["key"],
            label=data.get("label") or data["key"],
            type=FieldType.coerce(data.get("type", "text")),
            required=bool(data.get("required", False)),
            placeholder=data.get("placeholder") or "",
            help_text=data.get("helpText") or "",
            default_style=FieldStyle.from_dict(data.get("defaultStyle")),
        )


@dataclass(frozen=True)
class Template:
    """
    Document template.

    Loaded from one JSON file, never edited at runtime.
    """
    id: str
    name: str
    description: str
    colors: TemplateColors
    fields: tuple[TemplateField, ...] = ()

    def field(self, key: str) -> TemplateField | None:
        for f in self.fields:
            if f.key == key:
                return f
        return None

    def field_keys(self) -> list[str]:
        return [f.key for f in self.fields]

    def summary(self) -> dict[str, Any]:
        """Listing projection (no fields)."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "colors": self.colors.to_dict(),
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.summary(),
            "fields": [f.to_dict() for f in self.fields],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Template":
        return cls(
            id=data["id"],
            name=data.get("name") or data["id"],
            description=data.get("description") or "",
            colors=TemplateColors.from_dict(data.get("colors")),
            fields=tuple(TemplateField.from_dict(f) for f in data.get("fields") or []),
        )


# =============================================================================
# Documents
# =============================================================================

@dataclass
class DocumentIndexEntry:
    """Listing projection of a document (index.json)."""
    id: str
    title: str
    template_id: str
    created_at: str
    updated_at: str

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "title": self.title,
            "templateId": self.template_id,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DocumentIndexEntry":
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            template_id=data.get("templateId", ""),
            created_at=data.get("createdAt", ""),
            updated_at=data.get("updatedAt", ""),
        )


@dataclass
class Document:
    """
    User document created from a template.

    data:   field key -> str (text/textarea) or list[str] (list/tags)
    styles: field key -> partial style override (wire dict)
    theme:  color role -> hex, overriding template colors
    """
    id: str
    title: str
    template_id: str
    created_at: str
    updated_at: str
    data: dict[str, Any] = field(default_factory=dict)
    styles: dict[str, dict[str, Any]] = field(default_factory=dict)
    theme: dict[str, str] = field(default_factory=dict)

    def style_for(self, key: str) -> FieldStyle:
        return FieldStyle.from_dict(self.styles.get(key))

    def index_entry(self) -> DocumentIndexEntry:
        return DocumentIndexEntry(
            id=self.id,
            title=self.title,
            template_id=self.template_id,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "templateId": self.template_id,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "data": self.data,
            "styles": self.styles,
            "theme": self.theme,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Document":
        def _mapping(value: Any) -> dict:
            return dict(value) if isinstance(value, dict) else {}

        return cls(
            id=data["id"],
            title=data.get("title", ""),
            template_id=data.get("templateId", ""),
            created_at=data.get("createdAt", ""),
            updated_at=data.get("updatedAt", ""),
            data=_mapping(data.get("data")),
            styles={
                k: v for k, v in _mapping(data.get("styles")).items()
                if isinstance(v, dict)
            },
            theme={
                k: v for k, v in _mapping(data.get("theme")).items()
                if isinstance(v, str)
            },
        )
