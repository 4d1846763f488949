"""
Pytest fixtures for the reading sheets tests.

Layout:
- path / config fixtures (project templates/, default.yaml)
- template fixtures (registry over the shipped JSON files, in-memory template)
- storage fixtures (store + service over tmp_path)
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml

from src.app.services.documents import DocumentService
from src.documents.store import DocumentStore
from src.domain.schemas import Document, Template
from src.templates.registry import TemplateRegistry

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """Project root path."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml path."""
    return project_root / "default.yaml"


@pytest.fixture
def default_config(default_config_path: Path) -> dict:
    """Default configuration."""
    with open(default_config_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


@pytest.fixture
def templates_dir(project_root: Path) -> Path:
    """Shipped template JSON files."""
    return project_root / "templates"


# =============================================================================
# Template Fixtures
# =============================================================================

@pytest.fixture
def registry(templates_dir: Path) -> TemplateRegistry:
    """Registry over the shipped templates."""
    registry = TemplateRegistry(templates_dir)
    registry.load()
    return registry


@pytest.fixture
def sido_orange(registry: TemplateRegistry) -> Template:
    return registry.get("sido-orange")


@pytest.fixture
def sample_template() -> Template:
    """
    Small in-memory template covering every field type.

    Its id has no layout: renders as the unknown-template placeholder.
    """
    return Template.from_dict(
        {
            "id": "sample",
            "name": "Sample",
            "description": "test template",
            "colors": {
                "primary": "#ff0000",
                "accent": "#00ff00",
                "background": "#ffffff",
                "text": "#000000",
            },
            "fields": [
                {"key": "title", "label": "Title", "type": "text", "required": True},
                {
                    "key": "summary",
                    "label": "Summary",
                    "type": "textarea",
                    "defaultStyle": {"fontSize": 14},
                },
                {"key": "themes", "label": "Themes", "type": "tags"},
                {"key": "quotes", "label": "Quotes", "type": "list"},
            ],
        }
    )


# =============================================================================
# Storage Fixtures
# =============================================================================

@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "data"


@pytest.fixture
def store(data_dir: Path) -> DocumentStore:
    """Empty document store."""
    store = DocumentStore(data_dir, lock_timeout=2.0)
    store.ensure_dirs()
    return store


@pytest.fixture
def service(store: DocumentStore, registry: TemplateRegistry) -> DocumentService:
    return DocumentService(store, registry)


@pytest.fixture
def make_document() -> Callable[..., Document]:
    """In-memory document factory (not persisted)."""

    def _make(template_id: str = "sido-orange", **kwargs: Any) -> Document:
        return Document(
            id=kwargs.pop("id", "doc1"),
            title=kwargs.pop("title", "Candide"),
            template_id=template_id,
            created_at="2024-01-01T00:00:00.000Z",
            updated_at="2024-01-01T00:00:00.000Z",
            data=kwargs.pop("data", {}),
            styles=kwargs.pop("styles", {}),
            theme=kwargs.pop("theme", {}),
        )

    return _make
