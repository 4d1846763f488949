"""
FastAPI application entry point.

Run:
- dev: uvicorn src.app.main:app --reload
- prod: uvicorn src.app.main:app

Environment overrides: DATA_DIR, TEMPLATES_DIR, PORT
"""

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import yaml
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from src.app.routes import documents, templates
from src.app.services.documents import DocumentService
from src.app.ui import jinja_templates
from src.core.palette import list_presets
from src.documents.store import DocumentStore
from src.templates.registry import TemplateRegistry

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent

# =============================================================================
# Configuration
# =============================================================================


def load_config(config_path: Path | None = None) -> dict:
    """Load the YAML config (default.yaml at the project root)."""
    if config_path is None:
        config_path = PROJECT_ROOT / "default.yaml"

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] = yaml.safe_load(f) or {}
        return data


def _resolve(path_value: str | os.PathLike) -> Path:
    path = Path(path_value)
    return path if path.is_absolute() else PROJECT_ROOT / path


def resolve_paths(config: dict) -> tuple[Path, Path]:
    """
    data/ and templates/ directories.

    Precedence: env (DATA_DIR, TEMPLATES_DIR) > config paths > defaults.
    """
    paths = config.get("paths") or {}
    data_dir = os.environ.get("DATA_DIR") or paths.get("data_dir") or "data"
    templates_dir = os.environ.get("TEMPLATES_DIR") or paths.get("templates_dir") or "templates"
    return _resolve(data_dir), _resolve(templates_dir)


def server_settings(config: dict) -> tuple[str, int]:
    server = config.get("server") or {}
    host = server.get("host", "0.0.0.0")
    port = int(os.environ.get("PORT") or server.get("port", 3000))
    return host, port


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifecycle.

    Startup: load config, build the template registry and document store.
    """
    config = load_config()
    data_dir, templates_dir = resolve_paths(config)
    storage = config.get("storage") or {}
    doc_settings = config.get("documents") or {}

    registry = TemplateRegistry(templates_dir)
    registry.load()

    store_kwargs: dict[str, Any] = {"lock_timeout": storage.get("index_lock_timeout")}
    if doc_settings.get("default_title"):
        store_kwargs["default_title"] = doc_settings["default_title"]
    store = DocumentStore(data_dir, **store_kwargs)
    store.ensure_dirs()

    app.state.config = config
    app.state.data_dir = data_dir
    app.state.templates_dir = templates_dir
    app.state.template_registry = registry
    app.state.document_store = store
    app.state.document_service = DocumentService(store, registry)

    logger.info(f"DATA_DIR={data_dir}")
    logger.info(f"TEMPLATES_DIR={templates_dir}")

    yield


# =============================================================================
# App Instance
# =============================================================================

app = FastAPI(
    title="Reading Sheets",
    description="Template-driven reading sheets: fill, style, preview, print",
    version="0.1.0",
    lifespan=lifespan,
)

# Static files (CSS)
static_dir = Path(__file__).parent / "static"
if static_dir.exists():
    app.mount("/static", StaticFiles(directory=static_dir), name="static")


# =============================================================================
# Routes
# =============================================================================

# Page routes (HTML)
app.include_router(documents.router, prefix="", tags=["Documents"])

# API routes
app.include_router(templates.api_router, prefix="/api/templates", tags=["Templates API"])
app.include_router(documents.api_router, prefix="/api/documents", tags=["Documents API"])


# =============================================================================
# Root Endpoints
# =============================================================================


@app.get("/", response_class=HTMLResponse)
async def home(request: Request) -> HTMLResponse:
    """Home: templates to start from + existing documents."""
    service: DocumentService = request.app.state.document_service
    return jinja_templates.TemplateResponse(
        request,
        "home.html",
        {
            "templates": request.app.state.template_registry.list_templates(),
            "documents": service.list_documents(),
            "counts": service.count_by_template(),
        },
    )


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check."""
    return {"status": "ok"}


@app.get("/api/health")
async def api_health() -> dict[str, bool]:
    return {"ok": True}


@app.get("/api/palettes")
async def palettes() -> list[dict[str, Any]]:
    """Palette presets with their derived themes."""
    return [preset.to_dict() for preset in list_presets()]


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    host, port = server_settings(load_config())
    uvicorn.run(
        "src.app.main:app",
        host=host,
        port=port,
        reload=True,
    )
