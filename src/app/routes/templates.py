"""
Templates Routes: read-only template catalogue.

- GET /api/templates → summaries (id, name, description, colors)
- GET /api/templates/{template_id} → full template (fields included)
"""

from typing import Any

from fastapi import APIRouter, HTTPException, Request

from src.domain.errors import TemplateError
from src.templates.registry import TemplateRegistry

# Routers
api_router = APIRouter()  # API endpoints


def get_registry(request: Request) -> TemplateRegistry:
    """Template registry built at startup."""
    return request.app.state.template_registry


# =============================================================================
# API Routes
# =============================================================================

@api_router.get("")
async def list_templates(request: Request) -> list[dict[str, Any]]:
    """Template summaries, sorted by name."""
    return [t.summary() for t in get_registry(request).list_templates()]


@api_router.get("/{template_id}")
async def get_template(request: Request, template_id: str) -> dict[str, Any]:
    """Template detail."""
    try:
        return get_registry(request).get(template_id).to_dict()
    except TemplateError as e:
        raise HTTPException(status_code=404, detail={"code": e.code, "message": e.message}) from e
