"""
Documents Routes: editor / print pages + document API.

Pages (HTML, HTMX):
- GET  /edit/{id}                 → editor (form, styles, theme, preview)
- POST /edit/{id}                 → save the editor form
- POST /edit/{id}/preview         → preview fragment (unsaved form state)
- POST /edit/{id}/select          → workspace fragment with a new selection
- POST /edit/{id}/reset-style     → drop the selected field's style override
- POST /edit/{id}/palette         → apply a palette preset
- POST /edit/{id}/duplicate       → copy and open the copy
- GET  /print/{id}                → A4 print page

API:
- GET  /api/documents              → index, newest first
- POST /api/documents              → create ({"id"}, 201)
- GET  /api/documents/{id}         → full document
- PUT  /api/documents/{id}         → save ({"ok": true})
- POST /api/documents/{id}/duplicate
- POST /api/documents/{id}/palette/{preset_id}
- GET  /api/documents/{id}/export.docx
"""

import json
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from src.app.services.documents import DocumentService
from src.app.services.editor import (
    apply_edit_form,
    carried_overrides,
    editor_fields,
    form_payload,
    resolve_selected_key,
)
from src.app.ui import jinja_templates
from src.core.palette import list_presets, merge_theme
from src.core.styles import displayed_style
from src.domain.constants import DOCX_MIME_TYPE
from src.domain.errors import DomainError, is_not_found
from src.domain.schemas import Document, Template
from src.render.html import to_html
from src.render.renderer import base_style, render
from src.render.word import DocxRenderer

# Routers
router = APIRouter()  # HTML pages
api_router = APIRouter()  # API endpoints


def get_service(request: Request) -> DocumentService:
    """DocumentService built at startup."""
    return request.app.state.document_service


def http_error(e: DomainError, status_code: int | None = None) -> HTTPException:
    """Domain error → HTTPException (404 for *_NOT_FOUND, else 400)."""
    if status_code is None:
        status_code = 404 if is_not_found(e) else 400
    return HTTPException(status_code=status_code, detail={"code": e.code, "message": e.message})


def _open(service: DocumentService, document_id: str) -> tuple[Document, Template]:
    try:
        return service.open_document(document_id)
    except DomainError as e:
        raise http_error(e) from e


# =============================================================================
# Page helpers
# =============================================================================


def _region_attrs(document_id: str):
    """HTMX hooks of preview regions: click → select that field."""

    def attrs(key: str) -> dict[str, str]:
        return {
            "hx-post": f"/edit/{document_id}/select",
            # nested regions: only the innermost one posts
            "hx-trigger": "click consume",
            "hx-vals": json.dumps({"selected": key}),
            "hx-include": "#editor-form",
            "hx-target": "#workspace",
            "hx-swap": "outerHTML",
        }

    return attrs


def _workspace_context(document: Document, template: Template, selected: str | None) -> dict[str, Any]:
    selected_key = resolve_selected_key(template, selected)
    tree = render(document, template, selected_key=selected_key)
    return {
        "document": document,
        "template": template,
        "selected_key": selected_key,
        "fields": editor_fields(template, document, selected_key),
        "overrides": carried_overrides(document),
        "style": (
            displayed_style(template, document, selected_key, base_style(template.id, selected_key))
            if selected_key
            else None
        ),
        "theme": merge_theme(template.colors.to_dict(), document.theme),
        "presets": list_presets(),
        "preview": to_html(tree, _region_attrs(document.id)),
    }


# =============================================================================
# Page Routes (HTML)
# =============================================================================

@router.get("/edit/{document_id}", response_class=HTMLResponse)
async def editor_page(request: Request, document_id: str, selected: str | None = None) -> HTMLResponse:
    """Editor page."""
    document, template = _open(get_service(request), document_id)
    return jinja_templates.TemplateResponse(
        request,
        "editor.html",
        _workspace_context(document, template, selected),
    )


@router.post("/edit/{document_id}/preview", response_class=HTMLResponse)
async def editor_preview(request: Request, document_id: str) -> HTMLResponse:
    """Preview of the unsaved form state."""
    document, template = _open(get_service(request), document_id)
    form = await request.form()
    edited = apply_edit_form(document, template, form)
    selected_key = resolve_selected_key(template, form.get("selected"))
    tree = render(edited, template, selected_key=selected_key)
    return HTMLResponse(content=str(to_html(tree, _region_attrs(document_id))))


@router.post("/edit/{document_id}/select", response_class=HTMLResponse)
async def editor_select(request: Request, document_id: str) -> HTMLResponse:
    """Workspace (form + preview) with a new selected field, edits kept."""
    document, template = _open(get_service(request), document_id)
    form = await request.form()
    edited = apply_edit_form(document, template, form)
    return jinja_templates.TemplateResponse(
        request,
        "_workspace.html",
        _workspace_context(edited, template, form.get("selected")),
    )


@router.post("/edit/{document_id}")
async def editor_save(request: Request, document_id: str) -> RedirectResponse:
    """Save the editor form, back to the editor."""
    service = get_service(request)
    document, template = _open(service, document_id)
    form = await request.form()
    edited = apply_edit_form(document, template, form)
    try:
        service.save_document(document_id, **form_payload(edited))
    except DomainError as e:
        raise http_error(e) from e

    selected = form.get("selected") or ""
    return RedirectResponse(f"/edit/{document_id}?selected={selected}", status_code=303)


@router.post("/edit/{document_id}/reset-style")
async def editor_reset_style(request: Request, document_id: str) -> RedirectResponse:
    """Drop the style override of the selected field."""
    form = await request.form()
    key = form.get("selected") or ""
    try:
        get_service(request).reset_field_style(document_id, key)
    except DomainError as e:
        raise http_error(e) from e
    return RedirectResponse(f"/edit/{document_id}?selected={key}", status_code=303)


@router.post("/edit/{document_id}/palette")
async def editor_palette(request: Request, document_id: str) -> RedirectResponse:
    """Apply a palette preset to the document theme."""
    form = await request.form()
    try:
        get_service(request).apply_palette_preset(document_id, form.get("preset") or "")
    except DomainError as e:
        raise http_error(e) from e
    selected = form.get("selected") or ""
    return RedirectResponse(f"/edit/{document_id}?selected={selected}", status_code=303)


@router.post("/edit/{document_id}/duplicate")
async def editor_duplicate(request: Request, document_id: str) -> RedirectResponse:
    """Duplicate and open the copy."""
    try:
        copy = get_service(request).duplicate_document(document_id)
    except DomainError as e:
        raise http_error(e) from e
    return RedirectResponse(f"/edit/{copy.id}", status_code=303)


@router.post("/new/{template_id}")
async def new_document(request: Request, template_id: str) -> RedirectResponse:
    """Create a document from the home page and open it."""
    try:
        document = get_service(request).create_document(template_id)
    except DomainError as e:
        raise http_error(e, status_code=400) from e
    return RedirectResponse(f"/edit/{document.id}", status_code=303)


@router.get("/print/{document_id}", response_class=HTMLResponse)
async def print_page(request: Request, document_id: str) -> HTMLResponse:
    """A4 print page (no selection)."""
    document, template = _open(get_service(request), document_id)
    return jinja_templates.TemplateResponse(
        request,
        "print.html",
        {
            "document": document,
            "template": template,
            "sheet": to_html(render(document, template)),
        },
    )


# =============================================================================
# API Routes
# =============================================================================

@api_router.get("")
async def list_documents(request: Request) -> list[dict[str, str]]:
    """Index entries, most recently updated first."""
    return [entry.to_dict() for entry in get_service(request).list_documents()]


@api_router.post("", status_code=201)
async def create_document(
    request: Request,
    payload: dict[str, Any] | None = Body(None),
) -> dict[str, str]:
    """
    Create a document.

    Body: {"templateId", "title"?, "data"?, "styles"?, "theme"?}
    """
    payload = payload or {}
    try:
        document = get_service(request).create_document(
            payload.get("templateId"),
            title=payload.get("title"),
            data=_mapping_or_none(payload.get("data")),
            styles=_mapping_or_none(payload.get("styles")),
            theme=_mapping_or_none(payload.get("theme")),
        )
    except DomainError as e:
        # unknown templateId is a bad request here, not a missing resource
        raise http_error(e, status_code=400) from e
    return {"id": document.id}


@api_router.get("/{document_id}")
async def get_document(request: Request, document_id: str) -> dict[str, Any]:
    try:
        return get_service(request).store.get(document_id).to_dict()
    except DomainError as e:
        raise http_error(e) from e


@api_router.put("/{document_id}")
async def update_document(
    request: Request,
    document_id: str,
    payload: dict[str, Any] | None = Body(None),
) -> dict[str, bool]:
    """
    Save a document: title/data/styles/theme replaced when given.

    templateId in the body is ignored (immutable).
    """
    payload = payload or {}
    title = payload.get("title")
    try:
        get_service(request).save_document(
            document_id,
            title=title if isinstance(title, str) else None,
            data=_mapping_or_none(payload.get("data")),
            styles=_mapping_or_none(payload.get("styles")),
            theme=_mapping_or_none(payload.get("theme")),
        )
    except DomainError as e:
        raise http_error(e) from e
    return {"ok": True}


@api_router.post("/{document_id}/duplicate", status_code=201)
async def duplicate_document(request: Request, document_id: str) -> dict[str, str]:
    try:
        copy = get_service(request).duplicate_document(document_id)
    except DomainError as e:
        raise http_error(e) from e
    return {"id": copy.id}


@api_router.post("/{document_id}/palette/{preset_id}")
async def apply_palette(request: Request, document_id: str, preset_id: str) -> dict[str, Any]:
    """Apply a palette preset; returns the new theme."""
    try:
        document = get_service(request).apply_palette_preset(document_id, preset_id)
    except DomainError as e:
        raise http_error(e) from e
    return {"ok": True, "theme": document.theme}


@api_router.get("/{document_id}/export.docx")
async def export_docx(request: Request, document_id: str) -> Response:
    """Word export (print)."""
    document, template = _open(get_service(request), document_id)
    try:
        content = DocxRenderer(template).render_bytes(document)
    except DomainError as e:
        raise http_error(e, status_code=500) from e
    return Response(
        content=content,
        media_type=DOCX_MIME_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{document_id}.docx"'},
    )


def _mapping_or_none(value: Any) -> dict[str, Any] | None:
    return value if isinstance(value, dict) else None


__all__ = ["router", "api_router"]
