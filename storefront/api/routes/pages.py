"""
Pages marketing — CRUD back-office.
GET    /api/pages?page=1&limit=10&sortBy=updatedAt&sortOrder=desc
GET    /api/pages/published
GET    /api/pages/{id}
POST   /api/pages            {title, description, status, blocks, ...}
PUT    /api/pages/{id}       mise à jour partielle
DELETE /api/pages/{id}
"""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ...config import public_page_path
from ...core.errors import NotFound, RevalidationFailure
from ...core.schemas import Page, PageCreate, PageUpdate, Paginated
from ...editor import CompositionEditor
from ..deps import Services, get_services

log = logging.getLogger(__name__)
router = APIRouter(prefix="/api/pages", tags=["Pages"])

# Champs qu'un null explicite ne doit pas écraser
_NON_NULLABLE = {"title", "status", "is_flash_sale"}


def _dump(page: Page) -> dict:
    return page.model_dump(mode="json", by_alias=True)


@router.get("")
def list_pages(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: str = Query("desc", alias="sortOrder", pattern="^(asc|desc)$"),
    services: Services = Depends(get_services),
):
    result: Paginated[Page] = services.pages.list(
        page=page, limit=limit, sort_by=sort_by, sort_order=sort_order,
    )
    return result.model_dump(mode="json", by_alias=True)


@router.get("/published")
def list_published(services: Services = Depends(get_services)) -> List[dict]:
    return [_dump(p) for p in services.pages.published()]


@router.get("/{page_id}")
def get_page(page_id: str, services: Services = Depends(get_services)):
    page = services.pages.get(page_id)
    if page is None:
        raise NotFound("page", page_id)
    return _dump(page)


@router.post("", status_code=201)
def create_page(body: PageCreate, services: Services = Depends(get_services)):
    metadata = body.model_dump(exclude={"blocks"})
    editor = CompositionEditor(services.pages, services.revalidator, **metadata)
    editor.replace_blocks(body.blocks)
    page = editor.save()
    return _dump(page)


@router.put("/{page_id}")
def update_page(page_id: str, body: PageUpdate, services: Services = Depends(get_services)):
    editor = CompositionEditor.open(services.pages, page_id, services.revalidator)
    fields = {
        f: getattr(body, f) for f in body.model_fields_set
        if f != "blocks" and not (f in _NON_NULLABLE and getattr(body, f) is None)
    }
    editor.update_metadata(**fields)
    if body.blocks is not None:
        editor.replace_blocks(body.blocks)
    page = editor.save()
    return _dump(page)


@router.delete("/{page_id}")
def delete_page(page_id: str, services: Services = Depends(get_services)):
    if not services.pages.delete(page_id):
        raise NotFound("page", page_id)
    path = public_page_path(page_id)
    try:
        services.revalidator.revalidate_path(path)
    except RevalidationFailure as e:
        log.warning("Revalidation de %s échouée après suppression : %s", path, e)
    return {"ok": True, "deleted": page_id}
