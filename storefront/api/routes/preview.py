"""
Prévisualisation éditeur (tous statuts, brouillons compris).
GET  /marketing/{id}/preview   → page stockée
POST /marketing/preview        → brouillon non sauvegardé {title, description, blocks}
"""
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from ...core.errors import NotFound
from ...core.schemas import PageCreate
from ..deps import Services, get_services

router = APIRouter(tags=["Prévisualisation"])


@router.get("/marketing/{page_id}/preview", response_class=HTMLResponse)
def preview_page(page_id: str, services: Services = Depends(get_services)):
    page = services.pages.get(page_id)
    if page is None:
        raise NotFound("page", page_id)
    return HTMLResponse(services.preview.render_page(page))


@router.post("/marketing/preview", response_class=HTMLResponse)
def preview_draft(draft: PageCreate, services: Services = Depends(get_services)):
    return HTMLResponse(services.preview.render_page(draft))
