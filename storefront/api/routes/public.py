"""
Page marketing publiée — GET /page/{id}
HTML servi depuis le cache ISR ; X-Cache indique HIT ou MISS.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from ...core.errors import NotFound
from ...renderer.css import generate_page_css
from ...renderer.html import render_document
from ..deps import Services, get_services

router = APIRouter(tags=["Public"])

_NOT_FOUND_BODY = """<main class="not-found">
  <h1>Page introuvable</h1>
  <p>Cette page marketing n'existe pas ou n'est plus en ligne.</p>
  <a href="/">Retour à l'accueil</a>
</main>"""


@router.get("/page/{page_id}", response_class=HTMLResponse)
def public_page(page_id: str, services: Services = Depends(get_services)):
    try:
        result = services.published.render(page_id)
    except NotFound:
        return HTMLResponse(
            render_document("Page introuvable", _NOT_FOUND_BODY, generate_page_css()),
            status_code=404,
        )
    window = services.settings.revalidate_seconds
    return HTMLResponse(result.html, headers={
        "Cache-Control": f"s-maxage={window}, stale-while-revalidate",
        "X-Cache": "HIT" if result.cache_hit else "MISS",
    })
