"""
Pages publiées — génération statique + régénération incrémentale (ISR).

    render(page_id)   cache frais → HTML ; sinon store → PublicRenderer → cache
    static_params()   ids des pages publiées, connus avant toute requête
    prerender()       rend toutes les pages publiées d'avance
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from ..cache import RenderCache
from ..config import public_page_path
from ..core.clock import utcnow
from ..core.errors import NotFound, StorefrontError
from .public import PublicRenderer

log = logging.getLogger(__name__)


@dataclass
class RenderResult:
    html: str
    cache_hit: bool
    rendered_at: datetime


class PublishedPages:
    def __init__(self, pages, renderer: PublicRenderer, cache: RenderCache, tag: str = "marketing-pages"):
        self.pages = pages
        self.renderer = renderer
        self.cache = cache
        self.tag = tag

    def render(self, page_id: str, now: Optional[datetime] = None) -> RenderResult:
        """
        HTML public d'une page.

        Raises:
            NotFound: page absente ou statut différent de published
        """
        now = now or utcnow()
        path = public_page_path(page_id)
        entry = self.cache.get(path, now=now)
        if entry is not None:
            return RenderResult(html=entry.html, cache_hit=True, rendered_at=entry.rendered_at)

        epoch = self.cache.epoch()
        page = self.pages.get(page_id)
        if page is None or not page.is_published:
            raise NotFound("page", page_id)

        html = self.renderer.render_page(page, now=now)
        self.cache.set(path, html, tags={self.tag, f"page:{page_id}"}, now=now, epoch=epoch)
        log.info("Page %s régénérée", path)
        return RenderResult(html=html, cache_hit=False, rendered_at=now)

    def static_params(self) -> List[Dict[str, str]]:
        return [{"id": p.id} for p in self.pages.published()]

    def prerender(self, now: Optional[datetime] = None) -> List[str]:
        """Génération statique : rend chaque page publiée, une erreur n'arrête pas les autres."""
        done = []
        for params in self.static_params():
            try:
                self.render(params["id"], now=now)
                done.append(params["id"])
            except StorefrontError as e:
                log.warning("Pré-rendu impossible pour %s : %s", params["id"], e)
        log.info("Génération statique : %d page(s)", len(done))
        return done
