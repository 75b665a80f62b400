"""
Conteneur de services — construit une fois par application puis injecté
dans les routes via Depends(get_services).
"""
from dataclasses import dataclass

from fastapi import Request

from ..cache import RenderCache
from ..config import Settings
from ..database import Database
from ..renderer import PreviewRenderer, PublicRenderer, PublishedPages
from ..revalidation import CacheRevalidator
from ..store import ClientAdapter, PageStore, ProductCatalog


@dataclass
class Services:
    settings: Settings
    db: Database
    pages: PageStore
    products: ProductCatalog
    client_products: ClientAdapter
    cache: RenderCache
    revalidator: CacheRevalidator
    published: PublishedPages
    preview: PreviewRenderer


def build_services(settings: Settings, db: Database) -> Services:
    pages    = PageStore(db)
    products = ProductCatalog(db)
    client   = ClientAdapter(products, latency_ms=settings.simulated_latency_ms)
    cache    = RenderCache(revalidate_seconds=settings.revalidate_seconds)
    return Services(
        settings=settings,
        db=db,
        pages=pages,
        products=products,
        client_products=client,
        cache=cache,
        revalidator=CacheRevalidator(cache),
        published=PublishedPages(pages, PublicRenderer(products, base_url=settings.base_url), cache,
                                 tag=settings.marketing_pages_tag),
        preview=PreviewRenderer(client),
    )


def get_services(request: Request) -> Services:
    return request.app.state.services
