"""
STOREFRONT — FastAPI app (back-office pages marketing + pages publiées)
Démarrer : uvicorn storefront.api.main:app --reload --port 8000
"""
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import Settings
from ..core.errors import NotFound, PersistenceFailure, ValidationFailure
from ..database import Database
from .deps import build_services
from .routes import blocks, pages, preview, products, public, revalidate, seo

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper(),
                    format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotFound)
    async def not_found(request: Request, exc: NotFound):
        return JSONResponse({"detail": str(exc)}, status_code=404)

    @app.exception_handler(ValidationFailure)
    async def validation_failure(request: Request, exc: ValidationFailure):
        return JSONResponse({"detail": exc.message, "field": exc.field}, status_code=422)

    @app.exception_handler(PersistenceFailure)
    async def persistence_failure(request: Request, exc: PersistenceFailure):
        log.error("Erreur store sur %s : %s", request.url.path, exc)
        return JSONResponse({"detail": str(exc)}, status_code=500)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Construit l'application : base, services, routes.

    Args:
        settings: configuration (défaut : variables d'environnement)
        database: base déjà construite (tests) ; sinon créée depuis settings.database_url
    """
    settings = settings or Settings.from_env()
    logging.getLogger().setLevel(settings.log_level.upper())
    db = database or Database(settings.database_url)
    db.init(seed=settings.seed_demo_data)
    services = build_services(settings, db)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Génération statique des pages publiées avant la première requête
        done = services.published.prerender()
        log.info("Storefront prêt — %d page(s) publiée(s) pré-rendue(s)", len(done))
        yield

    app = FastAPI(title="STOREFRONT — Pages marketing", version=__version__, docs_url="/docs",
                  lifespan=lifespan)
    app.state.services = services

    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    _register_error_handlers(app)

    @app.get("/health")
    def health():
        return {"status": "ok", "service": "storefront", "version": __version__}

    app.include_router(pages.router)
    app.include_router(products.router)
    app.include_router(blocks.router)
    app.include_router(preview.router)
    app.include_router(public.router)
    app.include_router(revalidate.router)
    app.include_router(seo.router)
    return app


app = create_app()
