"""
Fixtures communes — base SQLite en mémoire (une par test), horloge figée.
"""
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from storefront import Database, PageStore, ProductCatalog, RenderCache, Settings

# Pendant la vente flash de marketing-1 (2024-01-15 10:00 → 22:00 UTC)
NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def db():
    """Base seedée : 30 produits + 4 pages de démo."""
    d = Database("sqlite://")
    d.init(seed=True)
    yield d
    d.dispose()


@pytest.fixture
def empty_db():
    d = Database("sqlite://")
    d.init(seed=False)
    yield d
    d.dispose()


@pytest.fixture
def pages(db):
    return PageStore(db)


@pytest.fixture
def products(db):
    return ProductCatalog(db)


@pytest.fixture
def cache():
    return RenderCache(revalidate_seconds=3600)


@pytest.fixture
def settings():
    return Settings(base_url="http://testserver", seed_demo_data=True)


@pytest.fixture
def client(db, settings):
    """Client de test — le lifespan pré-rend les pages publiées."""
    from storefront.api.main import create_app
    app = create_app(settings, database=db)
    with TestClient(app) as c:
        yield c
