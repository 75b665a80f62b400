"""
Stores — PageStore (CRUD des pages marketing) + ProductCatalog (lookup produits).

Un seul cœur de données derrière ces deux objets ; la différence appel
"client" / appel "serveur" se limite à la latence simulée (ClientAdapter).
"""
import logging
import time
import uuid
from datetime import timedelta
from typing import Dict, List, Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError

from .core.clock import utcnow, as_utc
from .core.errors import PersistenceFailure
from .core.schemas import (
    Page, PageCreate, PageUpdate, PageStatus, Product, Paginated, require_title,
)
from .database import Database, jd, jl
from .models import PageDB, ProductDB

log = logging.getLogger(__name__)

_TICK = timedelta(microseconds=1)


class ProductLookup(Protocol):
    def get(self, product_id: str) -> Optional[Product]: ...
    def list(self, page: int = 1, limit: int = 10, sort_by: Optional[str] = None,
             sort_order: str = "desc") -> Paginated[Product]: ...
    def search(self, query: str, page: int = 1, limit: int = 10) -> Paginated[Product]: ...


def _sorted(rows: list, columns: Dict[str, str], sort_by: Optional[str], sort_order: str) -> list:
    attr = columns.get(sort_by or "", "created_at")
    reverse = (sort_order or "desc").lower() != "asc"
    present = [r for r in rows if getattr(r, attr) is not None]
    missing = [r for r in rows if getattr(r, attr) is None]
    return sorted(present, key=lambda r: getattr(r, attr), reverse=reverse) + missing


# ── Pages ──────────────────────────────────────────────────────────────

_PAGE_SORT = {
    "createdAt": "created_at", "created_at": "created_at",
    "updatedAt": "updated_at", "updated_at": "updated_at",
    "title": "title", "status": "status",
}


def _dump_blocks(blocks) -> str:
    return jd([b.model_dump(mode="json", by_alias=True) for b in blocks])


def _to_page(row: PageDB) -> Page:
    return Page(
        id=row.id,
        title=row.title,
        description=row.description,
        status=row.status,
        start_date=row.start_date,
        end_date=row.end_date,
        is_flash_sale=bool(row.is_flash_sale),
        blocks=jl(row.blocks),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class PageStore:
    """CRUD des agrégats Page (id immuable, updated_at strictement croissant)."""

    def __init__(self, db: Database):
        self.db = db

    def list(self, page: int = 1, limit: int = 10, sort_by: Optional[str] = None,
             sort_order: str = "desc") -> Paginated[Page]:
        try:
            with self.db.session() as s:
                rows = s.query(PageDB).all()
                items = [_to_page(r) for r in _sorted(rows, _PAGE_SORT, sort_by, sort_order)]
        except SQLAlchemyError as e:
            log.error("Liste des pages impossible : %s", e)
            raise PersistenceFailure("liste des pages impossible") from e
        return Paginated[Page].build(items, page, limit)

    def get(self, page_id: str) -> Optional[Page]:
        try:
            with self.db.session() as s:
                row = s.get(PageDB, page_id)
                return _to_page(row) if row else None
        except SQLAlchemyError as e:
            log.error("Lecture page %s impossible : %s", page_id, e)
            raise PersistenceFailure(f"lecture de la page {page_id} impossible") from e

    def published(self) -> List[Page]:
        """Pages publiées — base de la génération statique et du sitemap."""
        try:
            with self.db.session() as s:
                rows = (s.query(PageDB)
                        .filter(PageDB.status == PageStatus.PUBLISHED.value)
                        .order_by(PageDB.updated_at.desc())
                        .all())
                return [_to_page(r) for r in rows]
        except SQLAlchemyError as e:
            log.error("Liste des pages publiées impossible : %s", e)
            raise PersistenceFailure("liste des pages publiées impossible") from e

    def create(self, data: PageCreate) -> Page:
        title = require_title(data.title)
        now = utcnow()
        row = PageDB(
            id=f"page-{uuid.uuid4().hex[:12]}",
            title=title,
            description=data.description,
            status=PageStatus(data.status).value,
            start_date=as_utc(data.start_date),
            end_date=as_utc(data.end_date),
            is_flash_sale=data.is_flash_sale,
            blocks=_dump_blocks(data.blocks),
            created_at=now,
            updated_at=now,
        )
        try:
            with self.db.session() as s:
                s.add(row)
                s.commit()
                s.refresh(row)
                page = _to_page(row)
        except SQLAlchemyError as e:
            log.error("Création de page impossible : %s", e)
            raise PersistenceFailure("création de la page impossible") from e
        log.info("Page créée %s (%s)", page.id, page.title)
        return page

    def update(self, page_id: str, data: PageUpdate) -> Optional[Page]:
        fields = data.model_fields_set
        if "title" in fields:
            require_title(data.title)
        try:
            with self.db.session() as s:
                row = s.get(PageDB, page_id)
                if row is None:
                    return None
                if "title" in fields:
                    row.title = data.title.strip()
                if "description" in fields:
                    row.description = data.description
                if "status" in fields and data.status is not None:
                    row.status = PageStatus(data.status).value
                if "start_date" in fields:
                    row.start_date = as_utc(data.start_date)
                if "end_date" in fields:
                    row.end_date = as_utc(data.end_date)
                if "is_flash_sale" in fields and data.is_flash_sale is not None:
                    row.is_flash_sale = data.is_flash_sale
                if "blocks" in fields and data.blocks is not None:
                    row.blocks = _dump_blocks(data.blocks)
                previous = as_utc(row.updated_at)
                row.updated_at = max(utcnow(), previous + _TICK)
                s.commit()
                s.refresh(row)
                page = _to_page(row)
        except SQLAlchemyError as e:
            log.error("Mise à jour page %s impossible : %s", page_id, e)
            raise PersistenceFailure(f"mise à jour de la page {page_id} impossible") from e
        log.info("Page mise à jour %s (statut %s)", page.id, page.status.value)
        return page

    def delete(self, page_id: str) -> bool:
        try:
            with self.db.session() as s:
                row = s.get(PageDB, page_id)
                if row is None:
                    return False
                s.delete(row)
                s.commit()
        except SQLAlchemyError as e:
            log.error("Suppression page %s impossible : %s", page_id, e)
            raise PersistenceFailure(f"suppression de la page {page_id} impossible") from e
        log.info("Page supprimée %s", page_id)
        return True


# ── Produits ───────────────────────────────────────────────────────────

_PRODUCT_SORT = {
    "createdAt": "created_at", "created_at": "created_at",
    "updatedAt": "updated_at", "updated_at": "updated_at",
    "title": "title", "price": "price", "stock": "stock", "rating": "rating",
}


def _to_product(row: ProductDB) -> Product:
    return Product(
        id=row.id,
        title=row.title,
        description=row.description or "",
        price=row.price,
        original_price=row.original_price,
        discount=row.discount,
        images=jl(row.images),
        category=row.category or "",
        tags=jl(row.tags),
        stock=row.stock or 0,
        status=row.status,
        brand=row.brand,
        rating=row.rating,
        review_count=row.review_count,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


def _matches(product: Product, q: str) -> bool:
    return (q in product.title.lower()
            or q in product.description.lower()
            or q in product.category.lower()
            or any(q in t.lower() for t in product.tags))


class ProductCatalog:
    """Lookup produits (lecture seule côté page builder)."""

    def __init__(self, db: Database):
        self.db = db

    def _all(self) -> List[ProductDB]:
        with self.db.session() as s:
            return s.query(ProductDB).all()

    def get(self, product_id: str) -> Optional[Product]:
        try:
            with self.db.session() as s:
                row = s.get(ProductDB, product_id)
                return _to_product(row) if row else None
        except SQLAlchemyError as e:
            log.error("Lecture produit %s impossible : %s", product_id, e)
            raise PersistenceFailure(f"lecture du produit {product_id} impossible") from e

    def list(self, page: int = 1, limit: int = 10, sort_by: Optional[str] = None,
             sort_order: str = "desc") -> Paginated[Product]:
        try:
            rows = _sorted(self._all(), _PRODUCT_SORT, sort_by, sort_order)
        except SQLAlchemyError as e:
            log.error("Liste des produits impossible : %s", e)
            raise PersistenceFailure("liste des produits impossible") from e
        return Paginated[Product].build([_to_product(r) for r in rows], page, limit)

    def search(self, query: str, page: int = 1, limit: int = 10) -> Paginated[Product]:
        q = (query or "").strip().lower()
        try:
            rows = _sorted(self._all(), _PRODUCT_SORT, None, "desc")
        except SQLAlchemyError as e:
            log.error("Recherche produits impossible : %s", e)
            raise PersistenceFailure("recherche de produits impossible") from e
        products = [_to_product(r) for r in rows]
        return Paginated[Product].build([p for p in products if _matches(p, q)], page, limit)


# ── Contexte d'exécution ───────────────────────────────────────────────

class ClientAdapter:
    """
    Même store, vu depuis le navigateur : chaque appel subit la latence simulée.
    Les appels côté serveur (rendu publié, SSG) utilisent le store directement.
    """

    def __init__(self, store, latency_ms: int = 0):
        self._store = store
        self.latency_ms = latency_ms

    def __getattr__(self, name: str):
        attr = getattr(self._store, name)
        if not callable(attr):
            return attr

        def call(*args, **kwargs):
            if self.latency_ms > 0:
                time.sleep(self.latency_ms / 1000)
            return attr(*args, **kwargs)

        return call
