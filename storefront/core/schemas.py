"""
Schémas Pydantic du back-office.
Agrégat : Page → [Block] ; Product est une entité externe référencée par id.
"""
import math
from datetime import datetime
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from pydantic import Field, field_validator

from ..blocks import BlockUnion, CamelModel
from .clock import utcnow, as_utc
from .errors import ValidationFailure

T = TypeVar("T")


# ── ENUMS ──────────────────────────────────────────────────────────────

class PageStatus(str, Enum):
    DRAFT     = "draft"
    PUBLISHED = "published"
    ARCHIVED  = "archived"


class ProductStatus(str, Enum):
    ACTIVE       = "active"
    INACTIVE     = "inactive"
    OUT_OF_STOCK = "out_of_stock"


# ── Produit (référencé, jamais possédé par une page) ───────────────────

class Product(CamelModel):
    id: str
    title: str
    description: str = ""
    price: float
    original_price: Optional[float] = None
    discount: Optional[int] = None
    images: List[str] = Field(default_factory=list)
    category: str = ""
    tags: List[str] = Field(default_factory=list)
    stock: int = 0
    status: ProductStatus = ProductStatus.ACTIVE
    brand: Optional[str] = None
    rating: Optional[float] = None
    review_count: Optional[int] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def cover(self) -> str:
        return self.images[0] if self.images else ""


# ── Page marketing ─────────────────────────────────────────────────────

class Page(CamelModel):
    """Agrégat racine : métadonnées + liste ordonnée de blocs."""
    id: str
    title: str
    description: Optional[str] = None
    status: PageStatus = PageStatus.DRAFT
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    # Indépendant de la présence d'un bloc flash_sale
    is_flash_sale: bool = False
    blocks: List[BlockUnion] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @field_validator("start_date", "end_date", "created_at", "updated_at")
    @classmethod
    def _utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)

    @property
    def is_published(self) -> bool:
        return self.status == PageStatus.PUBLISHED


class PageCreate(CamelModel):
    title: str
    description: Optional[str] = None
    status: PageStatus = PageStatus.DRAFT
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    is_flash_sale: bool = False
    blocks: List[BlockUnion] = Field(default_factory=list)


class PageUpdate(CamelModel):
    """Mise à jour partielle — seuls les champs fournis sont appliqués."""
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[PageStatus] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    is_flash_sale: Optional[bool] = None
    blocks: Optional[List[BlockUnion]] = None


def require_title(title: Optional[str]) -> str:
    """Titre de page obligatoire (non vide après strip)."""
    if title is None or not title.strip():
        raise ValidationFailure("title", "le titre de la page est obligatoire")
    return title.strip()


# ── Pagination ─────────────────────────────────────────────────────────

class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class Paginated(CamelModel, Generic[T]):
    data: List[T]
    pagination: Pagination

    @classmethod
    def build(cls, items: List[T], page: int, limit: int) -> "Paginated[T]":
        page  = max(page, 1)
        limit = max(limit, 1)
        total = len(items)
        total_pages = math.ceil(total / limit)
        start = (page - 1) * limit
        return cls(
            data=items[start:start + limit],
            pagination=Pagination(
                page=page, limit=limit, total=total, total_pages=total_pages,
                has_next=page < total_pages, has_prev=page > 1,
            ),
        )
