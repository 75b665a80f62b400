"""
Catalogue produits (lecture seule, appels "client" avec latence simulée).
GET /api/products?page=1&limit=10
GET /api/products/search?q=casque
GET /api/products/{id}
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from ...core.errors import NotFound
from ..deps import Services, get_services

router = APIRouter(prefix="/api/products", tags=["Produits"])


@router.get("")
def list_products(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: str = Query("desc", alias="sortOrder", pattern="^(asc|desc)$"),
    services: Services = Depends(get_services),
):
    result = services.client_products.list(page=page, limit=limit, sort_by=sort_by, sort_order=sort_order)
    return result.model_dump(mode="json", by_alias=True)


@router.get("/search")
def search_products(
    q: str = Query(""),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    services: Services = Depends(get_services),
):
    result = services.client_products.search(q, page=page, limit=limit)
    return result.model_dump(mode="json", by_alias=True)


@router.get("/{product_id}")
def get_product(product_id: str, services: Services = Depends(get_services)):
    product = services.client_products.get(product_id)
    if product is None:
        raise NotFound("produit", product_id)
    return product.model_dump(mode="json", by_alias=True)
