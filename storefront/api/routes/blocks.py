"""Catalogue des types de blocs — GET /api/blocks/catalog"""
from fastapi import APIRouter

from ...blocks import block_schemas

router = APIRouter(prefix="/api/blocks", tags=["Blocs"])


@router.get("/catalog")
def catalog():
    return {"blocks": block_schemas()}
