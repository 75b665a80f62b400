"""Renderers — prévisualisation éditeur + page publiée (SSG/ISR)."""
from .base import (
    Renderer,
    FlashSaleStatus,
    FLASH_SALE_LABELS,
    visible_blocks,
    referenced_product_ids,
    resolve_products,
    products_for,
    flash_sale_status,
    is_flash_sale_active,
)
from .preview import PreviewRenderer
from .public import PublicRenderer
from .seo import build_page_metadata, banner_images
from .publishing import PublishedPages, RenderResult

__all__ = [
    "Renderer", "FlashSaleStatus", "FLASH_SALE_LABELS",
    "visible_blocks", "referenced_product_ids", "resolve_products", "products_for",
    "flash_sale_status", "is_flash_sale_active",
    "PreviewRenderer", "PublicRenderer",
    "build_page_metadata", "banner_images",
    "PublishedPages", "RenderResult",
]
