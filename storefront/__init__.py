"""
Storefront — back-office e-commerce : pages marketing composées de blocs.

Usage:
    >>> from storefront import Database, PageStore, ProductCatalog, CompositionEditor
    >>> db = Database("sqlite://"); db.init()
    >>> editor = CompositionEditor(PageStore(db), title="Soldes de printemps")
    >>> editor.add_block("banner")
    >>> page = editor.save()

    >>> from storefront import PreviewRenderer
    >>> html = PreviewRenderer(ProductCatalog(db)).render_page(page)
"""

# core d'abord : les schémas de page importent les blocs
from .core import (
    StorefrontError, NotFound, ValidationFailure, UnsupportedBlockType,
    PersistenceFailure, RevalidationFailure,
    PageStatus, ProductStatus, Product, Page, PageCreate, PageUpdate, Paginated,
)
from .blocks import (
    BaseBlock, BlockType, BlockUnion,
    BannerBlock, BannerContent,
    ProductRecommendationBlock, ProductRecommendationContent,
    FlashSaleBlock, FlashSaleContent,
    HtmlBlock, HtmlBlockContent,
    create_default_block, parse_block,
)
from .config import Settings
from .database import Database
from .store import PageStore, ProductCatalog, ClientAdapter
from .cache import RenderCache
from .revalidation import CacheRevalidator, HttpRevalidator
from .editor import (
    CompositionEditor, BannerEditor, HtmlBlockEditor,
    ProductRecommendationEditor, FlashSaleEditor,
)
from .renderer import (
    PreviewRenderer, PublicRenderer, PublishedPages, build_page_metadata,
    flash_sale_status, is_flash_sale_active,
)

__version__ = "0.3.0"

__all__ = [
    # core
    "StorefrontError", "NotFound", "ValidationFailure", "UnsupportedBlockType",
    "PersistenceFailure", "RevalidationFailure",
    "PageStatus", "ProductStatus", "Product", "Page", "PageCreate", "PageUpdate", "Paginated",
    # blocs
    "BaseBlock", "BlockType", "BlockUnion",
    "BannerBlock", "BannerContent",
    "ProductRecommendationBlock", "ProductRecommendationContent",
    "FlashSaleBlock", "FlashSaleContent",
    "HtmlBlock", "HtmlBlockContent",
    "create_default_block", "parse_block",
    # infra
    "Settings", "Database", "PageStore", "ProductCatalog", "ClientAdapter",
    "RenderCache", "CacheRevalidator", "HttpRevalidator",
    # édition
    "CompositionEditor", "BannerEditor", "HtmlBlockEditor",
    "ProductRecommendationEditor", "FlashSaleEditor",
    # rendu
    "PreviewRenderer", "PublicRenderer", "PublishedPages", "build_page_metadata",
    "flash_sale_status", "is_flash_sale_active",
]
