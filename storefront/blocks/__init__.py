"""
Blocs — exports publics + BlockUnion discriminé sur `type`.
"""
from typing import Annotated, Union
from pydantic import Field

from .base import BaseBlock, BlockContent, BlockType, CamelModel
from .banner import BannerBlock, BannerContent
from .product_recommendation import ProductRecommendationBlock, ProductRecommendationContent
from .flash_sale import FlashSaleBlock, FlashSaleContent
from .html import HtmlBlock, HtmlBlockContent
from .defaults import (
    DEFAULT_TITLES,
    BLOCK_CATALOG,
    create_default_block,
    parse_block,
    block_schemas,
    new_block_id,
)

# Union discriminée par type ; carousel absent (réservé)
BlockUnion = Annotated[
    Union[
        BannerBlock,
        ProductRecommendationBlock,
        FlashSaleBlock,
        HtmlBlock,
    ],
    Field(discriminator="type"),
]

# Blocs qui référencent des produits
PRODUCT_BLOCKS = (ProductRecommendationBlock, FlashSaleBlock)

__all__ = [
    # Base
    "BaseBlock", "BlockContent", "BlockType", "CamelModel",
    # Variantes
    "BannerBlock", "BannerContent",
    "ProductRecommendationBlock", "ProductRecommendationContent",
    "FlashSaleBlock", "FlashSaleContent",
    "HtmlBlock", "HtmlBlockContent",
    # Création
    "DEFAULT_TITLES", "BLOCK_CATALOG", "create_default_block", "parse_block",
    "block_schemas", "new_block_id",
    # Union
    "BlockUnion", "PRODUCT_BLOCKS",
]
