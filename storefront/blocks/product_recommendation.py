"""Bloc Recommandation — liste ordonnée d'ids produits, plafonnée à display_count."""
from typing import List, Literal
from pydantic import Field
from .base import BaseBlock, BlockContent


class ProductRecommendationContent(BlockContent):
    products: List[str] = Field(default_factory=list)
    display_count: int = 4


class ProductRecommendationBlock(BaseBlock):
    type: Literal["product_recommendation"] = "product_recommendation"
    content: ProductRecommendationContent = Field(default_factory=ProductRecommendationContent)
