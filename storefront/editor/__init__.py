"""Édition — composition des blocs d'une page + éditeurs par type de bloc."""
from .block_editors import (
    BlockEditor,
    BannerEditor,
    HtmlBlockEditor,
    ProductSelectingEditor,
    ProductRecommendationEditor,
    FlashSaleEditor,
    EDITORS,
)
from .composition import CompositionEditor

__all__ = [
    "BlockEditor", "BannerEditor", "HtmlBlockEditor", "ProductSelectingEditor",
    "ProductRecommendationEditor", "FlashSaleEditor", "EDITORS",
    "CompositionEditor",
]
