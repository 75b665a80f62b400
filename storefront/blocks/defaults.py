"""
Création de blocs — payload par défaut de chaque type + catalogue.
"""
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from ..core.clock import utcnow
from ..core.errors import UnsupportedBlockType, ValidationFailure
from .base import BlockType
from .banner import BannerBlock, BannerContent
from .product_recommendation import ProductRecommendationBlock, ProductRecommendationContent
from .flash_sale import FlashSaleBlock, FlashSaleContent, FLASH_SALE_DEFAULT_DURATION
from .html import HtmlBlock, HtmlBlockContent

_BLOCK_REGISTRY: dict = {
    "banner":                 BannerBlock,
    "product_recommendation": ProductRecommendationBlock,
    "flash_sale":             FlashSaleBlock,
    "html_block":             HtmlBlock,
}

DEFAULT_TITLES: Dict[str, str] = {
    "banner":                 "Bloc Banner",
    "product_recommendation": "Produits recommandés",
    "flash_sale":             "Vente flash",
    "html_block":             "Contenu HTML",
}

BLOCK_CATALOG: List[Dict[str, str]] = [
    {"type": "banner",                 "name": "Bloc Banner",         "description": "Bannière image publicitaire"},
    {"type": "product_recommendation", "name": "Produits recommandés", "description": "Liste de produits mis en avant"},
    {"type": "flash_sale",             "name": "Vente flash",         "description": "Produits en promotion sur une période limitée"},
    {"type": "html_block",             "name": "Contenu HTML",        "description": "Markup HTML libre"},
]


def _block_class(block_type: Union[str, BlockType]):
    key = block_type.value if isinstance(block_type, BlockType) else str(block_type)
    block_cls = _BLOCK_REGISTRY.get(key)
    if block_cls is None:
        raise UnsupportedBlockType(key)
    return key, block_cls


def new_block_id() -> str:
    return f"block-{uuid.uuid4().hex[:12]}"


def create_default_block(
    block_type: Union[str, BlockType],
    existing_count: int = 0,
    now: Optional[datetime] = None,
):
    """
    Nouveau bloc du type demandé, placé en dernière position.

    Args:
        block_type: banner | product_recommendation | flash_sale | html_block
        existing_count: nombre de blocs déjà présents sur la page
        now: instant de référence (fenêtre flash sale par défaut)

    Raises:
        UnsupportedBlockType: type inconnu ou réservé (carousel)
    """
    key, block_cls = _block_class(block_type)
    now = now or utcnow()

    if key == "banner":
        content = BannerContent(image="", link="", alt="")
    elif key == "product_recommendation":
        content = ProductRecommendationContent(products=[], display_count=4)
    elif key == "flash_sale":
        content = FlashSaleContent(products=[], start_time=now, end_time=now + FLASH_SALE_DEFAULT_DURATION)
    else:
        content = HtmlBlockContent(html_content="")

    return block_cls(
        id=new_block_id(),
        title=DEFAULT_TITLES[key],
        content=content,
        position=existing_count + 1,
        is_visible=True,
    )


def parse_block(data: Any):
    """dict (camelCase ou snake_case) → bloc typé. Rejette carousel et les types inconnus."""
    if isinstance(data, tuple(_BLOCK_REGISTRY.values())):
        return data
    if not isinstance(data, dict):
        raise ValidationFailure("blocks", "bloc attendu sous forme d'objet")
    key, block_cls = _block_class(data.get("type", ""))
    try:
        return block_cls.model_validate(data)
    except ValidationError as e:
        raise ValidationFailure("blocks", str(e)) from e


def block_schemas() -> List[Dict[str, Any]]:
    """Catalogue des blocs disponibles avec leur JSON schema Pydantic."""
    return [
        {**entry, "schema": _BLOCK_REGISTRY[entry["type"]].model_json_schema(by_alias=True)}
        for entry in BLOCK_CATALOG
    ]
