"""
Blocs de base — champs communs à toutes les variantes.
Le contenu propre à chaque type vit dans un record `content` distinct.
"""
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Modèle exposé en camelCase sur le fil (isVisible, displayCount…)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BlockType(str, Enum):
    BANNER                 = "banner"
    PRODUCT_RECOMMENDATION = "product_recommendation"
    FLASH_SALE             = "flash_sale"
    HTML_BLOCK             = "html_block"
    # Réservé : ni éditeur ni renderer
    CAROUSEL               = "carousel"


class BlockContent(CamelModel):
    """Contenu d'un bloc (URLs, ids produits, HTML…)."""
    pass


class BaseBlock(CamelModel):
    """Bloc de base (classe parente des quatre variantes)."""
    type: str
    id: str
    title: Optional[str] = None
    position: int = 1
    is_visible: bool = True
    config: Optional[Dict[str, Any]] = None
