"""
Contrat commun aux deux renderers (prévisualisation éditeur + page publiée).

Les deux chemins partagent filtrage, ordre et résolution produits :
  - seuls les blocs is_visible sont rendus
  - ordre croissant de position
  - produits résolus via le ProductLookup, dans l'ordre de résolution
"""
import logging
from datetime import datetime
from enum import Enum
from typing import Dict, Iterable, List, Optional, Protocol, runtime_checkable

from ..blocks import BaseBlock, FlashSaleContent, PRODUCT_BLOCKS, ProductRecommendationBlock
from ..core.clock import utcnow
from ..core.errors import PersistenceFailure
from ..core.schemas import Product

log = logging.getLogger(__name__)


@runtime_checkable
class Renderer(Protocol):
    def render_page(self, page, now: Optional[datetime] = None) -> str: ...
    def render_block(self, block: BaseBlock, products: List[Product], now: Optional[datetime] = None) -> str: ...


# ── Filtrage / ordre ─────────────────────────────────────────────────────────

def visible_blocks(blocks: Iterable[BaseBlock]) -> List[BaseBlock]:
    """Blocs visibles, triés par position (tri stable : égalités dans l'ordre de la liste)."""
    return sorted((b for b in blocks if b.is_visible), key=lambda b: b.position)


# ── Produits ─────────────────────────────────────────────────────────────────

def referenced_product_ids(blocks: Iterable[BaseBlock]) -> List[str]:
    """Ids produits référencés (dédupliqués, ordre de première apparition)."""
    seen: Dict[str, None] = {}
    for b in blocks:
        if isinstance(b, PRODUCT_BLOCKS):
            for pid in b.content.products:
                seen.setdefault(pid, None)
    return list(seen)


def resolve_products(blocks: Iterable[BaseBlock], lookup) -> List[Product]:
    """Résout chaque id via le lookup ; un id introuvable ou en erreur est ignoré."""
    products = []
    for pid in referenced_product_ids(blocks):
        try:
            product = lookup.get(pid)
        except PersistenceFailure as e:
            log.error("Produit %s non chargé : %s", pid, e)
            continue
        if product is not None:
            products.append(product)
    return products


def products_for(block: BaseBlock, products: List[Product]) -> List[Product]:
    """Produits du bloc, dans l'ordre renvoyé par le lookup (pas l'ordre stocké)."""
    if not isinstance(block, PRODUCT_BLOCKS):
        return []
    wanted = set(block.content.products)
    selected = [p for p in products if p.id in wanted]
    if isinstance(block, ProductRecommendationBlock):
        return selected[:max(block.content.display_count, 0)]
    return selected


# ── Vente flash ──────────────────────────────────────────────────────────────

class FlashSaleStatus(str, Enum):
    NOT_STARTED = "not_started"
    ACTIVE      = "active"
    ENDED       = "ended"


FLASH_SALE_LABELS = {
    FlashSaleStatus.NOT_STARTED: "Pas encore commencée",
    FlashSaleStatus.ACTIVE:      "En cours",
    FlashSaleStatus.ENDED:       "Terminée",
}


def flash_sale_status(content: FlashSaleContent, now: Optional[datetime] = None) -> FlashSaleStatus:
    """Statut recalculé à chaque appel à partir de l'horloge — jamais persisté."""
    now = now or utcnow()
    if now < content.start_time:
        return FlashSaleStatus.NOT_STARTED
    if now > content.end_time:
        return FlashSaleStatus.ENDED
    return FlashSaleStatus.ACTIVE


def is_flash_sale_active(content: FlashSaleContent, now: Optional[datetime] = None) -> bool:
    now = now or utcnow()
    return content.start_time <= now <= content.end_time
