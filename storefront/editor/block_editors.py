"""
Éditeurs de blocs — un formulaire par variante.

Contrat : l'éditeur reçoit UN bloc + un callback de mise à jour. Il ne touche
jamais la page : `confirm()` construit un contenu de remplacement complet et
le transmet au callback (avec le titre éventuellement modifié).
"""
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from ..blocks import (
    BaseBlock, BannerContent, FlashSaleContent, HtmlBlockContent, ProductRecommendationContent,
)
from ..core.clock import utcnow
from ..core.errors import ValidationFailure
from ..core.schemas import Product
from ..renderer.base import FLASH_SALE_LABELS, FlashSaleStatus, flash_sale_status
from ..renderer.html import format_datetime

UpdateCallback = Callable[[BaseBlock], None]


class BlockEditor:
    block_type: str = ""
    content_cls = None

    def __init__(self, block: BaseBlock, on_update: UpdateCallback):
        if block.type != self.block_type:
            raise ValidationFailure("type", f"{type(self).__name__} n'édite pas les blocs {block.type!r}")
        self.block = block
        self.on_update = on_update

    def form(self) -> Dict[str, Any]:
        """Valeurs initiales du formulaire, issues du contenu courant."""
        return {"title": self.block.title or "", **self.block.content.model_dump()}

    def build_content(self, values: Dict[str, Any]):
        return self.content_cls(**{k: v for k, v in values.items() if k != "title"})

    def confirm(self, **fields) -> BaseBlock:
        """Valide le formulaire : les champs absents gardent leur valeur courante."""
        unknown = set(fields) - set(self.form())
        if unknown:
            raise ValidationFailure(", ".join(sorted(unknown)), "champ inconnu pour ce bloc")
        values = {**self.form(), **fields}
        updated = self.block.model_copy(update={
            "title": values["title"] or None,
            "content": self.build_content(values),
        })
        self.block = updated
        self.on_update(updated)
        return updated


class BannerEditor(BlockEditor):
    block_type = "banner"
    content_cls = BannerContent


class HtmlBlockEditor(BlockEditor):
    block_type = "html_block"
    content_cls = HtmlBlockContent


class ProductSelectingEditor(BlockEditor):
    """Sélection multiple de produits : recherche, bascule, retrait."""

    def __init__(self, block: BaseBlock, on_update: UpdateCallback, products):
        super().__init__(block, on_update)
        self.products = products
        self._selected: List[str] = list(block.content.products)

    @property
    def selected(self) -> List[str]:
        return list(self._selected)

    def form(self) -> Dict[str, Any]:
        values = super().form()
        values["products"] = self.selected
        return values

    def candidates(self, query: str = "", limit: int = 100) -> List[Product]:
        """Produits proposés, filtrés sur le titre ou la catégorie (insensible à la casse)."""
        q = query.strip().lower()
        listed = self.products.list(page=1, limit=limit).data
        if not q:
            return listed
        return [p for p in listed if q in p.title.lower() or q in p.category.lower()]

    def toggle(self, product_id: str) -> bool:
        """Ajoute ou retire un produit ; renvoie True s'il est désormais sélectionné."""
        if product_id in self._selected:
            self._selected.remove(product_id)
            return False
        self._selected.append(product_id)
        return True

    def remove(self, product_id: str) -> None:
        if product_id in self._selected:
            self._selected.remove(product_id)

    def selected_products(self) -> List[Product]:
        found = (self.products.get(pid) for pid in self._selected)
        return [p for p in found if p is not None]

    def confirm(self, **fields) -> BaseBlock:
        if "products" in fields:
            self._selected = list(fields["products"])
        return super().confirm(**fields)


class ProductRecommendationEditor(ProductSelectingEditor):
    block_type = "product_recommendation"
    content_cls = ProductRecommendationContent


class FlashSaleEditor(ProductSelectingEditor):
    block_type = "flash_sale"
    content_cls = FlashSaleContent

    def status(self, now: Optional[datetime] = None) -> FlashSaleStatus:
        return flash_sale_status(self.block.content, now or utcnow())

    def status_label(self, now: Optional[datetime] = None) -> str:
        status = self.status(now)
        if status == FlashSaleStatus.NOT_STARTED:
            return f"{FLASH_SALE_LABELS[status]} ({format_datetime(self.block.content.start_time)})"
        return FLASH_SALE_LABELS[status]


EDITORS = {
    "banner":                 BannerEditor,
    "product_recommendation": ProductRecommendationEditor,
    "flash_sale":             FlashSaleEditor,
    "html_block":             HtmlBlockEditor,
}
