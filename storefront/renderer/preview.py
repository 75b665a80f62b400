"""
Renderer de prévisualisation (éditeur) — même filtrage/ordre que la page publiée,
mais rien n'est omis silencieusement : placeholders et états vides à la place.
"""
from datetime import datetime
from html import escape as esc
from typing import List, Optional

from ..blocks import BannerBlock, BaseBlock, FlashSaleBlock, HtmlBlock, ProductRecommendationBlock
from ..core.clock import utcnow
from ..core.schemas import Product
from .base import (
    FLASH_SALE_LABELS, flash_sale_status, is_flash_sale_active, products_for,
    resolve_products, visible_blocks,
)
from .css import generate_page_css
from .html import format_datetime, render_document, render_page_header, render_product_card


class PreviewRenderer:
    """
    Prévisualisation d'une page en cours d'édition (sauvegardée ou non).

    Usage:
        >>> renderer = PreviewRenderer(catalog)
        >>> html = renderer.render_page(page)
    """

    def __init__(self, products):
        self.products = products

    def render_page(self, page, now: Optional[datetime] = None) -> str:
        """`page` : Page ou brouillon (title, description, blocks)."""
        body = f'<div class="preview">\n{self.render_body(page, now=now)}\n</div>'
        return render_document(page.title or "Prévisualisation", body, generate_page_css(preview=True))

    def render_body(self, page, now: Optional[datetime] = None) -> str:
        now = now or utcnow()
        blocks = visible_blocks(page.blocks)
        products = resolve_products(blocks, self.products)
        parts = [render_page_header(page.title, page.description)]
        parts += [self.render_block(b, products, now=now) for b in blocks]
        return "\n".join(p for p in parts if p)

    # ── Dispatch ────────────────────────────────────────────────────────────

    def render_block(self, block: BaseBlock, products: List[Product], now: Optional[datetime] = None) -> str:
        if isinstance(block, BannerBlock):                return self._banner(block)
        if isinstance(block, ProductRecommendationBlock): return self._recommendation(block, products)
        if isinstance(block, FlashSaleBlock):             return self._flash_sale(block, products, now or utcnow())
        if isinstance(block, HtmlBlock):                  return self._html(block)
        return f"<!-- Bloc non implémenté : {esc(getattr(block, 'type', '?'))} -->"

    @staticmethod
    def _wrap(block: BaseBlock, inner: str) -> str:
        return (f'<div class="block block--{block.type}" data-block-id="{esc(block.id)}" '
                f'data-position="{block.position}">\n{inner}\n</div>')

    # ── Blocs ───────────────────────────────────────────────────────────────

    def _banner(self, b: BannerBlock) -> str:
        c = b.content
        if c.image:
            inner = f'<div class="banner"><img src="{esc(c.image)}" alt="{esc(c.alt or b.title or "")}"></div>'
        else:
            inner = '<div class="banner__placeholder"><span>📷 Aucune image définie</span></div>'
        return self._wrap(b, inner)

    def _recommendation(self, b: ProductRecommendationBlock, products: List[Product]) -> str:
        title = f'<h2 class="block__title">{esc(b.title or "Produits recommandés")}</h2>'
        selected = products_for(b, products)
        if not b.content.products:
            body = '<div class="empty-state">Aucun produit sélectionné</div>'
        elif not selected:
            body = '<div class="empty-state">Aucun des produits sélectionnés n\'est disponible</div>'
        else:
            cards = "\n".join(render_product_card(p, compact=True) for p in selected)
            body = f'<div class="products products--row">\n{cards}\n</div>'
        return self._wrap(b, f"{title}\n{body}")

    def _flash_sale(self, b: FlashSaleBlock, products: List[Product], now: datetime) -> str:
        c = b.content
        status = flash_sale_status(c, now)
        active = is_flash_sale_active(c, now)
        badge_cls = "flash-sale__badge flash-sale__badge--active" if active else "flash-sale__badge"
        cards = "\n".join(render_product_card(p, compact=True) for p in products_for(b, products))
        body = (f'<div class="products products--row">\n{cards}\n</div>' if cards
                else '<div class="empty-state">Aucun produit sélectionné</div>')
        return self._wrap(b, f"""<div class="flash-sale" data-active="{str(active).lower()}">
  <div class="flash-sale__header">
    <div>
      <h2 class="block__title">{esc(b.title or "Vente flash")}</h2>
      <p>Période : {format_datetime(c.start_time)} - {format_datetime(c.end_time)}</p>
    </div>
    <span class="{badge_cls}" data-status="{status.value}">{FLASH_SALE_LABELS[status]}</span>
  </div>
  {body}
</div>""")

    def _html(self, b: HtmlBlock) -> str:
        # Markup brut, non échappé (entrée de confiance)
        return self._wrap(b, f'<div class="html-block">{b.content.html_content}</div>')
