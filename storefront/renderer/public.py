"""
Renderer de la page publiée — sortie destinée aux clients (mise en cache, SSG).
Un bloc sans contenu exploitable est omis entièrement.
"""
from datetime import datetime
from html import escape as esc
from typing import List, Optional

from ..blocks import BannerBlock, BaseBlock, FlashSaleBlock, HtmlBlock, ProductRecommendationBlock
from ..core.clock import utcnow
from ..core.schemas import Page, Product
from .base import (
    FLASH_SALE_LABELS, flash_sale_status, is_flash_sale_active, products_for,
    resolve_products, visible_blocks,
)
from .css import generate_page_css
from .html import format_datetime, render_document, render_page_header, render_product_card
from .seo import build_page_metadata, render_meta_tags


class PublicRenderer:
    def __init__(self, products, base_url: str = ""):
        self.products = products
        self.base_url = base_url

    def render_page(self, page: Page, now: Optional[datetime] = None) -> str:
        now = now or utcnow()
        blocks = visible_blocks(page.blocks)
        products = resolve_products(blocks, self.products)
        rendered = [self.render_block(b, products, now=now) for b in blocks]
        main = "\n".join(r for r in rendered if r)
        body = f'{render_page_header(page.title, page.description)}\n<main class="page-blocks">\n{main}\n</main>'
        head = render_meta_tags(build_page_metadata(page, self.base_url))
        return render_document(page.title, body, generate_page_css(), head=head)

    # ── Dispatch ────────────────────────────────────────────────────────────

    def render_block(self, block: BaseBlock, products: List[Product], now: Optional[datetime] = None) -> str:
        if isinstance(block, BannerBlock):                return self._banner(block)
        if isinstance(block, ProductRecommendationBlock): return self._recommendation(block, products)
        if isinstance(block, FlashSaleBlock):             return self._flash_sale(block, products, now or utcnow())
        if isinstance(block, HtmlBlock):                  return self._html(block)
        return ""

    @staticmethod
    def _section(block: BaseBlock, inner: str) -> str:
        return (f'<section class="block block--{block.type}" data-block-id="{esc(block.id)}" '
                f'data-position="{block.position}">\n{inner}\n</section>')

    # ── Blocs ───────────────────────────────────────────────────────────────

    def _banner(self, b: BannerBlock) -> str:
        c = b.content
        if not c.image:
            return ""
        # Premiers blocs : chargement prioritaire
        loading = "eager" if b.position <= 2 else "lazy"
        img = f'<img src="{esc(c.image)}" alt="{esc(c.alt or b.title or "Banner")}" loading="{loading}">'
        if c.link:
            img = f'<a href="{esc(c.link)}" class="banner__link">{img}</a>'
        return self._section(b, f'<div class="banner">{img}</div>')

    def _recommendation(self, b: ProductRecommendationBlock, products: List[Product]) -> str:
        selected = products_for(b, products)
        if not selected:
            return ""
        cards = "\n".join(render_product_card(p) for p in selected)
        return self._section(b, f"""<div class="container">
  <h2 class="block__title">{esc(b.title or "Produits recommandés")}</h2>
  <div class="products">
{cards}
  </div>
</div>""")

    def _flash_sale(self, b: FlashSaleBlock, products: List[Product], now: datetime) -> str:
        selected = products_for(b, products)
        if not selected:
            return ""
        c = b.content
        status = flash_sale_status(c, now)
        active = is_flash_sale_active(c, now)
        badge_cls = "flash-sale__badge flash-sale__badge--active" if active else "flash-sale__badge"
        label = ("🔥 " if active else "") + FLASH_SALE_LABELS[status]
        cards = "\n".join(render_product_card(p, flash_price=active) for p in selected)
        return self._section(b, f"""<div class="container flash-sale" data-active="{str(active).lower()}">
  <div class="flash-sale__header">
    <div>
      <h2 class="block__title">{esc(b.title or "Vente flash")}</h2>
      <p>Période : {format_datetime(c.start_time)} - {format_datetime(c.end_time)}</p>
    </div>
    <span class="{badge_cls}" data-status="{status.value}">{label}</span>
  </div>
  <div class="products">
{cards}
  </div>
</div>""")

    def _html(self, b: HtmlBlock) -> str:
        if not b.content.html_content:
            return ""
        # Markup brut, non échappé (entrée de confiance)
        return self._section(b, f'<div class="container"><div class="html-block">{b.content.html_content}</div></div>')
