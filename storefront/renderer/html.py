"""
Fragments HTML partagés — cartes produit, en-tête de page, document complet.
Tout texte issu du contenu est échappé ; seul html_block injecte du markup brut.
"""
from datetime import datetime
from html import escape as esc
from typing import Optional

from ..core.schemas import Product


def format_price(value: float) -> str:
    """1234.5 → '1 234,50 €'"""
    return f"{value:,.2f}".replace(",", " ").replace(".", ",") + " €"


def format_datetime(value: datetime) -> str:
    return value.strftime("%d/%m/%Y %H:%M")


def render_product_card(product: Product, compact: bool = False, flash_price: bool = False) -> str:
    classes = ["product-card"]
    if compact:
        classes.append("product-card--compact")

    ribbon = '<span class="product-card__ribbon">Prix flash</span>' if flash_price else ""
    if compact:
        price_html = ""
    else:
        original = ""
        if product.original_price and product.original_price > product.price:
            original = f'<span class="product-card__original">{format_price(product.original_price)}</span>'
        price_html = f'<div><span class="product-card__price">{format_price(product.price)}</span>{original}</div>'

    image = f'<img src="{esc(product.cover)}" alt="{esc(product.title)}" loading="lazy">' if product.cover else ""

    return f"""<div class="{" ".join(classes)}" data-product-id="{esc(product.id)}">
  {ribbon}{image}
  <div class="product-card__body">
    <h3 class="product-card__title">{esc(product.title)}</h3>
    {price_html}
  </div>
</div>"""


def render_page_header(title: Optional[str], description: Optional[str]) -> str:
    if not title and not description:
        return ""
    desc_html = f"\n    <p>{esc(description)}</p>" if description else ""
    return f"""<section class="page-header">
  <div class="container">
    <h1>{esc(title or "")}</h1>{desc_html}
  </div>
</section>"""


def render_document(title: str, body: str, css: str, head: str = "", lang: str = "fr") -> str:
    """Génère le HTML complet d'une page."""
    return f"""<!DOCTYPE html>
<html lang="{lang}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  {head or f"<title>{esc(title)}</title>"}
  <style>{css}</style>
</head>
<body>
{body}
</body>
</html>"""
