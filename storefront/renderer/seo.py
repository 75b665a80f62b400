"""
Métadonnées SEO d'une page publiée — title, description, Open Graph, Twitter, JSON-LD.
"""
import json
from html import escape as esc
from typing import Any, Dict, List

from ..blocks import BannerBlock
from ..config import public_page_path
from ..core.schemas import Page
from .base import visible_blocks


def banner_images(page: Page) -> List[Dict[str, str]]:
    """Images des banners visibles (ordre de position) — la première sert d'og:image."""
    return [
        {"url": b.content.image, "alt": b.content.alt or page.title}
        for b in visible_blocks(page.blocks)
        if isinstance(b, BannerBlock) and b.content.image
    ]


def build_page_metadata(page: Page, base_url: str = "") -> Dict[str, Any]:
    base_url = base_url.rstrip("/")
    url = f"{base_url}{public_page_path(page.id)}"
    description = page.description or f"{page.title} — page marketing"
    images = banner_images(page)
    return {
        "title": page.title,
        "description": description,
        "keywords": ["e-commerce", "marketing", page.title],
        "canonical": url,
        "og_image": images[0]["url"] if images else None,
        "open_graph": {
            "title": page.title,
            "description": description,
            "type": "website",
            "url": url,
            "images": images,
        },
        "twitter": {
            "card": "summary_large_image",
            "title": page.title,
            "description": description,
        },
        "json_ld": {
            "@context": "https://schema.org",
            "@type": "WebPage",
            "name": page.title,
            "description": page.description,
            "url": url,
            "datePublished": page.created_at.isoformat(),
            "dateModified": page.updated_at.isoformat(),
        },
    }


def render_meta_tags(meta: Dict[str, Any]) -> str:
    og = meta["open_graph"]
    tw = meta["twitter"]
    tags = [
        f"<title>{esc(meta['title'])}</title>",
        f'<meta name="description" content="{esc(meta["description"])}">',
        f'<meta name="keywords" content="{esc(", ".join(meta["keywords"]))}">',
        f'<link rel="canonical" href="{esc(meta["canonical"])}">',
        f'<meta property="og:title" content="{esc(og["title"])}">',
        f'<meta property="og:description" content="{esc(og["description"])}">',
        f'<meta property="og:type" content="{og["type"]}">',
        f'<meta property="og:url" content="{esc(og["url"])}">',
    ]
    for img in og["images"]:
        tags.append(f'<meta property="og:image" content="{esc(img["url"])}">')
        tags.append(f'<meta property="og:image:alt" content="{esc(img["alt"])}">')
    tags += [
        f'<meta name="twitter:card" content="{tw["card"]}">',
        f'<meta name="twitter:title" content="{esc(tw["title"])}">',
        f'<meta name="twitter:description" content="{esc(tw["description"])}">',
    ]
    ld = json.dumps(meta["json_ld"], ensure_ascii=False).replace("</", "<\\/")
    tags.append(f'<script type="application/ld+json">{ld}</script>')
    return "\n  ".join(tags)
