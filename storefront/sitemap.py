"""
Sitemap + robots.txt — dérivés de la liste des pages publiées.
"""
import logging
from datetime import datetime
from html import escape as esc
from typing import List, Optional

from .config import public_page_path
from .core.clock import utcnow
from .core.errors import PersistenceFailure

log = logging.getLogger(__name__)

# (chemin, changefreq, priorité)
_STATIC_ROUTES = [
    ("",           "daily",  "1.0"),
    ("/products",  "daily",  "0.8"),
    ("/marketing", "weekly", "0.6"),
]

DISALLOWED = ["/marketing/create", "/marketing/*/edit", "/products/create", "/api/"]


def _url(loc: str, lastmod: datetime, changefreq: str, priority: str) -> str:
    return (f"  <url>\n    <loc>{esc(loc)}</loc>\n    <lastmod>{lastmod.isoformat()}</lastmod>\n"
            f"    <changefreq>{changefreq}</changefreq>\n    <priority>{priority}</priority>\n  </url>")


def build_sitemap(pages, base_url: str, now: Optional[datetime] = None) -> str:
    """Routes statiques + une entrée par page publiée (lastmod = updated_at)."""
    now = now or utcnow()
    base_url = base_url.rstrip("/")
    entries: List[str] = [_url(f"{base_url}{path}", now, freq, prio) for path, freq, prio in _STATIC_ROUTES]
    try:
        published = pages.published()
    except PersistenceFailure as e:
        log.error("Sitemap sans pages marketing : %s", e)
        published = []
    entries += [_url(f"{base_url}{public_page_path(p.id)}", p.updated_at, "weekly", "0.7") for p in published]
    body = "\n".join(entries)
    return f'<?xml version="1.0" encoding="UTF-8"?>\n<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n{body}\n</urlset>\n'


def build_robots(base_url: str) -> str:
    lines = []
    for agent in ("*", "Googlebot"):
        lines.append(f"User-agent: {agent}")
        lines.append("Allow: /")
        lines += [f"Disallow: {path}" for path in DISALLOWED]
        lines.append("")
    lines.append(f"Sitemap: {base_url.rstrip('/')}/sitemap.xml")
    return "\n".join(lines) + "\n"
