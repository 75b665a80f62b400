"""
CSS des pages marketing — base commune + variantes preview / publié.
"""

_BASE_CSS = """
*{box-sizing:border-box;margin:0;padding:0}
body{font-family:'Segoe UI',sans-serif;background:#f9fafb;color:#111827;line-height:1.6}
a{color:inherit;text-decoration:none}
.container{max-width:1200px;margin:0 auto;padding:0 16px}
.page-header{background:#fff;border-bottom:1px solid #e5e7eb;padding:48px 16px;text-align:center}
.page-header h1{font-size:clamp(1.8rem,4vw,3rem);margin-bottom:12px}
.page-header p{font-size:1.1rem;color:#4b5563;max-width:760px;margin:0 auto}
.block{margin-bottom:48px}
.block__title{font-size:clamp(1.4rem,3vw,2rem);font-weight:bold;margin-bottom:24px}
.banner img{display:block;width:100%;max-height:500px;object-fit:cover;border-radius:8px}
.products{display:grid;grid-template-columns:repeat(auto-fill,minmax(220px,1fr));gap:20px}
.product-card{background:#fff;border-radius:8px;overflow:hidden;box-shadow:0 2px 8px rgba(0,0,0,.08);position:relative}
.product-card img{display:block;width:100%;aspect-ratio:1/1;object-fit:cover}
.product-card__body{padding:12px 16px}
.product-card__title{font-size:.95rem;font-weight:500;margin-bottom:8px}
.product-card__price{font-size:1.1rem;font-weight:bold;color:#dc2626}
.product-card__original{font-size:.85rem;color:#6b7280;text-decoration:line-through;margin-left:8px}
.product-card__ribbon{position:absolute;top:8px;left:8px;background:#ef4444;color:#fff;padding:2px 8px;border-radius:4px;font-size:.75rem}
.flash-sale__header{background:linear-gradient(90deg,#ef4444,#ec4899);color:#fff;border-radius:12px;padding:24px;margin-bottom:24px;display:flex;justify-content:space-between;align-items:center;flex-wrap:wrap;gap:12px}
.flash-sale__badge{padding:6px 16px;border-radius:20px;font-size:.85rem;font-weight:bold;background:#6b7280;color:#fff}
.flash-sale__badge--active{background:#fff;color:#ef4444}
.html-block{max-width:none}
"""

_PREVIEW_CSS = """
body{background:#fff}
.preview{border:1px solid #e5e7eb;border-radius:8px;padding:32px;margin:24px auto;max-width:1200px}
.banner__placeholder{height:260px;background:#e5e7eb;border-radius:8px;display:flex;align-items:center;justify-content:center;color:#6b7280}
.products--row{display:flex;gap:16px;overflow-x:auto;padding-bottom:16px}
.products--row .product-card{flex:0 0 192px}
.empty-state{color:#6b7280;text-align:center;padding:32px 0}
"""


def generate_page_css(preview: bool = False) -> str:
    """CSS complet d'une page (preview ajoute placeholders + états vides)."""
    return _BASE_CSS + (_PREVIEW_CSS if preview else "")
