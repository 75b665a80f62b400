"""
Données de démo — 30 produits + 4 pages marketing.
Génération déterministe (Random(42)) : mêmes ids et mêmes prix à chaque init.
"""
import random
from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import Session

from .core.schemas import Page
from .database import jd
from .models import PageDB, ProductDB

_CATEGORIES = ["Électronique", "Mode", "Maison", "Beauté", "Sport", "Livres", "Épicerie", "Jouets"]
_BRANDS     = ["Apple", "Samsung", "Nike", "Adidas", "Uniqlo", "MUJI", "SK-II", "Canon"]
_STATUSES   = ["active", "inactive", "out_of_stock"]

_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _d(s: str) -> datetime:
    return datetime.fromisoformat(s).replace(tzinfo=timezone.utc)


def _banner(block_id, title, n, link, alt, position):
    return {"id": block_id, "type": "banner", "title": title, "position": position, "isVisible": True,
            "content": {"image": f"https://picsum.photos/1200/400?random={n}", "link": link, "alt": alt}}


def _reco(block_id, title, products, display_count, position):
    return {"id": block_id, "type": "product_recommendation", "title": title, "position": position,
            "isVisible": True, "content": {"products": products, "displayCount": display_count}}


def _flash(block_id, title, products, start, end, position):
    return {"id": block_id, "type": "flash_sale", "title": title, "position": position, "isVisible": True,
            "content": {"products": products, "startTime": start, "endTime": end}}


_DEMO_PAGES = [
    {
        "id": "marketing-1", "title": "Opération page d'accueil",
        "description": "Banner, recommandations et vente flash",
        "status": "published", "startDate": "2024-01-15", "endDate": "2024-02-15", "isFlashSale": True,
        "blocks": [
            _banner("block-1", "Bannière principale", 1, "/products", "Offre de printemps", 1),
            _reco("block-2", "Meilleures ventes", ["product-1", "product-2", "product-3", "product-4"], 4, 2),
            _flash("block-3", "Vente flash", ["product-5", "product-6"], "2024-01-15T10:00:00", "2024-01-15T22:00:00", 3),
        ],
        "createdAt": "2024-01-15", "updatedAt": "2024-01-20",
    },
    {
        "id": "marketing-2", "title": "Soldes de printemps",
        "description": "Page dédiée aux promotions de printemps",
        "status": "published", "startDate": "2024-02-01", "endDate": "2024-03-31", "isFlashSale": False,
        "blocks": [
            _banner("block-4", "Bannière printemps", 2, "/spring-sale", "Soldes de printemps", 1),
            {"id": "block-5", "type": "html_block", "title": "Conditions de l'offre", "position": 2, "isVisible": True,
             "content": {"htmlContent": "<h2>Soldes de printemps</h2><p>Jusqu'à -20 % sur tout le site !</p>"
                                        "<ul><li>-20 % sur tout le catalogue</li><li>Livraison offerte dès 80 €</li>"
                                        "<li>Cadeau offert dès 200 €</li></ul>"}},
            _reco("block-6", "Sélection printemps", ["product-7", "product-8", "product-9", "product-10"], 4, 3),
        ],
        "createdAt": "2024-01-18", "updatedAt": "2024-01-22",
    },
    {
        "id": "marketing-3", "title": "Espace nouveaux clients",
        "description": "Offre de bienvenue et produits recommandés",
        "status": "archived", "startDate": "2024-01-01", "endDate": "2024-01-31", "isFlashSale": False,
        "blocks": [
            _banner("block-7", "Bienvenue", 3, "/register", "Espace nouveaux clients", 1),
            _reco("block-8", "Recommandé pour vous", ["product-11", "product-12", "product-13"], 3, 2),
        ],
        "createdAt": "2024-01-10", "updatedAt": "2024-01-25",
    },
    {
        "id": "marketing-4", "title": "Ventes du week-end",
        "description": "Promotions flash du week-end",
        "status": "published", "startDate": "2024-01-27", "endDate": "2024-01-28", "isFlashSale": True,
        "blocks": [
            _banner("block-9", "Bannière week-end", 4, "/weekend-sale", "Ventes du week-end", 1),
            _flash("block-10", "Flash week-end", ["product-14", "product-15", "product-16"],
                   "2024-01-27T09:00:00", "2024-01-28T23:59:59", 2),
        ],
        "createdAt": "2024-01-25", "updatedAt": "2024-01-26",
    },
]


def demo_products(count: int = 30) -> list:
    rnd = random.Random(42)
    products = []
    for i in range(1, count + 1):
        category = rnd.choice(_CATEGORIES)
        brand    = rnd.choice(_BRANDS)
        original = rnd.randint(10, 500) * 1.0
        discount = rnd.randint(5, 50) if rnd.random() > 0.5 else 0
        price    = round(original * (1 - discount / 100), 2) if discount else original
        products.append(ProductDB(
            id=f"product-{i}",
            title=f"{brand} {category} {i}",
            description=f"{category} de qualité, conçu pour durer. Idéal au quotidien.",
            price=price,
            original_price=original if discount else None,
            discount=discount or None,
            images=jd([f"https://picsum.photos/400/300?random={i + k}" for k in (0, 100, 200)]),
            category=category,
            tags=jd([category, brand, "best-seller", "recommandé"]),
            stock=rnd.randint(1, 100),
            status=rnd.choice(_STATUSES),
            brand=brand,
            rating=round(rnd.uniform(3, 5), 1),
            review_count=rnd.randint(10, 500),
            created_at=_EPOCH + timedelta(days=i),
            updated_at=_EPOCH + timedelta(days=i + 30),
        ))
    return products


def demo_pages() -> list:
    rows = []
    for data in _DEMO_PAGES:
        page = Page.model_validate({
            **data,
            "startDate": _d(data["startDate"]), "endDate": _d(data["endDate"]),
            "createdAt": _d(data["createdAt"]), "updatedAt": _d(data["updatedAt"]),
        })
        rows.append(PageDB(
            id=page.id, title=page.title, description=page.description, status=page.status.value,
            start_date=page.start_date, end_date=page.end_date, is_flash_sale=page.is_flash_sale,
            blocks=jd([b.model_dump(mode="json", by_alias=True) for b in page.blocks]),
            created_at=page.created_at, updated_at=page.updated_at,
        ))
    return rows


def seed_demo_data(db: Session) -> None:
    """Insère produits + pages de démo (appelé uniquement sur base vide)."""
    db.add_all(demo_products())
    db.add_all(demo_pages())
