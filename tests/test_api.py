"""
Tests API HTTP — CRUD pages, page publiée (cache), revalidation, prévisualisation, SEO.
"""
import logging

from storefront import Settings

REFERER = {"referer": "http://testserver/marketing"}


# ── Pages ────────────────────────────────────────────────────────────────────

class TestPagesAPI:
    def test_health(self, client):
        assert client.get("/health").json()["status"] == "ok"

    def test_log_level_from_settings(self, empty_db):
        from storefront.api.main import create_app
        root = logging.getLogger()
        previous = root.level
        try:
            create_app(Settings(log_level="debug", seed_demo_data=False), database=empty_db)
            assert root.level == logging.DEBUG
        finally:
            root.setLevel(previous)

    def test_list_paginated(self, client):
        body = client.get("/api/pages", params={"page": 1, "limit": 2}).json()
        assert len(body["data"]) == 2
        assert body["pagination"]["totalPages"] == 2

    def test_list_sort(self, client):
        body = client.get("/api/pages", params={"sortBy": "title", "sortOrder": "asc"}).json()
        titles = [p["title"] for p in body["data"]]
        assert titles == sorted(titles)

    def test_invalid_sort_order_rejected(self, client):
        assert client.get("/api/pages", params={"sortOrder": "sideways"}).status_code == 422

    def test_published(self, client):
        ids = {p["id"] for p in client.get("/api/pages/published").json()}
        assert ids == {"marketing-1", "marketing-2", "marketing-4"}

    def test_get_camel_case(self, client):
        page = client.get("/api/pages/marketing-1").json()
        assert page["isFlashSale"] is True
        assert page["blocks"][1]["content"]["displayCount"] == 4

    def test_get_missing_404(self, client):
        assert client.get("/api/pages/nope").status_code == 404

    def test_create(self, client):
        r = client.post("/api/pages", json={
            "title": "Nouvelle page",
            "blocks": [{"id": "b1", "type": "banner", "position": 7, "content": {"image": "x.jpg"}}],
        })
        assert r.status_code == 201
        page = r.json()
        assert page["status"] == "draft"
        assert page["blocks"][0]["position"] == 1

    def test_create_blank_title_422(self, client):
        r = client.post("/api/pages", json={"title": "  "})
        assert r.status_code == 422
        assert r.json()["field"] == "title"

    def test_create_carousel_rejected(self, client):
        r = client.post("/api/pages", json={"title": "T", "blocks": [{"id": "c", "type": "carousel", "content": {}}]})
        assert r.status_code == 422

    def test_update_partial(self, client):
        r = client.put("/api/pages/marketing-2", json={"description": "Nouvelle description"})
        assert r.status_code == 200
        body = r.json()
        assert body["description"] == "Nouvelle description"
        assert body["title"] == "Soldes de printemps"
        assert len(body["blocks"]) == 3

    def test_update_missing_404(self, client):
        assert client.put("/api/pages/nope", json={"title": "x"}).status_code == 404

    def test_delete(self, client):
        assert client.delete("/api/pages/marketing-4").status_code == 200
        assert client.get("/api/pages/marketing-4").status_code == 404
        assert client.get("/page/marketing-4").status_code == 404
        assert client.delete("/api/pages/marketing-4").status_code == 404

    def test_block_catalog(self, client):
        types = [b["type"] for b in client.get("/api/blocks/catalog").json()["blocks"]]
        assert "carousel" not in types
        assert len(types) == 4


# ── Produits ─────────────────────────────────────────────────────────────────

class TestProductsAPI:
    def test_list(self, client):
        assert client.get("/api/products", params={"limit": 5}).json()["pagination"]["total"] == 30

    def test_search(self, client):
        assert client.get("/api/products/search", params={"q": "best-seller"}).json()["pagination"]["total"] == 30

    def test_get(self, client):
        assert client.get("/api/products/product-3").json()["id"] == "product-3"

    def test_get_missing(self, client):
        assert client.get("/api/products/product-999").status_code == 404


# ── Page publiée ─────────────────────────────────────────────────────────────

class TestPublicPage:
    def test_prerendered_at_startup(self, client):
        r = client.get("/page/marketing-1")
        assert r.status_code == 200
        assert r.headers["x-cache"] == "HIT"
        assert r.headers["cache-control"] == "s-maxage=3600, stale-while-revalidate"

    def test_archived_404(self, client):
        r = client.get("/page/marketing-3")
        assert r.status_code == 404
        assert "Page introuvable" in r.text

    def test_save_revalidates_page(self, client):
        client.put("/api/pages/marketing-2", json={"title": "Soldes d'été"})
        r = client.get("/page/marketing-2")
        assert r.headers["x-cache"] == "MISS"
        assert "Soldes d&#x27;été" in r.text
        assert client.get("/page/marketing-2").headers["x-cache"] == "HIT"

    def test_unpublish_removes_public_page(self, client):
        client.put("/api/pages/marketing-1", json={"status": "draft"})
        assert client.get("/page/marketing-1").status_code == 404


# ── Revalidation ─────────────────────────────────────────────────────────────

class TestRevalidateAPI:
    def test_unauthorized_without_referer(self, client):
        r = client.post("/api/revalidate", params={"path": "/page/marketing-1"})
        assert r.status_code == 401
        assert r.json() == {"message": "Unauthorized"}

    def test_unauthorized_foreign_referer(self, client):
        r = client.post("/api/revalidate", params={"path": "/page/marketing-1"},
                        headers={"referer": "https://evil.test/"})
        assert r.status_code == 401

    def test_path(self, client):
        r = client.post("/api/revalidate", params={"path": "/page/marketing-1"}, headers=REFERER)
        assert r.status_code == 200
        body = r.json()
        assert body["revalidated"] is True
        assert body["path"] == "/page/marketing-1"
        assert "timestamp" in body
        assert client.get("/page/marketing-1").headers["x-cache"] == "MISS"

    def test_tag(self, client):
        r = client.post("/api/revalidate", params={"tag": "marketing-pages"}, headers=REFERER)
        assert r.json()["tag"] == "marketing-pages"
        assert client.get("/page/marketing-2").headers["x-cache"] == "MISS"

    def test_missing_param(self, client):
        r = client.post("/api/revalidate", headers=REFERER)
        assert r.status_code == 400
        assert r.json() == {"message": "Missing path or tag parameter"}

    def test_usage(self, client):
        assert "usage" in client.get("/api/revalidate").json()


# ── Prévisualisation ─────────────────────────────────────────────────────────

class TestPreviewAPI:
    def test_preview_draft_page(self, client):
        r = client.get("/marketing/marketing-3/preview")
        assert r.status_code == 200
        assert "Espace nouveaux clients" in r.text

    def test_preview_missing(self, client):
        assert client.get("/marketing/nope/preview").status_code == 404

    def test_preview_unsaved(self, client):
        r = client.post("/marketing/preview", json={
            "title": "Brouillon",
            "blocks": [{"id": "b", "type": "banner", "content": {"image": ""}}],
        })
        assert r.status_code == 200
        assert "Aucune image définie" in r.text


# ── SEO ──────────────────────────────────────────────────────────────────────

class TestSeo:
    def test_sitemap_lists_published_only(self, client):
        r = client.get("/sitemap.xml")
        assert r.headers["content-type"].startswith("application/xml")
        assert "http://testserver/page/marketing-1" in r.text
        assert "marketing-3" not in r.text
        assert "<loc>http://testserver/products</loc>" in r.text

    def test_robots(self, client):
        text = client.get("/robots.txt").text
        assert "User-agent: Googlebot" in text
        assert "Disallow: /api/" in text
        assert text.strip().endswith("Sitemap: http://testserver/sitemap.xml")
