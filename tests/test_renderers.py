"""
Tests renderers — prévisualisation (placeholders) vs page publiée (blocs vides omis),
contrat commun : visibilité, ordre, résolution produits.
"""
from datetime import timedelta
from unittest.mock import MagicMock

import pytest

from storefront import Page, PersistenceFailure, PreviewRenderer, PublicRenderer, build_page_metadata
from storefront.renderer import referenced_product_ids, resolve_products, visible_blocks


def _page(blocks, now, **kw):
    return Page.model_validate({"id": "p-test", "title": "Soldes", "createdAt": now, "updatedAt": now,
                                "status": "published", "blocks": blocks, **kw})


def _banner(bid, position=1, image="https://cdn.test/banner.jpg", link=None, visible=True):
    return {"id": bid, "type": "banner", "position": position, "isVisible": visible,
            "content": {"image": image, "link": link, "alt": "Promo"}}


def _reco(bid, ids, count=4, position=1):
    return {"id": bid, "type": "product_recommendation", "position": position,
            "content": {"products": ids, "displayCount": count}}


def _flash(bid, ids, start, end, position=1):
    return {"id": bid, "type": "flash_sale", "position": position, "title": "Vente flash",
            "content": {"products": ids, "startTime": start, "endTime": end}}


def _cards(html):
    return html.count("data-product-id=")


# ── Contrat commun ───────────────────────────────────────────────────────────

class TestSharedContract:
    def test_hidden_blocks_excluded(self, now):
        page = _page([_banner("a"), _banner("b", position=2, visible=False)], now)
        assert [b.id for b in visible_blocks(page.blocks)] == ["a"]

    def test_position_order(self, now):
        page = _page([_banner("late", position=5), _banner("early", position=2)], now)
        assert [b.id for b in visible_blocks(page.blocks)] == ["early", "late"]

    def test_referenced_ids_deduplicated_in_order(self, now):
        page = _page([_reco("r", ["product-3", "product-1"]),
                      _reco("s", ["product-1", "product-2"], position=2)], now)
        assert referenced_product_ids(page.blocks) == ["product-3", "product-1", "product-2"]

    def test_lookup_failure_skips_product(self, now):
        lookup = MagicMock()
        lookup.get.side_effect = PersistenceFailure("down")
        assert resolve_products(_page([_reco("r", ["product-1"])], now).blocks, lookup) == []

    @pytest.mark.parametrize("renderer_cls", [PreviewRenderer, PublicRenderer])
    def test_both_renderers_follow_position_order(self, renderer_cls, products, now):
        page = _page([_banner("second", position=2), _banner("first", position=1)], now)
        html = renderer_cls(products).render_page(page, now=now)
        assert html.index('data-block-id="first"') < html.index('data-block-id="second"')

    @pytest.mark.parametrize("renderer_cls", [PreviewRenderer, PublicRenderer])
    def test_both_renderers_skip_hidden(self, renderer_cls, products, now):
        page = _page([_banner("shown"), _banner("hidden", position=2, visible=False)], now)
        html = renderer_cls(products).render_page(page, now=now)
        assert 'data-block-id="hidden"' not in html


# ── Prévisualisation ─────────────────────────────────────────────────────────

class TestPreview:
    def test_banner_placeholder(self, products, now):
        html = PreviewRenderer(products).render_page(_page([_banner("a", image="")], now), now=now)
        assert "Aucune image définie" in html

    def test_recommendation_empty_state(self, products, now):
        html = PreviewRenderer(products).render_page(_page([_reco("r", [])], now), now=now)
        assert "Aucun produit sélectionné" in html

    def test_recommendation_unresolved_state(self, products, now):
        html = PreviewRenderer(products).render_page(_page([_reco("r", ["product-404"])], now), now=now)
        assert "Aucun des produits sélectionnés" in html

    def test_display_count_caps_cards(self, products, now):
        ids = [f"product-{i}" for i in range(1, 7)]
        html = PreviewRenderer(products).render_page(_page([_reco("r", ids, count=3)], now), now=now)
        assert _cards(html) == 3

    def test_missing_products_silently_skipped(self, products, now):
        html = PreviewRenderer(products).render_page(
            _page([_reco("r", ["product-1", "product-404", "product-2"])], now), now=now)
        assert _cards(html) == 2

    def test_flash_sale_status_badge(self, products, now):
        page = _page([_flash("f", ["product-5"], now - timedelta(hours=1), now + timedelta(hours=1))], now)
        html = PreviewRenderer(products).render_page(page, now=now)
        assert 'data-active="true"' in html
        assert 'data-status="active"' in html

    def test_renders_unsaved_draft(self, products, now):
        from storefront import PageCreate
        draft = PageCreate(title="Brouillon", blocks=[_banner("a")])
        assert "Brouillon" in PreviewRenderer(products).render_page(draft, now=now)


# ── Page publiée ─────────────────────────────────────────────────────────────

class TestPublic:
    def test_banner_without_image_omitted(self, products, now):
        html = PublicRenderer(products).render_page(_page([_banner("a", image="")], now), now=now)
        assert 'data-block-id="a"' not in html
        assert "Aucune image" not in html

    def test_banner_link_wraps_image(self, products, now):
        html = PublicRenderer(products).render_page(_page([_banner("a", link="/promo")], now), now=now)
        assert '<a href="/promo"' in html

    def test_recommendation_without_resolved_products_omitted(self, products, now):
        html = PublicRenderer(products).render_page(_page([_reco("r", ["product-404"])], now), now=now)
        assert 'data-block-id="r"' not in html

    def test_html_block_raw(self, products, now):
        page = _page([{"id": "h", "type": "html_block", "content": {"htmlContent": "<ul><li>-20 %</li></ul>"}}], now)
        assert "<ul><li>-20 %</li></ul>" in PublicRenderer(products).render_page(page, now=now)

    def test_empty_html_block_omitted(self, products, now):
        page = _page([{"id": "h", "type": "html_block", "content": {"htmlContent": ""}}], now)
        assert 'data-block-id="h"' not in PublicRenderer(products).render_page(page, now=now)

    def test_active_flash_sale_shows_flash_price(self, products, now):
        page = _page([_flash("f", ["product-5", "product-6"], now - timedelta(hours=1), now + timedelta(hours=1))], now)
        html = PublicRenderer(products).render_page(page, now=now)
        assert html.count("Prix flash") == 2
        assert "🔥" in html

    def test_ended_flash_sale_no_flash_price(self, products, now):
        page = _page([_flash("f", ["product-5"], now - timedelta(days=2), now - timedelta(days=1))], now)
        html = PublicRenderer(products).render_page(page, now=now)
        assert "Prix flash" not in html
        assert 'data-status="ended"' in html

    def test_text_is_escaped(self, products, now):
        page = _page([_banner("a")], now, title="<script>alert(1)</script>")
        html = PublicRenderer(products).render_page(page, now=now)
        assert "<script>alert(1)</script>" not in html


# ── SEO ──────────────────────────────────────────────────────────────────────

class TestMetadata:
    def test_og_image_from_first_visible_banner(self, now):
        page = _page([_banner("b2", position=2, image="second.jpg"),
                      _banner("b1", position=1, image="first.jpg"),
                      _banner("b0", position=0, image="hidden.jpg", visible=False)], now)
        meta = build_page_metadata(page, "https://shop.test")
        assert meta["og_image"] == "first.jpg"
        assert [i["url"] for i in meta["open_graph"]["images"]] == ["first.jpg", "second.jpg"]

    def test_description_fallback(self, now):
        meta = build_page_metadata(_page([], now), "https://shop.test/")
        assert meta["description"] == "Soldes — page marketing"
        assert meta["canonical"] == "https://shop.test/page/p-test"

    def test_head_contains_json_ld(self, products, now):
        html = PublicRenderer(products, base_url="https://shop.test").render_page(_page([_banner("a")], now), now=now)
        assert "application/ld+json" in html
        assert 'property="og:image" content="https://cdn.test/banner.jpg"' in html
