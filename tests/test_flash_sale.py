"""Tests statut vente flash — bornes incluses, recalcul à chaque appel."""
from datetime import datetime, timedelta, timezone

import pytest

from storefront import (
    FlashSaleContent, Page, PreviewRenderer, PublicRenderer, flash_sale_status, is_flash_sale_active,
)
from storefront.renderer import FlashSaleStatus

START = datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)
END = datetime(2024, 1, 15, 22, 0, tzinfo=timezone.utc)
CONTENT = FlashSaleContent(products=["product-5"], start_time=START, end_time=END)
TICK = timedelta(microseconds=1)


@pytest.mark.parametrize("now, expected", [
    (START - TICK, FlashSaleStatus.NOT_STARTED),
    (START,        FlashSaleStatus.ACTIVE),
    (END,          FlashSaleStatus.ACTIVE),
    (END + TICK,   FlashSaleStatus.ENDED),
])
def test_status_boundaries(now, expected):
    assert flash_sale_status(CONTENT, now) is expected
    assert is_flash_sale_active(CONTENT, now) is (expected is FlashSaleStatus.ACTIVE)


def test_inverted_window_never_active():
    content = FlashSaleContent(start_time=END, end_time=START)
    for now in (START, START + timedelta(hours=6), END):
        assert is_flash_sale_active(content, now) is False


def test_naive_datetimes_read_as_utc():
    content = FlashSaleContent(start_time=datetime(2024, 1, 15, 10, 0), end_time=datetime(2024, 1, 15, 22, 0))
    assert is_flash_sale_active(content, datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc))


# ── Recalcul au rendu ────────────────────────────────────────────────────────

@pytest.mark.parametrize("renderer_cls", [PreviewRenderer, PublicRenderer])
def test_render_follows_clock_across_end(renderer_cls, products):
    page = Page.model_validate({
        "id": "flash", "title": "Vente flash", "status": "published",
        "createdAt": START, "updatedAt": START,
        "blocks": [{"id": "f", "type": "flash_sale",
                    "content": {"products": ["product-5"], "startTime": START, "endTime": END}}],
    })
    renderer = renderer_cls(products)
    assert 'data-active="true"' in renderer.render_page(page, now=END)
    assert 'data-active="false"' in renderer.render_page(page, now=END + TICK)
