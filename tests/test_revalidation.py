"""Tests HttpRevalidator — requests mocké, erreurs réseau → RevalidationFailure."""
from unittest.mock import MagicMock

import pytest
import requests

from storefront import CacheRevalidator, HttpRevalidator, RevalidationFailure


def _session(payload=None):
    session = MagicMock()
    session.post.return_value.json.return_value = payload or {"revalidated": True, "message": "ok"}
    return session


def test_path_request():
    session = _session()
    HttpRevalidator("https://shop.test/", session=session).revalidate_path("/page/marketing-1")
    session.post.assert_called_once_with(
        "https://shop.test/api/revalidate",
        params={"path": "/page/marketing-1"},
        timeout=5.0,
        headers={"referer": "https://shop.test/marketing"},
    )


def test_tag_request():
    session = _session()
    HttpRevalidator("https://shop.test", session=session).revalidate_tag("marketing-pages")
    assert session.post.call_args.kwargs["params"] == {"tag": "marketing-pages"}


def test_network_error():
    session = MagicMock()
    session.post.side_effect = requests.ConnectionError("refused")
    with pytest.raises(RevalidationFailure):
        HttpRevalidator("https://shop.test", session=session).revalidate_path("/page/x")


def test_http_error_status():
    session = _session()
    session.post.return_value.raise_for_status.side_effect = requests.HTTPError("401 Unauthorized")
    with pytest.raises(RevalidationFailure):
        HttpRevalidator("https://shop.test", session=session).revalidate_path("/page/x")


def test_cache_revalidator_purges_local_cache(cache, now):
    cache.set("/page/a", "a", tags={"marketing-pages"}, now=now)
    cache.set("/page/b", "b", tags={"marketing-pages"}, now=now)
    rv = CacheRevalidator(cache)
    rv.revalidate_path("/page/a")
    assert cache.paths() == ["/page/b"]
    rv.revalidate_tag("marketing-pages")
    assert cache.paths() == []
