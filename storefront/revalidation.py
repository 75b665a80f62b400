"""
Revalidation — invalide le rendu publié d'une page après sauvegarde.

CacheRevalidator : même process que le cache (API FastAPI).
HttpRevalidator  : POST /api/revalidate sur une instance distante (requests).
"""
import logging
from typing import Optional, Protocol

import requests

from .cache import RenderCache
from .core.errors import RevalidationFailure

log = logging.getLogger(__name__)


class Revalidator(Protocol):
    def revalidate_path(self, path: str) -> None: ...
    def revalidate_tag(self, tag: str) -> None: ...


class CacheRevalidator:
    def __init__(self, cache: RenderCache):
        self.cache = cache

    def revalidate_path(self, path: str) -> None:
        self.cache.revalidate_path(path)

    def revalidate_tag(self, tag: str) -> None:
        self.cache.revalidate_tag(tag)


class HttpRevalidator:
    """
    Client de l'endpoint /api/revalidate.

    Le referer envoyé pointe sur base_url : l'endpoint n'accepte que les
    requêtes dont le referer contient son propre host.
    """

    def __init__(self, base_url: str, session: Optional[requests.Session] = None, timeout: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _post(self, params: dict) -> dict:
        url = f"{self.base_url}/api/revalidate"
        try:
            r = self.session.post(url, params=params, timeout=self.timeout,
                                  headers={"referer": f"{self.base_url}/marketing"})
            r.raise_for_status()
            return r.json()
        except (requests.RequestException, ValueError) as e:
            raise RevalidationFailure(f"revalidation {params} échouée : {e}") from e

    def revalidate_path(self, path: str) -> None:
        data = self._post({"path": path})
        log.info("Revalidation distante %s : %s", path, data.get("message", ""))

    def revalidate_tag(self, tag: str) -> None:
        data = self._post({"tag": tag})
        log.info("Revalidation distante tag %s : %s", tag, data.get("message", ""))
