"""
Cache de rendu des pages publiées (ISR) — expiration temporelle + invalidation
à la demande par chemin ou par tag.
"""
import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional, Set

from .core.clock import utcnow

log = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    path: str
    html: str
    rendered_at: datetime
    tags: Set[str] = field(default_factory=set)


class RenderCache:
    """Cache thread-safe (endpoints sync servis par le threadpool FastAPI)."""

    def __init__(self, revalidate_seconds: int = 3600):
        self.window = timedelta(seconds=revalidate_seconds)
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        # Incrémenté à chaque invalidation
        self._epoch = 0

    def get(self, path: str, now: Optional[datetime] = None) -> Optional[CacheEntry]:
        """Entrée fraîche ou None (absente, invalidée, ou fenêtre dépassée)."""
        now = now or utcnow()
        with self._lock:
            entry = self._entries.get(path)
            if entry is None:
                return None
            if now - entry.rendered_at >= self.window:
                del self._entries[path]
                log.info("Cache expiré pour %s", path)
                return None
            return entry

    def epoch(self) -> int:
        with self._lock:
            return self._epoch

    def set(self, path: str, html: str, tags: Iterable[str] = (), now: Optional[datetime] = None,
            epoch: Optional[int] = None) -> Optional[CacheEntry]:
        """
        Enregistre un rendu. Avec `epoch` (lu avant le chargement de la page),
        le rendu est écarté si une invalidation a eu lieu entre-temps.
        """
        entry = CacheEntry(path=path, html=html, rendered_at=now or utcnow(), tags=set(tags))
        with self._lock:
            if epoch is not None and epoch != self._epoch:
                log.info("Rendu de %s non mis en cache (invalidé pendant la génération)", path)
                return None
            self._entries[path] = entry
        return entry

    def revalidate_path(self, path: str) -> bool:
        with self._lock:
            removed = self._entries.pop(path, None) is not None
            self._epoch += 1
        log.info("Revalidation chemin %s (%s)", path, "purgé" if removed else "absent du cache")
        return removed

    def revalidate_tag(self, tag: str) -> List[str]:
        with self._lock:
            paths = [p for p, e in self._entries.items() if tag in e.tags]
            for p in paths:
                del self._entries[p]
            self._epoch += 1
        log.info("Revalidation tag %s — %d chemin(s) purgé(s)", tag, len(paths))
        return paths

    def paths(self) -> List[str]:
        with self._lock:
            return sorted(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
