"""
Configuration — variables d'environnement avec valeurs par défaut.

DATABASE_URL          sqlite:// (mémoire, connexion partagée)
BASE_URL              URL publique (sitemap, robots, revalidation HTTP)
REVALIDATE_SECONDS    fenêtre de régénération des pages publiées
MARKETING_PAGES_TAG   tag de revalidation des pages publiées
SEED_DEMO_DATA        1 → produits + pages de démo au premier démarrage
SIMULATED_LATENCY_MS  latence de l'adaptateur "client" du store
LOG_LEVEL             niveau du logger racine
"""
import os
from dataclasses import dataclass


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    database_url: str = "sqlite://"
    base_url: str = "http://localhost:8000"
    revalidate_seconds: int = 3600
    marketing_pages_tag: str = "marketing-pages"
    seed_demo_data: bool = True
    simulated_latency_ms: int = 0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_url=os.getenv("DATABASE_URL", "sqlite://"),
            base_url=os.getenv("BASE_URL", "http://localhost:8000").rstrip("/"),
            revalidate_seconds=int(os.getenv("REVALIDATE_SECONDS", "3600")),
            marketing_pages_tag=os.getenv("MARKETING_PAGES_TAG", "marketing-pages"),
            seed_demo_data=_flag("SEED_DEMO_DATA", "1"),
            simulated_latency_ms=int(os.getenv("SIMULATED_LATENCY_MS", "0")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


def public_page_path(page_id: str) -> str:
    """Route publique d'une page marketing."""
    return f"/page/{page_id}"
