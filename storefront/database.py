"""SQLite — moteur + sessions + init/seed. Un objet Database par application, injecté."""
import json
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .models import Base, PageDB, ProductDB

log = logging.getLogger(__name__)


# ── JSON helpers ──
def jl(s: str) -> list:
    try:
        return json.loads(s or "[]")
    except ValueError:
        log.warning("JSON illisible en base, liste vide utilisée")
        return []

def jd(o) -> str:
    return json.dumps(o, ensure_ascii=False)


def make_engine(url: str):
    # sqlite:// en mémoire : une seule connexion partagée entre sessions et threads
    if url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(url, connect_args={"check_same_thread": False}, poolclass=StaticPool)
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url)


class Database:
    """
    Moteur + fabrique de sessions, construit une fois puis injecté dans les stores.

    Usage:
        >>> db = Database("sqlite://")
        >>> db.init(seed=True)
        >>> with db.session() as s:
        ...     s.query(PageDB).count()
    """

    def __init__(self, url: str = "sqlite://"):
        self.url = url
        self.engine = make_engine(url)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine,
                                         expire_on_commit=False)

    def init(self, seed: bool = True) -> None:
        Base.metadata.create_all(bind=self.engine)
        if not seed:
            return
        from .seeds import seed_demo_data
        with self.session() as s:
            if s.query(ProductDB).count() == 0 and s.query(PageDB).count() == 0:
                seed_demo_data(s)
                s.commit()
                log.info("Données de démo insérées")

    @contextmanager
    def session(self) -> Iterator[Session]:
        s = self.SessionLocal()
        try:
            yield s
        finally:
            s.close()

    def dispose(self) -> None:
        self.engine.dispose()
