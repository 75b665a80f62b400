"""
Éditeur de composition — liste ordonnée des blocs d'une page en cours d'édition.

Les positions ne sont recalculées qu'à la sauvegarde : en cours d'édition
elles peuvent contenir des trous (suppression) ou être désordonnées (reorder).
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..blocks import BaseBlock, BlockType, create_default_block, parse_block
from ..config import public_page_path
from ..core.errors import NotFound, ValidationFailure
from ..core.schemas import Page, PageCreate, PageStatus, PageUpdate, require_title
from .block_editors import EDITORS, ProductSelectingEditor

log = logging.getLogger(__name__)

_METADATA_FIELDS = ("title", "description", "status", "start_date", "end_date", "is_flash_sale")


class CompositionEditor:
    """
    Usage:
        >>> editor = CompositionEditor(store, revalidator, title="Soldes")
        >>> editor.add_block("banner")
        >>> editor.reorder(0, 1)
        >>> page = editor.save()
    """

    def __init__(self, store, revalidator=None, page: Optional[Page] = None, **metadata):
        self.store = store
        self.revalidator = revalidator
        self.page = page
        self.blocks: List[BaseBlock] = list(page.blocks) if page else []
        self.metadata: Dict[str, Any] = {
            "title": "", "description": None, "status": PageStatus.DRAFT,
            "start_date": None, "end_date": None, "is_flash_sale": False,
        }
        if page is not None:
            self.metadata.update({f: getattr(page, f) for f in _METADATA_FIELDS})
        self.update_metadata(**metadata)

    @classmethod
    def open(cls, store, page_id: str, revalidator=None) -> "CompositionEditor":
        page = store.get(page_id)
        if page is None:
            raise NotFound("page", page_id)
        return cls(store, revalidator, page=page)

    @property
    def page_id(self) -> Optional[str]:
        return self.page.id if self.page else None

    # ── Métadonnées ─────────────────────────────────────────────────────────

    def update_metadata(self, **fields) -> None:
        unknown = set(fields) - set(_METADATA_FIELDS)
        if unknown:
            raise ValidationFailure(", ".join(sorted(unknown)), "champ de page inconnu")
        if "status" in fields:
            fields["status"] = PageStatus(fields["status"])
        self.metadata.update(fields)

    # ── Blocs ───────────────────────────────────────────────────────────────

    def _index(self, block_id: str) -> int:
        for i, b in enumerate(self.blocks):
            if b.id == block_id:
                return i
        raise NotFound("bloc", block_id)

    def get_block(self, block_id: str) -> BaseBlock:
        return self.blocks[self._index(block_id)]

    def add_block(self, block_type: BlockType | str, now: Optional[datetime] = None) -> BaseBlock:
        """Ajoute un bloc par défaut en dernière position."""
        block = create_default_block(block_type, existing_count=len(self.blocks), now=now)
        self.blocks.append(block)
        return block

    def remove_block(self, block_id: str) -> BaseBlock:
        """Supprime un bloc ; les positions restantes ne sont pas compactées avant save()."""
        return self.blocks.pop(self._index(block_id))

    def reorder(self, from_index: int, to_index: int) -> None:
        """Déplace un seul bloc : retrait à from_index puis insertion à to_index."""
        size = len(self.blocks)
        if not (0 <= from_index < size and 0 <= to_index < size):
            raise IndexError(f"reorder({from_index}, {to_index}) hors limites (0..{size - 1})")
        block = self.blocks.pop(from_index)
        self.blocks.insert(to_index, block)

    def move_block(self, active_id: str, over_id: str) -> None:
        """Fin de drag & drop : le bloc déplacé prend la place du bloc survolé."""
        if active_id == over_id:
            return
        self.reorder(self._index(active_id), self._index(over_id))

    def update_block(self, block: BaseBlock) -> None:
        """Callback des éditeurs de blocs : remplace le bloc de même id."""
        self.blocks[self._index(block.id)] = block

    def set_visibility(self, block_id: str, visible: bool) -> BaseBlock:
        i = self._index(block_id)
        self.blocks[i] = self.blocks[i].model_copy(update={"is_visible": visible})
        return self.blocks[i]

    def replace_blocks(self, blocks) -> None:
        self.blocks = [parse_block(b) for b in blocks]

    def editor_for(self, block_id: str, products=None):
        """Éditeur de la variante du bloc, branché sur update_block."""
        block = self.get_block(block_id)
        editor_cls = EDITORS.get(block.type)
        if editor_cls is None:
            raise ValidationFailure("type", f"aucun éditeur pour {block.type!r}")
        if issubclass(editor_cls, ProductSelectingEditor):
            if products is None:
                raise ValueError(f"l'éditeur {block.type!r} requiert un lookup produits")
            return editor_cls(block, self.update_block, products)
        return editor_cls(block, self.update_block)

    # ── Sauvegarde ──────────────────────────────────────────────────────────

    def renumber(self) -> None:
        """Positions denses 1..N dans l'ordre courant."""
        self.blocks = [b.model_copy(update={"position": i}) for i, b in enumerate(self.blocks, 1)]

    def save(self) -> Page:
        """
        Persiste l'agrégat complet.

        Raises:
            ValidationFailure: titre vide (le store n'est pas appelé)
            NotFound: la page a disparu du store entre-temps
            PersistenceFailure: le store a rejeté l'écriture
        """
        self.metadata["title"] = require_title(self.metadata.get("title"))
        self.renumber()
        was_published = self.page is not None and self.page.is_published

        if self.page is None:
            page = self.store.create(PageCreate(**self.metadata, blocks=self.blocks))
        else:
            page = self.store.update(self.page.id, PageUpdate(**self.metadata, blocks=self.blocks))
            if page is None:
                raise NotFound("page", self.page.id)

        self.page = page
        self.blocks = list(page.blocks)
        # Un dépublié doit aussi sortir du cache public
        if page.is_published or was_published:
            self._revalidate(page.id)
        return page

    def _revalidate(self, page_id: str) -> None:
        if self.revalidator is None:
            return
        path = public_page_path(page_id)
        try:
            self.revalidator.revalidate_path(path)
            log.info("Page %s revalidée", path)
        except Exception as e:
            # Effet de bord : la page est déjà persistée
            log.warning("Revalidation de %s échouée (sauvegarde conservée) : %s", path, e)
