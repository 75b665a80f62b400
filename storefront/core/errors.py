"""
Erreurs métier — chaque échec reste limité à l'interaction qui l'a déclenché.
Aucune politique de retry : l'utilisateur relance lui-même l'opération.
"""


class StorefrontError(Exception):
    """Erreur de base du back-office."""


class NotFound(StorefrontError):
    """Page ou produit introuvable."""

    def __init__(self, kind: str, ident: str):
        self.kind = kind
        self.ident = ident
        super().__init__(f"{kind} introuvable : {ident!r}")


class ValidationFailure(StorefrontError):
    """Champ requis manquant ou invalide — bloque la sauvegarde avant le store."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field} : {message}")


class UnsupportedBlockType(ValidationFailure):
    """Type de bloc inconnu ou réservé (carousel)."""

    def __init__(self, block_type: str):
        self.block_type = block_type
        super().__init__("type", f"type de bloc non supporté : {block_type!r}")


class PersistenceFailure(StorefrontError):
    """Le store a rejeté l'opération (pas de retry automatique)."""


class RevalidationFailure(StorefrontError):
    """La revalidation (effet de bord best-effort) a échoué."""
