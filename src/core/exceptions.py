"""
Exceptions du domaine SceneVault.

Toutes les erreurs levees par le coeur heritent de SceneVaultError pour
permettre aux interfaces (CLI) de les intercepter en un seul point.
"""

from pathlib import Path
from typing import Optional


class SceneVaultError(Exception):
    """Erreur de base de l'application."""


class ValidationError(SceneVaultError):
    """
    Le chemin fourni ne designe pas un fichier video lisible et reconnu.

    Attributs:
        path: Chemin rejete
        reason: Raison lisible du rejet
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Fichier invalide ({reason}): {path}")


class MatchingError(SceneVaultError):
    """
    Echec de l'interrogation d'un index pendant l'extraction.

    Attributs:
        kind: Type d'entite dont l'index a echoue
    """

    def __init__(self, kind: str, cause: Optional[BaseException] = None) -> None:
        self.kind = kind
        message = f"Echec du matching des {kind}s"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class PersistenceError(SceneVaultError):
    """Echec d'ecriture ou de lecture dans la base de donnees."""
