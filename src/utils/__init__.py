"""
Utilitaires et constantes pour SceneVault.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from src.utils.constants import IGNORED_PATTERNS, VIDEO_EXTENSIONS

__all__ = [
    "VIDEO_EXTENSIONS",
    "IGNORED_PATTERNS",
]
