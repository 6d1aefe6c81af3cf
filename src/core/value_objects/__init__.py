"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- Resolution : Resolution video (largeur x hauteur)
- MediaInfo : Informations techniques d'un fichier video valide
- EntityKind : Type d'entite du catalogue (actor, label, studio, movie)
- MatchingConfig : Interrupteurs d'extraction depuis le chemin
- SceneMatches : Resultat du matching d'un chemin
"""

from src.core.value_objects.media_info import MediaInfo, Resolution
from src.core.value_objects.matching import EntityKind, MatchingConfig, SceneMatches

__all__ = [
    "Resolution",
    "MediaInfo",
    "EntityKind",
    "MatchingConfig",
    "SceneMatches",
]
