"""
Entités métier représentant les concepts du domaine.

Exports:
- NamedEntity: Base commune des entités nommées du catalogue
- Actor, Label, Studio, Movie: Entités référencées par les scènes
- Scene: Fichier vidéo importé et ses relations
- ENTITY_CLASSES: Classe d'entité par EntityKind
"""

from src.core.entities.catalog import (
    ENTITY_CLASSES,
    Actor,
    Label,
    Movie,
    NamedEntity,
    Studio,
)
from src.core.entities.scene import Scene

__all__ = [
    "NamedEntity",
    "Actor",
    "Label",
    "Studio",
    "Movie",
    "Scene",
    "ENTITY_CLASSES",
]
