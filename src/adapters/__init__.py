"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer)
- indexing/ : Index des entités interrogés par le matching
- parsing/ : Validation des fichiers vidéo avec mediainfo

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
Cela permet de changer les implémentations sans affecter la logique métier.
"""

from src.adapters.indexing.memory_index import InMemoryEntityIndex
from src.adapters.parsing.mediainfo_extractor import MediaInfoProbe

__all__ = [
    "InMemoryEntityIndex",
    "MediaInfoProbe",
]
