"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des données
- INamedEntityRepository : Stockage des acteurs, labels, studios, films
- ISceneRepository : Stockage des scènes et de leurs associations

Port index : Projection interrogeable des entités
- IEntityIndex : Index par type d'entité

Port sonde : Validation des fichiers importés
- IVideoProbe : Classification d'un chemin comme vidéo importable
"""

from src.core.ports.index import IEntityIndex
from src.core.ports.repositories import INamedEntityRepository, ISceneRepository
from src.core.ports.video_probe import IVideoProbe

__all__ = [
    # Repositories
    "INamedEntityRepository",
    "ISceneRepository",
    # Index
    "IEntityIndex",
    # Sonde
    "IVideoProbe",
]
