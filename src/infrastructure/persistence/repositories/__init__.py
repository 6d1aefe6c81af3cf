"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans src/core/ports/repositories.py, utilisant SQLModel pour
la persistance SQLite.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from src.infrastructure.persistence.repositories.entity_repository import (
    SQLModelActorRepository,
    SQLModelLabelRepository,
    SQLModelMovieRepository,
    SQLModelStudioRepository,
)
from src.infrastructure.persistence.repositories.scene_repository import (
    SQLModelSceneRepository,
)

__all__ = [
    "SQLModelActorRepository",
    "SQLModelLabelRepository",
    "SQLModelStudioRepository",
    "SQLModelMovieRepository",
    "SQLModelSceneRepository",
]
