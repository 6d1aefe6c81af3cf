"""
Interface port pour les index d'entités.

Un index est une projection interrogeable d'une collection du store.
Il n'est pas couplé au chemin d'écriture du store : l'appelant doit
appeler index() après chaque mutation (voir CatalogService).
"""

from abc import ABC, abstractmethod
from typing import Iterable

from src.core.entities import NamedEntity
from src.core.value_objects import EntityKind


class IEntityIndex(ABC):
    """
    Index des entités d'un type, interrogé par le matching des chemins.

    Attributs:
        kind: Type d'entité indexé
    """

    kind: EntityKind

    @abstractmethod
    def index(self, records: Iterable[NamedEntity]) -> None:
        """Ajoute ou remplace des entités dans l'index."""
        ...

    @abstractmethod
    def remove(self, entity_ids: Iterable[str]) -> None:
        """Retire des entités de l'index (IDs inconnus ignorés)."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Vide l'index."""
        ...

    @abstractmethod
    def candidates(self) -> tuple[NamedEntity, ...]:
        """
        Instantané des entités indexées, dans l'ordre d'indexation.

        Les entités indexées après l'appel ne sont pas visibles
        dans l'instantané retourné.
        """
        ...

    @abstractmethod
    def search(self, query: str, limit: int = 10) -> list[NamedEntity]:
        """Recherche approchée par nom, pour la consultation interactive."""
        ...

    @abstractmethod
    def __len__(self) -> int:
        ...
