"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Les implémentations (adaptateurs) fournissent les mécanismes de stockage concrets
(SQLite via SQLModel, mocks pour les tests, etc.).

Les écritures sont visibles immédiatement par les lectures suivantes du même processus.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, Optional, TypeVar

from src.core.entities import Actor, Label, Movie, NamedEntity, Scene, Studio

E = TypeVar("E", bound=NamedEntity)


class INamedEntityRepository(ABC, Generic[E]):
    """
    Interface de stockage d'une collection d'entités nommées.

    Une implémentation par type : acteurs, labels, studios, films.
    """

    @abstractmethod
    def upsert(self, entity_id: str, entity: E) -> E:
        """Insère ou remplace l'entité sous l'identifiant donné."""
        ...

    @abstractmethod
    def get_all(self) -> list[E]:
        """Liste toutes les entités, par ordre de création."""
        ...

    @abstractmethod
    def get_by_id(self, entity_id: str) -> Optional[E]:
        """Récupère une entité par son ID, ou None."""
        ...

    @abstractmethod
    def delete(self, entity_id: str) -> bool:
        """
        Supprime une entité par ID. Retourne True si supprimée.

        Les scènes qui la référencent la perdent dans la même transaction
        (association retirée, référence studio vidée).
        """
        ...


IActorRepository = INamedEntityRepository[Actor]
ILabelRepository = INamedEntityRepository[Label]
IStudioRepository = INamedEntityRepository[Studio]
IMovieRepository = INamedEntityRepository[Movie]


class ISceneRepository(ABC):
    """
    Interface de stockage des scènes et de leurs associations.

    save() écrit l'enregistrement et ses associations dans une seule
    transaction : aucun lecteur ne voit une scène à moitié écrite.
    """

    @abstractmethod
    def save(self, scene: Scene) -> Scene:
        """Sauvegarde une scène et ses associations (insertion ou mise à jour)."""
        ...

    @abstractmethod
    def get_by_id(self, scene_id: str) -> Optional[Scene]:
        """Récupère une scène par son ID."""
        ...

    @abstractmethod
    def get_by_path(self, path: Path) -> Optional[Scene]:
        """Récupère la première scène importée pour ce chemin."""
        ...

    @abstractmethod
    def get_all(self) -> list[Scene]:
        """Liste toutes les scènes, par date d'import."""
        ...

    @abstractmethod
    def delete(self, scene_id: str) -> bool:
        """Supprime une scène et ses associations. Retourne True si supprimée."""
        ...

    @abstractmethod
    def list_by_studio(self, studio_id: str) -> list[Scene]:
        """Liste les scènes référençant ce studio."""
        ...

    @abstractmethod
    def get_actors(self, scene_id: str) -> list[Actor]:
        """Acteurs associés à une scène."""
        ...

    @abstractmethod
    def get_labels(self, scene_id: str) -> list[Label]:
        """Labels associés à une scène."""
        ...

    @abstractmethod
    def get_movies(self, scene_id: str) -> list[Movie]:
        """Films associés à une scène."""
        ...
