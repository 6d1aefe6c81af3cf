"""
Service de gestion du catalogue d'entites.

CatalogService cree les acteurs, labels, studios et films, puis les
indexe explicitement : l'index n'est pas couple au chemin d'ecriture
du store, chaque mutation passe donc par ce service.
"""

from typing import Iterable, Mapping

from loguru import logger

from src.core.entities import ENTITY_CLASSES, NamedEntity, Scene
from src.core.ports.index import IEntityIndex
from src.core.ports.repositories import INamedEntityRepository, ISceneRepository
from src.core.value_objects import EntityKind
from src.utils.helpers import clean_name


class CatalogService:
    """
    Creation, consultation et indexation des entites du catalogue.

    Attributs injectes:
        repositories: Repository par type d'entite
        indexes: Index par type d'entite
        scene_repo: Repository des scenes
    """

    def __init__(
        self,
        repositories: Mapping[EntityKind, INamedEntityRepository],
        indexes: Mapping[EntityKind, IEntityIndex],
        scene_repo: ISceneRepository,
    ) -> None:
        self._repositories = repositories
        self._indexes = indexes
        self._scene_repo = scene_repo

    def create(
        self, kind: EntityKind, name: str, aliases: Iterable[str] = ()
    ) -> NamedEntity:
        """
        Cree une entite, la persiste puis l'indexe.

        Args:
            kind: Type d'entite
            name: Nom de l'entite
            aliases: Autres noms possibles

        Returns:
            L'entite persistee

        Raises:
            ValueError: si le nom est vide apres nettoyage
        """
        cleaned = clean_name(name)
        if not cleaned:
            raise ValueError("Le nom d'une entite ne peut pas etre vide")
        cleaned_aliases = tuple(
            dict.fromkeys(a for a in (clean_name(x) for x in aliases) if a and a != cleaned)
        )

        entity = ENTITY_CLASSES[kind](name=cleaned, aliases=cleaned_aliases)
        saved = self._repositories[kind].upsert(entity.id, entity)
        self._indexes[kind].index([saved])
        logger.info(f"{kind.value} cree: {saved.name} ({saved.id})")
        return saved

    def delete(self, kind: EntityKind, entity_id: str) -> bool:
        """Supprime une entite du store puis de l'index."""
        deleted = self._repositories[kind].delete(entity_id)
        if deleted:
            self._indexes[kind].remove([entity_id])
        return deleted

    def list_all(self, kind: EntityKind) -> list[NamedEntity]:
        """Liste les entites d'un type depuis le store."""
        return self._repositories[kind].get_all()

    def search(self, kind: EntityKind, query: str, limit: int = 10) -> list[NamedEntity]:
        """Recherche approchee dans l'index d'un type."""
        return self._indexes[kind].search(query, limit=limit)

    def scenes_for_studio(self, studio_id: str) -> list[Scene]:
        """Scenes referencant un studio."""
        return self._scene_repo.list_by_studio(studio_id)

    def rebuild_indexes(self) -> dict[EntityKind, int]:
        """
        Reconstruit chaque index depuis le store.

        A appeler au demarrage : les index en memoire ne survivent pas
        au processus.

        Returns:
            Nombre d'entites indexees par type
        """
        counts: dict[EntityKind, int] = {}
        for kind, repository in self._repositories.items():
            records = repository.get_all()
            index = self._indexes[kind]
            index.clear()
            index.index(records)
            counts[kind] = len(records)
        logger.debug(
            "Index reconstruits: "
            + ", ".join(f"{k.value}={v}" for k, v in counts.items())
        )
        return counts
