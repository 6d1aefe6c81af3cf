"""
Index en memoire des entites du catalogue.

Construit et gere un index par type d'entite, interroge par le matching
des chemins lors de l'import des scenes. L'index est une projection du
store : il est alimente explicitement (CatalogService) et reconstruit
depuis la base au demarrage.
"""

import threading
from typing import Iterable

from loguru import logger
from rapidfuzz import fuzz, process, utils

from src.core.entities import NamedEntity
from src.core.ports.index import IEntityIndex
from src.core.value_objects import EntityKind


class InMemoryEntityIndex(IEntityIndex):
    """
    Index d'un type d'entite, ordonne par insertion.

    Reindexer un ID existant remplace l'entite sans changer sa position.
    Les lectures travaillent sur un instantane : une entite indexee
    pendant un matching n'est pas visible par ce matching.
    """

    # Score minimal (0-100) pour la recherche approchee
    SEARCH_SCORE_CUTOFF: float = 60.0

    def __init__(self, kind: EntityKind) -> None:
        self.kind = kind
        self._records: dict[str, NamedEntity] = {}
        self._lock = threading.Lock()

    def index(self, records: Iterable[NamedEntity]) -> None:
        """
        Ajoute ou remplace des entites dans l'index.

        Le lot est refuse en entier si une entite n'est pas du bon type.
        """
        batch = list(records)
        for record in batch:
            if record.KIND is not self.kind:
                raise TypeError(
                    f"Index {self.kind.value}: entite {record.KIND.value} refusee"
                )
        with self._lock:
            for record in batch:
                self._records[record.id] = record
        logger.debug(f"Index {self.kind.value}: {len(batch)} entite(s) indexee(s)")

    def remove(self, entity_ids: Iterable[str]) -> None:
        """Retire des entites de l'index."""
        with self._lock:
            for entity_id in entity_ids:
                self._records.pop(entity_id, None)

    def clear(self) -> None:
        """Vide l'index."""
        with self._lock:
            self._records.clear()

    def candidates(self) -> tuple[NamedEntity, ...]:
        """Instantane des entites indexees, dans l'ordre d'indexation."""
        with self._lock:
            return tuple(self._records.values())

    def search(self, query: str, limit: int = 10) -> list[NamedEntity]:
        """
        Recherche approchee par nom ou alias.

        Utilise WRatio de rapidfuzz. Reservee a la consultation
        interactive : le matching des chemins exige un nom intact.

        Args:
            query: Texte recherche
            limit: Nombre maximum de resultats

        Returns:
            Entites triees par score decroissant
        """
        snapshot = self.candidates()
        if not query.strip() or not snapshot:
            return []

        # Une entree par terme (nom + alias), rattachee a son entite
        choices: list[str] = []
        owners: list[NamedEntity] = []
        for record in snapshot:
            for term in record.terms:
                choices.append(term)
                owners.append(record)

        results = process.extract(
            query,
            choices,
            scorer=fuzz.WRatio,
            processor=utils.default_process,
            score_cutoff=self.SEARCH_SCORE_CUTOFF,
            limit=None,
        )

        found: dict[str, NamedEntity] = {}
        for _choice, _score, position in results:
            owner = owners[position]
            if owner.id not in found:
                found[owner.id] = owner
            if len(found) >= limit:
                break
        return list(found.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
