"""
Implementation SQLModel des repositories d'entites nommees.

Implemente INamedEntityRepository pour les acteurs, labels, studios et films.
Les quatre collections partagent le meme schema (NamedEntityBase), seule la
table et la classe d'entite changent.
"""

from typing import Generic, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, select

from src.core.entities import Actor, Label, Movie, NamedEntity, Studio
from src.core.exceptions import PersistenceError
from src.core.ports.repositories import INamedEntityRepository
from src.infrastructure.persistence.models import (
    ActorModel,
    LabelModel,
    MovieModel,
    NamedEntityBase,
    SceneActorLink,
    SceneLabelLink,
    SceneModel,
    SceneMovieLink,
    StudioModel,
)
from src.utils.helpers import as_utc, utc_now

E = TypeVar("E", bound=NamedEntity)
M = TypeVar("M", bound=NamedEntityBase)


def to_entity(model: NamedEntityBase, entity_cls: type[E]) -> E:
    """
    Convertit un modele DB en entite domaine.

    Args :
        model : Le modele depuis la DB
        entity_cls : Classe de l'entite a construire

    Retourne :
        L'entite correspondante
    """
    return entity_cls(
        id=model.id,
        name=model.name,
        aliases=tuple(model.aliases),
        created_at=model.created_at,
    )


class SQLModelNamedEntityRepository(INamedEntityRepository[E], Generic[E, M]):
    """
    Repository SQLModel generique pour une collection d'entites nommees.

    Les sous-classes fixent model_cls et entity_cls, et indiquent comment
    les scenes referencent l'entite (table d'association ou colonne studio).
    """

    model_cls: type[M]
    entity_cls: type[E]
    # Table d'association scene <-> entite et colonne de l'entite
    link_cls: type[SQLModel]
    link_attr: str

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def upsert(self, entity_id: str, entity: E) -> E:
        """Insere ou remplace l'entite sous l'identifiant donne."""
        try:
            existing = self._session.get(self.model_cls, entity_id)
            if existing:
                # Mise a jour
                existing.name = entity.name
                existing.aliases = list(entity.aliases)
                existing.updated_at = utc_now()
                model = existing
            else:
                # Insertion
                model = self.model_cls(id=entity_id, name=entity.name)
                model.aliases = list(entity.aliases)
                if entity.created_at:
                    model.created_at = as_utc(entity.created_at)
            self._session.add(model)
            self._session.commit()
            self._session.refresh(model)
        except SQLAlchemyError as e:
            self._session.rollback()
            raise PersistenceError(
                f"Echec de l'ecriture de {entity_id} dans {self.model_cls.__tablename__}"
            ) from e
        return to_entity(model, self.entity_cls)

    def get_all(self) -> list[E]:
        """Liste toutes les entites, par ordre de creation."""
        statement = select(self.model_cls).order_by(
            self.model_cls.created_at, self.model_cls.id
        )
        models = self._session.exec(statement).all()
        return [to_entity(model, self.entity_cls) for model in models]

    def get_by_id(self, entity_id: str) -> Optional[E]:
        """Recupere une entite par son ID."""
        model = self._session.get(self.model_cls, entity_id)
        if model:
            return to_entity(model, self.entity_cls)
        return None

    def _detach_references(self, entity_id: str) -> None:
        """Retire les references des scenes vers l'entite (sans commit)."""
        statement = select(self.link_cls).where(
            getattr(self.link_cls, self.link_attr) == entity_id
        )
        for link in self._session.exec(statement).all():
            self._session.delete(link)

    def delete(self, entity_id: str) -> bool:
        """
        Supprime une entite par ID.

        Les references des scenes vers l'entite disparaissent dans la
        meme transaction : aucune scene ne garde un ID orphelin.
        """
        model = self._session.get(self.model_cls, entity_id)
        if model is None:
            return False
        try:
            self._detach_references(entity_id)
            self._session.delete(model)
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            raise PersistenceError(f"Echec de la suppression de {entity_id}") from e
        return True


class SQLModelActorRepository(SQLModelNamedEntityRepository[Actor, ActorModel]):
    model_cls = ActorModel
    entity_cls = Actor
    link_cls = SceneActorLink
    link_attr = "actor_id"


class SQLModelLabelRepository(SQLModelNamedEntityRepository[Label, LabelModel]):
    model_cls = LabelModel
    entity_cls = Label
    link_cls = SceneLabelLink
    link_attr = "label_id"


class SQLModelStudioRepository(SQLModelNamedEntityRepository[Studio, StudioModel]):
    model_cls = StudioModel
    entity_cls = Studio

    def _detach_references(self, studio_id: str) -> None:
        """Vide la reference studio des scenes concernees."""
        statement = select(SceneModel).where(SceneModel.studio_id == studio_id)
        for scene in self._session.exec(statement).all():
            scene.studio_id = None
            scene.updated_at = utc_now()
            self._session.add(scene)


class SQLModelMovieRepository(SQLModelNamedEntityRepository[Movie, MovieModel]):
    model_cls = MovieModel
    entity_cls = Movie
    link_cls = SceneMovieLink
    link_attr = "movie_id"
