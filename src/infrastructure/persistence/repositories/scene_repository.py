"""
Implementation SQLModel du repository Scene.

Implemente ISceneRepository : persistance des scenes et de leurs
associations (acteurs, labels, films) dans une seule transaction.
"""

from pathlib import Path
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from src.core.entities import Actor, Label, Movie, Scene
from src.core.exceptions import PersistenceError
from src.core.ports.repositories import ISceneRepository
from src.core.value_objects import MediaInfo, Resolution
from src.infrastructure.persistence.models import (
    ActorModel,
    LabelModel,
    MovieModel,
    SceneActorLink,
    SceneLabelLink,
    SceneModel,
    SceneMovieLink,
)
from src.infrastructure.persistence.repositories.entity_repository import to_entity
from src.utils.helpers import as_utc, utc_now


class SQLModelSceneRepository(ISceneRepository):
    """
    Repository SQLModel pour les scenes.

    Implemente ISceneRepository avec conversion bidirectionnelle
    entre l'entite Scene (domaine) et SceneModel + tables d'association.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: SceneModel) -> Scene:
        """
        Convertit un modele DB en entite domaine, associations comprises.

        Args :
            model : Le modele SceneModel depuis la DB

        Retourne :
            L'entite Scene correspondante
        """
        resolution = None
        if model.resolution_width and model.resolution_height:
            resolution = Resolution(
                width=model.resolution_width, height=model.resolution_height
            )
        media_info = MediaInfo(
            resolution=resolution,
            video_codec=model.video_codec,
            container=model.container,
            duration_seconds=model.duration_seconds,
        )
        return Scene(
            id=model.id,
            name=model.name,
            path=Path(model.path),
            studio=model.studio_id,
            actors=self._linked_ids(SceneActorLink, SceneActorLink.actor_id, model.id),
            labels=self._linked_ids(SceneLabelLink, SceneLabelLink.label_id, model.id),
            movies=self._linked_ids(SceneMovieLink, SceneMovieLink.movie_id, model.id),
            size_bytes=model.size_bytes,
            media_info=media_info,
            added_on=model.added_on,
        )

    def _linked_ids(self, link_cls, column, scene_id: str) -> set[str]:
        """Retourne les IDs associes a une scene dans une table d'association."""
        statement = select(column).where(link_cls.scene_id == scene_id)
        return set(self._session.exec(statement).all())

    def _sync_links(self, link_cls, attr: str, scene_id: str, target_ids: set[str]) -> None:
        """
        Aligne une table d'association sur l'ensemble cible.

        Seules les differences sont ecrites : les associations deja
        presentes ne sont ni supprimees ni recreees.
        """
        statement = select(link_cls).where(link_cls.scene_id == scene_id)
        existing = {getattr(link, attr): link for link in self._session.exec(statement).all()}

        for linked_id, link in existing.items():
            if linked_id not in target_ids:
                self._session.delete(link)
        for linked_id in sorted(target_ids - existing.keys()):
            self._session.add(link_cls(scene_id=scene_id, **{attr: linked_id}))

    def save(self, scene: Scene) -> Scene:
        """Sauvegarde une scene et ses associations (insertion ou mise a jour)."""
        media_info = scene.media_info or MediaInfo()
        resolution = media_info.resolution
        try:
            model = self._session.get(SceneModel, scene.id)
            if model is None:
                model = SceneModel(id=scene.id, name=scene.name, path=str(scene.path))
                if scene.added_on:
                    model.added_on = as_utc(scene.added_on)
            model.name = scene.name
            model.path = str(scene.path)
            model.studio_id = scene.studio
            model.size_bytes = scene.size_bytes
            model.container = media_info.container
            model.video_codec = media_info.video_codec
            model.resolution_width = resolution.width if resolution else None
            model.resolution_height = resolution.height if resolution else None
            model.duration_seconds = media_info.duration_seconds
            model.updated_at = utc_now()
            self._session.add(model)

            self._sync_links(SceneActorLink, "actor_id", scene.id, set(scene.actors))
            self._sync_links(SceneLabelLink, "label_id", scene.id, set(scene.labels))
            self._sync_links(SceneMovieLink, "movie_id", scene.id, set(scene.movies))

            self._session.commit()
            self._session.refresh(model)
        except SQLAlchemyError as e:
            self._session.rollback()
            raise PersistenceError(f"Echec de la sauvegarde de la scene {scene.id}") from e
        return self._to_entity(model)

    def get_by_id(self, scene_id: str) -> Optional[Scene]:
        """Recupere une scene par son ID."""
        model = self._session.get(SceneModel, scene_id)
        if model:
            return self._to_entity(model)
        return None

    def get_by_path(self, path: Path) -> Optional[Scene]:
        """Recupere la premiere scene importee pour ce chemin."""
        statement = (
            select(SceneModel)
            .where(SceneModel.path == str(path))
            .order_by(SceneModel.added_on)
        )
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def get_all(self) -> list[Scene]:
        """Liste toutes les scenes, par date d'import."""
        statement = select(SceneModel).order_by(SceneModel.added_on, SceneModel.id)
        return [self._to_entity(model) for model in self._session.exec(statement).all()]

    def delete(self, scene_id: str) -> bool:
        """Supprime une scene et ses associations."""
        model = self._session.get(SceneModel, scene_id)
        if model is None:
            return False
        try:
            self._sync_links(SceneActorLink, "actor_id", scene_id, set())
            self._sync_links(SceneLabelLink, "label_id", scene_id, set())
            self._sync_links(SceneMovieLink, "movie_id", scene_id, set())
            self._session.delete(model)
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            raise PersistenceError(f"Echec de la suppression de la scene {scene_id}") from e
        return True

    def list_by_studio(self, studio_id: str) -> list[Scene]:
        """Liste les scenes referencant ce studio."""
        statement = (
            select(SceneModel)
            .where(SceneModel.studio_id == studio_id)
            .order_by(SceneModel.added_on)
        )
        return [self._to_entity(model) for model in self._session.exec(statement).all()]

    def get_actors(self, scene_id: str) -> list[Actor]:
        """Acteurs associes a une scene, par nom."""
        statement = (
            select(ActorModel)
            .join(SceneActorLink, SceneActorLink.actor_id == ActorModel.id)
            .where(SceneActorLink.scene_id == scene_id)
            .order_by(ActorModel.name)
        )
        return [to_entity(m, Actor) for m in self._session.exec(statement).all()]

    def get_labels(self, scene_id: str) -> list[Label]:
        """Labels associes a une scene, par nom."""
        statement = (
            select(LabelModel)
            .join(SceneLabelLink, SceneLabelLink.label_id == LabelModel.id)
            .where(SceneLabelLink.scene_id == scene_id)
            .order_by(LabelModel.name)
        )
        return [to_entity(m, Label) for m in self._session.exec(statement).all()]

    def get_movies(self, scene_id: str) -> list[Movie]:
        """Films associes a une scene, par nom."""
        statement = (
            select(MovieModel)
            .join(SceneMovieLink, SceneMovieLink.movie_id == MovieModel.id)
            .where(SceneMovieLink.scene_id == scene_id)
            .order_by(MovieModel.name)
        )
        return [to_entity(m, Movie) for m in self._session.exec(statement).all()]
