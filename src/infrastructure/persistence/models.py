"""
Modeles SQLModel pour la base de donnees SceneVault.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- actors, labels, studios, movies: Entites nommees du catalogue
- scenes: Fichiers video importes (reference optionnelle vers un studio)
- scene_actors, scene_labels, scene_movies: Tables d'association

Les cles primaires composites des tables d'association empechent
toute association en double.
Les champs JSON (*_json) stockent des listes serialisees dans SQLite.
"""

from __future__ import annotations

import json
from datetime import datetime

from sqlmodel import Field, SQLModel

from src.utils.helpers import utc_now


class NamedEntityBase(SQLModel):
    """Colonnes communes aux entites nommees (pas de table)."""

    id: str = Field(primary_key=True)
    name: str = Field(index=True)
    aliases_json: str | None = None  # JSON: ["alias 1", "alias 2"]
    created_at: datetime | None = Field(default_factory=utc_now)
    updated_at: datetime | None = Field(default_factory=utc_now)

    @property
    def aliases(self) -> list[str]:
        """Retourne les alias deserialises."""
        if self.aliases_json:
            return json.loads(self.aliases_json)
        return []

    @aliases.setter
    def aliases(self, value: list[str]) -> None:
        """Serialise les alias en JSON."""
        self.aliases_json = json.dumps(value) if value else None


class ActorModel(NamedEntityBase, table=True):
    __tablename__ = "actors"


class LabelModel(NamedEntityBase, table=True):
    __tablename__ = "labels"


class StudioModel(NamedEntityBase, table=True):
    __tablename__ = "studios"


class MovieModel(NamedEntityBase, table=True):
    __tablename__ = "movies"


class SceneModel(SQLModel, table=True):
    """
    Modele representant une scene importee.

    Le studio est une reference simple (cle etrangere), les acteurs,
    labels et films passent par les tables d'association.
    """

    __tablename__ = "scenes"

    id: str = Field(primary_key=True)
    name: str = Field(index=True)
    path: str = Field(index=True)
    studio_id: str | None = Field(default=None, foreign_key="studios.id", index=True)
    size_bytes: int = 0
    container: str | None = None
    video_codec: str | None = None
    resolution_width: int | None = None
    resolution_height: int | None = None
    duration_seconds: int | None = None
    added_on: datetime | None = Field(default_factory=utc_now, index=True)
    updated_at: datetime | None = Field(default_factory=utc_now)


class SceneActorLink(SQLModel, table=True):
    __tablename__ = "scene_actors"

    scene_id: str = Field(foreign_key="scenes.id", primary_key=True)
    actor_id: str = Field(foreign_key="actors.id", primary_key=True, index=True)


class SceneLabelLink(SQLModel, table=True):
    __tablename__ = "scene_labels"

    scene_id: str = Field(foreign_key="scenes.id", primary_key=True)
    label_id: str = Field(foreign_key="labels.id", primary_key=True, index=True)


class SceneMovieLink(SQLModel, table=True):
    __tablename__ = "scene_movies"

    scene_id: str = Field(foreign_key="scenes.id", primary_key=True)
    movie_id: str = Field(foreign_key="movies.id", primary_key=True, index=True)
