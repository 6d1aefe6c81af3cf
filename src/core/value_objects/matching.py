"""
Objets valeur pour l'extraction des relations depuis le chemin d'un fichier.

- EntityKind : les quatre types d'entites qu'une scene peut referencer
- MatchingConfig : interrupteurs d'extraction par type (lecture seule)
- SceneMatches : resultat du matching pour une scene
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EntityKind(Enum):
    """Type d'entite du catalogue."""

    ACTOR = "actor"
    LABEL = "label"
    STUDIO = "studio"
    MOVIE = "movie"


@dataclass(frozen=True)
class MatchingConfig:
    """
    Interrupteurs d'extraction depuis le chemin, un par type d'entite.

    La valeur est construite une fois depuis Settings et injectee dans
    l'importeur. L'extraction d'un type n'a lieu que si son interrupteur
    ET l'argument use_matching_config de l'appel sont vrais.
    """

    extract_actors: bool = False
    extract_labels: bool = False
    extract_studios: bool = False
    extract_movies: bool = False

    def is_enabled(self, kind: EntityKind) -> bool:
        """Indique si l'interrupteur du type est active."""
        return {
            EntityKind.ACTOR: self.extract_actors,
            EntityKind.LABEL: self.extract_labels,
            EntityKind.STUDIO: self.extract_studios,
            EntityKind.MOVIE: self.extract_movies,
        }[kind]

    def should_extract(self, kind: EntityKind, use_matching_config: bool) -> bool:
        """L'argument de l'appelant l'emporte toujours quand il est faux."""
        return use_matching_config and self.is_enabled(kind)

    @classmethod
    def disabled(cls) -> "MatchingConfig":
        return cls()

    @classmethod
    def enabled(cls) -> "MatchingConfig":
        return cls(
            extract_actors=True,
            extract_labels=True,
            extract_studios=True,
            extract_movies=True,
        )


@dataclass(frozen=True)
class SceneMatches:
    """
    Identifiants trouves dans le chemin d'une scene.

    Attributs:
        actors: IDs des acteurs (ordre d'apparition dans le chemin)
        labels: IDs des labels
        movies: IDs des films
        studio: ID du studio retenu, ou None
    """

    actors: tuple[str, ...] = ()
    labels: tuple[str, ...] = ()
    movies: tuple[str, ...] = ()
    studio: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not (self.actors or self.labels or self.movies or self.studio)
