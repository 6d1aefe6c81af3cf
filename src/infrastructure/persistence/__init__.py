"""
Module de persistance SQLite pour SceneVault.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Configuration de l'engine SQLite, session factory, initialisation
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Implementations des ports repository

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.

Usage:
    from src.infrastructure.persistence import init_db, get_session

    init_db()  # Cree les tables si necessaire
    session = next(get_session())
"""

from src.infrastructure.persistence.database import (
    create_sqlite_engine,
    get_engine,
    get_session,
    init_db,
)
from src.infrastructure.persistence.models import (
    ActorModel,
    LabelModel,
    MovieModel,
    SceneActorLink,
    SceneLabelLink,
    SceneModel,
    SceneMovieLink,
    StudioModel,
)

__all__ = [
    "create_sqlite_engine",
    "get_engine",
    "get_session",
    "init_db",
    "ActorModel",
    "LabelModel",
    "StudioModel",
    "MovieModel",
    "SceneModel",
    "SceneActorLink",
    "SceneLabelLink",
    "SceneMovieLink",
]
