"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI.
Inclut les repositories SQLModel, les index d'entites et les services d'import.
"""

from dependency_injector import containers, providers

from .adapters.indexing.memory_index import InMemoryEntityIndex
from .adapters.parsing.mediainfo_extractor import MediaInfoProbe
from .config import Settings
from .core.value_objects import EntityKind
from .infrastructure.persistence.database import get_session, init_db
from .infrastructure.persistence.repositories import (
    SQLModelActorRepository,
    SQLModelLabelRepository,
    SQLModelMovieRepository,
    SQLModelSceneRepository,
    SQLModelStudioRepository,
)
from .services.catalog import CatalogService
from .services.importer import SceneImporterService
from .services.linker import RelationshipLinker


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        container.catalog_service().rebuild_indexes()
        importer = container.importer_service()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db)

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(lambda: next(get_session()))

    # Adapters
    video_probe = providers.Singleton(MediaInfoProbe)

    # Index en memoire - Singletons partages par le catalogue et l'importeur
    actor_index = providers.Singleton(InMemoryEntityIndex, kind=EntityKind.ACTOR)
    label_index = providers.Singleton(InMemoryEntityIndex, kind=EntityKind.LABEL)
    studio_index = providers.Singleton(InMemoryEntityIndex, kind=EntityKind.STUDIO)
    movie_index = providers.Singleton(InMemoryEntityIndex, kind=EntityKind.MOVIE)

    indexes = providers.Dict(
        {
            EntityKind.ACTOR: actor_index,
            EntityKind.LABEL: label_index,
            EntityKind.STUDIO: studio_index,
            EntityKind.MOVIE: movie_index,
        }
    )

    # Repositories - Factory pour nouvelle instance avec session fraiche
    actor_repository = providers.Factory(SQLModelActorRepository, session=session)
    label_repository = providers.Factory(SQLModelLabelRepository, session=session)
    studio_repository = providers.Factory(SQLModelStudioRepository, session=session)
    movie_repository = providers.Factory(SQLModelMovieRepository, session=session)
    scene_repository = providers.Factory(SQLModelSceneRepository, session=session)

    entity_repositories = providers.Dict(
        {
            EntityKind.ACTOR: actor_repository,
            EntityKind.LABEL: label_repository,
            EntityKind.STUDIO: studio_repository,
            EntityKind.MOVIE: movie_repository,
        }
    )

    # Services
    catalog_service = providers.Factory(
        CatalogService,
        repositories=entity_repositories,
        indexes=indexes,
        scene_repo=scene_repository,
    )

    relationship_linker = providers.Factory(
        RelationshipLinker,
        scene_repo=scene_repository,
        studio_repo=studio_repository,
    )

    importer_service = providers.Factory(
        SceneImporterService,
        video_probe=video_probe,
        indexes=indexes,
        linker=relationship_linker,
        scene_repo=scene_repository,
        matching_config=config.provided.matching,
    )
