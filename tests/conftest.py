"""
Fixtures pytest partagees pour les tests SceneVault.

Ce module contient les fixtures communes utilisees dans les tests:
- Base SQLite en memoire et repositories SQLModel
- Index en memoire par type d'entite
- Mock de IVideoProbe
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from typing import Iterator
from unittest.mock import MagicMock

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from src.adapters.indexing.memory_index import InMemoryEntityIndex
from src.config import Settings
from src.core.ports.video_probe import IVideoProbe
from src.core.value_objects import EntityKind, MatchingConfig, MediaInfo, Resolution
from src.infrastructure.persistence.database import init_db
from src.infrastructure.persistence.repositories import (
    SQLModelActorRepository,
    SQLModelLabelRepository,
    SQLModelMovieRepository,
    SQLModelSceneRepository,
    SQLModelStudioRepository,
)
from src.services.catalog import CatalogService
from src.services.importer import SceneImporterService
from src.services.linker import RelationshipLinker


@pytest.fixture
def session() -> Iterator[Session]:
    """Session sur une base SQLite en memoire, tables creees."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture
def repositories(session: Session) -> dict:
    """Repositories d'entites nommees par type."""
    return {
        EntityKind.ACTOR: SQLModelActorRepository(session),
        EntityKind.LABEL: SQLModelLabelRepository(session),
        EntityKind.STUDIO: SQLModelStudioRepository(session),
        EntityKind.MOVIE: SQLModelMovieRepository(session),
    }


@pytest.fixture
def scene_repo(session: Session) -> SQLModelSceneRepository:
    return SQLModelSceneRepository(session)


@pytest.fixture
def indexes() -> dict:
    """Un index vide par type d'entite."""
    return {kind: InMemoryEntityIndex(kind) for kind in EntityKind}


@pytest.fixture
def catalog(repositories, indexes, scene_repo) -> CatalogService:
    return CatalogService(repositories, indexes, scene_repo)


@pytest.fixture
def linker(scene_repo, repositories) -> RelationshipLinker:
    return RelationshipLinker(scene_repo, repositories[EntityKind.STUDIO])


@pytest.fixture
def media_info() -> MediaInfo:
    return MediaInfo(
        resolution=Resolution(width=1920, height=1080),
        video_codec="x264",
        container="MPEG-4",
        duration_seconds=1800,
    )


@pytest.fixture
def mock_video_probe(media_info: MediaInfo) -> MagicMock:
    """
    Mock de IVideoProbe pour les tests.

    Accepte tout chemin et retourne un MediaInfo 1080p.
    Configurer side_effect dans chaque test pour simuler un rejet.
    """
    mock = MagicMock(spec=IVideoProbe)
    mock.probe.return_value = media_info
    return mock


@pytest.fixture
def importer_factory(mock_video_probe, indexes, linker, scene_repo):
    """Construit un SceneImporterService pour une MatchingConfig donnee."""

    def build(matching_config: MatchingConfig = MatchingConfig.enabled()) -> SceneImporterService:
        return SceneImporterService(
            video_probe=mock_video_probe,
            indexes=indexes,
            linker=linker,
            scene_repo=scene_repo,
            matching_config=matching_config,
        )

    return build


@pytest.fixture
def video_file(tmp_path: Path) -> Path:
    """Fichier video factice dont le nom contient les quatre entites de test."""
    path = tmp_path / "dynamic_video001_abc_actor_def_label_ghi_studio_jkl_movie.mp4"
    path.write_bytes(b"\x00" * 1024)
    return path


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler base, bibliotheque et logs.
    """
    library_dir = tmp_path / "library"
    library_dir.mkdir(parents=True)

    return Settings(
        library_dir=library_dir,
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
        log_file=tmp_path / "logs" / "test.log",
    )
