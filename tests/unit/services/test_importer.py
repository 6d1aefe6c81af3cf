"""
Tests unitaires pour SceneImporterService.

Tests couvrant:
- Porte ET entre interrupteurs de configuration et use_matching_config
- Rejet des fichiers invalides sans ecriture
- Echec atomique sur erreur d'index (MatchingError)
- Scan d'une bibliotheque (import, doublons, erreurs)
"""

from itertools import product
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.core.exceptions import MatchingError, ValidationError
from src.core.value_objects import EntityKind, MatchingConfig
from src.services.importer import ImportDecision


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def catalog_entities(catalog):
    """Les quatre entites presentes dans le nom de video_file, indexees."""
    return {
        EntityKind.ACTOR: catalog.create(EntityKind.ACTOR, "abc actor"),
        EntityKind.LABEL: catalog.create(EntityKind.LABEL, "def label"),
        EntityKind.STUDIO: catalog.create(EntityKind.STUDIO, "ghi studio"),
        EntityKind.MOVIE: catalog.create(EntityKind.MOVIE, "jkl movie"),
    }


def _relations(scene):
    return {
        EntityKind.ACTOR: scene.actors,
        EntityKind.LABEL: scene.labels,
        EntityKind.STUDIO: {scene.studio} if scene.studio else set(),
        EntityKind.MOVIE: scene.movies,
    }


# ============================================================================
# on_import
# ============================================================================


class TestOnImport:
    """Tests pour on_import."""

    @pytest.mark.asyncio
    async def test_creates_scene_with_media_info(
        self, importer_factory, video_file, scene_repo, media_info
    ):
        importer = importer_factory(MatchingConfig.disabled())

        scene = await importer.on_import(video_file, use_matching_config=False)

        assert scene.id.startswith("sc_")
        assert scene.name == video_file.stem
        assert scene.size_bytes == 1024
        assert scene.media_info == media_info
        assert scene.added_on is not None
        assert scene_repo.get_by_id(scene.id) is not None

    @pytest.mark.asyncio
    async def test_accepts_string_path(self, importer_factory, video_file):
        importer = importer_factory(MatchingConfig.disabled())
        scene = await importer.on_import(str(video_file), use_matching_config=False)
        assert scene.path == video_file

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "actors,labels,studios,movies,use_matching_config",
        list(product([False, True], repeat=5)),
    )
    async def test_extraction_and_gate(
        self,
        importer_factory,
        catalog_entities,
        video_file,
        actors,
        labels,
        studios,
        movies,
        use_matching_config,
    ):
        """Un type est extrait ssi son interrupteur ET use_matching_config sont vrais."""
        config = MatchingConfig(
            extract_actors=actors,
            extract_labels=labels,
            extract_studios=studios,
            extract_movies=movies,
        )
        importer = importer_factory(config)

        scene = await importer.on_import(video_file, use_matching_config)

        relations = _relations(scene)
        for kind in EntityKind:
            if use_matching_config and config.is_enabled(kind):
                assert relations[kind] == {catalog_entities[kind].id}
            else:
                assert relations[kind] == set()

    @pytest.mark.asyncio
    async def test_relations_are_persisted(
        self, importer_factory, catalog_entities, video_file, scene_repo
    ):
        importer = importer_factory(MatchingConfig.enabled())

        scene = await importer.on_import(video_file, use_matching_config=True)

        stored = scene_repo.get_by_id(scene.id)
        assert stored.actors == {catalog_entities[EntityKind.ACTOR].id}
        assert stored.labels == {catalog_entities[EntityKind.LABEL].id}
        assert stored.movies == {catalog_entities[EntityKind.MOVIE].id}
        assert stored.studio == catalog_entities[EntityKind.STUDIO].id

    @pytest.mark.asyncio
    async def test_validation_error_propagates_without_write(
        self, importer_factory, mock_video_probe, tmp_path, scene_repo
    ):
        missing = tmp_path / "missing.mp4"
        mock_video_probe.probe.side_effect = ValidationError(missing, "fichier introuvable")
        importer = importer_factory()

        with pytest.raises(ValidationError):
            await importer.on_import(missing, use_matching_config=True)

        assert scene_repo.get_all() == []
        assert scene_repo.get_by_path(missing) is None

    @pytest.mark.asyncio
    async def test_index_failure_fails_whole_import(
        self, importer_factory, indexes, catalog_entities, video_file, scene_repo
    ):
        broken = MagicMock()
        broken.candidates.side_effect = RuntimeError("index corrompu")
        indexes[EntityKind.MOVIE] = broken
        importer = importer_factory(MatchingConfig.enabled())

        with pytest.raises(MatchingError) as exc_info:
            await importer.on_import(video_file, use_matching_config=True)

        assert exc_info.value.kind == "movie"
        assert scene_repo.get_all() == []

    @pytest.mark.asyncio
    async def test_missing_index_raises_matching_error(
        self, importer_factory, indexes, video_file, scene_repo
    ):
        del indexes[EntityKind.LABEL]
        importer = importer_factory(MatchingConfig.enabled())

        with pytest.raises(MatchingError):
            await importer.on_import(video_file, use_matching_config=True)
        assert scene_repo.get_all() == []

    @pytest.mark.asyncio
    async def test_broken_index_ignored_when_type_disabled(
        self, importer_factory, indexes, video_file
    ):
        broken = MagicMock()
        broken.candidates.side_effect = RuntimeError("index corrompu")
        indexes[EntityKind.MOVIE] = broken
        importer = importer_factory(MatchingConfig(extract_actors=True))

        scene = await importer.on_import(video_file, use_matching_config=True)

        assert scene.movies == set()
        broken.candidates.assert_not_called()

    @pytest.mark.asyncio
    async def test_entity_indexed_after_import_not_applied(
        self, importer_factory, catalog, video_file
    ):
        importer = importer_factory(MatchingConfig.enabled())
        scene = await importer.on_import(video_file, use_matching_config=True)

        catalog.create(EntityKind.ACTOR, "abc actor")

        assert scene.actors == set()


# ============================================================================
# scan_library
# ============================================================================


@pytest.fixture
def library(tmp_path: Path) -> Path:
    library_dir = tmp_path / "library"
    (library_dir / "sub").mkdir(parents=True)
    for name in ("a_abc_actor.mp4", "notes.txt", "sample_clip.mp4", "sub/b.mkv"):
        (library_dir / name).write_bytes(b"\x00" * 10)
    return library_dir


class TestScanLibrary:
    """Tests pour scan_library."""

    @pytest.mark.asyncio
    async def test_imports_video_files_only(self, importer_factory, catalog, library):
        actor = catalog.create(EntityKind.ACTOR, "abc actor")
        importer = importer_factory(MatchingConfig.enabled())

        results = [r async for r in importer.scan_library(library)]

        assert [r.filename for r in results] == ["a_abc_actor.mp4", "b.mkv"]
        assert all(r.decision == ImportDecision.IMPORT for r in results)
        assert results[0].scene.actors == {actor.id}

    @pytest.mark.asyncio
    async def test_second_scan_skips_known_paths(self, importer_factory, library, scene_repo):
        importer = importer_factory()
        [r async for r in importer.scan_library(library)]

        results = [r async for r in importer.scan_library(library)]

        assert all(r.decision == ImportDecision.SKIP_KNOWN for r in results)
        assert len(scene_repo.get_all()) == 2

    @pytest.mark.asyncio
    async def test_error_does_not_stop_scan(
        self, importer_factory, mock_video_probe, media_info, library
    ):
        def probe(path):
            if path.name == "a_abc_actor.mp4":
                raise ValidationError(path, "aucune piste video")
            return media_info

        mock_video_probe.probe.side_effect = probe
        importer = importer_factory()

        results = [r async for r in importer.scan_library(library)]

        decisions = {r.filename: r.decision for r in results}
        assert decisions == {
            "a_abc_actor.mp4": ImportDecision.ERROR,
            "b.mkv": ImportDecision.IMPORT,
        }
        assert "aucune piste video" in results[0].error_message

    @pytest.mark.asyncio
    async def test_no_match_scan(self, importer_factory, catalog, library):
        catalog.create(EntityKind.ACTOR, "abc actor")
        importer = importer_factory(MatchingConfig.enabled())

        results = [r async for r in importer.scan_library(library, use_matching_config=False)]

        assert results[0].scene.actors == set()
