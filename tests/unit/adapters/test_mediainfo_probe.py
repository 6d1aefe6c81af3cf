"""
Tests unitaires pour MediaInfoProbe.

Tests pour valider le rejet des fichiers non importables et
l'extraction des metadonnees techniques avec pymediainfo.
"""

import os
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from src.adapters.parsing.mediainfo_extractor import MediaInfoProbe
from src.core.exceptions import ValidationError
from src.core.value_objects.media_info import MediaInfo, Resolution

_PARSE = "src.adapters.parsing.mediainfo_extractor.PyMediaInfo.parse"


@pytest.fixture
def probe() -> MediaInfoProbe:
    """Instance de la sonde pour les tests."""
    return MediaInfoProbe()


@pytest.fixture
def fake_video(tmp_path: Path) -> Path:
    path = tmp_path / "video001.mp4"
    path.write_bytes(b"\x00" * 16)
    return path


@pytest.fixture
def mock_video_track_1080p() -> MagicMock:
    """Mock d'une piste video 1080p AVC."""
    mock = MagicMock()
    mock.track_type = "Video"
    mock.width = 1920
    mock.height = 1080
    mock.format = "AVC"
    return mock


@pytest.fixture
def mock_general_track() -> MagicMock:
    """Mock d'une piste generale MPEG-4 de 30 minutes."""
    mock = MagicMock()
    mock.track_type = "General"
    mock.format = "MPEG-4"
    mock.duration = 1800000  # 30 minutes en ms
    return mock


def _media(*tracks) -> MagicMock:
    media = MagicMock()
    media.tracks = list(tracks)
    return media


class TestFileChecks:
    """Tests pour le rejet sans lecture du contenu."""

    def test_missing_file(self, probe, tmp_path):
        with pytest.raises(ValidationError) as exc_info:
            probe.probe(tmp_path / "missing.mp4")
        assert exc_info.value.reason == "fichier introuvable"

    def test_directory(self, probe, tmp_path):
        folder = tmp_path / "folder.mp4"
        folder.mkdir()
        with pytest.raises(ValidationError) as exc_info:
            probe.probe(folder)
        assert exc_info.value.reason == "pas un fichier regulier"

    def test_unknown_extension(self, probe, tmp_path):
        text = tmp_path / "notes.txt"
        text.write_text("pas une video")
        with pytest.raises(ValidationError) as exc_info:
            probe.probe(text)
        assert "extension" in exc_info.value.reason

    @pytest.mark.skipif(os.geteuid() == 0, reason="root lit tous les fichiers")
    def test_unreadable_file(self, probe, fake_video):
        fake_video.chmod(0)
        try:
            with pytest.raises(ValidationError) as exc_info:
                probe.probe(fake_video)
            assert exc_info.value.reason == "fichier illisible"
        finally:
            fake_video.chmod(0o644)


class TestProbe:
    """Tests pour la lecture mediainfo."""

    def test_extracts_metadata(
        self, probe, fake_video, mock_video_track_1080p, mock_general_track
    ):
        with patch(_PARSE) as mock_parse:
            mock_parse.return_value = _media(mock_general_track, mock_video_track_1080p)
            result = probe.probe(fake_video)

        mock_parse.assert_called_once_with(str(fake_video))
        assert result == MediaInfo(
            resolution=Resolution(width=1920, height=1080),
            video_codec="x264",
            container="MPEG-4",
            duration_seconds=1800,
        )

    def test_no_video_track_rejected(self, probe, fake_video, mock_general_track):
        with patch(_PARSE, return_value=_media(mock_general_track)):
            with pytest.raises(ValidationError) as exc_info:
                probe.probe(fake_video)
        assert exc_info.value.reason == "aucune piste video"

    def test_parse_failure_becomes_validation_error(self, probe, fake_video):
        with patch(_PARSE, side_effect=OSError("libmediainfo absente")):
            with pytest.raises(ValidationError) as exc_info:
                probe.probe(fake_video)
        assert "libmediainfo absente" in exc_info.value.reason

    @pytest.mark.parametrize(
        "raw,expected",
        [("HEVC", "x265"), ("AVC", "x264"), ("AV1", "AV1"), ("ProRes", "ProRes")],
    )
    def test_codec_normalization(self, probe, fake_video, mock_video_track_1080p, raw, expected):
        mock_video_track_1080p.format = raw
        with patch(_PARSE, return_value=_media(mock_video_track_1080p)):
            result = probe.probe(fake_video)
        assert result.video_codec == expected

    def test_missing_dimensions_and_general_track(
        self, probe, fake_video, mock_video_track_1080p
    ):
        mock_video_track_1080p.width = None
        with patch(_PARSE, return_value=_media(mock_video_track_1080p)):
            result = probe.probe(fake_video)
        assert result.resolution is None
        assert result.container is None
        assert result.duration_seconds is None
