"""
Implementation de la sonde de validation video avec pymediainfo.

Ce module fournit MediaInfoProbe qui implemente IVideoProbe : un fichier
est importable s'il existe, est lisible, porte une extension video connue
et contient au moins une piste video selon mediainfo.
"""

import os
from pathlib import Path
from typing import Optional

from pymediainfo import MediaInfo as PyMediaInfo

from src.core.exceptions import ValidationError
from src.core.ports.video_probe import IVideoProbe
from src.core.value_objects.media_info import MediaInfo, Resolution
from src.utils.constants import VIDEO_EXTENSIONS


class MediaInfoProbe(IVideoProbe):
    """
    Sonde de validation utilisant pymediainfo.

    Rejette avec ValidationError tout chemin qui ne designe pas un
    fichier video lisible, et extrait resolution, codec, conteneur
    et duree des fichiers acceptes.
    """

    # Mapping des codecs video vers noms normalises
    VIDEO_CODEC_MAPPING: dict[str, str] = {
        "avc": "x264",
        "h.264": "x264",
        "h264": "x264",
        "hevc": "x265",
        "h.265": "x265",
        "h265": "x265",
        "av1": "AV1",
        "vp9": "VP9",
        "vp8": "VP8",
        "mpeg-4 visual": "MPEG-4",
        "xvid": "XviD",
        "divx": "DivX",
    }

    def probe(self, path: Path) -> MediaInfo:
        """
        Valide un fichier video et retourne ses metadonnees techniques.

        Args:
            path: Chemin du fichier a importer

        Returns:
            MediaInfo du fichier valide

        Raises:
            ValidationError: si le fichier n'est pas une video importable
        """
        self._check_file(path)

        try:
            media_info = PyMediaInfo.parse(str(path))
        except Exception as e:
            raise ValidationError(path, f"lecture mediainfo impossible: {e}") from e

        video_tracks = [
            track for track in media_info.tracks if track.track_type == "Video"
        ]
        general_tracks = [
            track for track in media_info.tracks if track.track_type == "General"
        ]

        if not video_tracks:
            raise ValidationError(path, "aucune piste video")

        general = general_tracks[0] if general_tracks else None
        return MediaInfo(
            resolution=self._extract_resolution(video_tracks[0]),
            video_codec=self._extract_video_codec(video_tracks[0]),
            container=general.format if general is not None else None,
            duration_seconds=self._extract_duration(general),
        )

    def _check_file(self, path: Path) -> None:
        """Verifications sans lecture du contenu."""
        if not path.exists():
            raise ValidationError(path, "fichier introuvable")
        if not path.is_file():
            raise ValidationError(path, "pas un fichier regulier")
        if not os.access(path, os.R_OK):
            raise ValidationError(path, "fichier illisible")
        if path.suffix.lower() not in VIDEO_EXTENSIONS:
            raise ValidationError(path, f"extension non reconnue '{path.suffix}'")

    def _extract_resolution(self, track) -> Optional[Resolution]:
        """Resolution de la piste video, ou None si incomplete."""
        if track.width is None or track.height is None:
            return None
        return Resolution(width=int(track.width), height=int(track.height))

    def _extract_video_codec(self, track) -> Optional[str]:
        """
        Normalise le nom du codec video.

        Returns:
            Nom normalise (x264, x265, AV1, etc.), le nom brut si inconnu
        """
        codec = track.format
        if codec is None:
            return None

        codec_lower = codec.lower()
        for key, value in self.VIDEO_CODEC_MAPPING.items():
            if key in codec_lower:
                return value
        return codec

    def _extract_duration(self, track) -> Optional[int]:
        """
        Extrait la duree en SECONDES depuis la piste generale.

        pymediainfo retourne la duree en millisecondes.
        """
        if track is None or track.duration is None:
            return None
        return int(float(track.duration) / 1000)
