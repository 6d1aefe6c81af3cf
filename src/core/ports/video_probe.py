"""
Interface port pour la validation des fichiers video a importer.

Le coeur ne fait aucune inspection de conteneur ou de codec : il delegue
a une sonde qui classe un chemin comme video importable ou le rejette.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.core.value_objects import MediaInfo


class IVideoProbe(ABC):
    """
    Sonde de validation des fichiers video.

    L'implementation utilisera typiquement pymediainfo.
    """

    @abstractmethod
    def probe(self, path: Path) -> MediaInfo:
        """
        Valide un fichier video et retourne ses metadonnees techniques.

        Args:
            path: Chemin du fichier a importer

        Retourne:
            MediaInfo du fichier valide

        Raises:
            ValidationError: fichier absent, illisible ou non reconnu comme video
        """
        ...
