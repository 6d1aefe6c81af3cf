"""
Objets valeur pour les informations média.

Objets valeur immutables représentant les informations techniques des fichiers vidéo
retournées par la sonde lors de la validation d'un import.
Tous les objets valeur utilisent @dataclass(frozen=True) pour garantir l'immutabilité.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Resolution:
    """
    Résolution vidéo (largeur x hauteur).

    Attributs :
        width : Résolution horizontale en pixels
        height : Résolution verticale en pixels

    Propriétés :
        label : Libellé lisible (4K, 1080p, 720p, SD)
    """

    width: int
    height: int

    @property
    def label(self) -> str:
        """
        Retourne le libelle de resolution base sur la largeur et hauteur.

        Les seuils sont tolerants pour les formats cinematographiques
        ou la hauteur est reduite mais la largeur reste standard.
        """
        if self.height >= 2160 or self.width >= 3800:
            return "4K"
        elif self.height >= 1080 or self.width >= 1900:
            return "1080p"
        elif self.height >= 720 or self.width >= 1260:
            return "720p"
        else:
            return "SD"


@dataclass(frozen=True)
class MediaInfo:
    """
    Informations techniques d'un fichier vidéo validé.

    Attributs :
        resolution : Résolution de la première piste vidéo
        video_codec : Nom normalisé du codec vidéo (ex: "x264", "x265")
        container : Format du conteneur (ex: "MPEG-4", "Matroska")
        duration_seconds : Durée en secondes
    """

    resolution: Optional[Resolution] = None
    video_codec: Optional[str] = None
    container: Optional[str] = None
    duration_seconds: Optional[int] = None
