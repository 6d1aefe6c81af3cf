"""
Entité scène.

Une scène représente un fichier vidéo importé et ses relations connues.
Elle est créée par l'importeur puis complétée par le RelationshipLinker.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional

from src.core.value_objects import MediaInfo
from src.utils.helpers import generate_id

SCENE_ID_PREFIX = "sc"


@dataclass
class Scene:
    """
    Représente un fichier vidéo importé dans le catalogue.

    Attributs :
        path : Chemin du fichier validé à la création
        name : Nom de la scène (nom de fichier sans extension)
        id : Identifiant unique et immuable
        studio : ID du studio référencé (au plus un)
        actors : IDs des acteurs (ensemble, sans doublon)
        labels : IDs des labels
        movies : IDs des films
        size_bytes : Taille du fichier en octets
        media_info : Métadonnées techniques retournées par la sonde
        added_on : Date d'import
    """

    path: Path
    name: str = ""
    id: str = ""
    studio: Optional[str] = None
    actors: set[str] = field(default_factory=set)
    labels: set[str] = field(default_factory=set)
    movies: set[str] = field(default_factory=set)
    size_bytes: int = 0
    media_info: Optional[MediaInfo] = None
    added_on: Optional[datetime] = None

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        if not self.id:
            self.id = generate_id(SCENE_ID_PREFIX)
        if not self.name:
            self.name = self.path.stem
