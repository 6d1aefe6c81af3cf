"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe SCENEVAULT_,
et peut optionnellement être fournie via un fichier .env.

Les interrupteurs d'extraction depuis le chemin sont exposés à l'importeur sous la forme
d'un MatchingConfig immuable (voir Settings.matching).
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.value_objects import MatchingConfig

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe SCENEVAULT_.
    Exemple : SCENEVAULT_EXTRACT_SCENE_STUDIOS_FROM_FILEPATH=false

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="SCENEVAULT_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Bibliothèque importée par défaut
    library_dir: Path = Field(default=Path("~/Videos/scenes"))

    # Base de données
    database_url: str = Field(default="sqlite:///scenevault.db")

    # Extraction des relations depuis le chemin du fichier importé
    extract_scene_actors_from_filepath: bool = Field(default=True)
    extract_scene_labels_from_filepath: bool = Field(default=True)
    extract_scene_movies_from_filepath: bool = Field(default=True)
    extract_scene_studios_from_filepath: bool = Field(default=True)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/scenevault.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("library_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def matching(self) -> MatchingConfig:
        """Interrupteurs d'extraction, figés pour l'importeur."""
        return MatchingConfig(
            extract_actors=self.extract_scene_actors_from_filepath,
            extract_labels=self.extract_scene_labels_from_filepath,
            extract_studios=self.extract_scene_studios_from_filepath,
            extract_movies=self.extract_scene_movies_from_filepath,
        )
