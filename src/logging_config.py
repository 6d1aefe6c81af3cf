"""
Configuration du logging de l'application via loguru.

Fournit un logging structuré avec :
- Sortie console : lisible par l'humain, colorée, niveau réglable par -v/-q
- Sortie fichier : sérialisée en JSON, avec rotation, pour l'analyse des imports
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

# Niveaux console selon le nombre de -v
_VERBOSITY_LEVELS = ("INFO", "DEBUG", "TRACE")


def level_from_verbosity(default: str, verbose: int = 0, quiet: bool = False) -> str:
    """
    Calcule le niveau console depuis les options CLI.

    Args :
        default : Niveau issu de la configuration (SCENEVAULT_LOG_LEVEL)
        verbose : Nombre de -v (0 = niveau par défaut)
        quiet : Mode silencieux (erreurs uniquement), prioritaire

    Retourne :
        Nom du niveau loguru
    """
    if quiet:
        return "ERROR"
    if verbose <= 0:
        return default
    return _VERBOSITY_LEVELS[min(verbose, len(_VERBOSITY_LEVELS) - 1)]


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/scenevault.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log, None pour désactiver le fichier
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB", "1 GB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    logger.remove()

    # Handler console - lisible par l'humain
    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if log_file is None:
        return

    # Handler fichier - JSON, capture aussi le détail du matching (DEBUG)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(f"Logging configuré: {log_file} (rotation {rotation_size})")
