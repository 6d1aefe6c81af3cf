"""
Service d'import de scenes.

Orchestre l'import d'un fichier video : validation du fichier, creation
de la scene, extraction optionnelle des relations depuis le chemin,
puis persistance via le RelationshipLinker.

Un import aboutit a une scene completement peuplee ou echoue sans rien
ecrire : tout le matching a lieu avant la premiere ecriture, et un echec
d'index fait echouer l'import entier (MatchingError).
"""

import asyncio
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import AsyncGenerator, Mapping, Optional, Union

from loguru import logger

from src.core.entities import Scene
from src.core.exceptions import MatchingError, SceneVaultError, ValidationError
from src.core.ports.index import IEntityIndex
from src.core.ports.repositories import ISceneRepository
from src.core.ports.video_probe import IVideoProbe
from src.core.value_objects import EntityKind, MatchingConfig, SceneMatches
from src.services.linker import RelationshipLinker
from src.services.path_matcher import match_entities, pick_studio
from src.utils.constants import IGNORED_PATTERNS, VIDEO_EXTENSIONS
from src.utils.helpers import utc_now


class ImportDecision(Enum):
    """Decision prise pour un fichier lors du scan d'une bibliotheque."""

    IMPORT = "import"  # Nouvelle scene creee
    SKIP_KNOWN = "skip_known"  # Chemin deja importe
    ERROR = "error"  # Erreur lors du traitement


@dataclass
class ImportResult:
    """
    Resultat de l'import d'un fichier.

    Attributs:
        path: Chemin du fichier traite
        decision: Decision prise (IMPORT, SKIP_KNOWN, ERROR)
        scene: Scene creee si decision == IMPORT
        error_message: Message d'erreur si decision == ERROR
    """

    path: Path
    decision: ImportDecision
    scene: Optional[Scene] = None
    error_message: Optional[str] = None

    @property
    def filename(self) -> str:
        return self.path.name


class SceneImporterService:
    """
    Service d'import de scenes.

    Attributs injectes:
        video_probe: Sonde de validation des fichiers
        indexes: Index des entites, un par EntityKind
        linker: Applique et persiste les relations
        scene_repo: Repository des scenes
        matching_config: Interrupteurs d'extraction (lecture seule)
    """

    def __init__(
        self,
        video_probe: IVideoProbe,
        indexes: Mapping[EntityKind, IEntityIndex],
        linker: RelationshipLinker,
        scene_repo: ISceneRepository,
        matching_config: MatchingConfig,
    ) -> None:
        """
        Initialise le service d'import.

        Args:
            video_probe: Implementation de IVideoProbe
            indexes: Index par type d'entite
            linker: RelationshipLinker
            scene_repo: Repository des scenes
            matching_config: Configuration d'extraction depuis Settings
        """
        self._video_probe = video_probe
        self._indexes = indexes
        self._linker = linker
        self._scene_repo = scene_repo
        self._matching_config = matching_config

    async def on_import(
        self, path: Union[str, Path], use_matching_config: bool
    ) -> Scene:
        """
        Importe un fichier video comme nouvelle scene.

        L'extraction d'un type d'entite n'a lieu que si l'interrupteur
        correspondant de la configuration ET use_matching_config sont vrais.

        Args:
            path: Chemin du fichier video
            use_matching_config: Autorise l'extraction pour cet appel

        Returns:
            La scene persistee, relations comprises

        Raises:
            ValidationError: fichier absent, illisible ou non video
            MatchingError: echec d'un index pendant l'extraction
            PersistenceError: echec de l'ecriture finale
        """
        path = Path(path)
        try:
            media_info = await asyncio.to_thread(self._video_probe.probe, path)
        except SceneVaultError as e:
            logger.warning(f"Import refuse: {e}")
            raise

        try:
            size_bytes = path.stat().st_size
        except OSError as e:
            raise ValidationError(path, f"fichier disparu: {e}") from e

        scene = Scene(
            path=path,
            size_bytes=size_bytes,
            media_info=media_info,
            added_on=utc_now(),
        )

        matches = await self._extract(scene.path, use_matching_config)
        saved = self._linker.link(scene, matches)
        logger.info(f"Scene importee: {saved.name} ({saved.id})")
        return saved

    async def _extract(self, path: Path, use_matching_config: bool) -> SceneMatches:
        """
        Calcule les relations a partir du chemin, type par type.

        Returns:
            SceneMatches, vide pour les types non extraits
        """
        found: dict[EntityKind, list[str]] = {}
        studio: Optional[str] = None

        for kind in EntityKind:
            if not self._matching_config.should_extract(kind, use_matching_config):
                logger.debug(f"Extraction des {kind.value}s desactivee")
                continue

            candidates = self._snapshot(kind)
            if kind is EntityKind.STUDIO:
                studio = pick_studio(path, candidates)
                logger.debug(f"Studio trouve dans le chemin: {studio}")
            else:
                found[kind] = match_entities(path, candidates)
                logger.debug(f"{len(found[kind])} {kind.value}(s) trouve(s) dans le chemin")
            # Laisse la main aux autres imports entre deux types
            await asyncio.sleep(0)

        return SceneMatches(
            actors=tuple(found.get(EntityKind.ACTOR, ())),
            labels=tuple(found.get(EntityKind.LABEL, ())),
            movies=tuple(found.get(EntityKind.MOVIE, ())),
            studio=studio,
        )

    def _snapshot(self, kind: EntityKind):
        """Instantane des candidats d'un type ; toute erreur devient MatchingError."""
        index = self._indexes.get(kind)
        if index is None:
            raise MatchingError(kind.value, KeyError(f"aucun index pour {kind.value}"))
        try:
            return index.candidates()
        except Exception as e:
            raise MatchingError(kind.value, e) from e

    async def scan_library(
        self, library_dir: Path, use_matching_config: bool = True
    ) -> AsyncGenerator[ImportResult, None]:
        """
        Scanne un repertoire et importe les fichiers video inconnus.

        Parcourt recursivement le repertoire. Les chemins deja importes
        sont ignores ; une erreur sur un fichier n'interrompt pas le scan.

        Args:
            library_dir: Repertoire a scanner
            use_matching_config: Transmis a on_import pour chaque fichier

        Yields:
            ImportResult pour chaque fichier video traite
        """
        for file_path in sorted(library_dir.rglob("*")):
            # Ignorer les repertoires et symlinks
            if file_path.is_dir() or file_path.is_symlink():
                continue

            if file_path.suffix.lower() not in VIDEO_EXTENSIONS:
                continue

            filename_lower = file_path.name.lower()
            if any(pattern in filename_lower for pattern in IGNORED_PATTERNS):
                continue

            yield await self._process_file(file_path, use_matching_config)

    async def _process_file(self, file_path: Path, use_matching_config: bool) -> ImportResult:
        """
        Importe un fichier du scan et determine la decision.

        Args:
            file_path: Chemin du fichier a traiter

        Returns:
            ImportResult avec la decision prise
        """
        if self._scene_repo.get_by_path(file_path) is not None:
            return ImportResult(path=file_path, decision=ImportDecision.SKIP_KNOWN)

        try:
            scene = await self.on_import(file_path, use_matching_config)
        except SceneVaultError as e:
            return ImportResult(
                path=file_path,
                decision=ImportDecision.ERROR,
                error_message=str(e),
            )
        return ImportResult(path=file_path, decision=ImportDecision.IMPORT, scene=scene)
