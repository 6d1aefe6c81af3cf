"""
Application des relations trouvees a une scene.

RelationshipLinker fusionne les IDs trouves dans les ensembles de la scene
(acteurs, labels, films), ecrase la reference studio, puis persiste la
scene en une seule ecriture.
"""

from dataclasses import replace
from typing import Optional

from loguru import logger

from src.core.entities import Scene
from src.core.ports.repositories import INamedEntityRepository, ISceneRepository
from src.core.value_objects import SceneMatches


class RelationshipLinker:
    """
    Applique un SceneMatches a une scene et la persiste.

    - acteurs, labels, films: union (reappliquer le meme resultat ne change rien)
    - studio: le dernier ecrit l'emporte ; ignore si le studio n'existe pas
      dans le store

    Attributs injectes:
        scene_repo: Repository des scenes
        studio_repo: Repository des studios (verification de la reference)
    """

    def __init__(
        self,
        scene_repo: ISceneRepository,
        studio_repo: INamedEntityRepository,
    ) -> None:
        self._scene_repo = scene_repo
        self._studio_repo = studio_repo

    def apply(self, scene: Scene, matches: SceneMatches) -> Scene:
        """
        Retourne une copie de la scene avec les relations appliquees.

        Ne persiste rien.
        """
        return replace(
            scene,
            actors=set(scene.actors) | set(matches.actors),
            labels=set(scene.labels) | set(matches.labels),
            movies=set(scene.movies) | set(matches.movies),
            studio=self._resolve_studio(scene, matches.studio),
        )

    def link(self, scene: Scene, matches: SceneMatches) -> Scene:
        """
        Applique les relations et persiste la scene.

        L'enregistrement et ses associations sont ecrits dans la meme
        transaction par le repository.

        Args:
            scene: Scene a completer
            matches: IDs trouves par le matching

        Returns:
            La scene telle que persistee

        Raises:
            PersistenceError: si l'ecriture echoue
        """
        linked = self.apply(scene, matches)
        saved = self._scene_repo.save(linked)
        logger.debug(
            f"Scene {saved.id} liee: {len(saved.actors)} acteur(s), "
            f"{len(saved.labels)} label(s), {len(saved.movies)} film(s), "
            f"studio={saved.studio}"
        )
        return saved

    def _resolve_studio(self, scene: Scene, studio_id: Optional[str]) -> Optional[str]:
        if studio_id is None:
            return scene.studio
        if self._studio_repo.get_by_id(studio_id) is None:
            logger.warning(f"Studio {studio_id} introuvable, reference ignoree")
            return scene.studio
        return studio_id
