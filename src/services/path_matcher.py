"""
Matching des entites du catalogue dans le chemin d'un fichier.

Fonctions pures : meme chemin + memes candidats => meme resultat,
independamment de l'ordre des appels.

Normalisation (chemin et noms):
- suppression des accents (NFD)
- minuscules
- toute suite de caracteres non alphanumeriques (espaces, '_', '.', '-',
  separateurs de chemin...) devient un espace unique

Un candidat correspond si son nom (ou un alias) normalise apparait comme
une suite de mots entiere dans le chemin normalise. "abc actor" trouve
"dynamic_abc_actor.mp4" mais pas "abcactor.mp4" ni "xabc actor".
"""

import re
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from src.core.entities import NamedEntity
from src.utils.helpers import normalize_accents

# Caracteres non alphanumeriques, underscore compris
_SEPARATORS = re.compile(r"[\W_]+", re.UNICODE)


def normalize_text(value: str) -> str:
    """
    Normalise une chaine pour la comparaison de mots.

    Ex: "Ghi_Studio - Cléo.mp4" -> "ghi studio cleo mp4"
    """
    text = normalize_accents(value).lower()
    return _SEPARATORS.sub(" ", text).strip()


def _find_term(haystack: str, term: str) -> int:
    """
    Position du terme normalise dans le chemin normalise, ou -1.

    Les deux chaines sont bornees par des espaces pour n'accepter
    que des mots entiers.
    """
    if not term:
        return -1
    return f" {haystack} ".find(f" {term} ")


def _best_occurrence(haystack: str, entity: NamedEntity) -> Optional[tuple[int, int]]:
    """
    Meilleure occurrence d'une entite dans le chemin.

    Returns:
        (longueur du terme, position) du terme le plus long trouve,
        la position la plus a gauche departageant deux termes de meme
        longueur ; None si aucun terme n'apparait
    """
    best: Optional[tuple[int, int]] = None
    for term in {normalize_text(t) for t in entity.terms}:
        position = _find_term(haystack, term)
        if position < 0:
            continue
        candidate = (len(term), position)
        if best is None or (candidate[0], -candidate[1]) > (best[0], -best[1]):
            best = candidate
    return best


def _occurrences(
    path: Union[str, Path], candidates: Iterable[NamedEntity]
) -> list[tuple[int, int, int, NamedEntity]]:
    """Liste (longueur, position, rang d'indexation, entite) des candidats trouves."""
    haystack = normalize_text(str(path))
    found = []
    seen: set[str] = set()
    for rank, entity in enumerate(candidates):
        if entity.id in seen:
            continue
        occurrence = _best_occurrence(haystack, entity)
        if occurrence is not None:
            seen.add(entity.id)
            found.append((occurrence[0], occurrence[1], rank, entity))
    return found


def match_entities(
    path: Union[str, Path], candidates: Sequence[NamedEntity]
) -> list[str]:
    """
    Retourne les IDs des candidats dont le nom apparait dans le chemin.

    Args:
        path: Chemin du fichier
        candidates: Entites indexees, dans l'ordre d'indexation

    Returns:
        IDs sans doublon, tries par position dans le chemin puis par
        ordre d'indexation. Liste vide si rien ne correspond.
    """
    found = _occurrences(path, candidates)
    found.sort(key=lambda item: (item[1], item[2]))
    return [entity.id for _length, _position, _rank, entity in found]


def pick_studio(
    path: Union[str, Path], candidates: Sequence[NamedEntity]
) -> Optional[str]:
    """
    Choisit au plus un studio parmi les candidats trouves dans le chemin.

    Departage: terme le plus long, puis position la plus a gauche,
    puis ordre d'indexation.

    Returns:
        ID du studio retenu, ou None
    """
    found = _occurrences(path, candidates)
    if not found:
        return None
    found.sort(key=lambda item: (-item[0], item[1], item[2]))
    return found[0][3].id
