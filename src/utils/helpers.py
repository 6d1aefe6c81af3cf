"""
Fonctions utilitaires partagees dans le projet SceneVault.

Ce module centralise les fonctions reutilisees a travers le codebase :
- generate_id : identifiant unique prefixe par le type d'entite
- normalize_accents : suppression des diacritiques pour comparaison
- strip_invisible_chars / clean_name : nettoyage des noms saisis
- utc_now / as_utc : horodatage UTC avec fuseau pour la persistance
"""

import unicodedata
import uuid
from datetime import datetime, timezone


def generate_id(prefix: str) -> str:
    """
    Genere un identifiant unique prefixe.

    Ex: generate_id("ac") -> "ac_3f9c2a0e4b1d47a8"
    """
    return f"{prefix}_{uuid.uuid4().hex[:16]}"


def strip_invisible_chars(text: str) -> str:
    """
    Retire les caractères Unicode invisibles d'une chaîne.

    Supprime les caractères de contrôle et les marques directionnelles
    (LRM, RLM, BOM, etc.).
    """
    result = []
    for char in text:
        category = unicodedata.category(char)
        if category in ("Cf", "Cc"):
            continue
        result.append(char)
    return "".join(result)


def clean_name(name: str) -> str:
    """Nettoie un nom : retire les caractères invisibles et les espaces superflus."""
    if not name:
        return name
    return " ".join(strip_invisible_chars(name).split())


def normalize_accents(text: str) -> str:
    """
    Supprime les accents d'une chaine pour une comparaison insensible aux accents.

    Utilise la decomposition NFD puis filtre les caracteres diacritiques (Mn).
    Ex: "Cléo Studio" -> "Cleo Studio"
    """
    normalized = unicodedata.normalize("NFD", text)
    return "".join(char for char in normalized if unicodedata.category(char) != "Mn")


def utc_now() -> datetime:
    """Date et heure courantes en UTC, avec fuseau (les colonnes SQLModel refusent les dates naives)."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Rattache UTC a une date naive (relue depuis SQLite), laisse les autres intactes."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
