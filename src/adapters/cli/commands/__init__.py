"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.catalog_commands import (
    add,
    list_entities,
    scenes,
    search,
)
from src.adapters.cli.commands.import_commands import import_scenes

__all__ = [
    "add",
    "import_scenes",
    "list_entities",
    "scenes",
    "search",
]
