"""
Utilitaires partages pour les commandes CLI de SceneVault.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
- parse_kind : conversion d'un argument CLI en EntityKind
"""

from contextlib import contextmanager
from functools import wraps

import typer
from loguru import logger as loguru_logger
from rich.console import Console

from src.container import Container
from src.core.value_objects import EntityKind

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("src")
    try:
        yield
    finally:
        loguru_logger.enable("src")


def with_container(requires_db: bool = True, rebuild_indexes: bool = False):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Args:
        requires_db: Si True (defaut), initialise la base de donnees.
        rebuild_indexes: Si True, recharge les index depuis la base
            (necessaire avant tout import avec matching).

    Usage:
        @with_container(rebuild_indexes=True)
        async def my_command(container, ...):
            importer = container.importer_service()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            if requires_db:
                container.database.init()
            if rebuild_indexes:
                container.catalog_service().rebuild_indexes()
            return await func(container, *args, **kwargs)
        return wrapper
    return decorator


def parse_kind(value: str) -> EntityKind:
    """
    Convertit un type saisi (actor, actors, Studio...) en EntityKind.

    Raises:
        typer.BadParameter: si le type est inconnu
    """
    normalized = value.strip().lower().rstrip("s")
    try:
        return EntityKind(normalized)
    except ValueError:
        choices = ", ".join(kind.value for kind in EntityKind)
        raise typer.BadParameter(f"Type inconnu '{value}' (attendu: {choices})")
