"""
Point d'entrée CLI de SceneVault.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import (
    add,
    import_scenes,
    list_entities,
    scenes,
    search,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging, level_from_verbosity

__version__ = "0.1.0"

app = typer.Typer(
    name="scenevault",
    help="Import de scenes video et rattachement automatique des metadonnees",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """SceneVault - Catalogue de scenes video."""
    settings = get_config()
    configure_logging(
        log_level=level_from_verbosity(settings.log_level, verbose, quiet),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


# Note: "import" est un mot reserve Python, donc on utilise name= explicitement
app.command(name="import")(import_scenes)
app.command()(add)
app.command(name="list")(list_entities)
app.command()(search)
app.command()(scenes)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    matching = config.matching
    logger.info("Configuration SceneVault")
    typer.echo(f"Bibliothèque : {config.library_dir}")
    typer.echo(f"Base de données : {config.database_url}")
    for label, enabled in (
        ("acteurs", matching.extract_actors),
        ("labels", matching.extract_labels),
        ("studios", matching.extract_studios),
        ("films", matching.extract_movies),
    ):
        typer.echo(f"Extraction {label} : {'activée' if enabled else 'désactivée'}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"SceneVault v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    logger.info("Démarrage de SceneVault", version=__version__)
    app()


if __name__ == "__main__":
    main()
