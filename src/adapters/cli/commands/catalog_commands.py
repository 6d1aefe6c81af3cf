"""
Commandes CLI du catalogue (add, list, search, scenes).
"""

import asyncio
from typing import Annotated, Optional

import typer
from rich.table import Table

from src.adapters.cli.helpers import console, parse_kind, with_container


def add(
    kind: Annotated[str, typer.Argument(help="actor, label, studio ou movie")],
    name: Annotated[str, typer.Argument(help="Nom de l'entite")],
    alias: Annotated[
        Optional[list[str]],
        typer.Option("--alias", "-a", help="Alias (option repetable)"),
    ] = None,
) -> None:
    """Ajoute une entite au catalogue et l'indexe."""
    asyncio.run(_add_async(parse_kind(kind), name, alias or []))


@with_container()
async def _add_async(container, kind, name: str, aliases: list[str]) -> None:
    """Implementation async de la commande add."""
    catalog = container.catalog_service()
    try:
        entity = catalog.create(kind, name, aliases)
    except ValueError as e:
        console.print(f"[red]Erreur:[/red] {e}")
        raise typer.Exit(code=1)
    console.print(f"[green]{kind.value} ajoute:[/green] {entity.name} [dim]({entity.id})[/dim]")


def list_entities(
    kind: Annotated[str, typer.Argument(help="actor, label, studio ou movie")],
) -> None:
    """Liste les entites d'un type."""
    asyncio.run(_list_async(parse_kind(kind)))


@with_container()
async def _list_async(container, kind) -> None:
    """Implementation async de la commande list."""
    entities = container.catalog_service().list_all(kind)
    if not entities:
        console.print(f"[yellow]Aucun {kind.value} dans le catalogue.[/yellow]")
        return

    table = Table(title=f"{kind.value}s ({len(entities)})")
    table.add_column("ID", style="dim")
    table.add_column("Nom", style="cyan")
    table.add_column("Alias")
    for entity in entities:
        table.add_row(entity.id, entity.name, ", ".join(entity.aliases))
    console.print(table)


def search(
    kind: Annotated[str, typer.Argument(help="actor, label, studio ou movie")],
    query: Annotated[str, typer.Argument(help="Texte recherche")],
    limit: Annotated[int, typer.Option("--limit", "-n", help="Nombre de resultats")] = 10,
) -> None:
    """Recherche approchee d'une entite par nom."""
    asyncio.run(_search_async(parse_kind(kind), query, limit))


@with_container(rebuild_indexes=True)
async def _search_async(container, kind, query: str, limit: int) -> None:
    """Implementation async de la commande search."""
    results = container.catalog_service().search(kind, query, limit=limit)
    if not results:
        console.print(f"[yellow]Aucun resultat pour '{query}'.[/yellow]")
        return
    for entity in results:
        console.print(f"  [cyan]{entity.name}[/cyan] [dim]({entity.id})[/dim]")


def scenes() -> None:
    """Liste les scenes importees."""
    asyncio.run(_scenes_async())


@with_container()
async def _scenes_async(container) -> None:
    """Implementation async de la commande scenes."""
    all_scenes = container.scene_repository().get_all()
    if not all_scenes:
        console.print("[yellow]Aucune scene importee.[/yellow]")
        return

    table = Table(title=f"Scenes ({len(all_scenes)})", show_header=True)
    table.add_column("Nom", style="cyan")
    table.add_column("Resolution")
    table.add_column("Acteurs", justify="right")
    table.add_column("Labels", justify="right")
    table.add_column("Films", justify="right")
    table.add_column("Studio", style="dim")
    studio_names = {s.id: s.name for s in container.studio_repository().get_all()}
    for scene in all_scenes:
        resolution = scene.media_info.resolution if scene.media_info else None
        table.add_row(
            scene.name,
            resolution.label if resolution else "-",
            str(len(scene.actors)),
            str(len(scene.labels)),
            str(len(scene.movies)),
            studio_names.get(scene.studio, scene.studio) if scene.studio else "-",
        )
    console.print(table)
