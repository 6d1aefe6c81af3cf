"""
Commande CLI d'import de scenes (fichier unique ou repertoire).
"""

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

from src.adapters.cli.helpers import console, suppress_loguru, with_container
from src.core.exceptions import SceneVaultError


def import_scenes(
    source: Annotated[
        Optional[Path],
        typer.Argument(help="Fichier video ou repertoire a importer (defaut: library_dir)"),
    ] = None,
    no_match: Annotated[
        bool,
        typer.Option(
            "--no-match",
            help="Ne pas extraire acteurs, labels, studio et films du chemin",
        ),
    ] = False,
) -> None:
    """
    Importe des fichiers video comme scenes.

    Un fichier est importe directement ; un repertoire est parcouru
    recursivement et les chemins deja importes sont ignores.
    """
    asyncio.run(_import_scenes_async(source, not no_match))


@with_container(rebuild_indexes=True)
async def _import_scenes_async(
    container, source: Optional[Path], use_matching_config: bool
) -> None:
    """Implementation async de la commande import."""
    from src.services.importer import ImportDecision

    if source is None:
        source = Path(container.config().library_dir)

    if not source.exists():
        console.print(f"[red]Erreur:[/red] Chemin introuvable: {source}")
        raise typer.Exit(code=1)

    importer = container.importer_service()

    if source.is_file():
        try:
            scene = await importer.on_import(source, use_matching_config)
        except SceneVaultError as e:
            console.print(f"[red]Erreur:[/red] {e}")
            raise typer.Exit(code=1)
        _print_scene_summary(container, scene)
        return

    imported = 0
    skipped = 0
    errors = 0

    console.print(f"[bold cyan]Import de la bibliotheque[/bold cyan]: {source}\n")
    if not use_matching_config:
        console.print("[yellow]Extraction depuis le chemin desactivee[/yellow]\n")

    with suppress_loguru(), Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
    ) as progress:
        import_task = progress.add_task("[cyan]Scan en cours...", total=None)

        async for result in importer.scan_library(source, use_matching_config):
            progress.update(import_task, description=f"[cyan]{result.filename}")

            if result.decision == ImportDecision.IMPORT:
                imported += 1
            elif result.decision == ImportDecision.SKIP_KNOWN:
                skipped += 1
            elif result.decision == ImportDecision.ERROR:
                errors += 1
                console.print(
                    f"[red]Erreur:[/red] {result.filename}: {result.error_message}"
                )

        total = imported + skipped + errors
        progress.update(
            import_task, total=total, completed=total, description="[green]Termine"
        )

    console.print("\n[bold]Resume de l'import:[/bold]")
    console.print(f"  [green]{imported}[/green] importe(s)")
    console.print(f"  [yellow]{skipped}[/yellow] ignore(s)")
    if errors > 0:
        console.print(f"  [red]{errors}[/red] erreur(s)")


def _print_scene_summary(container, scene) -> None:
    """Affiche une scene importee et ses relations."""
    scene_repo = container.scene_repository()
    console.print(f"[green]Scene importee:[/green] {scene.name} [dim]({scene.id})[/dim]")

    actors = ", ".join(a.name for a in scene_repo.get_actors(scene.id)) or "-"
    labels = ", ".join(lb.name for lb in scene_repo.get_labels(scene.id)) or "-"
    movies = ", ".join(m.name for m in scene_repo.get_movies(scene.id)) or "-"
    studio = "-"
    if scene.studio:
        found = container.studio_repository().get_by_id(scene.studio)
        studio = found.name if found else scene.studio

    console.print(f"  Acteurs : {actors}")
    console.print(f"  Labels  : {labels}")
    console.print(f"  Studio  : {studio}")
    console.print(f"  Films   : {movies}")
