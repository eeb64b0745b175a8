"""Commande CLI organize : rangement des videos par annee/mois de tournage."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger
from rich.markup import escape

from vidorg.adapters.cli.confirmation import ask_confirmation
from vidorg.adapters.cli.display import (
    console,
    copy_progress,
    display_cancelled,
    display_dry_run,
    display_execution,
    display_no_copy,
    display_plan,
)
from vidorg.container import Container
from vidorg.core.exceptions import LogWriteError, PreconditionError
from vidorg.logging_config import configure_logging, resolve_log_level
from vidorg.services.workflow import RunResult, check_directories

USAGE = "Usage: organize <source_directory> <destination_directory>"


def organize(
    source: Annotated[
        Optional[Path],
        typer.Argument(help="Repertoire contenant les videos a ranger", show_default=False),
    ] = None,
    destination: Annotated[
        Optional[Path],
        typer.Argument(help="Racine de l'arborescence annee/mois", show_default=False),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Ecrit le plan sans rien copier ni poser de question"),
    ] = False,
    verbose: Annotated[
        int,
        typer.Option("--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """
    Copie les videos de SOURCE vers DESTINATION/AAAA/MM selon leur date de tournage.

    Un plan est ecrit dans DESTINATION puis une confirmation est demandee
    avant toute copie.

    Exemples:
      organize ~/DCIM/Camera /media/videos/organized
      organize ~/DCIM/Camera /media/videos/organized --dry-run
    """
    if source is None or destination is None:
        console.print(f"[red]{USAGE}[/red]")
        raise typer.Exit(1)

    container = Container()
    config = container.config()
    configure_logging(
        log_level=resolve_log_level(config.log_level, verbose, quiet),
        log_file=config.log_file,
        rotation_size=config.log_rotation_size,
        retention_count=config.log_retention_count,
    )

    source_dir = source.expanduser().resolve()
    destination_dir = destination.expanduser().resolve()

    exit_code = 0
    try:
        # Avant container.workflow_service() : resoudre le workflow ouvre le
        # lecteur de metadonnees (processus exiftool), aucun ne doit demarrer
        # pour un repertoire manquant
        check_directories(container.file_system(), source_dir, destination_dir)

        console.print("[bold cyan]Scanning files and comparing...[/bold cyan]")
        workflow = container.workflow_service()
        result = workflow.run(
            source_dir,
            destination_dir,
            confirm=lambda plan: ask_confirmation(console),
            dry_run=dry_run,
            copy_progress=copy_progress,
            on_plan=display_plan,
        )
        _display_outcome(result, dry_run)
    except PreconditionError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        exit_code = 1
    except LogWriteError as e:
        logger.error("Plan log not written: {error}", error=str(e))
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        exit_code = 1
    except Exception as e:
        logger.exception("Unexpected error during run")
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        exit_code = 1
    finally:
        # Arrete exiftool, quelle que soit l'issue du run
        container.shutdown_resources()

    if exit_code:
        raise typer.Exit(exit_code)


def _display_outcome(result: RunResult, dry_run: bool) -> None:
    """Affiche la conclusion du run selon l'etat atteint."""
    if result.plan is None:
        return

    if not result.plan.has_copies:
        display_no_copy()
    elif dry_run:
        display_dry_run()
    elif result.cancelled:
        display_cancelled()
    elif result.summary is not None and result.results_log is not None:
        display_execution(result.summary, str(result.results_log))
