"""
Affichages Rich de la commande organize.

Fournit le resume du plan (tableau), la liste des fichiers ecartes ou en
conflit, la barre de progression des copies et le bilan final.
"""

from contextlib import contextmanager
from typing import Callable, Iterator

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
)
from rich.table import Table

from vidorg.core.value_objects import Bucket
from vidorg.services.executor import CopyResult, ExecutionSummary
from vidorg.services.workflow import RunResult

# Console globale pour tous les affichages
console = Console()

BUCKET_LABELS: dict[Bucket, tuple[str, str]] = {
    Bucket.ALREADY_PRESENT: ("Already there", "dim"),
    Bucket.TO_COPY: ("To be copied", "green"),
    Bucket.CONFLICTING: ("Errors/conflicts", "red"),
}


def display_plan(result: RunResult) -> None:
    """
    Affiche le plan calcule : fichiers ecartes, conflits, resume et journal.

    Args:
        result: Resultat du run apres l'ecriture du journal du plan
    """
    plan = result.plan
    if plan is None:
        return

    if result.run_info is not None:
        for path in result.run_info.skipped:
            console.print(
                f"[yellow]Skipping {escape(path.name)}: No date metadata available.[/yellow]"
            )

    for entry in plan.conflicting:
        console.print(
            f"[red]Conflict: {escape(entry.source.name)} exists but differs in size.[/red]"
        )

    table = Table(title="Summary", show_header=True, header_style="bold cyan")
    table.add_column("Status")
    table.add_column("Files", justify="right")
    for bucket, count in plan.counts().items():
        label, style = BUCKET_LABELS[bucket]
        table.add_row(f"[{style}]{label}[/{style}]", str(count))
    console.print(table)

    if result.plan_log is not None:
        console.print(f"[dim]Comparison results saved to {escape(str(result.plan_log))}[/dim]")


def display_no_copy() -> None:
    """Rien a copier : le run se termine sans question."""
    console.print("[green]No files to copy.[/green]")


def display_dry_run() -> None:
    """Simulation : le run s'arrete apres le journal du plan."""
    console.print("[cyan]Dry run: no file copied.[/cyan]")


def display_cancelled() -> None:
    console.print("[yellow]Operation canceled.[/yellow]")


def display_execution(summary: ExecutionSummary, results_log_path: str) -> None:
    """
    Affiche le bilan des copies.

    Args:
        summary: Bilan retourne par l'executeur
        results_log_path: Chemin du journal d'execution
    """
    for failure in summary.failures:
        console.print(
            f"[red]Failed: {escape(str(failure.entry.source))} "
            f"({escape(failure.error or 'unknown error')})[/red]"
        )

    console.print(
        f"  Copied: [green]{summary.copied}[/green]"
        f"  Failed: [red]{summary.failed}[/red]"
    )
    console.print(
        f"[bold green]Operation completed.[/bold green] Log saved to {escape(results_log_path)}"
    )


@contextmanager
def copy_progress(total: int) -> Iterator[Callable[[CopyResult], None]]:
    """
    Barre de progression des copies.

    Yields:
        Callback a passer a l'executeur, avance la barre d'un fichier
    """
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("[cyan]Copying...", total=total)

        def advance(result: CopyResult) -> None:
            progress.update(task, description=f"[cyan]{escape(result.entry.source.name[:40])}")
            progress.advance(task)

        yield advance
        progress.update(task, description="[green]Done")
