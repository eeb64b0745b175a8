"""
Service d'execution des copies planifiees.

Copie chaque entree TO_COPY dans l'ordre du plan et trace le resultat dans
le journal d'execution. L'echec d'une copie est isole : il est journalise
(console et journal d'execution) puis la copie suivante est tentee.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Optional

from loguru import logger

from vidorg.core.exceptions import CopyFailureError
from vidorg.core.ports.file_system import IFileSystem
from vidorg.core.value_objects import PlanEntry


@dataclass
class CopyResult:
    """
    Resultat de la copie d'un fichier.

    Attributs:
        entry: Paire (source, destination) traitee
        success: True si la copie a reussi
        error: Message d'erreur (si echec)
    """

    entry: PlanEntry
    success: bool
    error: Optional[str] = None


@dataclass
class ExecutionSummary:
    """Bilan d'une execution : resultats dans l'ordre du plan."""

    results: list[CopyResult] = field(default_factory=list)

    @property
    def copied(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.success)

    @property
    def failures(self) -> list[CopyResult]:
        return [r for r in self.results if not r.success]


class ExecutorService:
    """
    Service de copie des fichiers du plan.

    Utilisation:
        executor = ExecutorService(file_system)
        summary = executor.execute(plan.to_copy, results_log)
        print(f"{summary.copied} copies, {summary.failed} echecs")
    """

    def __init__(self, file_system: IFileSystem) -> None:
        """
        Initialise le service de copie.

        Args:
            file_system: Adaptateur systeme de fichiers (copie, ajout au journal)
        """
        self._fs = file_system

    def copy_one(self, entry: PlanEntry) -> None:
        """
        Copie un fichier vers sa destination (parents crees si besoin).

        Args:
            entry: Paire (source, destination)

        Raises:
            CopyFailureError: Si la copie echoue (erreur systeme)
        """
        try:
            self._fs.copy(entry.source, entry.destination)
        except OSError as e:
            raise CopyFailureError(entry.source, entry.destination, str(e)) from e

        logger.debug(
            "Copied: {source} -> {destination}",
            source=str(entry.source),
            destination=str(entry.destination),
        )

    def _run_one(self, entry: PlanEntry) -> CopyResult:
        """Copie une entree ; un echec est converti en CopyResult."""
        try:
            self.copy_one(entry)
        except CopyFailureError as e:
            logger.debug(
                "Copy failed: {failure}",
                failure=str(e),
                file=str(entry.source),
                destination=str(entry.destination),
            )
            return CopyResult(entry=entry, success=False, error=e.reason)
        return CopyResult(entry=entry, success=True)

    def execute(
        self,
        entries: Iterable[PlanEntry],
        results_log: Path,
        on_result: Optional[Callable[[CopyResult], None]] = None,
    ) -> ExecutionSummary:
        """
        Copie les entrees dans l'ordre et complete le journal d'execution.

        Chaque succes ajoute "Copied: <source> -> <dest>", chaque echec
        "Failed: <source> -> <dest> (<raison>)". Un pied de page resume le lot.

        Args:
            entries: Entrees TO_COPY du plan
            results_log: Journal d'execution cree par le reporter
            on_result: Callback appele apres chaque fichier (progression)

        Returns:
            ExecutionSummary avec un CopyResult par entree
        """
        summary = ExecutionSummary()

        for entry in entries:
            result = self._run_one(entry)
            summary.results.append(result)

            if result.success:
                line = f"Copied: {entry.source} -> {entry.destination}\n"
            else:
                line = f"Failed: {entry.source} -> {entry.destination} ({result.error})\n"
            self._append(results_log, line)

            if on_result is not None:
                on_result(result)

        self._append(
            results_log,
            f"\nCompleted: {summary.copied} copied, {summary.failed} failed\n",
        )
        return summary

    def _append(self, results_log: Path, line: str) -> None:
        """Ajoute une ligne au journal ; une erreur d'ecriture n'arrete pas les copies."""
        try:
            self._fs.append_text(results_log, line)
        except OSError as e:
            logger.error(
                "Unable to append to {path}: {error}",
                path=str(results_log),
                error=str(e),
            )
