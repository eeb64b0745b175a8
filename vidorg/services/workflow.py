"""
Service d'orchestration d'un run de rangement.

Enchaine les etapes : scan -> plan -> journal du plan -> confirmation -> copie.

Etats traverses :
    IDLE -> SCANNING -> PLANNING -> REPORTING -> AWAITING_CONFIRMATION
         -> (COPYING | CANCELLED) -> DONE
Raccourcis vers DONE : depuis REPORTING quand il n'y a rien a copier (ou en
simulation), depuis AWAITING_CONFIRMATION quand l'operateur refuse.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Callable, ContextManager, Optional

from loguru import logger

from vidorg.core.exceptions import DirectoryNotFoundError
from vidorg.core.ports.file_system import IFileSystem
from vidorg.core.value_objects import Plan, RunInfo
from vidorg.services.executor import CopyResult, ExecutionSummary, ExecutorService
from vidorg.services.planner import PlannerService
from vidorg.services.reporter import PlanReporter
from vidorg.services.scanner import ScannerService


class RunState(str, Enum):
    """Etapes d'un run."""

    IDLE = "idle"
    SCANNING = "scanning"
    PLANNING = "planning"
    REPORTING = "reporting"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    COPYING = "copying"
    CANCELLED = "cancelled"
    DONE = "done"


@dataclass
class RunResult:
    """
    Resultat final d'un run.

    Attributs:
        plan: Plan calcule (None si le run s'est arrete avant)
        run_info: Metadonnees du run
        plan_log: Chemin du journal du plan
        results_log: Chemin du journal d'execution (None si rien a copier)
        confirmed: Reponse de l'operateur (None si pas de question posee)
        summary: Bilan des copies (None si aucune copie lancee)
        history: Etats traverses, dans l'ordre
    """

    plan: Optional[Plan] = None
    run_info: Optional[RunInfo] = None
    plan_log: Optional[Path] = None
    results_log: Optional[Path] = None
    confirmed: Optional[bool] = None
    summary: Optional[ExecutionSummary] = None
    history: list[RunState] = field(default_factory=lambda: [RunState.IDLE])

    @property
    def state(self) -> RunState:
        """Etat courant (le dernier traverse)."""
        return self.history[-1]

    @property
    def cancelled(self) -> bool:
        return RunState.CANCELLED in self.history


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def check_directories(
    file_system: IFileSystem, source_dir: Path, destination_dir: Path
) -> None:
    """
    Verifie que les deux repertoires existent avant tout traitement.

    Raises:
        DirectoryNotFoundError: Si la source ou la destination est absente
    """
    if not file_system.is_dir(source_dir):
        raise DirectoryNotFoundError(source_dir, "source")
    if not file_system.is_dir(destination_dir):
        raise DirectoryNotFoundError(destination_dir, "destination")


class OrganizeWorkflow:
    """
    Service d'orchestration du run complet.

    La confirmation est injectee sous forme de callable pour garder le
    service independant de la console : la CLI fournit la vraie question,
    les tests une reponse fixe.

    Utilisation typique:
        workflow = OrganizeWorkflow(fs, scanner, planner, reporter, executor)
        result = workflow.run(source, destination, confirm=ask_confirmation)
    """

    def __init__(
        self,
        file_system: IFileSystem,
        scanner: ScannerService,
        planner: PlannerService,
        reporter: PlanReporter,
        executor: ExecutorService,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._fs = file_system
        self._scanner = scanner
        self._planner = planner
        self._reporter = reporter
        self._executor = executor
        self._clock = clock

    def run(
        self,
        source_dir: Path,
        destination_dir: Path,
        confirm: Callable[[Plan], bool],
        dry_run: bool = False,
        copy_progress: Optional[Callable[[int], ContextManager[Callable[[CopyResult], None]]]] = None,
        on_plan: Optional[Callable[[RunResult], None]] = None,
    ) -> RunResult:
        """
        Execute un run complet.

        Args:
            source_dir: Repertoire source (absolu)
            destination_dir: Racine de destination (absolue)
            confirm: Question oui/non posee avant la copie
            dry_run: Si True, s'arrete apres le journal du plan
            copy_progress: Fabrique de contexte de progression ; recoit le nombre
                de copies et cede le callback appele apres chaque fichier
            on_plan: Callback appele une fois le plan ecrit (affichage du resume)

        Returns:
            RunResult dans l'etat DONE

        Raises:
            DirectoryNotFoundError: Precondition non remplie
            LogWriteError: Journal du plan ou d'execution non ecrit
        """
        # Le workflow reste utilisable hors CLI : il verifie lui-meme ses preconditions
        check_directories(self._fs, source_dir, destination_dir)
        result = RunResult()
        started_at = self._clock()

        # Etape 1: Scan (dates resolues au fil de l'eau)
        result.history.append(RunState.SCANNING)
        candidates = list(self._scanner.scan(source_dir))
        skipped = tuple(c.source_path for c in candidates if not c.has_timestamp)
        logger.info(
            "Scan termine",
            candidates=len(candidates),
            skipped=len(skipped),
        )

        # Etape 2: Classification
        result.history.append(RunState.PLANNING)
        plan = self._planner.build_plan(candidates, destination_dir)
        result.plan = plan
        result.run_info = RunInfo(
            source_dir=source_dir,
            destination_dir=destination_dir,
            started_at=started_at,
            skipped=skipped,
        )

        # Etape 3: Journal du plan
        result.history.append(RunState.REPORTING)
        result.plan_log = self._reporter.write_plan(plan, result.run_info)
        if on_plan is not None:
            on_plan(result)

        if not plan.has_copies or dry_run:
            result.history.append(RunState.DONE)
            return result

        # Etape 4: Confirmation (journal d'execution cree avant la question)
        result.results_log = self._reporter.create_results_log(destination_dir, self._clock())
        result.history.append(RunState.AWAITING_CONFIRMATION)
        result.confirmed = confirm(plan)

        if not result.confirmed:
            logger.debug("Operation canceled.")
            result.history.append(RunState.CANCELLED)
            result.history.append(RunState.DONE)
            return result

        # Etape 5: Copie
        result.history.append(RunState.COPYING)
        if copy_progress is None:
            result.summary = self._executor.execute(plan.to_copy, result.results_log)
        else:
            with copy_progress(len(plan.to_copy)) as on_copy:
                result.summary = self._executor.execute(
                    plan.to_copy, result.results_log, on_copy
                )
        logger.debug(
            "Operation completed",
            copied=result.summary.copied,
            failed=result.summary.failed,
        )
        result.history.append(RunState.DONE)
        return result
