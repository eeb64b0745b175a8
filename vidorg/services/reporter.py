"""
Service d'ecriture des journaux du run.

Produit deux fichiers texte a la racine de destination :
- le journal du plan (organize-plan-<horodatage>.log), ecrit une seule fois ;
- le journal d'execution (organized-results_<horodatage>.log), cree vide
  avant la confirmation puis complete par l'executeur.

Aucune decision ici : uniquement de la mise en forme. Un echec d'ecriture
est fatal car le plan est la seule trace durable de ce qui va etre fait.
"""

from datetime import datetime
from pathlib import Path

from loguru import logger

from vidorg.core.exceptions import LogWriteError
from vidorg.core.ports.file_system import IFileSystem
from vidorg.core.value_objects import Plan, PlanEntry, RunInfo
from vidorg.utils.constants import LOG_SUFFIX, PLAN_LOG_PREFIX, RESULTS_LOG_PREFIX
from vidorg.utils.dates import format_log_timestamp, format_run_timestamp


def _format_entries(title: str, entries: tuple[PlanEntry, ...]) -> str:
    """Formate une section du plan : titre, compte, puis paires source/destination."""
    lines = [f"\n{title} ({len(entries)} files):"]
    for entry in entries:
        lines.append(f"- Source: {entry.source}")
        lines.append(f"  Destination: {entry.destination}")
    return "\n".join(lines) + "\n"


class PlanReporter:
    """
    Serialise le plan et initialise le journal d'execution.

    Utilisation:
        reporter = PlanReporter(file_system)
        plan_log = reporter.write_plan(plan, run_info)
        results_log = reporter.create_results_log(destination_root, datetime.now())
    """

    def __init__(self, file_system: IFileSystem) -> None:
        self._fs = file_system

    @staticmethod
    def plan_log_path(destination_root: Path, moment: datetime) -> Path:
        """Chemin du journal du plan pour un horodatage donne."""
        return destination_root / f"{PLAN_LOG_PREFIX}{format_run_timestamp(moment)}{LOG_SUFFIX}"

    @staticmethod
    def results_log_path(destination_root: Path, moment: datetime) -> Path:
        """Chemin du journal d'execution pour un horodatage donne."""
        return destination_root / f"{RESULTS_LOG_PREFIX}{format_run_timestamp(moment)}{LOG_SUFFIX}"

    @staticmethod
    def render(plan: Plan, run_info: RunInfo) -> str:
        """
        Met en forme le contenu du journal du plan.

        Args:
            plan: Plan a serialiser
            run_info: Metadonnees du run (debut, source, destination)

        Returns:
            Contenu texte complet du journal
        """
        content = f"Log created on {format_log_timestamp(run_info.started_at)}\n\n"
        content += f"Source: {run_info.source_dir}\n"
        content += f"Destination: {run_info.destination_dir}\n\n"

        content += _format_entries("To be copied", plan.to_copy)
        content += _format_entries("Errors/conflicts", plan.conflicting)
        content += _format_entries("Already there", plan.already_present)

        if run_info.skipped:
            content += f"\nSkipped, no date metadata ({len(run_info.skipped)} files):\n"
            content += "".join(f"- {path}\n" for path in run_info.skipped)

        return content

    def write_plan(self, plan: Plan, run_info: RunInfo) -> Path:
        """
        Ecrit le journal du plan a la racine de destination.

        Args:
            plan: Plan a serialiser
            run_info: Metadonnees du run

        Returns:
            Chemin du journal ecrit

        Raises:
            LogWriteError: Si l'ecriture echoue
        """
        log_path = self.plan_log_path(run_info.destination_dir, run_info.started_at)

        try:
            self._fs.write_text(log_path, self.render(plan, run_info))
        except OSError as e:
            raise LogWriteError(log_path, str(e)) from e

        logger.debug("Comparison results saved to {path}", path=str(log_path))
        return log_path

    def create_results_log(self, destination_root: Path, moment: datetime) -> Path:
        """
        Cree le journal d'execution avec son en-tete.

        Args:
            destination_root: Racine de destination
            moment: Horodatage du journal (distinct de celui du plan)

        Returns:
            Chemin du journal cree

        Raises:
            LogWriteError: Si la creation echoue
        """
        log_path = self.results_log_path(destination_root, moment)

        try:
            self._fs.write_text(log_path, f"Log created on {format_log_timestamp(moment)}\n\n")
        except OSError as e:
            raise LogWriteError(log_path, str(e)) from e

        return log_path
