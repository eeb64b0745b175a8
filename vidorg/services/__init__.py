"""
Couche application de VidOrg.

- ScannerService : listage du repertoire source et resolution des dates
- PlannerService : classification des candidats (plan)
- PlanReporter : journal du plan et journal d'execution
- ExecutorService : copie des fichiers planifies
- OrganizeWorkflow : orchestration d'un run complet
"""

from vidorg.services.executor import CopyResult, ExecutionSummary, ExecutorService
from vidorg.services.planner import PlannerService
from vidorg.services.reporter import PlanReporter
from vidorg.services.scanner import ScannerService
from vidorg.services.workflow import OrganizeWorkflow, RunResult, RunState

__all__ = [
    "CopyResult",
    "ExecutionSummary",
    "ExecutorService",
    "OrganizeWorkflow",
    "PlanReporter",
    "PlannerService",
    "RunResult",
    "RunState",
    "ScannerService",
]
