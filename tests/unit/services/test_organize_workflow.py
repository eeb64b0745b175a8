"""
Tests unitaires pour OrganizeWorkflow.

Les services sont mockes : seuls l'enchainement des etapes, les etats
traverses et les appels a la confirmation sont verifies.
"""

from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from loguru import logger

from vidorg.core.entities import Candidate
from vidorg.core.exceptions import DirectoryNotFoundError, LogWriteError
from vidorg.core.value_objects import Plan, PlanEntry
from vidorg.services.executor import (
    CopyResult,
    ExecutionSummary,
    ExecutorService,
)
from vidorg.services.planner import PlannerService
from vidorg.services.reporter import PlanReporter
from vidorg.services.scanner import ScannerService
from vidorg.services.workflow import OrganizeWorkflow, RunState, check_directories

SRC = Path("/src")
DST = Path("/dst")
NOW = datetime(2024, 3, 5, 7, 8, 9, tzinfo=timezone.utc)
ENTRY = PlanEntry(source=SRC / "a.mp4", destination=DST / "2021" / "06" / "a.mp4")


@pytest.fixture
def services():
    """Services mockes avec un plan contenant une copie."""
    scanner = MagicMock(spec=ScannerService)
    scanner.scan.return_value = iter([
        Candidate(source_path=SRC / "a.mp4", size_bytes=500, captured_at=datetime(2021, 6, 1)),
        Candidate(source_path=SRC / "b.mov", size_bytes=700),
    ])
    planner = MagicMock(spec=PlannerService)
    planner.build_plan.return_value = Plan(to_copy=(ENTRY,))
    reporter = MagicMock(spec=PlanReporter)
    reporter.write_plan.return_value = DST / "organize-plan.log"
    reporter.create_results_log.return_value = DST / "organized-results.log"
    executor = MagicMock(spec=ExecutorService)
    executor.execute.return_value = ExecutionSummary(
        results=[CopyResult(entry=ENTRY, success=True)]
    )
    return scanner, planner, reporter, executor


@pytest.fixture
def workflow(mock_file_system, services) -> OrganizeWorkflow:
    scanner, planner, reporter, executor = services
    return OrganizeWorkflow(
        mock_file_system, scanner, planner, reporter, executor, clock=lambda: NOW
    )


class TestCheckDirectories:
    """Tests pour les preconditions du run."""

    def test_missing_source(self, mock_file_system) -> None:
        mock_file_system.is_dir.side_effect = lambda path: path != SRC
        with pytest.raises(DirectoryNotFoundError, match="Source"):
            check_directories(mock_file_system, SRC, DST)

    def test_missing_destination(self, mock_file_system) -> None:
        mock_file_system.is_dir.side_effect = lambda path: path != DST
        with pytest.raises(DirectoryNotFoundError, match="Destination"):
            check_directories(mock_file_system, SRC, DST)


class TestOrganizeWorkflow:
    """Tests pour l'enchainement des etapes."""

    def test_confirmed_run_copies(self, workflow, services) -> None:
        _, planner, reporter, executor = services
        confirm = MagicMock(return_value=True)

        result = workflow.run(SRC, DST, confirm=confirm)

        assert result.history == [
            RunState.IDLE,
            RunState.SCANNING,
            RunState.PLANNING,
            RunState.REPORTING,
            RunState.AWAITING_CONFIRMATION,
            RunState.COPYING,
            RunState.DONE,
        ]
        assert result.state is RunState.DONE
        confirm.assert_called_once_with(planner.build_plan.return_value)
        executor.execute.assert_called_once_with((ENTRY,), DST / "organized-results.log")
        assert result.summary.copied == 1
        assert result.run_info.skipped == (SRC / "b.mov",)
        assert result.run_info.started_at == NOW

    def test_results_log_created_before_question(self, workflow, services) -> None:
        _, _, reporter, _ = services

        def confirm(plan) -> bool:
            reporter.create_results_log.assert_called_once_with(DST, NOW)
            return False

        workflow.run(SRC, DST, confirm=confirm)

    def test_declined_run_copies_nothing(self, workflow, services) -> None:
        _, _, _, executor = services

        result = workflow.run(SRC, DST, confirm=lambda plan: False)

        assert result.cancelled
        assert result.confirmed is False
        assert result.history[-2:] == [RunState.CANCELLED, RunState.DONE]
        assert result.summary is None
        executor.execute.assert_not_called()

    def test_nothing_to_copy_skips_question(self, workflow, services) -> None:
        _, planner, reporter, executor = services
        planner.build_plan.return_value = Plan(already_present=(ENTRY,))
        confirm = MagicMock()

        result = workflow.run(SRC, DST, confirm=confirm)

        assert result.history[-2:] == [RunState.REPORTING, RunState.DONE]
        confirm.assert_not_called()
        reporter.write_plan.assert_called_once()
        reporter.create_results_log.assert_not_called()
        executor.execute.assert_not_called()
        assert result.results_log is None

    def test_dry_run_stops_after_plan(self, workflow, services) -> None:
        _, _, reporter, executor = services
        confirm = MagicMock()

        result = workflow.run(SRC, DST, confirm=confirm, dry_run=True)

        assert result.state is RunState.DONE
        assert result.plan_log == DST / "organize-plan.log"
        confirm.assert_not_called()
        reporter.create_results_log.assert_not_called()
        executor.execute.assert_not_called()

    def test_precondition_stops_before_scan(self, workflow, services, mock_file_system) -> None:
        scanner, _, reporter, _ = services
        mock_file_system.is_dir.return_value = False

        with pytest.raises(DirectoryNotFoundError):
            workflow.run(SRC, DST, confirm=lambda plan: True)

        scanner.scan.assert_not_called()
        reporter.write_plan.assert_not_called()

    def test_plan_log_failure_propagates(self, workflow, services) -> None:
        _, _, reporter, executor = services
        reporter.write_plan.side_effect = LogWriteError(DST / "plan.log", "read-only")
        confirm = MagicMock()

        with pytest.raises(LogWriteError):
            workflow.run(SRC, DST, confirm=confirm)

        confirm.assert_not_called()
        executor.execute.assert_not_called()

    def test_on_plan_called_before_question(self, workflow) -> None:
        calls = []

        def on_plan(result) -> None:
            calls.append(("plan", result.state))

        def confirm(plan) -> bool:
            calls.append(("confirm", None))
            return False

        workflow.run(SRC, DST, confirm=confirm, on_plan=on_plan)

        assert calls == [("plan", RunState.REPORTING), ("confirm", None)]

    def test_copy_progress_wraps_execution(self, workflow, services) -> None:
        _, _, _, executor = services
        events = []

        def on_copy(result: CopyResult) -> None:
            events.append(result)

        @contextmanager
        def copy_progress(total: int):
            events.append(("start", total))
            yield on_copy
            events.append("end")

        workflow.run(SRC, DST, confirm=lambda plan: True, copy_progress=copy_progress)

        assert events == [("start", 1), "end"]
        executor.execute.assert_called_once_with(
            (ENTRY,), DST / "organized-results.log", on_copy
        )

    def test_cancellation_is_not_logged_above_debug(self, workflow) -> None:
        messages = []
        sink_id = logger.add(messages.append, level="INFO", format="{message}")
        try:
            workflow.run(SRC, DST, confirm=lambda plan: False)
        finally:
            logger.remove(sink_id)

        assert not any("Operation canceled." in m for m in messages)
