"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI.
Le lecteur de metadonnees est une Resource : ouvert a la premiere
utilisation, ferme par shutdown_resources() en fin de run.
"""

from dependency_injector import containers, providers

from .adapters.file_system import FileSystemAdapter
from .adapters.metadata.resource import open_metadata_reader
from .config import Settings
from .services.executor import ExecutorService
from .services.planner import PlannerService
from .services.reporter import PlanReporter
from .services.scanner import ScannerService
from .services.workflow import OrganizeWorkflow


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        try:
            workflow = container.workflow_service()
            workflow.run(source, destination, confirm=...)
        finally:
            container.shutdown_resources()  # arrete exiftool
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    file_system = providers.Singleton(FileSystemAdapter)

    # Lecteur de metadonnees - une instance par run, liberee explicitement
    metadata_reader = providers.Resource(
        open_metadata_reader,
        backend=config.provided.metadata_backend,
        exiftool_path=config.provided.exiftool_path,
    )

    # Services
    scanner_service = providers.Factory(
        ScannerService,
        file_system=file_system,
        metadata_reader=metadata_reader,
        extensions=config.provided.video_extensions,
    )
    planner_service = providers.Singleton(PlannerService, file_system=file_system)
    plan_reporter = providers.Singleton(PlanReporter, file_system=file_system)
    executor_service = providers.Singleton(ExecutorService, file_system=file_system)

    # Orchestration d'un run
    workflow_service = providers.Factory(
        OrganizeWorkflow,
        file_system=file_system,
        scanner=scanner_service,
        planner=planner_service,
        reporter=plan_reporter,
        executor=executor_service,
    )
