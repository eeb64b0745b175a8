"""
Configuration du logging de l'application via loguru.

Fournit un logging structuré avec :
- Sortie console : lisible par l'humain, colorée, pour suivre le run
- Sortie fichier : sérialisée en JSON, avec rotation, pour l'audit des runs
"""

import sys
from pathlib import Path

from loguru import logger


def resolve_log_level(log_level: str = "INFO", verbose: int = 0, quiet: bool = False) -> str:
    """
    Détermine le niveau console à partir de la configuration et des options CLI.

    --quiet l'emporte sur --verbose.
    """
    if quiet:
        return "ERROR"
    if verbose >= 1:
        return "DEBUG"
    return log_level


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/vidorg.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB", "1 GB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    # Supprime le handler par défaut
    logger.remove()

    # Handler console - lisible par l'humain
    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    # Handler fichier - JSON pour l'analyse
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
    )

    logger.debug("Logging configuré", log_file=str(log_file), rotation=rotation_size)
