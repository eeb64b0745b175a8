"""
Cycle de vie du lecteur de metadonnees.

Fournit le generateur utilise par providers.Resource du container : le
lecteur est ouvert a la premiere utilisation et ferme par
container.shutdown_resources(), quelle que soit l'issue du run.
"""

from typing import Iterator, Optional

from loguru import logger

from vidorg.adapters.metadata.exiftool_reader import ExifToolMetadataReader
from vidorg.adapters.metadata.mediainfo_reader import MediaInfoMetadataReader
from vidorg.core.ports.metadata import IMetadataReader


def build_metadata_reader(backend: str, exiftool_path: Optional[str] = None) -> IMetadataReader:
    """
    Instancie le lecteur correspondant au backend configure.

    Raises:
        ValueError: Backend inconnu
    """
    if backend == "exiftool":
        return ExifToolMetadataReader(executable=exiftool_path)
    if backend == "mediainfo":
        return MediaInfoMetadataReader()
    raise ValueError(f"Unknown metadata backend: {backend}")


def open_metadata_reader(
    backend: str = "exiftool",
    exiftool_path: Optional[str] = None,
) -> Iterator[IMetadataReader]:
    """Ouvre le lecteur, le cede au container puis le ferme."""
    reader = build_metadata_reader(backend, exiftool_path)
    reader.open()
    logger.debug("Lecteur de metadonnees ouvert", backend=backend)
    try:
        yield reader
    finally:
        reader.close()
        logger.debug("Lecteur de metadonnees ferme", backend=backend)
