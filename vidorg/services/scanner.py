"""
Service de scan du repertoire source.

Orchestre le listage des fichiers video et la lecture de leur date de
tournage. Un fichier dont la date est illisible reste un candidat sans
date : il sera ecarte par le planificateur, jamais la cause d'un arret.
"""

from pathlib import Path
from typing import Iterable, Iterator

from loguru import logger

from vidorg.core.entities.candidate import Candidate
from vidorg.core.exceptions import DirectoryNotFoundError, MetadataUnavailableError
from vidorg.core.ports.file_system import IFileSystem
from vidorg.core.ports.metadata import IMetadataReader
from vidorg.utils.constants import VIDEO_EXTENSIONS


class ScannerService:
    """
    Service orchestrant le scan du repertoire source.

    Coordonne:
    - Le systeme de fichiers (IFileSystem) pour lister les fichiers video
    - Le lecteur de metadonnees (IMetadataReader) pour la date de tournage
    """

    def __init__(
        self,
        file_system: IFileSystem,
        metadata_reader: IMetadataReader,
        extensions: Iterable[str] = VIDEO_EXTENSIONS,
    ) -> None:
        """
        Initialise le service de scan.

        Args:
            file_system: Implementation de IFileSystem pour les operations fichiers
            metadata_reader: Implementation de IMetadataReader (ressource du run)
            extensions: Extensions video acceptees
        """
        self._file_system = file_system
        self._metadata_reader = metadata_reader
        self._extensions = frozenset(ext.lower() for ext in extensions)

    def scan(self, source_dir: Path) -> Iterator[Candidate]:
        """
        Scanne le repertoire source (non recursif).

        L'existence du repertoire est verifiee avant le debut du scan,
        pas au premier element consomme.

        Args:
            source_dir: Repertoire source

        Returns:
            Iterateur de Candidate dans l'ordre du listage

        Raises:
            DirectoryNotFoundError: Si le repertoire source n'existe pas
        """
        if not self._file_system.is_dir(source_dir):
            raise DirectoryNotFoundError(source_dir, "source")

        logger.debug("Scan du repertoire source", directory=str(source_dir))
        return self._iter_candidates(source_dir)

    def _iter_candidates(self, source_dir: Path) -> Iterator[Candidate]:
        """Yield un Candidate par fichier video, date resolue ou non."""
        for file_path in self._file_system.list_files(source_dir, self._extensions):
            yield self._process_file(file_path)

    def _process_file(self, file_path: Path) -> Candidate:
        """
        Cree le Candidate d'un fichier en resolvant sa date de tournage.

        Args:
            file_path: Chemin du fichier video

        Returns:
            Candidate avec captured_at a None si la date est indisponible
        """
        candidate = Candidate(
            source_path=file_path,
            size_bytes=self._file_system.get_size(file_path),
        )

        try:
            candidate.captured_at = self._metadata_reader.read_capture_date(file_path)
        except MetadataUnavailableError as e:
            logger.debug(
                "Skipping {filename}: No date metadata available.",
                filename=file_path.name,
                file=str(file_path),
                reason=e.reason,
            )

        return candidate
