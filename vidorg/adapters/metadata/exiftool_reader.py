"""
Implementation du lecteur de date de tournage avec pyexiftool.

Un seul processus exiftool est lance pour tout le run (mode -stay_open)
et doit etre arrete par close() en fin de run.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import exiftool
from loguru import logger

from vidorg.core.exceptions import MetadataUnavailableError, PreconditionError
from vidorg.core.ports.metadata import IMetadataReader
from vidorg.utils.constants import EXIFTOOL_DATE_TAGS
from vidorg.utils.dates import parse_metadata_date


class ExifToolMetadataReader(IMetadataReader):
    """
    Lecteur de date de tournage utilisant exiftool.

    Interroge CreateDate puis DateTimeOriginal, quel que soit le groupe
    qui les fournit (QuickTime, EXIF, XMP...).
    """

    def __init__(self, executable: Optional[str] = None) -> None:
        """
        Initialise le lecteur.

        Args:
            executable: Chemin de l'executable exiftool (None = PATH)
        """
        self._executable = executable
        self._helper: Optional[exiftool.ExifToolHelper] = None

    def open(self) -> None:
        """Demarre le processus exiftool persistant."""
        if self._helper is not None and self._helper.running:
            return
        helper = exiftool.ExifToolHelper(executable=self._executable)
        try:
            helper.run()
        except Exception as e:
            raise PreconditionError(f"Unable to start exiftool: {e}") from e
        self._helper = helper
        logger.debug("exiftool demarre", executable=self._executable or "exiftool")

    def close(self) -> None:
        """Arrete le processus exiftool s'il tourne."""
        if self._helper is None:
            return
        if self._helper.running:
            self._helper.terminate()
            logger.debug("exiftool arrete")
        self._helper = None

    def read_capture_date(self, file_path: Path) -> datetime:
        """
        Lit la date de tournage d'un fichier video.

        Le premier tag present est retenu ; s'il ne se convertit pas en date,
        le fichier est considere sans date (pas de repli sur le tag suivant).
        """
        if self._helper is None:
            self.open()

        try:
            results = self._helper.get_tags([str(file_path)], tags=list(EXIFTOOL_DATE_TAGS))
        except Exception as e:
            raise MetadataUnavailableError(file_path, f"exiftool error: {e}") from e

        metadata = results[0] if results else {}

        raw = None
        for tag in EXIFTOOL_DATE_TAGS:
            raw = self._find_tag(metadata, tag)
            if raw is not None:
                break

        if raw is None:
            raise MetadataUnavailableError(file_path, "no date metadata available")

        parsed = parse_metadata_date(raw)
        if parsed is None:
            raise MetadataUnavailableError(file_path, f"invalid date format: {raw!r}")
        return parsed

    @staticmethod
    def _find_tag(metadata: dict[str, Any], tag: str) -> Optional[Any]:
        """
        Cherche un tag avec ou sans prefixe de groupe.

        exiftool retourne "QuickTime:CreateDate" avec -G, "CreateDate" sinon.
        """
        for key, value in metadata.items():
            if key == tag or key.endswith(f":{tag}"):
                if value in (None, ""):
                    continue
                return value
        return None
