"""
Implementation du lecteur de date de tournage avec pymediainfo.

Alternative a exiftool quand seule la bibliotheque libmediainfo est
disponible. Aucune ressource persistante : open()/close() sont vides.
"""

from datetime import datetime
from pathlib import Path

from pymediainfo import MediaInfo as PyMediaInfo

from vidorg.core.exceptions import MetadataUnavailableError
from vidorg.core.ports.metadata import IMetadataReader
from vidorg.utils.constants import MEDIAINFO_DATE_FIELDS
from vidorg.utils.dates import parse_metadata_date


class MediaInfoMetadataReader(IMetadataReader):
    """
    Lecteur de date de tournage utilisant pymediainfo.

    Lit la piste General : encoded_date (creation), puis tagged_date.
    """

    def read_capture_date(self, file_path: Path) -> datetime:
        """
        Lit la date de tournage d'un fichier video.

        Args:
            file_path: Chemin complet vers le fichier video

        Returns:
            La date de tournage

        Raises:
            MetadataUnavailableError: Fichier illisible, date absente ou invalide
        """
        if not file_path.exists():
            raise MetadataUnavailableError(file_path, "file not found")

        try:
            media_info = PyMediaInfo.parse(str(file_path))
        except Exception as e:
            raise MetadataUnavailableError(file_path, f"mediainfo error: {e}") from e

        general_tracks = [
            track for track in media_info.tracks if track.track_type == "General"
        ]
        if not general_tracks:
            raise MetadataUnavailableError(file_path, "no general track")

        track = general_tracks[0]
        raw = None
        for field_name in MEDIAINFO_DATE_FIELDS:
            raw = getattr(track, field_name, None)
            if raw:
                break

        if not raw:
            raise MetadataUnavailableError(file_path, "no date metadata available")

        parsed = parse_metadata_date(raw)
        if parsed is None:
            raise MetadataUnavailableError(file_path, f"invalid date format: {raw!r}")
        return parsed
