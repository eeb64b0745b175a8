"""
Fonctions utilitaires pour les dates.

- parse_metadata_date : conversion permissive d'une date brute de metadonnees
- format_run_timestamp : horodatage utilisable dans un nom de fichier
- format_log_timestamp : horodatage ISO pour l'en-tete des journaux
"""

import re
from datetime import datetime
from typing import Optional, Union

# Formats acceptes :
#   exiftool  : 2021:06:01 12:34:56, 2021:06:01 12:34:56.120+02:00, 2021:06:01
#   mediainfo : 2021-06-01 12:34:56 UTC, UTC 2021-06-01 12:34:56
_DATE_PATTERN = re.compile(
    r"^(?P<year>\d{4})[:\-](?P<month>\d{2})[:\-](?P<day>\d{2})"
    r"(?:[ T](?P<hour>\d{2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?(?:\.\d+)?)?"
    r"(?:Z|[+\-]\d{2}:?\d{2})?$"
)


def parse_metadata_date(raw: Union[str, datetime, None]) -> Optional[datetime]:
    """
    Convertit une date brute de metadonnees en datetime.

    Le controle est volontairement grossier : la valeur est une date si elle
    se decoupe en composantes calendaires valides. Le fuseau eventuel est
    ignore, seule l'heure enregistree compte pour le rangement annee/mois.

    Args:
        raw: Valeur lue dans les metadonnees

    Returns:
        datetime naif, ou None si la valeur est absente ou invalide
        (ex: "0000:00:00 00:00:00" ecrit par certaines cameras).
    """
    if raw is None:
        return None
    if isinstance(raw, datetime):
        return raw.replace(tzinfo=None)

    text = str(raw).strip()
    if text.upper().startswith("UTC "):
        text = text[4:]
    if text.upper().endswith(" UTC"):
        text = text[:-4]
    text = text.strip()

    match = _DATE_PATTERN.match(text)
    if match is None:
        return None

    try:
        return datetime(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            int(match["hour"] or 0),
            int(match["minute"] or 0),
            int(match["second"] or 0),
        )
    except ValueError:
        return None


def format_run_timestamp(moment: datetime) -> str:
    """
    Formate un horodatage pour un nom de fichier.

    ISO 8601 a la seconde, les ':' remplaces par des '-'.
    Ex: 2024-03-15T10-20-30
    """
    return moment.strftime("%Y-%m-%dT%H-%M-%S")


def format_log_timestamp(moment: datetime) -> str:
    """Horodatage ISO 8601 pour l'en-tete des journaux."""
    return moment.isoformat(timespec="seconds")
