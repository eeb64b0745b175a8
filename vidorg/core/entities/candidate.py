"""
Entite fichier candidat.

Un candidat est un fichier du repertoire source eligible au rangement
(extension video, pas un repertoire). Il est cree pendant le scan,
consomme par le planificateur puis abandonne.
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional


@dataclass
class Candidate:
    """
    Fichier source en cours d'examen.

    Attributs :
        source_path : Chemin absolu du fichier dans le repertoire source
        size_bytes : Taille du fichier en octets
        captured_at : Date de tournage lue dans les metadonnees (None si inconnue)
    """

    source_path: Path
    size_bytes: int = 0
    captured_at: Optional[datetime] = None

    @property
    def filename(self) -> str:
        """Nom du fichier sans le chemin."""
        return self.source_path.name

    @property
    def has_timestamp(self) -> bool:
        """Indique si la date de tournage a ete resolue."""
        return self.captured_at is not None
