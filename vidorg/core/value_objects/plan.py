"""
Objets valeur du plan de rangement.

Le plan est calcule une seule fois par run, avant toute copie, puis
n'est plus modifie. Tous les objets valeur utilisent @dataclass(frozen=True).
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path


class Bucket(str, Enum):
    """
    Categorie d'un fichier dans le plan.

    ALREADY_PRESENT: la destination existe avec la meme taille (doublon)
    TO_COPY: aucun fichier a la destination
    CONFLICTING: la destination existe avec une taille differente
    """

    ALREADY_PRESENT = "already_present"
    TO_COPY = "to_copy"
    CONFLICTING = "conflicting"


@dataclass(frozen=True)
class PlanEntry:
    """
    Paire (source, destination) d'un fichier classe.

    Attributs :
        source : Chemin absolu du fichier source
        destination : Emplacement calcule dest_root/annee/mois/nom
    """

    source: Path
    destination: Path


@dataclass(frozen=True)
class Plan:
    """
    Classification des candidats dont la date a ete resolue.

    Les trois sequences sont disjointes et conservent l'ordre de scan.
    """

    already_present: tuple[PlanEntry, ...] = ()
    to_copy: tuple[PlanEntry, ...] = ()
    conflicting: tuple[PlanEntry, ...] = ()

    def entries(self, bucket: Bucket) -> tuple[PlanEntry, ...]:
        """Retourne les entrees d'une categorie."""
        if bucket is Bucket.ALREADY_PRESENT:
            return self.already_present
        if bucket is Bucket.TO_COPY:
            return self.to_copy
        return self.conflicting

    @property
    def total(self) -> int:
        """Nombre total de fichiers classes."""
        return len(self.already_present) + len(self.to_copy) + len(self.conflicting)

    @property
    def has_copies(self) -> bool:
        """Indique s'il reste des fichiers a copier."""
        return bool(self.to_copy)

    def counts(self) -> dict[Bucket, int]:
        """Nombre de fichiers par categorie."""
        return {bucket: len(self.entries(bucket)) for bucket in Bucket}


@dataclass(frozen=True)
class RunInfo:
    """
    Metadonnees d'un run reportees dans le journal du plan.

    Attributs :
        source_dir : Repertoire source (absolu)
        destination_dir : Racine de destination (absolue)
        started_at : Date de debut du run
        skipped : Fichiers ecartes faute de date exploitable
    """

    source_dir: Path
    destination_dir: Path
    started_at: datetime
    skipped: tuple[Path, ...] = field(default_factory=tuple)
