"""
Service de planification du rangement.

Classe chaque candidat date dans une des trois categories du plan en
comparant l'emplacement cible dest_root/annee/mois/nom avec ce qui existe
deja a la destination:
- rien a la destination            -> TO_COPY
- meme taille a la destination     -> ALREADY_PRESENT
- taille differente                -> CONFLICTING (jamais resolu automatiquement)

La taille est le seul critere de doublon : le contenu n'est pas compare.
"""

from pathlib import Path
from typing import Iterable

from loguru import logger

from vidorg.core.entities.candidate import Candidate
from vidorg.core.ports.file_system import IFileSystem
from vidorg.core.value_objects import Bucket, Plan, PlanEntry


class PlannerService:
    """
    Service de classification des candidats.

    Le plan produit est deterministe pour un etat donne du systeme de
    fichiers : deux appels successifs sans copie donnent le meme plan.

    Utilisation:
        planner = PlannerService(file_system)
        plan = planner.build_plan(candidates, Path("/media/organized"))
        for entry in plan.to_copy:
            print(entry.source, "->", entry.destination)
    """

    def __init__(self, file_system: IFileSystem) -> None:
        """
        Initialise le planificateur.

        Args:
            file_system: Adaptateur systeme de fichiers (existence, taille)
        """
        self._fs = file_system

    @staticmethod
    def destination_for(candidate: Candidate, destination_root: Path) -> Path:
        """
        Calcule l'emplacement cible d'un candidat.

        Annee sur 4 chiffres, mois sur 2 chiffres (03, 11...).

        Args:
            candidate: Candidat avec une date de tournage
            destination_root: Racine de l'arborescence de destination

        Returns:
            destination_root/AAAA/MM/nom_du_fichier

        Raises:
            ValueError: Si le candidat n'a pas de date
        """
        if candidate.captured_at is None:
            raise ValueError(f"{candidate.source_path} has no capture date")

        captured = candidate.captured_at
        return (
            destination_root
            / f"{captured.year:04d}"
            / f"{captured.month:02d}"
            / candidate.filename
        )

    def classify(self, candidate: Candidate, destination: Path) -> Bucket:
        """
        Determine la categorie d'un candidat pour une destination donnee.

        Args:
            candidate: Candidat a classer
            destination: Emplacement cible calcule

        Returns:
            Bucket correspondant
        """
        if not self._fs.exists(destination):
            return Bucket.TO_COPY

        if self._fs.get_size(destination) == candidate.size_bytes:
            return Bucket.ALREADY_PRESENT

        return Bucket.CONFLICTING

    def build_plan(
        self, candidates: Iterable[Candidate], destination_root: Path
    ) -> Plan:
        """
        Construit le plan a partir des candidats scannes.

        Les candidats sans date sont exclus. L'ordre de scan est conserve
        dans chaque categorie.

        Args:
            candidates: Candidats produits par le scanner
            destination_root: Racine de l'arborescence de destination

        Returns:
            Plan immuable
        """
        buckets: dict[Bucket, list[PlanEntry]] = {bucket: [] for bucket in Bucket}
        seen: set[Path] = set()

        for candidate in candidates:
            if not candidate.has_timestamp:
                continue

            # Un meme chemin source ne peut etre classe qu'une fois
            if candidate.source_path in seen:
                logger.debug("Candidat en double ignore", file=str(candidate.source_path))
                continue
            seen.add(candidate.source_path)

            destination = self.destination_for(candidate, destination_root)
            bucket = self.classify(candidate, destination)

            if bucket is Bucket.CONFLICTING:
                logger.debug(
                    "Conflict: {filename} exists but differs in size.",
                    filename=candidate.filename,
                    file=str(candidate.source_path),
                    destination=str(destination),
                )

            buckets[bucket].append(PlanEntry(source=candidate.source_path, destination=destination))

        return Plan(
            already_present=tuple(buckets[Bucket.ALREADY_PRESENT]),
            to_copy=tuple(buckets[Bucket.TO_COPY]),
            conflicting=tuple(buckets[Bucket.CONFLICTING]),
        )
