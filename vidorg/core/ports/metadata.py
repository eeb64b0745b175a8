"""
Interface port pour la lecture de la date de tournage.

Le lecteur de metadonnees est une ressource a portee limitee : il est ouvert
au debut du run et ferme a la fin, quel que soit le resultat.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path


class IMetadataReader(ABC):
    """
    Interface pour extraire la date de creation d'un fichier video.

    Ordre de resolution : champ "creation originale" en priorite,
    puis champ "date/heure originale" en repli.
    """

    @abstractmethod
    def read_capture_date(self, file_path: Path) -> datetime:
        """
        Lit la date de tournage d'un fichier.

        Args:
            file_path: Chemin complet vers le fichier video

        Retourne:
            La date de tournage

        Leve:
            MetadataUnavailableError: Si aucun champ n'est present, si la
                valeur n'est pas une date valide ou si la lecture echoue
        """
        ...

    def open(self) -> None:
        """Acquiert les ressources externes du lecteur (aucune par defaut)."""

    def close(self) -> None:
        """Libere les ressources externes du lecteur (aucune par defaut)."""

    def __enter__(self) -> "IMetadataReader":
        self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
