"""
Interfaces ports pour le système de fichiers.

Interfaces abstraites (ports) définissant les contrats pour les opérations fichiers
dont ont besoin le scan, le plan et la copie. L'implémentation concrète est
FileSystemAdapter.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Iterator


class IFileSystem(ABC):
    """
    Interface pour les opérations de base sur les fichiers.

    Définit les opérations pour interagir avec le système de fichiers :
    vérification d'existence, taille, listage, copie et écriture des journaux.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Vérifie si un chemin existe."""
        ...

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """Vérifie si un chemin est un répertoire existant."""
        ...

    @abstractmethod
    def get_size(self, path: Path) -> int:
        """
        Récupère la taille du fichier en octets.

        Args :
            path : Chemin vers le fichier

        Retourne :
            Taille du fichier en octets, ou 0 si le fichier n'existe pas
        """
        ...

    @abstractmethod
    def list_files(self, directory: Path, extensions: Iterable[str]) -> Iterator[Path]:
        """
        Liste les fichiers d'un répertoire (non récursif) filtrés par extension.

        Args :
            directory : Répertoire à lister
            extensions : Extensions acceptées (minuscules, avec le point)

        Retourne :
            Les chemins des fichiers retenus, triés par nom
        """
        ...

    @abstractmethod
    def copy(self, source: Path, destination: Path) -> None:
        """
        Copie un fichier en préservant ses attributs quand la plateforme le permet.

        Crée les répertoires parents si nécessaire.

        Args :
            source : Chemin du fichier source
            destination : Chemin du fichier cible

        Lève :
            OSError : Si la copie échoue
        """
        ...

    @abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        """
        Écrit (ou écrase) un fichier texte.

        Lève :
            OSError : Si l'écriture échoue
        """
        ...

    @abstractmethod
    def append_text(self, path: Path, content: str) -> None:
        """
        Ajoute du texte à la fin d'un fichier.

        Lève :
            OSError : Si l'écriture échoue
        """
        ...
