"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete de IFileSystem pour les operations fichiers reelles :
listage non recursif du repertoire source, tailles, copie avec preservation
des attributs et ecriture des journaux.
"""

import shutil
from pathlib import Path
from typing import Iterable, Iterator

from vidorg.core.ports.file_system import IFileSystem


class FileSystemAdapter(IFileSystem):
    """
    Implementation de IFileSystem pour le systeme de fichiers reel.

    Les erreurs de copie et d'ecriture sont propagees (OSError) : c'est
    aux services de decider si elles sont fatales ou isolees par fichier.
    """

    def exists(self, path: Path) -> bool:
        """Verifie si un chemin existe."""
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        """Verifie si un chemin est un repertoire existant."""
        return path.is_dir()

    def get_size(self, path: Path) -> int:
        """
        Recupere la taille du fichier en octets.

        Retourne 0 si le fichier n'existe pas.
        """
        try:
            return path.stat().st_size
        except OSError:
            return 0

    def list_files(self, directory: Path, extensions: Iterable[str]) -> Iterator[Path]:
        """
        Liste les fichiers video d'un repertoire (non recursif).

        Filtre:
        - Exclut les sous-repertoires
        - Par extension, insensible a la casse

        Args:
            directory: Repertoire a scanner
            extensions: Extensions acceptees (minuscules, avec le point)

        Yields:
            Chemins des fichiers retenus, tries par nom
        """
        accepted = {ext.lower() for ext in extensions}

        for path in sorted(directory.iterdir(), key=lambda p: p.name):
            # Ignorer les repertoires
            if path.is_dir():
                continue

            # Verifier l'extension
            if path.suffix.lower() not in accepted:
                continue

            yield path

    def copy(self, source: Path, destination: Path) -> None:
        """
        Copie un fichier de la source vers la destination.

        Cree les repertoires parents si necessaire. shutil.copy2 conserve
        les dates de modification et les permissions quand c'est possible.
        """
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(str(source), str(destination))

    def write_text(self, path: Path, content: str) -> None:
        """Ecrit (ou ecrase) un fichier texte UTF-8."""
        path.write_text(content, encoding="utf-8")

    def append_text(self, path: Path, content: str) -> None:
        """Ajoute du texte a la fin d'un fichier UTF-8."""
        with open(path, "a", encoding="utf-8") as f:
            f.write(content)
