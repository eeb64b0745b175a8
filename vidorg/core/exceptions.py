"""
Exceptions du domaine VidOrg.

Deux familles :
- les erreurs fatales (preconditions, ecriture du plan) qui interrompent le run ;
- les erreurs par fichier (metadonnees, copie) qui sont isolees par les services
  et ne font jamais echouer le lot complet.
"""

from pathlib import Path


class VidOrgError(Exception):
    """Erreur de base du projet."""


class PreconditionError(VidOrgError):
    """Une precondition du run n'est pas remplie (arguments, repertoires)."""


class DirectoryNotFoundError(PreconditionError):
    """
    Un repertoire requis est introuvable.

    Attributs:
        path: Chemin du repertoire manquant
        role: Role du repertoire ("source" ou "destination")
    """

    def __init__(self, path: Path, role: str = "source") -> None:
        self.path = path
        self.role = role
        label = "Source" if role == "source" else "Destination"
        super().__init__(f'{label} directory "{path}" does not exist.')


class MetadataUnavailableError(VidOrgError):
    """Aucune date exploitable n'a pu etre lue pour un fichier."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class CopyFailureError(VidOrgError):
    """La copie d'un fichier a echoue."""

    def __init__(self, source: Path, destination: Path, reason: str) -> None:
        self.source = source
        self.destination = destination
        self.reason = reason
        super().__init__(f"{source} -> {destination}: {reason}")


class LogWriteError(VidOrgError):
    """Le journal du plan (ou d'execution) n'a pas pu etre ecrit."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to write log {path}: {reason}")
