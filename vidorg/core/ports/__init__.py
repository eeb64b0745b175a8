"""Ports (interfaces abstraites) de la couche domaine."""

from vidorg.core.ports.file_system import IFileSystem
from vidorg.core.ports.metadata import IMetadataReader

__all__ = ["IFileSystem", "IMetadataReader"]
