"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer + Rich)
- metadata/ : Lecture de la date de tournage (exiftool, mediainfo)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from vidorg.adapters.file_system import FileSystemAdapter
from vidorg.adapters.metadata import ExifToolMetadataReader, MediaInfoMetadataReader

__all__ = [
    "FileSystemAdapter",
    "ExifToolMetadataReader",
    "MediaInfoMetadataReader",
]
