"""
Adaptateurs de lecture des metadonnees pour VidOrg.

Ce package contient les implementations concretes de IMetadataReader:
- ExifToolMetadataReader: Lit CreateDate / DateTimeOriginal via exiftool
- MediaInfoMetadataReader: Lit encoded_date / tagged_date via pymediainfo
"""

from vidorg.adapters.metadata.exiftool_reader import ExifToolMetadataReader
from vidorg.adapters.metadata.mediainfo_reader import MediaInfoMetadataReader

__all__ = ["ExifToolMetadataReader", "MediaInfoMetadataReader"]
