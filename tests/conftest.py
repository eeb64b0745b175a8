"""
Fixtures pytest partagees pour les tests VidOrg.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des interfaces (IFileSystem, IMetadataReader)
- Lecteur de metadonnees factice pilote par nom de fichier
- Fabrique de fichiers video dans tmp_path
- Settings de test avec journal dans tmp_path
"""

from datetime import datetime
from pathlib import Path
from typing import Callable, Optional
from unittest.mock import MagicMock

import pytest

from vidorg.config import Settings
from vidorg.core.exceptions import MetadataUnavailableError
from vidorg.core.ports.file_system import IFileSystem
from vidorg.core.ports.metadata import IMetadataReader


class StubMetadataReader(IMetadataReader):
    """
    Lecteur de metadonnees factice.

    Les dates sont indexees par nom de fichier ; un fichier absent du
    dictionnaire leve MetadataUnavailableError comme un vrai lecteur.
    """

    def __init__(self, dates: Optional[dict[str, datetime]] = None) -> None:
        self.dates: dict[str, datetime] = dict(dates or {})
        self.opened = 0
        self.closed = 0
        self.calls: list[Path] = []

    def open(self) -> None:
        self.opened += 1

    def close(self) -> None:
        self.closed += 1

    def read_capture_date(self, file_path: Path) -> datetime:
        self.calls.append(file_path)
        try:
            return self.dates[file_path.name]
        except KeyError:
            raise MetadataUnavailableError(file_path, "no date metadata available") from None


@pytest.fixture
def mock_file_system() -> MagicMock:
    """
    Mock de IFileSystem pour les tests.

    Par defaut : les repertoires existent, aucune destination n'existe.
    Configurer le mock dans chaque test pour des comportements specifiques.
    """
    mock = MagicMock(spec=IFileSystem)
    mock.is_dir.return_value = True
    mock.exists.return_value = False
    mock.get_size.return_value = 0
    mock.list_files.return_value = iter(())
    return mock


@pytest.fixture
def make_reader() -> Callable[..., StubMetadataReader]:
    """
    Fabrique de lecteurs factices.

    Usage:
        reader = make_reader({"a.mp4": datetime(2021, 6, 1)})
    """
    return StubMetadataReader


@pytest.fixture
def stub_reader() -> StubMetadataReader:
    """Lecteur de metadonnees factice sans aucune date."""
    return StubMetadataReader()


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Repertoire source vide."""
    directory = tmp_path / "source"
    directory.mkdir()
    return directory


@pytest.fixture
def destination_dir(tmp_path: Path) -> Path:
    """Racine de destination vide."""
    directory = tmp_path / "organized"
    directory.mkdir()
    return directory


@pytest.fixture
def make_video() -> Callable[..., Path]:
    """
    Fabrique de fichiers video de taille donnee.

    Usage:
        path = make_video(source_dir, "a.mp4", size=500)
    """

    def _make(directory: Path, name: str, size: int = 100) -> Path:
        path = directory / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"\0" * size)
        return path

    return _make


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec journal dans tmp_path.

    _env_file=None ignore un eventuel .env du poste de developpement.
    """
    return Settings(
        _env_file=None,
        metadata_backend="exiftool",
        log_level="DEBUG",
        log_file=tmp_path / "logs" / "test.log",
    )
