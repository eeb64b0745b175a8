"""
Tests unitaires pour Settings et la configuration du logging.
"""

from pathlib import Path

import pytest
from loguru import logger
from pydantic import ValidationError

from vidorg.config import Settings
from vidorg.logging_config import configure_logging, resolve_log_level
from vidorg.utils.constants import VIDEO_EXTENSIONS


class TestSettings:
    """Tests pour les valeurs par defaut et les surcharges."""

    def test_defaults(self, monkeypatch) -> None:
        for name in ("VIDORG_METADATA_BACKEND", "VIDORG_LOG_LEVEL", "VIDORG_VIDEO_EXTENSIONS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.metadata_backend == "exiftool"
        assert settings.exiftool_path is None
        assert settings.video_extensions == VIDEO_EXTENSIONS
        assert settings.log_level == "INFO"
        assert settings.log_retention_count == 5

    def test_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv("VIDORG_METADATA_BACKEND", "mediainfo")
        monkeypatch.setenv("VIDORG_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.metadata_backend == "mediainfo"
        assert settings.log_level == "DEBUG"

    def test_unknown_backend_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, metadata_backend="ffprobe")

    def test_extensions_normalized(self) -> None:
        settings = Settings(_env_file=None, video_extensions="MP4, mts,.MOV")
        assert settings.video_extensions == frozenset({".mp4", ".mts", ".mov"})

    def test_extensions_from_env_comma_list(self, monkeypatch) -> None:
        """La variable d'environnement accepte une liste separee par des virgules."""
        monkeypatch.setenv("VIDORG_VIDEO_EXTENSIONS", "MP4, mts,.MOV")

        settings = Settings(_env_file=None)

        assert settings.video_extensions == frozenset({".mp4", ".mts", ".mov"})

    def test_extensions_from_list(self) -> None:
        settings = Settings(_env_file=None, video_extensions=["MKV", ".webm"])
        assert settings.video_extensions == frozenset({".mkv", ".webm"})

    def test_log_file_expands_home(self) -> None:
        settings = Settings(_env_file=None, log_file="~/vidorg.log")
        assert settings.log_file == Path.home() / "vidorg.log"

    def test_retention_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_retention_count=0)


class TestLogging:
    """Tests pour le niveau et les sinks loguru."""

    @pytest.mark.parametrize(
        "verbose, quiet, expected",
        [(0, False, "WARNING"), (1, False, "DEBUG"), (2, False, "DEBUG"), (2, True, "ERROR")],
    )
    def test_resolve_log_level(self, verbose: int, quiet: bool, expected: str) -> None:
        assert resolve_log_level("WARNING", verbose, quiet) == expected

    def test_file_sink_is_json(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "vidorg.log"
        configure_logging(log_level="ERROR", log_file=log_file)
        try:
            logger.info("Copied: {source}", source="/src/{weird}.mp4")
        finally:
            logger.remove()

        content = log_file.read_text(encoding="utf-8")
        assert '"message": "Copied: /src/{weird}.mp4"' in content
