"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe VIDORG_,
et peut optionnellement être fournie via un fichier .env.

Les répertoires source et destination ne font pas partie de la configuration :
ils sont passés en arguments à chaque run.
"""

from pathlib import Path
from typing import Annotated, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from vidorg.utils.constants import VIDEO_EXTENSIONS

# Trouver le fichier .env à la racine du projet (parent de vidorg/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe VIDORG_.
    Exemple : VIDORG_METADATA_BACKEND=mediainfo

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="VIDORG_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Scan
    # NoDecode : la valeur brute (chaine a virgules) arrive au validateur
    video_extensions: Annotated[frozenset[str], NoDecode] = Field(default=VIDEO_EXTENSIONS)

    # Lecture des métadonnées
    metadata_backend: Literal["exiftool", "mediainfo"] = Field(default="exiftool")
    exiftool_path: Optional[str] = Field(default=None)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/vidorg.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("video_extensions", mode="before")
    @classmethod
    def normalize_extensions(cls, v: str | list[str] | frozenset[str]) -> frozenset[str]:
        """Normalise les extensions : minuscules, point initial.

        Accepte une liste ou une chaîne séparée par des virgules.
        En variable d'environnement : VIDORG_VIDEO_EXTENSIONS=mp4,mov,.mts
        """
        if isinstance(v, str):
            v = v.split(",")
        normalized = set()
        for ext in v:
            ext = ext.strip().lower()
            if not ext:
                continue
            normalized.add(ext if ext.startswith(".") else f".{ext}")
        return frozenset(normalized)

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, v: str) -> str:
        """Les niveaux loguru sont en majuscules."""
        return str(v).upper()
