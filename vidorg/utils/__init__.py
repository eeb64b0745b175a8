"""
Utilitaires et constantes pour VidOrg.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from vidorg.utils.constants import (
    LOG_SUFFIX,
    PLAN_LOG_PREFIX,
    RESULTS_LOG_PREFIX,
    VIDEO_EXTENSIONS,
)
from vidorg.utils.dates import (
    format_log_timestamp,
    format_run_timestamp,
    parse_metadata_date,
)

__all__ = [
    "VIDEO_EXTENSIONS",
    "PLAN_LOG_PREFIX",
    "RESULTS_LOG_PREFIX",
    "LOG_SUFFIX",
    "format_log_timestamp",
    "format_run_timestamp",
    "parse_metadata_date",
]
