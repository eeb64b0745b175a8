"""
Constantes globales pour VidOrg.

Ce module contient les constantes utilisees dans l'application:
- Extensions video reconnues par le scan
- Prefixes des journaux produits a chaque run
- Champs de metadonnees interroges pour la date de tournage
"""

# Extensions video reconnues (comparaison insensible a la casse)
VIDEO_EXTENSIONS = frozenset({
    ".mp4",
    ".mov",
    ".avi",
    ".mkv",
    ".wmv",
    ".flv",
    ".webm",
})

# Journaux ecrits a la racine de destination
PLAN_LOG_PREFIX = "organize-plan-"
RESULTS_LOG_PREFIX = "organized-results_"
LOG_SUFFIX = ".log"

# Tags exiftool, par ordre de priorite
EXIFTOOL_DATE_TAGS = ("CreateDate", "DateTimeOriginal")

# Attributs de la piste General de mediainfo, par ordre de priorite
MEDIAINFO_DATE_FIELDS = ("encoded_date", "tagged_date")
