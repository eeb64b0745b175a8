"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- Bucket : Categorie d'un fichier dans le plan
- PlanEntry : Paire (source, destination)
- Plan : Classification complete d'un run
- RunInfo : Metadonnees du run pour le journal
"""

from vidorg.core.value_objects.plan import (
    Bucket,
    Plan,
    PlanEntry,
    RunInfo,
)

__all__ = [
    "Bucket",
    "Plan",
    "PlanEntry",
    "RunInfo",
]
