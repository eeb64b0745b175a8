"""
VidOrg - Rangement de videos par date de tournage.

Ce package scanne un repertoire source de fichiers video, lit la date de
creation dans leurs metadonnees et propose (puis execute apres confirmation)
la copie de chaque fichier dans une arborescence annee/mois.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur, exceptions)
- services/ : Couche application (scan, plan, rapport, copie, orchestration)
- adapters/ : Couche infrastructure (CLI, systeme de fichiers, metadonnees)
"""

__version__ = "0.1.0"
