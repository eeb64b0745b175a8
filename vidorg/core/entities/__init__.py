"""Entites du domaine."""

from vidorg.core.entities.candidate import Candidate

__all__ = ["Candidate"]
