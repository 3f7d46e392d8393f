"""Persistence of tournament snapshots."""

from .store import TournamentStore

__all__ = ["TournamentStore"]
