"""Tournament models."""

from .tournament import Tournament
from .tournament_settings import TournamentSettings

__all__ = ["Tournament", "TournamentSettings"]
