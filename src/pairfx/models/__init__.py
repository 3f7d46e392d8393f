"""Data models: players, matches and the tournament that owns them."""

from .match import Match
from .player import Player
from .tournament import Tournament, TournamentSettings

__all__ = ["Match", "Player", "Tournament", "TournamentSettings"]
