"""Import and export: CSV player lists, tournament JSON and standings."""

from .csv_import import PlayerRecord, import_players, parse_csv_players, read_csv_players
from .json_io import export_tournament_json, import_tournament_json
from .standings import (
    StandingRow,
    compute_standings,
    standings_to_csv,
    standings_to_html,
)

__all__ = [
    "PlayerRecord",
    "StandingRow",
    "compute_standings",
    "export_tournament_json",
    "import_players",
    "import_tournament_json",
    "parse_csv_players",
    "read_csv_players",
    "standings_to_csv",
    "standings_to_html",
]
