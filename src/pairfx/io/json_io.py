"""Tournament JSON export and import."""

# PairFX
# Copyright (C) 2025  PairFX developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import json

from pairfx.exceptions import FileLoadException, PairFXException
from pairfx.models import Tournament
from pairfx.utils import setup_logger

logger = setup_logger(__name__)


def export_tournament_json(tournament: Tournament) -> str:
    """Serialize a tournament to indented JSON."""
    return tournament.to_json(indent=2)


def import_tournament_json(text: str) -> Tournament:
    """Rebuild a tournament from exported JSON.

    Raises:
        FileLoadException: If the text is not valid JSON or is not a
        tournament snapshot; nothing is created in that case
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise FileLoadException(f"Invalid tournament JSON: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("players"), list):
        raise FileLoadException("Invalid tournament JSON: no player list found")
    if not isinstance(data.get("matches", []), list):
        raise FileLoadException("Invalid tournament JSON: matches must be a list")

    try:
        tournament = Tournament.from_dict(data)
    except (AttributeError, KeyError, TypeError, ValueError, PairFXException) as e:
        logger.exception("Error importing tournament:")
        raise FileLoadException(f"Invalid tournament data: {e}") from e

    logger.info(f"Imported tournament {tournament.name} from JSON")
    return tournament
