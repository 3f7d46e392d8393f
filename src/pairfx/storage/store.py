"""Key-value storage of tournament snapshots as JSON files.

Each tournament lives in its own ``pairfx_tournament_<id>.json`` file; a
``pairfx_tournament_list.json`` index keeps a summary of every saved
tournament so listing them does not require loading each snapshot.
"""

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
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pairfx.constants import SAVE_FILE_EXTENSION, STORAGE_PREFIX, TOURNAMENT_LIST_KEY
from pairfx.exceptions import FileLoadException, FileSaveException, PairFXException
from pairfx.models import Tournament
from pairfx.utils import app_data_folder, setup_logger

logger = setup_logger(__name__)


class TournamentStore:
    """Saves, loads and lists tournaments in one directory.

    Writes go to a temporary file that then replaces the target, so a
    snapshot on disk is always either the old or the new version.

    Parameters
    ----------
    directory : str or Path, optional
        Where to keep the files. Defaults to a ``tournaments`` folder in the
        per-user application data location.
    """

    def __init__(self, directory: Optional[Union[str, Path]] = None) -> None:
        if directory is None:
            directory = os.path.join(app_data_folder(), "tournaments")
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    # ========== Paths ==========

    def _key_path(self, key: str) -> Path:
        return self.directory / f"{key}{SAVE_FILE_EXTENSION}"

    def _tournament_path(self, tournament_id: int) -> Path:
        return self._key_path(f"{STORAGE_PREFIX}{tournament_id}")

    # ========== Raw key-value access ==========

    def _read(self, path: Path) -> Optional[Any]:
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise FileLoadException(f"Could not read {path}: {e}") from e

    def _write(self, path: Path, data: Any) -> None:
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=4, ensure_ascii=False)
            os.replace(tmp_path, path)
        except OSError as e:
            raise FileSaveException(f"Could not save {path}: {e}") from e

    # ========== Tournaments ==========

    def save(self, tournament: Tournament) -> None:
        """Write a tournament snapshot and refresh the index entry.

        Raises:
            FileSaveException: If the snapshot cannot be written
        """
        self._write(self._tournament_path(tournament.id), tournament.to_dict())
        self._update_index(tournament)
        logger.info(f"Tournament {tournament.name} ({tournament.id}) saved")

    def load(self, tournament_id: int) -> Optional[Tournament]:
        """Load a tournament, or None if it was never saved.

        Raises:
            FileLoadException: If the stored snapshot is unreadable
        """
        data = self._read(self._tournament_path(tournament_id))
        if data is None:
            return None
        try:
            return Tournament.from_dict(data)
        except (AttributeError, KeyError, TypeError, ValueError, PairFXException) as e:
            raise FileLoadException(
                f"Stored tournament {tournament_id} is corrupt: {e}"
            ) from e

    def delete(self, tournament_id: int) -> bool:
        """Delete a tournament and its index entry; False if it did not exist."""
        path = self._tournament_path(tournament_id)
        existed = path.exists()
        if existed:
            path.unlink()
        self._remove_from_index(tournament_id)
        if existed:
            logger.info(f"Deleted tournament {tournament_id}")
        return existed

    def list_tournaments(self) -> List[Dict[str, Any]]:
        """Summaries of all saved tournaments, in save order.

        Index entries that are not a summary with an ``id`` are skipped.
        """
        entries = self._read(self._key_path(TOURNAMENT_LIST_KEY)) or []
        if not isinstance(entries, list):
            logger.warning(f"Ignoring malformed tournament index in {self.directory}")
            return []
        valid = [e for e in entries if isinstance(e, dict) and "id" in e]
        if len(valid) != len(entries):
            logger.warning(
                f"Skipped {len(entries) - len(valid)} malformed tournament index entries"
            )
        return valid

    def generate_tournament_id(self) -> int:
        """Next free tournament ID: one more than the highest saved ID."""
        tournaments = self.list_tournaments()
        if not tournaments:
            return 1
        return max(t["id"] for t in tournaments) + 1

    def clear_all(self) -> None:
        """Delete every tournament file and the index."""
        for path in self.directory.glob(f"{STORAGE_PREFIX}*{SAVE_FILE_EXTENSION}"):
            path.unlink()
        index_path = self._key_path(TOURNAMENT_LIST_KEY)
        if index_path.exists():
            index_path.unlink()
        logger.info(f"Cleared all tournaments in {self.directory}")

    # ========== Index ==========

    @staticmethod
    def _summary(tournament: Tournament) -> Dict[str, Any]:
        return {
            "id": tournament.id,
            "name": tournament.name,
            "creation_date": tournament.creation_date.isoformat(),
            "player_count": len(tournament.players),
            "match_count": len(tournament.matches),
        }

    def _update_index(self, tournament: Tournament) -> None:
        entries = self.list_tournaments()
        summary = self._summary(tournament)
        for i, entry in enumerate(entries):
            if entry["id"] == tournament.id:
                entries[i] = summary
                break
        else:
            entries.append(summary)
        self._write(self._key_path(TOURNAMENT_LIST_KEY), entries)

    def _remove_from_index(self, tournament_id: int) -> None:
        entries = [t for t in self.list_tournaments() if t["id"] != tournament_id]
        self._write(self._key_path(TOURNAMENT_LIST_KEY), entries)
