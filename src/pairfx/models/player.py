"""A player registered in a run-through tournament."""

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

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from pairfx.utils import normalize_name


@dataclass
class Player:
    """Represents a player in the tournament.

    Scores, colour history and opponents are not stored on the player: they
    are derived from the tournament's match log, so a player record only
    holds identity and registration data.

    Attributes
    ----------
    id : int
        Unique identifier, assigned by the tournament and never reused.
    first_name : str
        Player's first name (required).
    last_name : str
        Player's last name, may be empty.
    class_name : str
        Optional grouping label (school class, club, ...), may be empty.
    absent : bool
        While True the player is left out of every pairing pool.
    """

    id: int
    first_name: str
    last_name: str = ""
    class_name: str = ""
    absent: bool = False

    @property
    def full_name(self) -> str:
        """First and last name joined by a space."""
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def name_key(self) -> Tuple[str, str]:
        """Normalised (first, last) pair used for duplicate detection."""
        return normalize_name(self.first_name), normalize_name(self.last_name)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "class_name": self.class_name,
            "absent": self.absent,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary.

        Snapshots written by the browser version of the tool used Dutch keys
        (voornaam, naam, klas, afwezig); those are still accepted.
        """
        return cls(
            id=data["id"],
            first_name=data.get("first_name", data.get("voornaam", "")),
            last_name=data.get("last_name", data.get("naam")) or "",
            class_name=data.get("class_name", data.get("klas")) or "",
            absent=bool(data.get("absent", data.get("afwezig", False))),
        )

    def __str__(self) -> str:
        if self.class_name:
            return f"{self.full_name} ({self.class_name})"
        return self.full_name
