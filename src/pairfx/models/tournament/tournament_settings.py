"""TournamentSettings data class."""

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

from dataclasses import dataclass
from typing import Any, Dict

from pairfx.constants import (
    DEFAULT_AVOID_SAME_CLASS,
    DEFAULT_CONSTRAINT_X,
    DEFAULT_CONSTRAINT_Y,
    DISPLAY_POINTS,
    FORMAT_RUN_THROUGH,
)
from pairfx.utils.validation import validate_settings


@dataclass
class TournamentSettings:
    """Tournament configuration settings.

    Attributes
    ----------
    format : str
        Pairing format. Only "run-through" (continuous pairing) exists.
    display_mode : str
        "points" or "percentage"; affects how standings are shown, never
        how they are computed.
    constraint_x : int
        How many of a player's most recent matches are searched for a
        repeat opponent.
    constraint_y : float
        Largest score gap allowed between automatically paired players.
    avoid_same_class : bool
        Prefer opponents from a different class when one is available.
    """

    format: str = FORMAT_RUN_THROUGH
    display_mode: str = DISPLAY_POINTS
    constraint_x: int = DEFAULT_CONSTRAINT_X
    constraint_y: float = DEFAULT_CONSTRAINT_Y
    avoid_same_class: bool = DEFAULT_AVOID_SAME_CLASS

    def __post_init__(self) -> None:
        validate_settings(
            self.format,
            self.display_mode,
            self.constraint_x,
            self.constraint_y,
            self.avoid_same_class,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize settings to dictionary."""
        return {
            "format": self.format,
            "display_mode": self.display_mode,
            "constraint_x": self.constraint_x,
            "constraint_y": self.constraint_y,
            "avoid_same_class": self.avoid_same_class,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentSettings":
        """Deserialize settings from dictionary.

        Missing keys fall back to the defaults; camelCase keys from browser
        snapshots are accepted.
        """
        return cls(
            format=data.get("format", FORMAT_RUN_THROUGH),
            display_mode=data.get(
                "display_mode", data.get("displayMode", DISPLAY_POINTS)
            ),
            constraint_x=data.get(
                "constraint_x", data.get("constraintX", DEFAULT_CONSTRAINT_X)
            ),
            constraint_y=data.get(
                "constraint_y", data.get("constraintY", DEFAULT_CONSTRAINT_Y)
            ),
            avoid_same_class=data.get(
                "avoid_same_class",
                data.get("avoidSameClass", DEFAULT_AVOID_SAME_CLASS),
            ),
        )
