"""Match data class."""

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
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from dateutil.parser import isoparse

from pairfx.constants import LOSS_SCORE, RESULT_SCORES
from pairfx.type_hints import BLACK, WHITE, Colour, MaybeResult, ResultToken
from pairfx.utils.validation import validate_result_strict


@dataclass
class Match:
    """Represents a single game between two players.

    Attributes
    ----------
    id : int
        Unique match identifier, never reused.
    white_player_id : int
        ID of the player with the white pieces.
    black_player_id : int
        ID of the player with the black pieces.
    round : int
        Round number the match was stamped with when it was created.
    result : str or None
        "1-0", "0-1" or "1/2-1/2"; None while the game is being played.
    played_at : datetime or None
        When the result was entered (UTC), None while active.
    is_new : bool
        True until a result is recorded, used to highlight fresh pairings.
    batch_id : str or None
        Shared by every match created in one pairing operation.
    """

    id: int
    white_player_id: int
    black_player_id: int
    round: int
    result: MaybeResult = None
    played_at: Optional[datetime] = None
    is_new: bool = True
    batch_id: Optional[str] = None

    def set_result(self, result: ResultToken) -> None:
        """Record the outcome of the game.

        Raises
        ------
        InvalidResultException
            If result is not a known token; the match is left unchanged.
        """
        self.result = validate_result_strict(result)
        self.played_at = datetime.now(timezone.utc)
        self.is_new = False

    def is_active(self) -> bool:
        """Is the game still being played?"""
        return self.result is None

    def is_finished(self) -> bool:
        """Has a result been recorded?"""
        return self.result is not None

    @property
    def white_score(self) -> float:
        """Points earned by white (0 while the game is active)."""
        return RESULT_SCORES.get(self.result, (LOSS_SCORE, LOSS_SCORE))[0]

    @property
    def black_score(self) -> float:
        """Points earned by black (0 while the game is active)."""
        return RESULT_SCORES.get(self.result, (LOSS_SCORE, LOSS_SCORE))[1]

    def involves(self, player_id: int) -> bool:
        """Does player_id play in this match, with either colour?"""
        return player_id in (self.white_player_id, self.black_player_id)

    def opponent_of(self, player_id: int) -> Optional[int]:
        """Return the other player's ID, or None if player_id is not in the match."""
        if player_id == self.white_player_id:
            return self.black_player_id
        if player_id == self.black_player_id:
            return self.white_player_id
        return None

    def colour_of(self, player_id: int) -> Optional[Colour]:
        """Return the colour player_id has in this match."""
        if player_id == self.white_player_id:
            return WHITE
        if player_id == self.black_player_id:
            return BLACK
        return None

    def score_for(self, player_id: int) -> float:
        """Points earned by player_id in this match."""
        if player_id == self.white_player_id:
            return self.white_score
        if player_id == self.black_player_id:
            return self.black_score
        return LOSS_SCORE

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "white_player_id": self.white_player_id,
            "black_player_id": self.black_player_id,
            "round": self.round,
            "result": self.result,
            "played_at": self.played_at.isoformat() if self.played_at else None,
            "is_new": self.is_new,
            "batch_id": self.batch_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary.

        The camelCase keys of older browser snapshots are accepted as well.
        """
        result = data.get("result")
        if result is not None:
            result = validate_result_strict(result)
        played_at = data.get("played_at", data.get("lastPlayedDate"))
        return cls(
            id=data["id"],
            white_player_id=data.get("white_player_id", data.get("whitePlayerId")),
            black_player_id=data.get("black_player_id", data.get("blackPlayerId")),
            round=data["round"],
            result=result,
            played_at=isoparse(played_at) if played_at else None,
            is_new=bool(data.get("is_new", data.get("isNew", False))),
            batch_id=data.get("batch_id", data.get("batchId")),
        )
