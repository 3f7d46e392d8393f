"""Main Tournament class - owns players, matches and settings.

The tournament is the single source of truth for everything the pairing
engine needs: who is registered, which games have been played or are still
running, and the scores and colour balance derived from that match log.
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

import dataclasses
import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dateutil.parser import isoparse

from pairfx.constants import (
    ABSOLUTE_COLOUR_IMBALANCE,
    DEFAULT_TOURNAMENT_NAME,
    NEUTRAL,
    PREFERS_BLACK,
    PREFERS_WHITE,
    SHOULD_BE_BLACK,
    SHOULD_BE_WHITE,
)
from pairfx.models.match import Match
from pairfx.models.player import Player
from pairfx.type_hints import BLACK, WHITE, ColourPreference, MaybeMatch, MaybePlayer
from pairfx.utils import normalize_name, setup_logger
from pairfx.utils.validation import validate_first_name_strict

from .tournament_settings import TournamentSettings

logger = setup_logger(__name__)


class Tournament:
    """Main tournament management class.

    Players and matches are kept in insertion order; that order is the
    tie-break for every stable sort done by the pairing engine. IDs come
    from two counters that only ever grow, so an ID is never handed out
    twice, not even after the player or match it belonged to is deleted.
    """

    def __init__(
        self,
        id: int = 1,
        name: str = DEFAULT_TOURNAMENT_NAME,
        settings: Optional[TournamentSettings] = None,
        creation_date: Optional[datetime] = None,
    ) -> None:
        """Initialize a new, empty tournament.

        Args
        ----
        id: Tournament identifier within the store
        name: Tournament name
        settings: Pairing settings, defaults when omitted
        creation_date: Creation timestamp, now (UTC) when omitted
        """
        self.id = id
        self.name = name
        self.settings = settings if settings is not None else TournamentSettings()
        self.creation_date = creation_date or datetime.now(timezone.utc)

        self.players: List[Player] = []
        self.matches: List[Match] = []

        self.next_player_id = 1
        self.next_match_id = 1

    # ========== Player Management ==========

    def _find_duplicate(
        self, first_name: str, last_name: str, exclude_id: Optional[int] = None
    ) -> MaybePlayer:
        key = (normalize_name(first_name), normalize_name(last_name))
        for player in self.players:
            if player.id != exclude_id and player.name_key == key:
                return player
        return None

    def add_player(
        self, first_name: str, last_name: str = "", class_name: str = ""
    ) -> MaybePlayer:
        """Register a new player.

        Args:
            first_name: First name (required)
            last_name: Last name
            class_name: Optional grouping label

        Returns:
            The new Player, or None if a player with the same first and last
            name (ignoring case and surrounding whitespace) already exists

        Raises:
            InvalidPlayerDataException: If first_name is empty
        """
        first_name = validate_first_name_strict(first_name)
        last_name = (last_name or "").strip()
        class_name = (class_name or "").strip()

        if self._find_duplicate(first_name, last_name):
            logger.warning(f"Duplicate player not added: {first_name} {last_name}")
            return None

        player = Player(
            id=self.next_player_id,
            first_name=first_name,
            last_name=last_name,
            class_name=class_name,
        )
        self.next_player_id += 1
        self.players.append(player)
        logger.info(f"Added player: {player.full_name} ({player.id})")
        return player

    def get_player(self, player_id: int) -> MaybePlayer:
        """Get a player by ID, or None if there is no such player."""
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def update_player(
        self,
        player_id: int,
        first_name: str,
        last_name: str = "",
        class_name: str = "",
    ) -> MaybePlayer:
        """Edit a player's name and class.

        Returns:
            The updated Player, or None if not found or the new name
            collides with another player

        Raises:
            InvalidPlayerDataException: If first_name is empty
        """
        player = self.get_player(player_id)
        if player is None:
            return None

        first_name = validate_first_name_strict(first_name)
        last_name = (last_name or "").strip()
        if self._find_duplicate(first_name, last_name, exclude_id=player_id):
            logger.warning(
                f"Cannot rename player {player_id}: {first_name} {last_name} already exists"
            )
            return None

        player.first_name = first_name
        player.last_name = last_name
        player.class_name = (class_name or "").strip()
        logger.info(f"Updated player: {player.full_name} ({player.id})")
        return player

    def remove_player(self, player_id: int) -> bool:
        """Remove a player together with every match they appear in.

        Args:
            player_id: ID of player to remove

        Returns:
            True if removed, False if not found
        """
        player = self.get_player(player_id)
        if player is None:
            return False

        self.players = [p for p in self.players if p.id != player_id]
        kept = [m for m in self.matches if not m.involves(player_id)]
        removed_count = len(self.matches) - len(kept)
        self.matches = kept
        logger.info(
            f"Removed player: {player.full_name} ({player_id}) and {removed_count} matches"
        )
        return True

    def set_player_absent(self, player_id: int, absent: bool) -> bool:
        """Set a player's absent flag.

        Returns:
            True if updated, False if player not found
        """
        player = self.get_player(player_id)
        if player is None:
            return False
        player.absent = absent
        logger.info(f"Set {player.full_name} absent status to: {absent}")
        return True

    def toggle_player_absent(self, player_id: int) -> bool:
        """Flip a player's absent flag; False if player not found."""
        player = self.get_player(player_id)
        if player is None:
            return False
        return self.set_player_absent(player_id, not player.absent)

    # ========== Match Management ==========

    def add_match(self, white_player_id: int, black_player_id: int, round: int) -> Match:
        """Append a new active match.

        Availability of both players is not checked here; that is up to the
        pairing engine.
        """
        match = Match(
            id=self.next_match_id,
            white_player_id=white_player_id,
            black_player_id=black_player_id,
            round=round,
        )
        self.next_match_id += 1
        self.matches.append(match)
        return match

    def get_match(self, match_id: int) -> MaybeMatch:
        """Get a match by ID, or None if there is no such match."""
        for match in self.matches:
            if match.id == match_id:
                return match
        return None

    def set_match_result(self, match_id: int, result: str) -> MaybeMatch:
        """Record the result of a match.

        Returns:
            The updated Match, or None if no match has that ID

        Raises:
            InvalidResultException: If result is not a known token; the
            match keeps its previous result
        """
        match = self.get_match(match_id)
        if match is None:
            logger.error(f"Cannot record result: match {match_id} does not exist")
            return None

        previous = match.result
        match.set_result(result)
        if previous is not None and previous != result:
            logger.warning(f"Match {match_id} result changed from {previous} to {result}")
        logger.info(f"Recorded result {result} for match {match_id}")
        return match

    def get_player_matches(self, player_id: int) -> List[Match]:
        """All matches of a player, active and finished, in creation order."""
        return [m for m in self.matches if m.involves(player_id)]

    def get_active_matches(self) -> List[Match]:
        """Matches still waiting for a result."""
        return [m for m in self.matches if m.is_active()]

    def get_finished_matches(self) -> List[Match]:
        """Matches with a recorded result."""
        return [m for m in self.matches if m.is_finished()]

    @property
    def last_batch_id(self) -> Optional[str]:
        """Batch ID of the newest match, None if there is none."""
        if not self.matches:
            return None
        return self.matches[-1].batch_id

    def remove_batch(self, batch_id: Optional[str]) -> List[Match]:
        """Remove every match created in the batch batch_id.

        The ID counters are left alone, so removed IDs are not reused.

        Returns:
            The removed matches (empty when batch_id is None)
        """
        if batch_id is None:
            return []
        removed = [m for m in self.matches if m.batch_id == batch_id]
        self.matches = [m for m in self.matches if m.batch_id != batch_id]
        if removed:
            logger.info(f"Removed batch {batch_id}: {len(removed)} matches")
        return removed

    def get_current_round(self) -> int:
        """Highest round number stamped on any match, 1 without matches.

        The round is never advanced automatically: run-through tournaments
        have no hard round boundaries.
        """
        if not self.matches:
            return 1
        return max(m.round for m in self.matches)

    # ========== Scores and Colours ==========

    def calculate_score(self, player_id: int) -> float:
        """Total points from finished matches; active matches count for nothing."""
        return sum(
            (
                m.score_for(player_id)
                for m in self.matches
                if m.is_finished() and m.involves(player_id)
            ),
            0.0,
        )

    def calculate_percentage(self, player_id: int) -> float:
        """Score as a percentage of finished games, 0 when none are finished."""
        finished = [
            m for m in self.matches if m.is_finished() and m.involves(player_id)
        ]
        if not finished:
            return 0.0
        return self.calculate_score(player_id) / len(finished) * 100

    def count_colours(self, player_id: int) -> Dict[str, int]:
        """Number of white and black assignments, active games included."""
        colours = [m.colour_of(player_id) for m in self.matches]
        return {"white": colours.count(WHITE), "black": colours.count(BLACK)}

    def calculate_colour_preference(self, player_id: int) -> ColourPreference:
        """Colour the player should get next, based on colour balance.

        Counts colour assignments rather than results, so a player who has
        been given white twice more than black must get black, whatever the
        outcome of those games.

        Returns:
            One of "should_be_white", "should_be_black", "prefers_white",
            "prefers_black" or "neutral"
        """
        colours = self.count_colours(player_id)
        difference = colours["white"] - colours["black"]

        if difference >= ABSOLUTE_COLOUR_IMBALANCE:
            return SHOULD_BE_BLACK
        if difference <= -ABSOLUTE_COLOUR_IMBALANCE:
            return SHOULD_BE_WHITE
        if difference == 1:
            return PREFERS_BLACK
        if difference == -1:
            return PREFERS_WHITE
        return NEUTRAL

    # ========== Settings ==========

    def update_settings(self, **changes: Any) -> TournamentSettings:
        """Apply setting changes after validating the merged result.

        Raises:
            InvalidConfigurationException: If the merged settings are invalid;
            the current settings are left untouched
            TypeError: If a change names an unknown setting
        """
        self.settings = dataclasses.replace(self.settings, **changes)
        logger.info(f"Updated settings for {self.name}: {changes}")
        return self.settings

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary.

        Returns:
            Dictionary containing all tournament data, ID counters included
        """
        return {
            "id": self.id,
            "name": self.name,
            "creation_date": self.creation_date.isoformat(),
            "settings": self.settings.to_dict(),
            "players": [p.to_dict() for p in self.players],
            "matches": [m.to_dict() for m in self.matches],
            "next_player_id": self.next_player_id,
            "next_match_id": self.next_match_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary.

        Args:
            data: Dictionary containing tournament data

        Returns:
            Reconstructed Tournament object
        """
        creation_date = data.get("creation_date", data.get("creationDate"))
        tournament = cls(
            id=data.get("id", 1),
            name=data.get("name", DEFAULT_TOURNAMENT_NAME),
            settings=TournamentSettings.from_dict(data.get("settings", {})),
            creation_date=isoparse(creation_date) if creation_date else None,
        )
        tournament.players = [Player.from_dict(p) for p in data.get("players", [])]
        tournament.matches = [Match.from_dict(m) for m in data.get("matches", [])]

        next_player_id = data.get("next_player_id", data.get("nextPlayerId"))
        next_match_id = data.get("next_match_id", data.get("nextMatchId"))
        if next_player_id is None or next_match_id is None:
            # Only reachable for hand-written snapshots; saved ones always
            # carry both counters.
            logger.warning(
                f"Tournament {tournament.name} has no ID counters, deriving them"
            )
        tournament.next_player_id = (
            next_player_id
            if next_player_id is not None
            else max((p.id for p in tournament.players), default=0) + 1
        )
        tournament.next_match_id = (
            next_match_id
            if next_match_id is not None
            else max((m.id for m in tournament.matches), default=0) + 1
        )

        logger.info(f"Loaded tournament: {tournament.name}")
        return tournament

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize tournament to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> "Tournament":
        """Deserialize tournament from a JSON string."""
        return cls.from_dict(json.loads(text))

    def __repr__(self) -> str:
        return (
            f"Tournament(id={self.id}, name='{self.name}', "
            f"players={len(self.players)}, matches={len(self.matches)})"
        )
