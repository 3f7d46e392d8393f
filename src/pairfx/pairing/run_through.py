"""Run-through pairing system implementation.

Players are paired continuously: whoever is present and not playing can be
paired again straight away. The engine is greedy. Players are taken from the
lowest score upwards and each one gets the first acceptable opponent, with
constraints relaxed in a fixed order when nobody fits:

1. recent opponent, score gap and (optionally) class
2. recent opponent and score gap
3. recent opponent only

A repeat of a recent opponent is never allowed for automatic pairings.
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

from typing import Callable, Iterable, List, Optional, Sequence, Set

from pairfx.constants import (
    AUTOMATIC_BATCH_PREFIX,
    MANUAL_BATCH_PREFIX,
    PREFERS_BLACK,
    PREFERS_WHITE,
    SHOULD_BE_BLACK,
    SHOULD_BE_WHITE,
)
from pairfx.models import Match, Player, Tournament
from pairfx.type_hints import ColourAssignment, MaybeMatch, MaybePlayer
from pairfx.utils import generate_id, setup_logger

logger = setup_logger(__name__)

# (tournament, player, candidate) -> constraint satisfied?
Constraint = Callable[[Tournament, Player, Player], bool]


class PairingService:
    """Creates pairings for a run-through tournament.

    The service holds no state of its own; every method takes the tournament
    to work on, so one instance can serve any number of tournaments.
    """

    # ========== Availability ==========

    def get_available_players(self, tournament: Tournament) -> List[Player]:
        """Players that can be paired right now, in tournament order.

        Absent players and players with an active match are left out. A
        player whose matches are all finished is available again.
        """
        busy: Set[int] = set()
        for match in tournament.get_active_matches():
            busy.add(match.white_player_id)
            busy.add(match.black_player_id)
        return [p for p in tournament.players if not p.absent and p.id not in busy]

    def sort_players_by_score(
        self, tournament: Tournament, players: Iterable[Player]
    ) -> List[Player]:
        """Sort players by score, lowest first.

        The sort is stable: players on equal scores keep their relative order.
        """
        return sorted(players, key=lambda p: tournament.calculate_score(p.id))

    # ========== Constraints ==========

    def check_recent_opponent_constraint(
        self, tournament: Tournament, player_a: Player, player_b: Player
    ) -> bool:
        """Has player_b not been player_a's opponent in a recent match?

        Looks at player_a's last ``constraint_x`` matches, active or finished,
        in creation order (not by round number). Only player_a's history is
        searched.
        """
        window = tournament.settings.constraint_x
        if window <= 0:
            return True
        recent_matches = tournament.get_player_matches(player_a.id)[-window:]
        return all(m.opponent_of(player_a.id) != player_b.id for m in recent_matches)

    def check_point_difference_constraint(
        self, tournament: Tournament, player_a: Player, player_b: Player
    ) -> bool:
        """Is the score gap at most ``constraint_y`` (inclusive)?"""
        score_a = tournament.calculate_score(player_a.id)
        score_b = tournament.calculate_score(player_b.id)
        return abs(score_b - score_a) <= tournament.settings.constraint_y

    def check_class_constraint(self, player_a: Player, player_b: Player) -> bool:
        """Are the players from different classes?

        Players without a class label never conflict with anybody.
        """
        if not player_a.class_name or not player_b.class_name:
            return True
        return player_a.class_name != player_b.class_name

    def _class_constraint(
        self, tournament: Tournament, player_a: Player, player_b: Player
    ) -> bool:
        return self.check_class_constraint(player_a, player_b)

    def _constraint_passes(self, tournament: Tournament) -> List[List[Constraint]]:
        """Constraint sets to try in order, strictest first."""
        recent = self.check_recent_opponent_constraint
        points = self.check_point_difference_constraint
        passes: List[List[Constraint]] = []
        if tournament.settings.avoid_same_class:
            passes.append([recent, points, self._class_constraint])
        passes.append([recent, points])
        passes.append([recent])
        return passes

    # ========== Opponent Selection ==========

    def find_best_opponent(
        self, tournament: Tournament, player: Player, available_players: Sequence[Player]
    ) -> MaybePlayer:
        """Find the best opponent for a player.

        Candidates are scanned from the lowest score upwards; the first one
        meeting the current set of constraints wins. When nobody qualifies
        the class constraint is dropped first, then the score gap.

        Args:
            tournament: The tournament
            player: The player to find an opponent for
            available_players: Pool to choose from (may include player)

        Returns:
            The chosen opponent, or None if even a recent-opponent-only
            search finds nobody
        """
        candidates = self.sort_players_by_score(
            tournament, (p for p in available_players if p.id != player.id)
        )

        for level, constraints in enumerate(self._constraint_passes(tournament)):
            for candidate in candidates:
                if all(check(tournament, player, candidate) for check in constraints):
                    if level:
                        logger.debug(
                            f"Paired {player.full_name} with {candidate.full_name} "
                            f"after relaxing constraints (pass {level + 1})"
                        )
                    return candidate

        logger.debug(f"No opponent found for {player.full_name}")
        return None

    # ========== Colour Allocation ==========

    def determine_colours(
        self, tournament: Tournament, player_a: Player, player_b: Player
    ) -> ColourAssignment:
        """Decide who plays white.

        Mandatory colours (``should_be_*``) beat preferences (``prefers_*``),
        and player_a's wishes are looked at before player_b's at each level.
        When neither player has a preference the lower score gets white,
        player_a on equal scores.

        Returns:
            Tuple of (white, black)
        """
        pref_a = tournament.calculate_colour_preference(player_a.id)
        pref_b = tournament.calculate_colour_preference(player_b.id)

        for white_pref, black_pref in (
            (SHOULD_BE_WHITE, SHOULD_BE_BLACK),
            (PREFERS_WHITE, PREFERS_BLACK),
        ):
            if pref_a == white_pref:
                return player_a, player_b
            if pref_a == black_pref:
                return player_b, player_a
            if pref_b == white_pref:
                return player_b, player_a
            if pref_b == black_pref:
                return player_a, player_b

        score_a = tournament.calculate_score(player_a.id)
        score_b = tournament.calculate_score(player_b.id)
        if score_a <= score_b:
            return player_a, player_b
        return player_b, player_a

    # ========== Pairing ==========

    def create_automatic_pairings(
        self, tournament: Tournament, selected_player_ids: Optional[Iterable[int]] = None
    ) -> List[Match]:
        """Pair as many available players as possible.

        Args:
            tournament: The tournament to add matches to
            selected_player_ids: Restrict pairing to these players; empty or
                None means every available player

        Returns:
            The created matches, all sharing one batch ID. Empty when fewer
            than two players are available or nobody could be paired.
        """
        available = self.get_available_players(tournament)
        selected = set(selected_player_ids or ())
        if selected:
            available = [p for p in available if p.id in selected]

        if len(available) < 2:
            logger.info(
                f"Not enough available players to pair ({len(available)} available)"
            )
            return []

        batch_id = generate_id(AUTOMATIC_BATCH_PREFIX)
        current_round = tournament.get_current_round()
        paired: Set[int] = set()
        pairings: List[Match] = []

        for player in self.sort_players_by_score(tournament, available):
            if player.id in paired:
                continue

            pool = [p for p in available if p.id not in paired]
            opponent = self.find_best_opponent(tournament, player, pool)
            if opponent is None:
                logger.info(f"{player.full_name} could not be paired in this batch")
                continue

            match = self._create_match(tournament, player, opponent, current_round)
            match.batch_id = batch_id
            pairings.append(match)
            paired.add(player.id)
            paired.add(opponent.id)

        logger.info(
            f"Created {len(pairings)} pairings in round {current_round} "
            f"(batch {batch_id}, {len(available) - len(paired)} unpaired)"
        )
        return pairings

    def create_manual_pairing(
        self, tournament: Tournament, player1_id: int, player2_id: int
    ) -> MaybeMatch:
        """Pair two players chosen by hand.

        Recent-opponent and score-gap constraints do not apply, but colours
        are still allocated by preference.

        Returns:
            The created match, or None if either player is unavailable or
            both IDs are the same
        """
        if player1_id == player2_id:
            logger.warning(f"Cannot pair player {player1_id} against themselves")
            return None

        available = {p.id: p for p in self.get_available_players(tournament)}
        player1 = available.get(player1_id)
        player2 = available.get(player2_id)
        if player1 is None or player2 is None:
            logger.warning(
                f"Manual pairing {player1_id} vs {player2_id} refused: "
                "player not available"
            )
            return None

        match = self._create_match(
            tournament, player1, player2, tournament.get_current_round()
        )
        match.batch_id = generate_id(MANUAL_BATCH_PREFIX)
        logger.info(f"Created manual pairing (batch {match.batch_id})")
        return match

    def _create_match(
        self, tournament: Tournament, player_a: Player, player_b: Player, round: int
    ) -> Match:
        white, black = self.determine_colours(tournament, player_a, player_b)
        match = tournament.add_match(white.id, black.id, round)
        logger.info(
            f"Round {round}: {white.full_name} (White) vs {black.full_name} (Black)"
        )
        return match

    # ========== Undo ==========

    def undo_last_batch(self, tournament: Tournament) -> List[Match]:
        """Remove every match of the most recently created batch.

        Returns:
            The removed matches; empty if there are no matches or the newest
            match has no batch ID
        """
        batch_id = tournament.last_batch_id
        if batch_id is None:
            logger.info("Nothing to undo")
            return []
        removed = tournament.remove_batch(batch_id)
        logger.info(f"Undid batch {batch_id}")
        return removed
