"""Tournament session controller.

This module ties the core to persistence. The TournamentController handles:
- Creating, loading and closing tournaments
- Player management and CSV import
- Automatic and manual pairing, and undoing the last batch
- Result recording
- Saving the snapshot after every change
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

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional

from pairfx.exceptions import InvalidResultException, TournamentStateException
from pairfx.io import (
    export_tournament_json,
    import_players,
    import_tournament_json,
    parse_csv_players,
    standings_to_csv,
    standings_to_html,
)
from pairfx.models import Match, Player, Tournament, TournamentSettings
from pairfx.pairing import PairingService
from pairfx.storage import TournamentStore
from pairfx.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class PairingGenerationResult:
    """Result of a pairing operation."""

    success: bool
    matches: List[Match] = field(default_factory=list)
    error_message: Optional[str] = None


@dataclass
class ResultRecordingResult:
    """Result of a result recording operation."""

    success: bool
    match: Optional[Match] = None
    error_message: Optional[str] = None


@dataclass
class ImportSummary:
    """Players added and duplicates skipped by an import."""

    added: int = 0
    skipped: int = 0


class TournamentController:
    """
    Controller for one tournament session.

    The controller holds the tournament being worked on and passes it
    explicitly to the core; nothing in the core knows which tournament is
    "current". Every mutating call saves the snapshot through the store
    before returning.

    Parameters
    ----------
    store : TournamentStore
        Where snapshots are saved
    pairing_service : PairingService, optional
        Pairing engine, a new one by default
    """

    def __init__(
        self,
        store: TournamentStore,
        pairing_service: Optional[PairingService] = None,
    ):
        self.store = store
        self.pairing_service = pairing_service or PairingService()
        self._tournament: Optional[Tournament] = None

    # ========== Session ==========

    @property
    def tournament(self) -> Tournament:
        """The loaded tournament.

        Raises
        ------
        TournamentStateException
            If no tournament is loaded
        """
        if self._tournament is None:
            raise TournamentStateException("No tournament loaded.")
        return self._tournament

    @property
    def has_tournament(self) -> bool:
        return self._tournament is not None

    def _save(self) -> None:
        self.store.save(self.tournament)

    def create_tournament(
        self,
        name: str,
        csv_content: Optional[str] = None,
        settings: Optional[TournamentSettings] = None,
    ) -> ImportSummary:
        """Create, save and load a new tournament.

        Parameters
        ----------
        name : str
            Tournament name
        csv_content : str, optional
            Player list to import straight away
        settings : TournamentSettings, optional
            Initial settings

        Returns
        -------
        ImportSummary
            Players imported from csv_content (zeros without one)
        """
        tournament = Tournament(
            id=self.store.generate_tournament_id(),
            name=name,
            settings=settings,
        )
        summary = ImportSummary()
        if csv_content:
            summary.added, summary.skipped = import_players(
                tournament, parse_csv_players(csv_content)
            )

        self._tournament = tournament
        self._save()
        logger.info(
            f"Created tournament {name} ({tournament.id}) with {summary.added} players"
        )
        return summary

    def load_tournament(self, tournament_id: int) -> Optional[Tournament]:
        """Load a saved tournament; None (and nothing loaded) if it does not exist."""
        tournament = self.store.load(tournament_id)
        self._tournament = tournament
        if tournament is None:
            logger.warning(f"Tournament {tournament_id} not found")
        return tournament

    def import_tournament(self, json_text: str) -> Tournament:
        """Import an exported tournament under a fresh ID and load it.

        Raises
        ------
        FileLoadException
            If the JSON is not a valid tournament
        """
        tournament = import_tournament_json(json_text)
        tournament.id = self.store.generate_tournament_id()
        self._tournament = tournament
        self._save()
        return tournament

    def close_tournament(self) -> None:
        self._tournament = None

    def delete_tournament(self, tournament_id: int) -> bool:
        """Delete a saved tournament, closing it if it is the loaded one."""
        if self._tournament is not None and self._tournament.id == tournament_id:
            self._tournament = None
        return self.store.delete(tournament_id)

    # ========== Players ==========

    def add_player(
        self, first_name: str, last_name: str = "", class_name: str = ""
    ) -> Optional[Player]:
        """Add a player; None for a duplicate name."""
        player = self.tournament.add_player(first_name, last_name, class_name)
        if player is not None:
            self._save()
        return player

    def update_player(
        self, player_id: int, first_name: str, last_name: str = "", class_name: str = ""
    ) -> Optional[Player]:
        player = self.tournament.update_player(
            player_id, first_name, last_name, class_name
        )
        if player is not None:
            self._save()
        return player

    def remove_player(self, player_id: int) -> bool:
        """Remove a player and all of their matches."""
        removed = self.tournament.remove_player(player_id)
        if removed:
            self._save()
        return removed

    def toggle_player_absent(self, player_id: int) -> bool:
        toggled = self.tournament.toggle_player_absent(player_id)
        if toggled:
            self._save()
        return toggled

    def import_players_csv(self, csv_content: str) -> ImportSummary:
        """Add the players in a CSV text to the loaded tournament."""
        added, skipped = import_players(
            self.tournament, parse_csv_players(csv_content)
        )
        if added:
            self._save()
        return ImportSummary(added=added, skipped=skipped)

    # ========== Pairing ==========

    def pair_automatically(
        self, selected_player_ids: Optional[Iterable[int]] = None
    ) -> PairingGenerationResult:
        """Pair available players (optionally only the selected ones)."""
        matches = self.pairing_service.create_automatic_pairings(
            self.tournament, selected_player_ids
        )
        if not matches:
            return PairingGenerationResult(
                success=False, error_message="No pairings possible."
            )
        self._save()
        return PairingGenerationResult(success=True, matches=matches)

    def pair_manually(self, player1_id: int, player2_id: int) -> PairingGenerationResult:
        """Pair two hand-picked players."""
        match = self.pairing_service.create_manual_pairing(
            self.tournament, player1_id, player2_id
        )
        if match is None:
            return PairingGenerationResult(
                success=False,
                error_message="Both players must be different and available.",
            )
        self._save()
        return PairingGenerationResult(success=True, matches=[match])

    def undo_last_batch(self) -> List[Match]:
        """Remove the most recent pairing batch."""
        removed = self.pairing_service.undo_last_batch(self.tournament)
        if removed:
            self._save()
        return removed

    # ========== Results ==========

    def record_result(self, match_id: int, result: str) -> ResultRecordingResult:
        """Record a match result.

        An invalid token or unknown match is reported in the returned object;
        the tournament is not changed or saved in that case.
        """
        try:
            match = self.tournament.set_match_result(match_id, result)
        except InvalidResultException as e:
            logger.warning(f"Result for match {match_id} rejected: {e}")
            return ResultRecordingResult(success=False, error_message=str(e))

        if match is None:
            return ResultRecordingResult(
                success=False, error_message=f"Match {match_id} not found."
            )
        self._save()
        return ResultRecordingResult(success=True, match=match)

    # ========== Settings ==========

    def update_settings(self, **changes: Any) -> TournamentSettings:
        """Change settings and save.

        Raises
        ------
        InvalidConfigurationException
            If the new settings are invalid; nothing is changed
        """
        settings = self.tournament.update_settings(**changes)
        self._save()
        return settings

    # ========== Export ==========

    def export_json(self) -> str:
        return export_tournament_json(self.tournament)

    def export_standings_html(self) -> str:
        return standings_to_html(self.tournament)

    def export_standings_csv(self) -> str:
        return standings_to_csv(self.tournament)
