import pytest

from pairfx import TournamentSettings
from pairfx.controllers import TournamentController
from pairfx.exceptions import (
    FileLoadException,
    InvalidConfigurationException,
    TournamentStateException,
)
from pairfx.storage import TournamentStore

PLAYERS_CSV = "voornaam;naam;klas\nAnna;Smit;5A\nBram;de Vries;5A\nCleo;Jansen;5B\nDaan;Bakker;5B\n"


@pytest.fixture
def store(tmp_path):
    return TournamentStore(tmp_path)


@pytest.fixture
def controller(store):
    return TournamentController(store)


@pytest.fixture
def running(controller):
    controller.create_tournament("Club Night", PLAYERS_CSV)
    return controller


def _reload(controller):
    return controller.store.load(controller.tournament.id)


def test_no_tournament_loaded(controller):
    assert not controller.has_tournament
    with pytest.raises(TournamentStateException):
        controller.add_player("Anna")


def test_create_tournament(controller, store):
    summary = controller.create_tournament(
        "Club Night", PLAYERS_CSV + "anna;SMIT;5A\n", TournamentSettings(constraint_x=1)
    )

    assert (summary.added, summary.skipped) == (4, 1)
    assert controller.tournament.id == 1
    assert controller.tournament.settings.constraint_x == 1
    assert store.load(1).to_dict() == controller.tournament.to_dict()

    controller.create_tournament("Second")
    assert controller.tournament.id == 2
    assert [s["name"] for s in store.list_tournaments()] == ["Club Night", "Second"]


def test_changes_are_saved(running):
    running.add_player("Eva", "Visser")
    running.toggle_player_absent(1)
    running.update_player(2, "Bram", "Visser", "6A")
    running.remove_player(3)

    saved = _reload(running)
    assert [p.full_name for p in saved.players] == [
        "Anna Smit",
        "Bram Visser",
        "Daan Bakker",
        "Eva Visser",
    ]
    assert saved.get_player(1).absent


def test_duplicate_player_is_reported(running):
    assert running.add_player("anna", "smit") is None
    summary = running.import_players_csv("first,last\nAnna,Smit\nEva,Visser\n")
    assert (summary.added, summary.skipped) == (1, 1)


def test_pair_and_record_results(running):
    outcome = running.pair_automatically()

    assert outcome.success
    assert len(outcome.matches) == 2
    assert len(_reload(running).get_active_matches()) == 2

    recorded = running.record_result(outcome.matches[0].id, "1-0")
    assert recorded.success
    assert _reload(running).get_match(outcome.matches[0].id).result == "1-0"


def test_pairing_failure_is_reported(running):
    running.pair_automatically()
    outcome = running.pair_automatically()

    assert not outcome.success
    assert outcome.matches == []
    assert outcome.error_message == "No pairings possible."


def test_invalid_result_is_reported(running):
    match = running.pair_automatically().matches[0]

    rejected = running.record_result(match.id, "2-0")
    missing = running.record_result(99, "1-0")

    assert not rejected.success and "2-0" in rejected.error_message
    assert not missing.success
    assert match.result is None


def test_manual_pairing_and_undo(running):
    running.pair_automatically([1, 2])
    manual = running.pair_manually(3, 4)
    refused = running.pair_manually(1, 3)

    assert manual.success
    assert not refused.success
    assert running.undo_last_batch() == manual.matches
    assert len(_reload(running).matches) == 1


def test_update_settings(running):
    running.update_settings(display_mode="percentage")
    assert _reload(running).settings.display_mode == "percentage"

    with pytest.raises(InvalidConfigurationException):
        running.update_settings(constraint_x=-1)
    assert running.tournament.settings.constraint_x == 3


def test_load_and_close(running, store):
    tournament_id = running.tournament.id
    running.close_tournament()
    assert not running.has_tournament

    assert running.load_tournament(tournament_id).name == "Club Night"
    assert running.load_tournament(99) is None
    assert not running.has_tournament


def test_export_and_import(running):
    running.pair_automatically()
    text = running.export_json()

    imported = running.import_tournament(text)

    assert imported.id == 2
    assert running.tournament is imported
    assert len(imported.matches) == 2
    with pytest.raises(FileLoadException):
        running.import_tournament("{}")


def test_standings_exports(running):
    match = running.pair_automatically().matches[0]
    running.record_result(match.id, "0-1")

    assert running.export_standings_csv().splitlines()[0] == "Rank,Name,Class,Points,Games"
    assert "Club Night" in running.export_standings_html()


def test_delete_loaded_tournament(running, store):
    assert running.delete_tournament(running.tournament.id)
    assert not running.has_tournament
    assert store.list_tournaments() == []
