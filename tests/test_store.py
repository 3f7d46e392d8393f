import pytest

from pairfx import Tournament
from pairfx.exceptions import FileLoadException
from pairfx.storage import TournamentStore


@pytest.fixture
def store(tmp_path):
    return TournamentStore(tmp_path / "tournaments")


def _tournament(tournament_id, name="Club Night"):
    tournament = Tournament(id=tournament_id, name=name)
    tournament.add_player("Anna", "Smit")
    tournament.add_player("Bram", "de Vries")
    return tournament


def test_save_and_load(store):
    tournament = _tournament(1)
    tournament.add_match(1, 2, 1).set_result("1-0")
    store.save(tournament)

    loaded = store.load(1)

    assert loaded is not tournament
    assert loaded.to_dict() == tournament.to_dict()
    assert (store.directory / "pairfx_tournament_1.json").exists()


def test_load_missing(store):
    assert store.load(42) is None


def test_load_corrupt_snapshot(store):
    (store.directory / "pairfx_tournament_3.json").write_text("{broken", encoding="utf-8")
    with pytest.raises(FileLoadException):
        store.load(3)


def test_load_invalid_snapshot(store):
    (store.directory / "pairfx_tournament_3.json").write_text(
        '{"players": [{"first_name": "Anna"}]}', encoding="utf-8"
    )
    with pytest.raises(FileLoadException):
        store.load(3)


def test_index_tracks_saves(store):
    first = _tournament(1, "Autumn")
    store.save(first)
    store.save(_tournament(2, "Winter"))
    first.name = "Autumn Cup"
    first.add_player("Cleo", "Jansen")
    store.save(first)

    summaries = store.list_tournaments()

    assert [(s["id"], s["name"]) for s in summaries] == [(1, "Autumn Cup"), (2, "Winter")]
    assert summaries[0]["player_count"] == 3
    assert summaries[0]["match_count"] == 0


def test_generate_tournament_id(store):
    assert store.generate_tournament_id() == 1
    store.save(_tournament(4))
    assert store.generate_tournament_id() == 5


def test_delete(store):
    store.save(_tournament(1))
    store.save(_tournament(2))

    assert store.delete(1) is True
    assert store.delete(1) is False
    assert store.load(1) is None
    assert [s["id"] for s in store.list_tournaments()] == [2]


def test_clear_all(store):
    store.save(_tournament(1))
    store.save(_tournament(2))

    store.clear_all()

    assert store.list_tournaments() == []
    assert list(store.directory.iterdir()) == []


@pytest.mark.parametrize("snapshot", ["[]", '"text"', '{"players": [], "settings": []}'])
def test_load_snapshot_of_wrong_shape(store, snapshot):
    (store.directory / "pairfx_tournament_5.json").write_text(snapshot, encoding="utf-8")
    with pytest.raises(FileLoadException):
        store.load(5)


def test_malformed_index_entries_are_skipped(store):
    store.save(_tournament(2))
    (store.directory / "pairfx_tournament_list.json").write_text(
        '[{"name": "no id"}, "junk", {"id": 2, "name": "Club Night"}]',
        encoding="utf-8",
    )

    assert [s["id"] for s in store.list_tournaments()] == [2]
    assert store.generate_tournament_id() == 3

    store.save(_tournament(3))
    assert [s["id"] for s in store.list_tournaments()] == [2, 3]


def test_index_that_is_not_a_list(store):
    (store.directory / "pairfx_tournament_list.json").write_text(
        '{"id": 1}', encoding="utf-8"
    )

    assert store.list_tournaments() == []
    assert store.generate_tournament_id() == 1
