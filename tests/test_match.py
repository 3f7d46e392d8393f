from datetime import datetime

import pytest

from pairfx import Match
from pairfx.exceptions import InvalidResultException


def test_finished_scores_always_sum_to_one():
    for result in ("1-0", "0-1", "1/2-1/2"):
        match = Match(id=1, white_player_id=1, black_player_id=2, round=1)
        match.set_result(result)
        assert match.white_score + match.black_score == 1


def test_result_scores():
    match = Match(id=1, white_player_id=1, black_player_id=2, round=1)
    match.set_result("0-1")
    assert (match.white_score, match.black_score) == (0, 1)
    match.set_result("1/2-1/2")
    assert (match.white_score, match.black_score) == (0.5, 0.5)


def test_active_match_scores_nothing():
    match = Match(id=1, white_player_id=1, black_player_id=2, round=1)
    assert match.is_active()
    assert not match.is_finished()
    assert match.white_score == 0
    assert match.black_score == 0


def test_set_result_marks_match_played():
    match = Match(id=1, white_player_id=1, black_player_id=2, round=1)
    assert match.is_new
    assert match.played_at is None

    match.set_result("1-0")

    assert match.is_finished()
    assert not match.is_new
    assert isinstance(match.played_at, datetime)
    assert match.played_at.tzinfo is not None


@pytest.mark.parametrize("bad", ["2-0", "1-1", "", "0.5-0.5", None])
def test_invalid_result_leaves_match_unchanged(bad):
    match = Match(id=1, white_player_id=1, black_player_id=2, round=1)
    match.set_result("1-0")
    played_at = match.played_at

    with pytest.raises(InvalidResultException):
        match.set_result(bad)

    assert match.result == "1-0"
    assert match.played_at == played_at


def test_player_helpers():
    match = Match(id=7, white_player_id=3, black_player_id=5, round=2)
    assert match.involves(3) and match.involves(5)
    assert not match.involves(4)
    assert match.opponent_of(3) == 5
    assert match.opponent_of(5) == 3
    assert match.opponent_of(4) is None
    assert match.colour_of(3) == "White"
    assert match.colour_of(5) == "Black"
    assert match.colour_of(4) is None


def test_round_trip():
    match = Match(id=4, white_player_id=1, black_player_id=2, round=3, batch_id="batch_1")
    match.set_result("1/2-1/2")
    assert Match.from_dict(match.to_dict()) == match

    active = Match(id=5, white_player_id=2, black_player_id=1, round=3)
    assert Match.from_dict(active.to_dict()) == active


def test_from_dict_accepts_browser_keys():
    match = Match.from_dict(
        {
            "id": 9,
            "whitePlayerId": 1,
            "blackPlayerId": 2,
            "round": 1,
            "result": "0-1",
            "lastPlayedDate": "2024-03-01T10:15:00.000Z",
            "isNew": False,
            "batchId": "batch_1700000000000",
        }
    )
    assert match.white_player_id == 1
    assert match.black_player_id == 2
    assert match.black_score == 1
    assert match.played_at.year == 2024
    assert match.batch_id == "batch_1700000000000"


def test_from_dict_rejects_unknown_result():
    with pytest.raises(InvalidResultException):
        Match.from_dict(
            {"id": 1, "white_player_id": 1, "black_player_id": 2, "round": 1, "result": "2-0"}
        )
