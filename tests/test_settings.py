import pytest

from pairfx import TournamentSettings
from pairfx.exceptions import InvalidConfigurationException
from pairfx.utils.validation import (
    validate_first_name,
    validate_non_negative_integer,
    validate_non_negative_number,
    validate_result,
)


def test_defaults():
    settings = TournamentSettings()

    assert settings.format == "run-through"
    assert settings.display_mode == "points"
    assert settings.constraint_x == 3
    assert settings.constraint_y == 3
    assert settings.avoid_same_class is False


@pytest.mark.parametrize(
    "changes",
    [
        {"format": "swiss"},
        {"display_mode": "elo"},
        {"constraint_x": -1},
        {"constraint_x": 1.5},
        {"constraint_x": True},
        {"constraint_y": -0.5},
        {"constraint_y": "3"},
        {"avoid_same_class": "yes"},
    ],
)
def test_invalid_settings_are_rejected(changes):
    with pytest.raises(InvalidConfigurationException):
        TournamentSettings(**changes)


def test_zero_constraints_are_allowed():
    settings = TournamentSettings(constraint_x=0, constraint_y=0)
    assert (settings.constraint_x, settings.constraint_y) == (0, 0)


def test_dict_round_trip():
    settings = TournamentSettings(
        display_mode="percentage", constraint_x=5, constraint_y=1.5, avoid_same_class=True
    )
    assert TournamentSettings.from_dict(settings.to_dict()) == settings


def test_from_dict_fills_defaults():
    assert TournamentSettings.from_dict({}) == TournamentSettings()
    assert TournamentSettings.from_dict({"constraintX": 1}).constraint_x == 1


def test_from_dict_validates():
    with pytest.raises(InvalidConfigurationException):
        TournamentSettings.from_dict({"constraint_y": -2})


def test_validators():
    assert validate_result("0-1")
    assert not validate_result("1-1")
    assert not validate_result(None)

    assert validate_first_name("  Anna ").sanitized_value == "Anna"
    assert not validate_first_name("   ")
    assert not validate_first_name(None)

    assert validate_non_negative_integer(0)
    assert not validate_non_negative_integer(False)
    assert validate_non_negative_number(2.5)
    assert not validate_non_negative_number(-1)
