import pytest

from pairfx import PairingService, Tournament


@pytest.fixture
def tournament():
    return Tournament(id=1, name="Test Open")


@pytest.fixture
def service():
    return PairingService()


@pytest.fixture
def four_players(tournament):
    return [
        tournament.add_player("Anna", "Smit"),
        tournament.add_player("Bram", "de Vries"),
        tournament.add_player("Cleo", "Jansen"),
        tournament.add_player("Daan", "Bakker"),
    ]
