import pytest

from pairfx.exceptions import FileLoadException
from pairfx.io import import_players, parse_csv_players, read_csv_players
from pairfx.io.csv_import import PlayerRecord, detect_delimiter, map_columns


@pytest.mark.parametrize(
    "header, expected",
    [
        ("voornaam;naam,klas", ";"),
        ("first\tlast", "\t"),
        ("first,last", ","),
        ("single", ","),
    ],
)
def test_detect_delimiter(header, expected):
    assert detect_delimiter(header) == expected


def test_map_columns_aliases():
    assert map_columns(["Naam", "Voornaam", "Klas"]) == {
        "first_name": 1,
        "last_name": 0,
        "class_name": 2,
    }
    assert map_columns(["Grade", "Surname", "First"]) == {
        "first_name": 2,
        "last_name": 1,
        "class_name": 0,
    }


def test_map_columns_generic_name():
    assert map_columns(["name", "name"]) == {"first_name": 0, "last_name": 1}
    assert map_columns(["first", "name"]) == {"first_name": 0, "last_name": 1}


def test_map_columns_falls_back_to_position():
    assert map_columns(["a", "b", "c"]) == {"first_name": 0, "last_name": 1}


def test_parse_dutch_semicolon_file():
    content = "voornaam;naam;klas\nJan;Peeters;3B\nLies;Claes;\n"

    assert parse_csv_players(content) == [
        PlayerRecord("Jan", "Peeters", "3B"),
        PlayerRecord("Lies", "Claes", ""),
    ]


def test_parse_tab_separated_english_headers():
    content = "Class\tLast Name\tFirst Name\r\n4A\tSmit\tAnna\r\n"

    assert parse_csv_players(content) == [PlayerRecord("Anna", "Smit", "4A")]


def test_parse_without_known_headers_uses_first_columns():
    content = "x,y,z\nAnna,Smit,extra\n"

    assert parse_csv_players(content) == [PlayerRecord("Anna", "Smit", "")]


def test_parse_skips_incomplete_and_blank_rows():
    content = "first,last\nAnna,Smit\n\nBram,\n,Jansen\n  Cleo , Bakker \n"

    assert parse_csv_players(content) == [
        PlayerRecord("Anna", "Smit"),
        PlayerRecord("Cleo", "Bakker"),
    ]


def test_parse_quoted_fields_and_bom():
    content = '\ufefffirst,last,class\nBram,"de Vries, jr",5B\n'

    assert parse_csv_players(content) == [PlayerRecord("Bram", "de Vries, jr", "5B")]


@pytest.mark.parametrize("content", ["", "   \n", "first,last\n"])
def test_parse_empty(content):
    assert parse_csv_players(content) == []


def test_read_csv_file(tmp_path):
    path = tmp_path / "players.csv"
    path.write_text("voornaam;naam\nJan;Peeters\n", encoding="utf-8-sig")

    assert read_csv_players(path) == [PlayerRecord("Jan", "Peeters")]


def test_read_missing_file(tmp_path):
    with pytest.raises(FileLoadException):
        read_csv_players(tmp_path / "missing.csv")


def test_import_players_counts_duplicates(tournament):
    tournament.add_player("Anna", "Smit")
    records = parse_csv_players(
        "first,last,class\nAnna,Smit,5A\nBram,de Vries,5A\nbram,DE VRIES,5B\n"
    )

    assert import_players(tournament, records) == (1, 2)
    assert [p.full_name for p in tournament.players] == ["Anna Smit", "Bram de Vries"]
    assert tournament.players[1].class_name == "5A"
