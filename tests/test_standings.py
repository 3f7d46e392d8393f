from pairfx import Tournament
from pairfx.io import compute_standings, standings_to_csv, standings_to_html


def _played(tournament, four_players):
    anna, bram, cleo, daan = four_players
    tournament.add_match(anna.id, bram.id, 1).set_result("1-0")
    tournament.add_match(cleo.id, daan.id, 1).set_result("1/2-1/2")
    tournament.add_match(bram.id, daan.id, 1)
    return tournament


def test_standings_order_and_ranks(tournament, four_players):
    rows = compute_standings(_played(tournament, four_players))

    assert [r.full_name for r in rows] == [
        "Anna Smit",
        "Cleo Jansen",
        "Daan Bakker",
        "Bram de Vries",
    ]
    assert [r.rank for r in rows] == [1, 2, 3, 4]
    assert [r.score for r in rows] == [1, 0.5, 0.5, 0]
    assert [r.match_count for r in rows] == [1, 1, 2, 2]


def test_standings_without_matches(tournament, four_players):
    rows = compute_standings(tournament)

    assert [r.player_id for r in rows] == [1, 2, 3, 4]
    assert all(r.score == 0 and r.percentage == 0 for r in rows)


def test_standings_csv_points(tournament, four_players):
    four_players[0].class_name = "5A"

    text = standings_to_csv(_played(tournament, four_players))

    assert text.splitlines() == [
        "Rank,Name,Class,Points,Games",
        "1,Anna Smit,5A,1,1",
        "2,Cleo Jansen,,0.5,1",
        "3,Daan Bakker,,0.5,2",
        "4,Bram de Vries,,0,2",
    ]


def test_standings_csv_percentage(tournament, four_players):
    tournament.update_settings(display_mode="percentage")

    lines = standings_to_csv(_played(tournament, four_players), delimiter=";")
    lines = lines.splitlines()

    assert lines[0] == "Rank;Name;Class;Percentage;Games"
    assert lines[1] == "1;Anna Smit;;100%;1"
    assert lines[2] == "2;Cleo Jansen;;50%;1"
    assert lines[4] == "4;Bram de Vries;;0%;2"


def test_standings_html_escapes_names():
    tournament = Tournament(id=1, name="<Club> & Co")
    tournament.add_player("Anna", "<b>Smit</b>", "5A")

    doc = standings_to_html(tournament)

    assert doc.startswith("<!DOCTYPE html>")
    assert "&lt;Club&gt; &amp; Co" in doc
    assert "<b>Smit</b>" not in doc
    assert "Anna &lt;b&gt;Smit&lt;/b&gt;" in doc
    assert "<th>Points</th>" in doc
