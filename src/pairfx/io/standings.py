"""Standings table and its CSV / HTML exports."""

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

import csv
import html
import io
from dataclasses import dataclass
from typing import List

from PyQt6.QtCore import QDateTime

from pairfx.constants import DISPLAY_PERCENTAGE
from pairfx.models import Tournament
from pairfx.type_hints import DisplayMode


@dataclass
class StandingRow:
    """One line of the standings table.

    match_count counts every match the player appears in, active ones
    included.
    """

    rank: int
    player_id: int
    full_name: str
    class_name: str
    score: float
    percentage: float
    match_count: int


def compute_standings(tournament: Tournament) -> List[StandingRow]:
    """Players sorted by score, highest first.

    Players on equal scores keep their registration order.
    """
    rows = [
        StandingRow(
            rank=0,
            player_id=player.id,
            full_name=player.full_name,
            class_name=player.class_name,
            score=tournament.calculate_score(player.id),
            percentage=tournament.calculate_percentage(player.id),
            match_count=len(tournament.get_player_matches(player.id)),
        )
        for player in tournament.players
    ]
    rows.sort(key=lambda r: r.score, reverse=True)
    for rank, row in enumerate(rows, start=1):
        row.rank = rank
    return rows


def format_score(row: StandingRow, display_mode: DisplayMode) -> str:
    """Score as shown to users: points, or a whole percentage."""
    if display_mode == DISPLAY_PERCENTAGE:
        return f"{row.percentage:.0f}%"
    return f"{row.score:g}"


def score_header(display_mode: DisplayMode) -> str:
    return "Percentage" if display_mode == DISPLAY_PERCENTAGE else "Points"


def standings_to_csv(tournament: Tournament, delimiter: str = ",") -> str:
    """Render the standings as CSV text with a header row."""
    display_mode = tournament.settings.display_mode
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=delimiter, lineterminator="\n")
    writer.writerow(["Rank", "Name", "Class", score_header(display_mode), "Games"])
    for row in compute_standings(tournament):
        writer.writerow(
            [
                row.rank,
                row.full_name,
                row.class_name,
                format_score(row, display_mode),
                row.match_count,
            ]
        )
    return buffer.getvalue()


def standings_to_html(tournament: Tournament) -> str:
    """Render a printable HTML standings sheet.

    Returns
    -------
    str
        Complete HTML document
    """
    display_mode = tournament.settings.display_mode
    title = html.escape(tournament.name)
    created = tournament.creation_date.strftime("%Y-%m-%d")

    doc = f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{title} - Standings</title>
    <style>
        body {{ font-family: Arial, sans-serif; color: #000; background: #fff; margin: 20px; }}
        h1 {{ font-size: 1.35em; font-weight: normal; letter-spacing: 0.03em; }}
        .meta {{ color: #666; margin-bottom: 1.2em; }}
        table.standings {{ border-collapse: collapse; width: 100%; }}
        table.standings th, table.standings td {{ border: 1px solid #222; padding: 6px 10px; text-align: left; font-size: 11pt; }}
        table.standings th {{ font-weight: bold; }}
        .footer {{ text-align: center; font-size: 9pt; margin-top: 2em; color: #888; letter-spacing: 0.04em; }}
    </style>
</head>
<body>
    <h1>{title}</h1>
    <div class="meta">
        <p>Created: {created}</p>
        <p>Players: {len(tournament.players)}</p>
        <p>Games: {len(tournament.matches)}</p>
    </div>
    <table class="standings">
        <tr>
            <th>Rank</th>
            <th>Name</th>
            <th>Class</th>
            <th>{score_header(display_mode)}</th>
            <th>Games</th>
        </tr>
"""

    for row in compute_standings(tournament):
        doc += (
            f"        <tr><td>{row.rank}</td><td>{html.escape(row.full_name)}</td>"
            f"<td>{html.escape(row.class_name)}</td>"
            f"<td>{format_score(row, display_mode)}</td><td>{row.match_count}</td></tr>\n"
        )

    doc += f"""    </table>
    <div class="footer">
        Printed by PairFX &mdash; {QDateTime.currentDateTime().toString('yyyy-MM-dd hh:mm')}
    </div>
</body>
</html>
"""
    return doc
