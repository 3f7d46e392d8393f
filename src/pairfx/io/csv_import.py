"""Import player lists from CSV text.

Header names are matched against Dutch and English aliases; when no first or
last name column is recognised the first two columns are used.
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

import csv
import io
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, Tuple, Union

from pairfx.constants import (
    CSV_CLASS_HEADERS,
    CSV_FIRST_NAME_HEADERS,
    CSV_GENERIC_NAME_HEADER,
    CSV_LAST_NAME_HEADERS,
)
from pairfx.exceptions import FileLoadException
from pairfx.models import Tournament
from pairfx.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class PlayerRecord:
    """One player row read from a CSV file."""

    first_name: str
    last_name: str
    class_name: str = ""


def detect_delimiter(header_line: str) -> str:
    """Semicolon if the header has one, else tab, else comma."""
    if ";" in header_line:
        return ";"
    if "\t" in header_line:
        return "\t"
    return ","


def map_columns(headers: Sequence[str]) -> Dict[str, int]:
    """Map header cells to first name, last name and class column indexes.

    A generic "name" header fills the first name column if that is still
    unknown, otherwise the last name column.
    """
    mapping: Dict[str, int] = {}
    for index, raw in enumerate(headers):
        header = raw.strip().lower()
        if header in CSV_FIRST_NAME_HEADERS:
            mapping["first_name"] = index
        elif header in CSV_LAST_NAME_HEADERS:
            mapping["last_name"] = index
        elif header == CSV_GENERIC_NAME_HEADER:
            if "first_name" not in mapping:
                mapping["first_name"] = index
            else:
                mapping["last_name"] = index
        elif header in CSV_CLASS_HEADERS:
            mapping["class_name"] = index

    mapping.setdefault("first_name", 0)
    mapping.setdefault("last_name", 1)
    return mapping


def _cell(fields: Sequence[str], index: int) -> str:
    if 0 <= index < len(fields):
        return fields[index].strip()
    return ""


def parse_csv_players(content: str) -> List[PlayerRecord]:
    """Parse CSV text into player records.

    The first line is always treated as a header. Rows without a first or
    last name are skipped silently.

    Args:
        content: Full CSV text

    Returns:
        The parsed records, in file order
    """
    content = content.lstrip("\ufeff").strip()
    if not content:
        return []

    lines = content.splitlines()
    delimiter = detect_delimiter(lines[0])
    try:
        rows = list(csv.reader(io.StringIO(content), delimiter=delimiter))
    except csv.Error as e:
        raise FileLoadException(f"Could not parse CSV: {e}") from e

    columns = map_columns(rows[0])
    class_index = columns.get("class_name", -1)

    records: List[PlayerRecord] = []
    for fields in rows[1:]:
        if not any(f.strip() for f in fields):
            continue
        first_name = _cell(fields, columns["first_name"])
        last_name = _cell(fields, columns["last_name"])
        if not first_name or not last_name:
            logger.debug(f"Skipping CSV row without full name: {fields}")
            continue
        records.append(
            PlayerRecord(
                first_name=first_name,
                last_name=last_name,
                class_name=_cell(fields, class_index),
            )
        )

    logger.info(f"Parsed {len(records)} players from CSV")
    return records


def read_csv_players(path: Union[str, Path]) -> List[PlayerRecord]:
    """Read and parse a CSV file (UTF-8, BOM tolerated).

    Raises:
        FileLoadException: If the file cannot be read
    """
    try:
        with open(path, "r", encoding="utf-8-sig") as f:  # Use utf-8-sig for BOM
            return parse_csv_players(f.read())
    except (OSError, UnicodeDecodeError) as e:
        raise FileLoadException(f"Could not read {path}: {e}") from e


def import_players(
    tournament: Tournament, records: Iterable[PlayerRecord]
) -> Tuple[int, int]:
    """Add parsed records to a tournament.

    Returns:
        Tuple of (added, skipped) where skipped counts duplicates
    """
    added = 0
    skipped = 0
    for record in records:
        player = tournament.add_player(
            record.first_name, record.last_name, record.class_name
        )
        if player is None:
            skipped += 1
        else:
            added += 1

    logger.info(f"Imported {added} players, {skipped} skipped")
    return added, skipped
