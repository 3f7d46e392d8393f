"""Shared helpers: logging, id generation and name normalisation."""

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

import random
from typing import Optional

from PyQt6.QtCore import QDateTime

from pairfx.utils.logging import app_data_folder, setup_logger


def generate_id(prefix: str = "item_") -> str:
    """Generate a simple unique ID."""
    return f"{prefix}{random.randint(100000, 999999)}_{int(QDateTime.currentMSecsSinceEpoch())}"


def normalize_name(name: Optional[str]) -> str:
    """Normalise a name part for duplicate detection (trimmed, case-folded)."""
    return (name or "").strip().casefold()


__all__ = ["app_data_folder", "generate_id", "normalize_name", "setup_logger"]
