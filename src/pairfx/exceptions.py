"""Exceptions for use in PairFX"""

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


# ========== Base Application Exception ==========


class PairFXException(Exception):
    """Base exception for all PairFX errors.

    All custom exceptions in the package inherit from this class, so callers
    can catch every application-specific error with a single except clause.

    "Nothing found" and "no pairing possible" are not errors here: those are
    reported as None or an empty list by the operation itself.
    """

    pass


# ========== Tournament Exceptions ==========


class TournamentException(PairFXException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when no tournament is loaded for the requested operation."""

    pass


# ========== Player Exceptions ==========


class PlayerException(PairFXException):
    """Base exception for player-related errors."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when player data is invalid or incomplete."""

    pass


# ========== Result Exceptions ==========


class ResultException(PairFXException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result token is not one of "1-0", "0-1" or "1/2-1/2"."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(PairFXException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file or import payload cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(PairFXException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
