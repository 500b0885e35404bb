"""Exceptions for use in Swiss Manager"""

# Swiss Manager
# Copyright (C) 2025  Swiss Manager developers
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


class SwissManagerException(Exception):
    """Base exception for all Swiss Manager errors.

    The pairing and standings engines never raise for ordinary edge cases;
    these exceptions come from the orchestration layer when a caller
    violates a precondition.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(SwissManagerException):
    """Base exception for pairing-related errors."""

    pass


class PairingNotFoundException(PairingException):
    """Raised when a pairing id does not exist in the tournament."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(SwissManagerException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class RoundNotFoundException(TournamentException):
    """Raised when a requested round does not exist."""

    pass


class DuplicatePlayerException(TournamentException):
    """Raised when attempting to add a player that already exists."""

    pass


# ========== Player Exceptions ==========


class PlayerException(SwissManagerException):
    """Base exception for player-related errors."""

    pass


class PlayerNotFoundException(PlayerException):
    """Raised when a requested player cannot be found."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when player data is invalid or incomplete."""

    pass


# ========== Result Exceptions ==========


class ResultException(SwissManagerException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result is invalid (e.g. both sides reported as winners)."""

    pass


class ResultNotFoundException(ResultException):
    """Raised when a requested result cannot be found."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(SwissManagerException):
    """Base exception for validation errors."""

    pass


class InvalidSnapshotException(ValidationException):
    """Raised when tournament snapshot data has the wrong shape."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(SwissManagerException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
