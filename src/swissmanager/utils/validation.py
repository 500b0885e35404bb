"""Validation utilities for Swiss Manager.

This module checks the shape of tournament data before it is turned into a
snapshot. The pairing and standings engines assume validated input and do
not check again.
"""

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

from typing import Any, Optional

from swissmanager.constants import (
    ALLOWED_ROUND_COUNTS,
    RESULT_DRAW,
    RESULT_LOSS,
    RESULT_WIN,
)

# Outcome each side's result requires of the other side
_OPPOSITES = {
    RESULT_WIN: RESULT_LOSS,
    RESULT_LOSS: RESULT_WIN,
    RESULT_DRAW: RESULT_DRAW,
}


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
    """

    def __init__(self, is_valid: bool, error_message: Optional[str] = None):
        self.is_valid = is_valid
        self.error_message = error_message

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return "ValidationResult(VALID)"
        return f"ValidationResult(INVALID, {self.error_message!r})"


def _invalid(message: str) -> ValidationResult:
    return ValidationResult(False, message)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# ========== Player Validation ==========


def validate_player_data(data: Any, where: str = "player") -> ValidationResult:
    """Validate a serialized player.

    Example:
        >>> validate_player_data({"id": "1", "name": "Ana", "wins": 0,
        ...                       "losses": 0, "draws": 0, "hadBye": False})
        ValidationResult(VALID)
    """
    if not isinstance(data, dict):
        return _invalid(f"{where} must be an object")

    for key in ("id", "name"):
        if not isinstance(data.get(key), str):
            return _invalid(f"{where}.{key} must be a string")

    for key in ("wins", "losses", "draws"):
        if not _is_int(data.get(key)):
            return _invalid(f"{where}.{key} must be an integer")

    had_bye = data.get("hadBye", data.get("hasByeHistory"))
    if not isinstance(had_bye, bool):
        return _invalid(f"{where}.hadBye must be a boolean")

    return ValidationResult(True)


# ========== Pairing Validation ==========


def validate_pairing_data(data: Any, where: str = "pairing") -> ValidationResult:
    """Validate a serialized pairing, including embedded players and result."""
    if not isinstance(data, dict):
        return _invalid(f"{where} must be an object")

    if not isinstance(data.get("id"), str):
        return _invalid(f"{where}.id must be a string")
    if not _is_int(data.get("round")) or data["round"] < 1:
        return _invalid(f"{where}.round must be a positive integer")

    result = validate_player_data(data.get("player1"), f"{where}.player1")
    if not result:
        return result

    player2 = data.get("player2")
    if player2 is not None:
        result = validate_player_data(player2, f"{where}.player2")
        if not result:
            return result

    match_result = data.get("result")
    if match_result is not None:
        if player2 is None:
            return _invalid(f"{where} is a bye and cannot carry a result")
        if not isinstance(match_result, dict):
            return _invalid(f"{where}.result must be an object")
        outcomes = []
        for new_key, old_key in (
            ("side1Outcome", "player1Result"),
            ("side2Outcome", "player2Result"),
        ):
            outcome = match_result.get(new_key, match_result.get(old_key))
            if outcome is not None and outcome not in _OPPOSITES:
                return _invalid(f"{where}.result.{new_key} must be win, loss or draw")
            outcomes.append(outcome)

        side1, side2 = outcomes
        if (side1 is None) != (side2 is None):
            return _invalid(f"{where}.result must give both outcomes or neither")
        if side1 is not None and side2 != _OPPOSITES[side1]:
            return _invalid(
                f"{where}.result outcomes {side1}/{side2} do not pair up: "
                "one side must win and the other lose, or both draw"
            )

    return ValidationResult(True)


# ========== Tournament Validation ==========


def validate_tournament_data(data: Any) -> ValidationResult:
    """Validate the shape of a serialized tournament snapshot.

    ``maxRounds`` may be missing (older data); ``allPairings`` is accepted
    in place of ``pairings``.

    Returns:
        ValidationResult with validation status
    """
    if not isinstance(data, dict):
        return _invalid("Tournament data must be an object")

    players = data.get("players")
    if not isinstance(players, list):
        return _invalid("players must be a list")

    pairings = data.get("pairings", data.get("allPairings"))
    if not isinstance(pairings, list):
        return _invalid("pairings must be a list")

    if not _is_int(data.get("currentRound")):
        return _invalid("currentRound must be an integer")

    max_rounds = data.get("maxRounds")
    if max_rounds is not None:
        if not _is_int(max_rounds):
            return _invalid("maxRounds must be an integer")
        if max_rounds not in ALLOWED_ROUND_COUNTS:
            return _invalid(
                f"maxRounds must be one of {list(ALLOWED_ROUND_COUNTS)}, "
                f"got {max_rounds}"
            )

    for index, player in enumerate(players):
        result = validate_player_data(player, f"players[{index}]")
        if not result:
            return result

    for index, pairing in enumerate(pairings):
        result = validate_pairing_data(pairing, f"pairings[{index}]")
        if not result:
            return result

    return ValidationResult(True)
