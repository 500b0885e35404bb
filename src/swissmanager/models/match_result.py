"""Match result data class."""

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

from dataclasses import dataclass
from typing import Any, Dict

from swissmanager.models.enums import Outcome


@dataclass(frozen=True)
class MatchResult:
    """Represents the result of a single match.

    Attributes
    ----------
    player1_result : Outcome
        Outcome for the first side of the pairing.
    player2_result : Outcome
        Outcome for the second side of the pairing.
    is_reported : bool
        Whether the result has been reported. Unreported results are pending
        and count for nothing in the standings.
    """

    player1_result: Outcome
    player2_result: Outcome
    is_reported: bool = True

    @classmethod
    def from_outcome(cls, player1_result: Outcome) -> "MatchResult":
        """Build a reported result from the first side's outcome."""
        outcome = Outcome(player1_result)
        return cls(player1_result=outcome, player2_result=outcome.opposite())

    @property
    def is_consistent(self) -> bool:
        """One side won and the other lost, or both drew."""
        return self.player2_result is self.player1_result.opposite()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match result to dictionary."""
        return {
            "side1Outcome": self.player1_result.value,
            "side2Outcome": self.player2_result.value,
            "reported": self.is_reported,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchResult":
        """Deserialize match result from dictionary."""
        side1 = data.get("side1Outcome", data.get("player1Result"))
        side2 = data.get("side2Outcome", data.get("player2Result"))
        reported = data.get("reported", data.get("isReported", False))
        return cls(
            player1_result=Outcome(side1),
            player2_result=Outcome(side2),
            is_reported=bool(reported),
        )
