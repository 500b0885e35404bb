"""Pairing data class: one table (or one bye) in one round."""

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

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

from swissmanager.models.enums import Outcome
from swissmanager.models.match_result import MatchResult
from swissmanager.models.player import Player
from swissmanager.utils import generate_id


@dataclass(frozen=True)
class Pairing:
    """A pairing between two players, or a bye when ``player2`` is None.

    Attributes
    ----------
    id : str
        Unique pairing identifier.
    round_number : int
        Round this pairing belongs to (1-indexed).
    player1 : Player
        First side.
    player2 : Player or None
        Second side; ``None`` encodes a bye.
    result : MatchResult or None
        Attached once the result is reported. A bye never has a result.
    """

    id: str
    round_number: int
    player1: Player
    player2: Optional[Player] = None
    result: Optional[MatchResult] = None

    @classmethod
    def create(
        cls, round_number: int, player1: Player, player2: Optional[Player] = None
    ) -> "Pairing":
        """Create an unreported pairing with a fresh id."""
        return cls(
            id=generate_id(f"r{round_number}"),
            round_number=round_number,
            player1=player1,
            player2=player2,
        )

    @property
    def is_bye(self) -> bool:
        return self.player2 is None

    @property
    def is_reported(self) -> bool:
        return self.result is not None and self.result.is_reported

    @property
    def is_complete(self) -> bool:
        """Byes are complete as soon as they exist."""
        return self.is_bye or self.is_reported

    @property
    def player_ids(self) -> Tuple[str, ...]:
        if self.player2 is None:
            return (self.player1.id,)
        return (self.player1.id, self.player2.id)

    def involves(self, player_id: str) -> bool:
        return player_id in self.player_ids

    def is_between(self, player_a_id: str, player_b_id: str) -> bool:
        """Check whether this is a (non-bye) match between the two players."""
        if self.player2 is None:
            return False
        return {self.player1.id, self.player2.id} == {player_a_id, player_b_id}

    def opponent_of(self, player_id: str) -> Optional[Player]:
        """Return the other side for ``player_id``, or None for a bye."""
        if self.player1.id == player_id:
            return self.player2
        if self.player2 is not None and self.player2.id == player_id:
            return self.player1
        return None

    def outcome_for(self, player_id: str) -> Optional[Outcome]:
        """Reported outcome from ``player_id``'s side, or None if pending."""
        if not self.is_reported:
            return None
        if self.player1.id == player_id:
            return self.result.player1_result
        if self.player2 is not None and self.player2.id == player_id:
            return self.result.player2_result
        return None

    def with_result(self, result: Optional[MatchResult]) -> "Pairing":
        """Return a copy of this pairing carrying ``result``."""
        return replace(self, result=result)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing to dictionary."""
        data: Dict[str, Any] = {
            "id": self.id,
            "round": self.round_number,
            "player1": self.player1.to_dict(),
            "player2": self.player2.to_dict() if self.player2 else None,
        }
        if self.result is not None:
            data["result"] = self.result.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pairing":
        """Deserialize pairing from dictionary.

        Results missing either outcome are treated as absent (pending).
        """
        player2_data = data.get("player2")
        result_data = data.get("result")
        result = None
        if result_data:
            side1 = result_data.get("side1Outcome", result_data.get("player1Result"))
            side2 = result_data.get("side2Outcome", result_data.get("player2Result"))
            if side1 is not None and side2 is not None:
                result = MatchResult.from_dict(result_data)
        return cls(
            id=str(data["id"]),
            round_number=data["round"],
            player1=Player.from_dict(data["player1"]),
            player2=Player.from_dict(player2_data) if player2_data else None,
            result=None if player2_data is None else result,
        )
