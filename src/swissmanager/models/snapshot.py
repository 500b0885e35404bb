"""Tournament snapshot: the unit of persistence handed to the core."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from swissmanager.constants import DEFAULT_MAX_ROUNDS
from swissmanager.models.pairing import Pairing
from swissmanager.models.player import Player


@dataclass(frozen=True)
class TournamentSnapshot:
    """Immutable view of a whole tournament.

    Attributes
    ----------
    players : tuple of Player
        Roster, in entry order.
    pairings : tuple of Pairing
        Every pairing of every round, in creation order.
    current_round : int
        Round currently being played (1-indexed).
    max_rounds : int
        Configured number of rounds.

    Notes
    -----
    The snapshot does not validate itself. Shape checks belong to the
    boundary that builds it, see
    :func:`swissmanager.utils.validation.validate_tournament_data`.
    """

    players: Tuple[Player, ...] = field(default_factory=tuple)
    pairings: Tuple[Pairing, ...] = field(default_factory=tuple)
    current_round: int = 1
    max_rounds: int = DEFAULT_MAX_ROUNDS

    def round_pairings(self, round_number: int) -> List[Pairing]:
        """Pairings whose round matches ``round_number``."""
        return [p for p in self.pairings if p.round_number == round_number]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize snapshot to dictionary."""
        return {
            "players": [p.to_dict() for p in self.players],
            "pairings": [p.to_dict() for p in self.pairings],
            "currentRound": self.current_round,
            "maxRounds": self.max_rounds,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentSnapshot":
        """Deserialize snapshot from dictionary.

        ``allPairings`` is accepted in place of ``pairings``, and a missing
        ``maxRounds`` defaults to 4, for data written by older versions.
        """
        pairings_data = data.get("pairings", data.get("allPairings", []))
        max_rounds = data.get("maxRounds")
        return cls(
            players=tuple(Player.from_dict(p) for p in data.get("players", [])),
            pairings=tuple(Pairing.from_dict(p) for p in pairings_data),
            current_round=data.get("currentRound", 1),
            max_rounds=max_rounds if max_rounds is not None else DEFAULT_MAX_ROUNDS,
        )
