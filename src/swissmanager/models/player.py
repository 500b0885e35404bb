"""A player entered in a Swiss tournament."""

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

from swissmanager.utils import generate_id


@dataclass
class Player:
    """
    A tournament participant.

    The win/loss/draw counters and the bye flag are caches of values that
    can be derived from the pairing history. The standings engine
    recomputes them after every pairing or result change; they are never
    the authoritative record.

    Attributes
    ----------
    id : str
        Stable unique identifier.
    name : str
        Display name.
    wins : int
        Cached number of reported match wins. Byes are not wins.
    losses : int
        Cached number of losses.
    draws : int
        Cached number of draws.
    has_received_bye : bool
        Whether the player has ever been given a bye.

    Examples
    --------
    Creating a player::

        player = Player.create("Jace Beleren")
        player.record  # "0-0-0"
    """

    id: str
    name: str
    wins: int = 0
    losses: int = 0
    draws: int = 0
    has_received_bye: bool = False

    @classmethod
    def create(
        cls, name: str, wins: int = 0, losses: int = 0, draws: int = 0
    ) -> "Player":
        """Create a new player with a freshly generated id."""
        return cls(
            id=generate_id("player"),
            name=name,
            wins=wins,
            losses=losses,
            draws=draws,
        )

    @property
    def record(self) -> str:
        """Cached record formatted as ``W-L-D``."""
        return f"{self.wins}-{self.losses}-{self.draws}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "wins": self.wins,
            "losses": self.losses,
            "draws": self.draws,
            "hadBye": self.has_received_bye,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary.

        Accepts the older ``hasByeHistory`` key as well as ``hadBye``.
        """
        had_bye = data.get("hadBye", data.get("hasByeHistory", False))
        return cls(
            id=str(data["id"]),
            name=data["name"],
            wins=data.get("wins", 0),
            losses=data.get("losses", 0),
            draws=data.get("draws", 0),
            has_received_bye=bool(had_bye),
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.record})"
