"""Index of who has already played whom."""

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
from typing import Iterable, Set

from swissmanager.models.pairing import Pairing


@dataclass
class PairingHistory:
    """
    Tracks historical pairings to prevent rematches.

    Attributes
    ----------
    previous_matches : set of frozenset of str
        Set containing frozensets of player ID pairs representing
        matches that have already been paired. Byes are not recorded.
    """

    previous_matches: Set[frozenset] = field(default_factory=set)

    @classmethod
    def from_pairings(cls, pairings: Iterable[Pairing]) -> "PairingHistory":
        """Build the index from a list of pairings across all rounds."""
        history = cls()
        for pairing in pairings:
            if pairing.player2 is not None:
                history.add_pairing(pairing.player1.id, pairing.player2.id)
        return history

    def add_pairing(self, player1_id: str, player2_id: str) -> None:
        """Record that two players have been paired."""
        self.previous_matches.add(frozenset({player1_id, player2_id}))

    def have_played(self, player1_id: str, player2_id: str) -> bool:
        """Check if two players have previously played each other."""
        return frozenset({player1_id, player2_id}) in self.previous_matches

    def __len__(self) -> int:
        return len(self.previous_matches)
