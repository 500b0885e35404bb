"""Round management for tournaments.

This module handles all round-related operations including pairing generation,
round progression, and round completion checks.
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

import random
from typing import List, Optional, Sequence, Tuple

from swissmanager.exceptions import RoundNotFoundException, TournamentStateException
from swissmanager.models import Pairing, Player
from swissmanager.pairing import generate_swiss_pairings
from swissmanager.type_hints import RandomSource
from swissmanager.utils import setup_logger

logger = setup_logger(__name__)


class RoundManager:
    """Manages round progression and pairing generation for tournaments.

    This class is responsible for:
    - Generating pairings for the current round
    - Holding the pairing history of every round
    - Deciding when a round is complete and the next may start
    """

    def __init__(
        self,
        max_rounds: int,
        rng: Optional[RandomSource] = None,
        pairings: Optional[Sequence[Pairing]] = None,
        current_round: int = 1,
    ):
        """Initialize the round manager.

        Args:
            max_rounds: Total number of rounds in the tournament
            rng: Random source handed to the pairing engine
            pairings: Existing pairing history, e.g. from a loaded snapshot
            current_round: The round currently being played (1-indexed)
        """
        self.max_rounds = max_rounds
        self.rng = rng if rng is not None else random.Random()
        self.pairings: List[Pairing] = list(pairings or [])
        self.current_round = current_round

    def get_round(self, round_number: int) -> List[Pairing]:
        """Get the pairings of a specific round.

        Args:
            round_number: The round number (1-indexed)

        Returns:
            Pairings of that round, possibly empty if not generated yet

        Raises:
            RoundNotFoundException: If the round is outside 1..max_rounds
        """
        if not 1 <= round_number <= self.max_rounds:
            raise RoundNotFoundException(
                f"Round {round_number} does not exist (1-{self.max_rounds})"
            )
        return [p for p in self.pairings if p.round_number == round_number]

    def has_pairings(self, round_number: int) -> bool:
        return any(p.round_number == round_number for p in self.pairings)

    def round_progress(self, round_number: int) -> Tuple[int, int]:
        """Return (completed, total) pairings for a round; byes count as done."""
        round_pairings = self.get_round(round_number)
        completed = sum(1 for p in round_pairings if p.is_complete)
        return completed, len(round_pairings)

    def is_round_complete(self, round_number: int) -> bool:
        """A round is complete once it has pairings and every match is reported."""
        round_pairings = self.get_round(round_number)
        return bool(round_pairings) and all(p.is_complete for p in round_pairings)

    @property
    def is_tournament_complete(self) -> bool:
        """The final round has been paired and fully reported."""
        return self.current_round == self.max_rounds and self.is_round_complete(
            self.max_rounds
        )

    def create_next_round(self, players: Sequence[Player]) -> List[Pairing]:
        """Generate pairings for the current round.

        Args:
            players: Current roster

        Returns:
            The new pairings. Empty when fewer than two players are entered
            or every round has already been played.

        Raises:
            TournamentStateException: If the current round is already paired
        """
        if len(players) < 2:
            logger.info(f"Not pairing round {self.current_round}: fewer than 2 players")
            return []

        if self.current_round > self.max_rounds:
            logger.info(
                f"Not pairing round {self.current_round}: "
                f"tournament only has {self.max_rounds} rounds"
            )
            return []

        if self.has_pairings(self.current_round):
            raise TournamentStateException(
                f"Round {self.current_round} has already been paired"
            )

        new_pairings = generate_swiss_pairings(
            players, self.pairings, self.current_round, self.rng
        )
        self.pairings.extend(new_pairings)

        logger.info(
            f"Created round {self.current_round} with {len(new_pairings)} pairings"
        )
        return new_pairings

    def advance_round(self) -> int:
        """Move on to the next round.

        Returns:
            The new current round number

        Raises:
            TournamentStateException: If the current round is incomplete or
                it is already the last round
        """
        if self.current_round >= self.max_rounds:
            raise TournamentStateException(
                f"Round {self.current_round} is the last round of {self.max_rounds}"
            )

        if not self.is_round_complete(self.current_round):
            completed, total = self.round_progress(self.current_round)
            raise TournamentStateException(
                f"Round {self.current_round} is not complete "
                f"({completed}/{total} matches reported)"
            )

        self.current_round += 1
        logger.info(f"Advanced to round {self.current_round}")
        return self.current_round

    def clear(self) -> None:
        """Drop every pairing and return to round 1."""
        self.pairings = []
        self.current_round = 1
        logger.info("Cleared all pairings")
