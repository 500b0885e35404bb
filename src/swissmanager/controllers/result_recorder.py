"""Result recording and validation for tournaments.

This module handles recording match results with proper validation and error checking.
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

from typing import List, Optional, Union

from swissmanager.exceptions import (
    InvalidResultException,
    PairingNotFoundException,
    ResultNotFoundException,
)
from swissmanager.models import MatchResult, Outcome, Pairing
from swissmanager.type_hints import OutcomeValue
from swissmanager.utils import setup_logger

logger = setup_logger(__name__)

OutcomeLike = Union[Outcome, OutcomeValue]


class ResultRecorder:
    """Handles recording and validating match results.

    This class is responsible for:
    - Checking that the two reported outcomes are logically paired
    - Refusing results for byes
    - Attaching the result to the pairing (reporting again overwrites it)
    """

    def record_result(
        self,
        pairings: List[Pairing],
        pairing_id: str,
        player1_result: OutcomeLike,
        player2_result: Optional[OutcomeLike] = None,
    ) -> Pairing:
        """Record the result of a single match.

        Args:
            pairings: All pairings; the matching entry is replaced in place
            pairing_id: Id of the pairing to report
            player1_result: Outcome for the first side
            player2_result: Outcome for the second side. Derived from
                ``player1_result`` when omitted.

        Returns:
            The updated pairing

        Raises:
            PairingNotFoundException: If no pairing has that id
            InvalidResultException: If the pairing is a bye, an outcome is
                unknown, or the two outcomes do not agree
        """
        index = self._find_index(pairings, pairing_id)
        pairing = pairings[index]

        if pairing.is_bye:
            logger.error(f"Rejected result for bye pairing {pairing_id}")
            raise InvalidResultException(
                f"{pairing.player1.name} has a bye in round "
                f"{pairing.round_number}; byes take no result"
            )

        side1 = self._parse_outcome(player1_result)
        side2 = side1.opposite() if player2_result is None else self._parse_outcome(
            player2_result
        )

        result = MatchResult(player1_result=side1, player2_result=side2)
        if not result.is_consistent:
            logger.error(
                f"Rejected inconsistent result for {pairing_id}: "
                f"{side1.value}/{side2.value}"
            )
            raise InvalidResultException(
                f"Outcomes {side1.value}/{side2.value} are not a valid pair: "
                "one side must win and the other lose, or both draw"
            )

        if pairing.is_reported:
            logger.info(f"Overwriting reported result for pairing {pairing_id}")

        updated = pairing.with_result(result)
        pairings[index] = updated

        logger.debug(
            f"Recorded: {pairing.player1.name} ({side1.value}) vs "
            f"{pairing.player2.name} ({side2.value})"
        )
        return updated

    def clear_result(self, pairings: List[Pairing], pairing_id: str) -> Pairing:
        """Remove a reported result, returning the match to pending.

        Raises:
            PairingNotFoundException: If no pairing has that id
            ResultNotFoundException: If the pairing has no reported result
        """
        index = self._find_index(pairings, pairing_id)
        pairing = pairings[index]

        if not pairing.is_reported:
            raise ResultNotFoundException(f"Pairing {pairing_id} has no result to clear")

        updated = pairing.with_result(None)
        pairings[index] = updated
        logger.info(f"Cleared result for pairing {pairing_id}")
        return updated

    def _find_index(self, pairings: List[Pairing], pairing_id: str) -> int:
        for index, pairing in enumerate(pairings):
            if pairing.id == pairing_id:
                return index
        logger.error(f"Cannot find pairing: {pairing_id}")
        raise PairingNotFoundException(f"No pairing with id {pairing_id!r}")

    def _parse_outcome(self, value: OutcomeLike) -> Outcome:
        try:
            return Outcome(value)
        except ValueError as e:
            raise InvalidResultException(
                f"Unknown outcome {value!r}; expected win, loss or draw"
            ) from e
