"""Round validator: checks generated rounds against the pairing guarantees.

Absolute criteria must never be violated by the pairing engine. Quality
criteria (rematches, repeated byes) are allowed when the pool leaves no
alternative and are reported as warnings.
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

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Sequence

from swissmanager.models import Pairing, PairingHistory, Player, TournamentSnapshot
from swissmanager.utils import setup_logger

logger = setup_logger(__name__)


class CriterionStatus(Enum):
    """Status of a criterion check."""

    COMPLIANT = "COMPLIANT"
    VIOLATION = "VIOLATION"


class ViolationType(Enum):
    """Types of criterion violations."""

    ABSOLUTE = "ABSOLUTE"  # Must not happen
    QUALITY = "QUALITY"  # Tolerated when unavoidable


# Criterion ids
PAIRING_COUNT = "pairing_count"
BYE_COUNT = "bye_count"
UNIQUE_PLAYERS = "unique_players"
ALL_PLAYERS_PAIRED = "all_players_paired"
BYE_WITHOUT_RESULT = "bye_without_result"
CONSISTENT_RESULTS = "consistent_results"
NO_REMATCH = "no_rematch"
NO_REPEAT_BYE = "no_repeat_bye"


@dataclass
class CriterionResult:
    """Result of checking a single criterion in one round."""

    criterion: str
    round_number: int
    status: CriterionStatus
    violation_type: ViolationType = ViolationType.ABSOLUTE
    description: str = ""
    details: Dict[str, object] = field(default_factory=dict)

    @property
    def is_violation(self) -> bool:
        return self.status is CriterionStatus.VIOLATION


@dataclass
class ValidationReport:
    """Validation report for one or more rounds."""

    results: List[CriterionResult] = field(default_factory=list)

    @property
    def violations(self) -> List[CriterionResult]:
        return [
            r
            for r in self.results
            if r.is_violation and r.violation_type is ViolationType.ABSOLUTE
        ]

    @property
    def quality_warnings(self) -> List[CriterionResult]:
        return [
            r
            for r in self.results
            if r.is_violation and r.violation_type is ViolationType.QUALITY
        ]

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def compliance_percentage(self) -> float:
        if not self.results:
            return 100.0
        compliant = sum(1 for r in self.results if not r.is_violation)
        return compliant / len(self.results) * 100.0

    def summary(self) -> str:
        return (
            f"{len(self.results)} checks, {len(self.violations)} violations, "
            f"{len(self.quality_warnings)} warnings "
            f"({self.compliance_percentage:.1f}% compliant)"
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            "summary": self.summary(),
            "is_valid": self.is_valid,
            "compliance_percentage": self.compliance_percentage,
            "violations": [
                {
                    "criterion": r.criterion,
                    "round": r.round_number,
                    "type": r.violation_type.value,
                    "description": r.description,
                }
                for r in self.violations + self.quality_warnings
            ],
        }


class RoundValidator:
    """Checks each round of a tournament against the pairing guarantees."""

    def validate_round(
        self,
        players: Sequence[Player],
        previous_pairings: Sequence[Pairing],
        round_pairings: Sequence[Pairing],
        round_number: int,
    ) -> List[CriterionResult]:
        """Validate one round's pairings given everything paired before it."""
        checks = [
            self._check_pairing_count(players, round_pairings, round_number),
            self._check_bye_count(players, round_pairings, round_number),
            self._check_unique_players(round_pairings, round_number),
            self._check_all_players_paired(players, round_pairings, round_number),
            self._check_bye_without_result(round_pairings, round_number),
            self._check_consistent_results(round_pairings, round_number),
            self._check_no_rematch(previous_pairings, round_pairings, round_number),
            self._check_no_repeat_bye(previous_pairings, round_pairings, round_number),
        ]
        for check in checks:
            if check.is_violation:
                logger.debug(
                    f"Round {round_number}: {check.criterion} {check.description}"
                )
        return checks

    def validate_snapshot(self, snapshot: TournamentSnapshot) -> ValidationReport:
        """Validate every paired round of a snapshot."""
        report = ValidationReport()
        rounds = sorted({p.round_number for p in snapshot.pairings})
        for round_number in rounds:
            previous = [p for p in snapshot.pairings if p.round_number < round_number]
            current = snapshot.round_pairings(round_number)
            report.results.extend(
                self.validate_round(snapshot.players, previous, current, round_number)
            )
        logger.info(f"Validated {len(rounds)} rounds: {report.summary()}")
        return report

    # ========== Absolute criteria ==========

    def _result(
        self,
        criterion: str,
        round_number: int,
        ok: bool,
        description: str = "",
        violation_type: ViolationType = ViolationType.ABSOLUTE,
        **details: object,
    ) -> CriterionResult:
        return CriterionResult(
            criterion=criterion,
            round_number=round_number,
            status=CriterionStatus.COMPLIANT if ok else CriterionStatus.VIOLATION,
            violation_type=violation_type,
            description="" if ok else description,
            details=dict(details),
        )

    def _check_pairing_count(self, players, round_pairings, round_number):
        expected = math.ceil(len(players) / 2)
        actual = len(round_pairings)
        return self._result(
            PAIRING_COUNT,
            round_number,
            actual == expected,
            f"expected {expected} pairings, found {actual}",
            expected=expected,
            actual=actual,
        )

    def _check_bye_count(self, players, round_pairings, round_number):
        expected = len(players) % 2
        actual = sum(1 for p in round_pairings if p.is_bye)
        return self._result(
            BYE_COUNT,
            round_number,
            actual == expected,
            f"expected {expected} byes, found {actual}",
        )

    def _check_unique_players(self, round_pairings, round_number):
        seen = set()
        duplicates = set()
        for pairing in round_pairings:
            ids = pairing.player_ids
            if len(set(ids)) != len(ids):
                duplicates.update(ids)
            for player_id in ids:
                if player_id in seen:
                    duplicates.add(player_id)
                seen.add(player_id)
        return self._result(
            UNIQUE_PLAYERS,
            round_number,
            not duplicates,
            f"players paired more than once: {sorted(duplicates)}",
        )

    def _check_all_players_paired(self, players, round_pairings, round_number):
        paired = {pid for p in round_pairings for pid in p.player_ids}
        missing = [p.name for p in players if p.id not in paired]
        return self._result(
            ALL_PLAYERS_PAIRED,
            round_number,
            not missing,
            f"players left out: {missing}",
        )

    def _check_bye_without_result(self, round_pairings, round_number):
        bad = [p.id for p in round_pairings if p.is_bye and p.result is not None]
        return self._result(
            BYE_WITHOUT_RESULT,
            round_number,
            not bad,
            f"byes carrying a result: {bad}",
        )

    def _check_consistent_results(self, round_pairings, round_number):
        bad = [
            p.id
            for p in round_pairings
            if p.result is not None and not p.result.is_consistent
        ]
        return self._result(
            CONSISTENT_RESULTS,
            round_number,
            not bad,
            f"results whose outcomes do not pair up: {bad}",
        )

    # ========== Quality criteria ==========

    def _check_no_rematch(self, previous_pairings, round_pairings, round_number):
        history = PairingHistory.from_pairings(previous_pairings)
        rematches = [
            f"{p.player1.name} vs {p.player2.name}"
            for p in round_pairings
            if not p.is_bye and history.have_played(p.player1.id, p.player2.id)
        ]
        return self._result(
            NO_REMATCH,
            round_number,
            not rematches,
            f"rematches: {rematches}",
            ViolationType.QUALITY,
        )

    def _check_no_repeat_bye(self, previous_pairings, round_pairings, round_number):
        had_bye = {p.player1.id for p in previous_pairings if p.is_bye}
        repeats = [
            p.player1.name for p in round_pairings if p.is_bye and p.player1.id in had_bye
        ]
        return self._result(
            NO_REPEAT_BYE,
            round_number,
            not repeats,
            f"second bye for: {repeats}",
            ViolationType.QUALITY,
        )


def create_round_validator() -> RoundValidator:
    """Factory function for creating a round validator."""
    return RoundValidator()
