"""Standings and tie-break calculation.

This module derives every player statistic from the pairing history: match
records, strength of schedule, head-to-head results and the final ranking.
Nothing here mutates its inputs.
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

import functools
import locale
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Sequence

from swissmanager.constants import (
    BYE_POINTS,
    DRAW_POINTS,
    H2H_A,
    H2H_B,
    H2H_TIE,
    LOSS_POINTS,
    SOS_EPSILON,
    WIN_POINTS,
)
from swissmanager.models import Outcome, Pairing, Player
from swissmanager.type_hints import HeadToHead
from swissmanager.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class PlayerRecord:
    """A player's record recomputed from the pairing history.

    Attributes:
        wins: Reported match wins
        losses: Reported match losses
        draws: Reported match draws
        byes: Rounds with no opponent
        points: ``3 * wins + draws + 3 * byes``
        win_percentage: ``wins / total_games``, or 0 with no games
        total_games: ``wins + losses + draws``; byes are not games
    """

    wins: int = 0
    losses: int = 0
    draws: int = 0
    byes: int = 0
    points: int = 0
    win_percentage: float = 0.0
    total_games: int = 0


@dataclass(frozen=True)
class StandingEntry:
    """One line of the standings table."""

    rank: int
    player: Player
    record: PlayerRecord
    strength_of_schedule: float


def compute_record(player: Player, pairings: Sequence[Pairing]) -> PlayerRecord:
    """Compute a player's record from every pairing that involves them.

    A bye counts as a bye, a reported match counts the outcome on the
    player's side, and an unreported match counts for nothing.
    """
    wins = losses = draws = byes = 0

    for pairing in pairings:
        if not pairing.involves(player.id):
            continue

        if pairing.is_bye:
            byes += 1
            continue

        outcome = pairing.outcome_for(player.id)
        if outcome is Outcome.WIN:
            wins += 1
        elif outcome is Outcome.LOSS:
            losses += 1
        elif outcome is Outcome.DRAW:
            draws += 1

    points = (
        wins * WIN_POINTS
        + draws * DRAW_POINTS
        + losses * LOSS_POINTS
        + byes * BYE_POINTS
    )
    total_games = wins + losses + draws
    win_percentage = wins / total_games if total_games > 0 else 0.0

    return PlayerRecord(
        wins=wins,
        losses=losses,
        draws=draws,
        byes=byes,
        points=points,
        win_percentage=win_percentage,
        total_games=total_games,
    )


def compute_points(player: Player, pairings: Sequence[Pairing]) -> int:
    """Current match points for ``player``."""
    return compute_record(player, pairings).points


def get_opponents(player: Player, pairings: Sequence[Pairing]) -> List[Player]:
    """Distinct opponents faced in non-bye pairings, in first-met order."""
    seen = set()
    opponents = []
    for pairing in pairings:
        opponent = pairing.opponent_of(player.id)
        if opponent is None or opponent.id in seen:
            continue
        seen.add(opponent.id)
        opponents.append(opponent)
    return opponents


def strength_of_schedule(
    player: Player,
    pairings: Sequence[Pairing],
    records: Optional[Dict[str, PlayerRecord]] = None,
) -> float:
    """Average points of every distinct opponent the player has faced.

    Args:
        player: The player to calculate for
        pairings: Full pairing history
        records: Optional precomputed records keyed by player id

    Returns:
        The average opponent points, or 0 when no opponents have been met
    """
    opponents = get_opponents(player, pairings)
    if not opponents:
        return 0.0

    total = 0
    for opponent in opponents:
        if records is not None and opponent.id in records:
            total += records[opponent.id].points
        else:
            total += compute_record(opponent, pairings).points
    return total / len(opponents)


def head_to_head(
    player_a: Player, player_b: Player, pairings: Sequence[Pairing]
) -> HeadToHead:
    """Return which side won the match between the two players.

    Only the first pairing between them is considered. Returns ``"tie"``
    when they never met, drew, or the result is still pending.
    """
    match = next((p for p in pairings if p.is_between(player_a.id, player_b.id)), None)
    if match is None or not match.is_reported:
        return H2H_TIE

    outcome = match.outcome_for(player_a.id)
    if outcome is Outcome.WIN:
        return H2H_A
    if outcome is Outcome.LOSS:
        return H2H_B
    return H2H_TIE


def _name_key(name: str) -> str:
    return locale.strxfrm(name.casefold())


@dataclass(frozen=True)
class _RankingKey:
    points: int
    win_percentage: float
    strength_of_schedule: float
    total_games: int
    name_key: str
    name: str


def _compare(
    a: Player,
    b: Player,
    keys: Dict[str, _RankingKey],
    pairings: Sequence[Pairing],
) -> int:
    """Tie-break chain. Negative means ``a`` ranks above ``b``."""
    key_a = keys[a.id]
    key_b = keys[b.id]

    if key_a.points != key_b.points:
        return key_b.points - key_a.points

    if key_a.win_percentage != key_b.win_percentage:
        return -1 if key_a.win_percentage > key_b.win_percentage else 1

    sos_diff = key_b.strength_of_schedule - key_a.strength_of_schedule
    if abs(sos_diff) >= SOS_EPSILON:
        return -1 if sos_diff < 0 else 1

    # Only consulted for the exact two players being compared, so a cycle
    # (A beat B, B beat C, C beat A) can make the overall order depend on
    # the sort's comparison sequence.
    h2h = head_to_head(a, b, pairings)
    if h2h == H2H_A:
        return -1
    if h2h == H2H_B:
        return 1

    if key_a.total_games != key_b.total_games:
        return key_a.total_games - key_b.total_games

    if key_a.name_key != key_b.name_key:
        return -1 if key_a.name_key < key_b.name_key else 1
    if key_a.name != key_b.name:
        return -1 if key_a.name < key_b.name else 1
    return 0


def compute_standings(
    players: Sequence[Player], pairings: Sequence[Pairing]
) -> List[StandingEntry]:
    """Rank players and return one StandingEntry per player.

    Order: points, win percentage, strength of schedule (differences under
    0.01 are equal), head-to-head, fewer games played, then name.
    """
    records = {p.id: compute_record(p, pairings) for p in players}
    sos = {p.id: strength_of_schedule(p, pairings, records) for p in players}
    keys = {
        p.id: _RankingKey(
            points=records[p.id].points,
            win_percentage=records[p.id].win_percentage,
            strength_of_schedule=sos[p.id],
            total_games=records[p.id].total_games,
            name_key=_name_key(p.name),
            name=p.name,
        )
        for p in players
    }

    ordered = sorted(
        players,
        key=functools.cmp_to_key(lambda a, b: _compare(a, b, keys, pairings)),
    )

    logger.debug(f"Ranked {len(ordered)} players over {len(pairings)} pairings")
    return [
        StandingEntry(
            rank=index + 1,
            player=player,
            record=records[player.id],
            strength_of_schedule=sos[player.id],
        )
        for index, player in enumerate(ordered)
    ]


def rank_players(
    players: Sequence[Player], pairings: Sequence[Pairing]
) -> List[Player]:
    """Players in final standings order."""
    return [entry.player for entry in compute_standings(players, pairings)]


def recalculate_player_records(
    players: Sequence[Player], pairings: Sequence[Pairing]
) -> List[Player]:
    """Return copies of ``players`` whose cached fields match the history."""
    updated = []
    for player in players:
        record = compute_record(player, pairings)
        updated.append(
            replace(
                player,
                wins=record.wins,
                losses=record.losses,
                draws=record.draws,
                has_received_bye=record.byes > 0,
            )
        )
    return updated


def format_record(record: PlayerRecord) -> str:
    """Format a record as ``W-L-D``, with byes appended when present."""
    text = f"{record.wins}-{record.losses}-{record.draws}"
    if record.byes:
        text += f" ({record.byes} bye{'s' if record.byes > 1 else ''})"
    return text
