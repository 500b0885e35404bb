"""Score-bracket Swiss pairing with rematch avoidance and bye allocation."""

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
from dataclasses import replace
from typing import Dict, List, Optional, Sequence, Tuple

from swissmanager.models import Pairing, PairingHistory, Player
from swissmanager.tournament.standings import PlayerRecord, compute_record
from swissmanager.type_hints import PlayerPair, RandomSource
from swissmanager.utils import setup_logger

logger = setup_logger(__name__)


def group_players_by_points(
    players: Sequence[Player],
    pairings: Sequence[Pairing],
    records: Optional[Dict[str, PlayerRecord]] = None,
) -> List[List[Player]]:
    """Partition players into score brackets, highest points first.

    Players keep their roster order inside a bracket.
    """
    if records is None:
        records = {p.id: compute_record(p, pairings) for p in players}

    brackets: Dict[int, List[Player]] = {}
    for player in players:
        brackets.setdefault(records[player.id].points, []).append(player)
    return [brackets[points] for points in sorted(brackets, reverse=True)]


def _find_rematch_free_index(
    player: Player, candidates: Sequence[Player], history: PairingHistory
) -> Optional[int]:
    """Index of the first candidate ``player`` has never met, or None."""
    for i, candidate in enumerate(candidates):
        if not history.have_played(player.id, candidate.id):
            return i
    return None


def _greedy_pair_pool(
    pool: List[Player], history: PairingHistory
) -> Tuple[List[PlayerPair], List[Player]]:
    """Pair the pool front to back without rematches.

    The first remaining player takes the first candidate they have never
    met. A player with no such candidate is set aside as unpaired.

    Returns:
        (matched pairs, unpaired players in the order they were set aside)
    """
    matched = []
    unpaired = []
    remaining = list(pool)

    while len(remaining) > 1:
        player1 = remaining.pop(0)
        index = _find_rematch_free_index(player1, remaining, history)
        if index is None:
            unpaired.append(player1)
            continue
        player2 = remaining.pop(index)
        matched.append((player1, player2))

    unpaired.extend(remaining)
    return matched, unpaired


def _has_had_bye(player: Player, record: PlayerRecord) -> bool:
    return player.has_received_bye or record.byes > 0


def select_bye_player(
    candidates: Sequence[Player],
    pairings: Sequence[Pairing],
    round_number: int,
    rng: RandomSource,
    records: Optional[Dict[str, PlayerRecord]] = None,
) -> Player:
    """Choose who sits out this round.

    Round 1 picks uniformly at random. Later rounds prefer the lowest
    points, then a player who has not had a bye yet, then break any
    remaining tie at random.
    """
    if not candidates:
        raise ValueError("Cannot select a bye from an empty candidate list")

    if round_number <= 1:
        return rng.choice(list(candidates))

    if records is None:
        records = {p.id: compute_record(p, pairings) for p in candidates}

    def priority(player: Player) -> Tuple[int, bool]:
        record = records[player.id]
        return record.points, _has_had_bye(player, record)

    best = min(priority(p) for p in candidates)
    tied = [p for p in candidates if priority(p) == best]
    return rng.choice(tied)


def _repair_with_swap(
    player1: Player,
    player2: Player,
    matched: List[PlayerPair],
    history: PairingHistory,
) -> bool:
    """Try to avoid the rematch ``player1``-``player2`` by splitting a made pair.

    If some already matched pair (x, y) can be regrouped into two rematch
    free pairs with the two leftovers, ``matched`` is rewritten in place.
    """
    for index, (x, y) in enumerate(matched):
        for a, b in ((x, y), (y, x)):
            if not history.have_played(player1.id, a.id) and not history.have_played(
                player2.id, b.id
            ):
                matched[index] = (a, player1)
                matched.append((b, player2))
                logger.debug(
                    f"Avoided rematch {player1.name} vs {player2.name} "
                    f"by splitting {x.name} vs {y.name}"
                )
                return True
    return False


def _pair_remaining(
    players: List[Player],
    history: PairingHistory,
    matched: List[PlayerPair],
) -> None:
    """Pair off an even pool, appending to ``matched``.

    A rematch-free opponent is always preferred. When none is left for the
    current player anywhere in the pool, the pair is regrouped with an
    already made pair if possible, and only then made as a rematch.
    """
    remaining = list(players)
    while len(remaining) > 1:
        player1 = remaining.pop(0)
        index = _find_rematch_free_index(player1, remaining, history)
        if index is not None:
            matched.append((player1, remaining.pop(index)))
            continue

        player2 = remaining.pop(0)
        if _repair_with_swap(player1, player2, matched, history):
            continue

        logger.warning(
            f"Forced rematch: {player1.name} vs {player2.name} "
            "(no rematch-free opponent left)"
        )
        matched.append((player1, player2))


def generate_swiss_pairings(
    players: Sequence[Player],
    pairings: Sequence[Pairing],
    round_number: int,
    rng: Optional[RandomSource] = None,
) -> List[Pairing]:
    """Create the pairings for one round.

    Args:
        players: Current roster
        pairings: Every pairing made so far, across all rounds
        round_number: The 1-based round being paired
        rng: Random source for bracket shuffling and bye selection; pass a
            seeded ``random.Random`` for reproducible rounds

    Returns:
        ``ceil(len(players) / 2)`` new pairings, at most one of them a bye.
        Fewer than two players gives an empty list.
    """
    if len(players) < 2:
        return []

    if rng is None:
        rng = random.Random()

    history = PairingHistory.from_pairings(pairings)
    records = {p.id: compute_record(p, pairings) for p in players}
    brackets = group_players_by_points(players, pairings, records)

    logger.info(
        f"Pairing round {round_number}: {len(players)} players "
        f"in {len(brackets)} score brackets, {len(history)} previous matches"
    )

    matched: List[PlayerPair] = []
    unpaired: List[Player] = []

    # Pair inside each bracket, carrying leftovers down to the next one
    for bracket in brackets:
        pool = list(bracket) + unpaired
        rng.shuffle(pool)
        bracket_pairs, unpaired = _greedy_pair_pool(pool, history)
        matched.extend(bracket_pairs)

    # Leftovers may come from different brackets
    if len(unpaired) > 1:
        cross_pairs, unpaired = _greedy_pair_pool(unpaired, history)
        matched.extend(cross_pairs)

    bye_player: Optional[Player] = None
    if len(unpaired) == 1:
        bye_player = unpaired.pop()
    elif len(unpaired) > 1:
        if len(unpaired) % 2 == 1:
            bye_player = select_bye_player(
                unpaired, pairings, round_number, rng, records
            )
            unpaired.remove(bye_player)
        _pair_remaining(unpaired, history, matched)

    new_pairings = [
        Pairing.create(round_number, player1, player2) for player1, player2 in matched
    ]
    for pairing in new_pairings:
        logger.debug(
            f"Round {round_number}: {pairing.player1.name} vs {pairing.player2.name}"
        )

    if bye_player is not None:
        bye_player = replace(bye_player, has_received_bye=True)
        new_pairings.append(Pairing.create(round_number, bye_player))
        logger.info(f"Round {round_number}: bye assigned to {bye_player.name}")

    return new_pairings
