"""Main Tournament class - orchestrates all tournament operations.

This is the primary interface for running a Swiss event: it owns the roster
and the pairing history, and coordinates the round manager, the result
recorder and the standings engine.
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
from typing import Any, Dict, List, Optional, Sequence, Tuple

from swissmanager.constants import DEFAULT_MAX_ROUNDS
from swissmanager.controllers.result_recorder import OutcomeLike, ResultRecorder
from swissmanager.controllers.round_manager import RoundManager
from swissmanager.exceptions import (
    DuplicatePlayerException,
    InvalidPlayerDataException,
    InvalidSnapshotException,
    PlayerNotFoundException,
    TournamentStateException,
)
from swissmanager.models import Pairing, Player, TournamentConfig, TournamentSnapshot
from swissmanager.tournament.standings import (
    StandingEntry,
    compute_standings,
    recalculate_player_records,
)
from swissmanager.type_hints import RandomSource
from swissmanager.utils import setup_logger
from swissmanager.utils.validation import validate_tournament_data

logger = setup_logger(__name__)


class Tournament:
    """Main tournament management class.

    This class coordinates all tournament operations through specialized managers:
    - RoundManager: handles pairing generation and round progression
    - ResultRecorder: validates and attaches match results
    - standings engine: recomputes records and the final ranking

    Player win/loss/draw counts and bye flags are recomputed from the
    pairing history after every change, so they can never drift from it.
    """

    def __init__(
        self,
        players: Optional[Sequence[Player]] = None,
        max_rounds: int = DEFAULT_MAX_ROUNDS,
        seed: Optional[int] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        """Initialize a new tournament.

        Args
        ----
        players: Initial roster
        max_rounds: Number of rounds to play (3 to 8)
        seed: Seed for the pairing random source, ignored when ``rng`` is given
        rng: Random source to use for pairing
        """
        self.config = TournamentConfig(max_rounds=max_rounds, seed=seed)
        if rng is None:
            rng = random.Random(seed)

        self._players: List[Player] = []
        for player in players or []:
            self.add_existing_player(player)

        self.round_manager = RoundManager(max_rounds=max_rounds, rng=rng)
        self.result_recorder = ResultRecorder()
        self._refresh_players()

    # ========== Properties ==========

    @property
    def players(self) -> Tuple[Player, ...]:
        return tuple(self._players)

    @property
    def pairings(self) -> Tuple[Pairing, ...]:
        return tuple(self.round_manager.pairings)

    @property
    def current_round(self) -> int:
        return self.round_manager.current_round

    @property
    def max_rounds(self) -> int:
        return self.config.max_rounds

    @property
    def has_started(self) -> bool:
        """Any pairing exists, which locks the round count."""
        return bool(self.round_manager.pairings)

    @property
    def is_complete(self) -> bool:
        """Is the tournament over?"""
        return self.round_manager.is_tournament_complete

    # ========== Player Management ==========

    def get_player(self, player_id: str) -> Player:
        for player in self._players:
            if player.id == player_id:
                return player
        raise PlayerNotFoundException(f"No player with id {player_id!r}")

    def add_player(self, name: str) -> Player:
        """Enter a new player by name.

        Raises:
            InvalidPlayerDataException: If the name is blank
        """
        name = (name or "").strip()
        if not name:
            raise InvalidPlayerDataException("Player name cannot be empty")
        return self.add_existing_player(Player.create(name))

    def add_existing_player(self, player: Player) -> Player:
        """Enter an already constructed player.

        Raises:
            DuplicatePlayerException: If a player with the same id exists
        """
        if any(p.id == player.id for p in self._players):
            raise DuplicatePlayerException(f"Player id {player.id!r} already entered")
        self._players.append(player)
        logger.info(f"Added player {player.name} ({player.id})")
        return player

    def remove_player(self, player_id: str) -> Player:
        """Withdraw a player.

        Pairings referring to the player would dangle, so the whole pairing
        history is cleared and the tournament returns to round 1.

        Raises:
            PlayerNotFoundException: If no player has that id
        """
        player = self.get_player(player_id)
        self._players = [p for p in self._players if p.id != player_id]
        if self.round_manager.pairings:
            logger.warning(
                f"Removing {player.name} cleared {len(self.round_manager.pairings)} pairings"
            )
        self.round_manager.clear()
        self._refresh_players()
        return player

    def set_max_rounds(self, max_rounds: int) -> None:
        """Change the number of rounds before the first pairing.

        Raises:
            TournamentStateException: If pairings already exist
            InvalidConfigurationException: If the value is unsupported
        """
        if self.has_started:
            raise TournamentStateException(
                "Cannot change the number of rounds once the tournament has started"
            )
        config = TournamentConfig(max_rounds=max_rounds, seed=self.config.seed)
        self.config = config
        self.round_manager.max_rounds = max_rounds

    # ========== Rounds ==========

    def generate_pairings(self) -> List[Pairing]:
        """Pair the current round. See RoundManager.create_next_round."""
        new_pairings = self.round_manager.create_next_round(self._players)
        if new_pairings:
            self._refresh_players()
        return new_pairings

    def report_result(
        self,
        pairing_id: str,
        player1_result: OutcomeLike,
        player2_result: Optional[OutcomeLike] = None,
    ) -> Pairing:
        """Report (or correct) a match result. See ResultRecorder.record_result."""
        pairing = self.result_recorder.record_result(
            self.round_manager.pairings, pairing_id, player1_result, player2_result
        )
        self._refresh_players()
        return pairing

    def clear_result(self, pairing_id: str) -> Pairing:
        pairing = self.result_recorder.clear_result(
            self.round_manager.pairings, pairing_id
        )
        self._refresh_players()
        return pairing

    def next_round(self) -> int:
        """Advance once the current round is fully reported."""
        return self.round_manager.advance_round()

    def round_pairings(self, round_number: Optional[int] = None) -> List[Pairing]:
        """Pairings of ``round_number``, defaulting to the current round."""
        return self.round_manager.get_round(self._round(round_number))

    def is_round_complete(self, round_number: Optional[int] = None) -> bool:
        return self.round_manager.is_round_complete(self._round(round_number))

    def round_progress(self, round_number: Optional[int] = None) -> Tuple[int, int]:
        return self.round_manager.round_progress(self._round(round_number))

    # ========== Standings ==========

    def standings(self) -> List[StandingEntry]:
        """Current standings, usable at any point of the event."""
        return compute_standings(self._players, self.round_manager.pairings)

    def final_standings(self) -> List[StandingEntry]:
        """Final ranking.

        Raises:
            TournamentStateException: If the last round is not complete
        """
        if not self.is_complete:
            raise TournamentStateException(
                f"Tournament is not complete (round {self.current_round} "
                f"of {self.max_rounds})"
            )
        return self.standings()

    # ========== Reset ==========

    def reset(self) -> None:
        """Drop all pairings, keeping the roster."""
        self.round_manager.clear()
        self._refresh_players()
        logger.info("Tournament reset")

    def clear_all(self) -> None:
        """Drop all pairings and every player."""
        self.round_manager.clear()
        self._players = []
        logger.info("All tournament data cleared")

    # ========== Snapshots ==========

    def to_snapshot(self) -> TournamentSnapshot:
        return TournamentSnapshot(
            players=tuple(self._players),
            pairings=tuple(self.round_manager.pairings),
            current_round=self.current_round,
            max_rounds=self.max_rounds,
        )

    @classmethod
    def from_snapshot(
        cls,
        snapshot: TournamentSnapshot,
        seed: Optional[int] = None,
        rng: Optional[RandomSource] = None,
    ) -> "Tournament":
        """Rebuild a tournament from a snapshot.

        Cached player records are recomputed from the snapshot's pairings.
        """
        tournament = cls(
            players=snapshot.players,
            max_rounds=snapshot.max_rounds,
            seed=seed,
            rng=rng,
        )
        tournament.round_manager.pairings = list(snapshot.pairings)
        tournament.round_manager.current_round = snapshot.current_round
        tournament._refresh_players()
        logger.info(
            f"Loaded tournament: {len(snapshot.players)} players, "
            f"{len(snapshot.pairings)} pairings, round {snapshot.current_round}"
        )
        return tournament

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary."""
        return self.to_snapshot().to_dict()

    @classmethod
    def from_dict(cls, data: Dict[str, Any], seed: Optional[int] = None) -> "Tournament":
        """Deserialize a tournament, validating the data shape first.

        Raises:
            InvalidSnapshotException: If the data does not look like a tournament
        """
        validation = validate_tournament_data(data)
        if not validation:
            raise InvalidSnapshotException(validation.error_message)
        return cls.from_snapshot(TournamentSnapshot.from_dict(data), seed=seed)

    # ========== Internal ==========

    def _round(self, round_number: Optional[int]) -> int:
        return self.current_round if round_number is None else round_number

    def _refresh_players(self) -> None:
        self._players = recalculate_player_records(
            self._players, self.round_manager.pairings
        )

    def __repr__(self) -> str:
        return (
            f"Tournament(players={len(self._players)}, "
            f"round={self.current_round}/{self.max_rounds}, "
            f"pairings={len(self.round_manager.pairings)})"
        )
