"""Swiss Manager: Swiss-system pairing and standings for tournaments."""

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

__version__ = "0.1.0"

from swissmanager.models import (
    MatchResult,
    Outcome,
    Pairing,
    Player,
    TournamentConfig,
    TournamentSnapshot,
)
from swissmanager.tournament import compute_record, compute_standings, rank_players
from swissmanager.pairing import generate_swiss_pairings
from swissmanager.controllers import Tournament

__all__ = [
    "MatchResult",
    "Outcome",
    "Pairing",
    "Player",
    "Tournament",
    "TournamentConfig",
    "TournamentSnapshot",
    "compute_record",
    "compute_standings",
    "generate_swiss_pairings",
    "rank_players",
]
