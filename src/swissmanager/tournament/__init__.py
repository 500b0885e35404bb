"""Standings and tie-break engine for Swiss tournaments.

Every value here is derived from the pairing history; the tournament
orchestrator lives in :mod:`swissmanager.controllers.tournament`.
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

from swissmanager.tournament.standings import (
    PlayerRecord,
    StandingEntry,
    compute_points,
    compute_record,
    compute_standings,
    format_record,
    get_opponents,
    head_to_head,
    rank_players,
    recalculate_player_records,
    strength_of_schedule,
)

__all__ = [
    "PlayerRecord",
    "StandingEntry",
    "compute_points",
    "compute_record",
    "compute_standings",
    "format_record",
    "get_opponents",
    "head_to_head",
    "rank_players",
    "recalculate_player_records",
    "strength_of_schedule",
]
