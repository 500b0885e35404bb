"""Enumerations shared by the tournament models."""

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

from enum import Enum

from swissmanager.constants import RESULT_DRAW, RESULT_LOSS, RESULT_WIN


class Outcome(str, Enum):
    """Outcome of a match from one side's point of view."""

    WIN = RESULT_WIN
    LOSS = RESULT_LOSS
    DRAW = RESULT_DRAW

    def opposite(self) -> "Outcome":
        """Return the outcome the other side must have recorded."""
        if self is Outcome.WIN:
            return Outcome.LOSS
        if self is Outcome.LOSS:
            return Outcome.WIN
        return Outcome.DRAW
