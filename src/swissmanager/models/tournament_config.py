"""TournamentConfig data class."""

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

from dataclasses import dataclass
from typing import Optional

from swissmanager.constants import ALLOWED_ROUND_COUNTS, DEFAULT_MAX_ROUNDS
from swissmanager.exceptions import InvalidConfigurationException


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    max_rounds : int
        Number of rounds in the tournament (3 to 8).
    seed : int or None
        Seed for the pairing random source. ``None`` means unseeded.
    """

    max_rounds: int = DEFAULT_MAX_ROUNDS
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise InvalidConfigurationException for unsupported settings."""
        if self.max_rounds not in ALLOWED_ROUND_COUNTS:
            raise InvalidConfigurationException(
                f"max_rounds must be one of {list(ALLOWED_ROUND_COUNTS)}, "
                f"got {self.max_rounds}"
            )
