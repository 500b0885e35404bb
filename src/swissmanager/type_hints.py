"""Type hints used in Swiss Manager."""

from random import Random
from typing import TYPE_CHECKING, Literal, Tuple

if TYPE_CHECKING:
    from swissmanager.models.player import Player

# Outcome literals (for type hints)
OutcomeValue = Literal["win", "loss", "draw"]

# Head-to-head lookup result: side "a" won, side "b" won, or neither
HeadToHead = Literal["a", "b", "tie"]

# Two players seated at the same table
PlayerPair = Tuple["Player", "Player"]

# Source of randomness threaded through pairing generation
RandomSource = Random

#  LocalWords:  PlayerPair
