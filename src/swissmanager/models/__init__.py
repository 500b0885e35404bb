from swissmanager.models.enums import Outcome
from swissmanager.models.match_result import MatchResult
from swissmanager.models.pairing import Pairing
from swissmanager.models.pairing_history import PairingHistory
from swissmanager.models.player import Player
from swissmanager.models.snapshot import TournamentSnapshot
from swissmanager.models.tournament_config import TournamentConfig

__all__ = [
    "Outcome",
    "MatchResult",
    "Pairing",
    "PairingHistory",
    "Player",
    "TournamentSnapshot",
    "TournamentConfig",
]
