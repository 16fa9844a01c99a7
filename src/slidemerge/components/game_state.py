"""Game state resource describing the engine's turn phase."""
from dataclasses import dataclass
from enum import Enum, auto


class GamePhase(Enum):
    """Turn phases of the engine state machine."""
    LOADED = auto()
    WAITING_FOR_INPUT = auto()
    CHECKING_MATCHES = auto()
    GAME_OVER = auto()


@dataclass
class GameState:
    """Singleton component storing the current turn phase."""
    phase: GamePhase = GamePhase.LOADED
