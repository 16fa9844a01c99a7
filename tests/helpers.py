from __future__ import annotations

import random
from typing import Sequence

from slidemerge.components.game_state import GamePhase
from slidemerge.events.bus import EventBus
from slidemerge.systems.board_ops import load_values
from slidemerge.systems.engine import GridEngine
from slidemerge.utils.game_state import set_game_phase


class FixedRandom(random.Random):
    """Random source whose randrange replays a scripted sequence (then wraps)."""

    def __init__(self, values: Sequence[int]):
        super().__init__(0)
        self._values = list(values) or [0]
        self._index = 0

    def randrange(self, *args, **kwargs):
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value


def make_engine(rows: int = 4, cols: int = 4, max_value: int = 2048, *, seed: int = 1234, rng=None) -> GridEngine:
    return GridEngine.new_game(
        rows,
        cols,
        max_value,
        event_bus=EventBus(),
        rng=rng or random.Random(seed),
    )


def arrange_board(engine: GridEngine, layout: Sequence[Sequence[int]]) -> None:
    """Load a row-major value grid (0 = empty) and hand the board to the player."""

    load_values(engine.world, layout)
    set_game_phase(engine.world, engine.event_bus, GamePhase.WAITING_FOR_INPUT)
