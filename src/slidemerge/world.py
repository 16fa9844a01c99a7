import random

from esper import World
from .events.bus import EventBus
from slidemerge.config import EngineConfig
from slidemerge.components.board import Board
from slidemerge.components.game_state import GameState, GamePhase
from slidemerge.components.score import Score


def create_world(
    event_bus: EventBus,
    config: EngineConfig | None = None,
    *,
    rng: random.Random | None = None,
) -> World:
    """Build a world holding an empty board plus the shared state/score entity."""
    config = config or EngineConfig()
    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "config", config)

    state_entity = world.create_entity()
    world.add_component(state_entity, GameState(phase=GamePhase.LOADED))
    world.add_component(state_entity, Score())

    world.create_entity(
        Board(
            rows=config.rows,
            cols=config.cols,
            max_value=config.max_value,
            lowest_value=config.lowest_value,
        )
    )
    return world
