from __future__ import annotations

from esper import World

from slidemerge.components.game_state import GamePhase, GameState
from slidemerge.events.bus import EVENT_GAME_STATE_CHANGED, EventBus


def get_game_state(world: World) -> GameState:
    for _, state in world.get_component(GameState):
        return state
    raise RuntimeError("GameState component not found")


def set_game_phase(world: World, event_bus: EventBus, phase: GamePhase) -> None:
    """Update the turn phase and emit a change event when it differs."""

    previous_phase: GamePhase | None = None
    for _, state in world.get_component(GameState):
        previous_phase = state.phase
        if state.phase != phase:
            state.phase = phase
            event_bus.emit(
                EVENT_GAME_STATE_CHANGED,
                previous_state=previous_phase,
                new_state=phase,
            )
        return
    # No existing GameState component; create a new one.
    state_entity = world.create_entity()
    world.add_component(state_entity, GameState(phase=phase))
    event_bus.emit(
        EVENT_GAME_STATE_CHANGED,
        previous_state=previous_phase,
        new_state=phase,
    )
