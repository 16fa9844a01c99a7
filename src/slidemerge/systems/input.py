from enum import Enum, auto

from slidemerge.components.direction import Direction
from slidemerge.components.game_state import GamePhase, GameState
from slidemerge.events.bus import (
    EventBus,
    EVENT_KEY_PRESS,
    EVENT_MOVE_REQUEST,
    EVENT_QUIT_REQUEST,
    EVENT_RESET_REQUEST,
)


class Command(Enum):
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    RESET = auto()
    QUIT = auto()


COMMAND_DIRECTIONS = {
    Command.MOVE_LEFT: Direction.LEFT,
    Command.MOVE_RIGHT: Direction.RIGHT,
    Command.MOVE_UP: Direction.UP,
    Command.MOVE_DOWN: Direction.DOWN,
}

# arcade.key values (pyglet symbols), kept as literals to avoid importing arcade here.
KEY_BINDINGS = {
    65361: Command.MOVE_LEFT,   # LEFT
    65363: Command.MOVE_RIGHT,  # RIGHT
    65362: Command.MOVE_UP,     # UP
    65364: Command.MOVE_DOWN,   # DOWN
    97: Command.MOVE_LEFT,      # A
    100: Command.MOVE_RIGHT,    # D
    119: Command.MOVE_UP,       # W
    115: Command.MOVE_DOWN,     # S
    114: Command.RESET,         # R
    65307: Command.QUIT,        # ESCAPE
    113: Command.QUIT,          # Q
}


class InputSystem:
    """Translates raw key presses into engine commands on the bus."""

    def __init__(self, event_bus: EventBus, world=None, bindings: dict[int, Command] | None = None):
        self.event_bus = event_bus
        self.world = world  # optional; used to drop moves the engine would ignore anyway
        self.bindings = dict(KEY_BINDINGS if bindings is None else bindings)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if symbol is None:
            return
        self.handle_key_press(int(symbol), int(kwargs.get('modifiers') or 0))

    def handle_key_press(self, symbol: int, modifiers: int = 0) -> Command | None:
        command = self.bindings.get(symbol)
        if command is None:
            return None
        self.dispatch(command)
        return command

    def dispatch(self, command: Command) -> None:
        if command is Command.RESET:
            self.event_bus.emit(EVENT_RESET_REQUEST)
            return
        if command is Command.QUIT:
            self.event_bus.emit(EVENT_QUIT_REQUEST)
            return
        if not self._accepting_moves():
            return
        self.event_bus.emit(EVENT_MOVE_REQUEST, direction=COMMAND_DIRECTIONS[command])

    def _accepting_moves(self) -> bool:
        if self.world is None:
            return True
        for _, state in self.world.get_component(GameState):
            return state.phase == GamePhase.WAITING_FOR_INPUT
        return True
