from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that are not stored anywhere else alive.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                          # payload: dt=float


# ============================================================================
# INPUT & COMMANDS
# ============================================================================
EVENT_KEY_PRESS = "key_press"                # payload: symbol=int, modifiers=int
EVENT_MOVE_REQUEST = "move_request"          # payload: direction=Direction
EVENT_RESET_REQUEST = "reset_request"        # payload: (none)
EVENT_QUIT_REQUEST = "quit_request"          # payload: (none)


# ============================================================================
# TILE & BOARD MECHANICS
# ============================================================================
EVENT_TILE_SPAWNED = "tile_spawned"          # payload: pos=(x,y), value=int, power=int
EVENT_TILE_MOVED = "tile_moved"              # payload: src=(x,y), dst=(x,y), value=int
EVENT_TILES_MERGED = "tiles_merged"          # payload: src=(x,y), dst=(x,y), value=int, power=int, points=int
EVENT_MOVE_APPLIED = "move_applied"          # payload: direction=Direction, changed=bool
EVENT_BOARD_RESET = "board_reset"            # payload: reason=str


# ============================================================================
# SCORE & GAME FLOW
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"            # payload: score=int, delta=int
EVENT_GAME_STATE_CHANGED = "game_state_changed"  # payload: previous_state=GamePhase|None, new_state=GamePhase
EVENT_GAME_OVER = "game_over"                    # payload: score=int


# ============================================================================
# ANIMATION
# ============================================================================
EVENT_ANIMATION_COMPLETE = "animation_complete"  # payload: kind=str, items=list
