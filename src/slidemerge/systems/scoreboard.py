from esper import World

from slidemerge.components.game_state import GamePhase
from slidemerge.components.scoreboard import Scoreboard
from slidemerge.events.bus import (
    EventBus,
    EVENT_GAME_OVER,
    EVENT_GAME_STATE_CHANGED,
    EVENT_SCORE_CHANGED,
)


class ScoreboardSystem:
    """Passive subscriber keeping the score text and game-over panel in sync."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.entity = self.world.create_entity(Scoreboard())
        self.event_bus.subscribe(EVENT_SCORE_CHANGED, self.on_score_changed)
        self.event_bus.subscribe(EVENT_GAME_OVER, self.on_game_over)
        self.event_bus.subscribe(EVENT_GAME_STATE_CHANGED, self.on_game_state_changed)

    @property
    def scoreboard(self) -> Scoreboard:
        return self.world.component_for_entity(self.entity, Scoreboard)

    def on_score_changed(self, sender, **payload):
        score = payload.get('score')
        if score is None:
            return
        board = self.scoreboard
        board.score_text = str(score)
        board.last_delta = payload.get('delta', 0)

    def on_game_over(self, sender, **payload):
        self.scoreboard.game_over_visible = True

    def on_game_state_changed(self, sender, **payload):
        # Leaving GAME_OVER only happens through a reset.
        if payload.get('new_state') == GamePhase.LOADED:
            board = self.scoreboard
            board.game_over_visible = False
            board.score_text = "0"
            board.last_delta = 0
