"""Entry point for the slidemerge puzzle.

Sets up the engine world, event bus, presentation systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color
from slidemerge.constants import GRID_COLS, GRID_ROWS, MAX_TILE_VALUE
from slidemerge.events.bus import EVENT_KEY_PRESS, EVENT_QUIT_REQUEST, EVENT_TICK
from slidemerge.systems.animation import AnimationSystem
from slidemerge.systems.engine import GridEngine
from slidemerge.systems.input import InputSystem
from slidemerge.systems.render import RenderSystem
from slidemerge.systems.scoreboard import ScoreboardSystem

BACKGROUND = (250, 248, 239)


class SlideMergeWindow(Window):
    def __init__(self, rows: int = GRID_ROWS, cols: int = GRID_COLS, max_value: int = MAX_TILE_VALUE):
        super().__init__(640, 720, "2048")
        self.set_update_rate(1/60)
        self.engine = GridEngine.new_game(rows, cols, max_value)
        self.world = self.engine.world
        self.event_bus = self.engine.event_bus

        # Presentation systems subscribe before the first spawn so they see it.
        self.scoreboard_system = ScoreboardSystem(self.world, self.event_bus)
        self.animation_system = AnimationSystem(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        self.input_system = InputSystem(self.event_bus, self.world)
        self.event_bus.subscribe(EVENT_QUIT_REQUEST, self.on_quit_request)

        set_background_color(BACKGROUND)
        self.engine.step()

    def on_resize(self, width: int, height: int):
        self.render_system.notify_resize(width, height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)

    def on_quit_request(self, sender, **payload):
        self.close()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    window = SlideMergeWindow()
    run()

if __name__ == "__main__":
    main()
