from typing import Any

from esper import World

from slidemerge.components.scoreboard import Scoreboard
from slidemerge.events.bus import EVENT_TICK, EventBus
from slidemerge.rendering.board_renderer import BoardRenderer
from slidemerge.rendering.context import RenderContext, build_render_context
from slidemerge.rendering.hud_renderer import HudRenderer
from slidemerge.systems.board_ops import board_snapshot, get_board
from slidemerge.ui.layout import compute_board_geometry


class RenderSystem:
    """Draws the current board snapshot; never mutates game state."""

    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.use_easing = True
        self._time = 0.0
        self._last_window_size = (self.window.width, self.window.height)
        self._tile_size, self._board_left, self._board_bottom = self._geometry()
        self._render_ctx: RenderContext | None = None
        self._last_tile_layout: dict[tuple[int, int], dict[str, Any]] = {}
        self._board_renderer = BoardRenderer(self)
        self._hud_renderer = HudRenderer()

    def notify_resize(self, width: int, height: int):
        self._last_window_size = (width, height)
        self._tile_size, self._board_left, self._board_bottom = self._geometry()

    def _geometry(self):
        board = get_board(self.world)
        return compute_board_geometry(self.window.width, self.window.height, board.rows, board.cols)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        self._time += float(dt)

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        # Headless safeguard: without an active window skip draw calls but still build the layout cache.
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        if (self.window.width, self.window.height) != self._last_window_size:
            self.notify_resize(self.window.width, self.window.height)

        ctx = build_render_context(
            world=self.world,
            window_width=self.window.width,
            window_height=self.window.height,
            snapshot=board_snapshot(self.world),
            tile_size=self._tile_size,
            board_left=self._board_left,
            board_bottom=self._board_bottom,
        )
        self._render_ctx = ctx
        self._board_renderer.render(arcade, ctx, headless=headless)
        if not headless:
            self._hud_renderer.render(arcade, ctx, self._scoreboard())

    def tile_layout(self) -> dict[tuple[int, int], dict[str, Any]]:
        """Last computed draw layout keyed by grid (x, y)."""
        return dict(self._last_tile_layout)

    def _scoreboard(self) -> Scoreboard | None:
        for _, scoreboard in self.world.get_component(Scoreboard):
            return scoreboard
        return None
