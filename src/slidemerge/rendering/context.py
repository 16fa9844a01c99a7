from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from esper import World

from slidemerge.components.animation_merge import MergeAnimation
from slidemerge.components.animation_slide import SlideAnimation
from slidemerge.components.animation_spawn import SpawnAnimation
from slidemerge.systems.board_ops import BoardSnapshot
from slidemerge.ui.layout import cell_center

BoardPos = Tuple[int, int]


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    window_width: int
    window_height: int
    tile_size: int
    board_left: float
    board_bottom: float
    snapshot: BoardSnapshot
    cell_centers: Dict[BoardPos, Tuple[float, float]]
    slide_by_dst: Dict[BoardPos, SlideAnimation] = field(default_factory=dict)
    spawn_by_pos: Dict[BoardPos, SpawnAnimation] = field(default_factory=dict)
    merge_by_pos: Dict[BoardPos, MergeAnimation] = field(default_factory=dict)

    @property
    def board_width(self) -> float:
        return self.tile_size * self.snapshot.cols

    @property
    def board_height(self) -> float:
        return self.tile_size * self.snapshot.rows

    @property
    def board_top(self) -> float:
        return self.board_bottom + self.board_height

    @property
    def board_right(self) -> float:
        return self.board_left + self.board_width


def collect_animation_maps(world: World):
    slide_by_dst: Dict[BoardPos, SlideAnimation] = {}
    spawn_by_pos: Dict[BoardPos, SpawnAnimation] = {}
    merge_by_pos: Dict[BoardPos, MergeAnimation] = {}
    for _, slide in world.get_component(SlideAnimation):
        slide_by_dst[slide.dst] = slide
    for _, spawn in world.get_component(SpawnAnimation):
        spawn_by_pos[spawn.pos] = spawn
    for _, merge in world.get_component(MergeAnimation):
        merge_by_pos[merge.pos] = merge
    return slide_by_dst, spawn_by_pos, merge_by_pos


def build_render_context(
    world: World,
    window_width: int,
    window_height: int,
    snapshot: BoardSnapshot,
    tile_size: int,
    board_left: float,
    board_bottom: float,
) -> RenderContext:
    """Populate a RenderContext for the current frame."""

    centers: Dict[BoardPos, Tuple[float, float]] = {}
    for y in range(snapshot.rows):
        for x in range(snapshot.cols):
            centers[(x, y)] = cell_center(x, y, snapshot.rows, tile_size, board_left, board_bottom)

    slide_by_dst, spawn_by_pos, merge_by_pos = collect_animation_maps(world)
    return RenderContext(
        window_width=window_width,
        window_height=window_height,
        tile_size=tile_size,
        board_left=board_left,
        board_bottom=board_bottom,
        snapshot=snapshot,
        cell_centers=centers,
        slide_by_dst=slide_by_dst,
        spawn_by_pos=spawn_by_pos,
        merge_by_pos=merge_by_pos,
    )
