from slidemerge.events.bus import (EVENT_TICK, EventBus, EVENT_ANIMATION_COMPLETE, EVENT_BOARD_RESET,
                                  EVENT_TILE_MOVED, EVENT_TILE_SPAWNED, EVENT_TILES_MERGED)
from slidemerge.components.animation_spawn import SpawnAnimation
from slidemerge.components.animation_slide import SlideAnimation
from slidemerge.components.animation_merge import MergeAnimation
from slidemerge.components.duration import Duration
from slidemerge.animation_factory import AnimationFactory
from esper import World

ANIMATION_KINDS = (
    ('spawn', SpawnAnimation),
    ('slide', SlideAnimation),
    ('merge', MergeAnimation),
)

class AnimationSystem:
    """Drives timing of tile animations; each animation is its own entity.

    Engine state is already final when these start, so animations are purely visual
    and never gate input.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.factory = AnimationFactory(world)
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        event_bus.subscribe(EVENT_TILE_SPAWNED, self.on_tile_spawned)
        event_bus.subscribe(EVENT_TILE_MOVED, self.on_tile_moved)
        event_bus.subscribe(EVENT_TILES_MERGED, self.on_tiles_merged)
        event_bus.subscribe(EVENT_BOARD_RESET, self.on_board_reset)

    def on_tile_spawned(self, sender, **kwargs):
        pos = kwargs.get('pos')
        if pos is None:
            return
        self.factory.create_spawn(pos)

    def on_tile_moved(self, sender, **kwargs):
        src = kwargs.get('src'); dst = kwargs.get('dst')
        if src is None or dst is None:
            return
        self.factory.create_slide(src, dst, kwargs.get('value', 0))

    def on_tiles_merged(self, sender, **kwargs):
        src = kwargs.get('src'); dst = kwargs.get('dst')
        if src is None or dst is None:
            return
        # The moving source travels into the stationary tile, then the result pops.
        self.factory.create_slide(src, dst, kwargs.get('value', 0) // 2)
        self.factory.create_merge(dst)

    def on_board_reset(self, sender, **kwargs):
        for _, comp_type in ANIMATION_KINDS:
            for ent in [ent for ent, _ in self.world.get_component(comp_type)]:
                self.world.delete_entity(ent, immediate=True)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        for kind, comp_type in ANIMATION_KINDS:
            entries = list(self.world.get_component(comp_type))
            if not entries:
                continue
            for ent, anim in entries:
                if anim.linear < 1.0:
                    d = self.world.component_for_entity(ent, Duration)
                    anim.linear = min(1.0, anim.linear + dt / d.value)
            if all(anim.linear >= 1.0 for _, anim in entries):
                items = [self._describe(anim) for _, anim in entries]
                for ent, _ in entries:
                    self.world.delete_entity(ent, immediate=True)
                self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind=kind, items=items)

    def active_animations(self) -> int:
        return sum(len(self.world.get_component(comp_type)) for _, comp_type in ANIMATION_KINDS)

    @staticmethod
    def _describe(anim):
        if isinstance(anim, SlideAnimation):
            return {'from': anim.src, 'to': anim.dst}
        return anim.pos
