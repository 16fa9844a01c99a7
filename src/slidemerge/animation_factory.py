from esper import World
from slidemerge.components.animation_spawn import SpawnAnimation
from slidemerge.components.animation_slide import SlideAnimation
from slidemerge.components.animation_merge import MergeAnimation
from slidemerge.components.duration import Duration
from typing import Tuple

class AnimationFactory:
    def __init__(self, world: World):
        self.world = world

    def create_spawn(self, pos: Tuple[int,int], duration: float = 0.15) -> int:
        return self.world.create_entity(SpawnAnimation(pos=pos), Duration(duration))

    def create_slide(self, src: Tuple[int,int], dst: Tuple[int,int], value: int, duration: float = 0.1) -> int:
        return self.world.create_entity(SlideAnimation(src=src, dst=dst, value=value), Duration(duration))

    def create_merge(self, pos: Tuple[int,int], duration: float = 0.15) -> int:
        return self.world.create_entity(MergeAnimation(pos=pos), Duration(duration))
