# spawner.py
import logging
import random
from typing import Optional, Protocol, Sequence

from level import Level
from obstacles import TEMPLATES, Obstacle, ObstacleSet, ObstacleTemplate

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def next(self, bound: int) -> int:  # returns in [0, bound)
        ...


class SeededRandom:
    """RandomSource backed by `random.Random`; pass a seed for repeatable runs."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def next(self, bound: int) -> int:
        if bound < 1:
            raise ValueError(f"bound must be >= 1, got {bound}")
        return self.rng.randrange(int(bound))


def should_skip(obstacles: ObstacleSet, level: Level, rng: RandomSource) -> bool:
    # pełny zestaw - nie ma miejsca; `>=` a nie `>` jak w wersji terminalowej,
    # inaczej append przy pełnym zestawie rzuca CapacityExceeded
    if len(obstacles) >= level.max_obstacles:
        return True

    last = obstacles.back
    if last is None:
        return False

    width = level.play_area_width
    # za blisko prawej krawędzi - nowa przeszkoda by się nałożyła
    if last.hitbox.left > width - level.min_obstacle_distance:
        return True
    # w "pasie losowym": spawn tylko przy wylosowanym zerze
    if last.hitbox.left > width - level.max_obstacle_distance and rng.next(level.spawn_variability) > 0:
        return True
    return False


def try_spawn(
    obstacles: ObstacleSet,
    level: Level,
    rng: RandomSource,
    templates: Sequence[ObstacleTemplate] = TEMPLATES,
) -> Optional[Obstacle]:
    """Return a new obstacle at the right edge, or None when this tick should stay empty.

    Does not append; the caller owns the set.
    """
    if should_skip(obstacles, level, rng):
        return None

    template = templates[rng.next(len(templates))]
    ob = template.build(level.play_area_width)
    logger.debug("spawned %s obstacle at column %d", template.name, ob.hitbox.left)
    return ob
