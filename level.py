# level.py
from dataclasses import dataclass

# Domyślne wartości z pierwszej wersji gry (terminal)
DEFAULT_VARIABILITY = 10
DEFAULT_GRAVITY = -0.40

# najszersza przeszkoda (WIDE w obstacles.py); tylna przeszkoda i nowa nie mogą na siebie wejść
WIDEST_OBSTACLE = 15
MIN_SPAWN_GAP = 2 * WIDEST_OBSTACLE + 1


@dataclass(frozen=True)
class Level:
    number: int
    max_obstacles: int
    min_obstacle_distance: int
    max_obstacle_distance: int
    spawn_variability: int  # >= 1, higher = rarer forced spawns
    gravity: float          # cells / tick^2, negative pulls down
    scroll_speed: int       # cells / tick
    play_area_width: int

    def __post_init__(self):
        if self.max_obstacles < 1:
            raise ValueError("max_obstacles must be >= 1")
        if self.spawn_variability < 1:
            raise ValueError("spawn_variability must be >= 1")
        if self.gravity >= 0:
            raise ValueError("gravity must be negative")
        if self.scroll_speed < 1:
            raise ValueError("scroll_speed must be >= 1")
        if self.play_area_width < 1:
            raise ValueError("play_area_width must be >= 1")


def level_for(number: int, play_area_width: int) -> Level:
    """Derive the level parameters for level `number` on a play area `play_area_width` columns wide."""
    number = int(number)
    play_area_width = int(play_area_width)
    if number < 1:
        raise ValueError(f"level number must be >= 1, got {number}")
    if play_area_width < 1:
        raise ValueError(f"play area width must be >= 1, got {play_area_width}")

    max_obstacles = 2 * number
    return Level(
        number=number,
        max_obstacles=max_obstacles,
        min_obstacle_distance=max(play_area_width // max_obstacles, MIN_SPAWN_GAP),
        max_obstacle_distance=play_area_width,
        spawn_variability=DEFAULT_VARIABILITY,
        gravity=DEFAULT_GRAVITY,
        scroll_speed=2 * number,
        play_area_width=play_area_width,
    )
