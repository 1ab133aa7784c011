# obstacles.py
import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, Optional, Tuple

from errors import CapacityExceeded, MalformedTemplate
from geometry import Box
from level import Level

logger = logging.getLogger(__name__)

# wiersz, na którym stoją kaktusy (ten sam co "ziemia" dino)
OBSTACLE_ROW = 15


@dataclass(frozen=True)
class ObstacleTemplate:
    """Named obstacle shape. Rows are checked when the template is defined."""
    name: str
    top: int
    glyph_rows: Tuple[str, ...]

    def __post_init__(self):
        rows = tuple(self.glyph_rows)
        object.__setattr__(self, "glyph_rows", rows)
        if not rows:
            raise MalformedTemplate(f"template {self.name!r} has no glyph rows")
        width = len(rows[0])
        if width == 0:
            raise MalformedTemplate(f"template {self.name!r} has empty glyph rows")
        for i, row in enumerate(rows):
            if len(row) != width:
                raise MalformedTemplate(
                    f"template {self.name!r} row {i} is {len(row)} wide, expected {width}"
                )

    @property
    def height(self) -> int:
        return len(self.glyph_rows)

    @property
    def width(self) -> int:
        return len(self.glyph_rows[0])

    def build(self, play_area_width: int) -> "Obstacle":
        # wszystko pojawia się przy prawej krawędzi
        left = int(play_area_width) - (self.width + 1)
        hitbox = Box(height=self.height, width=self.width, top=self.top, left=left)
        return Obstacle(hitbox=hitbox, glyph_rows=self.glyph_rows)


NARROW = ObstacleTemplate(
    name="narrow",
    top=OBSTACLE_ROW,
    glyph_rows=(
        "  %% .",
        "=:@@+#",
        " #@@= ",
        " .%%. ",
    ),
)
MEDIUM = ObstacleTemplate(
    name="medium",
    top=OBSTACLE_ROW,
    glyph_rows=(
        "   -@% +-",
        "-% =@@*# ",
        "=@#%@@   ",
        "   +@@   ",
    ),
)
WIDE = ObstacleTemplate(
    name="wide",
    top=OBSTACLE_ROW,
    glyph_rows=(
        "   -@% +-  %% .",
        "-% =@@*# =:@@+#",
        "=@#%@@    #@@= ",
        "   +@@    .%%. ",
    ),
)

# kolejność = wynik losowania 0..2
TEMPLATES: Tuple[ObstacleTemplate, ...] = (MEDIUM, NARROW, WIDE)


@dataclass
class Obstacle:
    hitbox: Box
    glyph_rows: Tuple[str, ...]

    def __post_init__(self):
        if len(self.glyph_rows) != self.hitbox.height:
            raise MalformedTemplate(
                f"obstacle has {len(self.glyph_rows)} glyph rows, hitbox is {self.hitbox.height} tall"
            )

    def scroll(self, speed: int):
        self.hitbox = self.hitbox.moved(dleft=-int(speed))


class ObstacleSet:
    """Bounded FIFO of active obstacles.

    Obstacles enter at the right edge and scroll left together, so the front
    is always the leftmost one and it is the only one ever removed.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.capacity = int(capacity)
        self._items: Deque[Obstacle] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Obstacle]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    @property
    def front(self) -> Optional[Obstacle]:
        return self._items[0] if self._items else None

    @property
    def back(self) -> Optional[Obstacle]:
        return self._items[-1] if self._items else None

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def append(self, obstacle: Obstacle):
        if len(self._items) == self.capacity:
            raise CapacityExceeded(
                f"obstacle set is full ({self.capacity}); spawner guard let an obstacle through"
            )
        self._items.append(obstacle)

    def scroll_and_prune(self, level: Level) -> Optional[Obstacle]:
        for ob in self._items:
            ob.scroll(level.scroll_speed)

        # tylko pierwszy (najbardziej z lewej), max jeden na tick
        if self._items and self._items[0].hitbox.left <= 0:
            gone = self._items.popleft()
            logger.debug("obstacle left the play area at column %d", gone.hitbox.left)
            return gone
        return None

    def clear(self):
        self._items.clear()
