# geometry.py
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Box:
    """Axis-aligned box in screen cells (rows grow downward)."""
    height: int
    width: int
    top: int
    left: int

    def __post_init__(self):
        if self.height <= 0 or self.width <= 0:
            raise ValueError(f"box must have positive size, got {self.height}x{self.width}")

    @property
    def bottom(self) -> int:
        return self.top + self.height

    @property
    def right(self) -> int:
        return self.left + self.width

    def with_top(self, top: int) -> "Box":
        return replace(self, top=int(top))

    def with_left(self, left: int) -> "Box":
        return replace(self, left=int(left))

    def moved(self, dtop: int = 0, dleft: int = 0) -> "Box":
        return replace(self, top=self.top + int(dtop), left=self.left + int(dleft))


def overlaps(a: Box, b: Box) -> bool:
    # krawędzie poziome mogą się stykać; w pionie liczy się tylko dół `a`
    # (a.bottom == b.top to jeszcze nie kolizja)
    return a.left + a.width >= b.left and a.left < b.left + b.width and a.top + a.height > b.top
