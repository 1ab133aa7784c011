# actor.py
import enum
import math
from dataclasses import dataclass
from typing import Tuple

from geometry import Box
from level import Level

# =====================
# DINO - PARAMETRY
# =====================
ACTOR_HEIGHT = 4
ACTOR_WIDTH = 9
ACTOR_LEFT = 40
ACTOR_MAX_UPWARD_VELOCITY = 3.0

FRAME_A: Tuple[str, ...] = (
    "    :+++-",
    "    -*=. ",
    " --=**:  ",
    "  -+-.   ",
)
FRAME_B: Tuple[str, ...] = (
    "    :+++-",
    "    -*=. ",
    " --=**:  ",
    "  .+--   ",
)


class AnimationPhase(enum.Enum):
    A = "a"
    B = "b"

    def toggled(self) -> "AnimationPhase":
        return AnimationPhase.B if self is AnimationPhase.A else AnimationPhase.A


@dataclass
class Actor:
    hitbox: Box
    ground_row: int
    vertical_velocity: float = 0.0
    animation_phase: AnimationPhase = AnimationPhase.A
    max_upward_velocity: float = ACTOR_MAX_UPWARD_VELOCITY
    frames: Tuple[Tuple[str, ...], Tuple[str, ...]] = (FRAME_A, FRAME_B)

    def __post_init__(self):
        for frame in self.frames:
            if len(frame) != self.hitbox.height:
                raise ValueError(
                    f"actor frame has {len(frame)} rows, hitbox is {self.hitbox.height} tall"
                )
        if self.hitbox.top > self.ground_row:
            raise ValueError("actor cannot start below the ground row")

    @classmethod
    def standing(cls, ground_row: int, left: int = ACTOR_LEFT) -> "Actor":
        """Actor resting on `ground_row` with the default 4x9 dino frames."""
        hitbox = Box(height=ACTOR_HEIGHT, width=ACTOR_WIDTH, top=int(ground_row), left=int(left))
        return cls(hitbox=hitbox, ground_row=int(ground_row))

    @property
    def current_glyph_frame(self) -> Tuple[str, ...]:
        return self.frames[0] if self.animation_phase is AnimationPhase.A else self.frames[1]

    @property
    def is_grounded(self) -> bool:
        return self.hitbox.top == self.ground_row and self.vertical_velocity == 0


def jump(actor: Actor) -> None:
    # celowo bez sprawdzania "na ziemi" - filtruje wywołujący (Simulation / klawisz)
    actor.vertical_velocity = actor.max_upward_velocity


def integrate_physics(actor: Actor, level: Level) -> None:
    """Advance the actor's vertical state by one tick.

    Rows grow downward, so a positive velocity moves the hitbox up. The
    per-tick displacement is rounded toward zero in both directions, the
    actor is clamped to its ground row, and landing zeroes the velocity.
    """
    actor.animation_phase = actor.animation_phase.toggled()

    v = actor.vertical_velocity
    step = math.floor(v) if v > 0 else math.ceil(v)
    top = actor.hitbox.top - step

    if top > actor.ground_row:
        top = actor.ground_row

    if top != actor.hitbox.top:
        actor.hitbox = actor.hitbox.with_top(top)

    if top != actor.ground_row:
        actor.vertical_velocity = v + level.gravity
    else:
        actor.vertical_velocity = 0.0
