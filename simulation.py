# simulation.py
import enum
import logging
from dataclasses import replace
from typing import Iterator, Optional, Tuple

from actor import Actor, integrate_physics, jump
from geometry import Box, overlaps
from level import Level
from obstacles import ObstacleSet
from spawner import RandomSource, SeededRandom, try_spawn

logger = logging.getLogger(__name__)

# dino stoi 5 wierszy nad dołem 20-wierszowego pola gry
DEFAULT_GROUND_ROW = 15


class InputAction(enum.Enum):
    JUMP = "jump"
    QUIT = "quit"


class TickResult(enum.Enum):
    CONTINUE = "continue"
    COLLIDED = "collided"


class SimState(enum.Enum):
    RUNNING = "running"
    ENDED = "ended"


class Simulation:
    """One game session: the actor, the obstacles on screen and the tick logic.

    `step` is called once per frame. After a collision the session is ENDED
    and stays that way (step is a no-op) until `reset`.
    """

    def __init__(
        self,
        level: Level,
        rng: RandomSource,
        actor: Actor,
        allow_air_jump: bool = True,
    ):
        self.level = level
        self.rng = rng
        self.allow_air_jump = bool(allow_air_jump)

        # kopia startowa - reset wraca dokładnie do niej
        self._initial_actor = replace(actor)
        self.actor = actor
        self.obstacles = ObstacleSet(level.max_obstacles)
        self.state = SimState.RUNNING
        self.ticks = 0

    @classmethod
    def initialize(
        cls,
        level: Level,
        rng: Optional[RandomSource] = None,
        actor: Optional[Actor] = None,
        allow_air_jump: bool = True,
    ) -> "Simulation":
        if actor is None:
            actor = Actor.standing(DEFAULT_GROUND_ROW)
        elif actor.hitbox.top != actor.ground_row or actor.vertical_velocity != 0:
            raise ValueError("simulation must start with the actor standing on the ground")
        return cls(level, rng if rng is not None else SeededRandom(), actor, allow_air_jump=allow_air_jump)

    # ---------- state ----------
    @property
    def is_over(self) -> bool:
        return self.state is SimState.ENDED

    def reset(self):
        self.actor = replace(self._initial_actor)
        self.obstacles.clear()
        self.state = SimState.RUNNING
        self.ticks = 0
        logger.info("simulation reset (level %d)", self.level.number)

    # ---------- tick ----------
    def step(self, action: Optional[InputAction] = None) -> TickResult:
        if self.state is SimState.ENDED:
            return TickResult.COLLIDED

        if action is InputAction.JUMP and (self.allow_air_jump or self.actor.is_grounded):
            jump(self.actor)

        integrate_physics(self.actor, self.level)
        self.obstacles.scroll_and_prune(self.level)

        hitbox = self.actor.hitbox
        for ob in self.obstacles:
            if overlaps(hitbox, ob.hitbox):
                self.state = SimState.ENDED
                logger.info("collision after %d ticks at column %d", self.ticks, ob.hitbox.left)
                return TickResult.COLLIDED

        ob = try_spawn(self.obstacles, self.level, self.rng)
        if ob is not None:
            # CapacityExceeded tu = zepsuty guard w spawnerze, leci dalej
            self.obstacles.append(ob)

        self.ticks += 1
        return TickResult.CONTINUE

    # ---------- render snapshot ----------
    @property
    def actor_hitbox(self) -> Box:
        return self.actor.hitbox

    @property
    def actor_frame(self) -> Tuple[str, ...]:
        return self.actor.current_glyph_frame

    def obstacle_views(self) -> Iterator[Tuple[Box, Tuple[str, ...]]]:
        for ob in self.obstacles:
            yield ob.hitbox, ob.glyph_rows
