# game.py
import logging
import sys
from typing import Optional

import pygame

from level import level_for
from render import GlyphScreen, draw_game_over, draw_world
from settings import UserSettings, load_user_settings, save_user_settings
from simulation import InputAction, Simulation, TickResult
from spawner import SeededRandom

logger = logging.getLogger(__name__)

# =====================
# USTAWIENIA
# =====================
FPS = 60
KEY_CTRLZ = 26  # kod znaku Ctrl+Z w event.unicode / terminalu


def jump_key_for(mode: str) -> int:
    if mode == "up":
        return pygame.K_UP
    if mode == "space":
        return pygame.K_SPACE
    return pygame.K_w


def is_quit_event(event) -> bool:
    if event.type == pygame.QUIT:
        return True
    if event.type != pygame.KEYDOWN:
        return False
    if event.key == pygame.K_ESCAPE:
        return True
    if event.key == pygame.K_z and (event.mod & pygame.KMOD_CTRL):
        return True
    return getattr(event, "unicode", "") == chr(KEY_CTRLZ)


def poll_input(jump_key: int) -> Optional[InputAction]:
    """Drain pending events without blocking; at most one action per tick, QUIT wins."""
    action = None
    for event in pygame.event.get():
        if is_quit_event(event):
            return InputAction.QUIT
        if event.type == pygame.KEYDOWN and event.key == jump_key:
            action = InputAction.JUMP
    return action


def wait_for_any_key(clock: pygame.time.Clock) -> bool:
    """Pause after a collision. True = play again, False = quit."""
    pygame.event.clear()
    while True:
        for event in pygame.event.get():
            if is_quit_event(event):
                return False
            if event.type == pygame.KEYDOWN:
                return True
        clock.tick(FPS)


def build_simulation(settings: UserSettings) -> Simulation:
    level = level_for(settings.level, settings.columns)
    return Simulation.initialize(
        level,
        rng=SeededRandom(settings.seed),
        allow_air_jump=settings.allow_air_jump,
    )


def run(settings: UserSettings) -> int:
    screen = GlyphScreen(columns=settings.columns)
    clock = pygame.time.Clock()
    jump_key = jump_key_for(settings.jump_key)

    sim = build_simulation(settings)
    logger.info(
        "starting level %d on %d columns (seed=%s)", sim.level.number, settings.columns, settings.seed
    )

    # =====================
    # PĘTLA GŁÓWNA
    # =====================
    running = True
    while running:
        action = poll_input(jump_key)
        if action is InputAction.QUIT:
            break

        result = sim.step(action)

        screen.clear()
        draw_world(screen, sim, settings.columns)
        if result is TickResult.COLLIDED:
            draw_game_over(screen, sim, settings.columns)
        screen.present()

        if result is TickResult.COLLIDED:
            running = wait_for_any_key(clock)
            if running:
                sim.reset()
            continue

        clock.tick(FPS)

    return sim.ticks


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = load_user_settings()

    pygame.init()
    try:
        run(settings)
    finally:
        # utrwal ustawienia przy zamykaniu gry
        save_user_settings(settings)
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
