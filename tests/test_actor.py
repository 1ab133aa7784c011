"""Tests for actor.py: jump arc, ground clamp and animation."""

import pytest

from actor import FRAME_A, FRAME_B, Actor, AnimationPhase, integrate_physics, jump
from geometry import Box


class TestActorSetup:
    def test_standing_actor_is_grounded(self):
        a = Actor.standing(20)
        assert a.hitbox.top == 20
        assert a.vertical_velocity == 0
        assert a.is_grounded
        assert a.current_glyph_frame == FRAME_A

    def test_frame_rows_must_match_hitbox(self):
        with pytest.raises(ValueError):
            Actor(hitbox=Box(height=3, width=9, top=20, left=40), ground_row=20)

    def test_cannot_start_below_ground(self):
        with pytest.raises(ValueError):
            Actor(hitbox=Box(height=4, width=9, top=21, left=40), ground_row=20)


class TestJumpArc:
    def test_first_tick_of_a_jump(self, level1):
        a = Actor.standing(20)
        jump(a)
        integrate_physics(a, level1)
        assert a.hitbox.top == 17  # floor(3.0) == 3
        assert a.vertical_velocity == pytest.approx(2.6)

    def test_full_arc_lands_exactly_on_ground(self, level1):
        a = Actor.standing(20)
        jump(a)
        tops = []
        for _ in range(100):
            integrate_physics(a, level1)
            tops.append(a.hitbox.top)
            assert a.hitbox.top <= 20
            if a.hitbox.top == 20:
                break

        assert min(tops) < 20
        assert tops[-1] == 20
        assert a.vertical_velocity == 0
        assert a.is_grounded

    def test_arc_goes_up_then_down(self, level1):
        a = Actor.standing(20)
        jump(a)
        tops = []
        while True:
            integrate_physics(a, level1)
            tops.append(a.hitbox.top)
            if a.is_grounded:
                break
        peak = tops.index(min(tops))
        assert all(x >= y for x, y in zip(tops[:peak], tops[1:peak + 1]))
        assert all(x <= y for x, y in zip(tops[peak:], tops[peak + 1:]))

    def test_upward_step_rounds_toward_zero(self, level1):
        a = Actor(hitbox=Box(height=4, width=9, top=10, left=40), ground_row=20, vertical_velocity=2.9)
        integrate_physics(a, level1)
        assert a.hitbox.top == 8

    def test_downward_step_rounds_toward_zero(self, level1):
        a = Actor(hitbox=Box(height=4, width=9, top=10, left=40), ground_row=20, vertical_velocity=-2.9)
        integrate_physics(a, level1)
        assert a.hitbox.top == 12
        assert a.vertical_velocity == pytest.approx(-3.3)

    def test_landing_clamps_and_kills_velocity(self, level1):
        a = Actor(hitbox=Box(height=4, width=9, top=19, left=40), ground_row=20, vertical_velocity=-5.0)
        integrate_physics(a, level1)
        assert a.hitbox.top == 20
        assert a.vertical_velocity == 0

    def test_jump_in_the_air_overrides_velocity(self, level1):
        a = Actor(hitbox=Box(height=4, width=9, top=12, left=40), ground_row=20, vertical_velocity=-1.4)
        jump(a)
        assert a.vertical_velocity == a.max_upward_velocity


class TestAnimation:
    def test_phase_toggles_every_tick(self, level1):
        a = Actor.standing(20)
        integrate_physics(a, level1)
        assert a.animation_phase is AnimationPhase.B
        assert a.current_glyph_frame == FRAME_B
        integrate_physics(a, level1)
        assert a.animation_phase is AnimationPhase.A
        assert a.current_glyph_frame == FRAME_A

    def test_phase_does_not_move_the_actor(self, level1):
        a = Actor.standing(20)
        before = a.hitbox
        for _ in range(5):
            integrate_physics(a, level1)
        assert a.hitbox == before
        assert a.vertical_velocity == 0
