"""Tests for obstacles.py: templates and the bounded FIFO."""

import pytest

from errors import CapacityExceeded, MalformedTemplate
from geometry import Box
from obstacles import MEDIUM, NARROW, TEMPLATES, WIDE, Obstacle, ObstacleSet, ObstacleTemplate


def make_obstacle(left, template=NARROW):
    return Obstacle(
        hitbox=Box(height=template.height, width=template.width, top=template.top, left=left),
        glyph_rows=template.glyph_rows,
    )


class TestTemplates:
    def test_three_templates_in_draw_order(self):
        assert [t.width for t in TEMPLATES] == [9, 6, 15]
        assert TEMPLATES == (MEDIUM, NARROW, WIDE)
        assert all(t.height == 4 for t in TEMPLATES)

    def test_ragged_rows_rejected_at_definition(self):
        with pytest.raises(MalformedTemplate):
            ObstacleTemplate(name="bad", top=15, glyph_rows=("###", "##"))

    def test_empty_template_rejected(self):
        with pytest.raises(MalformedTemplate):
            ObstacleTemplate(name="bad", top=15, glyph_rows=())

    def test_build_places_obstacle_at_right_edge(self):
        ob = MEDIUM.build(100)
        assert ob.hitbox == Box(height=4, width=9, top=15, left=90)
        assert ob.glyph_rows == MEDIUM.glyph_rows

    def test_obstacle_rows_must_match_height(self):
        with pytest.raises(MalformedTemplate):
            Obstacle(hitbox=Box(height=3, width=6, top=15, left=10), glyph_rows=NARROW.glyph_rows)


class TestObstacleSet:
    def test_append_until_full(self):
        s = ObstacleSet(2)
        s.append(make_obstacle(10))
        s.append(make_obstacle(60))
        assert len(s) == 2
        assert s.is_full
        with pytest.raises(CapacityExceeded):
            s.append(make_obstacle(90))
        assert len(s) == 2

    def test_front_and_back(self):
        s = ObstacleSet(3)
        assert s.front is None and s.back is None
        first, second = make_obstacle(10), make_obstacle(60)
        s.append(first)
        s.append(second)
        assert s.front is first
        assert s.back is second
        assert list(s) == [first, second]

    def test_scroll_moves_every_obstacle(self, level1):
        s = ObstacleSet(2)
        s.append(make_obstacle(10))
        s.append(make_obstacle(60))
        assert s.scroll_and_prune(level1) is None
        assert [ob.hitbox.left for ob in s] == [8, 58]

    def test_front_removed_once_it_reaches_left_edge(self, level1):
        s = ObstacleSet(2)
        gone = make_obstacle(1)
        s.append(gone)
        assert s.scroll_and_prune(level1) is gone
        assert gone.hitbox.left == -1
        assert len(s) == 0

    def test_left_edge_zero_counts_as_gone(self, level1):
        s = ObstacleSet(2)
        s.append(make_obstacle(2))
        s.scroll_and_prune(level1)
        assert len(s) == 0

    def test_not_removed_while_left_is_positive(self, level1):
        s = ObstacleSet(2)
        s.append(make_obstacle(3))
        s.scroll_and_prune(level1)
        assert len(s) == 1
        assert s.front.hitbox.left == 1

    def test_at_most_one_removal_per_call(self, level1):
        s = ObstacleSet(3)
        a, b, c = make_obstacle(1), make_obstacle(2), make_obstacle(50)
        for ob in (a, b, c):
            s.append(ob)

        assert s.scroll_and_prune(level1) is a
        assert list(s) == [b, c]
        assert b.hitbox.left == 0

        assert s.scroll_and_prune(level1) is b
        assert list(s) == [c]

    def test_clear(self):
        s = ObstacleSet(2)
        s.append(make_obstacle(10))
        s.clear()
        assert len(s) == 0
        assert not s
