import random

import pytest

from digraph_editor.layout import LayoutTable, Position


def test_positions_stay_inside_margins():
    layout = LayoutTable(width=200, height=100, margin=30, rng=random.Random(1))
    for i in range(200):
        pos = layout.place(f"V{i}")
        assert 30 <= pos.x <= 170
        assert 30 <= pos.y <= 70


def test_place_keeps_existing_position():
    layout = LayoutTable(rng=random.Random(3))
    first = layout.place('A')
    assert layout.place('A') == first
    assert len(layout) == 1


def test_seeded_rng_is_reproducible():
    a = LayoutTable(rng=random.Random(42))
    b = LayoutTable(rng=random.Random(42))
    assert a.place('A') == b.place('A')


def test_forget_and_get():
    layout = LayoutTable()
    layout.place('A')
    layout.forget('A')
    layout.forget('missing')
    assert layout.get('A') is None
    assert len(layout) == 0


def test_canvas_too_small():
    with pytest.raises(ValueError):
        LayoutTable(width=50, height=400, margin=30)


def test_position_is_immutable():
    pos = Position(1.0, 2.0)
    with pytest.raises(Exception):
        pos.x = 5.0
