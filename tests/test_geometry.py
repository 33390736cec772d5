# tests/test_geometry.py
from readchar import key
from core.geometry import build_cage, direction_for_key, in_bounds, UP, DOWN, LEFT, RIGHT, NONE

def test_arrow_keys_map_to_unit_vectors():
    assert direction_for_key(key.UP) == UP == (0, -1)
    assert direction_for_key(key.DOWN) == DOWN == (0, 1)
    assert direction_for_key(key.LEFT) == LEFT == (-1, 0)
    assert direction_for_key(key.RIGHT) == RIGHT == (1, 0)
    assert direction_for_key("w") == NONE == (0, 0)
    assert direction_for_key(None) == NONE

def test_in_bounds_is_half_open():
    assert in_bounds(0, 0, 30, 20)
    assert in_bounds(29, 19, 30, 20)
    assert not in_bounds(30, 0, 30, 20)
    assert not in_bounds(0, 20, 30, 20)
    assert not in_bounds(-1, 0, 30, 20)

def test_cage_covers_perimeter_only():
    cols, rows = 30, 20
    cage = build_cage(cols, rows)
    assert len(cage) == 2 * cols + 2 * rows
    for c in cage:
        assert c.x in (0, cols - 1) or c.y in (0, rows - 1)
        assert in_bounds(c.x, c.y, cols, rows)
    perimeter = {(x, y) for x in range(cols) for y in range(rows)
                 if x in (0, cols - 1) or y in (0, rows - 1)}
    assert {c.pos for c in cage} == perimeter

def test_cage_glyphs():
    cage = build_cage(12, 12, h_glyph="=", v_glyph="#")
    top = [c for c in cage if c.y == 0 and 0 < c.x < 11]
    side = [c for c in cage if c.x == 0]
    assert {c.glyph for c in top} == {"="}
    assert {c.glyph for c in side} == {"#"}
    # corners appear twice; the vertical glyph comes last
    last_corner = [c for c in cage if c.pos == (0, 0)][-1]
    assert last_corner.glyph == "#"

def test_cage_is_immutable():
    assert isinstance(build_cage(12, 12), tuple)
