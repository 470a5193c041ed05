import logging
import math
import os
import sys

import numpy as np
import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from errors import ContractError
from geometry import (
    CurveGeometry,
    Vec,
    build_smooth_rounded_rect,
    draw_corner,
    overlapping_edges,
    quarter_rotate,
    rounded_rect_area,
    rounded_rect_points,
)
from vector_path import ArcTo, Close, CubicTo, LineTo, MoveTo, Path

VECTORS = [(3.0, 4.0), (-2.5, 0.5), (0.0, 7.0), (1e-3, -9.0), (0.0, 0.0)]


def command_points(path):
    pts = []
    for c in path:
        if isinstance(c, (MoveTo, LineTo)):
            pts.append(c.point)
        elif isinstance(c, CubicTo):
            pts.extend([c.control1, c.control2, c.end])
        elif isinstance(c, ArcTo):
            pts.append(c.end)
    return np.array(pts)


def test_quarter_rotate_table():
    v = (3.0, 4.0)
    assert quarter_rotate(v, 0) == (3.0, 4.0)
    assert quarter_rotate(v, 1) == (-4.0, 3.0)
    assert quarter_rotate(v, 2) == (-3.0, -4.0)
    assert quarter_rotate(v, 3) == (4.0, -3.0)
    assert quarter_rotate(v, 5) == quarter_rotate(v, 1)
    assert quarter_rotate(v, -1) == quarter_rotate(v, 3)


def test_quarter_rotate_is_clockwise_on_screen():
    # +x goes to +y when y points down
    assert quarter_rotate((1.0, 0.0), 1) == (0.0, 1.0)


def test_quarter_rotate_preserves_length():
    for v in VECTORS:
        for k in range(8):
            assert np.isclose(quarter_rotate(v, k).length(), math.hypot(*v))


def test_four_quarter_turns_return_input():
    for v in VECTORS:
        r = v
        for _ in range(4):
            r = quarter_rotate(r, 1)
        assert r == v


def test_vec_arithmetic():
    assert Vec(1, 2) + (3, 4) == Vec(4, 6)
    assert Vec(1, 2) - Vec(3, 4) == Vec(-2, -2)
    assert Vec(1, 2) * 2 == Vec(2, 4)
    assert 2 * Vec(1, 2) == Vec(2, 4)
    assert Vec(1, 2).transposed() == Vec(2, 1)


def test_curve_geometry_values():
    curve = CurveGeometry.compute(20, 1.0)
    assert np.isclose(curve.edge_connecting_offset, 40.0)
    assert np.isclose(curve.arc_curve_offset, 20 * (1 - math.tan(math.pi / 8)))
    assert np.allclose(curve.arc_connecting_vector, (20 * (1 - math.sqrt(0.5)),) * 2)
    expected = 40.0 - (40.0 - curve.arc_curve_offset) * 2 / 3
    assert np.isclose(curve.edge_curve_offset, expected)


def test_curve_geometry_ordering():
    for radius in (0.01, 0.5, 1.0, 20.0, 500.0):
        for smoothness in (0.01, 0.25, 0.5, 0.75, 1.0):
            curve = CurveGeometry.compute(radius, smoothness)
            assert curve.edge_connecting_offset > curve.edge_curve_offset > curve.arc_curve_offset


@pytest.mark.parametrize("radius, smoothness", [(0, 0.5), (-1, 0.5), (10, 0), (10, -0.1), (10, 1.01)])
def test_curve_geometry_rejects_bad_input(radius, smoothness):
    with pytest.raises(ContractError):
        CurveGeometry.compute(radius, smoothness)


def test_draw_corner_rejects_bad_rotation():
    curve = CurveGeometry.compute(10, 0.5)
    for k in (-1, 4):
        with pytest.raises(ContractError):
            draw_corner(Path(), 10, curve, (0, 0), k)


def test_draw_corner_emits_line_curve_arc_curve():
    path = Path().move_to((0, 0))
    curve = CurveGeometry.compute(10, 0.5)
    draw_corner(path, 10, curve, (100, 0), 1)
    kinds = [type(c) for c in path.commands[1:]]
    assert kinds == [LineTo, CubicTo, ArcTo, CubicTo]
    assert np.allclose(path.commands[1].point, (85, 0))
    assert np.allclose(path.commands[-1].end, (100, 15))


def test_arc_ends_lie_on_corner_circle():
    r = 20
    path = build_smooth_rounded_rect(0, 0, 100, 100, 0.5, r, r, r, r)
    centers = [(r, r), (100 - r, r), (100 - r, 100 - r), (r, 100 - r)]
    segments = [s for s in path.segments() if isinstance(s.command, ArcTo)]
    assert len(segments) == 4
    for (start, arc), center in zip(segments, centers):
        assert np.isclose(math.dist(start, center), r)
        assert np.isclose(math.dist(arc.end, center), r)


def test_square_scenario():
    path = build_smooth_rounded_rect(0, 0, 100, 100, 1.0, 20, 20, 20, 20)
    assert path.is_closed
    drawing = [c for c in path if not isinstance(c, Close)]
    assert len(drawing) == 16
    assert sum(isinstance(c, CubicTo) for c in path) == 8
    assert sum(isinstance(c, LineTo) for c in path) == 3
    arcs = [c for c in path if isinstance(c, ArcTo)]
    assert len(arcs) == 4
    for arc in arcs:
        assert (arc.rx, arc.ry, arc.rotation) == (20, 20, 0)
        assert arc.small_arc and arc.clockwise
    # starts on the left edge, and the top edge runs from 40 to 60
    assert isinstance(path.commands[0], MoveTo)
    assert np.allclose(path.commands[0].point, (0, 40))
    assert np.allclose(path.commands[3].end, (40, 0))
    assert np.allclose(path.commands[4].point, (60, 0))


def test_distinct_top_left_radius():
    path = build_smooth_rounded_rect(0, 0, 100, 100, 0.5, 10, 20, 20, 20)
    assert np.allclose(path.commands[0].point, (0, 15))
    assert np.allclose(path.commands[3].end, (15, 0))
    assert np.allclose(path.commands[4].point, (70, 0))
    arcs = [c for c in path if isinstance(c, ArcTo)]
    assert [a.rx for a in arcs] == [10, 20, 20, 20]
    assert CurveGeometry.compute(10, 0.5) != CurveGeometry.compute(20, 0.5)


def test_square_is_symmetric_under_quarter_turn():
    path = build_smooth_rounded_rect(0, 0, 100, 100, 0.7, 20, 20, 20, 20)
    pts = command_points(path)
    rel = pts - 50.0
    turned = np.column_stack((-rel[:, 1], rel[:, 0])) + 50.0
    d = np.linalg.norm(turned[:, None, :] - pts[None, :, :], axis=2)
    assert np.all(d.min(axis=1) < 1e-9)


def test_points_stay_inside_rectangle():
    path = build_smooth_rounded_rect(10, 20, 300, 120, 0.8, 15, 40, 25, 5)
    pts = path.points(32)
    assert np.all(pts[:, 0] >= 10 - 1e-9) and np.all(pts[:, 0] <= 310 + 1e-9)
    assert np.all(pts[:, 1] >= 20 - 1e-9) and np.all(pts[:, 1] <= 140 + 1e-9)


@pytest.mark.parametrize("args", [
    (0, 0, 100, 100, 0.5, 0, 20, 20, 20),
    (0, 0, 100, 100, 0.5, 20, 20, 20, -1),
    (0, 0, 0, 100, 0.5, 20, 20, 20, 20),
    (0, 0, 100, -5, 0.5, 20, 20, 20, 20),
    (0, 0, 100, 100, 0.0, 20, 20, 20, 20),
    (0, 0, 100, 100, 1.5, 20, 20, 20, 20),
])
def test_build_rejects_bad_input(args):
    with pytest.raises(ContractError):
        build_smooth_rounded_rect(*args)


def test_overlapping_edges():
    assert overlapping_edges(100, 100, 1.0, [20] * 4) == []
    assert overlapping_edges(100, 100, 1.0, [30] * 4) == ["top", "right", "bottom", "left"]
    assert overlapping_edges(200, 100, 1.0, [30] * 4) == ["right", "left"]


def test_overlap_is_logged_but_not_clamped(caplog):
    with caplog.at_level(logging.WARNING, logger="geometry"):
        path = build_smooth_rounded_rect(0, 0, 100, 100, 1.0, 30, 30, 30, 30)
    assert "overlap" in caplog.text
    assert np.allclose(path.commands[0].point, (0, 60))
    assert len(path) == 17


def test_plain_contour_bounds():
    pts = rounded_rect_points(-100, -50, 200, 100, [20, 20, 20, 20], step=1.0)
    assert np.isclose(pts[:, 0].min(), -100)
    assert np.isclose(pts[:, 0].max(), 100)
    assert np.isclose(pts[:, 1].min(), -50)
    assert np.isclose(pts[:, 1].max(), 50)


def test_plain_contour_area_matches_formula():
    radii = [20, 35, 10, 5]
    pts = rounded_rect_points(0, 0, 200, 100, radii, step=1.0)
    x, y = pts[:, 0], pts[:, 1]
    shoelace = 0.5 * abs(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y))
    assert np.isclose(shoelace, rounded_rect_area(200, 100, radii), rtol=1e-3)


def test_rounded_area_matches_formula():
    a, b, R = 200, 100, 20
    expected = a * b - (4 - np.pi) * (R ** 2)
    assert np.isclose(rounded_rect_area(a, b, [R] * 4), expected)
