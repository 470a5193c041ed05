import logging
import math
from typing import NamedTuple

import numpy as np

from errors import require
from vector_path import Path

logger = logging.getLogger(__name__)

PI_DIV_4 = math.pi / 4
EDGE_CURVE_POINT_RATIO = 2.0 / 3.0

CORNER_NAMES = ("top-left", "top-right", "bottom-right", "bottom-left")
EDGE_NAMES = ("top", "right", "bottom", "left")


class Vec(NamedTuple):
    x: float
    y: float

    def __add__(self, other):
        return Vec(self.x + other[0], self.y + other[1])

    def __sub__(self, other):
        return Vec(self.x - other[0], self.y - other[1])

    def __mul__(self, k):
        return Vec(self.x * k, self.y * k)

    __rmul__ = __mul__

    def transposed(self):
        return Vec(self.y, self.x)

    def length(self):
        return math.hypot(self.x, self.y)


def quarter_rotate(v, quarter_rotations):
    """Rotate ``v`` by quarter turns, 90 degrees clockwise on screen each.

    The y axis points down, so one quarter turn sends +x to +y:
    0 = (+x, +y), 1 = (-y, +x), 2 = (-x, -y), 3 = (+y, -x).
    """
    q = quarter_rotations % 4
    sign_x = 1.0 if (q + 1) % 4 < 2 else -1.0
    sign_y = 1.0 if q < 2 else -1.0
    if q % 2 == 0:
        value_x, value_y = v[0], v[1]
    else:
        value_x, value_y = v[1], v[0]
    return Vec(sign_x * value_x, sign_y * value_y)


class CurveGeometry(NamedTuple):
    """Landmarks of one smoothed corner, relative to the rectangle's corner point.

    Offsets run along the edge leaving the corner; for ``arc_connecting_vector``
    x is parallel to that edge and y perpendicular to it. Every value is in path
    units (already scaled by the corner radius): ``arc_curve_offset`` is
    ``radius * (1 - tan(a / 2))`` and ``arc_connecting_vector`` is
    ``radius * (1 - sin(a), 1 - cos(a))``, not fractions of the radius.
    """

    # where the straight edge stops and the first curve starts
    edge_connecting_offset: float
    # curve control point on the edge side
    edge_curve_offset: float
    # curve control point on the arc side
    arc_curve_offset: float
    # where the curve meets the circular arc
    arc_connecting_vector: Vec

    @classmethod
    def compute(cls, radius, smoothness):
        require(radius > 0, f"radius must be positive, got {radius}")
        require(0 < smoothness <= 1, f"smoothness must be in (0, 1], got {smoothness}")

        edge_connecting_offset = (1.0 + smoothness) * radius
        arc_angle = PI_DIV_4 * smoothness
        arc_connecting_vector = Vec(1.0 - math.sin(arc_angle), 1.0 - math.cos(arc_angle)) * radius
        arc_curve_offset = (1.0 - math.tan(arc_angle / 2.0)) * radius
        edge_curve_offset = (
            edge_connecting_offset
            - (edge_connecting_offset - arc_curve_offset) * EDGE_CURVE_POINT_RATIO
        )
        return cls(edge_connecting_offset, edge_curve_offset, arc_curve_offset, arc_connecting_vector)

    @property
    def edge_connecting_vector(self):
        return Vec(self.edge_connecting_offset, 0.0)

    @property
    def edge_curve_vector(self):
        return Vec(self.edge_curve_offset, 0.0)

    @property
    def arc_curve_vector(self):
        return Vec(self.arc_curve_offset, 0.0)

    @property
    def arc_connecting_vector_transposed(self):
        return self.arc_connecting_vector.transposed()


def draw_corner(path, radius, curve, corner, quarter_rotations):
    """Append edge, curve, arc, curve for one corner.

    ``quarter_rotations`` selects the corner: 0 top-left, 1 top-right,
    2 bottom-right, 3 bottom-left. The first corner starts the path; the
    others draw the straight edge from the previous corner.
    """
    require(0 <= quarter_rotations < 4,
            f"quarter_rotations must be in 0..3, got {quarter_rotations}")
    corner = Vec(*corner)
    k = quarter_rotations

    edge_connecting_point = corner + quarter_rotate(curve.edge_connecting_vector, k + 1)
    if k == 0:
        path.move_to(edge_connecting_point)
    else:
        path.line_to(edge_connecting_point)

    # the transpose stands in for three more quarter turns: 3 + 1 = 0
    path.cubic_to(
        corner + quarter_rotate(curve.edge_curve_vector, k + 1),
        corner + quarter_rotate(curve.arc_curve_vector, k + 1),
        corner + quarter_rotate(curve.arc_connecting_vector_transposed, k),
    )

    path.arc_to(radius, radius, 0.0, True, True,
                corner + quarter_rotate(curve.arc_connecting_vector, k))

    path.cubic_to(
        corner + quarter_rotate(curve.arc_curve_vector, k),
        corner + quarter_rotate(curve.edge_curve_vector, k),
        corner + quarter_rotate(curve.edge_connecting_vector, k),
    )


def corner_points(x, y, width, height):
    """Rectangle corners clockwise from the top-left."""
    return [
        Vec(x, y),
        Vec(x + width, y),
        Vec(x + width, y + height),
        Vec(x, y + height),
    ]


def overlapping_edges(width, height, smoothness, radii):
    """Names of the edges whose two corner curves need more room than the edge has."""
    reach = [CurveGeometry.compute(r, smoothness).edge_connecting_offset for r in radii]
    lengths = (width, height, width, height)
    return [
        name
        for i, (name, length) in enumerate(zip(EDGE_NAMES, lengths))
        if reach[i] + reach[(i + 1) % 4] > length
    ]


def build_smooth_rounded_rect(x, y, width, height, smoothness,
                              top_left_radius, top_right_radius,
                              bottom_right_radius, bottom_left_radius):
    """Closed path of a rectangle with smoothed corners.

    Each corner joins its edges through a cubic curve, a circular arc of the
    corner's radius and a second cubic curve. Radii that are large for the
    rectangle are not reduced; the path then crosses itself.
    """
    require(width > 0, f"width must be positive, got {width}")
    require(height > 0, f"height must be positive, got {height}")
    # smoothness == 0 is a plain rounded rectangle and has its own routine
    require(0 < smoothness <= 1, f"smoothness must be in (0, 1], got {smoothness}")
    radii = (top_left_radius, top_right_radius, bottom_right_radius, bottom_left_radius)
    for name, r in zip(CORNER_NAMES, radii):
        require(r > 0, f"{name} radius must be positive, got {r}")

    # TODO: balance overlapping radii and smoothing curves instead of only reporting them
    overlaps = overlapping_edges(width, height, smoothness, radii)
    if overlaps:
        logger.warning("Corner curves overlap on the %s edge(s) of a %gx%g rectangle",
                       ", ".join(overlaps), width, height)

    path = Path()
    for k, (corner, r) in enumerate(zip(corner_points(x, y, width, height), radii)):
        draw_corner(path, r, CurveGeometry.compute(r, smoothness), corner, k)
    path.close()
    logger.debug("Built smooth rect at (%g, %g) %gx%g, smoothness %g: %d commands",
                 x, y, width, height, smoothness, len(path))
    return path


def rounded_rect_points(x, y, width, height, radii, *, step=5.0, n_arc=180, n_line=200):
    """Evenly spaced points along a plain circular-fillet rectangle.

    ``radii`` are clockwise from the top-left, like the smooth rectangle's.
    Points run clockwise starting where the top-left arc leaves the left edge.
    """
    r0, r1, r2, r3 = radii
    centers = [
        (x + r0, y + r0),
        (x + width - r1, y + r1),
        (x + width - r2, y + height - r2),
        (x + r3, y + height - r3),
    ]
    # y points down, so increasing angles run clockwise on screen
    ang = [
        (math.pi, 3 * math.pi / 2),
        (3 * math.pi / 2, 2 * math.pi),
        (0.0, math.pi / 2),
        (math.pi / 2, math.pi),
    ]

    def arc(xc, yc, R, ang0, ang1):
        t = np.linspace(ang0, ang1, n_arc, endpoint=False)
        return np.column_stack((xc + R * np.cos(t), yc + R * np.sin(t)))

    def arc_end(xc, yc, R, ang1):
        return np.array([xc + R * math.cos(ang1), yc + R * math.sin(ang1)])

    def line(p0, p1):
        p0, p1 = map(np.asarray, (p0, p1))
        t = np.linspace(0, 1, n_line, endpoint=False)[:, None]
        return p0 + t * (p1 - p0)

    arcs = [arc(cx, cy, R, a0, a1) for (cx, cy), R, (a0, a1) in zip(centers, radii, ang)]
    ends = [arc_end(cx, cy, R, a1) for (cx, cy), R, (_, a1) in zip(centers, radii, ang)]
    dense = np.vstack([
        part
        for i in range(4)
        for part in (arcs[i], line(ends[i], arcs[(i + 1) % 4][0]))
    ])
    seg = np.linalg.norm(np.diff(dense, axis=0, append=dense[:1]), axis=1)
    s = np.concatenate(([0.0], np.cumsum(seg[:-1])))
    total = s[-1] + seg[-1]
    m = max(4, int(total / step))
    su = np.linspace(0.0, total, m, endpoint=False)
    px = np.interp(su, s, dense[:, 0])
    py = np.interp(su, s, dense[:, 1])
    return np.column_stack((px, py))


def rounded_rect_area(width, height, radii):
    """Area of a plain circular-fillet rectangle with per-corner radii."""
    return width * height - (1 - math.pi / 4) * sum(r ** 2 for r in radii)
