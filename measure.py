import math

import numpy as np
import svgpathtools
from scipy.integrate import quad

from errors import require
from vector_path import ArcTo, CubicTo, LineTo, svg_segment


def line_area(p0, p1):
    return 0.5 * (p0[0] * p1[1] - p1[0] * p0[1])


def cubic_area(p0, p1, p2, p3):
    """Green's theorem term of a cubic Bezier, exact in its control points."""
    x = [p0[0], p1[0], p2[0], p3[0]]
    y = [p0[1], p1[1], p2[1], p3[1]]
    return 0.5 * (1 / 20) * (
            12 * x[0] * y[1] + 6 * x[0] * y[2] + 2 * x[0] * y[3] -
            12 * x[1] * y[0] + 6 * x[1] * y[2] + 6 * x[1] * y[3] -
            6 * x[2] * y[0] - 6 * x[2] * y[1] + 12 * x[2] * y[3] -
            2 * x[3] * y[0] - 6 * x[3] * y[1] - 12 * x[3] * y[2]
    )


def arc_area(start, arc):
    seg = svg_segment(start, arc)
    if isinstance(seg, svgpathtools.Line):
        return line_area(start, arc.end)
    cx, cy = seg.center.real, seg.center.imag
    chord = cx * (arc.end[1] - start[1]) - cy * (arc.end[0] - start[0])
    # the swept sector of an ellipse does not depend on its rotation
    return 0.5 * (chord + seg.radius.real * seg.radius.imag * math.radians(seg.delta))


def path_area(path):
    """Signed enclosed area; positive when the path runs clockwise on screen."""
    area = 0.0
    for start, command in path.segments():
        if isinstance(command, LineTo):
            area += line_area(start, command.point)
        elif isinstance(command, CubicTo):
            area += cubic_area(start, command.control1, command.control2, command.end)
        elif isinstance(command, ArcTo):
            area += arc_area(start, command)
    return area


def cubic_length(p0, p1, p2, p3):
    p0, p1, p2, p3 = (np.asarray(p, dtype=float) for p in (p0, p1, p2, p3))
    d0, d1, d2 = 3 * (p1 - p0), 3 * (p2 - p1), 3 * (p3 - p2)

    def speed(t):
        mt = 1.0 - t
        return np.linalg.norm(mt * mt * d0 + 2 * mt * t * d1 + t * t * d2)

    length, _ = quad(speed, 0.0, 1.0, limit=100)
    return length


def arc_length(start, arc):
    return svg_segment(start, arc).length()


def path_length(path):
    total = 0.0
    for start, command in path.segments():
        if isinstance(command, LineTo):
            total += math.dist(start, command.point)
        elif isinstance(command, CubicTo):
            total += cubic_length(start, command.control1, command.control2, command.end)
        elif isinstance(command, ArcTo):
            total += arc_length(start, command)
    return total


def path_bounds(path, samples_per_seg=24):
    """(xmin, ymin, xmax, ymax) of the flattened path."""
    pts = path.points(samples_per_seg)
    require(len(pts), "path_bounds needs a path with at least one point")
    x_min, y_min = pts.min(axis=0)
    x_max, y_max = pts.max(axis=0)
    return float(x_min), float(y_min), float(x_max), float(y_max)
