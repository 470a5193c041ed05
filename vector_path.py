from typing import NamedTuple

import numpy as np
import svgpathtools

from errors import require


class MoveTo(NamedTuple):
    point: tuple


class LineTo(NamedTuple):
    point: tuple


class CubicTo(NamedTuple):
    control1: tuple
    control2: tuple
    end: tuple


class ArcTo(NamedTuple):
    rx: float
    ry: float
    rotation: float
    small_arc: bool
    clockwise: bool
    end: tuple


class Close(NamedTuple):
    pass


class Segment(NamedTuple):
    """One drawn piece of a path: ``command`` drawn from ``start``.

    A ``Close`` comes out as a ``LineTo`` back to the subpath start.
    """
    start: tuple
    command: tuple


def _pt(p):
    return float(p[0]), float(p[1])


def _end_point(command):
    return command.point if isinstance(command, (MoveTo, LineTo)) else command.end


class Path:
    """Append-only list of drawing commands in y-down coordinates."""

    def __init__(self):
        self.commands = []
        self._start = None
        self._current = None

    def __iter__(self):
        return iter(self.commands)

    def __len__(self):
        return len(self.commands)

    def __repr__(self):
        return f"Path({len(self.commands)} commands, closed={self.is_closed})"

    @property
    def is_closed(self):
        return bool(self.commands) and isinstance(self.commands[-1], Close)

    @property
    def start_point(self):
        """Start of the current subpath."""
        return self._start

    @property
    def current_point(self):
        return self._current

    def _append(self, command, point):
        self.commands.append(command)
        self._current = point
        return self

    def _require_current(self, what):
        require(self._current is not None, f"{what} needs a current point; call move_to first")

    def move_to(self, point):
        point = _pt(point)
        self._start = point
        return self._append(MoveTo(point), point)

    def line_to(self, point):
        self._require_current("line_to")
        point = _pt(point)
        return self._append(LineTo(point), point)

    def cubic_to(self, control1, control2, end):
        self._require_current("cubic_to")
        end = _pt(end)
        return self._append(CubicTo(_pt(control1), _pt(control2), end), end)

    def arc_to(self, rx, ry, rotation, small_arc, clockwise, end):
        """Elliptical arc to ``end`` with SVG endpoint semantics.

        ``clockwise`` is the on-screen direction, which is the direction of
        increasing angle when y points down.
        """
        self._require_current("arc_to")
        end = _pt(end)
        command = ArcTo(float(rx), float(ry), float(rotation), bool(small_arc), bool(clockwise), end)
        return self._append(command, end)

    def close(self):
        self._require_current("close")
        return self._append(Close(), self._start)

    def segments(self):
        """Yield a ``Segment`` for every drawn piece, closing lines included.

        A ``Close`` always comes out as a ``LineTo`` back to the subpath start,
        of zero length when the subpath already ends there.
        """
        current = start = None
        for command in self.commands:
            if isinstance(command, MoveTo):
                current = start = command.point
                continue
            if isinstance(command, Close):
                yield Segment(current, LineTo(start))
                current = start
                continue
            yield Segment(current, command)
            current = _end_point(command)

    def to_svgpathtools(self):
        """The drawn segments as an ``svgpathtools.Path``."""
        return svgpathtools.Path(*(svg_segment(start, command) for start, command in self.segments()))

    def points(self, samples_per_seg=24):
        """Flatten the path into an (N, 2) array of points.

        Lines contribute their end point, curves and arcs ``samples_per_seg``
        points each. A closed path does not repeat its first point.
        """
        ts = np.linspace(0.0, 1.0, samples_per_seg + 1)[1:]
        out = []
        current = start = None
        for command in self.commands:
            if isinstance(command, MoveTo):
                start = command.point
                out.append(complex(*command.point))
            elif not isinstance(command, Close):
                seg = svg_segment(current, command)
                if isinstance(seg, svgpathtools.Line):
                    out.append(seg.end)
                else:
                    out.extend(seg.point(t) for t in ts)
            current = start if isinstance(command, Close) else _end_point(command)
        if not out:
            return np.empty((0, 2))
        z = np.array(out, dtype=complex)
        pts = np.column_stack((z.real, z.imag))
        if self.is_closed and len(pts) > 1 and np.allclose(pts[-1], pts[0]):
            pts = pts[:-1]
        return pts

    def to_svg(self):
        """SVG path data for this path; a closed path ends with ``Z``."""
        svg_path = self.to_svgpathtools()
        if not len(svg_path):
            return ""
        return svg_path.d(use_closed_attrib=self.is_closed)


def svg_segment(start, command):
    """The svgpathtools segment that ``command`` draws from ``start``.

    Points become complex numbers. An arc whose end points coincide, up to
    rounding, or whose radius is zero draws nothing, and comes out as a
    ``Line`` between its two end points.
    """
    start = complex(*start)
    if isinstance(command, LineTo):
        return svgpathtools.Line(start, complex(*command.point))
    if isinstance(command, CubicTo):
        return svgpathtools.CubicBezier(start, complex(*command.control1),
                                        complex(*command.control2), complex(*command.end))
    end = complex(*command.end)
    rx, ry = abs(command.rx), abs(command.ry)
    if rx == 0 or ry == 0 or abs(end - start) <= 1e-9 * max(rx, ry):
        return svgpathtools.Line(start, end)
    return svgpathtools.Arc(start, complex(rx, ry), command.rotation,
                            not command.small_arc, command.clockwise, end)
