import svgpathtools
from PySide6.QtCore import QPointF, QRectF
from PySide6.QtGui import QPainterPath

from errors import require
from vector_path import ArcTo, Close, CubicTo, LineTo, MoveTo, svg_segment


def to_qpainter_path(path):
    """Replay ``path`` onto a new QPainterPath.

    Qt measures arc angles counter-clockwise on screen, the opposite of the
    y-down angles svgpathtools reports, so both angles are negated.
    """
    qpath = QPainterPath()
    current = None
    start = None
    for command in path:
        if isinstance(command, MoveTo):
            qpath.moveTo(QPointF(*command.point))
            current = start = command.point
        elif isinstance(command, LineTo):
            qpath.lineTo(QPointF(*command.point))
            current = command.point
        elif isinstance(command, CubicTo):
            qpath.cubicTo(QPointF(*command.control1), QPointF(*command.control2), QPointF(*command.end))
            current = command.end
        elif isinstance(command, ArcTo):
            _arc_to(qpath, current, command)
            current = command.end
        elif isinstance(command, Close):
            qpath.closeSubpath()
            current = start
    return qpath


def _arc_to(qpath, current, arc):
    # QPainterPath only draws ellipses whose axes follow x and y
    require(arc.rotation % 180 == 0 or abs(arc.rx) == abs(arc.ry),
            f"cannot draw an ellipse rotated by {arc.rotation} degrees")
    seg = svg_segment(current, arc)
    if isinstance(seg, svgpathtools.Line):
        qpath.lineTo(QPointF(*arc.end))
        return
    rx, ry = seg.radius.real, seg.radius.imag
    cx, cy = seg.center.real, seg.center.imag
    rect = QRectF(cx - rx, cy - ry, 2 * rx, 2 * ry)
    # theta is measured from the rotated x axis
    qpath.arcTo(rect, -(seg.theta + arc.rotation), -seg.delta)
