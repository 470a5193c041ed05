from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QPen, QColor
from PySide6.QtWidgets import QGraphicsEllipseItem

from vector_path import ArcTo, CubicTo


class HandlePoint(QGraphicsEllipseItem):
    ANCHOR = QColor(255, 255, 255)
    CONTROL = QColor(0, 120, 255)
    ARC = QColor(0, 200, 80)

    def __init__(self, main_window, pos, color):
        self.main_window = main_window
        radius = main_window.point_radius
        super().__init__(-radius, -radius, 2 * radius, 2 * radius)
        self.setBrush(QBrush(color))
        pen = QPen(Qt.black, 1)
        pen.setCosmetic(True)
        self.setPen(pen)
        self.setZValue(5)
        self.setPos(*pos)

    def update_radius(self):
        r = self.main_window.point_radius
        self.setRect(-r, -r, 2 * r, 2 * r)


class PathHandles:
    """Markers for the anchors and control points of a path's curves and arcs."""

    def __init__(self, scene, main_window, path):
        self.scene, self.main_window = scene, main_window
        self.points, self.lines = [], []
        pen = QPen(Qt.darkGray, 1, Qt.DashLine)
        pen.setCosmetic(True)
        for start, command in path.segments():
            if isinstance(command, CubicTo):
                self.lines.append(scene.addLine(*start, *command.control1, pen))
                self.lines.append(scene.addLine(*command.control2, *command.end, pen))
                self._add(start, HandlePoint.ANCHOR)
                self._add(command.control1, HandlePoint.CONTROL)
                self._add(command.control2, HandlePoint.CONTROL)
            elif isinstance(command, ArcTo):
                self._add(start, HandlePoint.ARC)
                self._add(command.end, HandlePoint.ARC)

    def _add(self, pos, color):
        pt = HandlePoint(self.main_window, pos, color)
        self.scene.addItem(pt)
        self.points.append(pt)

    def update_radius(self):
        for pt in self.points:
            pt.update_radius()
