import logging
import sys

from PySide6.QtCore import Qt
from PySide6.QtGui import QPen, QPainterPath, QFont, QTransform, QPainter
from PySide6.QtWidgets import QApplication, QGraphicsScene, QGraphicsView, QMainWindow, QDockWidget

import geometry
from geometry import build_smooth_rounded_rect, rounded_rect_points, rounded_rect_area
from measure import path_area
from points import PathHandles
from qt_path import to_qpainter_path
from inspector import InspectorWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Smooth round rectangle")
        self.rect_width, self.rect_height = 400.0, 200.0
        self.smoothness = 0.6
        # top-left, top-right, bottom-right, bottom-left
        self.radii = [40.0, 40.0, 40.0, 40.0]
        self.scale = 1.5
        self.point_radius = 4
        self.line_width = 2
        self.step = 1.0
        self.show_handles = True
        self.scene = QGraphicsScene()
        self.view = QGraphicsView(self.scene)
        self.view.setRenderHint(QPainter.Antialiasing, True)
        self.setCentralWidget(self.view)
        self.handles = None
        self.smooth_item = None
        self._inspector = InspectorWidget(self)
        dock = QDockWidget("Parameters", self)
        dock.setWidget(self._inspector)
        dock.setAllowedAreas(Qt.RightDockWidgetArea | Qt.LeftDockWidgetArea)
        self.addDockWidget(Qt.RightDockWidgetArea, dock)
        self.redraw_all()
        self._apply_transform()

    def origin(self):
        """Top-left corner that centers the rectangle on the scene origin."""
        return -self.rect_width / 2, -self.rect_height / 2

    def get_path(self):
        x, y = self.origin()
        return build_smooth_rounded_rect(x, y, self.rect_width, self.rect_height,
                                         self.smoothness, *self.radii)

    def get_contour(self):
        x, y = self.origin()
        return rounded_rect_points(x, y, self.rect_width, self.rect_height, self.radii, step=self.step)

    def _apply_transform(self):
        t = QTransform()
        t.scale(self.scale, self.scale)
        self.view.setTransform(t)

    def redraw_all(self):
        self.scene.clear()
        self.handles = None
        path = self.get_path()
        self._draw_background()
        self._draw_contour(self.get_contour())
        self.smooth_item = self.scene.addPath(to_qpainter_path(path), QPen(Qt.red, self.line_width))
        if self.show_handles:
            self.handles = PathHandles(self.scene, self, path)
        logger.debug("Redrew %gx%g rectangle, smoothness %g, radii %s",
                     self.rect_width, self.rect_height, self.smoothness, self.radii)

    def update_handles_radius(self):
        if self.handles is not None:
            self.handles.update_radius()

    def _draw_contour(self, contour):
        path = QPainterPath()
        path.moveTo(*contour[0])
        for x, y in contour[1:]:
            path.lineTo(x, y)
        path.closeSubpath()
        pen = QPen(Qt.blue, 1, Qt.DashLine)
        pen.setCosmetic(True)
        self.scene.addPath(path, pen)

    def _draw_background(self):
        a2, b2, m = self.rect_width / 2, self.rect_height / 2, 40
        pen_axis = QPen(Qt.darkGray, 1)
        pen_axis.setCosmetic(True)
        self.scene.addLine(-a2 - m, 0, a2 + m, 0, pen_axis)
        self.scene.addLine(0, -b2 - m, 0, b2 + m, pen_axis)
        self._arrow(a2 + m, 0)
        self._arrow(0, b2 + m, vertical=True)
        f = QFont("Tahoma", 10)
        item = self.scene.addText("x", f)
        item.setPos(a2 + m - 15, 2)
        item = self.scene.addText("y", f)
        item.setPos(8, b2 + m - 20)
        pen_box = QPen(Qt.lightGray, 1, Qt.DotLine)
        pen_box.setCosmetic(True)
        self.scene.addRect(-a2, -b2, self.rect_width, self.rect_height, pen_box)

    def _arrow(self, x, y, *, vertical=False):
        pen = QPen(Qt.darkGray, 1)
        pen.setCosmetic(True)
        if vertical:
            self.scene.addLine(x, y, x - 5, y - 10, pen)
            self.scene.addLine(x, y, x + 5, y - 10, pen)
        else:
            self.scene.addLine(x, y, x - 10, y - 5, pen)
            self.scene.addLine(x, y, x - 10, y + 5, pen)

    def smooth_area(self):
        return abs(path_area(self.get_path()))

    def plain_area(self):
        return rounded_rect_area(self.rect_width, self.rect_height, self.radii)

    def area_difference_percent(self):
        plain = self.plain_area()
        if plain == 0:
            return 0.0
        return 100.0 * (self.smooth_area() - plain) / plain

    def overlapping_edges(self):
        return geometry.overlapping_edges(self.rect_width, self.rect_height, self.smoothness, self.radii)


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    app = QApplication(sys.argv)
    win = MainWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
