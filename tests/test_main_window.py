import os
import sys
import numpy as np
os.environ['QT_QPA_PLATFORM'] = 'offscreen'
sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from PySide6.QtWidgets import QApplication
from main_window import MainWindow
from vector_path import ArcTo


def test_smooth_area_below_plain_fillet():
    app = QApplication.instance() or QApplication([])
    win = MainWindow()
    assert 0 < win.smooth_area() < win.plain_area()
    assert win.area_difference_percent() < 0


def test_inspector_updates_geometry():
    app = QApplication.instance() or QApplication([])
    win = MainWindow()
    win._inspector.smoothness.setValue(0.3)
    assert np.isclose(win.smoothness, 0.3)
    win._inspector.radii[2].setValue(25)
    assert win.radii == [40.0, 40.0, 25.0, 40.0]
    arcs = [c for c in win.get_path() if isinstance(c, ArcTo)]
    assert [a.rx for a in arcs] == [40, 40, 25, 40]


def test_handles_follow_checkbox():
    app = QApplication.instance() or QApplication([])
    win = MainWindow()
    # three markers per curve, two per arc
    assert len(win.handles.points) == 8 * 3 + 4 * 2
    win._inspector.show_handles.setChecked(False)
    assert win.handles is None


def test_overlap_reported_for_narrow_rect():
    app = QApplication.instance() or QApplication([])
    win = MainWindow()
    assert win.overlapping_edges() == []
    win._inspector.rect_width.setValue(100)
    assert win.overlapping_edges() == ["top", "bottom"]
    assert win._inspector.overlap_label.text() == "top, bottom"
