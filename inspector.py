from PySide6.QtWidgets import QWidget, QFormLayout, QDoubleSpinBox, QSpinBox, QLabel, QCheckBox

from geometry import CORNER_NAMES


class InspectorWidget(QWidget):
    def __init__(self, main_window):
        super().__init__()
        self.main_window = main_window
        self.layout = QFormLayout()
        self.setLayout(self.layout)
        self.rect_width = self._add_dspinbox("Width", 10, 2000, main_window.rect_width, self._change_width)
        self.rect_height = self._add_dspinbox("Height", 10, 2000, main_window.rect_height, self._change_height)
        # zero smoothness is a plain rounded rectangle, not drawn here
        self.smoothness = self._add_dspinbox("Smoothness", 0.01, 1.0, main_window.smoothness,
                                             self._change_smoothness, decimals=2, step=0.05)
        self.radii = [
            self._add_dspinbox(f"Radius {name}", 1, 1000, r, self._radius_slot(i))
            for i, (name, r) in enumerate(zip(CORNER_NAMES, main_window.radii))
        ]
        self.scale = self._add_dspinbox("Scale", 0.1, 4.0, main_window.scale, self._change_scale, decimals=2, step=0.05)
        self.layout.addRow(QLabel("<b>Display</b>"))
        self.point_radius = self._add_spinbox("Point size", 1, 50, main_window.point_radius, self._change_point_radius)
        self.line_width = self._add_spinbox("Line width", 1, 15, main_window.line_width, self._change_line_width)
        self.show_handles = QCheckBox()
        self.show_handles.setChecked(main_window.show_handles)
        self.show_handles.toggled.connect(self._change_show_handles)
        self.layout.addRow("Show handles", self.show_handles)

        self.area_label = QLabel()
        self.plain_area_label = QLabel()
        self.difference_label = QLabel()
        self.overlap_label = QLabel()
        self.layout.addRow("Smooth area:", self.area_label)
        self.layout.addRow("Plain fillet area:", self.plain_area_label)
        self.layout.addRow("Difference:", self.difference_label)
        self.layout.addRow("Overlapping edges:", self.overlap_label)

        self.update_figures()

    def update_figures(self):
        area = self.main_window.smooth_area()
        plain = self.main_window.plain_area()
        diff = self.main_window.area_difference_percent()
        overlaps = self.main_window.overlapping_edges()
        self.area_label.setText(f"{area:.2f}")
        self.plain_area_label.setText(f"{plain:.2f}")
        self.difference_label.setText(f"{diff:.2f}%")
        self.overlap_label.setText(", ".join(overlaps) if overlaps else "none")

    def _add_dspinbox(self, label, mn, mx, val, slot, decimals=1, step=1.0):
        w = QDoubleSpinBox()
        w.setRange(mn, mx)
        w.setDecimals(decimals)
        w.setSingleStep(step)
        w.setValue(val)
        w.valueChanged.connect(slot)
        self.layout.addRow(label, w)
        return w

    def _add_spinbox(self, label, mn, mx, val, slot):
        w = QSpinBox()
        w.setRange(mn, mx)
        w.setValue(val)
        w.valueChanged.connect(slot)
        self.layout.addRow(label, w)
        return w

    def _radius_slot(self, index):
        def slot(v):
            self.main_window.radii[index] = v
            self.main_window.redraw_all()
            self.update_figures()
        return slot

    def _change_width(self, v):
        self.main_window.rect_width = v
        self.main_window.redraw_all()
        self.update_figures()

    def _change_height(self, v):
        self.main_window.rect_height = v
        self.main_window.redraw_all()
        self.update_figures()

    def _change_smoothness(self, v):
        self.main_window.smoothness = v
        self.main_window.redraw_all()
        self.update_figures()

    def _change_scale(self, v):
        self.main_window.scale = v
        self.main_window._apply_transform()

    def _change_point_radius(self, v):
        self.main_window.point_radius = v
        self.main_window.update_handles_radius()

    def _change_line_width(self, v):
        self.main_window.line_width = v
        self.main_window.redraw_all()

    def _change_show_handles(self, checked):
        self.main_window.show_handles = checked
        self.main_window.redraw_all()
