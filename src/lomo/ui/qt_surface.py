import sys
from collections import deque
import cv2
from PySide6 import QtWidgets, QtGui, QtCore
from .surface import DisplaySurface

class ImageWidget(QtWidgets.QLabel):
    def set_frame(self, bgr):
        rgb = cv2.cvtColor(bgr, cv2.COLOR_BGR2RGB)
        h,w,ch = rgb.shape
        qimg = QtGui.QImage(rgb.data, w, h, ch*w, QtGui.QImage.Format.Format_RGB888)
        self.setPixmap(QtGui.QPixmap.fromImage(qimg))

class PreviewWindow(QtWidgets.QWidget):
    def __init__(self, title, keys):
        super().__init__()
        self.setWindowTitle(title)
        self._keys = keys
        self.closed = False
        self.preview = ImageWidget()
        self.sliders = {}
        self.form = QtWidgets.QFormLayout()
        layout = QtWidgets.QVBoxLayout(self)
        layout.addWidget(self.preview, stretch=1)
        col = QtWidgets.QWidget(); col.setLayout(self.form)
        layout.addWidget(col)
        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)

    def add_slider(self, label, lo, hi, val, on_change):
        s = QtWidgets.QSlider(QtCore.Qt.Orientation.Horizontal)
        s.setRange(lo, hi); s.setValue(val)
        # sliders must not steal the keys the main loop listens for
        s.setFocusPolicy(QtCore.Qt.FocusPolicy.NoFocus)
        s.valueChanged.connect(on_change)
        self.form.addRow(QtWidgets.QLabel(label), s)
        self.sliders[label] = s
        return s

    def keyPressEvent(self, e):
        if e.text():
            self._keys.append(e.text())
        else:
            super().keyPressEvent(e)

    def closeEvent(self, e):
        self.closed = True
        return super().closeEvent(e)

class QtSurface(DisplaySurface):
    def __init__(self):
        self.app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)
        self._keys = deque()
        self._windows = {}

    def _window(self, name):
        w = self._windows.get(name)
        if w is None:
            w = PreviewWindow(name, self._keys)
            self._windows[name] = w
            w.show()
        return w

    def show_image(self, name, bgr):
        self._window(name).preview.set_frame(bgr)

    def create_slider(self, name, label, lo, hi, value, on_change):
        self._window(name).add_slider(label, lo, hi, value, on_change)

    def set_slider_value(self, name, label, value):
        self._window(name).sliders[label].setValue(value)

    def poll_key(self, delay_ms=1):
        self.app.processEvents()
        if not self._keys:
            QtCore.QThread.msleep(delay_ms)
            self.app.processEvents()
        return self._keys.popleft() if self._keys else None

    def center_window(self, name, width, height):
        w = self._window(name)
        screen = self.app.primaryScreen()
        if screen is None:
            return
        geo = screen.availableGeometry()
        w.move(geo.x() + (geo.width()-width)//2, geo.y() + (geo.height()-height)//2)

    def window_closed(self, name):
        w = self._windows.get(name)
        return w is not None and w.closed

    def close(self):
        for w in self._windows.values():
            w.close()
        self._windows.clear()
        self.app.processEvents()
