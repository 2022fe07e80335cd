import cv2
from .surface import DisplaySurface

class CvSurface(DisplaySurface):
    """OpenCV HighGUI windows and trackbars."""

    def __init__(self):
        self._windows = set()

    def _window(self, name):
        if name not in self._windows:
            cv2.namedWindow(name, cv2.WINDOW_AUTOSIZE)
            self._windows.add(name)

    def show_image(self, name, bgr):
        self._window(name)
        cv2.imshow(name, bgr)

    def create_slider(self, name, label, lo, hi, value, on_change):
        self._window(name)
        cv2.createTrackbar(label, name, value, hi, on_change)
        if lo:
            cv2.setTrackbarMin(label, name, lo)

    def set_slider_value(self, name, label, value):
        cv2.setTrackbarPos(label, name, value)

    def poll_key(self, delay_ms=1):
        k = cv2.waitKey(delay_ms)
        if k < 0 or (k & 0xFF) == 0xFF:
            return None
        return chr(k & 0xFF)

    def screen_size(self):
        # a throwaway fullscreen window reports the screen resolution
        cv2.namedWindow("Temp", cv2.WINDOW_NORMAL)
        cv2.setWindowProperty("Temp", cv2.WND_PROP_FULLSCREEN, cv2.WINDOW_FULLSCREEN)
        _, _, sw, sh = cv2.getWindowImageRect("Temp")
        cv2.destroyWindow("Temp")
        return sw, sh

    def center_window(self, name, width, height):
        self._window(name)
        sw, sh = self.screen_size()
        cv2.moveWindow(name, max(0, (sw-width)//2), max(0, (sh-height)//2))

    def window_closed(self, name):
        if name not in self._windows:
            return False
        return cv2.getWindowProperty(name, cv2.WND_PROP_VISIBLE) < 1

    def close(self):
        cv2.destroyAllWindows()
        self._windows.clear()
