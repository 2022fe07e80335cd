class DisplaySurface:
    """Something that can show images and report slider and key events.

    The core never talks to a GUI toolkit directly; `run_session` drives one
    of these. Slider callbacks receive the integer slider position.
    """

    def show_image(self, name, bgr):
        raise NotImplementedError

    def create_slider(self, name, label, lo, hi, value, on_change):
        raise NotImplementedError

    def set_slider_value(self, name, label, value):
        raise NotImplementedError

    def poll_key(self):
        """Pump pending GUI events; return the pressed key as a str, or None."""
        raise NotImplementedError

    def center_window(self, name, width, height):
        raise NotImplementedError

    def window_closed(self, name):
        return False

    def close(self):
        pass


BACKENDS = ("qt", "opencv")

def make_surface(backend):
    # toolkits are imported lazily so a bad CLI call never touches a display
    if backend == "qt":
        from .qt_surface import QtSurface
        return QtSurface()
    if backend == "opencv":
        from .cv_surface import CvSurface
        return CvSurface()
    raise ValueError(f"unknown backend {backend!r}")
