from collections import deque
import numpy as np
import pytest
from lomo.ui.surface import DisplaySurface

class FakeSurface(DisplaySurface):
    def __init__(self, script=()):
        # items: a key (str), None, or a callable run in place of a poll
        self.script = deque(script)
        self.shown = []
        self.sliders = {}
        self.centered = None
        self.closed = False
    def show_image(self, name, bgr):
        self.shown.append((name, bgr.copy()))
    def create_slider(self, name, label, lo, hi, value, on_change):
        self.sliders[label] = {"range": (lo, hi), "value": value, "cb": on_change}
    def set_slider_value(self, name, label, value):
        s = self.sliders[label]
        s["value"] = value
        s["cb"](value)
    def move(self, label, value):
        self.set_slider_value(None, label, value)
    def poll_key(self):
        if not self.script:
            return "q"
        item = self.script.popleft()
        if callable(item):
            item(self)
            return None
        return item
    def center_window(self, name, width, height):
        self.centered = (name, width, height)
    def close(self):
        self.closed = True

@pytest.fixture
def fake_surface():
    return FakeSurface

@pytest.fixture
def gray4():
    return np.full((4, 4, 3), 128, dtype=np.uint8)

@pytest.fixture
def photo():
    rng = np.random.default_rng(7)
    return rng.integers(0, 256, size=(48, 64, 3), dtype=np.uint8)

@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("LOMO_CONFIG", str(tmp_path / "no-config.yaml"))
