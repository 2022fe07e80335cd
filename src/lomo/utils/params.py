from dataclasses import dataclass, asdict
from ..rt.nodes import clamp_color_param

COLOR_SLIDER = "Color Param (x0.01)"
VIGNETTE_SLIDER = "Vignette Radius (%)"

# label -> (min, max)
SLIDER_RANGES = {
    COLOR_SLIDER: (0, 20),
    VIGNETTE_SLIDER: (0, 100),
}

@dataclass
class Params:
    # tone
    color_param: float = 0.10
    # optics
    vignette_param: int = 100

    def to_dict(self):
        return asdict(self)

def color_from_slider(v):
    return clamp_color_param(v/100.0)

def vignette_from_slider(v):
    lo,hi = SLIDER_RANGES[VIGNETTE_SLIDER]
    return min(hi, max(lo, int(v)))

def color_to_slider(c):
    return int(round(c*100))
