import logging
from dataclasses import dataclass
from enum import Enum
import numpy as np
from .nodes import (lut_from_color_param, apply_tone_curve, vignette_mask,
                    apply_vignette)
from ..utils.params import Params, color_from_slider, vignette_from_slider

logger = logging.getLogger(__name__)

# ---------- events ----------
@dataclass(frozen=True)
class ColorChanged:
    value: int       # slider position, colour param x100

@dataclass(frozen=True)
class VignetteChanged:
    value: int       # radius percentage

@dataclass(frozen=True)
class KeyPressed:
    key: str

class Action(Enum):
    CONTINUE = "continue"
    QUIT = "quit"
    SAVE = "save"

@dataclass
class RenderResult:
    image: np.ndarray | None = None
    action: Action = Action.CONTINUE
    tone_recomputed: bool = False

class LomoController:
    """Owns the parameters and the cached pipeline stages for one source image.

    source -> tone curve (red channel LUT) -> vignette -> final.
    A vignette change reuses the cached tone-curve output; a colour change
    reruns both stages.
    """

    def __init__(self, source, params: Params | None = None):
        if source.ndim != 3 or source.shape[2] != 3 or source.size == 0:
            raise ValueError(f"expected a non-empty 3-channel image, got shape {source.shape}")
        self.source = source
        self.params = params or Params()
        self._lut = None
        self._mask = None
        self._mask_key = None
        self.tone_curve_output = None
        self.final_output = None
        self._render_tone()
        self._render_vignette()

    @property
    def size(self):
        h,w = self.source.shape[:2]
        return w,h

    # ---------- pipeline stages ----------
    def _render_tone(self):
        p = self.params
        self._lut = lut_from_color_param(p.color_param)
        self.tone_curve_output = apply_tone_curve(self.source, self._lut)
        logger.debug("tone curve recomputed (color_param=%.2f)", p.color_param)

    def _ensure_mask(self):
        w,h = self.size
        key = (w,h, self.params.vignette_param)
        if self._mask is None or self._mask_key != key:
            self._mask = vignette_mask(w,h, self.params.vignette_param)
            self._mask_key = key
        return self._mask

    def _render_vignette(self):
        self.final_output = apply_vignette(self.tone_curve_output, self._ensure_mask())
        logger.debug("vignette recomputed (vignette_param=%d)", self.params.vignette_param)

    # ---------- events ----------
    def handle(self, event) -> RenderResult:
        if isinstance(event, ColorChanged):
            self.params.color_param = color_from_slider(event.value)
            self._render_tone()
            self._render_vignette()
            return RenderResult(self.final_output, tone_recomputed=True)
        if isinstance(event, VignetteChanged):
            self.params.vignette_param = vignette_from_slider(event.value)
            self._render_vignette()
            return RenderResult(self.final_output)
        if isinstance(event, KeyPressed):
            if event.key == "q":
                return RenderResult(action=Action.QUIT)
            if event.key == "s":
                return RenderResult(self.final_output, action=Action.SAVE)
            return RenderResult()
        raise TypeError(f"unknown event {event!r}")
