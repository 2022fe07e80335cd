import logging
from collections import deque
import cv2
from ..errors import ImagingBackendError
from ..rt.engine import ColorChanged, VignetteChanged, KeyPressed, Action
from ..utils.params import (COLOR_SLIDER, VIGNETTE_SLIDER, SLIDER_RANGES,
                            color_to_slider)
from ..utils.imageio import save_image

logger = logging.getLogger(__name__)

WINDOW = "Lomography"

def _add_slider(surface, label, value, make_event, events):
    lo,hi = SLIDER_RANGES[label]
    surface.create_slider(WINDOW, label, lo, hi, value,
                          lambda v: events.append(make_event(int(v))))
    surface.set_slider_value(WINDOW, label, value)

def run_session(controller, surface, output_path, jpeg_quality=95):
    """Show the filtered image and process slider/key events until quit or save.

    Slider callbacks only queue events; they are handled here, one at a time,
    after each key poll. Returns the saved path, or None if the user quit.
    """
    try:
        return _loop(controller, surface, output_path, jpeg_quality)
    except cv2.error as e:
        raise ImagingBackendError(f"OpenCV error: {e}") from e
    finally:
        surface.close()

def _loop(controller, surface, output_path, jpeg_quality):
    events = deque()
    p = controller.params
    w,h = controller.size

    surface.show_image(WINDOW, controller.final_output)
    surface.center_window(WINDOW, w, h)
    _add_slider(surface, COLOR_SLIDER, color_to_slider(p.color_param), ColorChanged, events)
    _add_slider(surface, VIGNETTE_SLIDER, p.vignette_param, VignetteChanged, events)

    while True:
        key = surface.poll_key()
        while events:
            res = controller.handle(events.popleft())
            surface.show_image(WINDOW, res.image)
        if surface.window_closed(WINDOW):
            logger.info("Window closed, exiting without saving")
            return None
        if key is None:
            continue
        res = controller.handle(KeyPressed(key))
        if res.action is Action.QUIT:
            logger.info("Quit without saving")
            return None
        if res.action is Action.SAVE:
            save_image(output_path, res.image, jpeg_quality)
            logger.info("Result saved as %s", output_path)
            return output_path
