import argparse, logging, sys
import cv2
from .errors import ArgumentError, LomoError, ImagingBackendError, EXIT_OK
from .rt.engine import LomoController
from .ui.app import run_session
from .ui.surface import make_surface, BACKENDS
from .utils.config import read_config
from .utils.imageio import load_image

logger = logging.getLogger(__name__)

class _Parser(argparse.ArgumentParser):
    def error(self, message):
        raise ArgumentError(f"{message}\n{self.format_usage().strip()}")

def build_parser():
    ap = _Parser(prog="lomo", description="Lomography tone curve and vignette with live sliders. "
                 "Press 's' to save the result, 'q' to quit.")
    ap.add_argument("image_path")
    ap.add_argument("--backend", choices=BACKENDS, default=None,
                    help="display backend (default from config: qt)")
    ap.add_argument("--output", default=None, help="where 's' writes the result")
    ap.add_argument("--config", default=None, help="YAML config file (default ~/.lomo/config.yaml)")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap

def _run(args):
    cfg = read_config(args.config)
    src = load_image(args.image_path)
    controller = LomoController(src)
    backend = args.backend or cfg["backend"]
    if backend not in BACKENDS:
        raise ArgumentError(f"unknown backend {backend!r} in config")
    surface = make_surface(backend)
    run_session(controller, surface, args.output or cfg["output_path"],
                cfg["jpeg_quality"])

def _fail(e):
    logger.error("%s: %s", type(e).__name__, e)
    return e.exit_code

def main(argv=None):
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )
    try:
        args = build_parser().parse_args(argv)
        if args.verbose:
            logging.getLogger().setLevel(logging.DEBUG)
        _run(args)
    except cv2.error as e:
        return _fail(ImagingBackendError(f"OpenCV error: {e}"))
    except LomoError as e:
        return _fail(e)
    return EXIT_OK

if __name__ == "__main__":
    sys.exit(main())
