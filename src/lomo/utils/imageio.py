import os, logging
import cv2
from ..errors import LoadError, ImagingBackendError

logger = logging.getLogger(__name__)

def load_image(path):
    """Read a colour image as uint8 BGR; raise LoadError if OpenCV can't."""
    if not os.path.isfile(path):
        raise LoadError(f"Could not load image {path}: no such file")
    img = cv2.imread(path, cv2.IMREAD_COLOR)
    if img is None or img.size == 0:
        raise LoadError(f"Could not load image {path}")
    logger.debug("Loaded %s (%dx%d)", path, img.shape[1], img.shape[0])
    return img

def save_image(path, img, jpeg_quality=95):
    try:
        ok = cv2.imwrite(path, img, [cv2.IMWRITE_JPEG_QUALITY, int(jpeg_quality)])
    except cv2.error as e:
        raise ImagingBackendError(f"Could not write {path}: {e}") from e
    if not ok:
        raise ImagingBackendError(f"Could not write {path}")
    return path
