import cv2, numpy as np, yaml
from PySide6 import __version__ as pyside_version
print("OpenCV:", cv2.__version__)
print("NumPy:", np.__version__)
print("PySide6:", pyside_version)
print("PyYAML:", yaml.__version__)
x = cv2.blur(np.full((64, 64, 3), 0.75, np.float32), (3, 3))
print("Blur OK:", x.shape, x.dtype)
