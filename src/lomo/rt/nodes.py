import cv2, numpy as np

MIN_COLOR_PARAM = 0.08
MASK_FLOOR = 0.75
RED = 2  # BGR

def clamp_color_param(c):
    return max(MIN_COLOR_PARAM, float(c))

def lut_from_color_param(color_param):
    """Logistic remap table centred on mid-gray; smaller color_param = steeper."""
    x = np.arange(256, dtype=np.float64)/256.0
    y = 256.0/(1.0+np.exp(-(x-0.5)/color_param))
    return np.clip(np.rint(y), 0, 255).astype(np.uint8)

def apply_tone_curve(img_bgr, lut):
    # only the red channel is remapped
    b,g,r = cv2.split(img_bgr)
    r = cv2.LUT(r, lut)
    return cv2.merge([b,g,r])

def vignette_radius(w,h, vignette_param):
    max_radius = min(w,h)//2
    # halves round up
    return max(1, int(vignette_param*max_radius/100.0 + 0.5))

def blur_kernel_size(radius):
    # box blur needs an odd window
    return max(1, int(radius)) | 1

def vignette_mask(w,h, vignette_param):
    radius = vignette_radius(w,h, vignette_param)
    mask = np.full((h,w,3), MASK_FLOOR, dtype=np.float32)
    cv2.circle(mask, (w//2, h//2), radius, (1.0,1.0,1.0), -1)
    k = blur_kernel_size(radius)
    return cv2.blur(mask, (k,k))

def apply_vignette(img, mask):
    f = img.astype(np.float32)/255.0
    return np.clip(np.rint(f*mask*255.0), 0, 255).astype(np.uint8)

def apply_vignette_filter(img, vignette_param):
    h,w = img.shape[:2]
    return apply_vignette(img, vignette_mask(w,h, vignette_param))

def tone_curve_filter(img_bgr, color_param):
    return apply_tone_curve(img_bgr, lut_from_color_param(color_param))
