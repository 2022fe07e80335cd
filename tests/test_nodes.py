import numpy as np
import pytest
from lomo.rt import nodes


@pytest.mark.parametrize("c", [0.08, 0.1, 0.15, 0.2, 1.0, 50.0])
def test_lut_monotonic_and_in_range(c):
    lut = nodes.lut_from_color_param(c)
    assert lut.shape == (256,)
    assert lut.dtype == np.uint8
    assert np.all(np.diff(lut.astype(int)) >= 0)


def test_lut_near_step_at_minimum():
    lut = nodes.lut_from_color_param(nodes.MIN_COLOR_PARAM)
    assert lut[0] <= 1
    assert lut[255] == 255
    assert lut[128] == 128


def test_lut_flat_for_large_param():
    lut = nodes.lut_from_color_param(1e6)
    assert lut[128] == 128
    assert lut.min() >= 127 and lut.max() <= 128


def test_clamp_color_param():
    assert nodes.clamp_color_param(0.0) == pytest.approx(0.08)
    assert nodes.clamp_color_param(0.05) == pytest.approx(0.08)
    assert nodes.clamp_color_param(0.2) == pytest.approx(0.2)


def test_tone_curve_touches_only_red(photo):
    before = photo.copy()
    out = nodes.tone_curve_filter(photo, 0.1)
    np.testing.assert_array_equal(photo, before)
    np.testing.assert_array_equal(out[..., :2], photo[..., :2])
    lut = nodes.lut_from_color_param(0.1)
    np.testing.assert_array_equal(out[..., 2], lut[photo[..., 2]])


def test_tone_curve_keeps_mid_gray(gray4):
    np.testing.assert_array_equal(nodes.tone_curve_filter(gray4, 0.1), gray4)


def test_vignette_radius():
    assert nodes.vignette_radius(100, 100, 100) == 50
    assert nodes.vignette_radius(100, 60, 50) == 15
    assert nodes.vignette_radius(100, 100, 0) == 1
    assert nodes.vignette_radius(1, 1, 100) == 1
    # 1.5, 2.5, 3.5 all round up
    assert nodes.vignette_radius(10, 10, 30) == 2
    assert nodes.vignette_radius(10, 10, 50) == 3
    assert nodes.vignette_radius(10, 10, 70) == 4


@pytest.mark.parametrize("radius,k", [(0, 1), (1, 1), (2, 3), (7, 7), (50, 51)])
def test_blur_kernel_is_odd(radius, k):
    assert nodes.blur_kernel_size(radius) == k


def test_mask_center_and_corner():
    mask = nodes.vignette_mask(200, 100, 10)
    assert mask.shape == (100, 200, 3)
    assert mask.dtype == np.float32
    np.testing.assert_allclose(mask[50, 100], 1.0, atol=1e-6)
    np.testing.assert_allclose(mask[0, 0], 0.75, atol=1e-6)
    assert mask.min() >= 0.75 - 1e-6 and mask.max() <= 1.0 + 1e-6


@pytest.mark.parametrize("param", [1, 30, 100])
def test_mask_center_full_weight(param):
    mask = nodes.vignette_mask(64, 48, param)
    assert mask[24, 32, 0] == pytest.approx(1.0)


def test_zero_vignette_does_not_crash(photo):
    out = nodes.apply_vignette_filter(photo, 0)
    assert out.shape == photo.shape
    assert out.dtype == np.uint8


def test_apply_vignette_scales_and_saturates():
    img = np.full((2, 2, 3), 200, dtype=np.uint8)
    mask = np.full((2, 2, 3), 0.75, dtype=np.float32)
    np.testing.assert_array_equal(nodes.apply_vignette(img, mask), 150)
    ones = np.ones((2, 2, 3), dtype=np.float32)
    np.testing.assert_array_equal(nodes.apply_vignette(img, ones), img)
