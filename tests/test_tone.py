import numpy as np
import pytest

from asciidither.tone import adjust, luminance, tone_map


def test_neutral_adjust_is_identity():
    values = np.arange(256, dtype=np.float64)
    np.testing.assert_array_equal(adjust(values, 1.0, 1.0), values)


def test_contrast_is_clamped_before_brightness():
    # (250 - 128) * 2 + 128 = 372 clamps to 255 before halving
    assert adjust(np.array([250.0]), 2.0, 0.5)[0] == pytest.approx(127.5)


def test_brightness_result_is_clamped():
    assert adjust(np.array([200.0]), 1.0, 3.0)[0] == 255.0
    assert adjust(np.array([10.0]), 3.0, 3.0)[0] == 0.0


def test_contrast_pivots_on_mid_grey():
    assert adjust(np.array([128.0]), 2.5, 1.0)[0] == 128.0
    assert adjust(np.array([100.0]), 2.0, 1.0)[0] == 72.0


def test_luminance_uses_ntsc_weights():
    rgb = np.array([[10, 20, 30], [255, 0, 0], [0, 0, 255]], dtype=np.uint8)
    np.testing.assert_allclose(luminance(rgb), [18.15, 76.245, 29.07])


def test_tone_map_truncates_before_weighting():
    rgb = np.array([[[101, 151, 201]]], dtype=np.uint8)
    gray, colors = tone_map(rgb, 1.0, 0.5)
    assert colors.tolist() == [[50, 75, 100]]
    assert gray[0] == pytest.approx(0.299 * 50 + 0.587 * 75 + 0.114 * 100)


def test_tone_map_shapes_are_flat_row_major():
    rgb = np.zeros((3, 4, 3), dtype=np.uint8)
    rgb[1, 2] = (255, 255, 255)
    gray, colors = tone_map(rgb, 1.0, 1.0)
    assert gray.shape == (12,)
    assert colors.shape == (12, 3)
    assert colors.dtype == np.uint8
    assert gray.argmax() == 1 * 4 + 2


def test_tone_map_ignores_alpha():
    rgba = np.array([[[40, 80, 120, 0]]], dtype=np.uint8)
    gray, colors = tone_map(rgba, 1.0, 1.0)
    assert colors.tolist() == [[40, 80, 120]]
