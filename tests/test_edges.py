import numpy as np
import pytest
from houghlines.cv.edges import (edge_mask, intensity_map, is_contrast_edge, is_edge,
                                 pixel_intensity)
from houghlines.errors import InvalidConfigurationError

def _pixels(*rgb):
    return np.array([[list(rgb)]], dtype=np.uint8)

@pytest.mark.parametrize("rgb,expected", [
    ((0, 0, 0), True),
    ((0, 0, 1), True),     # mean 0.33 rounds to 0
    ((0, 1, 1), False),    # mean 0.67 rounds to 1
    ((255, 255, 255), False),
    ((3, 0, 0), False),
])
def test_is_edge_near_black(rgb, expected):
    assert is_edge(_pixels(*rgb), 0, 0) is expected

def test_is_edge_configurable_threshold():
    px = _pixels(40, 50, 60)
    assert pixel_intensity(px, 0, 0) == 50
    assert not is_edge(px, 0, 0, threshold=50)
    assert is_edge(px, 0, 0, threshold=51)

def test_intensity_map_rounds_half_away():
    px = np.array([[[1, 0, 0], [1, 1, 0], [255, 255, 254], [10, 20, 30]]], dtype=np.uint8)
    assert intensity_map(px).tolist() == [[0, 1, 255, 20]]

def test_dark_mask_matches_predicate():
    rng = np.random.default_rng(7)
    px = rng.integers(0, 4, size=(12, 9, 3), dtype=np.uint8)
    mask = edge_mask(px, "dark", threshold=2)
    expected = [[is_edge(px, x, y, threshold=2) for x in range(9)] for y in range(12)]
    assert mask.tolist() == expected

def test_contrast_mask_matches_predicate():
    rng = np.random.default_rng(3)
    px = rng.integers(0, 256, size=(10, 13, 3), dtype=np.uint8)
    mask = edge_mask(px, "contrast", min_contrast=120)
    inten = intensity_map(px)
    expected = [[is_contrast_edge(inten, x, y, 120) for x in range(13)] for y in range(10)]
    assert mask.tolist() == expected
    assert mask.any() and not mask.all()

def test_contrast_edge_on_step():
    px = np.full((5, 6, 3), 255, dtype=np.uint8)
    px[:, 3:] = 0
    mask = edge_mask(px, "contrast", min_contrast=85)
    # both sides of the step fire, nothing further away
    assert mask[:, 2].all() and mask[:, 3].all()
    assert not mask[:, [0, 1, 4, 5]].any()

def test_contrast_single_pixel_image():
    assert not edge_mask(np.zeros((1, 1, 3), dtype=np.uint8), "contrast").any()

def test_unknown_mode():
    with pytest.raises(InvalidConfigurationError):
        edge_mask(_pixels(0, 0, 0), "sobel")
