import numpy as np
import pytest
from houghlines.cv.accumulator import allocate
from houghlines.cv.render import bresenham, draw_segments, hough_space_image, to_image_coords
from houghlines.schema.types import HoughParams

def test_hough_image_normalised_and_flipped():
    acc = allocate(20, 10, HoughParams())      # 180 x 23
    acc.votes[3, 0] = 10
    acc.votes[0, 5] = 5
    img = hough_space_image(acc)
    assert img.shape == (acc.rho_axis_size, acc.theta_axis_size)
    assert img.dtype == np.uint8
    assert img[-1, 3] == 255                   # rho bin 0 on the bottom row
    assert img[acc.rho_axis_size - 1 - 5, 0] == 128
    assert int(img.sum()) == 255 + 128

def test_hough_image_without_votes_is_black():
    img = hough_space_image(allocate(8, 8, HoughParams()))
    assert not img.any()

@pytest.mark.parametrize("p0,p1", [
    ((0, 0), (5, 2)), ((5, 2), (0, 0)), ((3, 3), (3, -4)),
    ((-2, 7), (9, 7)), ((0, 0), (4, 4)), ((1, 1), (1, 1)),
])
def test_bresenham_endpoints_and_continuity(p0, p1):
    pts = list(bresenham(p0, p1))
    assert pts[0] == p0 and pts[-1] == p1
    assert len(pts) == max(abs(p1[0] - p0[0]), abs(p1[1] - p0[1])) + 1
    for (ax, ay), (bx, by) in zip(pts, pts[1:]):
        assert max(abs(ax - bx), abs(ay - by)) == 1

def test_to_image_coords():
    assert to_image_coords(((0, 0), (10, 89)), 90) == ((0, 89), (10, 0))

def test_draw_segments_copies_and_clips():
    img = np.full((5, 8, 3), 255, dtype=np.uint8)
    out = draw_segments(img, [((-3, 2), (10, 2))], color=(255, 0, 0))
    assert (img == 255).all()
    assert out[2].tolist() == [[255, 0, 0]] * 8
    assert (out[[0, 1, 3, 4]] == 255).all()

def test_draw_segments_antialiased():
    img = np.zeros((20, 20, 3), dtype=np.uint8)
    out = draw_segments(img, [((0, 0), (19, 7))], color=(0, 255, 0), antialias=True)
    assert not img.any()
    assert out[..., 1].any()
    assert not out[..., 0].any()
