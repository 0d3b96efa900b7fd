import pytest
from houghlines.geometry.reconstruct import (AngleRegime, classify_angle, descale_rho,
                                             descale_theta, line_from_rho_theta)
from houghlines.geometry.trig import calculate_rho

W, H = 100, 90

def test_horizontal_line():
    assert line_from_rho_theta(90, 40, W, H) == ((0, 40), (100, 40))

def test_falling_line_negative_rho():
    assert line_from_rho_theta(135, -7, W, H) == ((10, 0), (100, 90))

def test_falling_line_positive_rho():
    # y = x + 10*sqrt(2)
    assert line_from_rho_theta(135, 10, W, H) == ((-14, 0), (100, 114))

@pytest.mark.parametrize("theta,rho", [(0, 50), (180, -50), (180, 50)])
def test_vertical_line(theta, rho):
    assert line_from_rho_theta(theta, rho, W, H) == ((50, 90), (50, 0))

def test_rising_line():
    assert line_from_rho_theta(30, 40, W, H) == ((0, 80), (46, 0))

@pytest.mark.parametrize("theta,expected", [
    (0, AngleRegime.VERTICAL), (180, AngleRegime.VERTICAL),
    (90, AngleRegime.HORIZONTAL),
    (1, AngleRegime.RISING), (89, AngleRegime.RISING),
    (91, AngleRegime.FALLING), (179, AngleRegime.FALLING),
])
def test_classify_angle(theta, expected):
    assert classify_angle(theta) is expected

@pytest.mark.parametrize("theta", [-1, 181, 360])
def test_classify_angle_out_of_range(theta):
    with pytest.raises(ValueError):
        classify_angle(theta)

@pytest.mark.parametrize("theta,rho", [
    (0, 35), (10, 30), (30, 40), (60, 70), (90, 20),
    (120, -20), (120, 10), (135, -7), (150, -30), (170, -60), (180, -45),
])
def test_endpoints_lie_on_the_line(theta, rho):
    p1, p2 = line_from_rho_theta(theta, rho, W, H)
    for x, y in (p1, p2):
        assert calculate_rho(theta, 180, x, y) == pytest.approx(rho, abs=1.0)

def test_descale_rho():
    assert descale_rho(54, 36, 71) == pytest.approx(35.5)
    assert descale_rho(36, 36, 71) == 0
    assert descale_rho(0, 36, 71) == pytest.approx(-71)

@pytest.mark.parametrize("theta,factor,expected", [
    (90, 1, 90), (90, 2, 45), (91, 2, 46), (89, 2, 45), (359, 2, 180), (4, 4, 1), (2, 4, 1),
])
def test_descale_theta(theta, factor, expected):
    assert descale_theta(theta, factor) == expected
