import sys
import numpy as np
import pytest
from loguru import logger

@pytest.fixture(autouse=True)
def _reset_logger():
    # CliRunner swaps sys.stderr; don't leave a sink pointing at a closed stream
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")

def white(width, height):
    return np.full((height, width, 3), 255, dtype=np.uint8)

@pytest.fixture
def diagonal_image():
    """50x50 white image with a black top-left to bottom-right diagonal."""
    img = white(50, 50)
    for i in range(50):
        img[i, i] = 0
    return img

@pytest.fixture
def horizontal_image():
    """60x40 white image with a black row at image y=10."""
    img = white(60, 40)
    img[10, :] = 0
    return img
