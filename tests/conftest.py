import numpy as np
import pytest

from shapes2d import Image


@pytest.fixture
def image():
    return Image(100, 100)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
