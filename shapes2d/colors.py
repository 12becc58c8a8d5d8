from typing import NamedTuple

import numpy as np


class Color(NamedTuple):
    r: int
    g: int
    b: int


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


class FixedColor:
    def __init__(self, color=WHITE):
        self.color = Color(*color)

    def __call__(self):
        return self.color

    def __repr__(self):
        return f'FixedColor{tuple(self.color)}'


class RandomColor:
    """
    Picks a new color on every call. Channels are sampled from [0, 255),
    so 255 itself never comes out.
    """
    def __init__(self, rng=None):
        self.MAX_CHANNEL_VAL = 255
        self.rng = rng if rng is not None else np.random.default_rng()

    def __call__(self):
        r, g, b = self.rng.integers(0, self.MAX_CHANNEL_VAL, size=3)
        return Color(int(r), int(g), int(b))

    def __repr__(self):
        return 'RandomColor()'
