import logging

import imageio
import numpy as np

from .colors import BLACK, Color

logger = logging.getLogger(__name__)


class PixelOutOfBoundsError(IndexError):
    def __init__(self, x, y, width, height):
        super().__init__(f'pixel ({x}, {y}) is outside a {width}x{height} image')
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class Image:
    def __init__(self, width, height, background=BLACK):
        if width <= 0 or height <= 0:
            raise ValueError(f'image size must be positive, got {width}x{height}')
        self.FILETYPE = 'png'
        self.width = width
        self.height = height
        self.background = Color(*background)
        self.canvas = np.empty((height, width, 3), dtype='uint8')
        self.clear()

    @classmethod
    def blank(cls, width, height):
        return cls(width, height)

    def contains(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x, y):
        if not self.contains(x, y):
            raise PixelOutOfBoundsError(x, y, self.width, self.height)

    def get_pixel(self, x, y):
        self._check_bounds(x, y)
        r, g, b = self.canvas[y, x]
        return Color(int(r), int(g), int(b))

    def set_pixel(self, x, y, color):
        self._check_bounds(x, y)
        self.canvas[y, x] = color

    def clear(self, color=None):
        self.canvas[:, :] = self.background if color is None else color

    def painted(self):
        """
        Set of (x, y) coordinates whose color differs from the background.
        """
        mask = np.any(self.canvas != self.background, axis=2)
        ys, xs = np.nonzero(mask)
        return set(zip(xs.tolist(), ys.tolist()))

    def to_array(self):
        return self.canvas.copy()

    def save(self, filename='img'):
        path = f'{filename}.{self.FILETYPE}'
        imageio.imwrite(path, self.canvas)
        logger.debug('saved %dx%d image to %s', self.width, self.height, path)
        return path
