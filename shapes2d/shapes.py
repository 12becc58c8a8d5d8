import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import numpy as np

from .colors import FixedColor, RandomColor
from .rasterizer import circle_pixels, line_pixels

logger = logging.getLogger(__name__)


def _rng(rng):
    return rng if rng is not None else np.random.default_rng()


class Drawable(ABC):
    """
    Anything that can paint itself onto an image exposing width, height and
    set_pixel(x, y, color). Subclasses carry a `palette` callable that decides
    the color of each draw call.
    """

    @abstractmethod
    def draw(self, image):
        pass

    def color(self):
        return self.palette()


@dataclass(frozen=True)
class Point(Drawable):
    x: int
    y: int
    palette: object = field(default_factory=FixedColor, compare=False, repr=False)

    @classmethod
    def random(cls, width, height, rng=None):
        rng = _rng(rng)
        return cls(int(rng.integers(0, width)), int(rng.integers(0, height)))

    def draw(self, image):
        image.set_pixel(self.x, self.y, self.color())


@dataclass(frozen=True)
class Line(Drawable):
    start: Point
    end: Point
    palette: object = field(default_factory=FixedColor, compare=False, repr=False)

    @classmethod
    def random(cls, width, height, rng=None):
        rng = _rng(rng)
        return cls(Point.random(width, height, rng), Point.random(width, height, rng))

    def pixels(self):
        return list(line_pixels(self.start.x, self.start.y, self.end.x, self.end.y))

    def draw(self, image):
        # No bounds check; an off-image endpoint raises from set_pixel
        color = self.color()
        for x, y in self.pixels():
            image.set_pixel(x, y, color)


class Polygon(Drawable):
    """Closed outline through vertices() in order, last vertex back to the first."""

    @abstractmethod
    def vertices(self):
        pass

    def edges(self, palette=None):
        points = self.vertices()
        palette = palette if palette is not None else self.palette
        return [Line(a, b, palette=palette)
                for a, b in zip(points, points[1:] + points[:1])]

    def draw(self, image):
        # One color for the whole outline, even with a random palette
        palette = FixedColor(self.color())
        for edge in self.edges(palette):
            edge.draw(image)


@dataclass(frozen=True)
class Triangle(Polygon):
    p1: Point
    p2: Point
    p3: Point
    palette: object = field(default_factory=FixedColor, compare=False, repr=False)

    @classmethod
    def random(cls, width, height, rng=None):
        rng = _rng(rng)
        return cls(*(Point.random(width, height, rng) for _ in range(3)))

    def vertices(self):
        return [self.p1, self.p2, self.p3]


@dataclass(frozen=True)
class Rectangle(Polygon):
    top_left: Point
    bottom_right: Point
    palette: object = field(default_factory=FixedColor, compare=False, repr=False)

    @classmethod
    def random(cls, width, height, rng=None):
        rng = _rng(rng)
        a = Point.random(width, height, rng)
        b = Point.random(width, height, rng)
        return cls(Point(min(a.x, b.x), min(a.y, b.y)),
                   Point(max(a.x, b.x), max(a.y, b.y)))

    @property
    def top_right(self):
        return Point(self.bottom_right.x, self.top_left.y)

    @property
    def bottom_left(self):
        return Point(self.top_left.x, self.bottom_right.y)

    def vertices(self):
        return [self.top_left, self.top_right, self.bottom_right, self.bottom_left]


@dataclass(frozen=True)
class Pentagon(Polygon):
    p1: Point
    p2: Point
    p3: Point
    p4: Point
    p5: Point
    palette: object = field(default_factory=FixedColor, compare=False, repr=False)

    @classmethod
    def random(cls, width, height, rng=None):
        rng = _rng(rng)
        return cls(*(Point.random(width, height, rng) for _ in range(5)))

    def vertices(self):
        return [self.p1, self.p2, self.p3, self.p4, self.p5]


@dataclass(frozen=True)
class Circle(Drawable):
    center: Point
    radius: int
    palette: object = field(default_factory=RandomColor, compare=False, repr=False)

    @classmethod
    def random(cls, width, height, rng=None):
        rng = _rng(rng)
        center = Point.random(width, height, rng)
        max_radius = max(min(width, height) // 2, 1)
        return cls(center, int(rng.integers(0, max_radius)), palette=RandomColor(rng))

    def pixels(self):
        return list(circle_pixels(self.center.x, self.center.y, self.radius))

    def draw(self, image):
        color = self.color()
        skipped = 0
        for x, y in self.pixels():
            if x >= 0 and x < image.width and y >= 0 and y < image.height:
                image.set_pixel(x, y, color)
            else:
                skipped += 1
        if skipped:
            logger.debug('%r: skipped %d off-canvas points', self, skipped)


def draw_all(shapes, image):
    """Draws SHAPES in order; later shapes overwrite earlier ones."""
    for shape in shapes:
        shape.draw(image)
    return image
