import logging
import os

import numpy as np

from .canvas import Image
from .shapes import Circle, Line, Pentagon, Point, Rectangle, Triangle, draw_all

logger = logging.getLogger(__name__)

SHAPE_KINDS = (Point, Line, Triangle, Rectangle, Pentagon, Circle)
MAX_SHAPES = 10


def make_random_drawing(width, height, num_shapes, rng=None):
    rng = rng if rng is not None else np.random.default_rng()
    shapes = []
    for _ in range(num_shapes):
        kind = SHAPE_KINDS[int(rng.integers(0, len(SHAPE_KINDS)))]
        shapes.append(kind.random(width, height, rng))
    return shapes


def render(shapes, width, height):
    return draw_all(shapes, Image(width, height))


def write_spec(shapes, filename='spec'):
    path = f'{filename}.txt'
    with open(path, 'w+') as spec_file:
        for shape in shapes:
            spec_file.write(f'{shape!r}\n')
        spec_file.write('\n')
    return path


def make_random_drawings(n, out_dir='data', width=100, height=100, rng=None):
    """
    Writes N random drawings as OUT_DIR/drawings/<i>.png, each with a
    matching OUT_DIR/specs/<i>.txt listing the shapes in draw order.
    """
    rng = rng if rng is not None else np.random.default_rng()
    drawings_dir = os.path.join(out_dir, 'drawings')
    specs_dir = os.path.join(out_dir, 'specs')
    os.makedirs(drawings_dir, exist_ok=True)
    os.makedirs(specs_dir, exist_ok=True)
    for drawing_number in range(n):
        if drawing_number % 1000 == 0:
            print(drawing_number)
        num_shapes = int(rng.integers(1, MAX_SHAPES + 1))
        shapes = make_random_drawing(width, height, num_shapes, rng)
        image = render(shapes, width, height)
        image.save(os.path.join(drawings_dir, str(drawing_number)))
        write_spec(shapes, os.path.join(specs_dir, str(drawing_number)))
    logger.info('wrote %d drawings to %s', n, out_dir)


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    batch_size = 32
    make_random_drawings(batch_size)
