# Re-export the drawing API for convenience
from .canvas import Image, PixelOutOfBoundsError
from .colors import BLACK, WHITE, Color, FixedColor, RandomColor
from .rasterizer import circle_pixels, line_pixels
from .shapes import (
    Circle,
    Drawable,
    Line,
    Pentagon,
    Point,
    Polygon,
    Rectangle,
    Triangle,
    draw_all,
)
