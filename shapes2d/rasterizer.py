def line_pixels(x0, y0, x1, y1):
    """
    Integer error-accumulation walk from (x0, y0) to (x1, y1), both ends
    included. Yields max(|dx|, |dy|) + 1 coordinates, a single one when the
    endpoints coincide.
    """
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    # Truncate toward zero in both branches
    err = dx // 2 if dx > dy else -(dy // 2)
    x, y = x0, y0

    while True:
        yield x, y
        if x == x1 and y == y1:
            return
        e2 = err
        if e2 > -dx:
            err -= dy
            x += sx
        if e2 < dy:
            err += dx
            y += sy


def circle_pixels(cx, cy, radius):
    """
    Midpoint circle stepping over one octant, mirrored eight ways.
    Points on the axes and diagonals come out more than once.
    """
    x = 0
    y = radius
    d = 3 - 2 * radius

    while y >= x:
        yield cx + x, cy + y
        yield cx - x, cy + y
        yield cx + x, cy - y
        yield cx - x, cy - y
        yield cx + y, cy + x
        yield cx - y, cy + x
        yield cx + y, cy - x
        yield cx - y, cy - x

        x += 1
        if d > 0:
            y -= 1
            d += 4 * (x - y) + 10
        else:
            d += 4 * x + 6
