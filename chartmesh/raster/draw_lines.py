from __future__ import annotations

import numpy as np

from chartmesh.raster.canvas import RGBA, draw_hline, draw_vline


def draw_line(dst: np.ndarray, start: tuple[int, int], end: tuple[int, int], color: RGBA, width: int = 1) -> None:
    x0, y0 = int(start[0]), int(start[1])
    x1, y1 = int(end[0]), int(end[1])
    # Each line is blended as one strip so a translucent color lands once per pixel.
    if y0 == y1:
        draw_hline(dst, x0, x1, y0, color, width=width)
    elif x0 == x1:
        draw_vline(dst, x0, y0, y1, color, width=width)
    else:
        raise ValueError("raster lines must be horizontal or vertical")
