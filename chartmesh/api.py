from __future__ import annotations

from typing import TypeVar

from chartmesh.backend import RasterBackend
from chartmesh.context import ChartContext
from chartmesh.ranged import Ranged
from chartmesh.style import RGBA, WHITE


X = TypeVar("X")
Y = TypeVar("Y")


def chart(
    width: int,
    height: int,
    x_range: Ranged[X],
    y_range: Ranged[Y],
    *,
    background: RGBA = WHITE,
    margin: int = 5,
    x_label_area_size: int = 30,
    y_label_area_size: int = 40,
) -> ChartContext[X, Y]:
    if width <= 0:
        raise ValueError("width must be > 0")
    if height <= 0:
        raise ValueError("height must be > 0")
    backend = RasterBackend(width, height, background=background)
    return ChartContext(
        backend,
        x_range,
        y_range,
        margin=margin,
        x_label_area_size=x_label_area_size,
        y_label_area_size=y_label_area_size,
    )
