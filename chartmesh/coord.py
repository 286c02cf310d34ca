from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Literal, TypeVar

from chartmesh.ranged import Ranged


X = TypeVar("X")
Y = TypeVar("Y")

Point = tuple[int, int]


@dataclass(frozen=True)
class MeshLine:
    axis: Literal["x", "y"]
    start: Point
    end: Point
    value: Any

    @property
    def pixel(self) -> int:
        return self.start[0] if self.axis == "x" else self.start[1]


class RangedCoord(Generic[X, Y]):
    """Maps (x, y) domain values into a pixel rectangle given as (x0, y0, width, height)."""

    def __init__(self, x: Ranged[X], y: Ranged[Y], plot_rect: tuple[int, int, int, int]) -> None:
        _, _, w, h = plot_rect
        if w <= 1 or h <= 1:
            raise ValueError("plot area width/height must be > 1")
        self.x = x
        self.y = y
        self.plot_rect = plot_rect

    @property
    def x_limit(self) -> tuple[int, int]:
        x0, _, w, _ = self.plot_rect
        return (x0, x0 + w - 1)

    @property
    def y_limit(self) -> tuple[int, int]:
        # Larger values sit higher on screen.
        _, y0, _, h = self.plot_rect
        return (y0 + h - 1, y0)

    def translate(self, x: X, y: Y) -> Point:
        return (self.x.map(x, self.x_limit), self.y.map(y, self.y_limit))

    def mesh_lines(self, y_count: int, x_count: int) -> Iterator[MeshLine]:
        x_lo, x_hi = self.x_limit
        y_bottom, y_top = self.y_limit
        for value in self.x.key_points(x_count):
            px = self.x.map(value, self.x_limit)
            yield MeshLine(axis="x", start=(px, y_top), end=(px, y_bottom), value=value)
        for value in self.y.key_points(y_count):
            py = self.y.map(value, self.y_limit)
            yield MeshLine(axis="y", start=(x_lo, py), end=(x_hi, py), value=value)
