from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from chartmesh.errors import BackendError
from chartmesh.raster import draw_line, draw_text, new_canvas, text_size
from chartmesh.style import RGBA, WHITE, ShapeStyle, TextStyle


Point = tuple[int, int]


class DrawingBackend(ABC):
    @property
    @abstractmethod
    def size(self) -> tuple[int, int]:
        raise NotImplementedError

    @abstractmethod
    def draw_line(self, start: Point, end: Point, style: ShapeStyle) -> None:
        raise NotImplementedError

    @abstractmethod
    def draw_text(self, text: str, pos: Point, style: TextStyle, *, rotate_deg: int = 0) -> None:
        raise NotImplementedError

    @abstractmethod
    def text_size(self, text: str, style: TextStyle, *, rotate_deg: int = 0) -> tuple[int, int]:
        raise NotImplementedError


class RasterBackend(DrawingBackend):
    """Draws into an in-memory RGBA ``uint8`` canvas of shape (height, width, 4)."""

    def __init__(self, width: int, height: int, background: RGBA = WHITE) -> None:
        self._canvas: np.ndarray | None = new_canvas(width, height, color=background)
        self._width = width
        self._height = height

    @property
    def size(self) -> tuple[int, int]:
        return (self._width, self._height)

    def draw_line(self, start: Point, end: Point, style: ShapeStyle) -> None:
        draw_line(self._surface(), start, end, style.color, width=style.stroke_width)

    def draw_text(self, text: str, pos: Point, style: TextStyle, *, rotate_deg: int = 0) -> None:
        draw_text(
            self._surface(),
            int(pos[0]),
            int(pos[1]),
            text,
            style.color,
            font_family=style.font.family,
            font_size_px=style.font.size,
            rotate_deg=rotate_deg,
        )

    def text_size(self, text: str, style: TextStyle, *, rotate_deg: int = 0) -> tuple[int, int]:
        return text_size(text, font_family=style.font.family, font_size_px=style.font.size, rotate_deg=rotate_deg)

    def to_rgba(self) -> np.ndarray:
        return self._surface().copy()

    def release(self) -> None:
        self._canvas = None

    def _surface(self) -> np.ndarray:
        if self._canvas is None:
            raise BackendError("raster surface has been released")
        return self._canvas
