from __future__ import annotations

from dataclasses import dataclass
from typing import Any


RGBA = tuple[int, int, int, int]

BLACK: RGBA = (0, 0, 0, 255)
WHITE: RGBA = (255, 255, 255, 255)


def mix(color: tuple[int, int, int] | RGBA, alpha: float) -> RGBA:
    alpha = max(0.0, min(1.0, alpha))
    if len(color) == 3:
        r, g, b = color
        return (r, g, b, int(alpha * 255))
    r, g, b, a = color
    return (r, g, b, int(alpha * a))


@dataclass(frozen=True)
class FontDesc:
    family: str
    size: float


@dataclass(frozen=True)
class ShapeStyle:
    color: RGBA = BLACK
    stroke_width: int = 1


@dataclass(frozen=True)
class TextStyle:
    font: FontDesc
    color: RGBA = BLACK


DEFAULT_COARSE_MESH_STYLE = ShapeStyle(color=mix(BLACK, 0.2))
DEFAULT_FINE_MESH_STYLE = ShapeStyle(color=mix(BLACK, 0.1))
DEFAULT_AXIS_STYLE = ShapeStyle(color=BLACK)
DEFAULT_LABEL_FONT = FontDesc(family="sans-serif", size=12.0)
DEFAULT_LABEL_STYLE = TextStyle(font=DEFAULT_LABEL_FONT)


def to_shape_style(value: Any) -> ShapeStyle:
    if isinstance(value, ShapeStyle):
        return value
    if isinstance(value, tuple) and len(value) in (3, 4):
        return ShapeStyle(color=_coerce_rgba(value))
    raise TypeError(f"cannot convert {type(value).__name__} to ShapeStyle")


def to_text_style(value: Any) -> TextStyle:
    if isinstance(value, TextStyle):
        return value
    if isinstance(value, FontDesc):
        return TextStyle(font=value)
    if isinstance(value, str):
        return TextStyle(font=FontDesc(family=value, size=DEFAULT_LABEL_FONT.size))
    if isinstance(value, tuple) and len(value) == 2 and isinstance(value[0], str):
        family, size = value
        return TextStyle(font=FontDesc(family=family, size=float(size)))
    raise TypeError(f"cannot convert {type(value).__name__} to TextStyle")


def _coerce_rgba(color: tuple[int, ...]) -> RGBA:
    channels = tuple(max(0, min(255, int(c))) for c in color)
    if len(channels) == 3:
        return (channels[0], channels[1], channels[2], 255)
    return (channels[0], channels[1], channels[2], channels[3])
