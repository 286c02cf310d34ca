from __future__ import annotations

import numpy as np


RGBA = tuple[int, int, int, int]


def new_canvas(width: int, height: int, color: RGBA = (255, 255, 255, 255)) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("canvas width/height must be > 0")
    canvas = np.empty((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def fill_rows(dst: np.ndarray, x0: int, x1: int, y0: int, y1: int, color: RGBA) -> None:
    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1] - 1, max(x0, x1))
    ya = max(0, min(y0, y1))
    yb = min(dst.shape[0] - 1, max(y0, y1))
    if xa > xb or ya > yb:
        return
    _blend(dst[ya : yb + 1, xa : xb + 1], color)


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: RGBA, width: int = 1) -> None:
    half = max(1, width) // 2
    top = y - half
    fill_rows(dst, x0, x1, top, top + max(1, width) - 1, color)


def draw_vline(dst: np.ndarray, x: int, y0: int, y1: int, color: RGBA, width: int = 1) -> None:
    half = max(1, width) // 2
    left = x - half
    fill_rows(dst, left, left + max(1, width) - 1, y0, y1, color)


def _blend(view: np.ndarray, color: RGBA) -> None:
    a = color[3] / 255.0
    if a <= 0.0:
        return
    inv = 1.0 - a
    src = np.asarray(color[0:3], dtype=np.float32) * a
    view[..., :3] = (src + view[..., :3].astype(np.float32) * inv).astype(np.uint8)
    view[..., 3] = 255
