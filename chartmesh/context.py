from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar

from chartmesh.backend import DrawingBackend
from chartmesh.coord import MeshLine, RangedCoord
from chartmesh.errors import BackendError, DrawError
from chartmesh.mesh import MeshStyle
from chartmesh.ranged import Ranged
from chartmesh.style import ShapeStyle, TextStyle


LOGGER = logging.getLogger(__name__)

X = TypeVar("X")
Y = TypeVar("Y")

DEFAULT_LABEL_COUNT = 10
TICK_MARK_LEN = 5
LABEL_PAD = 3


class ChartContext(Generic[X, Y]):
    """A drawing backend plus the coordinate system of one 2D plotting area.

    The plotting area is what is left of the backend surface after the outer
    margin, the X label area (below) and the Y label area (left) are removed.
    """

    def __init__(
        self,
        backend: DrawingBackend,
        x_range: Ranged[X],
        y_range: Ranged[Y],
        *,
        margin: int = 5,
        x_label_area_size: int = 30,
        y_label_area_size: int = 40,
    ) -> None:
        width, height = backend.size
        if margin < 0 or x_label_area_size < 0 or y_label_area_size < 0:
            raise ValueError("margin and label area sizes must be >= 0")
        plot_x0 = margin + y_label_area_size
        plot_y0 = margin
        plot_w = width - plot_x0 - margin
        plot_h = height - plot_y0 - margin - x_label_area_size
        if plot_w <= 1 or plot_h <= 1:
            raise ValueError("chart too small for plotting area")
        self.backend = backend
        self.coord: RangedCoord[X, Y] = RangedCoord(x_range, y_range, (plot_x0, plot_y0, plot_w, plot_h))
        LOGGER.debug("plotting area resolved to %s on %dx%d surface", self.coord.plot_rect, width, height)

    @property
    def plot_rect(self) -> tuple[int, int, int, int]:
        return self.coord.plot_rect

    def configure_mesh(self) -> MeshStyle[X, Y]:
        return MeshStyle(
            n_x_labels=DEFAULT_LABEL_COUNT,
            n_y_labels=DEFAULT_LABEL_COUNT,
            format_x=self.coord.x.format,
            format_y=self.coord.y.format,
            target=self,
        )

    def draw_mesh(
        self,
        label_counts: tuple[int, int],
        grid_style: ShapeStyle,
        label_style: TextStyle,
        label_text: Callable[[MeshLine], str | None],
        draw_x_mesh: bool,
        draw_y_mesh: bool,
        x_label_offset: int,
        draw_x_axis: bool,
        draw_y_axis: bool,
        axis_style: ShapeStyle,
        axis_desc_style: TextStyle,
        x_desc: str | None = None,
        y_desc: str | None = None,
    ) -> None:
        y_count, x_count = label_counts
        try:
            x_labels: list[tuple[int, str]] = []
            y_labels: list[tuple[int, str]] = []
            for line in self.coord.mesh_lines(y_count, x_count):
                if (draw_x_mesh if line.axis == "x" else draw_y_mesh):
                    self.backend.draw_line(line.start, line.end, grid_style)
                text = label_text(line)
                if text:
                    (x_labels if line.axis == "x" else y_labels).append((line.pixel, text))

            self._draw_axes(draw_x_axis, draw_y_axis, axis_style, x_labels, y_labels)
            x_label_h = self._draw_x_labels(x_labels, label_style, x_label_offset)
            y_label_w = self._draw_y_labels(y_labels, label_style)
            self._draw_descriptions(x_desc, y_desc, axis_desc_style, x_label_h, y_label_w)
        except BackendError as exc:
            raise DrawError(f"failed to draw mesh: {exc}", cause=exc) from exc

    def _draw_axes(
        self,
        draw_x_axis: bool,
        draw_y_axis: bool,
        style: ShapeStyle,
        x_labels: list[tuple[int, str]],
        y_labels: list[tuple[int, str]],
    ) -> None:
        x0, y0, w, h = self.plot_rect
        bottom = y0 + h - 1
        if draw_x_axis:
            self.backend.draw_line((x0, bottom), (x0 + w - 1, bottom), style)
            for px, _ in x_labels:
                self.backend.draw_line((px, bottom), (px, bottom + TICK_MARK_LEN), style)
        if draw_y_axis:
            self.backend.draw_line((x0, y0), (x0, bottom), style)
            for py, _ in y_labels:
                self.backend.draw_line((x0 - TICK_MARK_LEN, py), (x0, py), style)

    def _draw_x_labels(self, labels: list[tuple[int, str]], style: TextStyle, offset: int) -> int:
        x0, y0, w, h = self.plot_rect
        top = y0 + h + TICK_MARK_LEN + LABEL_PAD
        max_h = 0
        for px, text in labels:
            tw, th = self.backend.text_size(text, style)
            self.backend.draw_text(text, (px + offset - tw // 2, top), style)
            max_h = max(max_h, th)
        return max_h

    def _draw_y_labels(self, labels: list[tuple[int, str]], style: TextStyle) -> int:
        x0, _, _, _ = self.plot_rect
        right = x0 - TICK_MARK_LEN - LABEL_PAD
        max_w = 0
        for py, text in labels:
            tw, th = self.backend.text_size(text, style)
            self.backend.draw_text(text, (right - tw, py - th // 2), style)
            max_w = max(max_w, tw)
        return max_w

    def _draw_descriptions(
        self,
        x_desc: str | None,
        y_desc: str | None,
        style: TextStyle,
        x_label_h: int,
        y_label_w: int,
    ) -> None:
        x0, y0, w, h = self.plot_rect
        if x_desc is not None:
            tw, _ = self.backend.text_size(x_desc, style)
            top = y0 + h + TICK_MARK_LEN + LABEL_PAD + x_label_h + LABEL_PAD
            self.backend.draw_text(x_desc, (x0 + (w - tw) // 2, top), style)
        if y_desc is not None:
            tw, th = self.backend.text_size(y_desc, style, rotate_deg=270)
            left = x0 - TICK_MARK_LEN - LABEL_PAD - y_label_w - LABEL_PAD - tw
            self.backend.draw_text(y_desc, (max(0, left), y0 + (h - th) // 2), style, rotate_deg=270)
