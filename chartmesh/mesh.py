from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from chartmesh.coord import MeshLine
from chartmesh.errors import DrawError, TargetConsumedError
from chartmesh.style import (
    DEFAULT_AXIS_STYLE,
    DEFAULT_COARSE_MESH_STYLE,
    DEFAULT_FINE_MESH_STYLE,
    DEFAULT_LABEL_STYLE,
    ShapeStyle,
    TextStyle,
    to_shape_style,
    to_text_style,
)

if TYPE_CHECKING:
    from chartmesh.context import ChartContext


LOGGER = logging.getLogger(__name__)

X = TypeVar("X")
Y = TypeVar("Y")

# Fine gridlines are requested at this multiple of the coarse label counts.
FINE_MESH_MULTIPLIER = 10


@dataclass(frozen=True)
class ResolvedMeshStyles:
    coarse_mesh: ShapeStyle
    fine_mesh: ShapeStyle
    axis: ShapeStyle
    label: TextStyle
    axis_desc: TextStyle


def resolve_mesh_styles(mesh: "MeshStyle[Any, Any]") -> ResolvedMeshStyles:
    label = mesh.label_style_value if mesh.label_style_value is not None else DEFAULT_LABEL_STYLE
    return ResolvedMeshStyles(
        coarse_mesh=mesh.line_style_1_value if mesh.line_style_1_value is not None else DEFAULT_COARSE_MESH_STYLE,
        fine_mesh=mesh.line_style_2_value if mesh.line_style_2_value is not None else DEFAULT_FINE_MESH_STYLE,
        axis=mesh.axis_style_value if mesh.axis_style_value is not None else DEFAULT_AXIS_STYLE,
        label=label,
        axis_desc=mesh.axis_desc_style_value if mesh.axis_desc_style_value is not None else label,
    )


def _no_label(_line: MeshLine) -> None:
    return None


@dataclass
class MeshStyle(Generic[X, Y]):
    """Chainable mesh configuration for one chart, consumed by a single ``draw()``.

    Style slots left as ``None`` fall back to the built-in defaults when drawn.
    """

    format_x: Callable[[X], str]
    format_y: Callable[[Y], str]
    target: "ChartContext[X, Y] | None" = None
    n_x_labels: int = 10
    n_y_labels: int = 10
    draw_x_mesh: bool = True
    draw_y_mesh: bool = True
    draw_x_axis: bool = True
    draw_y_axis: bool = True
    x_label_offset_px: int = 0
    axis_style_value: ShapeStyle | None = None
    line_style_1_value: ShapeStyle | None = None
    line_style_2_value: ShapeStyle | None = None
    label_style_value: TextStyle | None = None
    axis_desc_style_value: TextStyle | None = None
    x_desc_text: str | None = None
    y_desc_text: str | None = None

    def x_label_offset(self, value: int) -> "MeshStyle[X, Y]":
        self.x_label_offset_px = int(value)
        return self

    def disable_x_mesh(self) -> "MeshStyle[X, Y]":
        self.draw_x_mesh = False
        return self

    def disable_y_mesh(self) -> "MeshStyle[X, Y]":
        self.draw_y_mesh = False
        return self

    def disable_x_axis(self) -> "MeshStyle[X, Y]":
        self.draw_x_axis = False
        return self

    def disable_y_axis(self) -> "MeshStyle[X, Y]":
        self.draw_y_axis = False
        return self

    def axis_style(self, style: Any) -> "MeshStyle[X, Y]":
        self.axis_style_value = to_shape_style(style)
        return self

    def x_labels(self, value: int) -> "MeshStyle[X, Y]":
        self.n_x_labels = int(value)
        return self

    def y_labels(self, value: int) -> "MeshStyle[X, Y]":
        self.n_y_labels = int(value)
        return self

    def line_style_1(self, style: Any) -> "MeshStyle[X, Y]":
        self.line_style_1_value = to_shape_style(style)
        return self

    def line_style_2(self, style: Any) -> "MeshStyle[X, Y]":
        self.line_style_2_value = to_shape_style(style)
        return self

    def label_style(self, style: Any) -> "MeshStyle[X, Y]":
        self.label_style_value = to_text_style(style)
        return self

    def x_label_formatter(self, fmt: Callable[[X], str]) -> "MeshStyle[X, Y]":
        self.format_x = fmt
        return self

    def y_label_formatter(self, fmt: Callable[[Y], str]) -> "MeshStyle[X, Y]":
        self.format_y = fmt
        return self

    def axis_desc_style(self, style: Any) -> "MeshStyle[X, Y]":
        self.axis_desc_style_value = to_text_style(style)
        return self

    def x_desc(self, desc: Any) -> "MeshStyle[X, Y]":
        self.x_desc_text = str(desc)
        return self

    def y_desc(self, desc: Any) -> "MeshStyle[X, Y]":
        self.y_desc_text = str(desc)
        return self

    def resolve_styles(self) -> ResolvedMeshStyles:
        return resolve_mesh_styles(self)

    def draw(self) -> None:
        target, self.target = self.target, None
        if target is None:
            raise TargetConsumedError("mesh has no render target; draw() was already called")

        styles = resolve_mesh_styles(self)
        fine_counts = (self.n_y_labels * FINE_MESH_MULTIPLIER, self.n_x_labels * FINE_MESH_MULTIPLIER)
        coarse_counts = (self.n_y_labels, self.n_x_labels)

        LOGGER.debug("drawing fine mesh pass with label counts %s", fine_counts)
        try:
            target.draw_mesh(
                label_counts=fine_counts,
                grid_style=styles.fine_mesh,
                label_style=styles.label,
                label_text=_no_label,
                draw_x_mesh=self.draw_x_mesh,
                draw_y_mesh=self.draw_y_mesh,
                x_label_offset=self.x_label_offset_px,
                draw_x_axis=False,
                draw_y_axis=False,
                axis_style=styles.axis,
                axis_desc_style=styles.axis_desc,
                x_desc=None,
                y_desc=None,
            )
        except DrawError as exc:
            LOGGER.warning("fine mesh pass failed: %s", exc)
            raise

        format_x = self.format_x
        format_y = self.format_y

        def coarse_label(line: MeshLine) -> str | None:
            if line.axis == "x":
                return format_x(line.value)
            return format_y(line.value)

        LOGGER.debug("drawing coarse mesh pass with label counts %s", coarse_counts)
        try:
            target.draw_mesh(
                label_counts=coarse_counts,
                grid_style=styles.coarse_mesh,
                label_style=styles.label,
                label_text=coarse_label,
                draw_x_mesh=self.draw_x_mesh,
                draw_y_mesh=self.draw_y_mesh,
                x_label_offset=self.x_label_offset_px,
                draw_x_axis=self.draw_x_axis,
                draw_y_axis=self.draw_y_axis,
                axis_style=styles.axis,
                axis_desc_style=styles.axis_desc,
                x_desc=self.x_desc_text,
                y_desc=self.y_desc_text,
            )
        except DrawError as exc:
            LOGGER.warning("coarse mesh pass failed; fine grid is already drawn: %s", exc)
            raise
