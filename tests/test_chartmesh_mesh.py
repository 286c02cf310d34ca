from __future__ import annotations

import unittest
from unittest import mock

from chartmesh import FINE_MESH_MULTIPLIER, DrawError, MeshLine, MeshStyle, TargetConsumedError
from chartmesh.style import (
    DEFAULT_AXIS_STYLE,
    DEFAULT_COARSE_MESH_STYLE,
    DEFAULT_FINE_MESH_STYLE,
    DEFAULT_LABEL_STYLE,
    FontDesc,
    ShapeStyle,
    TextStyle,
)


def _mesh(target: object | None = None, **kwargs: object) -> MeshStyle:
    return MeshStyle(format_x=str, format_y=str, target=target or mock.Mock(), **kwargs)


def _line(axis: str, value: object) -> MeshLine:
    return MeshLine(axis=axis, start=(0, 0), end=(1, 1), value=value)


class MeshBuilderTests(unittest.TestCase):
    def test_mutators_return_same_object_for_chaining(self) -> None:
        mesh = _mesh()
        out = (
            mesh.x_label_offset(4)
            .disable_x_mesh()
            .disable_y_mesh()
            .disable_x_axis()
            .disable_y_axis()
            .x_labels(3)
            .y_labels(7)
            .axis_style((10, 20, 30))
            .line_style_1((1, 2, 3, 4))
            .line_style_2(ShapeStyle(color=(5, 6, 7, 8), stroke_width=2))
            .label_style(("serif", 9))
            .axis_desc_style("mono")
            .x_desc("Value")
            .y_desc("Time")
        )
        self.assertIs(out, mesh)
        self.assertEqual(mesh.x_label_offset_px, 4)
        self.assertFalse(mesh.draw_x_mesh or mesh.draw_y_mesh or mesh.draw_x_axis or mesh.draw_y_axis)
        self.assertEqual((mesh.n_x_labels, mesh.n_y_labels), (3, 7))
        self.assertEqual(mesh.axis_style_value, ShapeStyle(color=(10, 20, 30, 255)))
        self.assertEqual(mesh.label_style_value, TextStyle(font=FontDesc("serif", 9.0)))
        self.assertEqual(mesh.axis_desc_style_value, TextStyle(font=FontDesc("mono", 12.0)))
        self.assertEqual((mesh.x_desc_text, mesh.y_desc_text), ("Value", "Time"))

    def test_negative_label_counts_are_stored_without_validation(self) -> None:
        mesh = _mesh().x_labels(-3)
        self.assertEqual(mesh.n_x_labels, -3)

    def test_formatters_are_replaced_wholesale(self) -> None:
        fmt = mock.Mock(return_value="x")
        mesh = _mesh().x_label_formatter(fmt)
        self.assertIs(mesh.format_x, fmt)
        self.assertIs(mesh.format_y, str)

    def test_unconvertible_style_raises_type_error(self) -> None:
        with self.assertRaises(TypeError):
            _mesh().axis_style(3.5)


class MeshStyleResolutionTests(unittest.TestCase):
    def test_unset_styles_resolve_to_defaults(self) -> None:
        styles = _mesh().resolve_styles()
        self.assertEqual(styles.coarse_mesh, DEFAULT_COARSE_MESH_STYLE)
        self.assertEqual(styles.fine_mesh, DEFAULT_FINE_MESH_STYLE)
        self.assertEqual(styles.axis, DEFAULT_AXIS_STYLE)
        self.assertEqual(styles.label, DEFAULT_LABEL_STYLE)
        self.assertEqual(styles.axis_desc, DEFAULT_LABEL_STYLE)

    def test_default_mesh_colors_are_translucent_black(self) -> None:
        self.assertEqual(DEFAULT_COARSE_MESH_STYLE, ShapeStyle(color=(0, 0, 0, 51), stroke_width=1))
        self.assertEqual(DEFAULT_FINE_MESH_STYLE, ShapeStyle(color=(0, 0, 0, 25), stroke_width=1))
        self.assertEqual(DEFAULT_LABEL_STYLE.font, FontDesc("sans-serif", 12.0))

    def test_overrides_win_over_defaults(self) -> None:
        mesh = _mesh().line_style_1((1, 1, 1)).line_style_2((2, 2, 2)).axis_style((3, 3, 3)).label_style("serif")
        styles = mesh.resolve_styles()
        self.assertEqual(styles.coarse_mesh.color, (1, 1, 1, 255))
        self.assertEqual(styles.fine_mesh.color, (2, 2, 2, 255))
        self.assertEqual(styles.axis.color, (3, 3, 3, 255))
        self.assertEqual(styles.label.font.family, "serif")

    def test_axis_desc_falls_back_to_resolved_label_style(self) -> None:
        styles = _mesh().label_style(("serif", 20)).resolve_styles()
        self.assertEqual(styles.axis_desc, TextStyle(font=FontDesc("serif", 20.0)))

    def test_axis_desc_override_is_independent_of_label_style(self) -> None:
        styles = _mesh().label_style("serif").axis_desc_style(("mono", 8)).resolve_styles()
        self.assertEqual(styles.axis_desc.font, FontDesc("mono", 8.0))

    def test_resolution_is_idempotent_and_does_not_mutate(self) -> None:
        mesh = _mesh()
        first = mesh.resolve_styles()
        second = mesh.resolve_styles()
        self.assertEqual(first, second)
        self.assertIsNone(mesh.label_style_value)
        self.assertIsNone(mesh.axis_desc_style_value)
        self.assertIsNone(mesh.line_style_1_value)


class MeshTwoPassDrawTests(unittest.TestCase):
    def test_default_configuration_issues_fine_then_coarse_pass(self) -> None:
        target = mock.Mock()
        _mesh(target).x_labels(5).y_labels(5).draw()

        self.assertEqual(target.draw_mesh.call_count, 2)
        fine = target.draw_mesh.call_args_list[0].kwargs
        coarse = target.draw_mesh.call_args_list[1].kwargs
        self.assertEqual(fine["label_counts"], (50, 50))
        self.assertEqual(fine["grid_style"], DEFAULT_FINE_MESH_STYLE)
        self.assertFalse(fine["draw_x_axis"])
        self.assertFalse(fine["draw_y_axis"])
        self.assertIsNone(fine["x_desc"])
        self.assertIsNone(fine["y_desc"])
        self.assertEqual(coarse["label_counts"], (5, 5))
        self.assertEqual(coarse["grid_style"], DEFAULT_COARSE_MESH_STYLE)
        self.assertEqual(coarse["axis_style"], DEFAULT_AXIS_STYLE)
        self.assertTrue(coarse["draw_x_axis"])
        self.assertTrue(coarse["draw_y_axis"])

    def test_style_overrides_reach_the_matching_pass(self) -> None:
        target = mock.Mock()
        (
            _mesh(target)
            .line_style_1((1, 1, 1))
            .line_style_2((2, 2, 2))
            .axis_style((3, 3, 3))
            .label_style(("serif", 9))
            .draw()
        )
        fine = target.draw_mesh.call_args_list[0].kwargs
        coarse = target.draw_mesh.call_args_list[1].kwargs
        label = TextStyle(font=FontDesc("serif", 9.0))
        self.assertEqual(fine["grid_style"], ShapeStyle(color=(2, 2, 2, 255)))
        self.assertEqual(coarse["grid_style"], ShapeStyle(color=(1, 1, 1, 255)))
        for call in (fine, coarse):
            self.assertEqual(call["axis_style"], ShapeStyle(color=(3, 3, 3, 255)))
            self.assertEqual(call["label_style"], label)
            self.assertEqual(call["axis_desc_style"], label)

    def test_fine_pass_multiplies_each_count_independently(self) -> None:
        target = mock.Mock()
        _mesh(target).x_labels(3).y_labels(8).draw()
        fine = target.draw_mesh.call_args_list[0].kwargs
        coarse = target.draw_mesh.call_args_list[1].kwargs
        self.assertEqual(fine["label_counts"], (8 * FINE_MESH_MULTIPLIER, 3 * FINE_MESH_MULTIPLIER))
        self.assertEqual(coarse["label_counts"], (8, 3))

    def test_fine_pass_label_callback_never_yields_text(self) -> None:
        target = mock.Mock()
        _mesh(target).draw()
        label_text = target.draw_mesh.call_args_list[0].kwargs["label_text"]
        for line in (_line("x", 1.0), _line("y", 2.0), _line("x", 1.0)):
            self.assertIsNone(label_text(line))

    def test_mesh_flags_and_offset_are_shared_by_both_passes(self) -> None:
        target = mock.Mock()
        _mesh(target).disable_x_mesh().x_label_offset(-6).disable_y_axis().draw()
        for call in target.draw_mesh.call_args_list:
            self.assertFalse(call.kwargs["draw_x_mesh"])
            self.assertTrue(call.kwargs["draw_y_mesh"])
            self.assertEqual(call.kwargs["x_label_offset"], -6)
        coarse = target.draw_mesh.call_args_list[1].kwargs
        self.assertTrue(coarse["draw_x_axis"])
        self.assertFalse(coarse["draw_y_axis"])

    def test_descriptions_reach_coarse_pass_independently(self) -> None:
        target = mock.Mock()
        _mesh(target).y_desc("Time").draw()
        coarse = target.draw_mesh.call_args_list[1].kwargs
        self.assertIsNone(coarse["x_desc"])
        self.assertEqual(coarse["y_desc"], "Time")

    def test_coarse_dispatch_uses_formatter_of_matching_axis(self) -> None:
        target = mock.Mock()
        format_x = mock.Mock(side_effect=lambda v: str(v).upper())
        format_y = mock.Mock(side_effect=lambda v: f"y={v}")
        _mesh(target).x_label_formatter(format_x).y_label_formatter(format_y).draw()
        label_text = target.draw_mesh.call_args_list[1].kwargs["label_text"]

        self.assertEqual(label_text(_line("x", "jan")), "JAN")
        format_y.assert_not_called()
        self.assertEqual(label_text(_line("y", 3)), "y=3")
        format_x.assert_called_once_with("jan")

    def test_second_draw_fails_without_touching_target(self) -> None:
        target = mock.Mock()
        mesh = _mesh(target)
        mesh.draw()
        with self.assertRaises(TargetConsumedError):
            mesh.draw()
        self.assertEqual(target.draw_mesh.call_count, 2)
        self.assertIsNone(mesh.target)

    def test_fine_pass_failure_aborts_before_coarse_pass(self) -> None:
        target = mock.Mock()
        target.draw_mesh.side_effect = DrawError("surface unavailable")
        with self.assertLogs("chartmesh.mesh", level="WARNING"):
            with self.assertRaises(DrawError):
                _mesh(target).draw()
        self.assertEqual(target.draw_mesh.call_count, 1)

    def test_coarse_pass_failure_propagates_unchanged(self) -> None:
        target = mock.Mock()
        err = DrawError("flush failed")
        target.draw_mesh.side_effect = [None, err]
        mesh = _mesh(target)
        with self.assertLogs("chartmesh.mesh", level="WARNING"):
            with self.assertRaises(DrawError) as ctx:
                mesh.draw()
        self.assertIs(ctx.exception, err)
        self.assertEqual(target.draw_mesh.call_count, 2)
        with self.assertRaises(TargetConsumedError):
            mesh.draw()


if __name__ == "__main__":
    unittest.main()
