from __future__ import annotations

import argparse
import logging

import numpy as np

from chartmesh import RangedCategory, RangedInt, chart


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a histogram-style mesh with centered bin labels.")
    parser.add_argument("--width", type=int, default=640)
    parser.add_argument("--height", type=int, default=360)
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    bins = RangedCategory(["mon", "tue", "wed", "thu", "fri"])
    ctx = chart(args.width, args.height, bins, RangedInt(0, 50), y_label_area_size=50)
    # Labels sit at segment left edges; shift them to the bin centers.
    half_bin = bins.segment_width(ctx.coord.x_limit) // 2
    (
        ctx.configure_mesh()
        .disable_x_mesh()
        .x_label_offset(half_bin)
        .x_label_formatter(str.upper)
        .y_labels(5)
        .y_desc("Count")
        .x_desc("Weekday")
        .draw()
    )

    rgba = ctx.backend.to_rgba()
    inked = int(np.count_nonzero(rgba[:, :, :3].min(axis=2) < 255))
    print(f"rendered {rgba.shape[1]}x{rgba.shape[0]} mesh, {inked} inked pixels")


if __name__ == "__main__":
    main()
