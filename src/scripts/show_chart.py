"""
Show (or export) the lane timeline of a schedule.

Usage:
    python src/scripts/show_chart.py [schedule.yaml] [--width W] [--height H]
        [--task-weight K] [--numeric float|int] [--png OUT] [--print]

Without a schedule file the built-in sample schedule is used. With --png the
chart is written to OUT (use "auto" for data/charts/<timestamp>.png) instead of
opening a window.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from common.logging import setup_default_logging
from engine.core.errors import LayoutError
from engine.core.schedule import Schedule, describe_schedule, sample_schedule
from engine.io.schedule_file import load_schedule

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a lane timeline (Gantt chart).")
    parser.add_argument("schedule", nargs="?", type=Path, help="Schedule YAML file")
    parser.add_argument("--width", type=int, default=None, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=None, help="Canvas height in pixels")
    parser.add_argument(
        "--task-weight", type=int, default=None, help="Task bar height in transmission rows"
    )
    parser.add_argument("--numeric", choices=["float", "int"], default=None)
    parser.add_argument("--png", type=str, default=None, help="Write PNG instead of a window")
    parser.add_argument("--print", action="store_true", help="Print tasks, extents and units")
    parser.add_argument("--log-level", default="INFO")
    return parser


def _canvas_arg(width: int | None, height: int | None) -> tuple[int, int] | None:
    if width is None and height is None:
        return None
    from api.chart_runner.utils import resolve_canvas_size
    from util.utils import config_section

    base_w, base_h = resolve_canvas_size(None, config_section("canvas"))
    return (width or base_w, height or base_h)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level)

    from api.chart import run_chart

    try:
        schedule: Schedule = load_schedule(args.schedule) if args.schedule else sample_schedule()
        canvas = _canvas_arg(args.width, args.height)
        layout = run_chart(
            schedule,
            canvas_size=canvas,
            task_weight=args.task_weight,
            numeric=args.numeric,
            init_only=bool(args.png or args.print),
        )
    except LayoutError as e:
        logger.error("layout failed: %s", e)
        return 1
    except (OSError, ValueError) as e:
        # 入力ファイルの欠損/不正、オプション値の不正
        logger.error("invalid input: %s", e)
        return 1

    if args.print:
        for line in describe_schedule(schedule):
            print(line)
        ext = layout.extents
        units = layout.units
        print(f"(max_time = {ext.max_time}, lanes = {ext.max_lane + 1}, rows = {units.sum_rows})")
        print(f"(x_unit = {units.x_unit}, y_unit = {units.y_unit})")

    if args.png:
        from engine.export.figure import save_chart_png
        from engine.render.types import ChartStyle
        from util.utils import config_section

        style = ChartStyle.from_config(config_section("canvas"), config_section("chart"))
        out = save_chart_png(layout, None if args.png == "auto" else args.png, style=style)
        print(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
