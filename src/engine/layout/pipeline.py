"""
どこで: `engine.layout.pipeline`。
何を: 検証 → 範囲 → 単位 → 矩形 の固定順パイプラインを 1 回実行し `Layout` を返す。
なぜ: 描画シンクがレイアウトを 1 度だけ計算し、以後は結果を再描画するだけにするため。
"""

from __future__ import annotations

import logging
from typing import Iterable

from common.settings import get as get_settings
from engine.core.errors import DegenerateScheduleError
from engine.core.schedule import Task, validate_schedule

from .builder import build_rectangles
from .extent import compute_extents
from .types import Layout
from .units import resolve_units

logger = logging.getLogger(__name__)


def compute_layout(
    tasks: Iterable[Task],
    canvas_width: float,
    canvas_height: float,
    *,
    task_weight: int | None = None,
    numeric: str | None = None,
) -> Layout:
    """スケジュールをキャンバス上の矩形へ配置する。

    Parameters
    ----------
    tasks : Iterable[Task]
        `Schedule` または `Task` の列（順序を保持）。
    canvas_width, canvas_height : float
        キャンバス寸法 [px]。
    task_weight : int | None
        K。None で `common.settings` の `TASK_WEIGHT`。
    numeric : str | None
        "float" | "int"。None で `common.settings` の `NUMERIC`。

    Raises
    ------
    InvalidInterval
        区間が逆転したタスク/送信がある。
    DegenerateScheduleError
        空スケジュール、または時間/行の広がりが 0。
    """
    settings = get_settings()
    k = settings.TASK_WEIGHT if task_weight is None else task_weight
    mode = settings.NUMERIC if numeric is None else numeric

    items = tuple(tasks)
    if not items:
        raise DegenerateScheduleError("schedule is empty")
    validate_schedule(items)

    extents = compute_extents(items)
    units = resolve_units(
        canvas_width,
        canvas_height,
        extents.max_time,
        extents.lane_profile,
        task_weight=k,
        numeric=mode,
    )
    rects, separators = build_rectangles(
        items, extents.lane_profile, units, validate=False
    )

    if settings.DEBUG_LAYOUT:
        for r in rects:
            logger.debug("rect %s", r)
    logger.debug(
        "layout: tasks=%d rects=%d max_time=%s lanes=%d x_unit=%.4f y_unit=%.4f rows=%d",
        len(items),
        len(rects),
        extents.max_time,
        extents.max_lane + 1,
        units.x_unit,
        units.y_unit,
        units.sum_rows,
    )
    return Layout(
        rects=rects,
        separators=separators,
        canvas=(float(canvas_width), float(canvas_height)),
        units=units,
        extents=extents,
    )


__all__ = ["compute_layout"]
