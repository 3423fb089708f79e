"""
どこで: `engine.layout.units`。
何を: キャンバス寸法と範囲から時間軸/行軸のピクセル単位を決める。
なぜ: 浮動小数/整数切り捨ての 2 方式を 1 関数に集約し、全軸へ一様に適用するため。
"""

from __future__ import annotations

from common.settings import NUMERIC_MODES
from engine.core.errors import DegenerateScheduleError

from .types import AxisUnits, LaneProfile


def _divide(numerator: float, denominator: float, numeric: str) -> float:
    if numeric == "int":
        return float(int(numerator // denominator))
    return numerator / denominator


def validate_task_weight(task_weight: int) -> int:
    """K（タスクバーの行数）を検証して int で返す。1 未満は `ValueError`。"""
    if isinstance(task_weight, bool) or int(task_weight) != task_weight:
        raise ValueError(f"task_weight must be an integer, got {task_weight!r}")
    k = int(task_weight)
    if k < 1:
        raise ValueError(f"task_weight must be >= 1, got {k}")
    return k


def resolve_units(
    canvas_width: float,
    canvas_height: float,
    max_time: float,
    lane_profile: LaneProfile,
    *,
    task_weight: int = 1,
    numeric: str = "float",
) -> AxisUnits:
    """`x_unit = width / max_time`, `y_unit = height / Σ(count + K)` を返す。

    Raises
    ------
    DegenerateScheduleError
        `max_time <= 0` または行数合計が 0（空スケジュール）。
        整数モードで単位が 0 に切り捨てられる場合も同様。
    ValueError
        キャンバス寸法が正でない / `numeric` が未知 / `task_weight` が不正。
    """
    if numeric not in NUMERIC_MODES:
        raise ValueError(f"numeric must be one of {NUMERIC_MODES}, got {numeric!r}")
    if canvas_width <= 0 or canvas_height <= 0:
        raise ValueError(f"canvas must be positive, got {(canvas_width, canvas_height)}")
    k = validate_task_weight(task_weight)

    sum_rows = lane_profile.sum_rows(k)
    if max_time <= 0:
        raise DegenerateScheduleError(f"time extent is zero (max_time={max_time})")
    if sum_rows == 0:
        raise DegenerateScheduleError("row extent is zero (no used lanes)")

    x_unit = _divide(canvas_width, max_time, numeric)
    y_unit = _divide(canvas_height, sum_rows, numeric)
    if x_unit <= 0 or y_unit <= 0:
        raise DegenerateScheduleError(
            f"canvas {canvas_width}x{canvas_height} is too small for "
            f"max_time={max_time}, rows={sum_rows} in integer mode"
        )
    return AxisUnits(
        x_unit=x_unit, y_unit=y_unit, sum_rows=sum_rows, task_weight=k, numeric=numeric
    )


__all__ = ["resolve_units", "validate_task_weight", "NUMERIC_MODES"]
