"""
どこで: `engine.layout.builder`。
何を: スケジュール順にタスク/送信の矩形とレーン区切り位置を生成する。
なぜ: レーンプロファイルで行軸をレーンごとに分割し、レーン間の重なりを構造的に排除するため。

行の割り当て（K = task_weight）:

    lane 0 | task rows (K)            <- rows_before(0) = 0
           | transmission #0
           | transmission #1          <- count_0 = 2
    -------+------------------------- separator
    lane 1 | task rows (K)            <- rows_before(1) = K + 2
    ...

同一レーンで時間が重なる送信は、添字ごとに 1 行ずつ下へ積む（結合しない）。
"""

from __future__ import annotations

from typing import Iterable

from engine.core.errors import LaneIndexOutOfRange
from engine.core.schedule import Task, validate_schedule

from .types import AxisUnits, LaneProfile, PlacedRect, RectKind, Used


def transmission_label(task: Task, dest_lane: int) -> str:
    return f"{task.label} -> {dest_lane}"


def build_rectangles(
    tasks: Iterable[Task],
    lane_profile: LaneProfile,
    units: AxisUnits,
    *,
    validate: bool = True,
) -> tuple[tuple[PlacedRect, ...], tuple[float, ...]]:
    """矩形列（スケジュール順）とレーン区切りの y 座標（昇順, 重複なし）を返す。

    区間の逆転は計算前にまとめて検査するため、部分的な結果は返らない。
    `validate=False` は検査済みの入力（`compute_layout` 経由）に限る。
    """
    items = tuple(tasks)
    if validate:
        validate_schedule(items)

    k = units.task_weight
    xu = units.x_unit
    yu = units.y_unit
    offsets = lane_profile.row_offsets(k)

    rects: list[PlacedRect] = []
    lane_bottoms: dict[int, float] = {}
    for task_index, task in enumerate(items):
        if task.lane >= len(lane_profile) or not isinstance(lane_profile[task.lane], Used):
            raise LaneIndexOutOfRange(task.lane, len(lane_profile))
        rows_before = offsets[task.lane]

        rects.append(
            PlacedRect(
                x=task.begin_at * xu,
                y=rows_before * yu,
                width=(task.finish_at - task.begin_at) * xu,
                height=k * yu,
                label=task.label,
                kind=RectKind.TASK,
                lane=task.lane,
                task_index=task_index,
            )
        )
        for i, tr in enumerate(task.transmissions):
            rects.append(
                PlacedRect(
                    x=tr.begin_at * xu,
                    y=(rows_before + k + i) * yu,
                    width=(tr.finish_at - tr.begin_at) * xu,
                    height=yu,
                    label=transmission_label(task, tr.dest_lane),
                    kind=RectKind.TRANSMISSION,
                    lane=task.lane,
                    task_index=task_index,
                    transmission_index=i,
                    dest_lane=tr.dest_lane,
                )
            )

        # レーン内で最も下に出した要素の直下
        bottom = (rows_before + k + len(task.transmissions)) * yu
        if bottom > lane_bottoms.get(task.lane, float("-inf")):
            lane_bottoms[task.lane] = bottom

    separators = tuple(sorted(set(lane_bottoms.values())))
    return tuple(rects), separators


__all__ = ["build_rectangles", "transmission_label"]
