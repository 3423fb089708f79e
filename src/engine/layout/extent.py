"""
どこで: `engine.layout.extent`。
何を: スケジュールから最大時刻・最大レーン・レーンプロファイルを導出する。
なぜ: 単位計算と矩形配置が同じプロファイルを 1 回だけ計算して共有するため。
"""

from __future__ import annotations

from typing import Iterable

from engine.core.schedule import Task

from .types import UNUSED, Extents, LaneProfile, LaneSlot, Used


def compute_max_time(tasks: Iterable[Task]) -> float:
    """各タスクの `end_of_activity` の最大値（空なら 0）。

    送信がある場合は末尾に列挙された送信の終了時刻のみを見る。
    途中の送信の方が遅く終わっても考慮しない。
    """
    max_time: float = 0
    for task in tasks:
        t = task.end_of_activity
        if t > max_time:
            max_time = t
    return max_time


def compute_lane_profile(tasks: Iterable[Task]) -> LaneProfile:
    """レーン 0..max_lane ごとの最大送信数を `Used`/`Unused` で返す。"""
    counts: dict[int, int] = {}
    for task in tasks:
        n = len(task.transmissions)
        prev = counts.get(task.lane)
        if prev is None or n > prev:
            counts[task.lane] = n
    if not counts:
        return LaneProfile()
    slots: list[LaneSlot] = [UNUSED] * (max(counts) + 1)
    for lane, n in counts.items():
        slots[lane] = Used(n)
    return LaneProfile(slots)


def compute_extents(tasks: Iterable[Task]) -> Extents:
    """`(max_time, max_lane, lane_profile)` をまとめて返す。空スケジュールは max_lane=-1。"""
    items = tuple(tasks)
    profile = compute_lane_profile(items)
    return Extents(
        max_time=compute_max_time(items),
        max_lane=len(profile) - 1,
        lane_profile=profile,
    )


__all__ = ["compute_max_time", "compute_lane_profile", "compute_extents"]
