"""
どこで: `engine.core` の例外定義。
何を: レイアウト計算で送出する例外階層（`LayoutError` 派生）。
なぜ: 呼び出し側が「入力不正」「縮退」「内部不整合」を型で区別して扱えるようにするため。
"""

from __future__ import annotations


class LayoutError(Exception):
    """レイアウトエンジンが送出する例外の基底。"""


class DegenerateScheduleError(LayoutError):
    """時間軸/行軸の広がりが 0 で単位を決められない（空スケジュール等）。"""


class InvalidInterval(LayoutError, ValueError):
    """`finish_at < begin_at` の区間を持つタスク/送信。

    `transmission_index` が None ならタスク本体、整数なら該当送信の位置。
    """

    def __init__(
        self,
        label: str,
        begin_at: float,
        finish_at: float,
        *,
        transmission_index: int | None = None,
    ) -> None:
        where = f"task '{label}'"
        if transmission_index is not None:
            where += f" transmission #{transmission_index}"
        super().__init__(f"{where}: finish_at ({finish_at}) < begin_at ({begin_at})")
        self.label = label
        self.begin_at = begin_at
        self.finish_at = finish_at
        self.transmission_index = transmission_index


class LaneIndexOutOfRange(LayoutError, LookupError):
    """タスクのレーンがレーンプロファイルに存在しない（内部不整合）。"""

    def __init__(self, lane: int, profile_size: int) -> None:
        super().__init__(f"lane {lane} is outside the lane profile (size={profile_size})")
        self.lane = lane
        self.profile_size = profile_size


__all__ = [
    "LayoutError",
    "DegenerateScheduleError",
    "InvalidInterval",
    "LaneIndexOutOfRange",
]
