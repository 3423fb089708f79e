"""
どこで: `engine.layout` 型定義。
何を: レーンプロファイル（タグ付きスロット）、範囲/単位、配置済み矩形、レイアウト結果。
なぜ: 計算段（extent → units → builder）の受け渡しを不変データで固定し、
描画側（pyglet/matplotlib）が同じ結果を読むだけにするため。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import accumulate
from typing import Iterator, Sequence

import numpy as np


@dataclass(frozen=True)
class Used:
    """タスクが 1 つ以上あるレーン。`count` はそのレーンの最大送信数。"""

    count: int

    @property
    def is_used(self) -> bool:
        return True

    def rows(self, task_weight: int) -> int:
        return self.count + task_weight


@dataclass(frozen=True)
class Unused:
    """どのタスクも割り当てられていないレーン（行を占有しない）。"""

    @property
    def is_used(self) -> bool:
        return False

    def rows(self, task_weight: int) -> int:
        return 0


UNUSED = Unused()

LaneSlot = Used | Unused


class LaneProfile(Sequence[LaneSlot]):
    """レーン 0..max_lane のスロット列（読み取り専用）。"""

    __slots__ = ("_slots",)

    def __init__(self, slots: Sequence[LaneSlot] = ()) -> None:
        self._slots: tuple[LaneSlot, ...] = tuple(slots)

    def __getitem__(self, lane):  # type: ignore[override]
        return self._slots[lane]

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[LaneSlot]:
        return iter(self._slots)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LaneProfile):
            return self._slots == other._slots
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._slots)

    def __repr__(self) -> str:
        return f"LaneProfile({list(self._slots)!r})"

    def counts(self) -> list[int | None]:
        """スロットを `count`（未使用は None）の list で返す。"""
        return [s.count if isinstance(s, Used) else None for s in self._slots]

    def rows(self, task_weight: int) -> list[int]:
        """各レーンが占める行数（未使用は 0）。"""
        return [s.rows(task_weight) for s in self._slots]

    def sum_rows(self, task_weight: int) -> int:
        return sum(self.rows(task_weight))

    def row_offsets(self, task_weight: int) -> list[int]:
        """各レーンのブロック先頭行（= それより上のレーンが占める行数の累計）。"""
        return [0, *accumulate(self.rows(task_weight))][: len(self._slots)]


@dataclass(frozen=True)
class Extents:
    """スケジュール全体の時間/レーン範囲。"""

    max_time: float
    max_lane: int
    lane_profile: LaneProfile


@dataclass(frozen=True)
class AxisUnits:
    """時間 1 単位/行 1 単位あたりのピクセル数。"""

    x_unit: float
    y_unit: float
    sum_rows: int
    task_weight: int
    numeric: str = "float"


class RectKind(str, Enum):
    TASK = "task"
    TRANSMISSION = "transmission"


@dataclass(frozen=True)
class PlacedRect:
    """キャンバス座標（左上原点, y 下向き）の配置済み矩形。"""

    x: float
    y: float
    width: float
    height: float
    label: str
    kind: RectKind
    lane: int
    task_index: int
    transmission_index: int | None = None
    dest_lane: int | None = None

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class Layout:
    """1 回のレイアウト計算結果。描画シンクはこれを毎フレーム読むだけ。"""

    rects: tuple[PlacedRect, ...]
    separators: tuple[float, ...]
    canvas: tuple[float, float]
    units: AxisUnits
    extents: Extents

    def __len__(self) -> int:
        return len(self.rects)

    def __iter__(self) -> Iterator[PlacedRect]:
        return iter(self.rects)

    def lane_rects(self, lane: int) -> list[PlacedRect]:
        return [r for r in self.rects if r.lane == lane]

    def as_arrays(self) -> np.ndarray:
        """矩形を `(N, 4)` の float64 配列（x, y, width, height）で返す。"""
        if not self.rects:
            return np.zeros((0, 4), dtype=np.float64)
        return np.array(
            [(r.x, r.y, r.width, r.height) for r in self.rects], dtype=np.float64
        )


__all__ = [
    "Used",
    "Unused",
    "UNUSED",
    "LaneSlot",
    "LaneProfile",
    "Extents",
    "AxisUnits",
    "RectKind",
    "PlacedRect",
    "Layout",
]
