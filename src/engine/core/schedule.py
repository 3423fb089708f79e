"""
スケジュールモデル（レイアウトエンジンの入力）

本モジュールは、レーン（処理単位）ごとのタスク実行区間と、そのタスクが発行する
レーン間送信（Transmission）を不変データとして表現する。

データモデル（不変条件）:
- `Transmission(begin_at, finish_at, dest_lane)`: 送信区間と宛先レーン。
- `Task(lane, label, begin_at, finish_at, transmissions)`: 1 レーン上の実行区間。
  `transmissions` は生成側の時間順をそのまま保持し、並べ替えない。
- `Schedule`: `Task` の順序付き列。重複除去/統合は行わない（挿入順に意味がある）。
- レーン番号は 0 以上の整数。負値は生成時に `ValueError`。

区間の妥当性（`finish_at >= begin_at`）はここでは検査しない。
レイアウト直前に `validate_schedule` がまとめて検査し `InvalidInterval` を送出する。

文字列表現:
    >>> print(Task(2, "C", 0, 1.5, (Transmission(1.5, 3, 1),)))
    Chunk(proc: 2, name: C, b: 0, f: 1.5, transmissions: T(b: 1.5, f: 3, dest: 1))
"""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Mapping, Sequence, overload

from .errors import InvalidInterval

Number = float | int


def _lane_index(value: Any, name: str) -> int:
    """レーン番号を int へ正規化する。整数以外（bool 含む）と負値は `ValueError`。"""
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    try:
        idx = operator.index(value)
    except TypeError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None
    if idx < 0:
        raise ValueError(f"{name} must be >= 0, got {idx}")
    return idx


def _fmt(value: Number) -> str:
    # 1.0 -> "1", 1.5 -> "1.5"
    f = float(value)
    return str(int(f)) if f.is_integer() else repr(f)


@dataclass(frozen=True)
class Transmission:
    """所有タスクから宛先レーンへのメッセージ送信区間。"""

    begin_at: Number
    finish_at: Number
    dest_lane: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "dest_lane", _lane_index(self.dest_lane, "dest_lane"))

    @property
    def duration(self) -> Number:
        return self.finish_at - self.begin_at

    def __str__(self) -> str:
        return f"T(b: {_fmt(self.begin_at)}, f: {_fmt(self.finish_at)}, dest: {self.dest_lane})"


@dataclass(frozen=True)
class Task:
    """1 レーン上の 1 実行区間（旧称 Chunk/Subtask）。"""

    lane: int
    label: str
    begin_at: Number
    finish_at: Number
    transmissions: tuple[Transmission, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lane", _lane_index(self.lane, "lane"))
        # list 等で渡されても不変タプルへ正規化
        if not isinstance(self.transmissions, tuple):
            object.__setattr__(self, "transmissions", tuple(self.transmissions))

    @property
    def duration(self) -> Number:
        return self.finish_at - self.begin_at

    @property
    def end_of_activity(self) -> Number:
        """最後に列挙された送信の終了時刻（送信が無ければ自身の終了時刻）。

        最大値ではなく末尾要素のみを見る。送信は生成側で時間順に並んでいる前提。
        """
        if self.transmissions:
            return self.transmissions[-1].finish_at
        return self.finish_at

    def __str__(self) -> str:
        if self.transmissions:
            trans = "".join(f" {t}" for t in self.transmissions)
        else:
            trans = " none"
        return (
            f"Chunk(proc: {self.lane}, name: {self.label}, b: {_fmt(self.begin_at)}, "
            f"f: {_fmt(self.finish_at)}, transmissions:{trans})"
        )


class Schedule(Sequence[Task]):
    """`Task` の不変な順序付き列。"""

    __slots__ = ("_tasks",)

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        items = tuple(tasks)
        for t in items:
            if not isinstance(t, Task):
                raise TypeError(f"Schedule accepts Task only, got {type(t).__name__}")
        self._tasks: tuple[Task, ...] = items

    @overload
    def __getitem__(self, index: int) -> Task: ...

    @overload
    def __getitem__(self, index: slice) -> "Schedule": ...

    def __getitem__(self, index):  # type: ignore[override]
        if isinstance(index, slice):
            return Schedule(self._tasks[index])
        return self._tasks[index]

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Schedule):
            return NotImplemented
        return self._tasks == other._tasks

    def __hash__(self) -> int:
        return hash(self._tasks)

    def __repr__(self) -> str:
        return f"Schedule({len(self._tasks)} tasks)"

    @property
    def lanes(self) -> tuple[int, ...]:
        """使用されているレーン番号（昇順, 重複なし）。"""
        return tuple(sorted({t.lane for t in self._tasks}))

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "Schedule":
        """辞書列からスケジュールを構築する。

        各レコードは `lane`, `label`, `begin_at`, `finish_at` と任意の
        `transmissions`（`begin_at`, `finish_at`, `dest_lane` の辞書列）を持つ。
        欠損/型不正は `ValueError`。
        """
        tasks: list[Task] = []
        for i, rec in enumerate(records):
            if not isinstance(rec, Mapping):
                raise ValueError(f"task record #{i} must be a mapping, got {type(rec).__name__}")
            try:
                trans_src = rec.get("transmissions") or []
                transmissions = tuple(
                    Transmission(
                        begin_at=_as_number(t["begin_at"]),
                        finish_at=_as_number(t["finish_at"]),
                        dest_lane=t["dest_lane"],
                    )
                    for t in trans_src
                )
                task = Task(
                    lane=rec["lane"],
                    label=str(rec.get("label", "")),
                    begin_at=_as_number(rec["begin_at"]),
                    finish_at=_as_number(rec["finish_at"]),
                    transmissions=transmissions,
                )
            except (KeyError, TypeError, ValueError) as e:
                raise ValueError(f"invalid task record #{i}: {e}") from e
            tasks.append(task)
        return cls(tasks)


def _as_number(value: Any) -> Number:
    if isinstance(value, bool):
        raise TypeError("time value must be a number, got bool")
    if isinstance(value, int):
        return value
    return float(value)


def validate_schedule(schedule: Iterable[Task]) -> None:
    """全タスク/送信の区間を検査し、逆転があれば `InvalidInterval` を送出する。"""
    for task in schedule:
        if task.finish_at < task.begin_at:
            raise InvalidInterval(task.label, task.begin_at, task.finish_at)
        for i, tr in enumerate(task.transmissions):
            if tr.finish_at < tr.begin_at:
                raise InvalidInterval(
                    task.label, tr.begin_at, tr.finish_at, transmission_index=i
                )


def describe_schedule(schedule: Iterable[Task]) -> list[str]:
    """各タスクの 1 行表現を返す（デバッグ出力用）。"""
    return [str(t) for t in schedule]


def sample_schedule() -> Schedule:
    """デモ用の固定スケジュール（レーン 1〜3, タスク A〜E）。"""
    return Schedule(
        [
            Task(1, "A", 0, 2),
            Task(1, "B", 2, 4),
            Task(
                2,
                "C",
                0,
                1.5,
                (Transmission(1.5, 3, 1), Transmission(1.5, 3, 3)),
            ),
            Task(3, "D", 4, 5, (Transmission(5, 6, 1),)),
            Task(1, "E", 6, 7.5),
        ]
    )


__all__ = [
    "Transmission",
    "Task",
    "Schedule",
    "validate_schedule",
    "describe_schedule",
    "sample_schedule",
]
