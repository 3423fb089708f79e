"""
どこで: `api` 入口（高レベル公開 API）。
何を: スケジュールモデル・レイアウト計算・表示/書き出しランナーを再輸出。
なぜ: 利用者が単一名前空間からスケジュール構築 → レイアウト → 表示まで完結できるようにするため。

Usage:
    from api import Schedule, Task, Transmission, compute_layout, run

    schedule = Schedule([
        Task(0, "A", 0, 2),
        Task(1, "C", 0, 1.5, (Transmission(1.5, 3, 0),)),
    ])
    layout = compute_layout(schedule, 640, 480)
    run(schedule)
"""

from engine.core.errors import (
    DegenerateScheduleError,
    InvalidInterval,
    LaneIndexOutOfRange,
    LayoutError,
)
from engine.core.schedule import (
    Schedule,
    Task,
    Transmission,
    describe_schedule,
    sample_schedule,
)
from engine.io.schedule_file import load_schedule
from engine.layout.pipeline import compute_layout
from engine.layout.types import Layout, PlacedRect, RectKind

from .chart import run_chart as run
from .chart import run_chart as run_chart

__all__ = [
    # モデル
    "Schedule",
    "Task",
    "Transmission",
    "sample_schedule",
    "describe_schedule",
    "load_schedule",
    # レイアウト
    "compute_layout",
    "Layout",
    "PlacedRect",
    "RectKind",
    # 実行
    "run_chart",
    "run",
    # 例外
    "LayoutError",
    "DegenerateScheduleError",
    "InvalidInterval",
    "LaneIndexOutOfRange",
]

__version__ = "2025.10"
