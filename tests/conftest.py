"""共通フィクスチャ。

- 小さなスケジュール試料（仕様シナリオ/デモ）
- 環境変数由来の設定の退避・復元
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings
from engine.core.schedule import Schedule, Task, Transmission, sample_schedule


@pytest.fixture()
def single_task() -> Schedule:
    return Schedule([Task(0, "A", 0, 2)])


@pytest.fixture()
def two_lane_schedule() -> Schedule:
    # レーン 0: 送信なし 2 タスク / レーン 1: 2 本送信するタスク
    return Schedule(
        [
            Task(0, "a", 0, 1),
            Task(0, "b", 1, 2),
            Task(1, "c", 0, 3, (Transmission(3, 4, 0), Transmission(3, 4, 0))),
        ]
    )


@pytest.fixture()
def demo_schedule() -> Schedule:
    return sample_schedule()


@pytest.fixture()
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    for name in ("LCH_TASK_WEIGHT", "LCH_NUMERIC", "LCH_DEBUG_LAYOUT"):
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield monkeypatch
    monkeypatch.undo()
    settings.reload_from_env()
