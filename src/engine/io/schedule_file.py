"""
どこで: `engine.io.schedule_file`。
何を: YAML のタスク列を読み込み `Schedule` を返す。
なぜ: エンジン本体はファイル形式を持たないため、入力形式の解釈をこの層に閉じ込めるため。

形式:
    tasks:
      - {lane: 1, label: A, begin_at: 0, finish_at: 2}
      - lane: 2
        label: C
        begin_at: 0
        finish_at: 1.5
        transmissions:
          - {begin_at: 1.5, finish_at: 3, dest_lane: 1}

トップレベルがタスクの list でもよい。
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from engine.core.schedule import Schedule

logger = logging.getLogger(__name__)


def parse_schedule(text: str) -> Schedule:
    """YAML 文字列からスケジュールを構築する。形式不正は `ValueError`。"""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"invalid schedule YAML: {e}") from e
    if isinstance(data, dict):
        records = data.get("tasks")
    else:
        records = data
    if not isinstance(records, list):
        raise ValueError("schedule YAML must be a list of tasks or a mapping with 'tasks'")
    return Schedule.from_records(records)


def load_schedule(path: str | Path) -> Schedule:
    """YAML ファイルからスケジュールを読み込む。"""
    p = Path(path)
    schedule = parse_schedule(p.read_text(encoding="utf-8"))
    logger.info("loaded %d tasks from %s", len(schedule), p)
    return schedule


__all__ = ["parse_schedule", "load_schedule"]
