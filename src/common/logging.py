"""
どこで: `common.logging`（CLI/ランナー共通のロギング初期化）。
何を: `scripts/show_chart.py` の `--log-level` を受け取り、ルートロガーへ最小構成を 1 度だけ適用する。
なぜ: エンジン各モジュールは `logging.getLogger(__name__)` で出力するだけにして、
      出力先や書式の決定は入口（CLI, `main.py`）に任せるため。

`compute_layout` の矩形ごとのデバッグ出力は `LCH_DEBUG_LAYOUT=1` と `--log-level DEBUG` の併用で見える。
"""

from __future__ import annotations

import logging


def setup_default_logging(level: int | str = "INFO") -> None:
    """最小限のロギング設定を 1 度だけ適用する。

    - レベル名（"debug" など大小無視）または数値。未知の名前は INFO
    - ルートロガーにハンドラが既にあれば何もしない（pytest 等が設定済みの場合）
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
        if not isinstance(lvl, int):
            lvl = logging.INFO
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]
