"""
どこで: `api.chart`（実行ランナー）。
何を: スケジュールを 1 度だけレイアウトし、pyglet ウィンドウで毎フレーム再描画する。
なぜ: 少ない記述でスケジュールのタイムライン（ガントチャート）を確認できるようにするため。

実行フロー（概要）:
1) 設定解決: `util.utils.load_config()` の `canvas`/`layout`/`chart` セクションと引数を統合
   （明示引数 > 設定ファイル > 環境変数 `LCH_*`）。
2) レイアウト: `engine.layout.compute_layout` を 1 回だけ実行（以後は再計算しない）。
3) ウィンドウ: `RenderWindow` を生成し、`ChartRenderer` の Batch を描画コールバックに登録。
4) ループ: `pyglet.app.run(1 / fps)`。`ESC` またはウィンドウを閉じると終了し、
   図形を解放してイベントループを抜ける。

例:
    from api import run_chart, sample_schedule

    run_chart(sample_schedule(), canvas_size=(640, 480), task_weight=2)

注意:
- レイアウト例外（`InvalidInterval`/`DegenerateScheduleError`）はウィンドウ生成前に送出される。
- ヘッドレス環境では `init_only=True` でレイアウトのみ計算して返せる（pyglet を import しない）。
"""

from __future__ import annotations

import logging
from typing import Iterable

from engine.core.schedule import Task
from engine.layout.pipeline import compute_layout
from engine.layout.types import Layout
from engine.render.types import ChartStyle
from util.utils import load_config

from .chart_runner.utils import (
    resolve_canvas_size,
    resolve_fps,
    resolve_numeric,
    resolve_task_weight,
)

logger = logging.getLogger(__name__)


def run_chart(
    schedule: Iterable[Task],
    *,
    canvas_size: str | tuple[int, int] | None = None,
    task_weight: int | None = None,
    numeric: str | None = None,
    background: str | tuple[float, ...] | None = None,
    line_color: str | tuple[float, ...] | None = None,
    show_labels: bool | None = None,
    show_separators: bool | None = None,
    fps: int | None = None,
    caption: str = "Lanechart",
    init_only: bool = False,
) -> Layout:
    """スケジュールのタイムラインをウィンドウに表示する。

    Parameters
    ----------
    schedule : Iterable[Task]
        描画するタスク列（`Schedule` 推奨）。
    canvas_size : str | tuple[int, int] | None
        プリセット（"VGA", "HD" など）または `(width, height)` [px]。None で設定から。
    task_weight : int | None
        タスクバーの高さ（送信行の何行ぶんか, K）。None で設定から。
    numeric : str | None
        "float" | "int"。単位計算の数値表現。None で設定から。
    background, line_color : str | tuple | None
        色（Hex / RGBA 0–1 / 0–255）。None で設定/自動。
    show_labels, show_separators : bool | None
        ラベル/レーン区切り線の表示。None で設定から。
    fps : int | None
        再描画レート。None で設定から（既定 30）。
    init_only : bool, default False
        True でレイアウトのみ計算して返す（ウィンドウは作らない）。

    Returns
    -------
    Layout
        計算済みレイアウト（ウィンドウを閉じた後に返る）。
    """
    cfg = load_config() or {}
    canvas_cfg = cfg.get("canvas", {}) if isinstance(cfg.get("canvas"), dict) else {}
    layout_cfg = cfg.get("layout", {}) if isinstance(cfg.get("layout"), dict) else {}
    chart_cfg = cfg.get("chart", {}) if isinstance(cfg.get("chart"), dict) else {}

    width, height = resolve_canvas_size(canvas_size, canvas_cfg)
    k = resolve_task_weight(task_weight, layout_cfg)
    mode = resolve_numeric(numeric, layout_cfg)

    layout = compute_layout(schedule, width, height, task_weight=k, numeric=mode)
    logger.info(
        "layout ready: %d rects on %dx%d (K=%d, %s units)", len(layout), width, height, k, mode
    )
    if init_only:
        return layout

    style = ChartStyle.from_config(
        canvas_cfg,
        chart_cfg,
        background=background,
        line_color=line_color,
        show_labels=show_labels,
        show_separators=show_separators,
    )
    rate = resolve_fps(fps, chart_cfg)

    # 遅延インポート（ヘッドレス環境でのウィンドウ生成を避ける）
    import pyglet
    from pyglet.window import key

    from engine.core.render_window import RenderWindow
    from engine.render.chart_renderer import ChartRenderer

    window = RenderWindow(width, height, caption=caption, bg_color=style.background)
    renderer = ChartRenderer(layout, style)
    window.add_draw_callback(renderer.draw)

    closed = False

    def _shutdown() -> None:
        # 冪等なクリーンアップ
        nonlocal closed
        if closed:
            return
        closed = True
        renderer.release()
        window.close()
        pyglet.app.exit()

    @window.event
    def on_key_press(sym, mods):  # noqa: ANN001
        if sym == key.ESCAPE:
            _shutdown()

    @window.event
    def on_close():  # noqa: ANN001
        _shutdown()

    try:
        pyglet.app.run(1 / rate)
    finally:
        # ループが例外で抜けた場合も図形を解放する
        renderer.release()
    return layout


__all__ = ["run_chart"]
