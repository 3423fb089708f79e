"""
どこで: `engine.core` の描画ウィンドウ薄ラッパ。
何を: Pyglet Window（背景クリア/固定サイズ）と描画コールバック登録を提供。
なぜ: レンダラ/レイアウト層から GUI 依存を切り離し、最小インターフェイスで統一するため。

使用例:
    win = RenderWindow(640, 480, bg_color=(1, 1, 1, 1))
    win.add_draw_callback(chart_renderer.draw)
    pyglet.app.run()
"""

from typing import Callable

import pyglet
from pyglet.gl import glClearColor


class RenderWindow(pyglet.window.Window):
    def __init__(
        self,
        width: int,
        height: int,
        *,
        caption: str = "Lanechart",
        bg_color: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0),
    ):
        """ウィンドウを生成する。

        引数:
            width: ウィンドウ幅（ピクセル）。レイアウトのキャンバス幅と一致させる。
            height: ウィンドウ高さ（ピクセル）。
            caption: タイトルバー文字列。
            bg_color: 背景色 RGBA（0.0〜1.0）。
        """
        # キャンバス寸法とピクセルを 1:1 に保つためリサイズ不可
        super().__init__(width=width, height=height, caption=caption, resizable=False)
        self._bg_color = bg_color
        self._draw_callbacks: list[Callable[[], None]] = []

    def add_draw_callback(self, func: Callable[[], None]) -> None:
        """
        `on_draw` 中に呼び出す描画関数を登録する。

        - 関数は引数を取らず、副作用で描画を行うこと。
        - 登録順に呼び出される。
        """
        self._draw_callbacks.append(func)

    def on_draw(self):  # Pyglet 既定のイベント名
        """ウィンドウ描画イベントハンドラ。登録された描画コールバックを呼び出す。"""
        r, g, b, a = self._bg_color
        glClearColor(r, g, b, a)
        self.clear()
        for cb in self._draw_callbacks:
            cb()
