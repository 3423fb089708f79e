"""
どこで: `engine.render` の描画シンク。
何を: `Layout` を pyglet の Batch（枠線 Box / 区切り Line / Label）へ 1 度だけ展開し、毎フレーム描く。
なぜ: スケジュールはセッション中不変なので、レイアウトも図形も再計算せず再描画だけで済ませるため。
"""

from __future__ import annotations

import logging

import pyglet
from pyglet.shapes import Box, Line, Rectangle

from engine.layout.types import Layout, RectKind
from util.color import to_u8_rgba

from .types import ChartStyle, to_screen_rect, to_screen_y

logger = logging.getLogger(__name__)


class ChartRenderer:
    """レイアウト済み矩形を枠線 + 任意ラベルで描く。"""

    def __init__(self, layout: Layout, style: ChartStyle | None = None):
        self.layout = layout
        self.style = style or ChartStyle()
        self.batch = pyglet.graphics.Batch()
        self._fill_group = pyglet.graphics.Group(order=0)
        self._line_group = pyglet.graphics.Group(order=1)
        self._text_group = pyglet.graphics.Group(order=2)
        # Batch から外れないよう参照を保持する
        self._shapes: list[object] = []
        self._labels: list[pyglet.text.Label] = []
        self._build()

    def _build(self) -> None:
        canvas_w, canvas_h = self.layout.canvas
        line_rgba = to_u8_rgba(self.style.line_color)
        thickness = float(self.style.line_thickness)

        for rect in self.layout.rects:
            x, y, w, h = to_screen_rect(rect, canvas_h)
            if rect.kind is RectKind.TASK and self.style.task_fill_alpha > 0:
                fill = (*line_rgba[:3], int(self.style.task_fill_alpha))
                self._shapes.append(
                    Rectangle(x, y, w, h, color=fill, batch=self.batch, group=self._fill_group)
                )
            self._shapes.append(
                Box(
                    x,
                    y,
                    w,
                    h,
                    thickness=thickness,
                    color=line_rgba,
                    batch=self.batch,
                    group=self._line_group,
                )
            )
            if self.style.show_labels and rect.label:
                self._labels.append(
                    pyglet.text.Label(
                        rect.label,
                        font_size=self.style.font_size,
                        x=x + 2,
                        y=y + h / 2,
                        anchor_x="left",
                        anchor_y="center",
                        color=line_rgba,
                        batch=self.batch,
                        group=self._text_group,
                    )
                )

        if self.style.show_separators:
            for sep in self.layout.separators:
                sy = to_screen_y(sep, canvas_h)
                # 位置引数 5 番目は線幅（pyglet 2.0/2.1 でキーワード名が異なる）
                self._shapes.append(
                    Line(
                        0,
                        sy,
                        canvas_w,
                        sy,
                        thickness,
                        color=line_rgba,
                        batch=self.batch,
                        group=self._line_group,
                    )
                )
        logger.debug(
            "chart batch built: shapes=%d labels=%d", len(self._shapes), len(self._labels)
        )

    def draw(self) -> None:
        """Batch を描画する（`on_draw` から毎フレーム呼ぶ）。"""
        self.batch.draw()

    def release(self) -> None:
        """図形/ラベルを Batch から外す。複数回呼んでも安全。"""
        for shape in self._shapes:
            shape.delete()  # type: ignore[attr-defined]
        for label in self._labels:
            label.delete()
        self._shapes.clear()
        self._labels.clear()


__all__ = ["ChartRenderer"]
