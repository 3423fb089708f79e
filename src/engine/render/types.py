"""
どこで: `engine.render` 型定義。
何を: 描画スタイル `ChartStyle` と、レイアウト座標 → 画面座標の変換。
なぜ: pyglet を import せずに（ヘッドレスで）変換規則を検証できるようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from engine.layout.types import PlacedRect
from util.color import auto_line_color, normalize_color

RGBA = tuple[float, float, float, float]


@dataclass(frozen=True)
class ChartStyle:
    """描画色/フォント/表示切替。色は RGBA(0–1)。"""

    background: RGBA = (1.0, 1.0, 1.0, 1.0)
    line_color: RGBA = (0.0, 0.0, 0.0, 1.0)
    line_thickness: float = 1.0
    font_size: int = 9
    show_labels: bool = True
    show_separators: bool = True
    task_fill_alpha: int = 48  # 0 で塗りなし

    @classmethod
    def from_config(
        cls,
        canvas_cfg: Mapping[str, Any] | None = None,
        chart_cfg: Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> "ChartStyle":
        """設定辞書（`canvas`/`chart` セクション）から生成する。`None` の上書きは無視。"""
        canvas_cfg = canvas_cfg or {}
        chart_cfg = chart_cfg or {}
        bg_src = overrides.pop("background", None)
        if bg_src is None:
            bg_src = canvas_cfg.get("background_color")
        line_src = overrides.pop("line_color", None)
        if line_src is None:
            line_src = canvas_cfg.get("line_color")
        background = normalize_color(bg_src) if bg_src is not None else cls.background
        line_color = (
            normalize_color(line_src) if line_src is not None else auto_line_color(background)
        )
        values: dict[str, Any] = {
            "background": background,
            "line_color": line_color,
            "font_size": int(chart_cfg.get("font_size", cls.font_size)),
            "show_labels": bool(chart_cfg.get("show_labels", cls.show_labels)),
            "show_separators": bool(chart_cfg.get("show_separators", cls.show_separators)),
            "task_fill_alpha": int(chart_cfg.get("task_fill_alpha", cls.task_fill_alpha)),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def to_screen_rect(rect: PlacedRect, canvas_height: float) -> tuple[float, float, float, float]:
    """左上原点の矩形を左下原点（pyglet）の `(x, y, w, h)` へ変換する。"""
    return (rect.x, canvas_height - rect.bottom, rect.width, rect.height)


def to_screen_y(y: float, canvas_height: float) -> float:
    return canvas_height - y


__all__ = ["RGBA", "ChartStyle", "to_screen_rect", "to_screen_y"]
