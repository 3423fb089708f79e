from __future__ import annotations

from engine.layout.types import PlacedRect, RectKind
from engine.render.types import ChartStyle, to_screen_rect, to_screen_y


def _rect(y: float, h: float) -> PlacedRect:
    return PlacedRect(x=5, y=y, width=10, height=h, label="t", kind=RectKind.TASK, lane=0, task_index=0)


def test_top_left_rect_maps_to_bottom_left_origin() -> None:
    # 上端に接する矩形は画面上端 (y + h == canvas_h) に来る
    assert to_screen_rect(_rect(0, 20), 480) == (5, 460, 10, 20)
    assert to_screen_rect(_rect(460, 20), 480) == (5, 0, 10, 20)
    assert to_screen_y(80, 480) == 400


def test_style_from_config_and_overrides() -> None:
    style = ChartStyle.from_config(
        {"background_color": "#000000", "line_color": None},
        {"font_size": 12, "show_labels": False},
        show_separators=False,
    )
    assert style.background == (0.0, 0.0, 0.0, 1.0)
    # 線色未指定 → 暗い背景なので白
    assert style.line_color == (1.0, 1.0, 1.0, 1.0)
    assert style.font_size == 12
    assert style.show_labels is False
    assert style.show_separators is False


def test_style_explicit_colors_win_over_config() -> None:
    style = ChartStyle.from_config(
        {"background_color": "#000000"}, {}, background="#FFFFFF", line_color=(255, 0, 0)
    )
    assert style.background == (1.0, 1.0, 1.0, 1.0)
    assert style.line_color == (1.0, 0.0, 0.0, 1.0)
    assert style.show_labels is True
