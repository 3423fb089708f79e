"""
どこで: `api.chart_runner.utils`（純粋関数/小ヘルパ）。
何を: キャンバス寸法・K・数値モード・FPS の解決（明示引数 > 設定ファイル > 環境設定）。
なぜ: `api.chart` を薄く保ち、テスト容易性と再利用性を上げるため。
"""

from __future__ import annotations

from typing import Any, Mapping

from common.settings import NUMERIC_MODES
from common.settings import get as get_settings
from engine.layout.units import validate_task_weight
from util.constants import CANVAS_SIZES, DEFAULT_CANVAS_SIZE, DEFAULT_FPS


def resolve_canvas_size(
    canvas_size: str | tuple[int, int] | None,
    canvas_cfg: Mapping[str, Any] | None = None,
) -> tuple[int, int]:
    """キャンバス [px] を解決する。

    - 文字列: `CANVAS_SIZES` のキー（大文字/小文字は無視）
    - タプル: `(width, height)` をそのまま（正であることを検証）
    - None: 設定 `canvas.width/height`、無ければ `DEFAULT_CANVAS_SIZE`
    - それ以外/未知キーは `ValueError`
    """
    if canvas_size is None:
        cfg = canvas_cfg or {}
        canvas_size = (
            cfg.get("width", DEFAULT_CANVAS_SIZE[0]),
            cfg.get("height", DEFAULT_CANVAS_SIZE[1]),
        )
    if isinstance(canvas_size, str):
        key = canvas_size.upper()
        if key not in CANVAS_SIZES:
            allowed = ", ".join(sorted(CANVAS_SIZES.keys()))
            raise ValueError(f"invalid canvas_size: {canvas_size}; allowed={allowed}")
        w, h = CANVAS_SIZES[key]
        return int(w), int(h)
    try:
        w, h = int(canvas_size[0]), int(canvas_size[1])
    except (TypeError, ValueError, IndexError) as e:
        raise ValueError(f"invalid canvas_size tuple: {canvas_size}") from e
    if w <= 0 or h <= 0:
        raise ValueError(f"canvas_size must be positive, got: {(w, h)}")
    return w, h


def resolve_task_weight(
    task_weight: int | None, layout_cfg: Mapping[str, Any] | None = None
) -> int:
    """K を解決する（1 以上の int）。明示値の不正は `ValueError`、設定値の不正は環境既定へ。"""
    if task_weight is not None:
        return validate_task_weight(task_weight)
    raw = (layout_cfg or {}).get("task_weight")
    if raw is not None:
        try:
            return max(1, int(raw))
        except (TypeError, ValueError):
            pass
    return get_settings().TASK_WEIGHT


def resolve_numeric(numeric: str | None, layout_cfg: Mapping[str, Any] | None = None) -> str:
    """数値モード（"float" | "int"）を解決する。"""
    if numeric is not None:
        mode = str(numeric).lower()
        if mode not in NUMERIC_MODES:
            raise ValueError(f"numeric must be one of {NUMERIC_MODES}, got {numeric!r}")
        return mode
    raw = (layout_cfg or {}).get("numeric")
    if isinstance(raw, str) and raw.lower() in NUMERIC_MODES:
        return raw.lower()
    return get_settings().NUMERIC


def resolve_fps(
    requested_fps: int | None, chart_cfg: Mapping[str, Any] | None = None
) -> int:
    """再描画レートを解決して 1 以上の int を返す。"""
    if requested_fps is not None:
        try:
            return max(1, int(requested_fps))
        except (TypeError, ValueError):
            return DEFAULT_FPS
    try:
        return max(1, int((chart_cfg or {}).get("fps", DEFAULT_FPS)))
    except (TypeError, ValueError):
        return DEFAULT_FPS


__all__ = ["resolve_canvas_size", "resolve_task_weight", "resolve_numeric", "resolve_fps"]
