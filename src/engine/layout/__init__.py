"""
どこで: `engine.layout` サブパッケージ。
何を: スケジュール → 配置済み矩形のレイアウトエンジン（extent/units/builder/pipeline）。
なぜ: 描画（pyglet/matplotlib）から独立した純関数群として、計算だけを検証可能にするため。
"""

from .builder import build_rectangles
from .extent import compute_extents, compute_lane_profile, compute_max_time
from .pipeline import compute_layout
from .types import (
    UNUSED,
    AxisUnits,
    Extents,
    LaneProfile,
    Layout,
    PlacedRect,
    RectKind,
    Unused,
    Used,
)
from .units import resolve_units

__all__ = [
    "compute_layout",
    "compute_extents",
    "compute_lane_profile",
    "compute_max_time",
    "resolve_units",
    "build_rectangles",
    "AxisUnits",
    "Extents",
    "LaneProfile",
    "Layout",
    "PlacedRect",
    "RectKind",
    "Used",
    "Unused",
    "UNUSED",
]
