"""
どこで: `util.color`。
何を: 色指定（Hex / RGB(A) 0–1 / 0–255）の正規化と、背景に対する線色の自動選択。
なぜ: 設定ファイル・CLI・描画シンク（pyglet は 0–255, matplotlib は 0–1）で同じ受理仕様を使うため。
"""

from __future__ import annotations

RGBA = tuple[float, float, float, float]


def parse_hex_color_str(s: str) -> RGBA:
    """"#RRGGBB" / "#RRGGBBAA"（`#` 省略可, 大文字/小文字不問）を RGBA(0–1) にする。"""
    t = s.strip().lstrip("#")
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or RRGGBBAA)")
    try:
        channels = [int(t[i : i + 2], 16) for i in range(0, len(t), 2)]
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    if len(channels) == 3:
        channels.append(255)
    r, g, b, a = (c / 255.0 for c in channels)
    return (r, g, b, a)


def normalize_color(value: object) -> RGBA:
    """色を RGBA(0–1) へ正規化する。

    - 受理: Hex 文字列, (r,g,b[,a]) （全要素 0–1 なら 0–1、それ以外は 0–255 とみなす）
    - 返値: (r,g,b,a) （0–1）
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    if not isinstance(value, (list, tuple)) or len(value) not in (3, 4):
        raise ValueError(f"unsupported color: {value!r}")
    try:
        vals = [float(v) for v in value]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if all(0.0 <= v <= 1.0 for v in vals):
        if len(vals) == 3:
            vals.append(1.0)
    else:
        if len(vals) == 3:
            vals.append(255.0)
        vals = [max(0.0, min(255.0, round(v))) / 255.0 for v in vals]
    r, g, b, a = vals
    return (r, g, b, a)


def to_u8_rgba(value: object) -> tuple[int, int, int, int]:
    """色を RGBA(0–255) へ変換する。"""
    r, g, b, a = normalize_color(value)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)), int(round(a * 255)))


def auto_line_color(background: object) -> RGBA:
    """背景の輝度に基づいて黒/白の線色を返す。"""
    r, g, b, _ = normalize_color(background)
    luminance = 0.2126 * r + 0.7152 * g + 0.0722 * b
    return (0.0, 0.0, 0.0, 1.0) if luminance >= 0.5 else (1.0, 1.0, 1.0, 1.0)


__all__ = ["parse_hex_color_str", "normalize_color", "to_u8_rgba", "auto_line_color"]
