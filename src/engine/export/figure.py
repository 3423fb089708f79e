"""
どこで: `engine.export.figure`。
何を: `Layout` を matplotlib（Agg）で PNG に描き出すヘッドレス描画シンク。
なぜ: ウィンドウを開けない環境（CI/サーバ）でも同じ矩形配置の図を得られるようにするため。

座標は左上原点のまま扱い、y 軸を反転して描く（pyglet 版と同じ見た目になる）。
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

import matplotlib

matplotlib.use("Agg", force=True)
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.patches import Rectangle  # noqa: E402

from engine.layout.types import Layout, RectKind  # noqa: E402
from engine.render.types import ChartStyle  # noqa: E402
from util.paths import ensure_charts_dir, unique_path  # noqa: E402

logger = logging.getLogger(__name__)


def render_figure(layout: Layout, style: ChartStyle | None = None, *, dpi: int = 100):
    """`Layout` を描いた matplotlib Figure を返す（保存/クローズは呼び出し側）。"""
    st = style or ChartStyle()
    width, height = layout.canvas
    fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    # 余白なしでキャンバス全面を使う
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_axis_off()
    fig.patch.set_facecolor(st.background)

    fill_alpha = max(0, min(255, int(st.task_fill_alpha))) / 255.0
    for rect in layout.rects:
        is_task = rect.kind is RectKind.TASK
        ax.add_patch(
            Rectangle(
                (rect.x, rect.y),
                rect.width,
                rect.height,
                facecolor=(*st.line_color[:3], fill_alpha) if is_task else "none",
                edgecolor=st.line_color,
                linewidth=st.line_thickness,
            )
        )
        if st.show_labels and rect.label:
            ax.text(
                rect.x + 2,
                rect.y + rect.height / 2,
                rect.label,
                color=st.line_color,
                fontsize=st.font_size,
                va="center",
                ha="left",
                clip_on=True,
            )
    if st.show_separators:
        for sep in layout.separators:
            ax.axhline(sep, color=st.line_color, linewidth=st.line_thickness)
    return fig


def save_chart_png(
    layout: Layout,
    path: Path | str | None = None,
    *,
    style: ChartStyle | None = None,
    dpi: int = 100,
) -> Path:
    """`Layout` を PNG に保存してパスを返す。

    `path` が None の場合は `data/charts/` にタイムスタンプ名（重複時は連番）で保存する。
    """
    if path is None:
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        w, h = (int(round(v)) for v in layout.canvas)
        out = unique_path(ensure_charts_dir() / f"{ts}_{w}x{h}.png")
    else:
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)

    fig = render_figure(layout, style, dpi=dpi)
    try:
        fig.savefig(out, dpi=dpi, facecolor=fig.get_facecolor())
    finally:
        plt.close(fig)
    logger.info("saved chart PNG: %s", out)
    return out


__all__ = ["render_figure", "save_chart_png"]
