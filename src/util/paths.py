"""
どこで: `util.paths`。
何を: チャート画像の保存先ディレクトリの生成と、重複しないファイル名の解決。
なぜ: CLI/ランナーから簡潔に保存先を扱え、並行呼び出しでも安全に作成できるようにするため。
"""

from __future__ import annotations

from pathlib import Path

from .utils import _find_project_root


def ensure_charts_dir() -> Path:
    """チャート出力先 `data/charts/` を作成して返す。

    - プロジェクトルート直下に `data/charts` を作成する。
    - 既存の場合もそのまま Path を返す。
    - 並行呼び出しに対して `exist_ok=True` で安全。
    """
    root = _find_project_root(Path(__file__).parent)
    out = root / "data" / "charts"
    out.mkdir(parents=True, exist_ok=True)
    return out


def unique_path(path: Path) -> Path:
    """`path` が既存なら `stem-1.ext`, `stem-2.ext`, ... の空き名を返す。"""
    if not path.exists():
        return path
    stem = path.stem
    suffix = path.suffix
    parent = path.parent
    i = 1
    while True:
        cand = parent / f"{stem}-{i}{suffix}"
        if not cand.exists():
            return cand
        i += 1
