"""
どこで: `common.settings`
何を: レイアウトエンジンの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_choice, env_int

NUMERIC_MODES = ("float", "int")


@dataclass
class _Settings:
    # タスクバーの見た目の高さ（送信 1 行ぶんを 1 とした行数, K）
    TASK_WEIGHT: int = 1
    # 単位計算の数値表現（"float" | "int"）
    NUMERIC: str = "float"

    # Misc
    DEBUG_LAYOUT: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - `LCH_TASK_WEIGHT` は 1 未満を 1 に丸める。
    - `LCH_NUMERIC` は候補外なら "float"。
    """
    _settings.TASK_WEIGHT = env_int("LCH_TASK_WEIGHT", 1, min_value=1) or 1
    _settings.NUMERIC = env_choice("LCH_NUMERIC", NUMERIC_MODES, "float")
    _settings.DEBUG_LAYOUT = env_bool("LCH_DEBUG_LAYOUT", False)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings", "NUMERIC_MODES"]
