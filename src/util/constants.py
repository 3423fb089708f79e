"""
どこで: `util.constants`。
何を: キャンバスのプリセット寸法 [px] と既定値。
なぜ: ランナー/CLI/エクスポートで同じ既定を参照するため。
"""

CANVAS_SIZES: dict[str, tuple[int, int]] = {
    "VGA": (640, 480),
    "SVGA": (800, 600),
    "XGA": (1024, 768),
    "HD": (1280, 720),
    "FHD": (1920, 1080),
}

DEFAULT_CANVAS_SIZE = CANVAS_SIZES["VGA"]
DEFAULT_FPS = 30
