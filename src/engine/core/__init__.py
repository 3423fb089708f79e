"""
どこで: `engine.core` サブパッケージ。
何を: スケジュールモデル・例外階層・描画ウィンドウを提供。
なぜ: レイアウト計算と描画の基盤を構成し、上位層（layout/render/api）から再利用可能にするため。
"""
