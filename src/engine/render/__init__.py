"""
どこで: `engine.render` サブパッケージ。
何を: `Layout` の矩形/ラベル/区切り線を pyglet で描く描画シンク。
なぜ: レイアウト計算と GUI 依存を分離し、描画側はレイアウト結果を読むだけにするため。
"""
