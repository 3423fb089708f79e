"""
どこで: `api.chart_runner`。
何を: `api.chart.run_chart` の設定解決/描画初期化ヘルパ群。
なぜ: ランナー本体を薄く保ち、pyglet 無しで検証できる部分を分離するため。
"""
