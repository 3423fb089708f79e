"""
どこで: `engine.io` サブパッケージ。
何を: スケジュールの外部入力（YAML ファイル）を `Schedule` へ変換する。
なぜ: デモ用の固定データ以外のスケジュールも CLI/ランナーから描けるようにするため。
"""
