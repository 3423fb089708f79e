from __future__ import annotations

import logging

import pytest

import common.logging as lch_logging


@pytest.fixture()
def basic_config_calls(monkeypatch: pytest.MonkeyPatch) -> list[dict]:
    calls: list[dict] = []
    monkeypatch.setattr(lch_logging.logging, "basicConfig", lambda **kw: calls.append(kw))
    return calls


@pytest.mark.parametrize(
    "level, expected",
    [
        ("debug", logging.DEBUG),
        ("WARNING", logging.WARNING),
        ("bogus", logging.INFO),
        ("basic_format", logging.INFO),
        (logging.ERROR, logging.ERROR),
    ],
)
def test_level_names_resolve(monkeypatch, basic_config_calls, level, expected) -> None:
    # pytest のキャプチャ用ハンドラを外して未設定状態を作る
    monkeypatch.setattr(logging.getLogger(), "handlers", [])
    lch_logging.setup_default_logging(level)
    assert len(basic_config_calls) == 1
    assert basic_config_calls[0]["level"] == expected


def test_noop_when_root_already_configured(monkeypatch, basic_config_calls) -> None:
    monkeypatch.setattr(logging.getLogger(), "handlers", [logging.NullHandler()])
    lch_logging.setup_default_logging("DEBUG")
    assert basic_config_calls == []
