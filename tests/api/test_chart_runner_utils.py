from __future__ import annotations

import pytest

from api.chart_runner.utils import (
    resolve_canvas_size,
    resolve_fps,
    resolve_numeric,
    resolve_task_weight,
)


def test_resolve_canvas_size_presets_tuples_and_config() -> None:
    assert resolve_canvas_size("hd") == (1280, 720)
    assert resolve_canvas_size((320, 200)) == (320, 200)
    assert resolve_canvas_size(None, {"width": 100, "height": 50}) == (100, 50)
    assert resolve_canvas_size(None, {}) == (640, 480)


@pytest.mark.parametrize("bad", ["A4", (0, 10), ("w", 10), (1,)])
def test_resolve_canvas_size_invalid(bad) -> None:
    with pytest.raises(ValueError):
        resolve_canvas_size(bad)


def test_resolve_task_weight_precedence(clean_settings) -> None:
    assert resolve_task_weight(2, {"task_weight": 3}) == 2
    assert resolve_task_weight(None, {"task_weight": 3}) == 3
    assert resolve_task_weight(None, {"task_weight": "x"}) == 1
    with pytest.raises(ValueError):
        resolve_task_weight(0)


@pytest.mark.parametrize("value", [1.5, True, "2"])
def test_resolve_task_weight_rejects_non_integer_explicit_value(value) -> None:
    with pytest.raises(ValueError):
        resolve_task_weight(value)


def test_resolve_numeric_precedence(clean_settings) -> None:
    assert resolve_numeric("INT") == "int"
    assert resolve_numeric(None, {"numeric": "int"}) == "int"
    assert resolve_numeric(None, {"numeric": "bogus"}) == "float"
    with pytest.raises(ValueError):
        resolve_numeric("double")


def test_resolve_fps() -> None:
    assert resolve_fps(0) == 1
    assert resolve_fps(None, {"fps": 12}) == 12
    assert resolve_fps(None, {}) == 30
