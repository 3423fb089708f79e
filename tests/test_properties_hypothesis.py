import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import assume, given, settings, strategies as st  # type: ignore

from engine.core.schedule import Schedule, Task, Transmission
from engine.layout.pipeline import compute_layout
from engine.layout.types import RectKind

EPS = 1e-6


@st.composite
def _transmission(draw):
    begin = draw(st.integers(0, 40))
    return Transmission(begin, begin + draw(st.integers(0, 10)), draw(st.integers(0, 4)))


@st.composite
def _task(draw):
    begin = draw(st.integers(0, 40))
    return Task(
        lane=draw(st.integers(0, 4)),
        label=draw(st.text(min_size=0, max_size=3)),
        begin_at=begin,
        finish_at=begin + draw(st.integers(0, 10)),
        transmissions=tuple(draw(st.lists(_transmission(), max_size=3))),
    )


schedules = st.lists(_task(), min_size=1, max_size=8).map(Schedule)
weights = st.integers(1, 3)


def _layout(schedule, k):
    assume(max(t.end_of_activity for t in schedule) > 0)
    return compute_layout(schedule, 640, 480, task_weight=k)


@settings(max_examples=75, deadline=None)
@given(schedule=schedules, k=weights)
def test_rects_of_different_lanes_never_share_rows(schedule, k):
    layout = _layout(schedule, k)
    rects = layout.rects
    for i, a in enumerate(rects):
        for b in rects[i + 1 :]:
            if a.lane == b.lane:
                continue
            overlap = min(a.bottom, b.bottom) - max(a.y, b.y)
            assert overlap <= EPS


@settings(max_examples=75, deadline=None)
@given(schedule=schedules, k=weights)
def test_rows_partition_canvas_height(schedule, k):
    layout = _layout(schedule, k)
    assert layout.units.y_unit * layout.units.sum_rows == pytest.approx(480)
    assert max(r.bottom for r in layout.rects) <= 480 + EPS


@settings(max_examples=75, deadline=None)
@given(schedule=schedules, k=weights)
def test_transmissions_step_one_row_per_index(schedule, k):
    layout = _layout(schedule, k)
    yu = layout.units.y_unit
    by_task: dict[int, list] = {}
    for r in layout.rects:
        by_task.setdefault(r.task_index, []).append(r)
    for group in by_task.values():
        task, transmissions = group[0], group[1:]
        assert task.kind is RectKind.TASK
        expected = [task.y + (k + i) * yu for i in range(len(transmissions))]
        assert [r.y for r in transmissions] == pytest.approx(expected)


@settings(max_examples=50, deadline=None)
@given(schedule=schedules, k=weights)
def test_layout_is_idempotent(schedule, k):
    a = _layout(schedule, k)
    b = _layout(schedule, k)
    assert a.rects == b.rects
    assert a.separators == b.separators
    assert a.as_arrays().tobytes() == b.as_arrays().tobytes()
