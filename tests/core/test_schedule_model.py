from __future__ import annotations

import pytest

from engine.core.errors import InvalidInterval
from engine.core.schedule import (
    Schedule,
    Task,
    Transmission,
    describe_schedule,
    sample_schedule,
    validate_schedule,
)


def test_task_str_without_transmissions() -> None:
    assert str(Task(1, "A", 0, 2)) == "Chunk(proc: 1, name: A, b: 0, f: 2, transmissions: none)"


def test_task_str_with_transmissions_keeps_order() -> None:
    t = Task(2, "C", 0, 1.5, (Transmission(1.5, 3, 1), Transmission(1.5, 3, 3)))
    assert str(t) == (
        "Chunk(proc: 2, name: C, b: 0, f: 1.5, transmissions:"
        " T(b: 1.5, f: 3, dest: 1) T(b: 1.5, f: 3, dest: 3))"
    )


def test_transmissions_list_is_normalized_to_tuple() -> None:
    t = Task(0, "x", 0, 1, [Transmission(1, 2, 0)])  # type: ignore[arg-type]
    assert isinstance(t.transmissions, tuple)
    assert t.transmissions[0].dest_lane == 0


@pytest.mark.parametrize("lane", [-1, 1.5, "1", True, None])
def test_non_index_lane_rejected(lane) -> None:
    with pytest.raises(ValueError):
        Task(lane, "x", 0, 1)
    with pytest.raises(ValueError):
        Transmission(0, 1, lane)


def test_integral_lane_normalized_to_int() -> None:
    np = pytest.importorskip("numpy")
    t = Task(np.int64(2), "x", 0, 1, (Transmission(0, 1, np.int32(1)),))
    assert type(t.lane) is int and t.lane == 2
    assert type(t.transmissions[0].dest_lane) is int


def test_end_of_activity_uses_last_listed_transmission() -> None:
    t = Task(0, "e", 0, 1, (Transmission(1, 10, 1), Transmission(2, 5, 1)))
    assert t.end_of_activity == 5
    assert Task(0, "f", 0, 3).end_of_activity == 3


def test_schedule_is_ordered_sequence_without_dedup() -> None:
    a = Task(0, "A", 0, 1)
    s = Schedule([a, a, Task(1, "B", 0, 1)])
    assert len(s) == 3
    assert s[0] is s[1]
    assert [t.label for t in s] == ["A", "A", "B"]
    assert isinstance(s[1:], Schedule)
    assert s.lanes == (0, 1)


def test_schedule_rejects_non_task() -> None:
    with pytest.raises(TypeError):
        Schedule([("not", "a", "task")])  # type: ignore[list-item]


def test_schedule_equality_and_hash() -> None:
    assert sample_schedule() == sample_schedule()
    assert hash(sample_schedule()) == hash(sample_schedule())


def test_from_records_builds_tasks_and_transmissions() -> None:
    s = Schedule.from_records(
        [
            {"lane": 1, "label": "A", "begin_at": 0, "finish_at": 2},
            {
                "lane": 2,
                "label": "C",
                "begin_at": 0,
                "finish_at": 1.5,
                "transmissions": [{"begin_at": 1.5, "finish_at": 3, "dest_lane": 1}],
            },
        ]
    )
    assert s[0] == Task(1, "A", 0, 2)
    assert s[1].transmissions == (Transmission(1.5, 3.0, 1),)


@pytest.mark.parametrize(
    "record",
    [
        {"label": "no-lane", "begin_at": 0, "finish_at": 1},
        {"lane": 0, "label": "bad-time", "begin_at": "soon", "finish_at": 1},
        {"lane": 0, "label": "bool-time", "begin_at": True, "finish_at": 1},
        {"lane": 0, "begin_at": 0, "finish_at": 1, "transmissions": [{"begin_at": 0}]},
        {"lane": 1.5, "label": "fractional-lane", "begin_at": 0, "finish_at": 1},
    ],
)
def test_from_records_invalid_raises_value_error(record) -> None:
    with pytest.raises(ValueError):
        Schedule.from_records([record])


def test_validate_schedule_reports_task_and_transmission() -> None:
    with pytest.raises(InvalidInterval) as ei:
        validate_schedule([Task(0, "bad", 3, 1)])
    assert ei.value.label == "bad"
    assert ei.value.transmission_index is None

    with pytest.raises(InvalidInterval) as ei2:
        validate_schedule([Task(0, "ok", 0, 1, (Transmission(1, 2, 0), Transmission(4, 2, 0)))])
    assert ei2.value.transmission_index == 1


def test_zero_duration_is_valid() -> None:
    validate_schedule([Task(0, "z", 2, 2, (Transmission(2, 2, 0),))])


def test_describe_sample_schedule() -> None:
    lines = describe_schedule(sample_schedule())
    assert len(lines) == 5
    assert lines[3] == "Chunk(proc: 3, name: D, b: 4, f: 5, transmissions: T(b: 5, f: 6, dest: 1))"
    assert lines[4] == "Chunk(proc: 1, name: E, b: 6, f: 7.5, transmissions: none)"
