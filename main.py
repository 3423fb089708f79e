from __future__ import annotations

from api import Schedule, Task, Transmission, run
from common.logging import setup_default_logging

# レーン 0: 2 タスク, レーン 1: 2 本送信するタスク, レーン 2: 1 本送信するタスク
SCHEDULE = Schedule(
    [
        Task(0, "load", 0, 2),
        Task(0, "store", 5, 7),
        Task(1, "fft", 1, 3, (Transmission(3, 4, 0), Transmission(3, 4.5, 2))),
        Task(2, "reduce", 4.5, 6, (Transmission(6, 7.5, 0),)),
    ]
)


if __name__ == "__main__":
    setup_default_logging("INFO")
    run(SCHEDULE, canvas_size=(800, 480), task_weight=2)
