import logging

import pytest

from features.habits import HabitStore


def counter_ids(prefix="h"):
    n = 0

    def make():
        nonlocal n
        n += 1
        return f"{prefix}{n}"

    return make


@pytest.fixture(autouse=True)
def restore_root_logger():
    # app.py attaches a handler to the root logger whenever AppTest runs it
    root = logging.getLogger()
    ours = [h for h in root.handlers if getattr(h, "_habits_handler", False)]
    level = root.level
    yield root
    for h in list(root.handlers):
        if getattr(h, "_habits_handler", False) and h not in ours:
            root.removeHandler(h)
    for h in ours:
        root.addHandler(h)
    root.setLevel(level)


@pytest.fixture
def store():
    return HabitStore.seeded(id_factory=counter_ids())


@pytest.fixture
def empty_store():
    return HabitStore(id_factory=counter_ids())
