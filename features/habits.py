import logging
import math
import re
import uuid
from dataclasses import dataclass, replace

import numpy as np

logger = logging.getLogger(__name__)

# whitespace plus the byte order mark, which str.strip() keeps
_EDGE_BLANKS = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")

# Fresh sessions start from these (id, name, completed).
DEFAULT_HABITS = [
    ("morning-water", "Drink a glass of water", True),
    ("stretching", "Stretch for 5 minutes", False),
]


@dataclass(frozen=True)
class Habit:
    id: str
    name: str
    completed: bool = False


@dataclass(frozen=True)
class Progress:
    completed: int
    total: int
    progress: float
    percent: int

    @property
    def label(self) -> str:
        return f"{self.completed}/{self.total} habits completed"


def clamp01(x): return float(np.clip(x, 0.0, 1.0))


def round_half_up(x: float) -> int:
    # round() is banker's rounding; the banner wants 0.5 -> 1
    return int(math.floor(x + 0.5))


def progress_of(habits) -> Progress:
    """Completion metric for a sequence of habits; 0 for an empty list."""
    total = len(habits)
    done = sum(1 for h in habits if h.completed)
    ratio = clamp01(done / total) if total else 0.0
    return Progress(completed=done, total=total, progress=ratio, percent=round_half_up(ratio * 100))


def new_habit_id() -> str:
    return str(uuid.uuid4())


class HabitStore:
    """
    Ordered, in-memory habit list for one session.

    Newest habits come first. Every mutation that changes something notifies
    subscribers with the new snapshot; blank names and unknown ids are no-ops.
    """

    def __init__(self, habits=(), id_factory=new_habit_id):
        self._habits: list[Habit] = []
        self._issued: set[str] = set()
        self._listeners = []
        self._id_factory = id_factory
        for h in habits:
            if h.id in self._issued:
                logger.debug("Skipping duplicate seed habit id=%s", h.id)
                continue
            self._issued.add(h.id)
            self._habits.append(h)

    @classmethod
    def seeded(cls, id_factory=new_habit_id) -> "HabitStore":
        return cls(
            [Habit(id=hid, name=name, completed=done) for hid, name, done in DEFAULT_HABITS],
            id_factory=id_factory,
        )

    # ---- reads ----
    @property
    def habits(self) -> tuple:
        return tuple(self._habits)

    def get(self, habit_id: str):
        for h in self._habits:
            if h.id == habit_id:
                return h
        return None

    def summary(self) -> Progress:
        return progress_of(self._habits)

    def __len__(self):
        return len(self._habits)

    def __iter__(self):
        return iter(self.habits)

    def __contains__(self, habit_id):
        return self.get(habit_id) is not None

    # ---- mutations ----
    def add(self, raw_name: str):
        name = _EDGE_BLANKS.sub("", raw_name or "")
        if not name:
            logger.debug("Ignoring blank habit name %r", raw_name)
            return None

        habit = Habit(id=self._fresh_id(), name=name)
        self._habits.insert(0, habit)
        logger.info("Added habit id=%s name=%r", habit.id, habit.name)
        self._notify()
        return habit

    def toggle(self, habit_id: str):
        idx = self._index(habit_id)
        if idx is None:
            logger.debug("toggle: no habit with id=%s", habit_id)
            return None

        habit = replace(self._habits[idx], completed=not self._habits[idx].completed)
        self._habits[idx] = habit
        logger.info("Toggled habit id=%s completed=%s", habit.id, habit.completed)
        self._notify()
        return habit

    def remove(self, habit_id: str):
        idx = self._index(habit_id)
        if idx is None:
            logger.debug("remove: no habit with id=%s", habit_id)
            return None

        habit = self._habits.pop(idx)
        logger.info("Removed habit id=%s", habit.id)
        self._notify()
        return habit

    def reset_all(self) -> int:
        changed = 0
        for i, h in enumerate(self._habits):
            if h.completed:
                self._habits[i] = replace(h, completed=False)
                changed += 1

        if changed:
            logger.info("Reset %d completed habit(s)", changed)
            self._notify()
        return changed

    # ---- subscriptions ----
    def subscribe(self, listener):
        """Call `listener(habits)` after each change. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self):
        snapshot = self.habits
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Habit listener %r failed", listener)

    def _index(self, habit_id):
        for i, h in enumerate(self._habits):
            if h.id == habit_id:
                return i
        return None

    def _fresh_id(self) -> str:
        hid = self._id_factory()
        while hid in self._issued:
            logger.debug("Regenerating already issued habit id=%s", hid)
            hid = self._id_factory()
        self._issued.add(hid)
        return hid
