import re

import pandas as pd

# characters Streamlit would treat as markdown inside a widget label
_MARKDOWN_CHARS = re.compile(r"([\\`*_{}\[\]()#+\-.!~|<>:$])")


def percent_label(progress):
    return f"{progress.percent}% complete"


def escape_markdown(text):
    return _MARKDOWN_CHARS.sub(r"\\\1", text)


def habit_label(habit):
    # names show as typed; only the completed strike-through is markdown
    name = escape_markdown(habit.name)
    return f"✅ ~~{name}~~" if habit.completed else f"⬜ {name}"


def progress_breakdown(progress) -> pd.DataFrame:
    # progress: features.habits.Progress; one row per status, always both rows
    return pd.DataFrame([
        {"status": "Completed", "count": progress.completed},
        {"status": "Remaining", "count": progress.total - progress.completed},
    ])


def habits_frame(habits) -> pd.DataFrame:
    if not habits:
        return pd.DataFrame(columns=["id", "name", "completed"])

    return pd.DataFrame([
        {"id": h.id, "name": h.name, "completed": h.completed}
        for h in habits
    ])
