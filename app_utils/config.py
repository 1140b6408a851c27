import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
FALSEY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    page_title: str = "Habit Tracker"
    log_level: str = "INFO"
    seed: bool = True


def load_settings(env=None) -> Settings:
    """Read HABITS_* variables; pass `env` to bypass the process environment."""
    if env is None:
        load_dotenv()
        env = os.environ

    level = env.get("HABITS_LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"

    return Settings(
        page_title=env.get("HABITS_PAGE_TITLE", "Habit Tracker"),
        log_level=level,
        seed=env.get("HABITS_SEED", "true").strip().lower() not in FALSEY,
    )


def configure_logging(level="INFO"):
    # Streamlit re-executes the script on every interaction; attach the handler once
    root = logging.getLogger()
    if not any(getattr(h, "_habits_handler", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._habits_handler = True
        root.addHandler(handler)
    root.setLevel(level)
