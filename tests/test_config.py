import logging

import pytest

from app_utils.config import Settings, configure_logging, load_settings


def test_defaults():
    assert load_settings({}) == Settings(page_title="Habit Tracker", log_level="INFO", seed=True)


@pytest.mark.parametrize("value", ["0", "false", "No", " off "])
def test_seed_can_be_disabled(value):
    assert load_settings({"HABITS_SEED": value}).seed is False


def test_overrides():
    s = load_settings({"HABITS_PAGE_TITLE": "My day", "HABITS_LOG_LEVEL": "debug", "HABITS_SEED": "yes"})
    assert s == Settings(page_title="My day", log_level="DEBUG", seed=True)


def test_unknown_log_level_falls_back_to_info():
    assert load_settings({"HABITS_LOG_LEVEL": "chatty"}).log_level == "INFO"


def test_configure_logging_adds_one_handler(restore_root_logger):
    root = restore_root_logger
    root.handlers[:] = [h for h in root.handlers if not getattr(h, "_habits_handler", False)]
    before = len(root.handlers)

    configure_logging("DEBUG")
    configure_logging("WARNING")

    assert len(root.handlers) == before + 1
    assert root.level == logging.WARNING


def test_configure_logging_keeps_existing_handler(restore_root_logger):
    configure_logging("INFO")
    count = len(restore_root_logger.handlers)

    configure_logging("INFO")

    assert len(restore_root_logger.handlers) == count
