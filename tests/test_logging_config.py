import logging
import os

import pytest

from sales_dashboard.utils.logging_config import get_logger, log_file_path, resolve_log_level


@pytest.mark.parametrize("level, expected", [
    (None, logging.INFO),
    (logging.DEBUG, logging.DEBUG),
    ("debug", logging.DEBUG),
    (" Warning ", logging.WARNING),
])
def test_resolve_log_level(level, expected) -> None:
    assert resolve_log_level(level) == expected


def test_unknown_level_name_is_rejected() -> None:
    with pytest.raises(ValueError):
        resolve_log_level("chatty")


def test_log_file_is_timestamped_in_log_dir(tmp_path) -> None:
    path = log_file_path(str(tmp_path))

    assert os.path.dirname(path) == str(tmp_path)
    assert os.path.basename(path).startswith("sales_dashboard_")
    assert path.endswith(".log")


def test_get_logger_configures_root_handlers() -> None:
    logger = get_logger("sales_dashboard.tests")

    assert logger.name == "sales_dashboard.tests"
    assert logging.getLogger().handlers
