import logging

import pytest

from reqline.shared.logging import ACCESS_LOGGER, setup_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    access = logging.getLogger(ACCESS_LOGGER)
    saved = (root.level, root.handlers[:], access.level)
    yield
    root.setLevel(saved[0])
    root.handlers[:] = saved[1]
    access.setLevel(saved[2])


def test_access_log_follows_root_level(restore_logging):
    setup_logging("debug")

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger(ACCESS_LOGGER).level == logging.DEBUG


def test_access_log_level_can_differ(restore_logging):
    setup_logging(logging.INFO, access_level="warning")

    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger(ACCESS_LOGGER).level == logging.WARNING
