import logging
import os

import pytest

from guide_engine.utils.logger import GuideLogger, set_debug, LOGGER_NAME, LOG_FILE


def _console_handlers():
    return [h for h in GuideLogger.get_logger().handlers if not isinstance(h, logging.FileHandler)]


def test_logger_is_a_singleton():
    logger = GuideLogger.get_logger()
    assert GuideLogger.get_logger() is logger
    with pytest.raises(Exception, match="singleton"):
        GuideLogger()


def test_set_debug_only_changes_console():
    try:
        set_debug(True)
        assert all(h.level == logging.DEBUG for h in _console_handlers())
    finally:
        set_debug(False)

    assert all(h.level == logging.INFO for h in _console_handlers())
    file_handlers = [h for h in GuideLogger.get_logger().handlers if isinstance(h, logging.FileHandler)]
    assert all(h.level == logging.DEBUG for h in file_handlers)


def test_logger_writes_console_and_debug_file():
    logger = GuideLogger.get_logger()
    assert logger.name == LOGGER_NAME
    assert logger.propagate is False

    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert os.path.basename(file_handlers[0].baseFilename) == LOG_FILE
    assert len(_console_handlers()) == 1
