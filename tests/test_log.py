import logging

import pytest
from sts_evaluation.log import PACKAGE_LOGGER, setup_logging


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestSetupLogging:
    def test_configures_package_logger_only(self):
        root_handlers = list(logging.getLogger().handlers)

        setup_logging("debug")
        setup_logging("warning")

        logger = logging.getLogger(PACKAGE_LOGGER)
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
        assert logging.getLogger().handlers == root_handlers

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("chatty")
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO
