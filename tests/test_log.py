"""Tests for logging helpers."""

import logging
from musicmanager.utils import log


def test_get_logger_returns_module_logger():
    """Test that module loggers are plain children of the package logger."""
    first = log.get_logger("musicmanager.tests.cached")
    second = log.get_logger("musicmanager.tests.cached")

    assert first is second
    assert first.handlers == []
    assert first.parent is logging.getLogger(log.PACKAGE_LOGGER)


def test_package_logger_has_one_handler():
    """Test that repeated lookups do not stack handlers."""
    log.get_logger("musicmanager.tests.a")
    log.get_logger("musicmanager.tests.b")

    assert len(logging.getLogger(log.PACKAGE_LOGGER).handlers) == 1


def test_set_log_level_single_logger():
    """Test changing the level of one logger."""
    logger = log.get_logger("musicmanager.tests.single")
    try:
        log.set_log_level(logging.DEBUG, "musicmanager.tests.single")

        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(logging.NOTSET)


def test_set_log_level_all_loggers():
    """Test that the package level applies to existing and new module loggers."""
    package_logger = logging.getLogger(log.PACKAGE_LOGGER)
    previous = package_logger.level
    existing = log.get_logger("musicmanager.tests.existing")
    try:
        log.set_log_level(logging.INFO)
        created = log.get_logger("musicmanager.tests.created")

        assert existing.getEffectiveLevel() == logging.INFO
        assert created.getEffectiveLevel() == logging.INFO
    finally:
        package_logger.setLevel(previous)
