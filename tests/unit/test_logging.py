"""Tests for logging helpers."""
import logging
from contextlib import contextmanager

import conduitpy
from conduitpy.core.logging import get_logger


@contextmanager
def bare_root():
    """Temporarily remove root handlers (pytest installs its own per phase)."""
    root = logging.getLogger()
    saved = root.handlers[:]
    root.handlers.clear()
    try:
        yield root
    finally:
        root.handlers[:] = saved


class TestGetLogger:
    """Test suite for get_logger."""

    def test_returns_named_logger(self):
        """Test the logger carries the requested name."""
        assert get_logger('conduitpy.test').name == 'conduitpy.test'

    def test_short_name_under_package(self):
        """Test short names land in the package namespace."""
        assert get_logger('request') is logging.getLogger('conduitpy.request')
        assert get_logger('request') is get_logger('conduitpy.request')

    def test_package_name_unchanged(self):
        """Test the package logger and look-alike prefixes are handled."""
        assert get_logger('conduitpy').name == 'conduitpy'
        assert get_logger('conduitpyx').name == 'conduitpy.conduitpyx'

    def test_explicit_level_kept_without_root_handlers(self):
        """Test a level set by setup_logging is not overridden."""
        logging.getLogger('conduitpy.test.preset').setLevel(logging.DEBUG)

        with bare_root():
            logger = get_logger('test.preset')

        assert logger.level == logging.DEBUG

    def test_propagates(self):
        """Test the logger propagates to the root logger."""
        assert get_logger('conduitpy.test').propagate is True

    def test_defaults_to_warning_without_root_handlers(self):
        """Test quiet default when logging is not configured."""
        with bare_root():
            logger = get_logger('conduitpy.test.quiet')

        assert logger.level == logging.WARNING

    def test_level_untouched_with_root_handlers(self):
        """Test level is inherited once the root logger is configured."""
        logging.getLogger('conduitpy.test.configured').setLevel(logging.NOTSET)

        with bare_root() as root:
            root.addHandler(logging.NullHandler())
            logger = get_logger('conduitpy.test.configured')

        assert logger.level == logging.NOTSET


class TestSetupLogging:
    """Test suite for setup_logging."""

    def test_sets_package_levels(self):
        """Test every package logger receives the level."""
        conduitpy.setup_logging(logging.DEBUG)
        try:
            for name in ('conduitpy', 'conduitpy.request', 'conduitpy.dispatch'):
                assert logging.getLogger(name).level == logging.DEBUG
        finally:
            conduitpy.setup_logging(logging.WARNING)
