"""
AutoAxis - Unit Tests for Settings and Logging Configuration
"""

import pytest
from loguru import logger
from pydantic import ValidationError

from config import get_settings, use_test_settings
from config.logging_config import LogContext, get_logger, log_execution_time, setup_logging
from config.settings import Settings
from core.exceptions import ConfigurationError


class TestSettings:
    """Tests for Settings"""

    def test_test_mode_enabled(self):
        """The test session runs in test mode"""
        assert get_settings().TEST_MODE is True

    def test_pad_fraction_is_fresh_list(self):
        """Callers may mutate the pad list without touching settings"""
        s = get_settings()
        pad = s.scale_pad_fraction
        pad[0] = 0.9
        assert s.scale_pad_fraction[0] == s.SCALE_PAD_LOW

    def test_log_level_normalised(self):
        """Levels are upper-cased"""
        assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_invalid_log_level(self):
        """Unknown levels are rejected"""
        with pytest.raises(ValidationError):
            Settings(LOG_LEVEL="chatty")

    def test_padding_must_leave_room(self):
        """Low + high padding below 1"""
        with pytest.raises(ValidationError):
            Settings(SCALE_PAD_LOW=0.6, SCALE_PAD_HIGH=0.5)

    def test_use_test_settings(self, test_settings):
        """Overrides apply to the global instance"""
        use_test_settings(SCALE_ZERO_TOLERANCE=0.25)
        assert get_settings().SCALE_ZERO_TOLERANCE == 0.25

    def test_use_test_settings_unknown_key(self):
        """Unknown keys are a configuration error"""
        with pytest.raises(ConfigurationError) as info:
            use_test_settings(NOT_A_SETTING=1)
        assert "NOT_A_SETTING" in info.value.message


class TestLogging:
    """Tests for logging setup"""

    def test_setup_is_idempotent(self):
        """Repeated setup does not fail"""
        setup_logging(log_level="WARNING")
        setup_logging(log_level="WARNING")

    def test_get_logger_binds(self):
        """Bound loggers log without error"""
        get_logger("tests", run="unit").debug("hello")

    def test_log_context_binds_column(self):
        """Records inside the block carry the bound fields"""
        seen = []
        sink = logger.add(lambda m: seen.append(m.record["extra"]), level="DEBUG")
        try:
            with LogContext(column="price"):
                logger.debug("inside")
            logger.debug("outside")
        finally:
            logger.remove(sink)
        assert seen[0]["column"] == "price"
        assert "column" not in seen[1]

    def test_log_execution_time_reraises(self):
        """Timed failures propagate"""
        @log_execution_time
        def fail():
            raise ValueError("nope")

        with pytest.raises(ValueError):
            fail()
