"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- configure_logging function
- Test logging suppression in test environment
- Renderer selection outside the test environment
"""

import logging

import pytest
import structlog

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
    _is_test_environment,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_logging_returns_bound_logger(self, mock_settings):
        result = configure_logging(mock_settings)

        assert hasattr(result, "info")
        assert hasattr(result, "warning")
        assert hasattr(result, "error")

    def test_configure_logging_accepts_overrides(self, mock_settings):
        assert configure_logging(mock_settings, log_level="DEBUG") is not None
        assert configure_logging(mock_settings, is_production=True) is not None

    def test_configure_logging_suppresses_in_test_env(self, mock_settings):
        """In test environment, root logger level is set high to suppress output."""
        configure_logging(mock_settings)

        assert logging.getLogger().level > logging.CRITICAL

    def test_logging_methods_dont_raise(self, mock_settings):
        configure_logging(mock_settings)
        log = structlog.get_logger().bind(component="test")

        log.debug("debug message", extra="data")
        log.info("info message", key="value")
        log.warning("warning message")
        log.error("error message", error_code="E001")

        try:
            raise ValueError("test error")
        except ValueError:
            log.exception("an_error_occurred")


@pytest.mark.unit
class TestConfigureLoggingPipeline:
    """Processor pipeline built outside the test environment."""

    def test_development_uses_console_renderer(
        self, mock_settings, outside_test_environment
    ):
        configure_logging(mock_settings, is_production=False)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_production_uses_json_renderer(
        self, mock_settings, outside_test_environment
    ):
        configure_logging(mock_settings, is_production=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_production_mode_defaults_to_settings(
        self, mock_settings, outside_test_environment
    ):
        mock_settings.is_production = True

        configure_logging(mock_settings)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_pipeline_stamps_app_and_environment(
        self, mock_settings, outside_test_environment
    ):
        configure_logging(mock_settings, is_production=True)

        event_dict = {"event": "notification_delivered"}
        for processor in structlog.get_config()["processors"][:-1]:
            if getattr(processor, "__name__", "") == "processor":
                event_dict = processor(None, "info", event_dict)

        assert event_dict["app_name"] == "notifier"
        assert event_dict["app_version"] == "abc123"
        assert event_dict["environment"] == "dev-"


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger."""

    def test_binds_calling_module(self, mock_settings):
        configure_logging(mock_settings)

        log = get_module_logger()

        assert log._context["module_path"] == __name__
        assert log._context["component"] == __name__.split(".")[-1]

    def test_bound_logger_can_log(self, mock_settings):
        configure_logging(mock_settings)

        get_module_logger().info("module_logger_used", handler="sms")
