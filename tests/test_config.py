"""
Tests for configuration parsing and logging setup
"""
import logging

import pytest

from upc_checker.core import config
from upc_checker.core.exceptions import CheckDigitOverflowError, UPCCodeOverflowError
from upc_checker.core.logging_config import PACKAGE_LOGGER, log_structured_event, setup_logging


class TestConfigParsing:
    @pytest.mark.parametrize("value", ["1", "true", "TRUE", " yes ", "on"])
    def test_truthy(self, value):
        assert config.parse_bool(value) is True

    @pytest.mark.parametrize("value", [None, "", "0", "false", "no", "off"])
    def test_falsy(self, value):
        assert config.parse_bool(value) is False

    def test_log_level_names(self):
        assert config.parse_log_level("DEBUG") == logging.DEBUG
        assert config.parse_log_level("warning") == logging.WARNING
        assert config.parse_log_level("10") == 10

    def test_log_level_default(self):
        assert config.parse_log_level(None) == logging.INFO
        assert config.parse_log_level("") == logging.INFO
        assert config.parse_log_level("loud", default=logging.ERROR) == logging.ERROR

    def test_project_name(self):
        assert config.PROJECT_NAME == "UPC Checker"


class TestLoggingSetup:
    def test_console_only(self):
        assert setup_logging(level=logging.DEBUG, log_to_file=False) is None

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1

    def test_file_logging(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config, "LOG_DIR", tmp_path / "logs")

        log_file = setup_logging(level=logging.INFO, log_to_file=True)

        assert log_file is not None
        assert log_file.parent == tmp_path / "logs"
        assert log_file.exists()

    def test_setup_is_idempotent(self):
        setup_logging(log_to_file=False)
        setup_logging(log_to_file=False)
        assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == 1

    def test_structured_event(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="upc_checker.test"):
            log_structured_event("upc_checker.test", "checked", {"valid": True}, level="ERROR")

        assert caplog.records[-1].levelno == logging.ERROR
        assert "EVENT: checked" in caplog.records[-1].getMessage()
        assert "'valid': True" in caplog.records[-1].getMessage()


class TestErrors:
    def test_overflow_to_dict(self):
        error = UPCCodeOverflowError(12, 6)
        assert error.to_dict() == {
            "error_code": "upc_code_overflow",
            "message": error.message,
            "value": 12,
            "position": 6,
        }

    def test_check_digit_to_dict(self):
        error = CheckDigitOverflowError(70)
        assert error.to_dict()["error_code"] == "check_digit_overflow"
        assert error.to_dict()["position"] is None
        assert str(error) == error.message
