import logging

import pytest

from tlsfindings.base.config import (
    DEFAULT_PROTOCOLS,
    LogConfig,
    TlsFindingsConfig,
    get_config,
    parse_protocols,
    set_config,
    setup_logging,
)
from tlsfindings.errors import ErrorCode, ReportError
from tlsfindings.reporting.types import ReportMode


def test_defaults_from_empty_environment():
    cfg = TlsFindingsConfig.from_env()
    assert cfg.report.mode is ReportMode.CONSOLIDATED
    assert cfg.report.protocols == DEFAULT_PROTOCOLS
    assert cfg.report.column_width == 24
    assert cfg.log.level == "WARNING"
    assert cfg.log.file_enabled is False
    assert cfg.debug is False


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("TLSFINDINGS_REPORT_MODE", "Grouped")
    monkeypatch.setenv("TLSFINDINGS_PROTOCOLS", "TLSv1.0, TLSv1.1,,TLSv1.0")
    monkeypatch.setenv("TLSFINDINGS_COLUMN_WIDTH", "30")
    monkeypatch.setenv("TLSFINDINGS_LOG_LEVEL", "info")
    monkeypatch.setenv("TLSFINDINGS_LOG_FILE", str(tmp_path / "logs" / "tlsfindings.log"))

    cfg = TlsFindingsConfig.from_env()
    assert cfg.report.mode is ReportMode.GROUPED
    assert cfg.report.protocols == ("TLSv1.0", "TLSv1.1")
    assert cfg.report.column_width == 30
    assert cfg.log.level == "INFO"
    assert cfg.log.file_enabled is True


def test_debug_raises_default_log_level(monkeypatch):
    monkeypatch.setenv("TLSFINDINGS_DEBUG", "true")
    assert TlsFindingsConfig.from_env().log.level == "DEBUG"


@pytest.mark.parametrize(
    "name, value",
    [
        ("TLSFINDINGS_REPORT_MODE", "fancy"),
        ("TLSFINDINGS_COLUMN_WIDTH", "0"),
        ("TLSFINDINGS_COLUMN_WIDTH", "wide"),
        ("TLSFINDINGS_LOG_LEVEL", "CHATTY"),
    ],
)
def test_invalid_values_raise_config_error(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ReportError) as exc:
        TlsFindingsConfig.from_env()
    assert exc.value.code is ErrorCode.CONFIG_INVALID
    assert exc.value.exit_code == 3


def test_parse_protocols_keeps_order():
    assert parse_protocols("SSLv3,SSLv2") == ("SSLv3", "SSLv2")
    assert parse_protocols("") == ()


def test_singleton_accessors():
    custom = TlsFindingsConfig(debug=True)
    set_config(custom)
    assert get_config() is custom
    set_config(None)
    assert get_config() is not custom


def test_setup_logging_with_file(tmp_path):
    log_file = tmp_path / "out" / "run.log"
    cfg = TlsFindingsConfig(log=LogConfig(level="INFO", file_enabled=True, file_path=log_file))
    setup_logging(cfg)
    try:
        logging.getLogger("tlsfindings.test").info("hello from test")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello from test" in log_file.read_text()
    finally:
        for handler in list(logging.getLogger().handlers):
            handler.close()
        logging.basicConfig(force=True)
