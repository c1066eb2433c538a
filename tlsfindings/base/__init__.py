from tlsfindings.base.config import (
    DEFAULT_PROTOCOLS,
    LogConfig,
    ReportConfig,
    TlsFindingsConfig,
    get_config,
    set_config,
    setup_logging,
)

__all__ = [
    "DEFAULT_PROTOCOLS",
    "LogConfig",
    "ReportConfig",
    "TlsFindingsConfig",
    "get_config",
    "set_config",
    "setup_logging",
]
