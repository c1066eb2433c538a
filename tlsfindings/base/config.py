# ============================================================================
# tlsfindings/base/config.py
# Application Configuration Management
# ============================================================================
#
# PURPOSE:
# Every tunable of the report tool lives here: log verbosity and
# destination, which report layout to produce, which protocol versions
# count as deprecated, and the column geometry of host listings.
#
# KEY CONCEPTS:
# 1. Frozen dataclasses: one immutable section per concern
# 2. Environment Variables: TLSFINDINGS_* overrides, read once
# 3. Singleton: get_config() / set_config() share one instance
#
# ============================================================================

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from tlsfindings.errors import ErrorCode, ReportError
from tlsfindings.reporting.types import ReportMode

logger = logging.getLogger(__name__)

DEFAULT_PROTOCOLS: Tuple[str, ...] = ("SSLv2", "SSLv3", "TLSv1.0", "TLSv1.1")


# ============================================================================
# Logging Configuration
# ============================================================================

@dataclass(frozen=True)
class LogConfig:
    # WARNING keeps stderr quiet so the report is the only visible output
    level: str = "WARNING"

    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    # File logging is opt-in: a CLI run should not leave files behind
    file_enabled: bool = False
    file_path: Optional[Path] = None

    # Rotation limits for the optional log file
    max_file_size_mb: int = 10
    backup_count: int = 5


# ============================================================================
# Report Configuration
# ============================================================================

@dataclass(frozen=True)
class ReportConfig:
    mode: ReportMode = ReportMode.CONSOLIDATED

    # Deprecated protocol names, in the order sections are emitted
    protocols: Tuple[str, ...] = DEFAULT_PROTOCOLS

    # Width of one host:port cell in multi-column listings
    column_width: int = 24

    # Length of the dashed rule under grouped-mode section headers
    section_rule_width: int = 40


# ============================================================================
# Master Configuration Container
# ============================================================================

@dataclass(frozen=True)
class TlsFindingsConfig:
    log: LogConfig = field(default_factory=LogConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    debug: bool = False

    @classmethod
    def from_env(cls) -> "TlsFindingsConfig":
        debug = os.getenv("TLSFINDINGS_DEBUG", "false").lower() == "true"

        log_file = os.getenv("TLSFINDINGS_LOG_FILE", "")
        log = LogConfig(
            level=os.getenv("TLSFINDINGS_LOG_LEVEL", "DEBUG" if debug else "WARNING").upper(),
            file_enabled=bool(log_file),
            file_path=Path(log_file) if log_file else None,
        )
        if not hasattr(logging, log.level) or not isinstance(getattr(logging, log.level), int):
            raise ReportError(
                ErrorCode.CONFIG_INVALID,
                f"Unknown log level {log.level!r}",
                details={"variable": "TLSFINDINGS_LOG_LEVEL"},
            )

        report = ReportConfig(
            mode=parse_mode(os.getenv("TLSFINDINGS_REPORT_MODE", ReportMode.CONSOLIDATED.value)),
            protocols=parse_protocols(os.getenv("TLSFINDINGS_PROTOCOLS", "")) or DEFAULT_PROTOCOLS,
            column_width=parse_positive_int(os.getenv("TLSFINDINGS_COLUMN_WIDTH", "24"), "TLSFINDINGS_COLUMN_WIDTH"),
        )

        return cls(log=log, report=report, debug=debug)


def parse_mode(raw: str) -> ReportMode:
    try:
        return ReportMode(raw.strip().lower())
    except ValueError:
        raise ReportError(
            ErrorCode.CONFIG_INVALID,
            f"Unknown report mode {raw!r}",
            details={"allowed": [m.value for m in ReportMode]},
        ) from None


def parse_protocols(raw: str) -> Tuple[str, ...]:
    """
    Split a comma separated protocol list, dropping blanks and duplicates
    while keeping the declared order.
    """
    names: List[str] = []
    for part in (raw or "").split(","):
        name = part.strip()
        if name and name not in names:
            names.append(name)
    return tuple(names)


def parse_positive_int(raw: str, name: str) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        value = 0
    if value <= 0:
        raise ReportError(
            ErrorCode.CONFIG_INVALID,
            f"{name} must be a positive integer, got {raw!r}",
            details={"variable": name},
        )
    return value


# ============================================================================
# Global Configuration Singleton
# ============================================================================

_config: Optional[TlsFindingsConfig] = None


def get_config() -> TlsFindingsConfig:
    """
    Get the global configuration instance, loading it from the
    environment on first use.
    """
    global _config
    if _config is None:
        _config = TlsFindingsConfig.from_env()
    return _config


def set_config(config: Optional[TlsFindingsConfig]) -> None:
    """
    Replace the global configuration (mainly used for testing).
    Passing None makes the next get_config() re-read the environment.
    """
    global _config
    _config = config


def setup_logging(config: Optional[TlsFindingsConfig] = None) -> None:
    """
    Configure Python's logging system based on our settings.

    Console logs go to stderr; stdout carries only the report.
    """
    cfg = config or get_config()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if cfg.log.file_enabled and cfg.log.file_path is not None:
        from logging.handlers import RotatingFileHandler
        cfg.log.file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            cfg.log.file_path,
            maxBytes=cfg.log.max_file_size_mb * 1024 * 1024,
            backupCount=cfg.log.backup_count,
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, cfg.log.level.upper()),
        format=cfg.log.format,
        handlers=handlers,
        force=True,
    )
    logger.debug("Logging configured at %s", cfg.log.level)
