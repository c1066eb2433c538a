"""
tlsfindings CLI: report deprecated protocols and weak ciphers from nmap output.

Usage examples:
    nmap -sV --script ssl-enum-ciphers -p 443 10.0.0.0/24 -oN scan.txt
    tlsfindings scan.txt
    tlsfindings --grouped scan.txt
    cat scan.txt | python -m tlsfindings -
"""

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from tlsfindings import __version__
from tlsfindings.base.config import (
    TlsFindingsConfig,
    get_config,
    parse_positive_int,
    parse_protocols,
    setup_logging,
)
from tlsfindings.errors import ReportError, handle_error
from tlsfindings.pipeline import STDIN_PATH, build_report, read_scan_lines
from tlsfindings.reporting.types import ReportMode

logger = logging.getLogger(__name__)

VERBOSITY_LEVELS = {1: "INFO", 2: "DEBUG"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tlsfindings",
        description="Summarise deprecated TLS/SSL protocols and weak ciphers from nmap ssl-enum-ciphers output",
    )
    parser.add_argument("input", nargs="?", default=STDIN_PATH,
                        help="nmap normal output file ('-' or omitted reads stdin)")
    parser.add_argument("-g", "--grouped", action="store_true",
                        help="Group findings by protocol category and by host instead of flat lists")
    parser.add_argument("-p", "--protocols",
                        help="Comma-separated protocol versions to flag (e.g. TLSv1.0,TLSv1.1)")
    # Validated by parse_positive_int so a bad width exits with CONFIG_INVALID (3)
    parser.add_argument("-w", "--column-width", type=str,
                        help="Width of each host:port column")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Log progress to stderr (-vv for debug)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_config(args: argparse.Namespace, base: TlsFindingsConfig) -> TlsFindingsConfig:
    """Apply command-line overrides on top of the environment config."""
    report = base.report
    if args.grouped:
        report = dataclasses.replace(report, mode=ReportMode.GROUPED)
    if args.protocols:
        protocols = parse_protocols(args.protocols)
        if protocols:
            report = dataclasses.replace(report, protocols=protocols)
    if args.column_width:
        report = dataclasses.replace(
            report, column_width=parse_positive_int(args.column_width, "--column-width")
        )

    log = base.log
    if args.verbose:
        log = dataclasses.replace(log, level=VERBOSITY_LEVELS.get(min(args.verbose, 2), "INFO"))

    return dataclasses.replace(base, report=report, log=log)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config(args, get_config())
        setup_logging(config)
        logger.info(
            "Building %s report for %s (protocols: %s)",
            config.report.mode.value,
            args.input,
            ", ".join(config.report.protocols),
        )
        report = build_report(
            read_scan_lines(args.input),
            mode=config.report.mode,
            protocols=config.report.protocols,
            column_width=config.report.column_width,
            section_rule_width=config.report.section_rule_width,
        )
    except ReportError as e:
        logger.error("Report failed: %s", e.to_dict())
        print(f"error: {e}", file=sys.stderr)
        return e.exit_code
    except OSError as e:
        err = handle_error(e, "while reading scan output")
        logger.error("Report failed: %s", err.to_dict())
        print(f"error: {err}", file=sys.stderr)
        return err.exit_code

    sys.stdout.write(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
