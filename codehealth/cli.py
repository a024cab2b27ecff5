"""
Command-line interface for codehealth.

Exit codes:
    0  analysis finished and no threshold was exceeded
    1  configuration error
    2  invalid arguments, or the maximum file complexity exceeded
       ``--max-complexity``
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from codehealth import __version__
from codehealth.core.config import REPORT_FORMATS, Config, find_config
from codehealth.core.engine import MetricsEngine
from codehealth.core.metrics import Report
from codehealth.logging_config import setup_logging
from codehealth.reporting import format_json, format_text

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_THRESHOLD_EXCEEDED = 2


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid non-negative integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"invalid non-negative integer: {value!r}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="codehealth",
        description=(
            "Scans codebases and reports metrics such as cyclomatic complexity, "
            "maintainability, and risk factors"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  codehealth                                  # Analyze the current directory
  codehealth --path src/lib.rs                # Analyze a single file
  codehealth --report json -o metrics.json    # JSON report to a file
  codehealth --max-complexity 40              # Fail CI above a threshold
        """,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--path",
        default=".",
        help="Path to the directory or file to analyze (default: current directory)",
    )
    parser.add_argument(
        "--report",
        choices=REPORT_FORMATS,
        help="Choose report format (default: text)",
    )
    parser.add_argument(
        "--max-complexity",
        type=non_negative_int,
        help="Fail if max cyclomatic complexity exceeds this threshold",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to a YAML/JSON configuration file",
    )
    parser.add_argument(
        "-o", "--output",
        help="Write the report to a file instead of stdout",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose logging",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only log errors",
    )
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Config file (explicit or discovered next to the target) plus CLI overrides."""
    config_path = args.config or find_config(args.path)
    if config_path:
        logger.debug("Using config file %s", config_path)
    config = Config.load(config_path)

    reporting: Dict[str, Any] = {}
    if args.report:
        reporting["format"] = args.report
    if args.max_complexity is not None:
        reporting["max_complexity"] = args.max_complexity
    if reporting:
        config = config.with_overrides({"reporting": reporting})
    return config


def render(report: Report, config: Config) -> str:
    if config.report_format() == "json":
        return format_json(report)
    return format_text(report, leaderboard_size=config.leaderboard_size())


def check_threshold(report: Report, threshold: Optional[int]) -> int:
    if threshold is None:
        return EXIT_OK
    max_complexity = report.metrics.max_file_complexity
    if max_complexity > threshold:
        print(
            f"⚠️  Maximum cyclomatic complexity ({max_complexity}) exceeds threshold ({threshold}).",
            file=sys.stderr,
        )
        return EXIT_THRESHOLD_EXCEEDED
    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        config = load_config(args)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    report = MetricsEngine(config).analyze(args.path)
    output = render(report, config)
    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        logger.info("Report written to %s", args.output)
    else:
        print(output, end="")

    return check_threshold(report, config.max_complexity())
