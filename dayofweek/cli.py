"""CLI entry point for the day of the week calculator.

This module handles argument parsing and runs the single-date pipeline:
prompt -> parse -> validate -> compute -> format.
"""

import argparse
from collections.abc import Callable

from . import ui
from .calculator import compute_weekday, validate_date, weekday_name
from .config import Config
from .constants import (
    EXIT_ERROR,
    EXIT_INTERRUPTED,
    EXIT_OK,
    INVALID_DATE_EXIT_MESSAGE,
    INPUT_FORMAT_MESSAGE,
    PROMPT,
)
from .exceptions import (
    ConfigError,
    DateValidationError,
    InputFormatError,
    InvalidIndexError,
)
from .logger import logger, setup_logger
from .parsing import parse_date


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="dayofweek",
        description="Day of the Week Calculator: DD/MM/YYYY -> weekday name (1700-2500)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dayofweek                         Prompt for a date
  dayofweek 15/10/2025              Use the given date without prompting
  dayofweek --config dow.yaml       Load settings from a YAML file
  python -m dayofweek --log-level DEBUG
        """
    )

    parser.add_argument(
        "date",
        nargs="?",
        default=None,
        metavar="DD/MM/YYYY",
        help="Date to look up (default: prompt for it)"
    )

    parser.add_argument(
        "--config",
        default=None,
        help="Optional YAML config file path"
    )

    parser.add_argument(
        "--log-level",
        default=None,
        metavar="LEVEL",
        help="Override the configured log level (DEBUG, INFO, WARNING, ERROR)"
    )

    return parser


def _read_date(date_arg: str | None, input_fn: Callable[[str], str]) -> str:
    if date_arg is not None:
        return date_arg
    try:
        return input_fn(PROMPT)
    except EOFError as e:
        raise InputFormatError(INPUT_FORMAT_MESSAGE, original_error=e) from e


def run_cli(
    argv: list[str] | None = None,
    *,
    input_fn: Callable[[str], str] | None = None,
) -> int:
    """
    Parse arguments, read one date and print its weekday.

    Args:
        argv: Command line arguments (None for sys.argv)
        input_fn: Reads a line given a prompt (default: rich console input)

    Returns:
        Exit code (0 for success, 1 for any error, 130 when interrupted)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    if input_fn is None:
        input_fn = ui.console.input

    try:
        cfg = Config.load(args.config)
        cfg = cfg.with_overrides(log_level=args.log_level)
        setup_logger(level=cfg.log_level, log_file=cfg.log_file)
        logger.debug("config.loaded", log_level=cfg.log_level, banner=cfg.banner)

        if cfg.banner:
            ui.print_header()

        text = _read_date(args.date, input_fn)
        day, month, year = parse_date(text)
        logger.debug("date.parsed", day=day, month=month, year=year)

        validate_date(day, month, year)

        index = compute_weekday(day, month, year)
        name = weekday_name(index)
        logger.info("weekday.computed", day=day, month=month, year=year, index=int(index), name=name)

        ui.print_result(day, month, year, name)
        return EXIT_OK

    except InputFormatError as e:
        logger.info("input.rejected", error=e)
        ui.print_error(e.message, prefix="Input Error")
        return EXIT_ERROR

    except DateValidationError as e:
        logger.info("date.rejected", error=e)
        ui.print_error(e.message)
        ui.print_info(INVALID_DATE_EXIT_MESSAGE)
        return EXIT_ERROR

    except InvalidIndexError as e:
        logger.error("weekday.invalid_index", error=e)
        ui.print_error(e.message)
        return EXIT_ERROR

    except ConfigError as e:
        ui.print_error(e.message, prefix="Config Error")
        return EXIT_ERROR

    except KeyboardInterrupt:
        ui.console.print("\nInterrupted by user")
        return EXIT_INTERRUPTED

    except Exception as e:
        logger.exception("fatal_error")
        ui.print_error(str(e), prefix="Fatal error")
        return EXIT_ERROR


def main(argv: list[str] | None = None) -> int:
    """Console script entry point."""
    return run_cli(argv)
