"""Command-line entry point for tobuddy.

Usage:
    tobuddy --ch 12 --cm 30 --eh 4 -t 40
    tobuddy -i            # prompt for every value
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from tobuddy.config import Settings, get_settings
from tobuddy.exceptions import handle_app_error
from tobuddy.models.enums import StandardOption
from tobuddy.schemas.config import TimeOffBuddyConfig
from tobuddy.schemas.outcome import InvalidConfiguration
from tobuddy.services.orchestrator import execute_time_off_buddy

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tobuddy.services.prompt import Prompter

logger = logging.getLogger(__name__)

LONG_DESCRIPTION = (
    "Calculate when you can take your next dream vacation based on your current time off "
    "and time off earned each pay period."
)

EXIT_SUCCESS = 0


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """Build the argument parser; flag defaults come from settings."""
    parser = argparse.ArgumentParser(prog=settings.app_name, description=LONG_DESCRIPTION)
    parser.add_argument(
        f"--{StandardOption.EARNED_HOURS}",
        dest="earned_hours",
        type=int,
        default=settings.earned_hours,
        help=StandardOption.EARNED_HOURS.description,
    )
    parser.add_argument(
        f"--{StandardOption.EARNED_MINUTES}",
        dest="earned_minutes",
        type=int,
        default=settings.earned_minutes,
        help=StandardOption.EARNED_MINUTES.description,
    )
    parser.add_argument(
        f"--{StandardOption.HOURS_PER_PAY_PERIOD}",
        dest="hours_per_pay_period",
        type=int,
        default=settings.hours_per_pay_period,
        help=StandardOption.HOURS_PER_PAY_PERIOD.description,
    )
    parser.add_argument(
        f"--{StandardOption.MINUTES_PER_PAY_PERIOD}",
        dest="minutes_per_pay_period",
        type=int,
        default=settings.minutes_per_pay_period,
        help=StandardOption.MINUTES_PER_PAY_PERIOD.description,
    )
    parser.add_argument(
        "-t",
        f"--{StandardOption.TARGET}",
        dest="target_hours",
        type=int,
        default=settings.target_hours,
        help=StandardOption.TARGET.description,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Print verbose output.")
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help=f"Start {settings.app_name} in interactive mode.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s version {settings.app_version}")
    return parser


def config_from_args(args: argparse.Namespace) -> TimeOffBuddyConfig:
    return TimeOffBuddyConfig(
        earned_hours=args.earned_hours,
        earned_minutes=args.earned_minutes,
        hours_per_pay_period=args.hours_per_pay_period,
        minutes_per_pay_period=args.minutes_per_pay_period,
        target_hours=args.target_hours,
        verbose=args.verbose,
    )


def main(argv: Sequence[str] | None = None, prompter: Prompter | None = None) -> int:
    """Entry point for the tobuddy command. Returns the process exit code."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    args = build_parser(settings).parse_args(argv)
    outcome = execute_time_off_buddy(config_from_args(args), interactive=args.interactive, prompter=prompter)
    logger.debug("Calculation finished with outcome %s", outcome.kind)

    if isinstance(outcome, InvalidConfiguration):
        return handle_app_error(outcome.to_error())

    print(outcome.render())
    return EXIT_SUCCESS


def run() -> None:
    """Console-script wrapper that exits with main()'s status."""
    sys.exit(main())
