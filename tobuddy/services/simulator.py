"""Accrual simulator: counts pay periods until a balance reaches a target."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

logger = logging.getLogger(__name__)

_MINUTES_PER_HOUR = 60


def _split_minutes(total_minutes: int) -> tuple[int, int]:
    """Split minutes into (hours, minutes), truncating toward zero.

    -90 becomes (-1, -30) rather than floor division's (-2, 30).
    """
    hours, minutes = divmod(abs(total_minutes), _MINUTES_PER_HOUR)
    if total_minutes < 0:
        return -hours, -minutes
    return hours, minutes


def format_progress(total_minutes: int) -> str:
    hours, minutes = _split_minutes(total_minutes)
    return f"{hours} hrs {minutes} minutes earned"


def determine_pay_periods(
    total_earned_minutes: int,
    minutes_per_pay_period: int,
    target_minutes: int,
    verbose: bool = False,
    out: TextIO | None = None,
) -> int:
    """Return the fewest full pay periods needed to reach target_minutes.

    The target check happens before each period is added, so a balance that
    already meets the target needs zero periods. With ``verbose`` the running
    balance is printed before every period and once more at the end.
    """
    if total_earned_minutes < target_minutes and minutes_per_pay_period <= 0:
        msg = f"minutes_per_pay_period must be positive to reach the target, got {minutes_per_pay_period}"
        raise ValueError(msg)

    stream = out or sys.stdout
    pay_periods = 0
    while total_earned_minutes < target_minutes:
        if verbose:
            print(format_progress(total_earned_minutes), file=stream)
        total_earned_minutes += minutes_per_pay_period
        pay_periods += 1

    if verbose:
        print(format_progress(total_earned_minutes), file=stream)

    logger.debug("Target of %d minutes reached after %d pay periods", target_minutes, pay_periods)
    return pay_periods
