"""Runs one calculation end to end and returns a tagged outcome."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TextIO

from tobuddy.schemas.outcome import AccrualOutcome, InvalidConfiguration, NoAccrualPossible, PayPeriodCount
from tobuddy.services.prompt import ConsolePrompter, Prompter, run_interactive_mode
from tobuddy.services.simulator import determine_pay_periods
from tobuddy.services.validation import describe_invalidity, total_accrual_per_period_valid, validate_config

if TYPE_CHECKING:
    from tobuddy.schemas.config import TimeOffBuddyConfig

logger = logging.getLogger(__name__)


def execute_time_off_buddy(
    cfg: TimeOffBuddyConfig,
    *,
    interactive: bool = False,
    prompter: Prompter | None = None,
    out: TextIO | None = None,
) -> AccrualOutcome:
    """Validate cfg (after interactive overrides) and count pay periods.

    A non-positive accrual per pay period yields NoAccrualPossible even when
    the earned balance or target are also out of range.
    """
    if interactive:
        cfg = run_interactive_mode(cfg, prompter or ConsolePrompter())

    logger.debug("Calculating with %s", cfg.model_dump())

    if validate_config(cfg):
        total_earned, per_pay_period, target = cfg.minute_totals()
        pay_periods = determine_pay_periods(total_earned, per_pay_period, target, cfg.verbose, out)
        return PayPeriodCount(pay_periods=pay_periods)

    if not total_accrual_per_period_valid(cfg):
        logger.info("No accrual per pay period (%d minutes)", cfg.total_minutes_per_pay_period)
        return NoAccrualPossible()

    error = describe_invalidity(cfg)
    if error is None:
        msg = "configuration failed validation but no failing check was found"
        raise RuntimeError(msg)
    logger.info("Invalid configuration: %s", error.message)
    return InvalidConfiguration.from_error(error)
