"""Range checks for a TimeOffBuddyConfig.

All checks work on the derived minute totals, never on the raw fields, so
``--ch 1 --cm -30`` is a valid 30 minute balance.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tobuddy.exceptions import InvalidConfigurationError

if TYPE_CHECKING:
    from tobuddy.schemas.config import TimeOffBuddyConfig


def total_earned_minutes_valid(cfg: TimeOffBuddyConfig) -> bool:
    return cfg.total_earned_minutes >= 0


def total_accrual_per_period_valid(cfg: TimeOffBuddyConfig) -> bool:
    return cfg.total_minutes_per_pay_period > 0


def target_minutes_valid(cfg: TimeOffBuddyConfig) -> bool:
    return cfg.target_minutes > 0


def validate_config(cfg: TimeOffBuddyConfig) -> bool:
    """Return True when every check passes."""
    return total_earned_minutes_valid(cfg) and total_accrual_per_period_valid(cfg) and target_minutes_valid(cfg)


def describe_invalidity(cfg: TimeOffBuddyConfig) -> InvalidConfigurationError | None:
    """Return an error for the first failing check, or None if the config is valid.

    Checks run in a fixed order: earned minutes, minutes per pay period,
    target hours. Only the first failure is reported.
    """
    if not total_earned_minutes_valid(cfg):
        return InvalidConfigurationError("total earned minutes", cfg.total_earned_minutes)
    if not total_accrual_per_period_valid(cfg):
        return InvalidConfigurationError("total minutes per pay period", cfg.total_minutes_per_pay_period)
    if not target_minutes_valid(cfg):
        return InvalidConfigurationError("target hours", cfg.target_hours)
    return None
