"""Tests for configuration range checks and their reporting order."""

from __future__ import annotations

import pytest

from tobuddy.exceptions import AppError, InvalidConfigurationError
from tobuddy.schemas.config import TimeOffBuddyConfig
from tobuddy.services.validation import (
    describe_invalidity,
    target_minutes_valid,
    total_accrual_per_period_valid,
    total_earned_minutes_valid,
    validate_config,
)


def _cfg(
    earned_hours: int = 0,
    earned_minutes: int = 0,
    hours_per_pay_period: int = 1,
    minutes_per_pay_period: int = 0,
    target_hours: int = 40,
) -> TimeOffBuddyConfig:
    return TimeOffBuddyConfig(
        earned_hours=earned_hours,
        earned_minutes=earned_minutes,
        hours_per_pay_period=hours_per_pay_period,
        minutes_per_pay_period=minutes_per_pay_period,
        target_hours=target_hours,
    )


# ---------------------------------------------------------------------------
# Individual checks
# ---------------------------------------------------------------------------


class TestTotalEarnedMinutesValid:
    """Tests for total_earned_minutes_valid."""

    def test_zero_is_valid(self) -> None:
        assert total_earned_minutes_valid(_cfg()) is True

    def test_negative_hours_invalid(self) -> None:
        assert total_earned_minutes_valid(_cfg(earned_hours=-1)) is False

    def test_negative_minutes_offset_by_hours(self) -> None:
        """1h + (-30m) = 30 minutes, still non-negative."""
        assert total_earned_minutes_valid(_cfg(earned_hours=1, earned_minutes=-30)) is True

    def test_negative_minutes_only(self) -> None:
        assert total_earned_minutes_valid(_cfg(earned_minutes=-1)) is False


class TestTotalAccrualPerPeriodValid:
    """Tests for total_accrual_per_period_valid."""

    def test_positive_is_valid(self) -> None:
        assert total_accrual_per_period_valid(_cfg(hours_per_pay_period=0, minutes_per_pay_period=1)) is True

    def test_zero_is_invalid(self) -> None:
        assert total_accrual_per_period_valid(_cfg(hours_per_pay_period=0)) is False

    def test_negative_is_invalid(self) -> None:
        assert total_accrual_per_period_valid(_cfg(hours_per_pay_period=1, minutes_per_pay_period=-61)) is False


class TestTargetMinutesValid:
    """Tests for target_minutes_valid."""

    def test_default_target_valid(self) -> None:
        assert target_minutes_valid(_cfg()) is True

    def test_zero_target_invalid(self) -> None:
        assert target_minutes_valid(_cfg(target_hours=0)) is False

    def test_negative_target_invalid(self) -> None:
        assert target_minutes_valid(_cfg(target_hours=-5)) is False


# ---------------------------------------------------------------------------
# validate_config / describe_invalidity
# ---------------------------------------------------------------------------


class TestValidateConfig:
    """Tests for validate_config."""

    def test_all_checks_pass(self) -> None:
        assert validate_config(_cfg()) is True

    @pytest.mark.parametrize(
        "overrides",
        [
            {"earned_hours": -1},
            {"hours_per_pay_period": 0},
            {"target_hours": 0},
        ],
    )
    def test_any_failure_invalidates(self, overrides: dict[str, int]) -> None:
        assert validate_config(_cfg(**overrides)) is False


class TestDescribeInvalidity:
    """Tests for describe_invalidity."""

    def test_valid_config_returns_none(self) -> None:
        assert describe_invalidity(_cfg()) is None

    def test_earned_minutes_reason(self) -> None:
        error = describe_invalidity(_cfg(earned_hours=-1))
        assert isinstance(error, InvalidConfigurationError)
        assert isinstance(error, AppError)
        assert error.quantity == "total earned minutes"
        assert error.value == -60
        assert error.message == "total earned minutes invalid: -60"

    def test_per_period_reason(self) -> None:
        error = describe_invalidity(_cfg(hours_per_pay_period=0, minutes_per_pay_period=-15))
        assert error is not None
        assert error.message == "total minutes per pay period invalid: -15"

    def test_target_reason_reports_hours(self) -> None:
        error = describe_invalidity(_cfg(target_hours=-2))
        assert error is not None
        assert error.quantity == "target hours"
        assert error.value == -2
        assert str(error) == "target hours invalid: -2"

    def test_earned_reported_before_others(self) -> None:
        """All three checks fail; only the earned-minutes reason is reported."""
        error = describe_invalidity(_cfg(earned_hours=-1, hours_per_pay_period=0, target_hours=0))
        assert error is not None
        assert error.quantity == "total earned minutes"

    def test_per_period_reported_before_target(self) -> None:
        error = describe_invalidity(_cfg(hours_per_pay_period=0, target_hours=0))
        assert error is not None
        assert error.quantity == "total minutes per pay period"
        assert error.value == 0
