from __future__ import annotations

import enum


class StandardOption(enum.StrEnum):
    """Numeric options that can be set by flag, environment, or interactive prompt."""

    EARNED_HOURS = "ch"
    EARNED_MINUTES = "cm"
    HOURS_PER_PAY_PERIOD = "eh"
    MINUTES_PER_PAY_PERIOD = "em"
    TARGET = "target"

    @property
    def description(self) -> str:
        return _OPTION_DESCRIPTIONS[self]

    @property
    def field_name(self) -> str:
        """Name of the matching field on the configuration model."""
        return _OPTION_FIELDS[self]


_OPTION_DESCRIPTIONS: dict[StandardOption, str] = {
    StandardOption.EARNED_HOURS: "Number of Hours accrued.",
    StandardOption.EARNED_MINUTES: "Number of Minutes accrued.",
    StandardOption.HOURS_PER_PAY_PERIOD: "Number of hours earned per pay period",
    StandardOption.MINUTES_PER_PAY_PERIOD: "Number of minutes earned per pay period",
    StandardOption.TARGET: "Total time off time required in hours.",
}

_OPTION_FIELDS: dict[StandardOption, str] = {
    StandardOption.EARNED_HOURS: "earned_hours",
    StandardOption.EARNED_MINUTES: "earned_minutes",
    StandardOption.HOURS_PER_PAY_PERIOD: "hours_per_pay_period",
    StandardOption.MINUTES_PER_PAY_PERIOD: "minutes_per_pay_period",
    StandardOption.TARGET: "target_hours",
}
