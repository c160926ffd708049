from __future__ import annotations

from pydantic import BaseModel, ConfigDict

_MINUTES_PER_HOUR = 60


class TimeOffBuddyConfig(BaseModel):
    """Inputs for one pay-period calculation.

    Values are stored as supplied; range checks live in
    ``tobuddy.services.validation`` so an out-of-range configuration can
    still be built and described.
    """

    model_config = ConfigDict(frozen=True)

    earned_hours: int = 0
    earned_minutes: int = 0
    hours_per_pay_period: int = 0
    minutes_per_pay_period: int = 0
    target_hours: int = 40
    verbose: bool = False

    @property
    def total_earned_minutes(self) -> int:
        return self.earned_hours * _MINUTES_PER_HOUR + self.earned_minutes

    @property
    def total_minutes_per_pay_period(self) -> int:
        return self.hours_per_pay_period * _MINUTES_PER_HOUR + self.minutes_per_pay_period

    @property
    def target_minutes(self) -> int:
        return self.target_hours * _MINUTES_PER_HOUR

    def minute_totals(self) -> tuple[int, int, int]:
        """Return (total earned, per pay period, target), all in minutes."""
        return self.total_earned_minutes, self.total_minutes_per_pay_period, self.target_minutes
