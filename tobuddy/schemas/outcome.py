from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from tobuddy.exceptions import InvalidConfigurationError

# ---------------------------------------------------------------------------
# Calculation outcomes (discriminated union)
# ---------------------------------------------------------------------------


class PayPeriodCount(BaseModel):
    """The target is reached after ``pay_periods`` full pay periods."""

    kind: Literal["COUNT"] = "COUNT"
    pay_periods: int = Field(ge=0)

    def render(self) -> str:
        return f"{self.pay_periods} pay periods"


class NoAccrualPossible(BaseModel):
    """Nothing accrues per pay period, so no count can be given."""

    kind: Literal["NO_ACCRUAL"] = "NO_ACCRUAL"

    def render(self) -> str:
        return "No Time Off Earned"


class InvalidConfiguration(BaseModel):
    """The first failing validation check for a configuration."""

    kind: Literal["INVALID"] = "INVALID"
    quantity: str
    value: int
    reason: str

    @classmethod
    def from_error(cls, error: InvalidConfigurationError) -> InvalidConfiguration:
        return cls(quantity=error.quantity, value=error.value, reason=error.message)

    def to_error(self) -> InvalidConfigurationError:
        return InvalidConfigurationError(self.quantity, self.value)


AccrualOutcome = Annotated[
    PayPeriodCount | NoAccrualPossible | InvalidConfiguration,
    Field(discriminator="kind"),
]
