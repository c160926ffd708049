from __future__ import annotations

import sys
from typing import TextIO

EXIT_FAILURE = 1


class AppError(Exception):
    """Base application exception."""

    def __init__(self, message: str, exit_code: int = EXIT_FAILURE) -> None:
        self.message = message
        self.exit_code = exit_code
        super().__init__(self.message)


class InvalidConfigurationError(AppError):
    """A configuration quantity is out of range."""

    def __init__(self, quantity: str, value: int) -> None:
        self.quantity = quantity
        self.value = value
        super().__init__(f"{quantity} invalid: {value}")


def handle_app_error(exc: AppError, stream: TextIO | None = None) -> int:
    """Report an application error on stderr and return the process exit code."""
    print(f"Error: failed to calculate pay periods: {exc.message}", file=stream or sys.stderr)
    return exc.exit_code
