from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from tobuddy.config import reset_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Strip TOBUDDY_* variables and drop cached settings around every test."""
    for name in list(os.environ):
        if name.upper().startswith("TOBUDDY_"):
            monkeypatch.delenv(name)
    reset_settings()
    yield
    reset_settings()
