from __future__ import annotations

import logging
import re
import sys
from collections import deque
from typing import TYPE_CHECKING, Protocol, TextIO, runtime_checkable

from tobuddy.models.enums import StandardOption

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tobuddy.schemas.config import TimeOffBuddyConfig

logger = logging.getLogger(__name__)

VERBOSE_PROMPT = "Enable Verbose Logging? y/n:"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@runtime_checkable
class Prompter(Protocol):
    """Interface for reading one line of user input."""

    def read_line(self, prompt: str) -> str:
        """Show prompt and return the reply without its trailing newline."""
        ...


class ConsolePrompter:
    """Prompter backed by stdin/stdout. End of input reads as an empty line."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout

    def read_line(self, prompt: str) -> str:
        self._stdout.write(prompt)
        self._stdout.flush()
        line = self._stdin.readline()
        return line.rstrip("\r\n")


class InMemoryPrompter:
    """Scripted prompter for tests. Replies are consumed in order; none left reads as empty."""

    def __init__(self, replies: Iterable[str] = ()) -> None:
        self._replies: deque[str] = deque(replies)
        self.prompts: list[str] = []

    def seed(self, *replies: str) -> None:
        """Queue more replies."""
        self._replies.extend(replies)

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._replies:
            return ""
        return self._replies.popleft()


def option_prompt(option: StandardOption, current_value: int) -> str:
    return f"Enter an Integer for the following: {option.description}: {current_value}: "


def parse_integer(text: str) -> int | None:
    """Parse an optionally signed run of ASCII digits, or return None."""
    text = text.strip()
    if not _INTEGER_RE.fullmatch(text):
        return None
    return int(text)


def prompt_for_option(prompter: Prompter, option: StandardOption, current_value: int) -> int:
    """Ask for one option until the reply is empty (keep) or an integer (override)."""
    while True:
        reply = prompter.read_line(option_prompt(option, current_value)).strip()
        if reply == "":
            return current_value
        value = parse_integer(reply)
        if value is not None:
            return value
        logger.info("Rejected non-integer input %r for option %s", reply, option.value)


def run_interactive_mode(cfg: TimeOffBuddyConfig, prompter: Prompter) -> TimeOffBuddyConfig:
    """Collect overrides for every standard option and the verbose flag.

    Returns a new config; the one passed in is left untouched.
    """
    updates: dict[str, int | bool] = {}
    for option in StandardOption:
        current_value = getattr(cfg, option.field_name)
        updates[option.field_name] = prompt_for_option(prompter, option, current_value)

    if prompter.read_line(VERBOSE_PROMPT).strip() == "y":
        updates["verbose"] = True

    return cfg.model_copy(update=updates)
