"""Messages passed between UI models and helpers to build commands."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable

Command = Callable[[], Any]


@dataclass(frozen=True)
class KeyMsg:
    """A key press, named like "enter", "q" or "ctrl+c"."""

    key: str

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True)
class WindowSizeMsg:
    width: int
    height: int


@dataclass(frozen=True)
class SpinnerTickMsg:
    time: datetime


@dataclass(frozen=True)
class LastUpdatedMsg:
    time: datetime


@dataclass(frozen=True)
class BatchMsg:
    """Several commands to run together."""

    commands: tuple


def batch(*args: Command | None) -> Command | None:
    """Combine commands, dropping None; None if nothing remains."""
    commands = tuple(c for c in args if c is not None)
    if not commands:
        return None
    if len(commands) == 1:
        return commands[0]
    return lambda: BatchMsg(commands)


def tick(interval: float | timedelta, factory: Callable[[datetime], Any]) -> Command:
    """Command that waits interval then returns factory(now)."""
    seconds = interval.total_seconds() if isinstance(interval, timedelta) else float(interval)

    def command():
        time.sleep(seconds)
        return factory(datetime.now())

    return command