# src/kova/log.py
"""
@brief
Logging hook observing every individual constraint evaluation.

@details
Entries are emitted for each constraint check whether or not it affects
the final result, so the log of an `or` shows failed alternatives that the
result itself hides. The hook is any callable taking a `LogEntry`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LogEntry:
    constraint_id: str
    root: str
    path: str
    input: Any


@dataclass(frozen=True)
class SatisfiedEntry(LogEntry):
    """A constraint held."""


@dataclass(frozen=True)
class ViolatedEntry(LogEntry):
    """A constraint was violated; `args` are the message arguments."""

    args: tuple[Any, ...] = ()


LogHook = Callable[[LogEntry], None]


class LogRecorder:
    """Hook that keeps every entry in arrival order."""

    def __init__(self) -> None:
        self.entries: list[LogEntry] = []

    def __call__(self, entry: LogEntry) -> None:
        self.entries.append(entry)

    def clear(self) -> None:
        self.entries.clear()


def stdlib_hook(logger: logging.Logger | None = None, level: int = logging.DEBUG) -> LogHook:
    """
    @brief
    Build a hook forwarding entries to a standard library logger.

    @params
        logger : logging.Logger | None
            Target logger; defaults to the "kova.trace" logger.
        level : int
            Level of emitted records.

    @returns
        Callable usable as `ValidationConfig.logger`.
    """
    target = logger or logging.getLogger("kova.trace")

    def _hook(entry: LogEntry) -> None:
        if not target.isEnabledFor(level):
            return
        status = "satisfied" if isinstance(entry, SatisfiedEntry) else "violated"
        target.log(
            level,
            "%s %s root=%s path=%s input=%r",
            entry.constraint_id,
            status,
            entry.root,
            entry.path,
            entry.input,
        )

    return _hook


__all__ = ["LogHook", "LogEntry", "SatisfiedEntry", "ViolatedEntry", "LogRecorder", "stdlib_hook"]
