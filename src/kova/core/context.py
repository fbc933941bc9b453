# src/kova/core/context.py
from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from kova.core.path import Path
from kova.core.results import ConstraintResult, Satisfied, Violated
from kova.log import LogEntry, LogHook
from kova.messages.message import Message, ResourceMessage, TextMessage
from kova.messages.resolver import MessageResolver, default_resolver, normalize_locale

if TYPE_CHECKING:
    from kova.config.models import ValidationConfig

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationContext:
    """
    @brief
    Immutable state threaded through one validation traversal.

    @details
    Every descent derives a new context via `add_root`, `add_path` or
    `append_path`; an existing context is never changed. The locale and the
    resolver travel with the context, so concurrent validations with
    different locales do not interfere.

    @params
        root : str
            Label of the outermost validated object; set once.
        path : Path | None
            Innermost path node, or None at the top.
        fail_fast : bool
            Stop at the first violation instead of accumulating.
        logger : LogHook | None
            Optional hook receiving one entry per constraint check.
        locale : str
            Locale messages are rendered in.
        resolver : MessageResolver
            Bundle lookup used for resource messages.
    """

    root: str = ""
    path: Path | None = None
    fail_fast: bool = False
    logger: LogHook | None = None
    locale: str = "en"
    resolver: MessageResolver = field(default_factory=default_resolver)

    @classmethod
    def from_config(cls, config: ValidationConfig | None = None) -> ValidationContext:
        if config is None:
            return cls()
        resolver = (
            MessageResolver(user_dirs=config.message_dirs)
            if config.message_dirs
            else default_resolver()
        )
        return cls(
            fail_fast=config.fail_fast,
            logger=config.logger,
            locale=normalize_locale(config.locale),
            resolver=resolver,
        )

    @property
    def current_path(self) -> Path:
        return self.path if self.path is not None else Path("")

    def add_root(self, name: str, obj: Any = None) -> ValidationContext:
        """Set the root label unless one is already set (first writer wins)."""
        if self.root:
            return self
        return dataclasses.replace(self, root=name, path=Path("", obj, self.path))

    def add_path(self, name: str, obj: Any = None) -> ValidationContext:
        """Descend into a new named segment below the current path."""
        return dataclasses.replace(self, path=Path(name, obj, self.current_path))

    def add_path_checked(self, name: str, obj: Any) -> ValidationContext | None:
        """
        @brief
        Like `add_path`, but refuse to enter an object already on the path.

        @returns
            Derived context, or None when `obj` would close a cycle.
        """
        if self.path is not None and self.path.contains_object(obj):
            return None
        return self.add_path(name, obj)

    def append_path(self, text: str, obj: Any = None) -> ValidationContext:
        """Concatenate `text` onto the innermost segment without adding a node."""
        if self.path is None:
            return dataclasses.replace(self, path=Path(text, obj))
        current = self.path
        keep = obj if obj is not None else current.obj
        return dataclasses.replace(self, path=Path(current.name + text, keep, current.parent))

    def log(self, entry: Callable[[], LogEntry]) -> None:
        # Entries are only built when somebody listens.
        if self.logger is not None:
            self.logger(entry())


@dataclass(frozen=True)
class ConstraintContext(Generic[T]):
    """
    @brief
    What a single constraint sees: its input, its identifier and the
    surrounding validation context.

    @details
    Provides helpers to build messages anchored at the current location and
    to turn a condition into a `ConstraintResult`.
    """

    input: T
    constraint_id: str
    validation: ValidationContext

    @property
    def root(self) -> str:
        return self.validation.root

    @property
    def path(self) -> Path:
        return self.validation.current_path

    @property
    def fail_fast(self) -> bool:
        return self.validation.fail_fast

    def text(self, content: str) -> Message:
        return TextMessage(
            constraint_id=self.constraint_id,
            root=self.root,
            path=self.path,
            input=self.input,
            content=content,
        )

    def resource(self, *args: Any, key: str | None = None) -> Message:
        """Bundle-backed message; `key` defaults to the constraint identifier."""
        return ResourceMessage(
            constraint_id=self.constraint_id,
            root=self.root,
            path=self.path,
            input=self.input,
            key=key or self.constraint_id,
            arguments=args,
            locale=self.validation.locale,
            resolver=self.validation.resolver,
        )

    def satisfies(
        self, condition: bool, message: Message | str | Callable[[], Message | str]
    ) -> ConstraintResult:
        """
        @brief
        Map a boolean condition to Satisfied / Violated.

        @details
        A callable message is only invoked when the condition fails, so
        message arguments that are costly to compute are never built for
        satisfied constraints.
        """
        if condition:
            return Satisfied()
        if callable(message):
            message = message()
        return Violated(message)


@dataclass(frozen=True)
class Constraint(Generic[T]):
    """Named check turning a ConstraintContext into a ConstraintResult."""

    id: str
    check: Callable[[ConstraintContext[T]], ConstraintResult]


__all__ = ["ValidationContext", "ConstraintContext", "Constraint"]
