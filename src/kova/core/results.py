# src/kova/core/results.py
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from kova.messages.message import Message

T = TypeVar("T")


# ----------------------------
# SINGLE CONSTRAINT OUTCOME
# ----------------------------
class ConstraintResult:
    """Outcome of evaluating one constraint."""


@dataclass(frozen=True)
class Satisfied(ConstraintResult):
    pass


@dataclass(frozen=True)
class Violated(ConstraintResult):
    """
    @brief
    The constraint did not hold.

    @details
    `message` is either a finished Message or literal text; literal text is
    turned into a message anchored at the constraint's location.
    """

    message: Message | str


# ----------------------------
# AGGREGATE OUTCOME
# ----------------------------
class ValidationResult(Generic[T]):
    """Either `Success(value)` or `Failure(messages)`."""

    @property
    def is_success(self) -> bool:
        return isinstance(self, Success)

    @property
    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def __add__(self, other: ValidationResult[Any]) -> ValidationResult[Any]:
        """
        @brief
        Combine two results of the same input.

        @details
        Success + Success keeps the right-hand value; any Failure wins over a
        Success; two Failures concatenate their messages in order.
        """
        if isinstance(self, Failure):
            if isinstance(other, Failure):
                return Failure(self.messages + other.messages)
            return self
        return other


@dataclass(frozen=True)
class Success(ValidationResult[T]):
    value: T


@dataclass(frozen=True, init=False)
class Failure(ValidationResult[Any]):
    messages: tuple[Message, ...]

    def __init__(self, messages: Iterable[Message]):
        collected = tuple(messages)
        if not collected:
            raise ValueError("Failure requires at least one message")
        object.__setattr__(self, "messages", collected)


__all__ = [
    "ConstraintResult",
    "Satisfied",
    "Violated",
    "ValidationResult",
    "Success",
    "Failure",
]
