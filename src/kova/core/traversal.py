# src/kova/core/traversal.py
from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from kova.core.context import ValidationContext
from kova.core.results import Failure, Success, ValidationResult
from kova.core.validator import Validator
from kova.messages.message import Message

COLLECTION_ELEMENT = "<collection element>"
MAP_ENTRY = "<map entry>"
MAP_KEY = "<map key>"
MAP_VALUE = "<map value>"


def collect_failures(
    context: ValidationContext,
    items: Iterable[tuple[str, Any]],
    validator: Validator[Any, Any],
) -> list[Message]:
    """
    @brief
    Validate each item one marker deeper and gather the failure messages.

    @details
    Every item comes with the marker appended to the current path segment,
    e.g. "[1]<collection element>" turns "users" into
    "users[1]<collection element>". Items are visited in iteration order;
    under fail-fast the walk stops after the first failing item.

    @params
        context : ValidationContext
            Context of the enclosing collection or mapping.
        items : Iterable[tuple[str, Any]]
            (marker, value) pairs.
        validator : Validator
            Validator applied to every value.

    @returns
        Messages of all failing items in visiting order (empty if all pass).
    """
    messages: list[Message] = []
    for marker, value in items:
        result = validator.execute(context.append_path(marker), value)
        if isinstance(result, Failure):
            messages.extend(result.messages)
            if context.fail_fast:
                break
    return messages


class EnsureEachValidator(Validator[Any, Any]):
    """Per-item validation whose failure is the flat list of item messages."""

    def __init__(
        self,
        validator: Validator[Any, Any],
        items: Callable[[Any], Iterable[tuple[str, Any]]],
    ):
        self.validator = validator
        self.items = items

    def execute(self, context: ValidationContext, value: Any) -> ValidationResult[Any]:
        failures = collect_failures(context, self.items(value), self.validator)
        if failures:
            return Failure(failures)
        return Success(value)


__all__ = [
    "collect_failures",
    "EnsureEachValidator",
    "COLLECTION_ELEMENT",
    "MAP_ENTRY",
    "MAP_KEY",
    "MAP_VALUE",
]
