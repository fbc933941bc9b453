# src/kova/constraints/collection.py
from __future__ import annotations

from collections.abc import Collection, Iterator
from typing import Any

from kova.core.context import ConstraintContext
from kova.core.results import ConstraintResult
from kova.core.traversal import COLLECTION_ELEMENT, EnsureEachValidator, collect_failures
from kova.core.validator import IdentityValidator, Validator


class CollectionValidator(IdentityValidator[Collection[Any]]):
    """
    @brief
    Size and membership constraints for sized collections, plus per-element
    validation.

    @details
    `on_each` reports all failing elements as one composite
    `kova.collection.onEach` message (element messages are its argument).
    `ensure_each` reports the element messages themselves, each anchored
    at `[i]<collection element>`.
    """

    def min_size(self, size: int):
        return self.constrain(
            "kova.collection.min",
            lambda c: c.satisfies(len(c.input) >= size, lambda: c.resource(len(c.input), size)),
        )

    def max_size(self, size: int):
        return self.constrain(
            "kova.collection.max",
            lambda c: c.satisfies(len(c.input) <= size, lambda: c.resource(len(c.input), size)),
        )

    def size(self, size: int):
        return self.constrain(
            "kova.collection.length",
            lambda c: c.satisfies(len(c.input) == size, lambda: c.resource(len(c.input), size)),
        )

    def not_empty(self):
        return self.constrain(
            "kova.collection.notEmpty", lambda c: c.satisfies(len(c.input) > 0, c.resource)
        )

    def contains(self, element: Any):
        return self.constrain(
            "kova.collection.contains",
            lambda c: c.satisfies(element in c.input, lambda: c.resource(element)),
        )

    def not_contains(self, element: Any):
        return self.constrain(
            "kova.collection.notContains",
            lambda c: c.satisfies(element not in c.input, lambda: c.resource(element)),
        )

    def on_each(self, validator: Validator[Any, Any]):
        def check(c: ConstraintContext[Collection[Any]]) -> ConstraintResult:
            failures = collect_failures(c.validation, _elements(c.input), validator)
            return c.satisfies(not failures, lambda: c.resource(failures))

        return self.constrain("kova.collection.onEach", check)

    def ensure_each(self, validator: Validator[Any, Any]):
        return self.chain(EnsureEachValidator(validator, _elements))


def _elements(values: Collection[Any]) -> Iterator[tuple[str, Any]]:
    for i, element in enumerate(values):
        yield f"[{i}]{COLLECTION_ELEMENT}", element


__all__ = ["CollectionValidator"]
