# src/kova/constraints/mapping.py
from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from kova.core.context import ConstraintContext
from kova.core.results import ConstraintResult
from kova.core.traversal import (
    MAP_ENTRY,
    MAP_KEY,
    MAP_VALUE,
    EnsureEachValidator,
    collect_failures,
)
from kova.core.validator import IdentityValidator, Validator

Items = Callable[[Mapping[Any, Any]], Iterable[tuple[str, Any]]]


def _entries(value: Mapping[Any, Any]) -> Iterable[tuple[str, Any]]:
    return ((MAP_ENTRY, item) for item in value.items())


def _keys(value: Mapping[Any, Any]) -> Iterable[tuple[str, Any]]:
    return ((MAP_KEY, key) for key in value)


def _values(value: Mapping[Any, Any]) -> Iterable[tuple[str, Any]]:
    return ((f"[{key}]{MAP_VALUE}", item) for key, item in value.items())


class MappingValidator(IdentityValidator[Mapping[Any, Any]]):
    """
    @brief
    Size and key constraints for mappings, plus per-entry, per-key and
    per-value validation.

    @details
    Entries are passed to the entry validator as `(key, value)` tuples.
    Path markers: `<map entry>` for entries, `<map key>` for keys and
    `[key]<map value>` for values. The `on_each*` forms fail with one
    composite message; the `ensure_each*` forms fail with the item
    messages themselves.
    """

    def min_size(self, size: int):
        return self.constrain(
            "kova.map.min",
            lambda c: c.satisfies(len(c.input) >= size, lambda: c.resource(len(c.input), size)),
        )

    def max_size(self, size: int):
        return self.constrain(
            "kova.map.max",
            lambda c: c.satisfies(len(c.input) <= size, lambda: c.resource(len(c.input), size)),
        )

    def not_empty(self):
        return self.constrain(
            "kova.map.notEmpty", lambda c: c.satisfies(len(c.input) > 0, c.resource)
        )

    def contains_key(self, key: Any):
        return self.constrain(
            "kova.map.containsKey", lambda c: c.satisfies(key in c.input, lambda: c.resource(key))
        )

    def on_each(self, validator: Validator[Any, Any]):
        return self._composite("kova.map.onEach", _entries, validator)

    def on_each_key(self, validator: Validator[Any, Any]):
        return self._composite("kova.map.onEachKey", _keys, validator)

    def on_each_value(self, validator: Validator[Any, Any]):
        return self._composite("kova.map.onEachValue", _values, validator)

    def ensure_each(self, validator: Validator[Any, Any]):
        return self.chain(EnsureEachValidator(validator, _entries))

    def ensure_each_key(self, validator: Validator[Any, Any]):
        return self.chain(EnsureEachValidator(validator, _keys))

    def ensure_each_value(self, validator: Validator[Any, Any]):
        return self.chain(EnsureEachValidator(validator, _values))

    def _composite(self, constraint_id: str, items: Items, validator: Validator[Any, Any]):
        def check(c: ConstraintContext[Mapping[Any, Any]]) -> ConstraintResult:
            failures = collect_failures(c.validation, items(c.input), validator)
            return c.satisfies(not failures, lambda: c.resource(failures))

        return self.constrain(constraint_id, check)


__all__ = ["MappingValidator"]
