# src/kova/constraints/comparable.py
from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from kova.core.validator import IdentityValidator


class ComparableValidator(IdentityValidator[Any]):
    """
    @brief
    Ordering constraints for any value supporting comparison operators.

    @details
    Bounds are inclusive for `min` / `max` and exclusive for `gt` / `lt`.
    Works for ints, floats, Decimals, dates, strings and any user type
    implementing rich comparison. The bound is the single message argument.
    """

    def min(self, value: Any):
        return self._compare("kova.comparable.min", operator.ge, value)

    def max(self, value: Any):
        return self._compare("kova.comparable.max", operator.le, value)

    def gt(self, value: Any):
        return self._compare("kova.comparable.gt", operator.gt, value)

    def lt(self, value: Any):
        return self._compare("kova.comparable.lt", operator.lt, value)

    def eq(self, value: Any):
        return self._compare("kova.comparable.eq", operator.eq, value)

    def not_eq(self, value: Any):
        return self._compare("kova.comparable.notEq", operator.ne, value)

    def _compare(self, constraint_id: str, op: Callable[[Any, Any], bool], value: Any):
        return self.constrain(
            constraint_id, lambda c: c.satisfies(op(c.input, value), lambda: c.resource(value))
        )


class NumberValidator(ComparableValidator):
    """Comparable constraints plus sign checks."""

    def positive(self):
        return self._sign("kova.number.positive", operator.gt)

    def negative(self):
        return self._sign("kova.number.negative", operator.lt)

    def not_positive(self):
        return self._sign("kova.number.notPositive", operator.le)

    def not_negative(self):
        return self._sign("kova.number.notNegative", operator.ge)

    def _sign(self, constraint_id: str, op: Callable[[Any, Any], bool]):
        return self.constrain(constraint_id, lambda c: c.satisfies(op(c.input, 0), c.resource))


__all__ = ["ComparableValidator", "NumberValidator"]
