# src/kova/core/nullable.py
from __future__ import annotations

from collections.abc import Callable
from typing import Any

from kova.core.validator import (
    MISSING,
    ElvisValidator,
    IdentityValidator,
    OrValidator,
    Validator,
    default_provider,
)


class NullableValidator(IdentityValidator[Any]):
    """
    @brief
    Chaining validator for values that may be None.

    @details
    Validators combined through `and_` / `or_` are made nullable first, so
    they are never asked to check None, and the combination is again a
    NullableValidator that can be chained further. `with_default` turns the
    chain into an elvis validator that replaces None by a default value.
    """

    def is_null(self) -> NullableValidator:
        return self.constrain(
            "kova.nullable.isNull", lambda c: c.satisfies(c.input is None, c.resource)
        )

    def not_null(self) -> NullableValidator:
        return self.constrain(
            "kova.nullable.notNull", lambda c: c.satisfies(c.input is not None, c.resource)
        )

    def is_null_or(self, validator: Validator[Any, Any]) -> NullableValidator:
        """Accept None, otherwise require `validator`."""
        return NullableValidator(step=OrValidator(self.is_null(), validator.as_nullable()))

    def not_null_and(self, validator: Validator[Any, Any]) -> NullableValidator:
        """Reject None and additionally require `validator` on present values."""
        return self.not_null().and_(validator)

    def with_default(
        self, default: Any = MISSING, *, default_factory: Callable[[], Any] | None = None
    ) -> ElvisValidator:
        return ElvisValidator(self, default_provider(default, default_factory))

    def to_non_nullable(self) -> NullableValidator:
        """Fail on None; downstream validators see only present values."""
        return self.not_null()

    def and_(self, other: Validator[Any, Any]) -> NullableValidator:
        return self.chain(other.as_nullable())

    def or_(self, other: Validator[Any, Any]) -> NullableValidator:
        return NullableValidator(step=OrValidator(self, other.as_nullable()))


__all__ = ["NullableValidator"]
