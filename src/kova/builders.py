# src/kova/builders.py
"""
@brief
Entry points for building validators.

@details
Each builder returns an empty chain of the matching capability class. An
empty chain accepts every input and logs nothing; constraints are added by
chaining, e.g. `string().not_blank().max_length(10)`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from kova.constraints import (
    CollectionValidator,
    ComparableValidator,
    MappingValidator,
    NumberValidator,
    StringValidator,
)
from kova.core.nullable import NullableValidator
from kova.core.validator import MISSING, ElvisValidator, IdentityValidator


def generic() -> IdentityValidator[Any]:
    return IdentityValidator()


def comparable() -> ComparableValidator:
    return ComparableValidator()


def number() -> NumberValidator:
    return NumberValidator()


def string() -> StringValidator:
    return StringValidator()


def collection() -> CollectionValidator:
    return CollectionValidator()


def mapping() -> MappingValidator:
    return MappingValidator()


def nullable(
    default: Any = MISSING, *, default_factory: Callable[[], Any] | None = None
) -> NullableValidator | ElvisValidator:
    """
    @brief
    Validator for optional values.

    @details
    Without a default, returns a NullableValidator accepting None. With a
    literal `default` or a `default_factory`, returns an elvis validator that
    yields the default for None and makes validators combined with it skip
    None.
    """
    base = NullableValidator()
    if default is MISSING and default_factory is None:
        return base
    return base.with_default(default, default_factory=default_factory)


__all__ = ["generic", "comparable", "number", "string", "collection", "mapping", "nullable"]
