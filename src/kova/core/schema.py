# src/kova/core/schema.py
"""
@brief
Object schemas: per-field validation of composite values.

@details
A schema declares its rules in a `define(scope)` callable that is evaluated
each time the schema validates a value, never at construction time. Schemas
can therefore refer to each other (or to themselves) before the referenced
schema object exists, and recursion is driven by the input value only.

Cyclic data is handled as well: before descending into a field, the value is
looked up on the current path by identity. A value that is already being
validated further up is skipped instead of entered a second time.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from kova.core.context import Constraint, ConstraintContext, ValidationContext
from kova.core.results import Failure, Success, ValidationResult
from kova.core.validator import ConstraintValidator, Validator
from kova.errors import SchemaError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Getter = Callable[[Any], Any]
ValidatorRef = Validator[Any, Any] | Callable[[], Validator[Any, Any]]


def read_field(obj: Any, name: str) -> Any:
    """
    @brief
    Default field getter: mapping key for mappings, attribute otherwise.

    @raises
        SchemaError
            Raised if the field does not exist on `obj`.
    """
    if isinstance(obj, Mapping):
        try:
            return obj[name]
        except KeyError as e:
            raise SchemaError(
                message=f"Missing key '{name}' in {type(obj).__name__}",
                source="read_field",
                suggested_action="Check the field name or pass an explicit getter.",
            ) from e
    try:
        return getattr(obj, name)
    except AttributeError as e:
        raise SchemaError(
            message=f"'{type(obj).__name__}' has no field '{name}'",
            source="read_field",
            suggested_action="Check the field name or pass an explicit getter.",
        ) from e


def _resolve(ref: ValidatorRef, name: str) -> Validator[Any, Any]:
    # (1) Deferred reference, e.g. `lambda: user_schema`
    if not isinstance(ref, Validator) and callable(ref):
        ref = ref()
    # (2) Anything else is an authoring error
    if not isinstance(ref, Validator):
        raise SchemaError(
            message=f"Rule for field '{name}' is not a validator: {type(ref).__name__}",
            source="SchemaScope",
            suggested_action="Pass a Validator or a zero-argument callable returning one.",
        )
    return ref


# ----------------------------
# RULES
# ----------------------------
@dataclass(frozen=True)
class _FieldRule(Validator[Any, Any]):
    name: str
    select: Callable[[Any], Validator[Any, Any]]
    getter: Getter

    def execute(self, context: ValidationContext, obj: Any) -> ValidationResult[Any]:
        value = self.getter(obj)
        child = context.add_path_checked(self.name, value)
        if child is None:
            logger.debug("Skipping field '%s': value already on path", self.name)
            return Success(obj)
        result = self.select(obj).execute(child, value)
        if isinstance(result, Failure):
            return result
        return Success(obj)


class SchemaScope:
    """Collects the rules of one schema evaluation, in declaration order."""

    def __init__(self) -> None:
        self.fields: list[_FieldRule] = []
        self.constraints: list[Constraint[Any]] = []

    def field(self, name: str, validator: ValidatorRef, getter: Getter | None = None) -> None:
        """Validate the field `name` with `validator`."""
        resolved = _resolve(validator, name)
        self.fields.append(_FieldRule(name, lambda _obj: resolved, _getter(name, getter)))

    def choose(
        self,
        name: str,
        select: Callable[[Any], ValidatorRef],
        getter: Getter | None = None,
    ) -> None:
        """Validate the field `name` with a validator picked from the whole object."""
        self.fields.append(
            _FieldRule(name, lambda obj: _resolve(select(obj), name), _getter(name, getter))
        )

    def constrain(
        self, constraint_id: str, check: Callable[[ConstraintContext[Any]], Any]
    ) -> None:
        """Object-level constraint, evaluated after all field rules."""
        self.constraints.append(Constraint(constraint_id, check))


def _getter(name: str, getter: Getter | None) -> Getter:
    if getter is not None:
        return getter
    return lambda obj: read_field(obj, name)


# ----------------------------
# SCHEMA
# ----------------------------
class ObjectSchema(Validator[T, T]):
    """
    @brief
    Validator applying declared field rules and object constraints.

    @details
    Rules come either from the `define` callable passed to the constructor or
    from an overridden `define` method. Field rules run first, in declaration
    order, then object-level constraints. Messages accumulate unless the
    context is fail-fast. The root label is `name`, or the input's class
    name; it is only set by the outermost schema of a traversal.

    @params
        define : Callable[[SchemaScope], None] | None
            Rule declarations.
        name : str | None
            Root label override.
    """

    def __init__(
        self,
        define: Callable[[SchemaScope], None] | None = None,
        *,
        name: str | None = None,
    ):
        self._define = define
        self.name = name

    def define(self, scope: SchemaScope) -> None:
        if self._define is not None:
            self._define(scope)

    def rules(self) -> SchemaScope:
        scope = SchemaScope()
        self.define(scope)
        return scope

    def execute(self, context: ValidationContext, value: T) -> ValidationResult[T]:
        context = context.add_root(self.name or type(value).__name__, value)
        scope = self.rules()

        steps: list[Validator[Any, Any]] = [
            *scope.fields,
            *(ConstraintValidator(c) for c in scope.constraints),
        ]

        result: ValidationResult[Any] = Success(value)
        for step in steps:
            result = result + step.execute(context, value)
            if isinstance(result, Failure) and context.fail_fast:
                break
        if isinstance(result, Failure):
            return result
        return Success(value)

    def __repr__(self) -> str:
        return f"ObjectSchema(name={self.name!r})"


__all__ = ["ObjectSchema", "SchemaScope", "read_field"]
