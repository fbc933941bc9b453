# src/kova/core/validator.py
"""
@brief
Validator abstraction and the combinators of the accumulation engine.

@details
A validator turns `(context, input)` into a `ValidationResult`. Composite
validators (`and_`, `or_`, `then`, `map`, `only_if`, `named`, nullable
adapters) are small immutable objects wrapping other validators, so every
validator may be shared freely between validations and threads.

Execution policy:
    - accumulate (default): every constraint of a sequence runs and all
      violations are collected in declaration order;
    - fail-fast: the first violation ends the sequence and nothing after it
      runs or logs.

Only validation failures become `Failure` results. Exceptions raised by
constraints, transforms or getters propagate to the caller, with the single
exception of `MessageException` raised inside `map`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, Generic, TypeVar, cast

from kova.core.context import Constraint, ConstraintContext, ValidationContext
from kova.core.results import Failure, Satisfied, Success, ValidationResult, Violated
from kova.errors import KovaError, MessageException, ValidationException
from kova.log import SatisfiedEntry, ViolatedEntry
from kova.messages.message import Message

if TYPE_CHECKING:
    from kova.config.models import ValidationConfig

logger = logging.getLogger(__name__)

In = TypeVar("In")
Out = TypeVar("Out")
T = TypeVar("T")


class _Missing:
    """Sentinel for "no default given"; None is a legitimate default."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def default_provider(
    default: Any, default_factory: Callable[[], Any] | None
) -> Callable[[], Any] | None:
    """Turn a literal default or a factory into a zero-argument supplier (None if neither)."""
    if default_factory is not None:
        return default_factory
    if default is MISSING:
        return None
    return lambda: default


# ----------------------------
# BASE CLASS
# ----------------------------
class Validator(Generic[In, Out]):
    """Base class of every validator."""

    def execute(self, context: ValidationContext, value: In) -> ValidationResult[Out]:
        raise NotImplementedError

    # -- entry points --------------------------------------------------
    def try_validate(
        self, value: In, config: ValidationConfig | None = None
    ) -> ValidationResult[Out]:
        """
        @brief
        Validate `value` and return the outcome without raising.

        @params
            value : In
                Input value.
            config : ValidationConfig | None
                Policy, logging hook, locale and message directories.

        @returns
            Success with the (possibly transformed) value, or Failure with the
            ordered messages.

        @raises
            KovaError / any exception raised by user code
                Programming errors are never turned into messages.
        """
        context = ValidationContext.from_config(config)
        result = self.execute(context, value)
        if isinstance(result, Failure):
            logger.debug("Validation failed with %d message(s)", len(result.messages))
        else:
            logger.debug("Validation succeeded")
        return result

    def validate(self, value: In, config: ValidationConfig | None = None) -> Out:
        """Like `try_validate`, but return the value or raise ValidationException."""
        result = self.try_validate(value, config)
        if isinstance(result, Success):
            return result.value
        raise ValidationException(cast(Failure, result).messages)

    # -- combinators ---------------------------------------------------
    def and_(self, other: Validator[In, Out]) -> Validator[In, Out]:
        return AndValidator(self, other)

    def or_(self, other: Validator[In, Out]) -> Validator[In, Out]:
        return OrValidator(self, other)

    def then(self, other: Validator[Out, T]) -> Validator[In, T]:
        return ThenValidator(self, other)

    def map(self, transform: Callable[[Out], T]) -> Validator[In, T]:
        return MapValidator(self, transform)

    def only_if(self, predicate: Callable[[In], bool]) -> Validator[In, Out]:
        return ConditionalValidator(self, predicate)

    def named(self, name: str) -> Validator[In, Out]:
        return NamedValidator(self, name)

    def constrain(
        self, constraint_id: str, check: Callable[[ConstraintContext[Out]], Any]
    ) -> Validator[In, Out]:
        return self.then(ConstraintValidator(Constraint(constraint_id, check)))

    def as_nullable(
        self, default: Any = MISSING, *, default_factory: Callable[[], Any] | None = None
    ) -> ElvisValidator:
        """
        @brief
        Accept None in addition to what this validator accepts.

        @details
        None short-circuits to Success with the default (or None when no
        default is given); this validator only ever sees non-null input.
        """
        return ElvisValidator(self, default_provider(default, default_factory))

    def __add__(self, other: Validator[In, Out]) -> Validator[In, Out]:
        return self.and_(other)

    def __and__(self, other: Validator[In, Out]) -> Validator[In, Out]:
        return self.and_(other)

    def __or__(self, other: Validator[In, Out]) -> Validator[In, Out]:
        return self.or_(other)


# ----------------------------
# LEAVES
# ----------------------------
class ConstraintValidator(Validator[T, T]):
    """
    @brief
    Evaluate one constraint and report it to the logging hook.

    @details
    Emits a SatisfiedEntry or ViolatedEntry for every evaluation. A violation
    becomes a single-message Failure anchored at the current root and path.
    """

    def __init__(self, constraint: Constraint[T]):
        self.constraint = constraint

    def execute(self, context: ValidationContext, value: T) -> ValidationResult[T]:
        cid = self.constraint.id
        constraint_context = ConstraintContext(value, cid, context)

        # (1) Run user check; exceptions propagate
        outcome = self.constraint.check(constraint_context)

        # (2) Satisfied: log and pass value through
        if isinstance(outcome, Satisfied):
            context.log(
                lambda: SatisfiedEntry(cid, context.root, context.current_path.full_name, value)
            )
            return Success(value)

        if not isinstance(outcome, Violated):
            raise KovaError(
                message=(
                    f"Constraint returned {type(outcome).__name__}, "
                    "expected Satisfied or Violated"
                ),
                source=f"constraint {cid}",
                suggested_action="Return c.satisfies(...) or a ConstraintResult from the check.",
            )

        # (3) Violated: normalise to a Message anchored at this constraint
        raw = outcome.message
        if isinstance(raw, Message):
            message = raw.with_details(value, cid)
        else:
            message = constraint_context.text(raw)
        context.log(
            lambda: ViolatedEntry(
                cid, context.root, context.current_path.full_name, value, message.args
            )
        )
        return Failure((message,))

    def __repr__(self) -> str:
        return f"ConstraintValidator({self.constraint.id!r})"


class IdentityValidator(Validator[T, T]):
    """
    @brief
    Chain of constraints on one value, built by repeated method calls.

    @details
    Each chaining call returns a new instance of the same class holding the
    previous chain and one more step. Steps run in declaration order on the
    same input and accumulate, unless the context is fail-fast. An instance
    with no steps succeeds without logging anything.
    """

    def __init__(
        self,
        prev: IdentityValidator[T] | None = None,
        step: Validator[T, T] | None = None,
    ):
        self.prev = prev
        self.step = step

    def steps(self) -> list[Validator[T, T]]:
        """Steps of the chain in declaration order."""
        collected: list[Validator[T, T]] = []
        node: IdentityValidator[T] | None = self
        while node is not None:
            if node.step is not None:
                collected.append(node.step)
            node = node.prev
        collected.reverse()
        return collected

    def execute(self, context: ValidationContext, value: T) -> ValidationResult[T]:
        result: ValidationResult[T] = Success(value)
        for step in self.steps():
            if isinstance(result, Failure) and context.fail_fast:
                break
            result = result + step.execute(context, value)
        return result

    def chain(self, step: Validator[T, T]):
        return type(self)(prev=self, step=step)

    def constrain(self, constraint_id: str, check: Callable[[ConstraintContext[T]], Any]):
        return self.chain(ConstraintValidator(Constraint(constraint_id, check)))

    # -- generic constraints -------------------------------------------
    def literal(self, expected: T):
        return self.constrain(
            "kova.literal.single",
            lambda c: c.satisfies(c.input == expected, lambda: c.resource(expected)),
        )

    def one_of(self, values: Iterable[T]):
        allowed = list(values)
        return self.constrain(
            "kova.literal.list",
            lambda c: c.satisfies(c.input in allowed, lambda: c.resource(allowed)),
        )


# ----------------------------
# COMBINATORS
# ----------------------------
class AndValidator(Validator[In, Out]):
    """Both sides on the same input; the right-hand value wins."""

    def __init__(self, left: Validator[In, Out], right: Validator[In, Out]):
        self.left = left
        self.right = right

    def execute(self, context: ValidationContext, value: In) -> ValidationResult[Out]:
        first = self.left.execute(context, value)
        if isinstance(first, Failure) and context.fail_fast:
            return first
        return first + self.right.execute(context, value)


class OrValidator(Validator[In, Out]):
    """
    @brief
    First succeeding alternative wins.

    @details
    A failed first alternative still leaves its entries in the log. When both
    alternatives fail, the result holds one `kova.or` message whose two
    arguments are the message lists of each alternative.
    """

    constraint_id = "kova.or"

    def __init__(self, left: Validator[In, Out], right: Validator[In, Out]):
        self.left = left
        self.right = right

    def execute(self, context: ValidationContext, value: In) -> ValidationResult[Out]:
        first = self.left.execute(context, value)
        if isinstance(first, Success):
            return first
        second = self.right.execute(context, value)
        if isinstance(second, Success):
            return second
        message = ConstraintContext(value, self.constraint_id, context).resource(
            list(cast(Failure, first).messages), list(cast(Failure, second).messages)
        )
        return Failure((message,))


class ThenValidator(Validator[In, Out]):
    """Feed the output of `left` into `right`; stop at the first failure."""

    def __init__(self, left: Validator[In, Any], right: Validator[Any, Out]):
        self.left = left
        self.right = right

    def execute(self, context: ValidationContext, value: In) -> ValidationResult[Out]:
        first = self.left.execute(context, value)
        if not isinstance(first, Success):
            return first
        return self.right.execute(context, first.value)


class MapValidator(Validator[In, Out]):
    """Transform the successful value; MessageException becomes a Failure."""

    def __init__(self, validator: Validator[In, Any], transform: Callable[[Any], Out]):
        self.validator = validator
        self.transform = transform

    def execute(self, context: ValidationContext, value: In) -> ValidationResult[Out]:
        result = self.validator.execute(context, value)
        if not isinstance(result, Success):
            return result
        try:
            return Success(self.transform(result.value))
        except MessageException as e:
            return Failure((_message_from(e, context, result.value),))


def _message_from(e: MessageException, context: ValidationContext, value: Any) -> Message:
    constraint_context = ConstraintContext(value, e.constraint_id, context)
    if isinstance(e.message, Message):
        return e.message
    if isinstance(e.message, str):
        return constraint_context.text(e.message)
    return constraint_context.resource(*e.message_args)


class ConditionalValidator(Validator[T, T]):
    """Run the wrapped validator only when the predicate holds."""

    def __init__(self, validator: Validator[T, T], predicate: Callable[[T], bool]):
        self.validator = validator
        self.predicate = predicate

    def execute(self, context: ValidationContext, value: T) -> ValidationResult[T]:
        if not self.predicate(value):
            return Success(value)
        return self.validator.execute(context, value)


class NamedValidator(Validator[In, Out]):
    """Run the wrapped validator one path segment deeper."""

    def __init__(self, validator: Validator[In, Out], name: str):
        self.validator = validator
        self.name = name

    def execute(self, context: ValidationContext, value: In) -> ValidationResult[Out]:
        return self.validator.execute(context.add_path(self.name, value), value)


class ElvisValidator(Validator[Any, Any]):
    """
    @brief
    Nullable adapter substituting a default for None.

    @details
    On None the result is Success(default) (Success(None) without a default)
    and the wrapped validator does not run. `and_` / `or_` combine the
    wrapped validators and keep the result an elvis validator with the same
    default, so in `nullable(default=0).and_(number().min(3)).and_(...)` no
    step ever evaluates None.
    """

    def __init__(self, validator: Validator[Any, Any], provide: Callable[[], Any] | None = None):
        self.validator = validator
        self.provide = provide

    def execute(self, context: ValidationContext, value: Any) -> ValidationResult[Any]:
        if value is None:
            return Success(None if self.provide is None else self.provide())
        return self.validator.execute(context, value)

    def and_(self, other: Validator[Any, Any]) -> ElvisValidator:
        return ElvisValidator(AndValidator(self.validator, other), self.provide)

    def or_(self, other: Validator[Any, Any]) -> ElvisValidator:
        return ElvisValidator(OrValidator(self.validator, other), self.provide)


__all__ = [
    "MISSING",
    "Validator",
    "ConstraintValidator",
    "IdentityValidator",
    "AndValidator",
    "OrValidator",
    "ThenValidator",
    "MapValidator",
    "ConditionalValidator",
    "NamedValidator",
    "ElvisValidator",
]
