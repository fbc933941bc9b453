# src/kova/factory.py
"""
@brief
Object factories: validate constructor arguments, then build the object.

@details
`ObjectFactory(User, number().min(1), string().not_blank())` pairs the
positional parameters of `User` with one validator each. `try_create(...)`
validates every argument one path segment below the root (the constructor's
qualified name), each under its parameter name, and calls the constructor
with the validated (possibly transformed) values only if all of them
succeeded. An optional object-level validator then checks the new instance.

Arguments may themselves be bound factories (`other_factory.bind(...)`);
the nested object is created under the argument's path and then checked by
the argument's validator, so messages read e.g. `name.first`.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar, cast

from kova.core.context import ValidationContext
from kova.core.results import Failure, Success, ValidationResult
from kova.core.validator import Validator
from kova.errors import KovaError, ValidationException

if TYPE_CHECKING:
    from kova.config.models import ValidationConfig

logger = logging.getLogger(__name__)

R = TypeVar("R")


def parameter_names(ctor: Callable[..., Any]) -> list[str]:
    """Positional parameter names of `ctor`; empty when it has no introspectable signature."""
    try:
        signature = inspect.signature(ctor)
    except (TypeError, ValueError):
        return []
    positional = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    return [p.name for p in signature.parameters.values() if p.kind in positional]


class ObjectFactory(Generic[R]):
    """
    @brief
    Validated construction of `R` from positional arguments.

    @details
    Accumulate mode validates every argument and reports all violations in
    argument order; fail-fast stops at the first failing argument. The
    constructor runs only after all arguments passed, and exceptions it
    raises propagate unchanged.

    @params
        ctor : Callable[..., R]
            Class or function building the object.
        *validators : Validator
            One validator per positional argument, in order.
        validator : Validator[R, R] | None
            Object-level validator applied to the constructed instance.
        name : str | None
            Root label; defaults to the constructor's qualified name.
    """

    def __init__(
        self,
        ctor: Callable[..., R],
        *validators: Validator[Any, Any],
        validator: Validator[R, R] | None = None,
        name: str | None = None,
    ):
        self.ctor = ctor
        self.validators = validators
        self.validator = validator
        self.name = name or getattr(ctor, "__qualname__", None) or repr(ctor)
        self.params = parameter_names(ctor)

    def param_name(self, index: int) -> str:
        if index < len(self.params):
            return self.params[index]
        return f"param{index}"

    # ---- execution ----
    def execute(self, context: ValidationContext, args: tuple[Any, ...]) -> ValidationResult[R]:
        if len(args) != len(self.validators):
            raise KovaError(
                message=f"{self.name} expects {len(self.validators)} argument(s), got {len(args)}",
                source="ObjectFactory",
                suggested_action="Pass exactly one argument per declared validator.",
            )
        context = context.add_root(self.name, self.ctor)

        result: ValidationResult[Any] = Success(None)
        values: list[Any] = []
        for i, (validator, arg) in enumerate(zip(self.validators, args)):
            # (1) Each argument one segment below the root, under its parameter name
            child = context.add_path(self.param_name(i), arg)
            arg_result = _execute_argument(child, validator, arg)

            # (2) Collect validated values for the constructor
            if isinstance(arg_result, Success):
                values.append(arg_result.value)
            result = result + arg_result
            if isinstance(result, Failure) and context.fail_fast:
                return result

        if isinstance(result, Failure):
            return result

        # (3) Build, then check the instance as a whole
        instance = self.ctor(*values)
        if self.validator is None:
            return Success(instance)
        return self.validator.execute(context, instance)

    def bind(self, *args: Any) -> BoundFactory[R]:
        """Arguments for a nested creation, to be passed as an argument of another factory."""
        return BoundFactory(self, args)

    # ---- entry points ----
    def try_create(
        self, *args: Any, config: ValidationConfig | None = None
    ) -> ValidationResult[R]:
        """
        @brief
        Validate `args` and build the object, returning the outcome without raising.

        @returns
            Success with the new instance, or Failure with the ordered messages.

        @raises
            KovaError
                Raised if the number of arguments does not match the validators.
        """
        result = self.execute(ValidationContext.from_config(config), args)
        if isinstance(result, Failure):
            logger.debug(
                "Creation of %s failed with %d message(s)", self.name, len(result.messages)
            )
        else:
            logger.debug("Created %s", self.name)
        return result

    def create(self, *args: Any, config: ValidationConfig | None = None) -> R:
        """Like `try_create`, but return the instance or raise ValidationException."""
        result = self.try_create(*args, config=config)
        if isinstance(result, Success):
            return cast(R, result.value)
        raise ValidationException(cast(Failure, result).messages)

    def __repr__(self) -> str:
        return f"ObjectFactory({self.name!r}, params={self.params})"


@dataclass(frozen=True)
class BoundFactory(Generic[R]):
    """A factory together with the arguments of one nested creation."""

    factory: ObjectFactory[R]
    args: tuple[Any, ...]

    def execute(self, context: ValidationContext) -> ValidationResult[R]:
        return self.factory.execute(context, self.args)


def _execute_argument(
    context: ValidationContext, validator: Validator[Any, Any], arg: Any
) -> ValidationResult[Any]:
    if not isinstance(arg, BoundFactory):
        return validator.execute(context, arg)
    created = arg.execute(context)
    if not isinstance(created, Success):
        return created
    return validator.execute(context, created.value)


__all__ = ["ObjectFactory", "BoundFactory", "parameter_names"]
