# src/kova/constraints/strings.py
from __future__ import annotations

import re

from kova.core.validator import IdentityValidator, Validator
from kova.errors import MessageException


def _parse_int(value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as e:
        raise MessageException(constraint_id="kova.string.int") from e


class StringValidator(IdentityValidator[str]):
    """Length, content and pattern constraints for strings."""

    def min_length(self, length: int):
        return self.constrain(
            "kova.charSequence.min",
            lambda c: c.satisfies(len(c.input) >= length, lambda: c.resource(length)),
        )

    def max_length(self, length: int):
        return self.constrain(
            "kova.charSequence.max",
            lambda c: c.satisfies(len(c.input) <= length, lambda: c.resource(length)),
        )

    def length(self, length: int):
        return self.constrain(
            "kova.charSequence.length",
            lambda c: c.satisfies(len(c.input) == length, lambda: c.resource(length)),
        )

    def not_blank(self):
        return self.constrain(
            "kova.charSequence.notBlank", lambda c: c.satisfies(c.input.strip() != "", c.resource)
        )

    def blank(self):
        return self.constrain(
            "kova.charSequence.blank", lambda c: c.satisfies(c.input.strip() == "", c.resource)
        )

    def not_empty(self):
        return self.constrain(
            "kova.charSequence.notEmpty", lambda c: c.satisfies(len(c.input) > 0, c.resource)
        )

    def empty(self):
        return self.constrain(
            "kova.charSequence.empty", lambda c: c.satisfies(len(c.input) == 0, c.resource)
        )

    def starts_with(self, prefix: str):
        return self.constrain(
            "kova.charSequence.startsWith",
            lambda c: c.satisfies(c.input.startswith(prefix), lambda: c.resource(prefix)),
        )

    def ends_with(self, suffix: str):
        return self.constrain(
            "kova.charSequence.endsWith",
            lambda c: c.satisfies(c.input.endswith(suffix), lambda: c.resource(suffix)),
        )

    def contains(self, infix: str):
        return self.constrain(
            "kova.charSequence.contains",
            lambda c: c.satisfies(infix in c.input, lambda: c.resource(infix)),
        )

    def matches(self, pattern: str | re.Pattern[str]):
        compiled = re.compile(pattern)
        return self.constrain(
            "kova.charSequence.matches",
            lambda c: c.satisfies(
                compiled.fullmatch(c.input) is not None, lambda: c.resource(compiled.pattern)
            ),
        )

    def to_int(self) -> Validator[str, int]:
        """Convert to int after the chain succeeds; unparsable text fails with kova.string.int."""
        return self.map(_parse_int)


__all__ = ["StringValidator"]
