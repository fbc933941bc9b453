# src/kova/errors.py
from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from kova.messages.message import Message


class KovaError(Exception):
    """Base class for all structured Kova exceptions."""

    def __init__(
        self, message: str, source: str | None = None, suggested_action: str | None = None
    ):
        super().__init__(message)
        self.timestamp = datetime.now(timezone.utc).isoformat()
        self.error_type = self.__class__.__name__
        self.source = source or "unknown"
        self.suggested_action = suggested_action

    def __str__(self) -> str:
        base = f"[{self.error_type}] {self.args[0]}"
        if self.source:
            base += f" (source={self.source})"
        if self.suggested_action:
            base += f" | action: {self.suggested_action}"
        return base


class ConfigError(KovaError):
    """Invalid or missing configuration (kova.yaml)"""


class SchemaError(KovaError):
    """Malformed object schema or unreadable field"""


class MissingResourceError(KovaError):
    """No message bundle at any fallback level contains the key"""

    def __init__(self, key: str, locale: str, source: str | None = None):
        super().__init__(
            message=f"Can't find resource for key '{key}' (locale={locale})",
            source=source,
            suggested_action="Add the key to a kova.yaml bundle or to the built-in defaults.",
        )
        self.key = key
        self.locale = locale


class ValidationException(Exception):
    """
    @brief
    Raised by `Validator.validate` when the input does not satisfy the validator.

    @details
    Carries the ordered messages of the underlying Failure. It reports bad
    data, not a bug, and therefore is not a KovaError.
    """

    def __init__(self, messages: Sequence[Message]):
        self.messages = tuple(messages)
        super().__init__("; ".join(m.text for m in self.messages))


class MessageException(Exception):
    """
    @brief
    Raised from a `map` transform to report a validation message.

    @details
    The transform has no access to the validation context, so the message
    may be given in three forms and is anchored by the map validator:
        - a finished Message, used as is;
        - literal text, wrapped into a text message;
        - nothing, in which case a bundle message keyed by
          `constraint_id` with `args` is created.
    """

    def __init__(
        self,
        message: Message | str | None = None,
        *,
        constraint_id: str = "kova.map",
        args: Sequence[Any] = (),
    ):
        super().__init__(constraint_id if message is None else str(message))
        self.message = message
        self.constraint_id = constraint_id
        self.message_args = tuple(args)


__all__ = [
    "KovaError",
    "ConfigError",
    "SchemaError",
    "MissingResourceError",
    "ValidationException",
    "MessageException",
]
