# src/kova/messages/message.py
from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any

from kova.core.path import Path
from kova.messages.formatting import render_plain
from kova.messages.resolver import MessageResolver, default_resolver


@dataclass(frozen=True, eq=False)
class Message(ABC):
    """
    @brief
    One reported violation, anchored at the root and path where it occurred.

    @details
    Messages are immutable. Two messages are equal when their constraint
    identifier, root, rendered path and rendered text are equal; the input
    value does not take part.

    @params
        constraint_id : str
            Identifier of the violated constraint (e.g. "kova.comparable.min").
        root : str
            Label of the outermost validated object, or "".
        path : Path
            Location of the violation below the root.
        input : Any
            Value the constraint was evaluated against.
    """

    constraint_id: str
    root: str = ""
    path: Path = field(default_factory=lambda: Path(""))
    input: Any = None

    @property
    @abstractmethod
    def text(self) -> str: ...

    @property
    def args(self) -> tuple[Any, ...]:
        return ()

    @property
    def descendants(self) -> list[Message]:
        """All messages nested in this message's arguments, depth-first."""
        return list(_walk(self.args))

    def with_details(self, input: Any, constraint_id: str) -> Message:
        return dataclasses.replace(self, input=input, constraint_id=constraint_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "constraint_id": self.constraint_id,
            "root": self.root,
            "path": self.path.full_name,
            "text": self.text,
            "args": [render_plain(a) for a in self.args],
        }

    def _key(self) -> tuple[str, str, str, str]:
        return (self.constraint_id, self.root, self.path.full_name, self.text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Message):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"Message(constraintId={self.constraint_id}, text='{self.text}', "
            f"root={self.root}, path={self.path.full_name}, input={self.input})"
        )

    __str__ = __repr__


@dataclass(frozen=True, eq=False, repr=False)
class TextMessage(Message):
    """Message with literal, already final text."""

    content: str = ""

    @property
    def text(self) -> str:
        return self.content


@dataclass(frozen=True, eq=False, repr=False)
class ResourceMessage(Message):
    """
    @brief
    Message whose text comes from a localized bundle template.

    @details
    The text is resolved on first access with the resolver and locale
    captured when the message was created, then cached. Arguments may
    themselves contain messages or lists of messages; they render as
    their own text.
    """

    key: str = ""
    arguments: tuple[Any, ...] = ()
    locale: str = "en"
    resolver: MessageResolver = field(default_factory=default_resolver, compare=False)

    @property
    def args(self) -> tuple[Any, ...]:
        return self.arguments

    @cached_property
    def text(self) -> str:  # type: ignore[override]
        return self.resolver.resolve(self.key or self.constraint_id, self.locale, self.arguments)


def _walk(value: Any) -> Iterator[Message]:
    if isinstance(value, Message):
        yield value
        yield from _walk(value.args)
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _walk(item)


__all__ = ["Message", "TextMessage", "ResourceMessage"]
