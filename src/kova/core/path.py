# src/kova/core/path.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time, timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any

# Values that may legitimately repeat along a path without forming a cycle.
_SCALAR_TYPES = (
    str,
    bytes,
    int,
    float,
    complex,
    bool,
    Decimal,
    Fraction,
    date,
    time,
    timedelta,
    Enum,
)


@dataclass(frozen=True)
class Path:
    """
    @brief
    One node of the backward-linked location chain of a validation.

    @details
    Each descent into a field, a collection element or a map slot creates
    a new node whose parent is the enclosing node. `obj` holds the value
    entered at that node and is used only for cycle detection; it takes no
    part in equality.

    @params
        name : str
            Segment text (field name, or index/key plus marker).
        obj : Any
            Value entered at this node, if known.
        parent : Path | None
            Enclosing node.
    """

    name: str
    obj: Any = field(default=None, compare=False, repr=False)
    parent: Path | None = None

    @property
    def full_name(self) -> str:
        """Dot-joined non-empty segment names from the outermost node to this one."""
        names: list[str] = []
        node: Path | None = self
        while node is not None:
            if node.name:
                names.append(node.name)
            node = node.parent
        return ".".join(reversed(names))

    def contains_object(self, obj: Any) -> bool:
        """
        @brief
        Check whether `obj` was already entered on this chain.

        @details
        Comparison is by identity. None and immutable scalars never count,
        since equal literals are routinely shared between unrelated fields.
        """
        if obj is None or isinstance(obj, _SCALAR_TYPES):
            return False
        node: Path | None = self
        while node is not None:
            if node.obj is obj:
                return True
            node = node.parent
        return False

    def __str__(self) -> str:
        return self.full_name


__all__ = ["Path"]
