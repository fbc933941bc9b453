# src/kova/messages/formatting.py
"""
@brief
Positional placeholder substitution for message templates.

@details
Templates use `{0}`, `{1}`, ... placeholders. Placeholders with no matching
argument are left untouched. Top-level numeric arguments are rendered with
the separators of the active locale; everything nested inside a list is
rendered plainly, so composite messages read as `[text, text]`.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal
from typing import Any

_PLACEHOLDER = re.compile(r"\{(\d+)\}")


@dataclass(frozen=True)
class NumberSymbols:
    """Locale separators used when rendering top-level numbers."""

    group: str = ","
    decimal: str = "."


def format_template(template: str, args: Sequence[Any], symbols: NumberSymbols) -> str:
    """
    @brief
    Substitute positional placeholders of `template` with rendered `args`.

    @params
        template : str
            Message pattern such as "must be at least {0} characters".
        args : Sequence[Any]
            Ordered arguments.
        symbols : NumberSymbols
            Separators of the locale the message is rendered for.

    @returns
        Rendered text.
    """

    def _substitute(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index >= len(args):
            return match.group(0)
        return render_arg(args[index], symbols)

    return _PLACEHOLDER.sub(_substitute, template)


def render_arg(value: Any, symbols: NumberSymbols) -> str:
    if isinstance(value, bool) or value is None:
        return render_plain(value)
    if isinstance(value, (int, float, Decimal)):
        return _format_number(value, symbols)
    return render_plain(value)


def render_plain(value: Any) -> str:
    # Late import: messages render their own text when used as arguments.
    from kova.messages.message import Message

    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Message):
        return value.text
    if isinstance(value, (date, time)):
        return value.isoformat()
    if isinstance(value, Mapping):
        inner = ", ".join(f"{render_plain(k)}={render_plain(v)}" for k, v in value.items())
        return "{" + inner + "}"
    if isinstance(value, (list, tuple, set, frozenset)):
        return "[" + ", ".join(render_plain(v) for v in value) + "]"
    return str(value)


def _format_number(value: int | float | Decimal, symbols: NumberSymbols) -> str:
    # (1) Integers: grouping only
    if isinstance(value, int):
        text = f"{value:,}"
    else:
        # (2) Non-integers: at most three fraction digits, trailing zeros dropped
        text = f"{value:,.3f}".rstrip("0").rstrip(".")
        if text in {"-0", ""}:
            text = "0"

    # (3) Swap separators through a placeholder so "," and "." never collide
    return text.replace(",", "\0").replace(".", symbols.decimal).replace("\0", symbols.group)


__all__ = ["NumberSymbols", "format_template", "render_arg", "render_plain"]
