"""
``tinypretty.literal``: Python literals
=======================================

Build documents for python values that can be written as literals (numbers,
strings, containers...). The output is valid python and round-trips through
:func:`ast.literal_eval` (except for non-finite floats).

"""

from __future__ import annotations

import math
from typing import Any, Iterable

from . import doc as pretty
from .options import PrintOptions
from .printer import print as print_doc

__all__ = ("LiteralPrinter", "literal", "pformat")

COL_SEP = pretty.text(",") + pretty.line_or_space()
TRAILING_COMMA = pretty.flat_or_break(pretty.nil(), pretty.text(","))


class LiteralPrinter:
    "Convert a value into a multiline document"

    indent: int
    _active: set[int]

    def __init__(self, indent: int = 4) -> None:
        self.indent = indent
        # Ids of the containers we are currently in; used to detect cycles.
        self._active = set()

    def format_list(
        self,
        docs: Iterable[pretty.Doc],
        *,
        opar: str = "(",
        cpar: str = ")",
        force_comma: bool = False,
    ) -> pretty.Doc:
        items = list(docs)
        if not items:
            return pretty.text(opar + cpar)
        body = pretty.line_or_nil() + pretty.join(COL_SEP, items)
        if force_comma:
            body += pretty.text(",")
        else:
            body += TRAILING_COMMA
        return pretty.group(
            pretty.text(opar)
            + pretty.nest(self.indent, body)
            + pretty.line_or_nil()
            + pretty.text(cpar)
        )

    def constant(
        self, constant: int | float | complex | None | str | bytes | bool
    ) -> pretty.Doc:
        if isinstance(constant, float) and not math.isfinite(constant):
            if math.isnan(constant):
                return pretty.text('float("nan")')
            if constant > 0:
                return pretty.text('float("inf")')
            return pretty.text('-float("inf")')
        if (
            isinstance(constant, str)
            and len(constant) > 60
            and "\n" in constant
        ):
            lines = [
                pretty.text(repr(line))
                for line in constant.splitlines(keepends=True)
            ]
            return (
                pretty.text("(")
                + pretty.nest(
                    self.indent,
                    pretty.hardline() + pretty.join(pretty.hardline(), lines),
                )
                + pretty.hardline()
                + pretty.text(")")
            )
        return pretty.text(repr(constant))

    def __call__(self, value: Any) -> pretty.Doc:
        match value:
            case None | bool() | int() | float() | complex() | str() | bytes():
                return self.constant(value)
            case list() | tuple() | dict() | set() | frozenset():
                pass
            case _:
                raise TypeError(f"Type {type(value).__name__!r} not supported")
        key = id(value)
        if key in self._active:
            return pretty.text(_recursive_repr(value))
        self._active.add(key)
        try:
            return self._container(value)
        finally:
            self._active.discard(key)

    def _container(
        self, value: list | tuple | dict | set | frozenset
    ) -> pretty.Doc:
        match value:
            case list():
                return self.format_list(map(self, value), opar="[", cpar="]")
            case tuple():
                return self.format_list(
                    map(self, value), force_comma=len(value) == 1
                )
            case dict():
                return self.format_list(
                    (
                        self(k) + pretty.text(": ") + self(v)
                        for k, v in value.items()
                    ),
                    opar="{",
                    cpar="}",
                )
            case frozenset():
                if not value:
                    return pretty.text("frozenset()")
                return self.format_list(
                    map(self, _sorted(value)), opar="frozenset({", cpar="})"
                )
            case set():
                if not value:
                    return pretty.text("set()")
                return self.format_list(
                    map(self, _sorted(value)), opar="{", cpar="}"
                )
        assert False, value  # pragma: no cover


def _sorted(values: set | frozenset) -> list:
    try:
        return sorted(values)
    except TypeError:
        return list(values)


def _recursive_repr(value: Any) -> str:
    if isinstance(value, list):
        return "[...]"
    if isinstance(value, tuple):
        return "(...)"
    return "{...}"


def literal(value: Any, indent: int = 4) -> pretty.Doc:
    """Build the document for a python value.

    Args:
      value: A literal value; containers can be nested.
      indent(int): Indentation for the content of containers that are broken
        over several lines.

    Returns:
      Doc:

    Raises:
      TypeError: if ``value`` contains a value that has no literal syntax.
    """
    return LiteralPrinter(indent=indent)(value)


def pformat(
    value: Any, options: PrintOptions | None = None, indent: int = 4
) -> str:
    "Pretty print a python value to a string."
    return print_doc(literal(value, indent=indent), options)
