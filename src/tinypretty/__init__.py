"""Wadler-style pretty printing"""
from __future__ import annotations

from importlib import metadata

from .doc import (
    EMPTY,
    ColumnFn,
    Doc,
    column,
    concat,
    empty_line,
    flat_or_break,
    group,
    hardline,
    join,
    line_or_nil,
    line_or_space,
    nest,
    nil,
    softline,
    space,
    text,
    union,
)
from .options import (
    IndentKind,
    LineBreak,
    PrintOptions,
    char_width,
    display_width,
)
from .printer import print, print_to

# https://packaging.python.org/en/latest/guides/single-sourcing-package-version/
__version__ = metadata.version(__name__)

__all__ = (
    "ColumnFn",
    "Doc",
    "EMPTY",
    "IndentKind",
    "LineBreak",
    "PrintOptions",
    "char_width",
    "column",
    "concat",
    "display_width",
    "empty_line",
    "flat_or_break",
    "group",
    "hardline",
    "join",
    "line_or_nil",
    "line_or_space",
    "nest",
    "nil",
    "print",
    "print_to",
    "softline",
    "space",
    "text",
    "union",
)
