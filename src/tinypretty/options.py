"""Rendering options"""

from __future__ import annotations

import dataclasses
import enum
from typing import Callable

import wcwidth

__all__ = (
    "LineBreak",
    "IndentKind",
    "PrintOptions",
    "char_width",
    "display_width",
)


class LineBreak(enum.Enum):
    "The sequence written for every line break"
    LF = "\n"
    CRLF = "\r\n"


class IndentKind(enum.Enum):
    "What to fill the indentation with"
    SPACE = enum.auto()
    #: As many tabs as possible (one per ``tab_size`` columns) then spaces for
    #: the remainder.
    TAB = enum.auto()


def char_width(s: str) -> int:
    "Number of code points in ``s``"
    return len(s)


def display_width(s: str) -> int:
    """Number of terminal cells ``s`` occupies.

    Wide east asian characters take two cells and combining characters none.
    Non printable characters are counted as zero width.
    """
    width = wcwidth.wcswidth(s)
    if width >= 0:
        return width
    return sum(max(wcwidth.wcwidth(c), 0) for c in s)


@dataclasses.dataclass(frozen=True, slots=True)
class PrintOptions:
    """Controls how documents are rendered.

    Attributes:
      line_break(LineBreak): Line break written for every newline.
      indent_kind(IndentKind): Whether to indent with spaces or tabs.
      width(int): The column the printer tries not to go over. This is a
        budget, not a hard limit: text that cannot be broken still overflows.
      tab_size(int): Number of columns a tab stands for when ``indent_kind``
        is :attr:`IndentKind.TAB`. It's not the indentation step, but it
        should usually be the same as the step used by the caller. Must be
        at least ``1``.
      measure(Callable[[str], int]): How wide a piece of text is.
        :func:`display_width` is better suited to CJK text and emojis.
    """

    line_break: LineBreak = LineBreak.LF
    indent_kind: IndentKind = IndentKind.SPACE
    width: int = 80
    tab_size: int = 2
    measure: Callable[[str], int] = char_width

    def indentation(self, indent: int) -> str:
        "The padding written after a line break for ``indent`` columns."
        if self.indent_kind is IndentKind.SPACE:
            return " " * indent
        tabs, spaces = divmod(indent, self.tab_size)
        return "\t" * tabs + " " * spaces
