"""``tinypretty.doc``: Documents
===============================

A document is an immutable tree that describes *what* to print and *where* a
line may be broken. Documents are built with the functions of this module and
rendered with :func:`tinypretty.print`.

Sub-documents can be shared freely between several parents: nodes are never
mutated once created.

"""

from __future__ import annotations

import dataclasses
from typing import Iterable, Protocol

__all__ = (
    "Doc",
    "ColumnFn",
    "EMPTY",
    "nil",
    "text",
    "space",
    "hardline",
    "empty_line",
    "softline",
    "line_or_space",
    "line_or_nil",
    "flat_or_break",
    "union",
    "column",
    "group",
    "concat",
    "nest",
    "join",
)


# doc =
# | DocNil
# | DocCons of doc * doc
# | DocText of string
# | DocHardLine
# | DocEmptyLine
# | DocBreak of int * int
# | DocNest of int * doc
# | DocGroup of doc list
# | DocList of doc list
# | DocAlt of doc * doc
# | DocUnion of doc * doc
# | DocColumn of (int -> doc)


class Doc:
    """Type used to represent documents

    The constructors should never be called directly, use the functions of
    this module instead.

    Documents can be concatenated via the ``+`` operator.
    """

    __slots__ = ()

    def __add__(self, other: Doc) -> Doc:
        if not isinstance(other, Doc):
            return NotImplemented
        return DocCons(self, other)

    def group(self) -> Doc:
        "Same as :func:`group`"
        return group(self)

    def nest(self, indentation: int) -> Doc:
        "Same as :func:`nest`"
        return nest(indentation, self)

    def to_string(self, width: int = 80) -> str:
        """Render this document to a string

        args:
          width(int):
        """
        from .options import PrintOptions
        from .printer import print as print_doc

        return print_doc(self, PrintOptions(width=width))


@dataclasses.dataclass(frozen=True, slots=True)
class DocNil(Doc):
    pass


# NOTE: `+` builds a cons cell instead of a flat tuple so that accumulating a
# document one piece at a time (`acc += doc`) stays linear. The printer
# unfolds the cells with its work stack.
@dataclasses.dataclass(frozen=True, slots=True)
class DocCons(Doc):
    left: Doc
    right: Doc


@dataclasses.dataclass(frozen=True, slots=True)
class DocText(Doc):
    text: str


@dataclasses.dataclass(frozen=True, slots=True)
class DocHardLine(Doc):
    pass


@dataclasses.dataclass(frozen=True, slots=True)
class DocEmptyLine(Doc):
    pass


@dataclasses.dataclass(frozen=True, slots=True)
class DocBreak(Doc):
    #: Number of spaces printed when the break is rendered flat.
    spaces: int
    #: Extra indentation applied after the newline when the break is taken.
    offset: int


@dataclasses.dataclass(frozen=True, slots=True)
class DocNest(Doc):
    indent: int
    doc: Doc


@dataclasses.dataclass(frozen=True, slots=True)
class DocGroup(Doc):
    docs: tuple[Doc, ...]


@dataclasses.dataclass(frozen=True, slots=True)
class DocList(Doc):
    docs: tuple[Doc, ...]


@dataclasses.dataclass(frozen=True, slots=True)
class DocAlt(Doc):
    flat: Doc
    brk: Doc


@dataclasses.dataclass(frozen=True, slots=True)
class DocUnion(Doc):
    attempt: Doc
    alternate: Doc


class ColumnFn(Protocol):
    def __call__(self, column: int) -> Doc:
        ...  # pragma: no cover


@dataclasses.dataclass(frozen=True, slots=True)
class DocColumn(Doc):
    fn: ColumnFn


#: The empty document
EMPTY: Doc = DocNil()

_SPACE: Doc = DocText(" ")
_HARDLINE: Doc = DocHardLine()
_EMPTY_LINE: Doc = DocEmptyLine()
_LINE_OR_SPACE: Doc = DocBreak(1, 0)
_LINE_OR_NIL: Doc = DocBreak(0, 0)
_SOFTLINE: Doc = DocGroup((_LINE_OR_SPACE,))


def nil() -> Doc:
    "The empty document, prints nothing."
    return EMPTY


def text(s: str) -> Doc:
    """
    Turns a string into a document

    The string **must not** contain line breaks; use :func:`hardline` instead.

    Args:
      s(str)

    Returns:
      Doc:
    """
    if not isinstance(s, str):
        raise TypeError(
            f"Got {s!r} of type {type(s).__name__}, expected 'str'"
        )
    if "\n" in s or "\r" in s:
        raise ValueError(f"Text cannot contain line breaks: {s!r}")
    return DocText(s)


def space() -> Doc:
    return _SPACE


def hardline() -> Doc:
    """Always print a line break followed by the current indentation.

    A group that contains a hard line can never be printed flat.
    """
    return _HARDLINE


def empty_line() -> Doc:
    """Print a line break without any indentation.

    Useful to leave a blank line between two indented blocks without leaving
    trailing whitespace behind.
    """
    return _EMPTY_LINE


def softline() -> Doc:
    """A space if the next item still fits on the current line, a line break
    otherwise.

    Unlike :func:`line_or_space` each soft line makes its own decision, so
    consecutive items are packed onto a line until it's full.
    """
    return _SOFTLINE


def line_or_space() -> Doc:
    """A space if the enclosing group fits on one line, a line break otherwise.

    Outside of any group this is always a line break.
    """
    return _LINE_OR_SPACE


def line_or_nil() -> Doc:
    """Nothing if the enclosing group fits on one line, a line break otherwise.

    Outside of any group this is always a line break.
    """
    return _LINE_OR_NIL


def flat_or_break(flat: Doc, brk: Doc) -> Doc:
    """Print ``flat`` if the enclosing group is flat, ``brk`` otherwise.

    Args:
      flat(Doc):
      brk(Doc):

    Returns:
      Doc:
    """
    return DocAlt(flat, brk)


def union(attempt: Doc, alternate: Doc) -> Doc:
    """Try to print ``attempt``; if any of its lines ends up too wide print
    ``alternate`` instead.

    The choice doesn't depend on the enclosing group: ``attempt`` is actually
    rendered and thrown away if it doesn't fit.

    Args:
      attempt(Doc):
      alternate(Doc):

    Returns:
      Doc:
    """
    return DocUnion(attempt, alternate)


def column(fn: ColumnFn) -> Doc:
    """A document computed from the column it is printed at.

    ``fn`` is called once, when the printer reaches this node, with the
    current column.

    Args:
      fn(Callable[[int], Doc]):

    Returns:
      Doc:
    """
    return DocColumn(fn)


def group(doc: Doc) -> Doc:
    """
    Mark the document as a group: the breaks it contains are either all
    printed as spaces or all turned into newlines.

    Args:
      doc(Doc):

    Returns
      Doc:
    """
    match doc:
        case DocList() | DocCons():
            return DocGroup(_flatten(doc))
        case DocGroup():
            return doc
    return DocGroup((doc,))


def _flatten(doc: Doc) -> tuple[Doc, ...]:
    "The pieces of a concatenation, in order"
    acc: list[Doc] = []
    docs = [doc]
    while docs:
        match docs.pop():
            case DocCons(left, right):
                docs.append(right)
                docs.append(left)
            case DocList(xs):
                docs.extend(reversed(xs))
            case x:
                acc.append(x)
    return tuple(acc)


def concat(docs: Iterable[Doc]) -> Doc:
    "Concatenate several documents"
    return DocList(tuple(docs))


def nest(indentation: int, doc: Doc) -> Doc:
    """Increase the indentation level for a document.

    Indentation only shows after line breaks: nesting a text has no visible
    effect.

    Args:
      indentation(int):
      doc(Doc):

    Returns:
      Doc:
    """
    match doc:
        case DocBreak(spaces, offset):
            return DocBreak(spaces, offset + indentation)
    return DocNest(indentation, doc)


def join(sep: Doc, docs: Iterable[Doc]) -> Doc:
    "Concatenate ``docs`` with ``sep`` in between each of them"
    acc: list[Doc] = []
    first = True
    for doc in docs:
        if not first:
            acc.append(sep)
        else:
            first = False
        acc.append(doc)
    return DocList(tuple(acc))
