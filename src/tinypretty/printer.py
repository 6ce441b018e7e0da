"""``tinypretty.printer``: Rendering documents
==========================================

This is the algorithm from Philip Wadler's "A prettier printer" [`pdf
<https://homepages.inf.ed.ac.uk/wadler/papers/prettier/prettier.pdf>`_] in
the imperative style popularised by prettier: the document is walked
left-to-right with an explicit stack of ``(indent, mode, doc)`` tasks, and
every time a group is reached in break mode we look ahead to decide whether it
can be printed flat.

"""

# The whole printer is written as loops over explicit stacks rather than
# recursive functions: documents built by formatters can be much deeper than
# CPython's recursion limit. The only recursion is for `union` attempts, one
# level per nested union.

from __future__ import annotations

import enum
import io
from typing import Callable, Iterator, Protocol

from .doc import (
    Doc,
    DocAlt,
    DocBreak,
    DocColumn,
    DocCons,
    DocEmptyLine,
    DocGroup,
    DocHardLine,
    DocList,
    DocNest,
    DocNil,
    DocText,
    DocUnion,
)
from .options import PrintOptions

__all__ = ("Mode", "Printer", "fits", "print", "print_to")


class Mode(enum.Enum):
    "How the breaks of a sub-document are rendered"
    FLAT = enum.auto()
    BREAK = enum.auto()


Task = tuple[int, Mode, Doc]


class Sink(Protocol):
    def write(self, s: str, /) -> object:
        ...  # pragma: no cover


# let rec fits w = function
#     | _ when w < 0                   -> false
#     | []                             -> true
#     | (i,m,DocNil)              :: z -> fits w z
#     | (i,m,DocCons(x,y))        :: z -> fits w ((i,m,x)::(i,m,y)::z)
#     | (i,m,DocList(xs))         :: z -> fits w ((i,m,xs) @ z)
#     | (i,m,DocGroup(xs))        :: z -> fits w ((i,m,xs) @ z)
#     | (i,m,DocNest(j,x))        :: z -> fits w ((i+j,m,x)::z)
#     | (i,m,DocText(s))          :: z -> fits (w - strlen s) z
#     | (i,Flat, DocBreak(s,_))   :: z -> fits (w - s) z
#     | (i,Break,DocBreak(_,_))   :: z -> true
#     | (i,Flat, DocHardLine)     :: z -> false
#     | (i,Break,DocHardLine)     :: z -> true
#     | (i,m,DocEmptyLine)        :: z -> fits w z
#     | (i,m,DocColumn(_))        :: z -> fits w z
#     | (i,Flat, DocAlt(x,_))     :: z -> fits w ((i,Flat,x)::z)
#     | (i,Break,DocAlt(_,y))     :: z -> fits w ((i,Break,y)::z)
#     | (i,Flat, DocUnion(x,_))   :: z -> fits w ((i,Flat,x)::z)
#     | (i,Break,DocUnion(_,y))   :: z -> fits w ((i,Break,y)::z)
def fits(
    tasks: list[Task],
    rest: Iterator[Task],
    cols: int,
    width: int,
    measure: Callable[[str], int] = len,
) -> bool:
    """Check whether the content ahead can be put on the current line.

    ``tasks`` is consumed like the printer's stack (last element first), then
    ``rest`` is read in order. We stop at the first break that would be
    rendered as a newline: everything after that goes on a fresh line so it
    cannot make the current line any longer.

    Args:
      tasks(list): Stack of tasks to try first. It is consumed.
      rest(Iterator): What is printed after ``tasks``, with the mode it was
        already assigned.
      cols(int): The current column.
      width(int): The maximum width.
      measure(Callable[[str], int]): Width of a text.

    Returns:
      bool:
    """
    while True:
        if tasks:
            indent, mode, doc = tasks.pop()
        else:
            nxt = next(rest, None)
            if nxt is None:
                return True
            indent, mode, doc = nxt
        match doc:
            case DocNil() | DocEmptyLine() | DocColumn():
                pass
            case DocText(s):
                cols += measure(s)
            case DocBreak(spaces, _):
                if mode is Mode.BREAK:
                    return True
                cols += spaces
            case DocHardLine():
                return mode is Mode.BREAK
            case DocCons(x, y):
                tasks.append((indent, mode, y))
                tasks.append((indent, mode, x))
            case DocNest(j, x):
                tasks.append((indent + j, mode, x))
            case DocGroup(docs) | DocList(docs):
                tasks.extend((indent, mode, x) for x in reversed(docs))
            case DocAlt(flat, brk):
                tasks.append((indent, mode, flat if mode is Mode.FLAT else brk))
            case DocUnion(attempt, alternate):
                tasks.append(
                    (indent, mode, attempt if mode is Mode.FLAT else alternate)
                )
            case _:  # pragma: no cover
                raise TypeError(f"Not a document: {doc!r}")
        if cols > width:
            return False


class Printer:
    """Renders documents for a given set of options.

    A printer keeps track of the current column, a new one should be created
    for every document.
    """

    __slots__ = ("options", "cols")

    options: PrintOptions
    cols: int

    def __init__(self, options: PrintOptions) -> None:
        if options.tab_size < 1:
            raise ValueError(
                f"tab_size must be a positive integer, got {options.tab_size!r}"
            )
        self.options = options
        self.cols = 0

    def print_to(self, task: Task, out: Sink) -> bool:
        """Write the document of ``task`` to ``out``.

        Returns:
          bool: ``False`` if the width was exceeded at some point.
        """
        options = self.options
        width = options.width
        measure = options.measure
        newline = options.line_break.value
        indentation = options.indentation

        ok = True
        tasks: list[Task] = [task]
        while tasks:
            indent, mode, doc = tasks.pop()
            match doc:
                case DocNil():
                    pass
                case DocText(s):
                    out.write(s)
                    self.cols += measure(s)
                    ok = ok and self.cols <= width
                case DocHardLine():
                    out.write(newline)
                    out.write(indentation(indent))
                    self.cols = indent
                    ok = ok and self.cols <= width
                case DocEmptyLine():
                    out.write(newline)
                    self.cols = 0
                case DocBreak(spaces, _) if mode is Mode.FLAT:
                    out.write(" " * spaces)
                    self.cols += spaces
                    ok = ok and self.cols <= width
                case DocBreak(_, offset):
                    self.cols = indent + offset
                    out.write(newline)
                    out.write(indentation(self.cols))
                    ok = ok and self.cols <= width
                case DocCons(x, y):
                    tasks.append((indent, mode, y))
                    tasks.append((indent, mode, x))
                case DocNest(j, x):
                    tasks.append((indent + j, mode, x))
                case DocGroup(docs):
                    if mode is Mode.BREAK and not fits(
                        [(indent, Mode.FLAT, x) for x in reversed(docs)],
                        reversed(tasks),
                        self.cols,
                        width,
                        measure,
                    ):
                        child_mode = Mode.BREAK
                    else:
                        child_mode = Mode.FLAT
                    tasks.extend((indent, child_mode, x) for x in reversed(docs))
                case DocList(docs):
                    tasks.extend((indent, mode, x) for x in reversed(docs))
                case DocAlt(flat, brk):
                    tasks.append(
                        (indent, mode, flat if mode is Mode.FLAT else brk)
                    )
                case DocUnion(attempt, alternate):
                    cols = self.cols
                    buf = io.StringIO()
                    if self.print_to((indent, mode, attempt), buf):
                        out.write(buf.getvalue())
                    else:
                        self.cols = cols
                        tasks.append((indent, mode, alternate))
                case DocColumn(fn):
                    expanded = fn(self.cols)
                    if not isinstance(expanded, Doc):
                        raise TypeError(
                            f"{fn!r} returned {expanded!r} of type "
                            f"{type(expanded).__name__}, expected a 'Doc'"
                        )
                    tasks.append((indent, mode, expanded))
                case _:
                    raise TypeError(f"Not a document: {doc!r}")
        return ok


def print_to(out: Sink, doc: Doc, options: PrintOptions | None = None) -> bool:
    """Pretty print ``doc`` to a stream.

    Args:
      out: Anything with a ``write(str)`` method. Errors raised while writing
        are not caught.
      doc(Doc):
      options(PrintOptions):

    Returns:
      bool: Whether all the lines fit within ``options.width``.

    Raises:
      ValueError: if ``options.tab_size`` is not positive. Nothing is written
        in that case.
    """
    printer = Printer(PrintOptions() if options is None else options)
    return printer.print_to((0, Mode.BREAK, doc), out)


def print(doc: Doc, options: PrintOptions | None = None) -> str:
    """Pretty print ``doc`` to a string.

    Raises:
      ValueError: if ``options.tab_size`` is not positive.
    """
    out = io.StringIO()
    print_to(out, doc, options)
    return out.getvalue()
