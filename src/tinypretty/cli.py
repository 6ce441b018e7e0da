"""Command line entry point: pretty print a python literal."""

from __future__ import annotations

import ast
import io
import sys
from typing import TextIO

import click

from . import literal, options, printer


def _parse(source: str) -> object:
    try:
        return ast.literal_eval(source)
    except (ValueError, TypeError, SyntaxError, MemoryError, RecursionError) as e:
        raise click.ClickException(f"Not a python literal: {e}") from e


@click.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option(
    "-w",
    "--width",
    type=click.IntRange(min=1),
    default=80,
    show_default=True,
    help="Maximum line width.",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=4,
    show_default=True,
    help="Indentation of the content of broken containers.",
)
@click.option("--tabs", is_flag=True, help="Indent with tabs.")
@click.option(
    "--tab-size",
    type=click.IntRange(min=1),
    default=2,
    show_default=True,
    help="Number of columns in a tab.",
)
@click.option("--crlf", is_flag=True, help="Use CRLF line breaks.")
@click.option(
    "--display-width",
    is_flag=True,
    help="Measure text in terminal cells instead of characters.",
)
@click.option(
    "--check",
    is_flag=True,
    help="Fail if some lines could not be kept within the width.",
)
def main(
    source: TextIO,
    width: int,
    indent: int,
    tabs: bool,
    tab_size: int,
    crlf: bool,
    display_width: bool,
    check: bool,
) -> None:
    """Pretty print the python literal in SOURCE (defaults to stdin)."""
    try:
        content = source.read()
    except UnicodeDecodeError as e:
        raise click.ClickException(f"Cannot decode input: {e}") from e
    value = _parse(content)
    try:
        doc = literal.literal(value, indent=indent)
    except TypeError as e:
        raise click.ClickException(str(e)) from e
    opts = options.PrintOptions(
        line_break=options.LineBreak.CRLF if crlf else options.LineBreak.LF,
        indent_kind=options.IndentKind.TAB if tabs else options.IndentKind.SPACE,
        width=width,
        tab_size=tab_size,
        measure=(
            options.display_width if display_width else options.char_width
        ),
    )
    out = io.StringIO()
    ok = printer.print_to(out, doc, opts)
    rendered = out.getvalue() + opts.line_break.value
    if crlf:
        # Bypass newline translation of the text stream.
        click.echo(rendered.encode("utf-8"), nl=False)
    else:
        click.echo(rendered, nl=False)
    if check and not ok:
        click.secho(f"Some lines are wider than {width}", fg="red", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
