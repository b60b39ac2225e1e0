"""Ansi-escape command line interface.

Remove ANSI escape codes from console output, or replace them with readable
tokens for test snapshots.
"""

from __future__ import annotations

import functools
import sys
import typing
from pathlib import Path

import typer
from rich.markup import escape

import ansiescape.console
from ansiescape.ansi import FormatOptions, format_for_tests, remove_codes
from ansiescape.console import print_error, print_verbose, set_verbose
from ansiescape.sgr import SGR_NAMES

if typing.TYPE_CHECKING:
    from collections.abc import Callable, Iterator

app = typer.Typer(help=__doc__)

# ruff: noqa: FBT001 FBT003 Typer API uses boolean arguments for flags
# ruff: noqa: B008 function-call-in-default-argument

ENCODING = "utf-8"
# Undecodable bytes go through unchanged
ENCODING_ERRORS = "surrogateescape"
STDIO_NAME = "-"


def _read_input(name: str) -> str:
    """Read a file, or stdin for "-", without newline translation."""
    if name == STDIO_NAME:
        print_verbose("Reading stdin")
        data = sys.stdin.buffer.read()
    else:
        print_verbose("Reading", name)
        data = Path(name).read_bytes()
    return data.decode(ENCODING, ENCODING_ERRORS)


def _iter_inputs(files: list[str]) -> Iterator[str]:
    for name in files or [STDIO_NAME]:
        try:
            text = _read_input(name)
        except OSError as error:
            print_error(None, escape(str(error)))
            raise typer.Exit(1) from error
        yield text


def _write_output(text: str, output: Path | None) -> None:
    data = text.encode(ENCODING, ENCODING_ERRORS)
    if output is None:
        sys.stdout.flush()
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    print_verbose("Writing", str(output))
    try:
        output.write_bytes(data)
    except OSError as error:
        print_error(None, escape(str(error)))
        raise typer.Exit(1) from error


def _transform_command(
    files: list[str],
    output: Path | None,
    transform: Callable[[str], str],
    *,
    verbose: bool,
) -> None:
    with ansiescape.console.setup_log_file():
        if verbose:
            set_verbose()
        result = "".join(transform(text) for text in _iter_inputs(files))
        _write_output(result, output)


files_argument = typer.Argument(
    default_factory=list,
    help="Input files, '-' for stdin. Read stdin if none.",
    show_default=False,
)
output_option = typer.Option(
    None, "-o", "--output", help="Write to this file instead of stdout"
)
verbose_option = typer.Option(
    False, "-v", "--verbose", help="Show verbose output"
)


@app.command()
def strip(
    files: list[str] = files_argument,
    output: Path | None = output_option,
    verbose: bool = verbose_option,
) -> None:
    """Remove ANSI escape codes, for saving console output as plain text."""
    _transform_command(files, output, remove_codes, verbose=verbose)


@app.command(name="format")
def format_(
    files: list[str] = files_argument,
    output: Path | None = output_option,
    encode_newlines: bool = typer.Option(
        False,
        "-n",
        "--encode-newlines",
        envvar="ANSI_ESCAPE_ENCODE_NEWLINES",
        help="Also replace newlines with [n] and carriage returns with [r]",
    ),
    verbose: bool = verbose_option,
) -> None:
    """Replace ANSI escape codes with readable tokens, for test snapshots."""
    options = FormatOptions(encode_newlines=encode_newlines)
    transform = functools.partial(format_for_tests, options=options)
    _transform_command(files, output, transform, verbose=verbose)


@app.command()
def names() -> None:
    """List the SGR codes that have a friendly name."""
    for code, name in sorted(SGR_NAMES.items()):
        sys.stdout.write(f"{code}\t{name}\n")


def main() -> None:
    """Console script entry point."""
    app()
