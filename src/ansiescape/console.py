"""Shared diagnostics console for ansiescape."""

from __future__ import annotations

import io
import os
from contextlib import contextmanager
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any

from rich.console import Console

from ansiescape.ansi import remove_codes

if TYPE_CHECKING:
    from collections.abc import Iterator


ANSI_ESCAPE_LOG_FILE = "ANSI_ESCAPE_LOG_FILE"


_console = Console(soft_wrap=True, stderr=True)
_verbose = False


def set_verbose() -> None:
    """Turn on verbose mode.

    Note: Tests use the console_out fixture to clear between tests.
    """
    global _verbose  # noqa: PLW0603
    _verbose = True


def is_verbose() -> bool:
    """Check if verbose mode is enabled."""
    return _verbose


def print_verbose(*args: Any) -> None:  # noqa: ANN401
    """Print general verbose messages."""
    if _verbose:
        _console.print(*args, style="dim")
        _console.file.flush()


def print_warning(*args: Any) -> None:  # noqa: ANN401
    """Print a warning message, verbose mode."""
    if _verbose:
        _console.print(*args, style="yellow")
        _console.file.flush()


def print_error(title: str | None, *args: Any) -> None:  # noqa: ANN401
    """Print an error message."""
    title = title or "Error:"
    _console.print(f"[bold]{title}", *args, style="red")
    _console.file.flush()


class PlainTextWriter(io.TextIOBase):
    """Text stream wrapper that removes ANSI escape codes on write.

    Escape sequences split across two writes are not recognized. Rich writes
    each rendered segment in one call, so that does not happen in practice.
    """

    def __init__(self, file: IO[str]) -> None:
        """Wrap an open text file."""
        super().__init__()
        self._file = file

    def writable(self) -> bool:  # noqa: D102
        return True

    def write(self, text: str) -> int:  # noqa: D102
        self._file.write(remove_codes(text))
        return len(text)

    def flush(self) -> None:  # noqa: D102
        self._file.flush()


@contextmanager
def setup_log_file() -> Iterator[None]:
    """Redirect console output to the file named by ANSI_ESCAPE_LOG_FILE.

    The output is appended as plain text, with escape codes removed. Revert
    the console configuration when done. Do nothing if the variable is not
    set.
    """
    env_path = os.environ.get(ANSI_ESCAPE_LOG_FILE)
    if not env_path:
        yield
        return
    try:
        append_file = Path(env_path).open("a", encoding="utf-8")  # noqa: SIM115
    except OSError as error:
        print_error("Error opening log file:", error)
        raise SystemExit(1) from error
    with append_file:
        saved_file = _console.file
        _console.file = PlainTextWriter(append_file)
        try:
            yield
        finally:
            _console.file = saved_file
