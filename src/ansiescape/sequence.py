"""Recognize ANSI Control Sequence Introducer (CSI) escape sequences."""

from __future__ import annotations

import re
import typing
from dataclasses import dataclass

if typing.TYPE_CHECKING:
    from collections.abc import Iterator

# Only CSI sequences are recognized, other escapes are plain text
CSI_REGEX = re.compile(
    r"""
    \x1b\[                          # CSI - Control Sequence Introducer
    (?P<params>[\x30-\x3f]*)        # Parameter bytes: 0-9 : ; < = > ?
    (?P<intermediates>[\x20-\x2f]*) # Intermediate bytes: space through /
    (?P<command>[\x40-\x7e])        # Final byte: the command (m, H, J, K...)
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class EscapeMatch:
    """CSI sequence located in a string."""

    text: str
    params: str
    intermediates: str
    command: str
    start: int
    end: int

    @property
    def body(self) -> str:
        """Bytes between the introducer and the command."""
        return self.params + self.intermediates

    @classmethod
    def from_match(cls, match: re.Match[str]) -> EscapeMatch:
        """Build from a CSI_REGEX match object."""
        return cls(
            text=match.group(0),
            params=match.group("params"),
            intermediates=match.group("intermediates"),
            command=match.group("command"),
            start=match.start(),
            end=match.end(),
        )


def iter_escapes(text: str) -> Iterator[EscapeMatch]:
    """Yield every CSI sequence in text, left to right, without overlap."""
    for match in CSI_REGEX.finditer(text):
        yield EscapeMatch.from_match(match)


def split_escapes(text: str) -> Iterator[str | EscapeMatch]:
    """Split text into plain runs and escape sequences, in order.

    Empty plain runs are omitted. Joining the plain runs with the text of the
    escape sequences gives back the input.
    """
    position = 0
    for escape in iter_escapes(text):
        if escape.start > position:
            yield text[position : escape.start]
        yield escape
        position = escape.end
    if position < len(text):
        yield text[position:]


def has_codes(text: str) -> bool:
    """Check if text contains at least one CSI sequence."""
    return CSI_REGEX.search(text) is not None
