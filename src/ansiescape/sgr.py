"""Friendly names for Select Graphic Rendition (SGR) codes."""

from __future__ import annotations

import re
import typing
from types import MappingProxyType

if typing.TYPE_CHECKING:
    from collections.abc import Mapping

    from ansiescape.sequence import EscapeMatch

# Parameter numbers from https://en.wikipedia.org/wiki/ANSI_escape_code#SGR
SGR_NAMES: Mapping[int, str] = MappingProxyType(
    {
        # Foreground colors
        30: "black",
        31: "red",
        32: "green",
        33: "yellow",
        34: "blue",
        35: "magenta",
        36: "cyan",
        37: "white",
        90: "gray",
        39: "default",
        # Background colors
        40: "black-bg",
        41: "red-bg",
        42: "green-bg",
        43: "yellow-bg",
        44: "blue-bg",
        45: "magenta-bg",
        46: "cyan-bg",
        47: "white-bg",
        100: "gray-bg",
        49: "default-bg",
        # Attributes, and the codes that turn them off
        1: "bold",
        21: "bold-off",
        2: "dim",
        22: "normal",
        4: "underline",
        24: "underline-off",
        5: "blink",
        25: "blink-off",
        7: "invert",
        27: "invert-off",
        8: "hidden",
        28: "hidden-off",
    }
)

SGR_COMMAND = "m"

_SINGLE_CODE_REGEX = re.compile(r"[0-9]+")


def get_sgr_name(code: int) -> str | None:
    """Get the friendly name of an SGR parameter, None if not well-known."""
    return SGR_NAMES.get(code)


def get_friendly_name(escape: EscapeMatch) -> str | None:
    """Get the friendly name of a single-parameter SGR sequence.

    Returns None for anything else: other commands, empty or multi-parameter
    bodies (``1;31``), and codes missing from SGR_NAMES (``0``).
    """
    if escape.command != SGR_COMMAND:
        return None
    if not _SINGLE_CODE_REGEX.fullmatch(escape.body):
        return None
    return get_sgr_name(int(escape.body))
