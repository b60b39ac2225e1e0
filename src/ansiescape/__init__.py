"""Remove ANSI escape codes from text, or make them readable for tests."""

from ansiescape.ansi import FormatOptions, format_for_tests, remove_codes
from ansiescape.sequence import (
    EscapeMatch,
    has_codes,
    iter_escapes,
    split_escapes,
)
from ansiescape.sgr import SGR_NAMES, get_friendly_name, get_sgr_name

__all__ = [
    "SGR_NAMES",
    "EscapeMatch",
    "FormatOptions",
    "format_for_tests",
    "get_friendly_name",
    "get_sgr_name",
    "has_codes",
    "iter_escapes",
    "remove_codes",
    "split_escapes",
]
