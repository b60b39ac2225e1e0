"""Tests for SGR friendly names."""

import pytest

from ansiescape.sequence import iter_escapes
from ansiescape.sgr import SGR_NAMES, get_friendly_name, get_sgr_name

EXPECTED_NAMES = {
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


def friendly_name(text: str) -> str | None:
    """Friendly name of the only escape sequence in text."""
    (escape,) = iter_escapes(text)
    return get_friendly_name(escape)


def test_table() -> None:
    """SGR_NAMES holds exactly the well-known codes."""
    assert dict(SGR_NAMES) == EXPECTED_NAMES


def test_table_is_read_only() -> None:
    """SGR_NAMES cannot be modified."""
    with pytest.raises(TypeError):
        SGR_NAMES[0] = "reset"  # type: ignore[index]


def test_get_sgr_name() -> None:
    """get_sgr_name() looks up a code, None if unknown."""
    assert get_sgr_name(31) == "red"
    assert get_sgr_name(100) == "gray-bg"
    assert get_sgr_name(0) is None
    assert get_sgr_name(38) is None
    assert get_sgr_name(256) is None


@pytest.mark.parametrize(("code", "name"), sorted(EXPECTED_NAMES.items()))
def test_friendly_name(code: int, name: str) -> None:
    """Every table entry is found from its escape sequence."""
    assert friendly_name(f"\x1b[{code}m") == name


def test_leading_zeros() -> None:
    """Codes are parsed as base 10 integers."""
    assert friendly_name("\x1b[031m") == "red"
    assert friendly_name("\x1b[001m") == "bold"


@pytest.mark.parametrize(
    "text",
    [
        pytest.param("\x1b[0m", id="reset"),
        pytest.param("\x1b[m", id="empty body"),
        pytest.param("\x1b[1;31m", id="multiple parameters"),
        pytest.param("\x1b[38;5;196m", id="256 colors"),
        pytest.param("\x1b[31;m", id="trailing separator"),
        pytest.param("\x1b[31 m", id="intermediate byte"),
        pytest.param("\x1b[?31m", id="private parameter"),
        pytest.param("\x1b[31J", id="not SGR command"),
        pytest.param("\x1b[31M", id="uppercase command"),
        pytest.param("\x1b[999m", id="unknown code"),
    ],
)
def test_no_friendly_name(text: str) -> None:
    """Only a single well-known SGR code has a friendly name."""
    assert friendly_name(text) is None
