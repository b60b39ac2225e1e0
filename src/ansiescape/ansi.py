"""Remove or tokenize ANSI escape codes in text."""

from dataclasses import dataclass

from ansiescape.sequence import CSI_REGEX, EscapeMatch, split_escapes
from ansiescape.sgr import get_friendly_name

NEWLINE_TOKENS = {"\n": "[n]", "\r": "[r]"}


@dataclass(frozen=True)
class FormatOptions:
    """Options for format_for_tests."""

    # Replace "\n" by "[n]" and "\r" by "[r]"
    encode_newlines: bool = False


def remove_codes(text: str) -> str:
    """Remove ANSI escape codes from text.

    Useful for saving colorized console output to a log file. Only CSI
    sequences are removed; other control characters are kept.
    """
    return CSI_REGEX.sub("", text)


def format_for_tests(text: str, options: FormatOptions | None = None) -> str:
    r"""Replace ANSI escape codes with human-readable tokens.

    Meant for test assertions and snapshot files. Well-known SGR codes become
    their friendly name (``\x1b[31m`` -> ``[red]``), other sequences keep
    their raw body without introducer and command (``\x1b[1;31m`` ->
    ``[1;31]``).
    """
    if options is None:
        options = FormatOptions()
    result = "".join(
        _format_token(part) if isinstance(part, EscapeMatch) else part
        for part in split_escapes(text)
    )
    if options.encode_newlines:
        result = result.translate(str.maketrans(NEWLINE_TOKENS))
    return result


def _format_token(escape: EscapeMatch) -> str:
    name = get_friendly_name(escape)
    if name is not None:
        return f"[{name}]"
    return f"[{escape.body}]"
