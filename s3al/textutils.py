"""String helpers used by the command-line parser."""

from __future__ import annotations

from collections.abc import Iterator

_BLANKS = " \t"


def trim(text: str) -> str:
    """Strip spaces and tabs (only) from both ends of ``text``."""
    return text.strip(_BLANKS)


def extract_after(text: str, symbol: str) -> str:
    """Return the trimmed text after the first ``symbol``, or "" if absent."""
    pos = text.find(symbol)
    if pos == -1:
        return ""
    return trim(text[pos + len(symbol):])


def extract_before(text: str, symbol: str) -> str:
    """Return the trimmed text before the first ``symbol``, or all of it if absent."""
    pos = text.find(symbol)
    if pos == -1:
        return trim(text)
    return trim(text[:pos])


def split_by(text: str, delimiter: str) -> list[str]:
    """Split on ``delimiter``, trimming each part and dropping empty ones."""
    return [part for part in (trim(piece) for piece in text.split(delimiter)) if part]


def _parse_quoted(token: str, tokens: Iterator[str]) -> str:
    quote = token[0]
    quoted = token[1:]
    while quoted and not quoted.endswith(quote):
        following = next(tokens, None)
        if following is None:
            break
        quoted += " " + following
    if quoted.endswith(quote):
        quoted = quoted[:-1]
    return quoted


def parse_command(command_line: str) -> tuple[str, list[str]]:
    """Split a command line into its command word and arguments.

    Arguments opening with a single or double quote run on, joined by single
    spaces, until a token closes the same quote.
    """
    tokens = iter(command_line.split())
    command = next(tokens, "")
    args: list[str] = []
    for token in tokens:
        if token[0] in "\"'":
            args.append(_parse_quoted(token, tokens))
        else:
            args.append(token)
    return command, args