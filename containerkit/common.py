"""Console input helpers."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_UINT_MAX = 4294967295
_UNSIGNED_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)")


def read_line(
    prompt: str,
    max_length: int,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> str:
    """Prompt for a line and return at most ``max_length`` characters of it.

    The trailing newline is removed. When the line is longer than allowed,
    the rest of it is discarded. Raises EOFError when no input is left.
    """
    if prompt is None or max_length <= 0:
        raise ValueError("invalid arguments to read_line")
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    stdout.write(prompt)
    stdout.flush()

    line = stdin.readline(max_length)
    if not line:
        raise EOFError("no input")

    newline = line.find("\n")
    if newline >= 0:
        return line[:newline]
    if len(line) == max_length:
        stdin.readline()
    return line


def parse_unsigned(text: str) -> int:
    """Parse a base-10 unsigned integer that fits in 32 bits.

    Leading whitespace and a sign are accepted; trailing characters are not.
    An empty string parses as zero.
    """
    if text is None:
        raise ValueError("text is None")
    if text == "":
        return 0
    match = _UNSIGNED_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"not an unsigned integer: {text!r}")
    sign, digits = match.groups()
    value = int(digits)
    if sign == "-" and value != 0:
        raise ValueError(f"negative value: {text!r}")
    if value > _UINT_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return value