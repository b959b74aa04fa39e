"""Helpers for measuring, aligning and decorating terminal text."""

from __future__ import annotations

import math
import os
import re
from collections.abc import Sequence

from wcwidth import wcwidth

__all__ = [
    "RANDOM_STRINGS",
    "clear_code",
    "string_width",
    "center_text",
    "return_longest_line",
    "map_range_to_range",
    "get_string_max_width",
    "percentage",
    "percentage_round",
    "remove_and_count_prefix",
    "add_title_to_line",
    "add_title_to_line_center",
    "runs_in_ci",
    "with_boolean",
]

# A set of awkward strings that is handy when exercising printers.
RANDOM_STRINGS: tuple[str, ...] = (
    "hello world",
    "²³14234!`§=)$-.€@_&",
    "This is a sentence.",
    "This\nstring\nhas\nmultiple\nlines",
    "windows\r\nline\r\nendings",
    "\rtext",
)

_ANSI_CODE = re.compile(r"\x1b\[[\d;?]*m")


def clear_code(text: str) -> str:
    """Return ``text`` with all ANSI colour escape sequences removed."""
    return _ANSI_CODE.sub("", text)


def string_width(text: str) -> int:
    """Return the number of terminal cells ``text`` occupies.

    Control characters count as zero cells, wide characters as two.
    """
    return sum(max(wcwidth(char), 0) for char in text)


def _repeat(piece: str, count: int) -> str:
    if count < 0:
        raise ValueError(f"negative repeat count: {count}")
    return piece * count


def center_text(text: str, width: int) -> str:
    """Center every line of ``text`` within ``width`` columns.

    Lines longer than ``width`` are broken into chunks of ``width``
    characters. A ``width`` of 0 uses the widest line of ``text``.
    """
    if width == 0:
        width = get_string_max_width(text)

    def pad(line: str) -> str:
        half = (width - len(clear_code(line))) // 2
        spaces = " " * max(half, 0)
        return spaces + line + spaces

    lines: list[str] = []
    for line in text.split("\n"):
        if len(clear_code(line)) > width:
            chunks = [line[start:start + width] for start in range(0, len(line), width)]
            lines.extend(pad(chunk) for chunk in chunks)
        else:
            lines.append(pad(line))
    return "\n".join(lines)


def return_longest_line(text: str, sep: str) -> str:
    """Return the widest of the pieces of ``text`` split on ``sep``.

    On a tie the first of the widest pieces wins.
    """
    longest = ""
    longest_width = 0
    for line in text.split(sep):
        width = string_width(clear_code(line))
        if width > longest_width:
            longest, longest_width = line, width
    return longest


def map_range_to_range(
    from_min: float, from_max: float, to_min: float, to_max: float, current: float
) -> int:
    """Map ``current`` from one numeric range onto another, truncated to int."""
    span = from_max - from_min
    if span == 0:
        return 0
    return int(to_min + ((to_max - to_min) / span) * (current - from_min))


def get_string_max_width(text: str) -> int:
    """Return the width of the widest line of a multi-line string."""
    return max((string_width(clear_code(line)) for line in text.split("\n")), default=0)


def percentage(total: float, current: float) -> float:
    """Return ``current`` as a percentage of ``total``."""
    if total == 0:
        if current == 0 or math.isnan(current):
            return math.nan
        return math.copysign(math.inf, current) * math.copysign(1.0, total)
    return (current / total) * 100


def percentage_round(total: float, current: float) -> float:
    """Return the percentage, rounded half away from zero."""
    value = percentage(total, current)
    if not math.isfinite(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


def remove_and_count_prefix(text: str, sub_string: str) -> tuple[str, int]:
    """Strip leading characters found in ``sub_string``; return the rest and how many went."""
    stripped = text.lstrip(sub_string)
    return stripped, len(text) - len(stripped)


def add_title_to_line(title: str, line: str, length: int, left: bool) -> str:
    """Embed ``title`` near one end of a line drawn with ``line``."""
    fill = _repeat(line, length - (4 + len(clear_code(title))))
    framed = f"{line} {title} {line}"
    return framed + fill if left else fill + framed


def add_title_to_line_center(title: str, line: str, length: int) -> str:
    """Embed ``title`` in the middle of a line drawn with ``line``."""
    repeat = length - (4 + len(clear_code(title)))
    if repeat < 0:
        raise ValueError(f"negative repeat count: {repeat}")
    half, uneven = divmod(repeat, 2)
    return line * half + f"{line} {title} {line}" + line * (half + uneven)


def runs_in_ci() -> bool:
    """Return True when the ``CI`` environment variable is set and not empty."""
    return os.environ.get("CI", "") != ""


def with_boolean(values: Sequence[bool]) -> bool:
    """Return the first value given, or True when none is given."""
    return bool(values[0]) if values else True