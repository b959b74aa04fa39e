"""Package-wide output settings, Go-style formatting and printing helpers."""

from __future__ import annotations

import json
import shutil
import sys
import threading
from dataclasses import dataclass
from typing import Any, TextIO

import re

from .textutil import clear_code

__all__ = [
    "set_default_output",
    "enable_output",
    "disable_output",
    "output_enabled",
    "enable_styling",
    "disable_styling",
    "raw_output",
    "enable_debug_messages",
    "disable_debug_messages",
    "debug_messages_enabled",
    "get_terminal_width",
    "sprint",
    "sprintf",
    "sprintfln",
    "sprintln",
    "sprinto",
    "print_",
    "println",
    "printf",
    "printfln",
    "print_on_error",
    "print_on_errorf",
    "fprint",
    "fprintln",
    "printo",
    "fprinto",
    "remove_color_from_string",
]


@dataclass
class _Settings:
    output: bool = True
    raw: bool = False
    debug: bool = False
    color: bool = True
    writer: TextIO | None = None


_settings = _Settings()
_lock = threading.RLock()


# --- settings ---------------------------------------------------------------


def set_default_output(writer: TextIO | None) -> None:
    """Send output without an explicit writer to ``writer`` (None: standard output)."""
    with _lock:
        _settings.writer = writer


def enable_output() -> None:
    """Allow printing."""
    with _lock:
        _settings.output = True


def disable_output() -> None:
    """Suppress all printing."""
    with _lock:
        _settings.output = False


def output_enabled() -> bool:
    """Return True when printing is allowed."""
    return _settings.output


def enable_styling() -> None:
    """Turn styled output (and colours) back on."""
    with _lock:
        _settings.raw = False
        _settings.color = True


def disable_styling() -> None:
    """Print raw text only: no boxes, prefixes styling or colours."""
    with _lock:
        _settings.raw = True
        _settings.color = False


def raw_output() -> bool:
    """Return True when styling is disabled."""
    return _settings.raw


def enable_debug_messages() -> None:
    """Let debug printers print."""
    with _lock:
        _settings.debug = True


def disable_debug_messages() -> None:
    """Silence debug printers."""
    with _lock:
        _settings.debug = False


def debug_messages_enabled() -> bool:
    """Return True when debug printers print."""
    return _settings.debug


def _set_color_enabled(enabled: bool) -> None:
    with _lock:
        _settings.color = enabled


def _is_color_enabled() -> bool:
    return _settings.color


def get_terminal_width() -> int:
    """Return the width of the terminal in columns, 80 when it is unknown."""
    return shutil.get_terminal_size(fallback=(80, 24)).columns


# --- formatting -------------------------------------------------------------

_TYPE_NAMES = {str: "string", int: "int", float: "float64", bool: "bool"}


def _type_name(value: Any) -> str:
    if value is None:
        return "<nil>"
    return _TYPE_NAMES.get(type(value), type(value).__name__)


def _value(arg: Any) -> str:
    """Render one operand the way the default format does."""
    if isinstance(arg, bool):
        return "true" if arg else "false"
    if arg is None:
        return "<nil>"
    if isinstance(arg, float):
        if arg.is_integer() and abs(arg) < 1e21:
            return str(int(arg))
        return repr(arg)
    if type(arg) in (list, tuple):
        return "[" + " ".join(_value(item) for item in arg) + "]"
    if type(arg) is dict:
        return "map[" + " ".join(f"{_value(k)}:{_value(v)}" for k, v in arg.items()) + "]"
    return str(arg)


def _join(args: tuple[Any, ...]) -> str:
    if not args:
        return ""
    pieces = [_value(args[0])]
    for previous, current in zip(args, args[1:]):
        if not isinstance(previous, str) and not isinstance(current, str):
            pieces.append(" ")
        pieces.append(_value(current))
    return "".join(pieces)


_DIRECTIVE = re.compile(r"%([-+# 0]*)(\d*)(?:\.(\d*))?([a-zA-Z%])")
_NUMERIC_VERBS = frozenset("dboxXeEfFgG")


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(value)
    return int(value)


def _convert(value: Any, flags: str, precision: str | None, verb: str) -> str:
    if verb in "vsw":
        text = _value(value)
        if verb == "s" and precision is not None:
            text = text[: int(precision or 0)]
        return text
    if verb == "t":
        if not isinstance(value, bool):
            raise TypeError(value)
        return _value(value)
    if verb == "q":
        if isinstance(value, int) and not isinstance(value, bool):
            return "'" + chr(value) + "'"
        return json.dumps(_value(value), ensure_ascii=False)
    if verb == "c":
        return chr(_as_int(value))
    if verb in "dboxX":
        if isinstance(value, str) and verb in "xX":
            text = value.encode().hex()
            return text.upper() if verb == "X" else text
        sign = "+" if "+" in flags else ""
        alternate = "#" if "#" in flags and verb != "d" else ""
        return format(_as_int(value), sign + alternate + verb)
    if verb in "eEfFgG":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(value)
        sign = "+" if "+" in flags else ""
        digits = f".{int(precision or 0)}" if precision is not None else ""
        return format(float(value), sign + digits + verb)
    raise TypeError(value)


def _pad(text: str, flags: str, width: str, verb: str) -> str:
    if not width:
        return text
    size = int(width)
    if "-" in flags:
        return text.ljust(size)
    if "0" in flags and verb in _NUMERIC_VERBS:
        if text[:1] in "+-":
            return text[0] + text[1:].rjust(size - 1, "0")
        return text.rjust(size, "0")
    return text.rjust(size)


def _format(template: str, args: tuple[Any, ...]) -> str:
    remaining = iter(args)
    used = 0

    def substitute(match: re.Match[str]) -> str:
        nonlocal used
        flags, width, precision, verb = match.groups()
        if verb == "%":
            return "%"
        if used >= len(args):
            return f"%!{verb}(MISSING)"
        value = next(remaining)
        used += 1
        try:
            text = _convert(value, flags, precision, verb)
        except (TypeError, ValueError, OverflowError):
            return f"%!{verb}({_type_name(value)}={_value(value)})"
        return _pad(text, flags, width, verb)

    result = _DIRECTIVE.sub(substitute, template)
    extra = list(remaining)
    if extra:
        result += "%!(EXTRA " + ", ".join(f"{_type_name(a)}={_value(a)}" for a in extra) + ")"
    return result


def sprint(*args: Any) -> str:
    """Format operands; a space goes between two operands when neither is a string."""
    return _join(args)


def sprintf(format: str, *args: Any) -> str:
    """Format according to a format specifier."""
    return _format(format, args)


def sprintfln(format: str, *args: Any) -> str:
    """Like :func:`sprintf`, with a newline appended."""
    return _format(format, args) + "\n"


def sprintln(*args: Any) -> str:
    """Format operands separated by spaces, with a newline appended."""
    return " ".join(_value(arg) for arg in args) + "\n"


def sprinto(*args: Any) -> str:
    """Return what :func:`printo` would print."""
    return "\r" + sprint(*args)


# --- printing ---------------------------------------------------------------


def _emit(writer: Any, text: str) -> None:
    target = writer
    if target is None:
        target = _settings.writer if _settings.writer is not None else sys.stdout
    target.write(text)
    flush = getattr(target, "flush", None)
    if flush is not None:
        flush()


def fprint(writer: Any, *args: Any) -> None:
    """Write the formatted operands to ``writer`` (None: the default output)."""
    with _lock:
        if not _settings.output:
            return
        _emit(writer, sprint(*args))


def fprintln(writer: Any, *args: Any) -> None:
    """Write the formatted operands and a newline to ``writer``."""
    fprint(writer, sprint(*args) + "\n")


def print_(*args: Any) -> None:
    """Write the formatted operands to the default output."""
    fprint(None, *args)


def println(*args: Any) -> None:
    """Write operands separated by spaces and a newline to the default output."""
    print_(sprintln(*args))


def printf(format: str, *args: Any) -> None:
    """Write according to a format specifier to the default output."""
    print_(sprintf(format, *args))


def printfln(format: str, *args: Any) -> None:
    """Like :func:`printf`, with a newline appended."""
    print_(sprintfln(format, *args))


def print_on_error(*args: Any) -> None:
    """Print every argument that is an exception; ignore the rest."""
    for arg in args:
        if isinstance(arg, BaseException):
            println(arg)


def print_on_errorf(format: str, *args: Any) -> None:
    """Print every exception argument, wrapped by ``format``."""
    for arg in args:
        if isinstance(arg, BaseException):
            println(sprintf(format, arg))


def printo(*args: Any) -> None:
    """Overwrite the current terminal line."""
    fprinto(None, *args)


def fprinto(writer: Any, *args: Any) -> None:
    """Overwrite the current line of ``writer``."""
    with _lock:
        if not _settings.output:
            return
        _emit(writer, "\r" + sprint(*args))


def remove_color_from_string(*args: Any) -> str:
    """Format the operands and strip colour codes."""
    return clear_code(sprint(*args))