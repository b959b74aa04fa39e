"""Terminal colours and styles."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain
from typing import Any

from . import output
from .printer import TextPrinter
from .textutil import clear_code

__all__ = [
    "enable_color",
    "disable_color",
    "color_enabled",
    "Color",
    "Style",
    "new_style",
]

_RESET_SET = "\x1b[0m"


def enable_color() -> None:
    """Turn colour output on."""
    output._set_color_enabled(True)


def disable_color() -> None:
    """Turn colour output off; styled text is printed plain."""
    output._set_color_enabled(False)


def color_enabled() -> bool:
    """Return True when colours are printed."""
    return output._is_color_enabled()


def _render_code(code: str, message: str) -> str:
    if not code:
        return message
    if not output._is_color_enabled():
        return clear_code(message)
    return f"\x1b[{code}m{message}\x1b[0m"


def _colorize_lines(code: str, message: str) -> str:
    restart = f"\x1b[0m\x1b[{code}m"
    return "\n".join(
        _render_code(code, line.replace(_RESET_SET, restart)) for line in message.split("\n")
    )


class Color(int, TextPrinter):
    """A single terminal colour or text attribute code (0-255)."""

    __slots__ = ()

    def __new__(cls, value: int) -> Color:
        number = int(value)
        if not 0 <= number <= 255:
            raise ValueError(f"color code out of range: {number}")
        return super().__new__(cls, number)

    def __str__(self) -> str:
        return str(int(self))

    def __repr__(self) -> str:
        return f"Color({int(self)})"

    def sprint(self, *args: Any) -> str:
        """Format the operands and colour every line."""
        return _colorize_lines(str(self), output.sprint(*args))

    def sprintln(self, *args: Any) -> str:
        """Format operands separated by spaces with a newline, coloured."""
        return self.sprint(output.sprintln(*args))

    def sprintf(self, format: str, *args: Any) -> str:
        """Format according to a format specifier, coloured."""
        return self.sprint(output.sprintf(format, *args))

    def sprintfln(self, format: str, *args: Any) -> str:
        """Like :meth:`sprintf`, with a newline inside the colouring."""
        return self.sprint(output.sprintf(format, *args) + "\n")

    def print(self, *args: Any) -> Color:
        """Print the coloured operands to standard output."""
        output.print_(self.sprint(*args))
        return self

    def println(self, *args: Any) -> Color:
        """Print the coloured operands followed by a newline."""
        output.print_(self.sprintln(*args))
        return self

    def printf(self, format: str, *args: Any) -> Color:
        """Print according to a format specifier, coloured."""
        output.print_(self.sprintf(format, *args))
        return self

    def printfln(self, format: str, *args: Any) -> Color:
        """Like :meth:`printf`, with a newline appended."""
        output.print_(self.sprintfln(format, *args))
        return self

    def print_on_error(self, *args: Any) -> Color:
        """Print every operand that is an exception."""
        for arg in args:
            if isinstance(arg, BaseException):
                self.println(arg)
        return self

    def print_on_errorf(self, format: str, *args: Any) -> Color:
        """Print every exception operand wrapped in ``format``."""
        for arg in args:
            if isinstance(arg, BaseException):
                self.println(output.sprintf(format.replace("%w", "%v"), arg))
        return self

    def to_style(self) -> Style:
        """Return a style holding only this colour."""
        return Style((self,))


class Style(tuple):
    """An immutable collection of colours and attributes."""

    __slots__ = ()

    def __new__(cls, colors: Iterable[int] = ()) -> Style:
        return super().__new__(cls, (c if isinstance(c, Color) else Color(c) for c in colors))

    def __str__(self) -> str:
        return self.code()

    def __repr__(self) -> str:
        return f"Style({[int(c) for c in self]!r})"

    def add(self, *styles: Iterable[int]) -> Style:
        """Return a new style with the colours of ``styles`` appended."""
        return Style(chain(self, *styles))

    def code(self) -> str:
        """Return the escape code parameters, e.g. ``"32;45;3"``."""
        return ";".join(str(c) for c in self)

    def sprint(self, *args: Any) -> str:
        """Format the operands and apply the style."""
        code = self.code()
        return _render_code(code, _colorize_lines(code, output.sprint(*args)))

    def sprintln(self, *args: Any) -> str:
        """Like :meth:`sprint`, with a newline appended."""
        return self.sprint(*args) + "\n"

    def sprintf(self, format: str, *args: Any) -> str:
        """Format according to a format specifier and apply the style."""
        return self.sprint(output.sprintf(format, *args))

    def sprintfln(self, format: str, *args: Any) -> str:
        """Like :meth:`sprintf`, with a newline inside the styling."""
        return self.sprint(output.sprintf(format, *args) + "\n")

    def print(self, *args: Any) -> None:
        """Print the styled operands."""
        output.print_(self.sprint(*args))

    def println(self, *args: Any) -> None:
        """Print the styled operands and a newline."""
        output.println(self.sprint(*args))

    def printf(self, format: str, *args: Any) -> None:
        """Print according to a format specifier, styled."""
        output.print_(self.sprintf(format, *args))

    def printfln(self, format: str, *args: Any) -> None:
        """Like :meth:`printf`, with a newline appended."""
        output.print_(self.sprintfln(format, *args))


def new_style(*args: int) -> Style:
    """Return a style made of the given colours."""
    return Style(args)


# Foreground colours.
FG_BLACK = Color(30)
FG_RED = Color(31)
FG_GREEN = Color(32)
FG_YELLOW = Color(33)
FG_BLUE = Color(34)
FG_MAGENTA = Color(35)
FG_CYAN = Color(36)
FG_WHITE = Color(37)
FG_DEFAULT = Color(39)

FG_DARK_GRAY = Color(90)
FG_LIGHT_RED = Color(91)
FG_LIGHT_GREEN = Color(92)
FG_LIGHT_YELLOW = Color(93)
FG_LIGHT_BLUE = Color(94)
FG_LIGHT_MAGENTA = Color(95)
FG_LIGHT_CYAN = Color(96)
FG_LIGHT_WHITE = Color(97)
FG_GRAY = FG_DARK_GRAY

# Background colours.
BG_BLACK = Color(40)
BG_RED = Color(41)
BG_GREEN = Color(42)
BG_YELLOW = Color(43)
BG_BLUE = Color(44)
BG_MAGENTA = Color(45)
BG_CYAN = Color(46)
BG_WHITE = Color(47)
BG_DEFAULT = Color(49)

BG_DARK_GRAY = Color(100)
BG_LIGHT_RED = Color(101)
BG_LIGHT_GREEN = Color(102)
BG_LIGHT_YELLOW = Color(103)
BG_LIGHT_BLUE = Color(104)
BG_LIGHT_MAGENTA = Color(105)
BG_LIGHT_CYAN = Color(106)
BG_LIGHT_WHITE = Color(107)
BG_GRAY = BG_DARK_GRAY

# Text attributes.
RESET = Color(0)
BOLD = Color(1)
FUZZY = Color(2)
ITALIC = Color(3)
UNDERSCORE = Color(4)
BLINK = Color(5)
FAST_BLINK = Color(6)
REVERSE = Color(7)
CONCEALED = Color(8)
STRIKETHROUGH = Color(9)

# Shortcuts.
red = FG_RED.sprint
cyan = FG_CYAN.sprint
gray = FG_GRAY.sprint
blue = FG_BLUE.sprint
black = FG_BLACK.sprint
green = FG_GREEN.sprint
white = FG_WHITE.sprint
yellow = FG_YELLOW.sprint
magenta = FG_MAGENTA.sprint
normal = FG_DEFAULT.sprint
light_red = FG_LIGHT_RED.sprint
light_cyan = FG_LIGHT_CYAN.sprint
light_blue = FG_LIGHT_BLUE.sprint
light_green = FG_LIGHT_GREEN.sprint
light_white = FG_LIGHT_WHITE.sprint
light_yellow = FG_LIGHT_YELLOW.sprint
light_magenta = FG_LIGHT_MAGENTA.sprint