"""Big boxed headers for title screens and section separators."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, TextIO

from . import output
from .color import BG_GRAY, BOLD, FG_LIGHT_WHITE, Style, new_style
from .printer import TextPrinter
from .textutil import clear_code, return_longest_line, string_width, with_boolean

__all__ = ["HeaderPrinter", "DEFAULT_HEADER"]


def _split_text(text: str, width: int) -> str:
    """Break every line of ``text`` that is wider than ``width`` into chunks."""
    lines: list[str] = []
    for line in text.split("\n"):
        if string_width(clear_code(line)) > width:
            if width <= 0:
                raise ValueError(f"cannot split text to width {width}")
            lines.extend(line[start:start + width] for start in range(0, len(line), width))
        else:
            lines.append(line)
    return "\n".join(lines)


@dataclass
class HeaderPrinter(TextPrinter):
    """Prints text inside a box filled with a background colour."""

    text_style: Style | None = None
    background_style: Style | None = None
    margin: int = 0
    full_width: bool = False
    writer: TextIO | None = None

    def with_text_style(self, style: Style) -> HeaderPrinter:
        """Return a copy with a different text style."""
        return replace(self, text_style=style)

    def with_background_style(self, style: Style) -> HeaderPrinter:
        """Return a copy with a different background style."""
        return replace(self, background_style=style)

    def with_margin(self, margin: int) -> HeaderPrinter:
        """Return a copy with a different margin."""
        return replace(self, margin=margin)

    def with_full_width(self, *args: bool) -> HeaderPrinter:
        """Return a copy that spans the terminal width (True when no value is given)."""
        return replace(self, full_width=with_boolean(args))

    def with_writer(self, writer: TextIO | None) -> HeaderPrinter:
        """Return a copy that prints to ``writer``."""
        return replace(self, writer=writer)

    def sprint(self, *args: Any) -> str:
        """Return the header box for the formatted operands."""
        if output.raw_output():
            return output.sprint(*args)

        text_style = self.text_style if self.text_style is not None else new_style()
        background_style = (
            self.background_style if self.background_style is not None else new_style()
        )
        text = output.sprint(*args)
        terminal_width = output.get_terminal_width()
        longest_width = string_width(clear_code(return_longest_line(text, "\n"))) + self.margin * 2

        if self.full_width or longest_width > terminal_width:
            text = _split_text(text, terminal_width - self.margin * 2)
            blank_line = " " * terminal_width
        else:
            text = _split_text(text, longest_width - self.margin * 2)
            blank_line = " " * longest_width

        if self.full_width:
            longest_width = string_width(clear_code(return_longest_line(text, "\n")))
            margin_string = " " * max((terminal_width - longest_width) // 2, 0)
        else:
            margin_string = " " * self.margin

        blank_width = string_width(blank_line)
        parts = [background_style.sprint(blank_line) + "\n"]
        for line in text.split("\n"):
            line = margin_string + line + margin_string
            line += " " * max(blank_width - string_width(line), 0)
            parts.append(background_style.sprint(text_style.sprint(line)) + "\n")
        parts.append(background_style.sprint(blank_line) + "\n")
        return "".join(parts)

    def sprintln(self, *args: Any) -> str:
        """Return the header box for operands separated by spaces."""
        return self.sprint(output.sprintln(*args).removesuffix("\n"))

    def sprintf(self, format: str, *args: Any) -> str:
        """Return the header box for text formatted by ``format``."""
        return self.sprint(output.sprintf(format, *args))

    def sprintfln(self, format: str, *args: Any) -> str:
        """Like :meth:`sprintf`, with a newline appended."""
        return self.sprintf(format, *args) + "\n"

    def print(self, *args: Any) -> HeaderPrinter:
        """Print the header box to the writer."""
        output.fprint(self.writer, self.sprint(*args))
        return self

    def println(self, *args: Any) -> HeaderPrinter:
        """Print the header box for operands separated by spaces."""
        output.fprint(self.writer, self.sprintln(*args))
        return self

    def printf(self, format: str, *args: Any) -> HeaderPrinter:
        """Print the header box for text formatted by ``format``."""
        output.fprint(self.writer, self.sprintf(format, *args))
        return self

    def printfln(self, format: str, *args: Any) -> HeaderPrinter:
        """Like :meth:`printf`, with a newline appended."""
        output.fprint(self.writer, self.sprintfln(format, *args))
        return self

    def print_on_error(self, *args: Any) -> HeaderPrinter:
        """Print a header for every operand that is an exception."""
        for arg in args:
            if isinstance(arg, BaseException):
                self.println(arg)
        return self

    def print_on_errorf(self, format: str, *args: Any) -> HeaderPrinter:
        """Print a header for every exception operand wrapped in ``format``."""
        for arg in args:
            if isinstance(arg, BaseException):
                self.println(output.sprintf(format.replace("%w", "%v"), arg))
        return self


DEFAULT_HEADER = HeaderPrinter(
    text_style=new_style(FG_LIGHT_WHITE, BOLD),
    background_style=new_style(BG_GRAY),
    margin=5,
)