"""Paragraphs wrapped between words to a fixed line width."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, TextIO

from . import output
from .printer import TextPrinter

__all__ = ["ParagraphPrinter", "DEFAULT_PARAGRAPH"]


@dataclass
class ParagraphPrinter(TextPrinter):
    """Wraps text between words so that lines stay within ``max_width``."""

    max_width: int = 0
    writer: TextIO | None = None

    def with_max_width(self, width: int) -> ParagraphPrinter:
        """Return a copy with a different maximum line width."""
        return replace(self, max_width=width)

    def with_writer(self, writer: TextIO | None) -> ParagraphPrinter:
        """Return a copy that prints to ``writer``."""
        return replace(self, writer=writer)

    def sprint(self, *args: Any) -> str:
        """Return the formatted operands wrapped to the maximum width."""
        if output.raw_output():
            return output.sprint(*args)

        words = output.sprint(*args).split()
        if not words:
            return ""
        wrapped = words[0]
        space_left = self.max_width - len(wrapped)
        for word in words[1:]:
            if len(word) + 1 > space_left:
                wrapped += "\n" + word
                space_left = self.max_width - len(word)
            else:
                wrapped += " " + word
                space_left -= 1 + len(word)
        return wrapped

    def sprintln(self, *args: Any) -> str:
        """Return the wrapped operands followed by a newline."""
        return self.sprint(output.sprintln(*args)) + "\n"

    def sprintf(self, format: str, *args: Any) -> str:
        """Return text formatted by ``format``, wrapped."""
        return self.sprint(output.sprintf(format, *args))

    def sprintfln(self, format: str, *args: Any) -> str:
        """Like :meth:`sprintf`, with a newline appended."""
        return self.sprintf(format, *args) + "\n"

    def print(self, *args: Any) -> ParagraphPrinter:
        """Print the wrapped operands to the writer."""
        output.fprint(self.writer, self.sprint(*args))
        return self

    def println(self, *args: Any) -> ParagraphPrinter:
        """Print the wrapped operands followed by a newline."""
        output.fprint(self.writer, self.sprintln(*args))
        return self

    def printf(self, format: str, *args: Any) -> ParagraphPrinter:
        """Print text formatted by ``format``, wrapped."""
        output.fprint(self.writer, self.sprintf(format, *args))
        return self

    def printfln(self, format: str, *args: Any) -> ParagraphPrinter:
        """Like :meth:`printf`, with a newline appended."""
        output.fprint(self.writer, self.sprintfln(format, *args))
        return self

    def print_on_error(self, *args: Any) -> ParagraphPrinter:
        """Print every operand that is an exception."""
        for arg in args:
            if isinstance(arg, BaseException):
                self.println(arg)
        return self

    def print_on_errorf(self, format: str, *args: Any) -> ParagraphPrinter:
        """Print every exception operand wrapped in ``format``."""
        for arg in args:
            if isinstance(arg, BaseException):
                self.println(output.sprintf(format.replace("%w", "%v"), arg))
        return self


DEFAULT_PARAGRAPH = ParagraphPrinter(max_width=output.get_terminal_width())