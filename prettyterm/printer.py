"""Abstract printer interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from . import output

__all__ = ["TextPrinter", "RenderPrinter", "LivePrinter"]


class TextPrinter(ABC):
    """A printer that formats text and prints it.

    Subclasses supply :meth:`sprint`. Printing goes to the instance's
    ``writer`` attribute when it has one that is set, else to the default output.
    """

    __slots__ = ()

    @abstractmethod
    def sprint(self, *args: Any) -> str:
        """Format the operands and return the styled string."""

    def _target(self) -> Any:
        return getattr(self, "writer", None)

    def sprintln(self, *args: Any) -> str:
        """Format operands separated by spaces, with a newline."""
        return self.sprint(output.sprintln(*args))

    def sprintf(self, format: str, *args: Any) -> str:
        """Format according to a format specifier."""
        return self.sprint(output.sprintf(format, *args))

    def sprintfln(self, format: str, *args: Any) -> str:
        """Like :meth:`sprintf`, with a newline appended."""
        return self.sprintf(format, *args) + "\n"

    def print(self, *args: Any) -> TextPrinter:
        """Print the formatted operands."""
        output.fprint(self._target(), self.sprint(*args))
        return self

    def println(self, *args: Any) -> TextPrinter:
        """Print the operands separated by spaces, with a newline."""
        output.fprint(self._target(), self.sprintln(*args))
        return self

    def printf(self, format: str, *args: Any) -> TextPrinter:
        """Print according to a format specifier."""
        output.fprint(self._target(), self.sprintf(format, *args))
        return self

    def printfln(self, format: str, *args: Any) -> TextPrinter:
        """Like :meth:`printf`, with a newline appended."""
        output.fprint(self._target(), self.sprintfln(format, *args))
        return self

    def print_on_error(self, *args: Any) -> TextPrinter:
        """Print every argument that is an exception."""
        for arg in args:
            if isinstance(arg, BaseException):
                self.println(arg)
        return self

    def print_on_errorf(self, format: str, *args: Any) -> TextPrinter:
        """Print every exception argument, wrapped by ``format``."""
        for arg in args:
            if isinstance(arg, BaseException):
                self.println(output.sprintf(format, arg))
        return self


class RenderPrinter(ABC):
    """A printer of renderable content such as tables or panels."""

    @abstractmethod
    def srender(self) -> str:
        """Return the rendered content."""

    def render(self) -> None:
        """Print the rendered content followed by a newline."""
        output.println(self.srender())


class LivePrinter(ABC):
    """A printer whose output is updated while it runs.

    Usable as a context manager: started on entry, stopped on exit.
    """

    @abstractmethod
    def generic_start(self) -> LivePrinter:
        """Start the printer and return it."""

    @abstractmethod
    def generic_stop(self) -> LivePrinter:
        """Stop the printer and return it."""

    def __enter__(self) -> LivePrinter:
        self.generic_start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.generic_stop()