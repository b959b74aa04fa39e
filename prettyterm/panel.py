"""Content laid out side by side in panels."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, TextIO

from . import output
from .color import RESET
from .printer import RenderPrinter
from .textutil import clear_code, get_string_max_width, string_width, with_boolean

__all__ = ["Panel", "PanelPrinter", "DEFAULT_PANEL"]


@dataclass
class Panel:
    """The content of one panel."""

    data: str = ""


@dataclass
class PanelPrinter(RenderPrinter):
    """Renders rows of panels next to each other.

    ``box_printer`` may be any object with a ``sprint`` method; when set,
    every panel is passed through it first.
    """

    panels: list[list[Panel]] = field(default_factory=list)
    padding: int = 0
    bottom_padding: int = 0
    same_column_width: bool = False
    box_printer: Any = None
    writer: TextIO | None = None

    def with_panels(self, panels: list[list[Panel]]) -> PanelPrinter:
        """Return a copy showing ``panels``."""
        return replace(self, panels=panels)

    def with_padding(self, padding: int) -> PanelPrinter:
        """Return a copy with a different gap between columns (at least 0)."""
        return replace(self, padding=max(padding, 0))

    def with_bottom_padding(self, bottom_padding: int) -> PanelPrinter:
        """Return a copy with a different gap between rows (at least 0)."""
        return replace(self, bottom_padding=max(bottom_padding, 0))

    def with_same_column_width(self, *args: bool) -> PanelPrinter:
        """Return a copy that gives every column one width (True when no value is given)."""
        return replace(self, same_column_width=with_boolean(args))

    def with_box_printer(self, box_printer: Any) -> PanelPrinter:
        """Return a copy that draws each panel through ``box_printer``."""
        return replace(self, box_printer=box_printer)

    def with_writer(self, writer: TextIO | None) -> PanelPrinter:
        """Return a copy with a custom writer."""
        return replace(self, writer=writer)

    def _raw(self) -> str:
        return "".join(
            "".join(panel.data + "\n\n" for panel in row) + "\n" for row in self.panels
        )

    def srender(self) -> str:
        """Return the panels rendered as a string."""
        if output.raw_output():
            return self._raw()

        rows = [[panel.data.removesuffix("\n") for panel in row] for row in self.panels]
        if self.box_printer is not None:
            rows = [[self.box_printer.sprint(data) for data in row] for row in rows]
        last = len(rows) - 1
        rows = [
            [data + "\n" * self.bottom_padding for data in row] if index != last else row
            for index, row in enumerate(rows)
        ]

        column_widths: dict[int, int] = {}
        if self.same_column_width:
            for row in rows:
                for column, data in enumerate(row):
                    column_widths[column] = max(
                        column_widths.get(column, 0), get_string_max_width(data)
                    )

        reset = RESET.sprint()
        parts: list[str] = []
        for row in rows:
            rendered = [data.replace("\n", reset + "\n") for data in row]
            split = [data.split("\n") for data in rendered]
            height = max((len(lines) for lines in split), default=0)
            for line_index in range(height):
                for column, (data, lines) in enumerate(zip(rendered, split)):
                    line = lines[line_index] if line_index < len(lines) else ""
                    if self.same_column_width:
                        target = column_widths.get(column, 0)
                    else:
                        target = get_string_max_width(data)
                    line += " " * max(target - string_width(clear_code(line)), 0)
                    parts.append(line + " " * self.padding)
                parts.append("\n")
        return "".join(parts)

    def render(self) -> None:
        """Print the rendered panels followed by a newline."""
        output.println(self.srender())


DEFAULT_PANEL = PanelPrinter(padding=1)