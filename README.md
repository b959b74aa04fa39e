# prettyterm

Styled terminal output for Python programs: ANSI colors and styles, boxed
headers, word-wrapped paragraphs and panels laid out side by side, together
with a small set of helpers for measuring and aligning terminal text.

## Installation

```
pip install prettyterm
```

## Colors and styles

`prettyterm.color` defines `Color`, a single color or attribute code
(0–255), and `Style`, an immutable tuple of colors. Ready-made colors are
module-level constants such as `FG_RED`, `FG_LIGHT_WHITE`, `BG_BLUE`,
`BG_GRAY`, `BOLD`, `ITALIC` and `RESET`, and shortcuts such as `red`,
`cyan` and `light_green` color a string directly.

```python
from prettyterm.color import BG_BLUE, BOLD, FG_RED, new_style, red

print(FG_RED.sprint("something went wrong"))
print(red("also red"))

style = new_style(FG_RED, BG_BLUE, BOLD)
style.println("bold red on blue")
print(style.code())          # "31;44;1"
bigger = style.add(new_style(BOLD))
```

Both `Color` and `Style` offer `sprint`, `sprintln`, `sprintf`,
`sprintfln` (returning strings) and `print`, `println`, `printf`,
`printfln` (writing them out). `Color.to_style()` turns a color into a style.

Colors are switched off globally with `disable_color()`, after which styled
text comes out plain, and back on with `enable_color()`; `color_enabled()`
reports the current setting.

## Plain printing

`prettyterm.output` holds the base functions and package-wide settings:

- formatting: `sprint`, `sprintln`, `sprintf`, `sprintfln`, `sprinto`.
  `sprintf` understands the usual `%v`, `%s`, `%d`, `%x`, `%f`, `%q` style
  verbs with flags, width and precision.
- printing: `print_`, `println`, `printf`, `printfln`, `printo` (overwrites
  the current line), and `fprint`, `fprintln`, `fprinto` for a given writer.
- `print_on_error(*args)` and `print_on_errorf(format, *args)` print only
  those arguments that are exceptions.
- `remove_color_from_string` strips ANSI color codes.
- `enable_output()` / `disable_output()` turn all printing on or off;
  `set_default_output(writer)` redirects output that has no explicit writer.
- `disable_styling()` / `enable_styling()` make the printers emit raw,
  unstyled text; `raw_output()` reports it.
- `enable_debug_messages()` / `disable_debug_messages()` and
  `debug_messages_enabled()` hold a debug flag.
- `get_terminal_width()` returns the terminal width, 80 when unknown.

## Printers

```python
from prettyterm.header import DEFAULT_HEADER, HeaderPrinter
from prettyterm.paragraph import ParagraphPrinter
from prettyterm.panel import Panel, PanelPrinter

DEFAULT_HEADER.println("Welcome")
HeaderPrinter().with_margin(10).with_full_width().println("Section")

ParagraphPrinter().with_max_width(40).println(
    "A long text that is wrapped between words so no line exceeds the width."
)

PanelPrinter(padding=2).with_panels([[Panel("left"), Panel("right")]]).render()
```

- `HeaderPrinter` draws text inside a box filled with a background style;
  options: `with_text_style`, `with_background_style`, `with_margin`,
  `with_full_width`, `with_writer`. `DEFAULT_HEADER` uses light white bold
  text on gray with a margin of 5.
- `ParagraphPrinter` wraps text between words; options: `with_max_width`,
  `with_writer`. `DEFAULT_PARAGRAPH` wraps to the terminal width.
- `PanelPrinter` renders rows of `Panel` objects next to each other;
  options: `with_panels`, `with_padding`, `with_bottom_padding`,
  `with_same_column_width`, `with_box_printer` (any object with a `sprint`
  method, applied to each panel) and `with_writer`. `srender()` returns the
  result, `render()` prints it. `DEFAULT_PANEL` uses a padding of 1.

Every `with_*` method returns a changed copy and leaves the original alone.
Header and paragraph printers follow the `TextPrinter` interface from
`prettyterm.printer`, the panel printer the `RenderPrinter` interface; the
module also defines `LivePrinter`, an abstract base for printers that are
started and stopped, usable as a context manager.

## Text helpers

`prettyterm.textutil` provides `clear_code`, `string_width` (terminal cells,
wide characters counting two), `get_string_max_width`,
`return_longest_line`, `center_text`, `add_title_to_line`,
`add_title_to_line_center`, `map_range_to_range`, `percentage`,
`percentage_round`, `remove_and_count_prefix`, `runs_in_ci` and
`with_boolean`.

## Errors

`prettyterm.errors` defines `PrettyTermError` and its subclasses
`TerminalSizeNotDetectableError`, `HexCodeInvalidError` and
`FatalMessageError`, each with a default message.

## What it does not do

The package has no prefixed status-message printers (info, warning,
success, error, debug lines), no interactive prompts or key reading, no
tables, boxes, progress bars or spinners of its own, and no command-line
program: it is a library to be imported.

## Running the tests

```
pip install prettyterm[test]
pytest
```