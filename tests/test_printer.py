import io

import pytest

from prettyterm import output
from prettyterm.printer import LivePrinter, RenderPrinter, TextPrinter


class EchoPrinter(TextPrinter):
    def __init__(self, writer=None):
        self.writer = writer
        self.calls = []

    def sprint(self, *args):
        self.calls.append(args)
        return output.sprint(*args)


class StaticRender(RenderPrinter):
    def __init__(self, content):
        self.content = content

    def srender(self):
        return self.content


class RecordingLive(LivePrinter):
    def __init__(self):
        self.events = []

    def generic_start(self):
        self.events.append("start")
        return self

    def generic_stop(self):
        self.events.append("stop")
        return self


@pytest.fixture(autouse=True)
def _reset():
    yield
    output.enable_output()
    output.set_default_output(None)


def test_text_printer_is_abstract():
    with pytest.raises(TypeError):
        TextPrinter()


def test_sprintln_goes_through_sprint():
    printer = EchoPrinter()
    assert TextPrinter.sprintln(printer, "hello world") == "hello world\n"
    assert printer.calls == [("hello world\n",)]


def test_sprintf_and_sprintfln():
    printer = EchoPrinter()
    assert TextPrinter.sprintf(printer, "Hello, %s!", "World") == "Hello, World!"
    assert TextPrinter.sprintfln(printer, "Hello, %s!", "World") == "Hello, World!\n"


def test_print_writes_to_writer_and_returns_self():
    writer = io.StringIO()
    printer = EchoPrinter(writer)
    assert TextPrinter.print(printer, "hello world") is printer
    assert writer.getvalue() == "hello world"


def test_println_printf_printfln_to_writer():
    writer = io.StringIO()
    printer = EchoPrinter(writer)
    assert TextPrinter.println(printer, "hello world") is printer
    assert TextPrinter.printf(printer, "Hello, %s!", "World") is printer
    assert TextPrinter.printfln(printer, "Hello, %s!", "World") is printer
    assert writer.getvalue() == "hello world\nHello, World!Hello, World!\n"


def test_print_without_writer_uses_stdout(capsys):
    TextPrinter.print(EchoPrinter(), "hello world")
    assert capsys.readouterr().out == "hello world"


def test_print_respects_disabled_output():
    writer = io.StringIO()
    printer = EchoPrinter(writer)
    output.disable_output()
    assert TextPrinter.println(printer, "hello world") is printer
    assert writer.getvalue() == ""


def test_print_on_error():
    writer = io.StringIO()
    printer = EchoPrinter(writer)
    assert TextPrinter.print_on_error(printer, None, "not an error") is printer
    assert writer.getvalue() == ""
    TextPrinter.print_on_error(printer, ValueError("hello world"))
    assert writer.getvalue() == "hello world\n"


def test_print_on_errorf():
    writer = io.StringIO()
    printer = EchoPrinter(writer)
    assert TextPrinter.print_on_errorf(printer, "", None) is printer
    assert writer.getvalue() == ""
    result = TextPrinter.print_on_errorf(
        printer, "wrapping error : %w", ValueError("hello world")
    )
    assert result is printer
    assert "hello world" in writer.getvalue()


def test_render_prints_srender(capsys):
    RenderPrinter.render(StaticRender("Hello, World!"))
    assert capsys.readouterr().out == "Hello, World!\n"


def test_render_printer_is_abstract():
    with pytest.raises(TypeError):
        RenderPrinter()


def test_live_printer_context_manager():
    live = RecordingLive()
    entered = LivePrinter.__enter__(live)
    assert entered is live
    assert live.events == ["start"]
    assert not LivePrinter.__exit__(live, None, None, None)
    assert live.events == ["start", "stop"]


def test_live_printer_stops_on_exception():
    live = RecordingLive()
    LivePrinter.__enter__(live)
    error = RuntimeError("boom")
    suppressed = LivePrinter.__exit__(live, RuntimeError, error, None)
    assert not suppressed
    assert live.events == ["start", "stop"]