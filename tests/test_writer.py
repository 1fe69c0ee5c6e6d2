from io import StringIO

import pytest

from exprtree import writer as writer_module
from exprtree.writer import IndentingWriter, indented_output, surrounding_box_title


def test_println_always_writes() -> None:
    stream = StringIO()
    IndentingWriter(stream=stream).println("hello")

    assert stream.getvalue() == "hello\n"


def test_debug_output_is_dropped_unless_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    stream = StringIO()
    writer = IndentingWriter(stream=stream)

    writer.debugln("hidden")
    writer.newline(on_debug_only=True)
    assert stream.getvalue() == ""

    monkeypatch.setattr(writer_module, "DEBUG", True)
    writer.debugln("shown")
    assert stream.getvalue() == "shown\n"


def test_indented_output_prefixes_lines() -> None:
    stream = StringIO()
    writer = IndentingWriter(indent_size=2, stream=stream)

    with indented_output(writer):
        writer.println("one")
        with indented_output(writer):
            writer.println("two")
    writer.println("zero")

    assert stream.getvalue() == "  one\n    two\nzero\n"


def test_dedent_without_indent_raises() -> None:
    with pytest.raises(ValueError):
        IndentingWriter().dedent()


def test_surrounding_box_title_draws_division_lines() -> None:
    stream = StringIO()
    writer = IndentingWriter(stream=stream)

    with surrounding_box_title(writer):
        writer.println("TITLE")

    line = "-" * 80
    assert stream.getvalue() == f"{line}\nTITLE\n{line}\n"


def test_surrounding_box_title_can_omit_lower_line() -> None:
    stream = StringIO()
    writer = IndentingWriter(stream=stream)

    with surrounding_box_title(writer, omit_lower_line=True):
        writer.println("TITLE")

    assert stream.getvalue() == "-" * 80 + "\nTITLE\n"


def test_default_stream_is_current_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    IndentingWriter().println("to stdout")

    assert capsys.readouterr().out == "to stdout\n"
