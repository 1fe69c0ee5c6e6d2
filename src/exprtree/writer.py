from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

# DEBUG = True
DEBUG = False


class IndentingWriter:
    def __init__(self, indent_size: int = 3, stream: TextIO | None = None) -> None:
        self._indent_size = indent_size
        self._indents = 0
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # resolved lazily so redirected stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def debug(self, message: str) -> None:
        if DEBUG:
            self._write_indentation()
            self.stream.write(message)

    def debugln(self, message: str) -> None:
        if DEBUG:
            self.debug(message + "\n")

    def print(self, message: str, with_title_box: bool = False) -> None:
        if with_title_box:
            self.print_division_line()

        self._write_indentation()
        self.stream.write(message)

        if with_title_box:
            self.print_division_line()

    def println(self, message: str, with_title_box: bool = False) -> None:
        self.print(message + "\n", with_title_box)

    def indent(self) -> None:
        self._indents += 1

    def dedent(self) -> None:
        if self._indents == 0:
            raise ValueError("dedent without matching indent")
        self._indents -= 1

    def newline(self, on_debug_only: bool = False) -> None:
        if not on_debug_only or DEBUG:
            self.stream.write("\n")

    def print_division_line(self, size: int = 80) -> None:
        self.stream.write("-" * size + "\n")

    def _write_indentation(self) -> None:
        self.stream.write(" " * self._indent_size * self._indents)


@contextmanager
def indented_output(output_writer: IndentingWriter) -> Iterator[None]:
    output_writer.indent()
    try:
        yield
    finally:
        output_writer.dedent()


@contextmanager
def surrounding_box_title(
    output_writer: IndentingWriter, omit_lower_line: bool = False
) -> Iterator[None]:
    output_writer.print_division_line()
    try:
        yield
    finally:
        if not omit_lower_line:
            output_writer.print_division_line()
