"""
Indentation-aware text builder for generated source code.

All generated output goes through a CodeWriter. Callers pair every
``open_block`` with a ``close_block``; the ``block`` context manager does
this structurally and is what generators are expected to use.
"""

from contextlib import contextmanager
from io import StringIO
from typing import Iterator, Optional

DEFAULT_INDENT_SIZE = 4


class CodeWriter:
    """A text buffer plus the current indentation depth."""

    def __init__(self, indent_size: int = DEFAULT_INDENT_SIZE):
        self.indent_size = indent_size
        self.depth = 0
        self._buffer = StringIO()

    def _indent(self) -> str:
        return " " * (self.depth * self.indent_size)

    def raw(self, text: str):
        """Append text verbatim, without indentation."""
        self._buffer.write(text)

    def write_indented(self, text: str = ""):
        """Current indentation followed by text, no newline."""
        self._buffer.write(self._indent())
        self._buffer.write(text)

    def line(self, text: str = ""):
        self.write_indented(text)
        self._buffer.write("\n")

    def blank_line(self):
        """A newline with no indentation, whatever the depth."""
        self._buffer.write("\n")

    def open_block(self):
        """End the current line and open a brace on its own line."""
        self._buffer.write("\n")
        self.line("{")
        self.depth += 1

    def close_block(self):
        self.depth -= 1
        self.line("}")

    @contextmanager
    def block(self, header: Optional[str] = None) -> Iterator["CodeWriter"]:
        """
        Write header, open a block, and close it when the body is done.

        Usage::

            with writer.block("void Reset()"):
                writer.line("return;")
        """
        if header is not None:
            self.write_indented(header)
        self.open_block()
        try:
            yield self
        finally:
            self.close_block()

    @contextmanager
    def indented(self) -> Iterator["CodeWriter"]:
        """One extra indentation level without braces."""
        self.depth += 1
        try:
            yield self
        finally:
            self.depth -= 1

    def getvalue(self) -> str:
        return self._buffer.getvalue()
