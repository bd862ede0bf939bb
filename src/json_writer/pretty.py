"""Human-readable sink with newlines and per-depth indentation."""

from __future__ import annotations

from .sink import CompactSink


class PrettySink(CompactSink):
    """Compact sink variant that indents every member on its own line.

    Empty objects and arrays still render as ``{}`` and ``[]``.
    """

    def __init__(self, indent: str = "  ") -> None:
        super().__init__()
        self.indent = indent
        self.depth = 0

    def _write_indent(self) -> None:
        if self.depth and self.indent:
            self.fragment(self.indent * self.depth)

    def _close(self, bracket: str, was_empty: bool) -> None:
        self.depth -= 1
        if not was_empty:
            self.fragment("\n")
            self._write_indent()
        self.fragment(bracket)

    def begin_object(self) -> None:
        self.depth += 1
        self.fragment("{")

    def end_object(self, was_empty: bool) -> None:
        self._close("}", was_empty)

    def begin_array(self) -> None:
        self.depth += 1
        self.fragment("[")

    def end_array(self, was_empty: bool) -> None:
        self._close("]", was_empty)

    def begin_array_value(self, is_first: bool) -> None:
        self.fragment("\n" if is_first else ",\n")
        self._write_indent()

    def object_key(self, key: str, is_first: bool) -> None:
        self.fragment("\n" if is_first else ",\n")
        self._write_indent()
        self.string(key)
        self.fragment(": ")
