"""Scoped object and array writers.

A writer emits its opening bracket on construction and its closing bracket
exactly once, when :meth:`ScopedWriter.end` is called or when the ``with``
block that owns it exits, on any path::

    sink = CompactSink()
    with ObjectWriter(sink) as obj:
        obj.value("number", 42)
        with obj.array("items") as items:
            items.value("?")
    assert sink.getvalue() == '{"number":42,"items":["?"]}'

Output is append-only, so a nested writer holds the sink exclusively until
it is closed. Touching the parent before that raises
:class:`~json_writer.errors.WriterBusyError`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, BinaryIO

from . import value as encoding
from .errors import WriterBusyError, WriterClosedError
from .sink import CompactSink, JsonSink


class ScopedWriter(ABC):
    """Common lifecycle for :class:`ObjectWriter` and :class:`ArrayWriter`."""

    __slots__ = ("sink", "_parent", "_empty", "_closed")

    def __init__(self, sink: JsonSink, *, _parent: ScopedWriter | None = None) -> None:
        if sink._active_scope is not _parent:
            raise WriterBusyError("sink is held by another open writer")
        self.sink = sink
        self._parent = _parent
        self._empty = True
        self._closed = False
        self._begin()
        sink._active_scope = self

    @abstractmethod
    def _begin(self) -> None:
        """Write the opening bracket."""

    @abstractmethod
    def _end(self, was_empty: bool) -> None:
        """Write the closing bracket."""

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_usable(self) -> None:
        if self._closed:
            raise WriterClosedError(f"{type(self).__name__} is already closed")
        if self.sink._active_scope is not self:
            raise WriterBusyError(
                f"{type(self).__name__} used while a nested writer is still open"
            )

    def _finish(self) -> None:
        self._closed = True
        try:
            self._end(self._empty)
        finally:
            self.sink._active_scope = self._parent

    def end(self) -> None:
        """Close the writer. Closing an already closed writer does nothing."""
        if self._closed:
            return
        if self.sink._active_scope is not self:
            raise WriterBusyError(
                f"cannot end {type(self).__name__} while a nested writer is still open"
            )
        self._finish()

    def _unwind(self) -> None:
        scope = self.sink._active_scope
        while scope is not None and scope is not self:
            scope._finish()
            scope = self.sink._active_scope
        if not self._closed:
            self._finish()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._closed:
            return
        if exc_type is not None:
            # Keep brackets balanced; the exception still propagates.
            self._unwind()
            return
        self.end()

    def _buffered_sink(self) -> CompactSink:
        if not isinstance(self.sink, CompactSink):
            raise TypeError(f"{type(self.sink).__name__} does not buffer output")
        return self.sink

    def buffer_len(self) -> int:
        """Pending output size of the underlying buffer, in UTF-8 bytes."""
        self._check_usable()
        return self._buffered_sink().buffer_len()

    def output_buffered_data(self, stream: BinaryIO) -> int:
        """Write pending output to ``stream`` and clear the buffer on success."""
        self._check_usable()
        return self._buffered_sink().output_buffered_data(stream)


class ObjectWriter(ScopedWriter):
    """Writes ``{`` on creation and ``}`` when closed.

    Keys are not checked for uniqueness; repeated keys are written in call
    order.
    """

    __slots__ = ()

    def _begin(self) -> None:
        self.sink.begin_object()

    def _end(self, was_empty: bool) -> None:
        self.sink.end_object(was_empty)

    def write_key(self, key: str) -> None:
        """Write a key with its separators but no value.

        The caller must write exactly one value through :attr:`sink`
        afterwards, otherwise the output is malformed.
        """
        self._check_usable()
        self.sink.object_key(key, self._empty)
        self._empty = False

    def value(self, key: str, value: Any) -> None:
        self.write_key(key)
        encoding.write_value(self.sink, value)

    def object(self, key: str) -> ObjectWriter:
        """Start a nested object under ``key``."""
        self.write_key(key)
        return ObjectWriter(self.sink, _parent=self)

    def array(self, key: str) -> ArrayWriter:
        """Start a nested array under ``key``."""
        self.write_key(key)
        return ArrayWriter(self.sink, _parent=self)

    def __enter__(self) -> ObjectWriter:
        return self


class ArrayWriter(ScopedWriter):
    """Writes ``[`` on creation and ``]`` when closed."""

    __slots__ = ()

    def _begin(self) -> None:
        self.sink.begin_array()

    def _end(self, was_empty: bool) -> None:
        self.sink.end_array(was_empty)

    def write_comma(self) -> None:
        """Write the element separator (if needed) but no value.

        The caller must write exactly one value through :attr:`sink`
        afterwards.
        """
        self._check_usable()
        self.sink.begin_array_value(self._empty)
        self._empty = False

    def value(self, value: Any) -> None:
        self.write_comma()
        encoding.write_value(self.sink, value)

    def object(self) -> ObjectWriter:
        self.write_comma()
        return ObjectWriter(self.sink, _parent=self)

    def array(self) -> ArrayWriter:
        self.write_comma()
        return ArrayWriter(self.sink, _parent=self)

    def __enter__(self) -> ArrayWriter:
        return self
