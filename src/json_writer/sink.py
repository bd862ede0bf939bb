"""Sink contract and the default compact text sink."""

from __future__ import annotations

from abc import ABC, abstractmethod
import errno
import logging
from typing import TYPE_CHECKING, BinaryIO

from .escape import escape_string, write_string
from .number_format import format_float

if TYPE_CHECKING:
    from .scope import ScopedWriter

logger = logging.getLogger(__name__)


class JsonSink(ABC):
    """Destination for structural and value writes.

    Every operation defaults to one or more :meth:`fragment` calls, so a
    concrete sink only has to implement :meth:`fragment`. Sinks that want a
    different layout override the structural hooks.
    """

    # Innermost live scoped writer; maintained by json_writer.scope.
    _active_scope: ScopedWriter | None = None

    def null(self) -> None:
        self.fragment("null")

    def boolean(self, value: bool) -> None:
        self.fragment("true" if value else "false")

    def string(self, value: str) -> None:
        """Quote, escape and write ``value``."""
        write_string(self, value)

    def number_from_float(self, value: float) -> None:
        """Write ``value``; NaN and infinities are written as ``null``."""
        text = format_float(value)
        if text is None:
            # JSON.stringify(NaN) === "null"
            self.null()
            return
        self.number_from_text(text)

    def number_from_text(self, text: str) -> None:
        """Write a numeral that was already rendered to text."""
        self.fragment(text)

    def begin_object(self) -> None:
        self.fragment("{")

    def end_object(self, was_empty: bool) -> None:
        self.fragment("}")

    def begin_array(self) -> None:
        self.fragment("[")

    def end_array(self, was_empty: bool) -> None:
        self.fragment("]")

    def begin_array_value(self, is_first: bool) -> None:
        if not is_first:
            self.fragment(",")

    def object_key(self, key: str, is_first: bool) -> None:
        if not is_first:
            self.fragment(",")
        self.string(key)
        self.fragment(":")

    @abstractmethod
    def fragment(self, raw: str) -> None:
        """Append ``raw`` unescaped."""


class CompactSink(JsonSink):
    """Text buffer sink writing JSON with no inserted whitespace."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._size = 0

    def fragment(self, raw: str) -> None:
        # Sized before appending: text that cannot be UTF-8 encoded (lone
        # surrogates) raises UnicodeEncodeError and is not buffered.
        size = len(raw) if raw.isascii() else len(raw.encode("utf-8"))
        self._parts.append(raw)
        self._size += size

    def string(self, value: str) -> None:
        """Quote, escape and write ``value`` as a single fragment."""
        self.fragment(escape_string(value))

    def buffer_len(self) -> int:
        """Pending output size in UTF-8 bytes."""
        return self._size

    def getvalue(self) -> str:
        text = "".join(self._parts)
        self._parts = [text] if text else []
        return text

    def take(self) -> str:
        """Return the pending text and empty the buffer."""
        text = "".join(self._parts)
        self.clear()
        return text

    def clear(self) -> None:
        self._parts = []
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return self.getvalue()

    def output_buffered_data(self, stream: BinaryIO) -> int:
        """Write pending output to a binary ``stream`` and clear the buffer.

        Returns the number of bytes written. If ``stream.write`` raises, the
        buffer is left as it was and the error propagates unchanged.
        """
        data = self.getvalue().encode("utf-8")
        view = memoryview(data)
        while view:
            written = stream.write(view)
            if written is None:
                raise BlockingIOError(errno.EAGAIN, "stream is not ready for writing")
            view = view[written:]
        self.clear()
        logger.debug("flushed %d bytes to %r", len(data), stream)
        return len(data)
