"""Exception types raised by json_writer."""

from __future__ import annotations


class JsonWriterError(Exception):
    """Base class for json_writer errors."""


class WriterUsageError(JsonWriterError, RuntimeError):
    """Raised when a scoped writer is used out of order."""


class WriterBusyError(WriterUsageError):
    """Raised when a writer is touched while a nested writer is still open."""


class WriterClosedError(WriterUsageError):
    """Raised when a writer is used after it has been closed."""
