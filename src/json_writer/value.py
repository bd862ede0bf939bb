"""Encoding of Python values into sink operations."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import Decimal
import numbers
from typing import Any, Protocol, runtime_checkable

from . import scope
from .errors import WriterBusyError
from .number_format import format_decimal, format_int
from .pretty import PrettySink
from .sink import CompactSink, JsonSink


class Null:
    """Marker for an explicit JSON ``null``. ``None`` works as well."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NULL"


NULL = Null()


@runtime_checkable
class JsonWritable(Protocol):
    """Anything that knows how to append itself to a sink."""

    def write_json(self, sink: JsonSink) -> None: ...


def _encode_mapping(sink: JsonSink, value: Mapping[Any, Any]) -> None:
    with scope.ObjectWriter(sink) as obj:
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"JSON object keys must be str, not {type(key).__name__}")
            obj.value(key, item)


def _encode_iterable(sink: JsonSink, value: Iterable[Any]) -> None:
    with scope.ArrayWriter(sink) as array:
        for item in value:
            array.value(item)


def _encode(sink: JsonSink, value: Any) -> None:
    if value is None or isinstance(value, Null):
        sink.null()
    elif hasattr(type(value), "write_json"):
        value.write_json(sink)
    elif isinstance(value, bool):
        sink.boolean(value)
    elif isinstance(value, numbers.Integral):
        sink.number_from_text(format_int(value))
    elif isinstance(value, Decimal):
        text = format_decimal(value)
        if text is None:
            sink.null()
        else:
            sink.number_from_text(text)
    elif isinstance(value, numbers.Real):
        sink.number_from_float(float(value))
    elif isinstance(value, str):
        sink.string(value)
    elif isinstance(value, Mapping):
        _encode_mapping(sink, value)
    elif isinstance(value, Iterable):
        _encode_iterable(sink, value)
    else:
        raise TypeError(f"unsupported type for JSON output: {type(value)!r}")


def write_value(sink: JsonSink, value: Any) -> None:
    """Append the JSON form of ``value`` to ``sink``.

    Mappings and iterables are written in their own iteration order; keys are
    never sorted. Writers opened while encoding (by containers or by a
    ``write_json`` method) must be closed before this returns.
    """
    owner = sink._active_scope
    sink._active_scope = None
    try:
        _encode(sink, value)
    except BaseException:
        while sink._active_scope is not None:
            sink._active_scope._finish()
        raise
    else:
        if sink._active_scope is not None:
            leaked = sink._active_scope
            while sink._active_scope is not None:
                sink._active_scope._finish()
            raise WriterBusyError(f"{type(leaked).__name__} left open while writing a value")
    finally:
        sink._active_scope = owner


def to_json_string(value: Any, *, indent: str | int | None = None) -> str:
    """Return ``value`` as compact JSON, or pretty JSON when ``indent`` is set.

    An integer ``indent`` means that many spaces per level.
    """
    if indent is None:
        sink: CompactSink = CompactSink()
    else:
        sink = PrettySink(" " * indent if isinstance(indent, int) else indent)
    write_value(sink, value)
    return sink.getvalue()
