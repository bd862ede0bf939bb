"""Append-only JSON writer that streams output without building a tree."""

from .config_io import FORMAT_VERSION, ConfigError, WriterConfig, load_writer_config
from .errors import JsonWriterError, WriterBusyError, WriterClosedError, WriterUsageError
from .escape import escape_fragment, escape_string, write_string, write_unquoted_fragment
from .number_format import format_float, format_int
from .output import dump, stream_array, write_json
from .pretty import PrettySink
from .scope import ArrayWriter, ObjectWriter
from .sink import CompactSink, JsonSink
from .value import NULL, JsonWritable, Null, to_json_string, write_value

__all__ = [
    "JsonSink",
    "CompactSink",
    "PrettySink",
    "ObjectWriter",
    "ArrayWriter",
    "write_value",
    "to_json_string",
    "NULL",
    "Null",
    "JsonWritable",
    "write_string",
    "write_unquoted_fragment",
    "escape_string",
    "escape_fragment",
    "format_float",
    "format_int",
    "stream_array",
    "dump",
    "write_json",
    "WriterConfig",
    "load_writer_config",
    "ConfigError",
    "FORMAT_VERSION",
    "JsonWriterError",
    "WriterUsageError",
    "WriterBusyError",
    "WriterClosedError",
]
