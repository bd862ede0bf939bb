"""Streaming helpers that move buffered JSON into files and binary streams."""

from __future__ import annotations

from collections.abc import Iterable
import logging
from pathlib import Path
from typing import Any, BinaryIO

from .config_io import WriterConfig
from .scope import ArrayWriter
from .value import write_value

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = WriterConfig()


def stream_array(
    stream: BinaryIO,
    items: Iterable[Any],
    *,
    config: WriterConfig | None = None,
) -> int:
    """Write ``items`` as one top-level JSON array to ``stream``.

    The buffer is flushed whenever it grows past ``config.flush_threshold``
    bytes, so memory use stays bounded for arbitrarily long inputs. Returns
    the total number of bytes written.
    """
    cfg = config or _DEFAULT_CONFIG
    sink = cfg.make_sink()
    total = 0
    count = 0
    with ArrayWriter(sink) as array:
        for item in items:
            array.value(item)
            count += 1
            if array.buffer_len() > cfg.flush_threshold:
                total += array.output_buffered_data(stream)
    total += sink.output_buffered_data(stream)
    logger.debug("streamed %d items (%d bytes)", count, total)
    return total


def dump(value: Any, stream: BinaryIO, *, config: WriterConfig | None = None) -> int:
    """Write ``value`` to a binary ``stream``; returns the byte count."""
    sink = (config or _DEFAULT_CONFIG).make_sink()
    write_value(sink, value)
    return sink.output_buffered_data(stream)


def write_json(path: str | Path, value: Any, *, config: WriterConfig | None = None) -> None:
    """Write ``value`` to ``path`` as UTF-8 JSON with a trailing LF."""
    sink = (config or _DEFAULT_CONFIG).make_sink()
    write_value(sink, value)
    sink.fragment("\n")
    with Path(path).open("wb") as fh:
        sink.output_buffered_data(fh)
