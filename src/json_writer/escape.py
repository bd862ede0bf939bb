"""JSON string escaping.

Only ASCII control characters and the three characters ``"``, ``\\`` and
``/`` are escaped. Everything from U+0080 upward is copied through as-is.
"""

from __future__ import annotations

import re
from typing import Protocol

_ESCAPE_RE = re.compile(r'[\x00-\x1f"\\/]')

_SHORT_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "/": "\\/",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def _build_replacements() -> dict[str, str]:
    out = {chr(code): f"\\u{code:04X}" for code in range(0x20)}
    out.update(_SHORT_ESCAPES)
    return out


REPLACEMENTS = _build_replacements()


class FragmentBuffer(Protocol):
    def fragment(self, raw: str) -> None: ...


def write_unquoted_fragment(buffer: FragmentBuffer, text: str) -> None:
    """Escape ``text`` into ``buffer`` without surrounding quotes."""
    written = 0
    for match in _ESCAPE_RE.finditer(text):
        start = match.start()
        if written < start:
            buffer.fragment(text[written:start])
        buffer.fragment(REPLACEMENTS[match.group()])
        written = start + 1
    if written < len(text):
        buffer.fragment(text[written:] if written else text)


def write_string(buffer: FragmentBuffer, text: str) -> None:
    """Quote and escape ``text`` into ``buffer``."""
    buffer.fragment('"')
    write_unquoted_fragment(buffer, text)
    buffer.fragment('"')


class _Collector:
    __slots__ = ("parts",)

    def __init__(self) -> None:
        self.parts: list[str] = []

    def fragment(self, raw: str) -> None:
        self.parts.append(raw)


def escape_fragment(text: str) -> str:
    out = _Collector()
    write_unquoted_fragment(out, text)
    return "".join(out.parts)


def escape_string(text: str) -> str:
    out = _Collector()
    write_string(out, text)
    return "".join(out.parts)
