"""Number rendering policy for JSON output."""

from __future__ import annotations

from decimal import Decimal
import math

# Chunk size for integers past CPython's int-to-str digit limit (4300).
_CHUNK_DIGITS = 4000
_CHUNK_BASE = 10**_CHUNK_DIGITS
_SAFE_BITS = 13000


def format_float(value: float) -> str | None:
    """Render the shortest round-trip text for ``value``.

    Returns ``None`` for NaN and infinities, which JSON cannot represent.
    Whole values drop their ``.0`` suffix and exponents are written without
    ``+`` or zero padding (``1.5e30``, ``1e-7``).
    """
    value = float(value)
    if not math.isfinite(value):
        return None
    text = repr(value)
    if "e" in text:
        mantissa, exponent = text.split("e", 1)
        return f"{mantissa}e{int(exponent)}"
    if text.endswith(".0"):
        return text[:-2]
    return text


def _format_large_int(value: int) -> str:
    sign = "-" if value < 0 else ""
    value = abs(value)
    chunks: list[str] = []
    while value >= _CHUNK_BASE:
        value, low = divmod(value, _CHUNK_BASE)
        chunks.append(f"{low:0{_CHUNK_DIGITS}d}")
    chunks.append(str(value))
    chunks.reverse()
    return sign + "".join(chunks)


def format_int(value: int) -> str:
    """Exact decimal digits of ``value``, of any magnitude."""
    value = int(value)
    if value.bit_length() <= _SAFE_BITS:
        return str(value)
    return _format_large_int(value)


def format_decimal(value: Decimal) -> str | None:
    """Render a finite Decimal verbatim; ``None`` for NaN/Infinity."""
    if not value.is_finite():
        return None
    return str(value)
