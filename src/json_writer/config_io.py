"""Writer options loading with strict JSON parsing and version checks."""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path
from typing import Any

from .pretty import PrettySink
from .sink import CompactSink

FORMAT_VERSION = "1"

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a writer options file violates its contract."""


@dataclass(frozen=True)
class WriterConfig:
    pretty: bool = False
    indent: str = "  "
    flush_threshold: int = 2048

    def __post_init__(self) -> None:
        if self.flush_threshold < 0:
            raise ConfigError("flush_threshold must be >= 0")
        if self.indent.strip(" \t"):
            raise ConfigError("indent may only contain spaces and tabs")

    def make_sink(self) -> CompactSink:
        """Build an empty sink matching these options."""
        if self.pretty:
            return PrettySink(self.indent)
        return CompactSink()


_FIELD_TYPES: dict[str, type] = {
    "pretty": bool,
    "indent": str,
    "flush_threshold": int,
}


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in pairs:
        if key in out:
            raise ConfigError(f"duplicate JSON key: {key}")
        out[key] = value
    return out


def _check_field(name: str, value: Any) -> Any:
    expected = _FIELD_TYPES[name]
    # bool is an int subclass; never accept it for numeric fields.
    if expected is int and isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    if not isinstance(value, expected):
        raise ConfigError(f"{name} must be {expected.__name__}, got {value!r}")
    return value


def parse_writer_config(cfg: Any) -> WriterConfig:
    """Validate an already decoded options object."""
    if not isinstance(cfg, dict):
        raise ConfigError("writer config must be a JSON object")

    format_version = cfg.get("format_version")
    if format_version is None:
        raise ConfigError("format_version is required")
    if format_version != FORMAT_VERSION:
        raise ConfigError(
            f"format_version mismatch: got {format_version!r}, expected {FORMAT_VERSION!r}"
        )

    unknown = sorted(set(cfg) - set(_FIELD_TYPES) - {"format_version"})
    if unknown:
        raise ConfigError(f"unknown writer config keys: {', '.join(unknown)}")

    kwargs: dict[str, Any] = {}
    for name in _FIELD_TYPES:
        if name in cfg:
            kwargs[name] = _check_field(name, cfg[name])
    return WriterConfig(**kwargs)


def load_writer_config(path: str | Path) -> WriterConfig:
    """Load a strict UTF-8 JSON writer options file."""
    raw = Path(path).read_bytes()

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigError("writer config must be UTF-8") from exc

    try:
        cfg = json.loads(text, object_pairs_hook=_reject_duplicate_keys)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON: {exc.msg}") from exc

    config = parse_writer_config(cfg)
    logger.debug("loaded writer config from %s: %r", path, config)
    return config
