"""Construction options for the HTTP transport."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Union

from .errors import ConfigError

OptionsInput = Union[Mapping[str, Any], Iterable[tuple[str, Any]], None]

HTTP_OPTIONS = "http_options"
EXTRA_HEADERS = "extra_headers"
RECOGNIZED_OPTIONS = (HTTP_OPTIONS, EXTRA_HEADERS)


@dataclass(frozen=True)
class TransportOptions:
    http_options: Mapping[str, Any] = field(default_factory=dict)
    extra_headers: Mapping[str, str] = field(default_factory=dict)


def parse_options(options: OptionsInput = None) -> TransportOptions:
    """Fold ``options`` into a :class:`TransportOptions`.

    ``options`` may be a mapping or an iterable of ``(key, value)`` pairs.
    Entries are applied in order, so a repeated key keeps its last value.
    The first unrecognized key aborts parsing with :class:`ConfigError`.
    """
    http_options: Mapping[str, Any] = {}
    extra_headers: Mapping[str, str] = {}

    for entry in _entries(options):
        key, value = entry
        if key not in RECOGNIZED_OPTIONS:
            raise ConfigError(f"invalid option: {key!r}", option=entry)
        if key == HTTP_OPTIONS:
            http_options = _coerce_http_options(value)
        else:
            extra_headers = _coerce_headers(value)

    return TransportOptions(http_options=http_options, extra_headers=extra_headers)


def _entries(options: OptionsInput) -> list[tuple[Any, Any]]:
    if options is None:
        return []
    if isinstance(options, TransportOptions):
        return [(HTTP_OPTIONS, options.http_options), (EXTRA_HEADERS, options.extra_headers)]
    if isinstance(options, Mapping):
        return list(options.items())
    if isinstance(options, (str, bytes)):
        raise ConfigError("options must be a mapping or a list of (key, value) pairs", option=options)

    entries: list[tuple[Any, Any]] = []
    for item in options:
        if not isinstance(item, tuple) or len(item) != 2:
            raise ConfigError(f"invalid option: {item!r}", option=item)
        entries.append(item)
    return entries


def _coerce_http_options(value: Any) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigError("http_options must be a mapping", option=(HTTP_OPTIONS, value))
    return dict(value)


def _coerce_headers(value: Any) -> dict[str, str]:
    pairs = value.items() if isinstance(value, Mapping) else value
    headers: dict[str, str] = {}
    try:
        for name, header_value in pairs:
            if not isinstance(name, str) or not isinstance(header_value, str):
                raise ConfigError(
                    f"extra header {name!r} must map a string name to a string value",
                    option=(EXTRA_HEADERS, value),
                )
            if not name.isascii() or not header_value.isascii():
                raise ConfigError(
                    f"extra header {name!r} must be ASCII",
                    option=(EXTRA_HEADERS, value),
                )
            headers[name] = header_value
    except (TypeError, ValueError) as exc:
        raise ConfigError(
            "extra_headers must be a mapping or a list of (name, value) pairs",
            option=(EXTRA_HEADERS, value),
        ) from exc
    return headers


__all__ = ["EXTRA_HEADERS", "HTTP_OPTIONS", "OptionsInput", "RECOGNIZED_OPTIONS", "TransportOptions", "parse_options"]
