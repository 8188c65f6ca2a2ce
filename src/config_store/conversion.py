"""Conversion between stored strings and a closed set of Python types.

Every supported type has an explicit parse/format pair. Anything outside the
registry is rejected with :class:`ConversionError` instead of being coerced.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
import re
from typing import Any, Callable

from .errors import ConversionError
from .text import ASSIGNMENT, COMMENT_CHAR, split_key, trim_spaces

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Same vocabulary as configparser.RawConfigParser.BOOLEAN_STATES.
BOOLEAN_STATES = {
    "1": True,
    "yes": True,
    "true": True,
    "on": True,
    "0": False,
    "no": False,
    "false": False,
    "off": False,
}


@dataclass(frozen=True)
class Converter:
    """Parse/format pair for one supported type."""

    kind: type
    parse: Callable[[str], Any]
    format: Callable[[Any], str]


def _parse_str(text: str) -> str:
    return text


def _parse_int(text: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid integer literal {text!r}")
    return int(text)


def _parse_float(text: str) -> float:
    # float() tolerates surrounding whitespace; stored values must be consumed whole.
    if text != text.strip():
        raise ValueError(f"invalid float literal {text!r}")
    return float(text)


def _parse_bool(text: str) -> bool:
    try:
        return BOOLEAN_STATES[text.lower()]
    except KeyError:
        raise ValueError(f"invalid boolean literal {text!r}") from None


def _format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        return str(float(value))
    return float.__repr__(float(value))


_CONVERTERS: dict[type, Converter] = {
    str: Converter(str, _parse_str, lambda value: str.__str__(value)),
    bool: Converter(bool, _parse_bool, lambda value: "true" if value else "false"),
    int: Converter(int, _parse_int, lambda value: str(int(value))),
    float: Converter(float, _parse_float, _format_float),
}


def supported_types() -> tuple[type, ...]:
    return tuple(_CONVERTERS)


def converter_for(kind: type) -> Converter:
    """Return the converter registered for ``kind`` or one of its base types."""

    converter = _CONVERTERS.get(kind)
    if converter is not None:
        return converter
    if isinstance(kind, type):
        # bool is checked before int because it subclasses it.
        for base, candidate in _CONVERTERS.items():
            if issubclass(kind, base):
                return candidate
    names = ", ".join(t.__name__ for t in _CONVERTERS)
    raise ConversionError(f"Unsupported type {kind!r}; expected one of: {names}", kind=kind)


def parse_value(text: str, kind: type, key: str | None = None) -> Any:
    """Convert a stored string to ``kind``."""

    converter = converter_for(kind)
    try:
        return converter.parse(text)
    except ValueError as exc:
        raise ConversionError(
            f"Cannot convert {text!r}{_label(key)} to {converter.kind.__name__}",
            key=key,
            value=text,
            kind=converter.kind,
        ) from exc


def format_value(value: Any, key: str | None = None) -> str:
    """Render ``value`` in the canonical text form used for storage."""

    try:
        converter = converter_for(type(value))
    except ConversionError as exc:
        raise ConversionError(
            f"Cannot store value of type {type(value).__name__}{_label(key)}",
            key=key,
            value=value,
            kind=type(value),
        ) from exc
    return check_value(converter.format(value), key=key)


def _label(key: str | None) -> str:
    return f" for key '{key}'" if key is not None else ""


def _text_problem(text: str) -> str | None:
    if text != trim_spaces(text):
        return "has leading or trailing spaces"
    if "\n" in text or "\r" in text:
        return "contains a line break"
    if COMMENT_CHAR in text:
        return f"contains '{COMMENT_CHAR}'"
    return None


def check_value(text: str, key: str | None = None) -> str:
    """Reject text that ``save`` could not write as a single reloadable value."""

    problem = "is empty" if not text else _text_problem(text)
    if problem is not None:
        raise ConversionError(f"Value {text!r}{_label(key)} {problem}", key=key, value=text, kind=str)
    return text


def check_key(full_key: str) -> str:
    """Reject full keys whose section or key part would not survive a save and reload."""

    section, key = split_key(full_key)
    problem: str | None
    if not key:
        problem = "has an empty key part"
    elif ASSIGNMENT in key:
        problem = f"contains '{ASSIGNMENT}' in its key part"
    else:
        problem = _text_problem(section) or _text_problem(key)
    if problem is not None:
        raise ConversionError(f"Key {full_key!r} {problem}", key=full_key, value=full_key, kind=str)
    return full_key
