"""Error types raised by the configuration store."""

from __future__ import annotations


class ConfigStoreError(Exception):
    """Base class for all configuration store failures."""


class FileError(ConfigStoreError):
    """A configuration file could not be opened for reading or writing."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class ParseError(ConfigStoreError):
    """A non-blank, non-section line is not a valid ``key = value`` expression."""

    def __init__(
        self,
        reason: str,
        line: str,
        section: str | None,
        line_number: int | None = None,
        source: str | None = None,
    ) -> None:
        self.reason = reason
        self.line = line
        self.section = section
        self.line_number = line_number
        self.source = source
        super().__init__(self._describe())

    def _describe(self) -> str:
        location = self.source or "<text>"
        if self.line_number is not None:
            location = f"{location}:{self.line_number}"
        if self.section is None:
            scope = "before any section header"
        else:
            scope = f"under section '{self.section}'"
        return f"{location}: {scope}, {self.reason}: '{self.line}'"


class MissingKeyError(ConfigStoreError, KeyError):
    """Lookup of a key that is not present in the store."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        # KeyError would otherwise repr() its argument.
        return f"Could not find key: '{self.key}'"


class ConversionError(ConfigStoreError, ValueError):
    """A stored value cannot be converted to (or from) the requested type."""

    def __init__(self, message: str, *, key: str | None = None, value: object = None, kind: object = None) -> None:
        super().__init__(message)
        self.key = key
        self.value = value
        self.kind = kind


class StaleCursorError(ConfigStoreError, RuntimeError):
    """A cursor was used after keys were inserted into or removed from its store."""
