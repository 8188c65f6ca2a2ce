"""In-memory configuration store keyed by ``section/key``."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterator, TextIO

import logging
import sys

from .conversion import check_key, format_value, parse_value
from .cursor import EntryCursor, SortedEntryMap
from .errors import MissingKeyError, StaleCursorError
from .models import Entry
from .parser import parse_file
from .serializer import format_entries, write_text
from .settings import ParserConfig
from .text import split_key

PRINT_HEADER = "*** Parameters ***"

_MISSING = object()


class ConfigStore:
    """Flat, ordered mapping of ``section/key`` to string values.

    Values are stored exactly as read (trimmed text) and converted only when a
    typed accessor asks for them. Iteration, ``print`` and ``save`` all follow
    lexicographic full-key order.
    """

    def __init__(self, path: str | Path | None = None, config: ParserConfig | None = None) -> None:
        self._config = config or ParserConfig()
        self._entries = SortedEntryMap()
        self._logger = logging.getLogger(__name__)
        if path is not None:
            self.load(path)

    @property
    def config(self) -> ParserConfig:
        return self._config

    def load(self, path: str | Path) -> None:
        """Merge the entries of ``path`` into the store.

        Later values overwrite earlier ones. On a parse error the entries read
        before the bad line stay merged.
        """

        count = 0
        for full_key, value in parse_file(path, self._config):
            self._entries.put(full_key, value)
            count += 1
        self._logger.info("store_loaded", extra={"path": str(path), "entries": count, "total": len(self)})

    def save(self, path: str | Path) -> None:
        """Write every entry to ``path`` grouped by section."""

        write_text(path, self.dumps(), encoding=self._config.encoding)
        self._logger.info("store_saved", extra={"path": str(path), "entries": len(self)})

    def dumps(self) -> str:
        """Return the text ``save`` would write."""

        return format_entries(self._entries.items())

    def get(self, key: str, kind: type = str, default: Any = _MISSING) -> Any:
        """Return the value of ``key`` converted to ``kind``.

        ``default`` is returned only when the key is absent; a present value
        that cannot be converted always raises :class:`ConversionError`.
        """

        text = self._entries.get(key)
        if text is None:
            if default is not _MISSING:
                return default
            raise MissingKeyError(key)
        return parse_value(text, kind, key=key)

    def get_str(self, key: str) -> str:
        return self.get(key, str)

    def get_int(self, key: str) -> int:
        return self.get(key, int)

    def get_float(self, key: str) -> float:
        return self.get(key, float)

    def get_bool(self, key: str) -> bool:
        return self.get(key, bool)

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key`` in its canonical text form.

        Keys and values that ``save`` could not write back unchanged (empty
        values, line breaks, ``#``, surrounding spaces, ``=`` in the key part)
        raise :class:`ConversionError`. A key without ``/`` is kept as given but
        is written under the ``[]`` header, so it reloads as ``/key``.
        """

        self._entries.put(check_key(key), format_value(value, key=key))

    def delete(self, key: str) -> None:
        if key not in self._entries:
            raise MissingKeyError(key)
        self._entries.remove(key)

    def print(self, stream: TextIO | None = None) -> None:
        """Write a header followed by one ``full_key: value`` line per entry."""

        if stream is None:
            stream = sys.stdout
        stream.write(PRINT_HEADER + "\n")
        for full_key, value in self._entries.items():
            stream.write(f"{full_key}: {value}\n")
        stream.write("\n")

    def get_section_map(self, section: str) -> dict[str, str]:
        """Return ``{key: value}`` for every entry in ``section``."""

        result: dict[str, str] = {}
        for full_key, value in self._entries.items():
            name, key = split_key(full_key)
            if name == section:
                result[key] = value
        return result

    def get_section(self, section: str) -> "ConfigStore":
        """Return a new store holding ``section``'s entries keyed without the section prefix."""

        projected = ConfigStore(config=self._config.model_copy())
        for key, value in self.get_section_map(section).items():
            projected._entries.put(key, value)
        return projected

    def sections(self) -> list[str]:
        names: list[str] = []
        for full_key in self._entries.keys():
            name = split_key(full_key)[0]
            if name not in names:
                names.append(name)
        return names

    def begin(self) -> EntryCursor:
        return EntryCursor(self._entries, 0)

    def end(self) -> EntryCursor:
        return EntryCursor(self._entries, len(self._entries))

    def keys(self) -> list[str]:
        return self._entries.keys()

    def items(self) -> list[tuple[str, str]]:
        return list(self._entries.items())

    def to_dict(self) -> dict[str, str]:
        return dict(self._entries.items())

    def __iter__(self) -> Iterator[Entry]:
        cursor = self.begin()
        try:
            while not cursor.at_end:
                yield cursor.entry
                cursor.next()
        except StaleCursorError:
            raise StaleCursorError("Store changed size during iteration") from None

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigStore):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ConfigStore(entries={len(self)})"
