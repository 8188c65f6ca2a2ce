"""Ordered entry container and the bidirectional cursor that walks it."""

from __future__ import annotations

from bisect import bisect_left, insort
from typing import Iterator

from .errors import StaleCursorError
from .models import Entry


class SortedEntryMap:
    """Mapping of full key to value kept in lexicographic key order.

    ``version`` changes whenever a key is inserted or removed. Replacing the
    value of an existing key leaves it untouched.
    """

    def __init__(self) -> None:
        self._values: dict[str, str] = {}
        self._keys: list[str] = []
        self.version = 0

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def put(self, key: str, value: str) -> None:
        if key not in self._values:
            insort(self._keys, key)
            self.version += 1
        self._values[key] = value

    def remove(self, key: str) -> None:
        del self._values[key]
        del self._keys[bisect_left(self._keys, key)]
        self.version += 1

    def key_at(self, position: int) -> str:
        return self._keys[position]

    def value_of(self, key: str) -> str:
        return self._values[key]

    def keys(self) -> list[str]:
        return list(self._keys)

    def items(self) -> Iterator[tuple[str, str]]:
        for key in self._keys:
            yield key, self._values[key]


class EntryCursor:
    """Position within a :class:`SortedEntryMap`.

    A cursor sits on an entry or one past the last entry (the end position).
    Inserting or removing any key invalidates every cursor created before the
    change; using an invalidated cursor raises :class:`StaleCursorError`.
    """

    def __init__(self, entries: SortedEntryMap, position: int) -> None:
        self._entries = entries
        self._position = position
        self._version = entries.version

    def _check(self) -> None:
        if self._version != self._entries.version:
            raise StaleCursorError("Cursor used after the store was structurally modified")

    @property
    def at_end(self) -> bool:
        self._check()
        return self._position == len(self._entries)

    @property
    def entry(self) -> Entry:
        self._check()
        if self._position >= len(self._entries):
            raise IndexError("Cannot dereference the end cursor")
        key = self._entries.key_at(self._position)
        return Entry(full_key=key, value=self._entries.value_of(key))

    def next(self) -> "EntryCursor":
        self._check()
        if self._position >= len(self._entries):
            raise IndexError("Cannot advance past the end cursor")
        self._position += 1
        return self

    def previous(self) -> "EntryCursor":
        self._check()
        if self._position == 0:
            raise IndexError("Cannot move before the first entry")
        self._position -= 1
        return self

    def copy(self) -> "EntryCursor":
        self._check()
        return EntryCursor(self._entries, self._position)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EntryCursor):
            return NotImplemented
        self._check()
        other._check()
        return self._entries is other._entries and self._position == other._position

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"EntryCursor(position={self._position}, size={len(self._entries)})"
