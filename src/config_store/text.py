"""Line and key helpers shared by the parser and serializer."""

from __future__ import annotations

from typing import Iterable, Iterator

COMMENT_CHAR = "#"
KEY_SEPARATOR = "/"
ASSIGNMENT = "="


def trim_spaces(text: str) -> str:
    """Strip leading and trailing ASCII spaces (tabs and other whitespace are kept)."""

    return text.strip(" ")


def strip_comment(line: str) -> str:
    """Drop everything from the first ``#`` onwards. ``#`` cannot be escaped."""

    index = line.find(COMMENT_CHAR)
    if index == -1:
        return line
    return line[:index]


def clean_lines(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, text)`` for every line that survives comment and space stripping."""

    for number, raw in enumerate(lines, start=1):
        line = trim_spaces(strip_comment(raw.rstrip("\r\n")))
        if line:
            yield number, line


def is_section_header(line: str) -> bool:
    return line.startswith("[") and line.endswith("]")


def section_name(header: str) -> str:
    return trim_spaces(header[1:-1])


def join_key(section: str, key: str) -> str:
    return f"{section}{KEY_SEPARATOR}{key}"


def split_key(full_key: str) -> tuple[str, str]:
    """Split a full key at its first ``/`` into ``(section, key)``.

    A key without a separator belongs to the empty-named section.
    """

    section, separator, key = full_key.partition(KEY_SEPARATOR)
    if not separator:
        return "", full_key
    return section, key
