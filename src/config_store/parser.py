"""Parser for the INI-style configuration format.

Lines are stripped of ``#`` comments and surrounding spaces; the remaining
lines are either ``[section]`` headers or ``key = value`` expressions. Each
expression yields a ``section/key`` full key.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

import io
import logging

from .errors import FileError, ParseError
from .settings import ParserConfig
from .text import ASSIGNMENT, clean_lines, is_section_header, join_key, section_name, trim_spaces

logger = logging.getLogger(__name__)


def iter_entries(
    lines: Iterable[str],
    source: str | None = None,
    allow_global_keys: bool = False,
) -> Iterator[tuple[str, str]]:
    """Yield ``(full_key, value)`` pairs in file order.

    Pairs are produced lazily, so a caller merging them as they arrive keeps
    everything read before a malformed line.
    """

    section: str | None = None
    for number, line in clean_lines(lines):
        if is_section_header(line):
            section = section_name(line)
            continue

        index = line.find(ASSIGNMENT)
        if index == -1:
            raise ParseError("malformed expression line", line, section, number, source)
        key = trim_spaces(line[:index])
        value = trim_spaces(line[index + 1 :])
        if not key or not value:
            raise ParseError("missing key or value", line, section, number, source)
        if section is None:
            if not allow_global_keys:
                raise ParseError("missing section header", line, section, number, source)
            logger.debug("global_key", extra={"key": key, "source": source, "line_number": number})

        yield join_key(section or "", key), value


def parse_text(text: str, source: str | None = None, allow_global_keys: bool = False) -> list[tuple[str, str]]:
    """Parse a whole document held in memory."""

    # Universal newlines, the same line splitting open() applies to files.
    lines = io.StringIO(text, newline=None)
    return list(iter_entries(lines, source=source, allow_global_keys=allow_global_keys))


def read_lines(path: str | Path, encoding: str = "utf-8") -> list[str]:
    """Read every line of ``path``, translating OS failures into :class:`FileError`."""

    try:
        with open(path, encoding=encoding) as handle:
            return handle.readlines()
    except (OSError, LookupError, UnicodeDecodeError) as exc:
        raise FileError(f"Cannot open input file: {path}", str(path)) from exc


def parse_file(path: str | Path, config: ParserConfig | None = None) -> Iterator[tuple[str, str]]:
    """Open ``path`` and return an iterator over its entries.

    The file is read completely before the first entry is produced, so open
    failures surface here rather than on first iteration.
    """

    config = config or ParserConfig()
    lines = read_lines(path, encoding=config.encoding)
    return iter_entries(lines, source=str(path), allow_global_keys=config.allow_global_keys)
