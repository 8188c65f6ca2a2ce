"""Serializer writing entries back to the grouped section format."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .errors import FileError
from .text import split_key


def format_entries(entries: Iterable[tuple[str, str]]) -> str:
    """Render entries as ``[section]`` blocks of ``key = value`` lines.

    Each section gets exactly one header. Sections appear in the order their
    first entry arrives and keep their entries in arrival order, so sorted
    input gives sorted output. Keys without ``/`` share the ``[]`` block.
    """

    groups: dict[str, list[str]] = {}
    for full_key, value in entries:
        section, key = split_key(full_key)
        groups.setdefault(section, []).append(f"{key} = {value}")

    lines: list[str] = []
    for section, assignments in groups.items():
        lines.append("")
        lines.append(f"[{section}]")
        lines.extend(assignments)
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def write_text(path: str | Path, text: str, encoding: str = "utf-8") -> None:
    try:
        with open(path, "w", encoding=encoding) as handle:
            handle.write(text)
    except (OSError, LookupError, UnicodeEncodeError) as exc:
        raise FileError(f"Cannot open output file: {path}", str(path)) from exc
