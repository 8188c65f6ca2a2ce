"""In-memory store for INI-style ``section/key = value`` configuration files."""

from .conversion import BOOLEAN_STATES, format_value, parse_value, supported_types
from .cursor import EntryCursor, SortedEntryMap
from .errors import (
    ConfigStoreError,
    ConversionError,
    FileError,
    MissingKeyError,
    ParseError,
    StaleCursorError,
)
from .logging_utils import JsonFormatter, configure_logging
from .models import Entry
from .parser import iter_entries, parse_file, parse_text
from .serializer import format_entries
from .settings import LoggingConfig, ParserConfig, StoreSettings
from .store import ConfigStore

__all__ = [
    "BOOLEAN_STATES",
    "ConfigStore",
    "ConfigStoreError",
    "ConversionError",
    "Entry",
    "EntryCursor",
    "FileError",
    "JsonFormatter",
    "LoggingConfig",
    "MissingKeyError",
    "ParseError",
    "ParserConfig",
    "SortedEntryMap",
    "StaleCursorError",
    "StoreSettings",
    "configure_logging",
    "format_entries",
    "format_value",
    "iter_entries",
    "parse_file",
    "parse_text",
    "parse_value",
    "supported_types",
]
