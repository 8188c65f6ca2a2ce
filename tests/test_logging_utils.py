import json
import logging

from config_store.logging_utils import JsonFormatter, configure_logging
from config_store.settings import LoggingConfig


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.LogRecord("config_store.store", logging.INFO, __file__, 1, "store_loaded", (), None)
    record.path = "example.ini"
    record.entries = 3
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "INFO"
    assert payload["name"] == "config_store.store"
    assert payload["message"] == "store_loaded"
    assert payload["path"] == "example.ini"
    assert payload["entries"] == 3
    assert "lineno" not in payload


def test_configure_logging_writes_json_file(tmp_path) -> None:
    log_file = tmp_path / "store.log"
    configure_logging(LoggingConfig(level="info", json_format=True, log_file=str(log_file)))
    logging.getLogger("config_store.test").info("store_saved", extra={"entries": 2})
    for handler in logging.getLogger().handlers:
        handler.flush()

    payload = json.loads(log_file.read_text().splitlines()[-1])
    assert payload["message"] == "store_saved"
    assert payload["entries"] == 2


def test_configure_logging_unknown_level_falls_back_to_warning() -> None:
    configure_logging(LoggingConfig(level="chatty"))
    assert logging.getLogger().level == logging.WARNING
