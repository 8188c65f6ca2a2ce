import pytest
from pydantic import ValidationError

from config_store.settings import LoggingConfig, ParserConfig, StoreSettings


def test_settings_load_defaults() -> None:
    settings = StoreSettings()
    assert settings.logging.level == "WARNING"
    assert settings.logging.json_format is False
    assert settings.parser.allow_global_keys is False
    assert settings.parser.encoding == "utf-8"


def test_settings_read_nested_environment(monkeypatch) -> None:
    monkeypatch.setenv("CONFIG_STORE_PARSER__ALLOW_GLOBAL_KEYS", "true")
    monkeypatch.setenv("CONFIG_STORE_LOGGING__LEVEL", "DEBUG")
    settings = StoreSettings()
    assert settings.parser.allow_global_keys is True
    assert settings.logging.level == "DEBUG"


def test_settings_from_toml(tmp_path) -> None:
    path = tmp_path / "settings.toml"
    path.write_text('[logging]\nlevel = "INFO"\njson_format = true\n\n[parser]\nencoding = "latin-1"\n')
    settings = StoreSettings.from_toml(path)
    assert settings.logging.level == "INFO"
    assert settings.logging.json_format is True
    assert settings.parser.encoding == "latin-1"
    assert settings.parser.allow_global_keys is False


def test_logging_config_validates_bounds() -> None:
    with pytest.raises(ValidationError):
        LoggingConfig(max_bytes=0)


def test_parser_config_is_plain_model() -> None:
    assert ParserConfig(allow_global_keys=True).model_dump() == {"allow_global_keys": True, "encoding": "utf-8"}


def test_parser_config_rejects_unknown_encoding() -> None:
    with pytest.raises(ValidationError, match="unknown encoding"):
        ParserConfig(encoding="bogus")
