import os
import sys
import pytest

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, ROOT_DIR)

from as2_mime.config_manager import (
    MimeConfiguration,
    ParsingConfiguration,
    LoggingConfiguration,
    get_config_from_env,
    get_default_config,
)
from as2_mime.exceptions import ConfigurationError


def test_defaults():
    config = get_default_config()
    assert config.parsing.keep_raw is True
    assert config.parsing.max_nested_depth == 10
    assert config.logging.level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("AS2_MIME_KEEP_RAW", "no")
    monkeypatch.setenv("AS2_MIME_MAX_NESTED_DEPTH", "4")
    monkeypatch.setenv("AS2_MIME_LOG_LEVEL", "debug")
    config = get_config_from_env()
    assert config.parsing.keep_raw is False
    assert config.parsing.max_nested_depth == 4
    assert config.logging.level == "DEBUG"


def test_unparseable_env_values_fall_back(monkeypatch):
    monkeypatch.setenv("AS2_MIME_KEEP_RAW", "maybe")
    monkeypatch.setenv("AS2_MIME_MAX_NESTED_DEPTH", "lots")
    config = get_config_from_env()
    assert config.parsing.keep_raw is True
    assert config.parsing.max_nested_depth == 10


@pytest.mark.parametrize("config", [
    MimeConfiguration(parsing=ParsingConfiguration(max_nested_depth=0)),
    MimeConfiguration(logging=LoggingConfiguration(level="CHATTY")),
])
def test_invalid_configuration(config):
    with pytest.raises(ConfigurationError):
        config.validate()
