"""Unit tests for dotenv_exec.config."""

import pytest

from dotenv_exec.config import get_config_path, load_options
from dotenv_exec.errors import OptionsParseError


class TestGetConfigPath:
    def test_default(self):
        assert get_config_path({}) == ".env"

    def test_from_env(self):
        assert get_config_path({"DOTENV_CONFIG_PATH": "x.env"}) == "x.env"


class TestLoadOptions:
    def test_defaults(self):
        options = load_options({})
        assert options.override is False
        assert options.strict is True
        assert options.debug is False
        assert options.encoding == "utf-8"

    @pytest.mark.parametrize("value", ["true", "TRUE", "True", "1"])
    def test_true_spellings(self, value):
        assert load_options({"DOTENV_CONFIG_OVERRIDE": value}).override is True

    @pytest.mark.parametrize("value", ["false", "FALSE", "0"])
    def test_false_spellings(self, value):
        assert load_options({"DOTENV_CONFIG_STRICT": value}).strict is False

    def test_empty_value_keeps_default(self):
        options = load_options({"DOTENV_CONFIG_STRICT": "", "DOTENV_CONFIG_DEBUG": ""})
        assert options.strict is True
        assert options.debug is False

    def test_debug_flag(self):
        assert load_options({"DOTENV_CONFIG_DEBUG": "1"}).debug is True

    @pytest.mark.parametrize("value", ["yes", "on", "2", "nope"])
    def test_rejects_other_bool_spellings(self, value):
        with pytest.raises(OptionsParseError) as exc_info:
            load_options({"DOTENV_CONFIG_DEBUG": value})
        assert exc_info.value.name == "DOTENV_CONFIG_DEBUG"
        assert exc_info.value.value == value

    def test_encoding_is_normalized(self):
        assert load_options({"DOTENV_CONFIG_ENCODING": "LATIN1"}).encoding == "iso8859-1"

    def test_unknown_encoding(self):
        with pytest.raises(OptionsParseError, match="DOTENV_CONFIG_ENCODING"):
            load_options({"DOTENV_CONFIG_ENCODING": "klingon-8"})

    def test_reads_process_environment_by_default(self, monkeypatch):
        monkeypatch.setenv("DOTENV_CONFIG_OVERRIDE", "1")
        assert load_options().override is True
