# -*- coding: utf-8 -*-
"""Tests for SheetCsvConfig, environment overrides and dialect building."""

import logging
import os

import pytest

from sheetcsv.config import (
    SheetCsvConfig,
    configure_logging,
    get_config,
    reset_config,
    set_config,
)
from sheetcsv.exceptions import DialectError


class TestDefaults:
    """Default configuration values."""

    def test_defaults(self):
        config = SheetCsvConfig()

        assert config.default_encoding == "utf-8"
        assert config.default_delimiter == ","
        assert config.default_escape == '"'
        assert config.decode_newline == ""
        assert config.encode_newline == "\r\n"
        assert config.cell_newline == os.linesep
        assert config.detect_bom_stream is False
        assert config.detect_bom_file is True
        assert config.write_bom is False
        assert config.enable_encoding_detection is False
        assert config.read_chunk_size == 65536
        assert config.log_level == "INFO"


class TestFromEnv:
    """Environment variable overrides with the SHEETCSV_ prefix."""

    def test_no_env_matches_defaults(self):
        assert SheetCsvConfig.from_env() == SheetCsvConfig()

    def test_character_escapes(self, monkeypatch):
        monkeypatch.setenv("SHEETCSV_DEFAULT_DELIMITER", "\\t")
        monkeypatch.setenv("SHEETCSV_ENCODE_NEWLINE", "\\n")
        monkeypatch.setenv("SHEETCSV_CELL_NEWLINE", "\\r\\n")
        monkeypatch.setenv("SHEETCSV_DEFAULT_ESCAPE", "'")

        config = SheetCsvConfig.from_env()

        assert config.default_delimiter == "\t"
        assert config.encode_newline == "\n"
        assert config.cell_newline == "\r\n"
        assert config.default_escape == "'"

    def test_booleans(self, monkeypatch):
        monkeypatch.setenv("SHEETCSV_DETECT_BOM_STREAM", "yes")
        monkeypatch.setenv("SHEETCSV_DETECT_BOM_FILE", "false")
        monkeypatch.setenv("SHEETCSV_WRITE_BOM", "1")

        config = SheetCsvConfig.from_env()

        assert config.detect_bom_stream is True
        assert config.detect_bom_file is False
        assert config.write_bom is True

    def test_integer_and_strings(self, monkeypatch):
        monkeypatch.setenv("SHEETCSV_READ_CHUNK_SIZE", "1024")
        monkeypatch.setenv("SHEETCSV_DEFAULT_ENCODING", "latin-1")
        monkeypatch.setenv("SHEETCSV_LOG_LEVEL", "DEBUG")

        config = SheetCsvConfig.from_env()

        assert config.read_chunk_size == 1024
        assert config.default_encoding == "latin-1"
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize("value", ["lots", "0", "-5"])
    def test_bad_chunk_size_uses_default(self, monkeypatch, value):
        monkeypatch.setenv("SHEETCSV_READ_CHUNK_SIZE", value)
        assert SheetCsvConfig.from_env().read_chunk_size == 65536

    def test_bad_escape_sequence_uses_default(self, monkeypatch):
        monkeypatch.setenv("SHEETCSV_DEFAULT_DELIMITER", "\\x")
        assert SheetCsvConfig.from_env().default_delimiter == ","


class TestSingleton:
    """get_config / set_config / reset_config."""

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_set_and_reset(self, monkeypatch):
        custom = SheetCsvConfig(default_delimiter=";")
        set_config(custom)
        assert get_config() is custom

        reset_config()
        monkeypatch.setenv("SHEETCSV_DEFAULT_DELIMITER", "|")
        assert get_config().default_delimiter == "|"


class TestDialect:
    """SheetCsvConfig.dialect building and validation."""

    def test_decode_defaults(self):
        dialect = SheetCsvConfig(cell_newline="\n").dialect("decode")

        assert dialect.delimiter == ","
        assert dialect.escape == '"'
        assert dialect.newline == ""
        assert dialect.permissive_newline is True
        assert dialect.cell_newline == "\n"

    def test_encode_defaults(self):
        dialect = SheetCsvConfig().dialect("encode")
        assert dialect.newline == "\r\n"
        assert dialect.permissive_newline is False

    def test_overrides(self):
        dialect = SheetCsvConfig().dialect(
            "decode", delimiter=";", escape="'", newline="\n", cell_newline="\r",
        )
        assert (dialect.delimiter, dialect.escape) == (";", "'")
        assert (dialect.newline, dialect.cell_newline) == ("\n", "\r")

    def test_multi_char_delimiter(self):
        with pytest.raises(DialectError) as exc_info:
            SheetCsvConfig().dialect("decode", delimiter=",,")

        assert exc_info.value.field == "delimiter"
        assert exc_info.value.context["value"] == ",,"

    def test_empty_escape(self):
        with pytest.raises(DialectError) as exc_info:
            SheetCsvConfig().dialect("encode", escape="")
        assert exc_info.value.field == "escape"

    def test_delimiter_equals_escape(self):
        with pytest.raises(DialectError):
            SheetCsvConfig().dialect("decode", delimiter="'", escape="'")

    @pytest.mark.parametrize("mode,kwargs", [
        ("encode", {"delimiter": "|", "newline": "||"}),
        ("decode", {"escape": "\n"}),
    ])
    def test_delimiter_or_escape_in_newline(self, mode, kwargs):
        with pytest.raises(DialectError) as exc_info:
            SheetCsvConfig().dialect(mode, **kwargs)
        assert exc_info.value.field is None

    def test_empty_cell_newline(self):
        with pytest.raises(DialectError):
            SheetCsvConfig().dialect("decode", cell_newline="")

    def test_empty_encode_newline(self):
        with pytest.raises(DialectError) as exc_info:
            SheetCsvConfig(encode_newline="").dialect("encode")
        assert exc_info.value.field == "newline"

    def test_unknown_direction(self):
        with pytest.raises(ValueError):
            SheetCsvConfig().dialect("sideways")


class TestConfigureLogging:
    """configure_logging applies levels to the sheetcsv logger."""

    def test_explicit_level(self):
        configure_logging("debug")
        assert logging.getLogger("sheetcsv").level == logging.DEBUG

    def test_configured_level(self):
        set_config(SheetCsvConfig(log_level="WARNING"))
        configure_logging()
        assert logging.getLogger("sheetcsv").level == logging.WARNING

    def test_unknown_level_falls_back(self):
        configure_logging("chatty")
        assert logging.getLogger("sheetcsv").level == logging.INFO
