# -*- coding: utf-8 -*-
"""Pytest configuration and shared fixtures."""

import os
from pathlib import Path

import pytest

from sheetcsv.config import SheetCsvConfig, reset_config, set_config
from sheetcsv.csv_codec import CSVCodec


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Start every test from a fresh, environment-free configuration."""
    for key in list(os.environ):
        if key.startswith("SHEETCSV_"):
            monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def unix_config():
    """Config with a fixed LF cell newline, installed as the active config."""
    config = SheetCsvConfig(cell_newline="\n")
    set_config(config)
    return config


@pytest.fixture
def codec():
    """CSVCodec with its own config and an LF cell newline."""
    return CSVCodec(SheetCsvConfig(cell_newline="\n"))


@pytest.fixture
def write_bytes(tmp_path):
    """Factory writing raw bytes to a file under tmp_path."""

    def _write(data: bytes, name: str = "input.csv") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write
