# -*- coding: utf-8 -*-
"""sheetcsv command line interface."""

from sheetcsv.cli.main import app

__all__ = ["app"]
