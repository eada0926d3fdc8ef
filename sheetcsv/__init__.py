# -*- coding: utf-8 -*-
"""
sheetcsv: Sparse Spreadsheet & CSV Codec
=========================================

This package provides a sparse, grow-only spreadsheet model and a streaming
CSV codec for it. It supports:

- Sparse ``(row, col)`` cell storage with grow-only dimensions
- Excel-type cell addresses (``B3``, ``AA10``)
- Configurable delimiter, escape character and row terminators
- Permissive CR/LF row terminator handling on input
- Multi-line cells with wire/in-memory newline translation
- Byte order mark sniffing and optional chardet encoding detection
- 7 Prometheus metrics for observability
- Thread-safe configuration with SHEETCSV_ env prefix

Key Components:
    - config: SheetCsvConfig with SHEETCSV_ env prefix
    - models: Pydantic v2 models (CodecDialect, SheetSummary)
    - spreadsheet: Spreadsheet and the address codec
    - csv_codec: CSVCodec and module-level decode/encode functions
    - metrics: Prometheus metrics
    - cli: typer command line interface

Example:
    >>> from sheetcsv import Spreadsheet, encode_text
    >>> sheet = Spreadsheet()
    >>> sheet.update(Spreadsheet.index("C3"), "x")
    >>> encode_text(sheet)
    ',,\\r\\n,,\\r\\n,,x\\r\\n'
"""

__version__ = "0.1.0"

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------
from sheetcsv.config import (
    SheetCsvConfig,
    configure_logging,
    get_config,
    reset_config,
    set_config,
)

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------
from sheetcsv.exceptions import (
    AddressException,
    CodecException,
    DialectError,
    MalformedAddress,
    SheetCsvException,
)

# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------
from sheetcsv.models import CodecDialect, SheetSummary

# ---------------------------------------------------------------------------
# Spreadsheet
# ---------------------------------------------------------------------------
from sheetcsv.spreadsheet import (
    CellIndex,
    Spreadsheet,
    format_address,
    parse_address,
)

# ---------------------------------------------------------------------------
# Codec
# ---------------------------------------------------------------------------
from sheetcsv.csv_codec import (
    CSVCodec,
    decode_file,
    decode_stream,
    decode_text,
    encode_file,
    encode_stream,
    encode_text,
    get_codec,
)

__all__ = [
    "__version__",
    # Configuration
    "SheetCsvConfig",
    "get_config",
    "set_config",
    "reset_config",
    "configure_logging",
    # Exceptions
    "SheetCsvException",
    "AddressException",
    "MalformedAddress",
    "CodecException",
    "DialectError",
    # Models
    "CodecDialect",
    "SheetSummary",
    # Spreadsheet
    "CellIndex",
    "Spreadsheet",
    "parse_address",
    "format_address",
    # Codec
    "CSVCodec",
    "get_codec",
    "decode_stream",
    "decode_text",
    "decode_file",
    "encode_stream",
    "encode_text",
    "encode_file",
]
