# -*- coding: utf-8 -*-
"""
sheetcsv Configuration

Centralized configuration for the sparse spreadsheet CSV codec covering:
- Stream encoding and byte order mark handling
- Default delimiter and escape characters
- Row terminators for decoding and encoding
- In-memory cell newline
- Read chunk sizing
- Logging level

All settings can be overridden via environment variables with the
``SHEETCSV_`` prefix (e.g. ``SHEETCSV_DEFAULT_DELIMITER``). Character
settings accept backslash escapes, so ``SHEETCSV_ENCODE_NEWLINE='\\n'``
selects a bare line feed and ``SHEETCSV_DEFAULT_DELIMITER='\\t'`` a tab.

Example:
    >>> from sheetcsv.config import get_config
    >>> cfg = get_config()
    >>> print(cfg.default_encoding, repr(cfg.encode_newline))
"""

from __future__ import annotations

import codecs
import logging
import os
import threading
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import ValidationError

from sheetcsv.exceptions import DialectError
from sheetcsv.models import CodecDialect

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Environment variable prefix
# ---------------------------------------------------------------------------

_ENV_PREFIX = "SHEETCSV_"


# ---------------------------------------------------------------------------
# SheetCsvConfig
# ---------------------------------------------------------------------------


@dataclass
class SheetCsvConfig:
    """Complete configuration for the sheetcsv codec.

    Attributes:
        default_encoding: Text encoding used at the stream boundary.
        default_delimiter: Cell separator.
        default_escape: Quote/escape character.
        decode_newline: Row terminator expected when decoding; empty selects
            permissive CR/LF handling.
        encode_newline: Row terminator written when encoding.
        cell_newline: Newline used inside multi-line cell text in memory.
        detect_bom_stream: Sniff byte order marks in ``decode_stream``.
        detect_bom_file: Sniff byte order marks in ``decode_file``.
        write_bom: Emit the encoding's byte order mark when encoding bytes.
        enable_encoding_detection: Guess the encoding with chardet when the
            caller gives none.
        read_chunk_size: Bytes pulled from a binary stream per read.
        log_level: Logging level for the sheetcsv loggers.
    """

    # -- Encoding ------------------------------------------------------------
    default_encoding: str = "utf-8"
    detect_bom_stream: bool = False
    detect_bom_file: bool = True
    write_bom: bool = False
    enable_encoding_detection: bool = False

    # -- Dialect -------------------------------------------------------------
    default_delimiter: str = ","
    default_escape: str = '"'
    decode_newline: str = ""
    encode_newline: str = "\r\n"
    cell_newline: str = os.linesep

    # -- Streaming -----------------------------------------------------------
    read_chunk_size: int = 65536

    # -- Logging -------------------------------------------------------------
    log_level: str = "INFO"

    # ------------------------------------------------------------------
    # Dialect helpers
    # ------------------------------------------------------------------

    def dialect(
        self,
        direction: str,
        delimiter: Optional[str] = None,
        escape: Optional[str] = None,
        newline: Optional[str] = None,
        cell_newline: Optional[str] = None,
    ) -> CodecDialect:
        """Build a validated CodecDialect, filling gaps from this config.

        Args:
            direction: ``"decode"`` or ``"encode"``; selects the newline
                default and whether an empty newline is allowed.
            delimiter: Override for ``default_delimiter``.
            escape: Override for ``default_escape``.
            newline: Override for the direction's newline.
            cell_newline: Override for ``cell_newline``.

        Returns:
            Frozen CodecDialect.

        Raises:
            DialectError: If the resulting settings are invalid.
        """
        if direction not in ("decode", "encode"):
            raise ValueError(f"Unknown codec direction: {direction!r}")

        if newline is None:
            newline = (
                self.decode_newline if direction == "decode" else self.encode_newline
            )
        if direction == "encode" and not newline:
            raise DialectError(
                message="newline must not be empty when encoding",
                field="newline",
                value=newline,
            )

        try:
            return CodecDialect(
                delimiter=self.default_delimiter if delimiter is None else delimiter,
                escape=self.default_escape if escape is None else escape,
                newline=newline,
                cell_newline=self.cell_newline if cell_newline is None else cell_newline,
            )
        except ValidationError as exc:
            first = exc.errors()[0]
            field = ".".join(str(part) for part in first.get("loc", ())) or None
            raise DialectError(
                message=f"Invalid codec dialect: {first.get('msg', exc)}",
                field=field,
                value=first.get("input"),
            ) from exc

    # ------------------------------------------------------------------
    # Factory helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> SheetCsvConfig:
        """Build a SheetCsvConfig from environment variables.

        Every field can be overridden via ``SHEETCSV_<FIELD_UPPER>``.
        Boolean values accept ``true/1/yes`` (case-insensitive).
        Integer values are parsed via ``int()``.
        Character values are unescaped with ``unicode_escape``.

        Returns:
            Populated SheetCsvConfig instance.
        """
        prefix = _ENV_PREFIX

        def _env(name: str, default: Any = None) -> Optional[str]:
            return os.environ.get(f"{prefix}{name}", default)

        def _bool(name: str, default: bool) -> bool:
            val = _env(name)
            if val is None:
                return default
            return val.lower() in ("true", "1", "yes")

        def _int(name: str, default: int) -> int:
            val = _env(name)
            if val is None:
                return default
            try:
                return int(val)
            except ValueError:
                logger.warning(
                    "Invalid integer for %s%s=%s, using default %d",
                    prefix, name, val, default,
                )
                return default

        def _str(name: str, default: str) -> str:
            val = _env(name)
            if val is None:
                return default
            return val

        def _chars(name: str, default: str) -> str:
            val = _env(name)
            if val is None:
                return default
            try:
                return codecs.decode(val, "unicode_escape")
            except UnicodeError:
                logger.warning(
                    "Invalid escape sequence in %s%s=%r, using default %r",
                    prefix, name, val, default,
                )
                return default

        config = cls(
            default_encoding=_str("DEFAULT_ENCODING", cls.default_encoding),
            detect_bom_stream=_bool(
                "DETECT_BOM_STREAM", cls.detect_bom_stream,
            ),
            detect_bom_file=_bool("DETECT_BOM_FILE", cls.detect_bom_file),
            write_bom=_bool("WRITE_BOM", cls.write_bom),
            enable_encoding_detection=_bool(
                "ENABLE_ENCODING_DETECTION",
                cls.enable_encoding_detection,
            ),
            default_delimiter=_chars(
                "DEFAULT_DELIMITER", cls.default_delimiter,
            ),
            default_escape=_chars("DEFAULT_ESCAPE", cls.default_escape),
            decode_newline=_chars("DECODE_NEWLINE", cls.decode_newline),
            encode_newline=_chars("ENCODE_NEWLINE", cls.encode_newline),
            cell_newline=_chars("CELL_NEWLINE", cls.cell_newline),
            read_chunk_size=_int("READ_CHUNK_SIZE", cls.read_chunk_size),
            log_level=_str("LOG_LEVEL", cls.log_level),
        )

        if config.read_chunk_size <= 0:
            logger.warning(
                "Non-positive %sREAD_CHUNK_SIZE=%d, using default %d",
                prefix, config.read_chunk_size, cls.read_chunk_size,
            )
            config.read_chunk_size = cls.read_chunk_size

        logger.info(
            "SheetCsvConfig loaded: encoding=%s, delimiter=%r, escape=%r, "
            "decode_newline=%r, encode_newline=%r, bom_stream=%s, "
            "bom_file=%s, chunk_size=%d",
            config.default_encoding,
            config.default_delimiter,
            config.default_escape,
            config.decode_newline,
            config.encode_newline,
            config.detect_bom_stream,
            config.detect_bom_file,
            config.read_chunk_size,
        )
        return config


# ---------------------------------------------------------------------------
# Thread-safe singleton accessor
# ---------------------------------------------------------------------------

_config_instance: Optional[SheetCsvConfig] = None
_config_lock = threading.Lock()


def get_config() -> SheetCsvConfig:
    """Return the singleton SheetCsvConfig, creating from env if needed.

    Returns:
        SheetCsvConfig singleton instance.
    """
    global _config_instance
    if _config_instance is None:
        with _config_lock:
            if _config_instance is None:
                _config_instance = SheetCsvConfig.from_env()
    return _config_instance


def set_config(config: SheetCsvConfig) -> None:
    """Replace the singleton SheetCsvConfig (useful for testing).

    Args:
        config: New configuration to install.
    """
    global _config_instance
    with _config_lock:
        _config_instance = config
    logger.info("SheetCsvConfig replaced programmatically")


def reset_config() -> None:
    """Reset the singleton (primarily for test teardown)."""
    global _config_instance
    with _config_lock:
        _config_instance = None


def configure_logging(level: Optional[str] = None) -> None:
    """Apply ``level`` (or the configured ``log_level``) to sheetcsv loggers."""
    resolved = (level or get_config().log_level).upper()
    numeric = logging.getLevelName(resolved)
    if not isinstance(numeric, int):
        logger.warning("Unknown log level %r, using INFO", resolved)
        numeric = logging.INFO
    logging.getLogger("sheetcsv").setLevel(numeric)


__all__ = [
    "SheetCsvConfig",
    "get_config",
    "set_config",
    "reset_config",
    "configure_logging",
]
