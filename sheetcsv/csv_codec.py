# -*- coding: utf-8 -*-
"""
CSV Codec - streaming CSV reader/writer for the sparse Spreadsheet model

Decoding is a character-level state machine. It never materialises the
whole input: binary streams are pulled in ``read_chunk_size`` byte chunks
through an incremental decoder, and the parser itself only holds the cell
being accumulated plus a pushback buffer of at most ``len(newline)``
characters used for multi-character row terminator matching.

Supports:
    - Any single-character delimiter and escape character
    - Doubled escape characters inside escaped cells
    - Exact (possibly multi-character) row terminators, or permissive
      ``\\r`` / ``\\n`` / ``\\r\\n`` / ``\\n\\r`` handling
    - Translation between the wire newline and the in-memory cell newline
    - Optional byte order mark sniffing (UTF-8, UTF-16, UTF-32)
    - Optional encoding detection via chardet

Grammar notes:
    - A trailing cell that is followed by neither a delimiter nor a row
      terminator is not committed. Inputs are expected to end with a
      terminator.
    - Malformed escaping is never an error; an unterminated escaped cell runs
      to the end of the input.

Encoding walks the declared ``rows`` x ``columns`` rectangle of the sheet,
so empty cells inside it are written as empty fields, and output is written
one row at a time.

Example:
    >>> from sheetcsv.csv_codec import decode_text, encode_text
    >>> sheet = decode_text('a,"b,c",d\\n')
    >>> sheet.row(0)
    ['a', 'b,c', 'd']
    >>> encode_text(sheet, newline="\\n")
    'a,"b,c",d\\n'
"""

from __future__ import annotations

import codecs
import io
import logging
import os
import threading
import time
from collections import deque
from datetime import datetime, timezone
from typing import (
    IO, Any, Deque, Dict, Iterable, Iterator, List, Optional, Tuple, Union,
)

from sheetcsv.config import SheetCsvConfig, get_config
from sheetcsv.exceptions import DialectError
from sheetcsv.metrics import record_codec_error, record_decode, record_encode
from sheetcsv.models import CodecDialect
from sheetcsv.spreadsheet import Spreadsheet

logger = logging.getLogger(__name__)

__all__ = [
    "CSVCodec",
    "get_codec",
    "decode_stream",
    "decode_text",
    "decode_file",
    "encode_stream",
    "encode_text",
    "encode_file",
]

PathLike = Union[str, "os.PathLike[str]"]

AUTO_ENCODING = "auto"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _utcnow() -> datetime:
    """Return current UTC datetime with microseconds zeroed."""
    return datetime.now(timezone.utc).replace(microsecond=0)


# ---------------------------------------------------------------------------
# BOM markers (longest first so UTF-32 LE wins over UTF-16 LE)
# ---------------------------------------------------------------------------

_BOM_MAP: Tuple[Tuple[bytes, str], ...] = (
    (codecs.BOM_UTF32_BE, "utf-32-be"),
    (codecs.BOM_UTF32_LE, "utf-32-le"),
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)

# Codecs that do not write a BOM on their own
_WRITE_BOM_MAP: Dict[str, bytes] = {
    "utf-8": codecs.BOM_UTF8,
    "utf-16-le": codecs.BOM_UTF16_LE,
    "utf-16-be": codecs.BOM_UTF16_BE,
    "utf-32-le": codecs.BOM_UTF32_LE,
    "utf-32-be": codecs.BOM_UTF32_BE,
}

_BOM_SNIFF_BYTES = 4


# ---------------------------------------------------------------------------
# Graceful encoding detection import
# ---------------------------------------------------------------------------

_CHARDET_AVAILABLE = False

try:
    import chardet
    _CHARDET_AVAILABLE = True
except ImportError:
    chardet = None  # type: ignore[assignment]


# ---------------------------------------------------------------------------
# Character source with pushback
# ---------------------------------------------------------------------------


class _CharReader:
    """Single-character reader with a FIFO pushback buffer.

    Characters returned by ``push_back`` are handed out again, in their
    original order, before any fresh input is pulled.
    """

    __slots__ = ("_chars", "_pending")

    def __init__(self, chars: Iterable[str]) -> None:
        self._chars: Iterator[str] = iter(chars)
        self._pending: Deque[str] = deque()

    def read(self) -> Optional[str]:
        """Consume one character, or return None at end of input."""
        if self._pending:
            return self._pending.popleft()
        return next(self._chars, None)

    def peek(self) -> Optional[str]:
        """Return the next character without consuming it."""
        if not self._pending:
            char = next(self._chars, None)
            if char is None:
                return None
            self._pending.append(char)
        return self._pending[0]

    def push_back(self, chars: List[str]) -> None:
        """Return over-read characters so they are processed next."""
        self._pending.extendleft(reversed(chars))


# ---------------------------------------------------------------------------
# CSVCodec
# ---------------------------------------------------------------------------


class CSVCodec:
    """CSV reader/writer for :class:`~sheetcsv.spreadsheet.Spreadsheet`.

    A codec instance holds no per-run state apart from its statistics
    counters, which are guarded by a lock, so one instance can serve
    concurrent runs as long as each run owns its spreadsheet and stream.

    Attributes:
        _config: Explicit configuration, or None to follow ``get_config()``.
        _lock: Threading lock for statistics.
        _stats: Codec statistics counters.

    Example:
        >>> codec = CSVCodec()
        >>> sheet = codec.decode_text("name,value\\nfoo,42\\n")
        >>> sheet.rows, sheet.columns
        (2, 2)
    """

    def __init__(self, config: Optional[SheetCsvConfig] = None) -> None:
        """Initialise CSVCodec.

        Args:
            config: Optional configuration. When omitted, the process-wide
                configuration from ``get_config()`` is read on every call.
        """
        self._config = config
        self._lock = threading.Lock()
        self._stats: Dict[str, int] = {
            "decodes": 0,
            "encodes": 0,
            "rows_decoded": 0,
            "cells_decoded": 0,
            "rows_encoded": 0,
            "bom_detections": 0,
            "encoding_detections": 0,
            "errors": 0,
        }
        logger.debug("CSVCodec initialised: chardet=%s", _CHARDET_AVAILABLE)

    @property
    def config(self) -> SheetCsvConfig:
        """Configuration in effect for the next call."""
        return self._config if self._config is not None else get_config()

    # ------------------------------------------------------------------
    # Public API - decoding
    # ------------------------------------------------------------------

    def decode_stream(
        self,
        stream: IO[Any],
        encoding: Optional[str] = None,
        detect_bom: Optional[bool] = None,
        delimiter: Optional[str] = None,
        escape: Optional[str] = None,
        newline: Optional[str] = None,
        cell_newline: Optional[str] = None,
    ) -> Spreadsheet:
        """Parse CSV data from a stream into a new Spreadsheet.

        Binary streams are decoded with ``encoding``; text streams are read
        as-is and ``encoding`` / ``detect_bom`` are ignored. The stream is
        left open.

        Args:
            stream: Readable binary or text stream.
            encoding: Stream encoding, ``"auto"`` for chardet detection, or
                None for the configured default.
            detect_bom: Let a byte order mark override ``encoding``.
            delimiter: Cell separator.
            escape: Quote/escape character.
            newline: Exact row terminator; ``""`` for permissive CR/LF.
            cell_newline: Newline to store inside multi-line cells.

        Returns:
            Spreadsheet populated from the stream.

        Raises:
            DialectError: If the dialect or encoding is invalid.
            OSError: If reading the stream fails.
            UnicodeDecodeError: If the bytes do not match the encoding.
        """
        config = self.config
        dialect = config.dialect(
            "decode", delimiter, escape, newline, cell_newline,
        )
        if detect_bom is None:
            detect_bom = config.detect_bom_stream
        chars = self._stream_chars(stream, encoding, detect_bom, config)
        return self._run_decode(chars, dialect, "stream")

    def decode_text(
        self,
        text: str,
        delimiter: Optional[str] = None,
        escape: Optional[str] = None,
        newline: Optional[str] = None,
        cell_newline: Optional[str] = None,
    ) -> Spreadsheet:
        """Parse a string of CSV data into a new Spreadsheet.

        Args:
            text: CSV-formatted text.
            delimiter: Cell separator.
            escape: Quote/escape character.
            newline: Exact row terminator; ``""`` for permissive CR/LF.
            cell_newline: Newline to store inside multi-line cells.

        Returns:
            Spreadsheet populated from ``text``.
        """
        dialect = self.config.dialect(
            "decode", delimiter, escape, newline, cell_newline,
        )
        return self._run_decode(text, dialect, "text")

    def decode_file(
        self,
        path: PathLike,
        encoding: Optional[str] = None,
        detect_bom: Optional[bool] = None,
        delimiter: Optional[str] = None,
        escape: Optional[str] = None,
        newline: Optional[str] = None,
        cell_newline: Optional[str] = None,
    ) -> Spreadsheet:
        """Parse a CSV file into a new Spreadsheet.

        Byte order mark sniffing defaults to on for files.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
        """
        config = self.config
        dialect = config.dialect(
            "decode", delimiter, escape, newline, cell_newline,
        )
        if detect_bom is None:
            detect_bom = config.detect_bom_file
        with open(path, "rb") as fh:
            chars = self._stream_chars(fh, encoding, detect_bom, config)
            sheet = self._run_decode(chars, dialect, "file")
        logger.info("Decoded CSV file '%s'", os.fspath(path))
        return sheet

    # ------------------------------------------------------------------
    # Public API - encoding
    # ------------------------------------------------------------------

    def encode_stream(
        self,
        sheet: Spreadsheet,
        stream: IO[Any],
        encoding: Optional[str] = None,
        delimiter: Optional[str] = None,
        escape: Optional[str] = None,
        cell_newline: Optional[str] = None,
        newline: Optional[str] = None,
    ) -> None:
        """Write ``sheet`` as CSV to a stream, one row at a time.

        Binary streams receive bytes in ``encoding``; text streams receive
        ``str`` and ``encoding`` is ignored. The stream is flushed but left
        open.

        Args:
            sheet: Spreadsheet to write.
            stream: Writable binary or text stream.
            encoding: Output encoding, or None for the configured default.
            delimiter: Cell separator.
            escape: Quote/escape character.
            cell_newline: Newline used inside the sheet's cells.
            newline: Row terminator to write.

        Raises:
            DialectError: If the dialect or encoding is invalid.
            OSError: If writing to the stream fails.
        """
        config = self.config
        dialect = config.dialect(
            "encode", delimiter, escape, newline, cell_newline,
        )
        self._encode_to_stream(sheet, stream, encoding, dialect, config, "stream")

    def encode_text(
        self,
        sheet: Spreadsheet,
        delimiter: Optional[str] = None,
        escape: Optional[str] = None,
        cell_newline: Optional[str] = None,
        newline: Optional[str] = None,
    ) -> str:
        """Render ``sheet`` as a CSV string."""
        dialect = self.config.dialect(
            "encode", delimiter, escape, newline, cell_newline,
        )
        buffer = io.StringIO()
        self._run_encode(sheet, dialect, buffer.write, "text")
        return buffer.getvalue()

    def encode_file(
        self,
        sheet: Spreadsheet,
        path: PathLike,
        encoding: Optional[str] = None,
        delimiter: Optional[str] = None,
        escape: Optional[str] = None,
        cell_newline: Optional[str] = None,
        newline: Optional[str] = None,
    ) -> None:
        """Write ``sheet`` to a CSV file, replacing any existing file."""
        config = self.config
        # Validate before truncating the target
        dialect = config.dialect(
            "encode", delimiter, escape, newline, cell_newline,
        )
        self._resolve_encoding(
            encoding or config.default_encoding, allow_auto=False,
        )
        with open(path, "wb") as fh:
            self._encode_to_stream(sheet, fh, encoding, dialect, config, "file")
        logger.info(
            "Encoded %d x %d sheet to CSV file '%s'",
            sheet.rows, sheet.columns, os.fspath(path),
        )

    # ------------------------------------------------------------------
    # Public API - support
    # ------------------------------------------------------------------

    def detect_encoding(self, sample: bytes) -> str:
        """Guess the encoding of ``sample`` with chardet.

        Falls back to the configured default encoding when chardet is not
        installed or returns no usable answer.

        Args:
            sample: Leading bytes of the input.

        Returns:
            Python codec name.
        """
        default = self.config.default_encoding
        if not _CHARDET_AVAILABLE:
            logger.warning(
                "chardet not installed, using default encoding %s", default,
            )
            return default

        result = chardet.detect(sample)
        encoding = (result or {}).get("encoding")
        if not encoding:
            logger.warning(
                "Encoding detection inconclusive, using default: %s", default,
            )
            return default

        try:
            name = codecs.lookup(encoding).name
        except LookupError:
            logger.warning(
                "chardet returned unknown encoding %r, using default: %s",
                encoding, default,
            )
            return default

        with self._lock:
            self._stats["encoding_detections"] += 1
        logger.debug(
            "chardet detected encoding: %s (confidence %.2f)",
            name, (result or {}).get("confidence") or 0.0,
        )
        return name

    def get_statistics(self) -> Dict[str, Any]:
        """Return codec statistics.

        Returns:
            Dictionary with counter values and library availability.
        """
        with self._lock:
            stats: Dict[str, Any] = dict(self._stats)
        stats["chardet_available"] = _CHARDET_AVAILABLE
        stats["timestamp"] = _utcnow().isoformat()
        return stats

    # ------------------------------------------------------------------
    # Decoding internals
    # ------------------------------------------------------------------

    def _run_decode(
        self,
        chars: Iterable[str],
        dialect: CodecDialect,
        source: str,
    ) -> Spreadsheet:
        """Run the decoder with timing, statistics and metrics."""
        start = time.monotonic()
        try:
            sheet, rows, cells = self._decode_chars(chars, dialect)
        except Exception as exc:
            with self._lock:
                self._stats["errors"] += 1
            record_codec_error("decode", type(exc).__name__)
            logger.error("CSV decode from %s failed: %s", source, exc)
            raise

        elapsed = time.monotonic() - start
        with self._lock:
            self._stats["decodes"] += 1
            self._stats["rows_decoded"] += rows
            self._stats["cells_decoded"] += cells
        record_decode(source, rows, cells, elapsed)
        logger.info(
            "Decoded CSV %s: rows=%d, cols=%d, cells=%d (%.1f ms)",
            source, sheet.rows, sheet.columns, len(sheet), elapsed * 1000,
        )
        return sheet

    def _decode_chars(
        self,
        chars: Iterable[str],
        dialect: CodecDialect,
    ) -> Tuple[Spreadsheet, int, int]:
        """Core decode state machine.

        Returns:
            Tuple of (spreadsheet, row terminators seen, cells committed).
        """
        sheet = Spreadsheet()
        reader = _CharReader(chars)

        delimiter = dialect.delimiter
        escape = dialect.escape
        newline = dialect.newline
        cell_newline = dialect.cell_newline

        row = col = 0
        rows_seen = cells_committed = 0
        value: List[str] = []
        escaped = False

        while True:
            char = reader.read()
            if char is None:
                break

            # 1. Row terminator detection
            terminator = False
            if newline:
                if char == newline[0]:
                    terminator = self._match_newline(reader, newline)
            elif char == "\r" or char == "\n":
                following = reader.peek()
                if (char == "\r" and following == "\n") or (
                    char == "\n" and following == "\r"
                ):
                    reader.read()
                terminator = True

            if terminator:
                if escaped:
                    value.append(cell_newline)
                else:
                    sheet.update((row, col), "".join(value))
                    value = []
                    cells_committed += 1
                    rows_seen += 1
                    row += 1
                    col = 0
                continue

            # 2. Escape toggle, with doubled escapes kept literally
            if char == escape:
                escaped = not escaped
                if not escaped and reader.peek() == escape:
                    escaped = True
                    value.append(char)
                    reader.read()
            # 3. Cell boundary
            elif not escaped and char == delimiter:
                sheet.update((row, col), "".join(value))
                value = []
                cells_committed += 1
                col += 1
            # 4. Literal
            else:
                value.append(char)

        if value:
            logger.debug(
                "Dropped %d trailing characters not followed by a terminator",
                len(value),
            )
        return sheet, rows_seen, cells_committed

    @staticmethod
    def _match_newline(reader: _CharReader, newline: str) -> bool:
        """Match the rest of a multi-character terminator.

        The first character has already been consumed. On a mismatch every
        character read here is pushed back for normal processing.
        """
        over_read: List[str] = []
        for expected in newline[1:]:
            char = reader.read()
            if char is None:
                break
            over_read.append(char)
            if char != expected:
                break
        else:
            return True

        reader.push_back(over_read)
        return False

    def _stream_chars(
        self,
        stream: IO[Any],
        encoding: Optional[str],
        detect_bom: bool,
        config: SheetCsvConfig,
    ) -> Iterator[str]:
        """Yield decoded characters from a binary or text stream.

        The encoding is validated eagerly; reading starts when the
        returned iterator is first advanced.
        """
        requested = encoding or (
            AUTO_ENCODING if config.enable_encoding_detection
            else config.default_encoding
        )
        requested = self._resolve_encoding(requested, allow_auto=True)
        return self._iter_stream_chars(
            stream, requested, detect_bom, config.read_chunk_size,
        )

    def _iter_stream_chars(
        self,
        stream: IO[Any],
        encoding: str,
        detect_bom: bool,
        chunk_size: int,
    ) -> Iterator[str]:
        head = self._read_head(stream, max(chunk_size, _BOM_SNIFF_BYTES))

        if isinstance(head, str):
            yield from head
            while True:
                chunk = stream.read(chunk_size)
                if not chunk:
                    return
                yield from chunk

        skip = 0
        bom_encoding = self._detect_bom(head) if detect_bom else None
        if bom_encoding is not None:
            encoding, skip = bom_encoding
            with self._lock:
                self._stats["bom_detections"] += 1
        elif encoding == AUTO_ENCODING:
            encoding = self.detect_encoding(head)

        decoder = codecs.getincrementaldecoder(encoding)()
        yield from decoder.decode(head[skip:])
        while True:
            chunk = stream.read(chunk_size)
            if not chunk:
                break
            yield from decoder.decode(chunk)
        yield from decoder.decode(b"", final=True)

    @staticmethod
    def _read_head(stream: IO[Any], size: int) -> Union[bytes, str]:
        """Read up to ``size`` units, tolerating short reads."""
        head = stream.read(size)
        if not head:
            return head if head is not None else b""
        parts = [head]
        total = len(head)
        while total < _BOM_SNIFF_BYTES:
            more = stream.read(size - total)
            if not more:
                break
            parts.append(more)
            total += len(more)
        return parts[0][:0].join(parts)

    @staticmethod
    def _detect_bom(head: bytes) -> Optional[Tuple[str, int]]:
        """Return (encoding, bytes to skip) for a leading byte order mark."""
        for bom, encoding in _BOM_MAP:
            if head.startswith(bom):
                logger.debug("BOM detected: %s (skip %d bytes)", encoding, len(bom))
                return encoding, len(bom)
        return None

    @staticmethod
    def _resolve_encoding(encoding: str, allow_auto: bool) -> str:
        """Normalise an encoding name, rejecting unknown codecs."""
        if encoding.lower() == AUTO_ENCODING:
            if allow_auto:
                return AUTO_ENCODING
            raise DialectError(
                message="Encoding detection is only available when decoding",
                field="encoding",
                value=encoding,
            )
        try:
            return codecs.lookup(encoding).name
        except LookupError as exc:
            raise DialectError(
                message=f"Unknown encoding: {encoding}",
                field="encoding",
                value=encoding,
            ) from exc

    # ------------------------------------------------------------------
    # Encoding internals
    # ------------------------------------------------------------------

    def _encode_to_stream(
        self,
        sheet: Spreadsheet,
        stream: IO[Any],
        encoding: Optional[str],
        dialect: CodecDialect,
        config: SheetCsvConfig,
        target: str,
    ) -> None:
        if isinstance(stream, io.TextIOBase):
            self._run_encode(sheet, dialect, stream.write, target)
        else:
            resolved = self._resolve_encoding(
                encoding or config.default_encoding, allow_auto=False,
            )
            encoder = codecs.getincrementalencoder(resolved)()
            if config.write_bom:
                bom = _WRITE_BOM_MAP.get(resolved)
                if bom:
                    stream.write(bom)
                else:
                    logger.debug("No separate BOM written for %s", resolved)

            def _write(piece: str) -> None:
                stream.write(encoder.encode(piece))

            self._run_encode(sheet, dialect, _write, target)
            tail = encoder.encode("", final=True)
            if tail:
                stream.write(tail)

        flush = getattr(stream, "flush", None)
        if flush is not None:
            flush()

    def _run_encode(
        self,
        sheet: Spreadsheet,
        dialect: CodecDialect,
        write: Any,
        target: str,
    ) -> None:
        """Run the encoder with timing, statistics and metrics."""
        start = time.monotonic()
        rows = 0
        try:
            for line in self._encode_rows(sheet, dialect):
                write(line)
                rows += 1
        except Exception as exc:
            with self._lock:
                self._stats["errors"] += 1
            record_codec_error("encode", type(exc).__name__)
            logger.error("CSV encode to %s failed after %d rows: %s", target, rows, exc)
            raise

        elapsed = time.monotonic() - start
        with self._lock:
            self._stats["encodes"] += 1
            self._stats["rows_encoded"] += rows
        record_encode(target, rows, elapsed)
        logger.info(
            "Encoded CSV %s: rows=%d, cols=%d (%.1f ms)",
            target, sheet.rows, sheet.columns, elapsed * 1000,
        )

    @staticmethod
    def _encode_rows(sheet: Spreadsheet, dialect: CodecDialect) -> Iterator[str]:
        """Yield one serialized row (terminator included) at a time."""
        delimiter = dialect.delimiter
        escape = dialect.escape
        doubled_escape = escape + escape
        newline = dialect.newline
        cell_newline = dialect.cell_newline
        replace_newline = cell_newline != newline

        for row in range(sheet.rows):
            fields: List[str] = []
            for col in range(sheet.columns):
                cell = sheet.data.get((row, col), "")
                if cell:
                    if replace_newline:
                        cell = cell.replace(cell_newline, newline)
                    if escape in cell or delimiter in cell or newline in cell:
                        cell = escape + cell.replace(escape, doubled_escape) + escape
                fields.append(cell)
            yield delimiter.join(fields) + newline


# ---------------------------------------------------------------------------
# Process-wide codec and module-level API
# ---------------------------------------------------------------------------

_codec_instance: Optional[CSVCodec] = None
_codec_lock = threading.Lock()


def get_codec() -> CSVCodec:
    """Return the shared CSVCodec that follows ``get_config()``."""
    global _codec_instance
    if _codec_instance is None:
        with _codec_lock:
            if _codec_instance is None:
                _codec_instance = CSVCodec()
    return _codec_instance


def decode_stream(
    stream: IO[Any],
    encoding: Optional[str] = None,
    detect_bom: Optional[bool] = None,
    delimiter: Optional[str] = None,
    escape: Optional[str] = None,
    newline: Optional[str] = None,
    cell_newline: Optional[str] = None,
) -> Spreadsheet:
    """Parse a CSV stream. See :meth:`CSVCodec.decode_stream`."""
    return get_codec().decode_stream(
        stream, encoding, detect_bom, delimiter, escape, newline, cell_newline,
    )


def decode_text(
    text: str,
    delimiter: Optional[str] = None,
    escape: Optional[str] = None,
    newline: Optional[str] = None,
    cell_newline: Optional[str] = None,
) -> Spreadsheet:
    """Parse a CSV string. See :meth:`CSVCodec.decode_text`."""
    return get_codec().decode_text(text, delimiter, escape, newline, cell_newline)


def decode_file(
    path: PathLike,
    encoding: Optional[str] = None,
    detect_bom: Optional[bool] = None,
    delimiter: Optional[str] = None,
    escape: Optional[str] = None,
    newline: Optional[str] = None,
    cell_newline: Optional[str] = None,
) -> Spreadsheet:
    """Parse a CSV file. See :meth:`CSVCodec.decode_file`."""
    return get_codec().decode_file(
        path, encoding, detect_bom, delimiter, escape, newline, cell_newline,
    )


def encode_stream(
    sheet: Spreadsheet,
    stream: IO[Any],
    encoding: Optional[str] = None,
    delimiter: Optional[str] = None,
    escape: Optional[str] = None,
    cell_newline: Optional[str] = None,
    newline: Optional[str] = None,
) -> None:
    """Write a sheet to a stream. See :meth:`CSVCodec.encode_stream`."""
    get_codec().encode_stream(
        sheet, stream, encoding, delimiter, escape, cell_newline, newline,
    )


def encode_text(
    sheet: Spreadsheet,
    delimiter: Optional[str] = None,
    escape: Optional[str] = None,
    cell_newline: Optional[str] = None,
    newline: Optional[str] = None,
) -> str:
    """Render a sheet as CSV text. See :meth:`CSVCodec.encode_text`."""
    return get_codec().encode_text(sheet, delimiter, escape, cell_newline, newline)


def encode_file(
    sheet: Spreadsheet,
    path: PathLike,
    encoding: Optional[str] = None,
    delimiter: Optional[str] = None,
    escape: Optional[str] = None,
    cell_newline: Optional[str] = None,
    newline: Optional[str] = None,
) -> None:
    """Write a sheet to a CSV file. See :meth:`CSVCodec.encode_file`."""
    get_codec().encode_file(
        sheet, path, encoding, delimiter, escape, cell_newline, newline,
    )
