# -*- coding: utf-8 -*-
"""
Prometheus Metrics - sheetcsv codec

7 Prometheus metrics for CSV codec monitoring with graceful fallback when
prometheus_client is not installed.

Metrics:
    1. sheetcsv_decodes_total (Counter, labels: source)
    2. sheetcsv_encodes_total (Counter, labels: target)
    3. sheetcsv_rows_decoded_total (Counter)
    4. sheetcsv_cells_decoded_total (Counter)
    5. sheetcsv_rows_encoded_total (Counter)
    6. sheetcsv_codec_duration_seconds (Histogram, labels: operation)
    7. sheetcsv_codec_errors_total (Counter, labels: operation, error_type)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Graceful prometheus_client import
# ---------------------------------------------------------------------------

try:
    from prometheus_client import Counter, Histogram
    PROMETHEUS_AVAILABLE = True
except ImportError:
    PROMETHEUS_AVAILABLE = False
    logger.info("prometheus_client not installed; sheetcsv metrics disabled")


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

if PROMETHEUS_AVAILABLE:
    # 1. Decode runs by source kind (stream, text, file)
    sheetcsv_decodes_total = Counter(
        "sheetcsv_decodes_total",
        "Total CSV decode runs",
        labelnames=["source"],
    )

    # 2. Encode runs by target kind (stream, text, file)
    sheetcsv_encodes_total = Counter(
        "sheetcsv_encodes_total",
        "Total CSV encode runs",
        labelnames=["target"],
    )

    # 3. Row terminators consumed while decoding
    sheetcsv_rows_decoded_total = Counter(
        "sheetcsv_rows_decoded_total",
        "Total rows decoded from CSV input",
    )

    # 4. Cell commits while decoding (empty cells included)
    sheetcsv_cells_decoded_total = Counter(
        "sheetcsv_cells_decoded_total",
        "Total cells committed while decoding CSV input",
    )

    # 5. Rows written while encoding
    sheetcsv_rows_encoded_total = Counter(
        "sheetcsv_rows_encoded_total",
        "Total rows written as CSV output",
    )

    # 6. Duration of a single decode/encode run
    sheetcsv_codec_duration_seconds = Histogram(
        "sheetcsv_codec_duration_seconds",
        "CSV codec run duration in seconds",
        labelnames=["operation"],
        buckets=(
            0.001, 0.005, 0.01, 0.05, 0.1, 0.25,
            0.5, 1.0, 2.5, 5.0, 10.0, 30.0,
        ),
    )

    # 7. Failed runs by operation and exception type
    sheetcsv_codec_errors_total = Counter(
        "sheetcsv_codec_errors_total",
        "Total CSV codec runs that raised",
        labelnames=["operation", "error_type"],
    )

else:
    # No-op placeholders
    sheetcsv_decodes_total = None  # type: ignore[assignment]
    sheetcsv_encodes_total = None  # type: ignore[assignment]
    sheetcsv_rows_decoded_total = None  # type: ignore[assignment]
    sheetcsv_cells_decoded_total = None  # type: ignore[assignment]
    sheetcsv_rows_encoded_total = None  # type: ignore[assignment]
    sheetcsv_codec_duration_seconds = None  # type: ignore[assignment]
    sheetcsv_codec_errors_total = None  # type: ignore[assignment]


# ---------------------------------------------------------------------------
# Helper functions (safe to call even without prometheus_client)
# ---------------------------------------------------------------------------


def record_decode(
    source: str,
    rows: int,
    cells: int,
    duration_seconds: float,
) -> None:
    """Record a completed decode run.

    Args:
        source: Input kind (stream, text, file).
        rows: Row terminators consumed.
        cells: Cells committed.
        duration_seconds: Wall-clock duration of the run.
    """
    if not PROMETHEUS_AVAILABLE:
        return
    sheetcsv_decodes_total.labels(source=source).inc()
    sheetcsv_rows_decoded_total.inc(rows)
    sheetcsv_cells_decoded_total.inc(cells)
    sheetcsv_codec_duration_seconds.labels(operation="decode").observe(
        duration_seconds,
    )


def record_encode(target: str, rows: int, duration_seconds: float) -> None:
    """Record a completed encode run.

    Args:
        target: Output kind (stream, text, file).
        rows: Rows written.
        duration_seconds: Wall-clock duration of the run.
    """
    if not PROMETHEUS_AVAILABLE:
        return
    sheetcsv_encodes_total.labels(target=target).inc()
    sheetcsv_rows_encoded_total.inc(rows)
    sheetcsv_codec_duration_seconds.labels(operation="encode").observe(
        duration_seconds,
    )


def record_codec_error(operation: str, error_type: str) -> None:
    """Record a decode/encode run that raised.

    Args:
        operation: ``decode`` or ``encode``.
        error_type: Exception class name.
    """
    if not PROMETHEUS_AVAILABLE:
        return
    sheetcsv_codec_errors_total.labels(
        operation=operation, error_type=error_type,
    ).inc()


__all__ = [
    "PROMETHEUS_AVAILABLE",
    # Metric objects
    "sheetcsv_decodes_total",
    "sheetcsv_encodes_total",
    "sheetcsv_rows_decoded_total",
    "sheetcsv_cells_decoded_total",
    "sheetcsv_rows_encoded_total",
    "sheetcsv_codec_duration_seconds",
    "sheetcsv_codec_errors_total",
    # Helper functions
    "record_decode",
    "record_encode",
    "record_codec_error",
]
