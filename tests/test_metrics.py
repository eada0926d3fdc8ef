# -*- coding: utf-8 -*-
"""Tests for the Prometheus metric helpers."""

import io

import pytest

from sheetcsv import metrics
from sheetcsv.config import SheetCsvConfig
from sheetcsv.csv_codec import CSVCodec


def _sample(name, labels=None):
    from prometheus_client import REGISTRY

    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


class TestHelpersWithoutPrometheus:
    """record_* helpers are no-ops when prometheus_client is missing."""

    def test_helpers_safe(self, monkeypatch):
        monkeypatch.setattr(metrics, "PROMETHEUS_AVAILABLE", False)

        metrics.record_decode("text", 1, 2, 0.01)
        metrics.record_encode("text", 1, 0.01)
        metrics.record_codec_error("decode", "ValueError")


@pytest.mark.skipif(not metrics.PROMETHEUS_AVAILABLE, reason="prometheus_client not installed")
class TestPrometheusMetrics:
    """Codec runs update the registered metrics."""

    def test_decode_counters(self):
        codec = CSVCodec(SheetCsvConfig(cell_newline="\n"))
        runs = _sample("sheetcsv_decodes_total", {"source": "text"})
        rows = _sample("sheetcsv_rows_decoded_total")
        cells = _sample("sheetcsv_cells_decoded_total")

        codec.decode_text("a,b\nc,d\n")

        assert _sample("sheetcsv_decodes_total", {"source": "text"}) == runs + 1
        assert _sample("sheetcsv_rows_decoded_total") == rows + 2
        assert _sample("sheetcsv_cells_decoded_total") == cells + 4

    def test_encode_counters(self, tmp_path):
        codec = CSVCodec(SheetCsvConfig(cell_newline="\n"))
        sheet = codec.decode_text("a\nb\nc\n")
        runs = _sample("sheetcsv_encodes_total", {"target": "file"})
        rows = _sample("sheetcsv_rows_encoded_total")

        codec.encode_file(sheet, tmp_path / "out.csv")

        assert _sample("sheetcsv_encodes_total", {"target": "file"}) == runs + 1
        assert _sample("sheetcsv_rows_encoded_total") == rows + 3

    def test_error_counter(self):
        codec = CSVCodec(SheetCsvConfig(cell_newline="\n"))
        labels = {"operation": "decode", "error_type": "UnicodeDecodeError"}
        before = _sample("sheetcsv_codec_errors_total", labels)

        with pytest.raises(UnicodeDecodeError):
            codec.decode_stream(io.BytesIO(b"\xff\n"))

        assert _sample("sheetcsv_codec_errors_total", labels) == before + 1

    def test_duration_observed(self):
        codec = CSVCodec(SheetCsvConfig(cell_newline="\n"))
        labels = {"operation": "encode"}
        before = _sample("sheetcsv_codec_duration_seconds_count", labels)

        codec.encode_text(codec.decode_text("x\n"))

        assert _sample("sheetcsv_codec_duration_seconds_count", labels) == before + 1
