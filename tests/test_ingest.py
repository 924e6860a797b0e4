"""
Unit tests for CSV ingestion.
"""

import logging

import pytest

from treasurycurve.curves import CurveStore
from treasurycurve.ingest import load_curve_csv, read_curve_rows
from treasurycurve.tenors import LEGACY_TENORS, LIVE_TENORS


LEGACY_CSV = """Date,3MO,6MO,2Y,5Y,10Y,30Y
2024-01-01,5.40,5.20,4.30,3.90,3.90,4.00
2024-02-01,5.30,5.10,4.20,3.80,3.80,4.10
2024-03-01,5.00,ND,,3.50,3.50,3.90
"""

LIVE_CSV = """Date,1MO,3MO,6MO,1Y,2Y,3Y,5Y,7Y,10Y,20Y,30Y
2025-09-16,4.19,4.03,3.81,3.61,3.51,3.50,3.61,3.80,4.03,4.61,4.64
2025-09-17,4.17,4.02,3.80,3.60,3.52,3.51,3.62,3.81,4.06,4.62,4.66
"""


@pytest.fixture
def legacy_file(tmp_path):
    path = tmp_path / "treasury_yields.csv"
    path.write_text(LEGACY_CSV)
    return path


@pytest.fixture
def live_file(tmp_path):
    path = tmp_path / "treasury_yields_live.csv"
    path.write_text(LIVE_CSV)
    return path


class TestReadCurveRows:
    """Tests for read_curve_rows."""

    def test_header_consumed_and_strings_kept(self, legacy_file):
        rows = read_curve_rows(legacy_file)
        assert len(rows) == 3
        assert rows[0][0] == "2024-01-01"
        assert rows[0][1] == "5.40"
        assert rows[2][2] == "ND"
        assert rows[2][3] == ""

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("")
        assert read_curve_rows(path) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_curve_rows(tmp_path / "missing.csv")


class TestLoadCurveCsv:
    """Tests for load_curve_csv."""

    def test_latest_row_by_default(self, legacy_file):
        store = CurveStore()
        assert load_curve_csv(store, legacy_file, tenors=LEGACY_TENORS)

        assert store.date() == "2024-03-01"
        assert [p.label for p in store.points()] == ["3MO", "5Y", "10Y", "30Y"]

    def test_date_filter(self, legacy_file):
        store = CurveStore()
        assert load_curve_csv(store, legacy_file, date_filter="2024-02", tenors=LEGACY_TENORS)
        assert store.date() == "2024-02-01"
        assert len(store) == 6

    def test_not_found_logs_warning(self, legacy_file, caplog):
        store = CurveStore()
        with caplog.at_level(logging.WARNING, logger="treasurycurve.ingest"):
            assert not load_curve_csv(store, legacy_file, date_filter="1999", tenors=LEGACY_TENORS)
        assert store.is_empty()
        assert "1999" in caplog.text

    def test_live_file(self, live_file):
        store = CurveStore()
        assert load_curve_csv(store, live_file, tenors=LIVE_TENORS)
        assert store.date() == "2025-09-17"
        assert len(store) == 11
        assert store.point_for("10Y").yield_ == 4.06

    def test_legacy_file_read_as_live_fails(self, legacy_file):
        """Too few columns for the live tenor set."""
        store = CurveStore()
        assert not load_curve_csv(store, legacy_file, tenors=LIVE_TENORS)


class TestRaggedRows:
    """Rows whose field count differs from the header."""

    def test_overlong_row_is_truncated(self, tmp_path):
        path = tmp_path / "trailing_comma.csv"
        path.write_text(
            "Date,3MO,6MO,2Y,5Y,10Y,30Y\n"
            "2024-01-01,5.4,5.2,4.3,3.9,3.9,4.0\n"
            "2024-02-01,5.3,5.1,4.2,3.8,3.8,4.1,\n"
            "2024-03-01,5.0,5.0,4.0,3.5,3.5,3.9\n"
        )

        rows = read_curve_rows(path)
        assert [len(row) for row in rows] == [7, 7, 7]

        store = CurveStore()
        assert load_curve_csv(store, path, date_filter="2024-02", tenors=LEGACY_TENORS)
        assert store.point_for("30Y").yield_ == 4.1

    def test_extra_values_beyond_header_ignored(self, tmp_path):
        path = tmp_path / "extra.csv"
        path.write_text(
            "Date,3MO,6MO,2Y,5Y,10Y,30Y\n"
            "2024-01-01,5.4,5.2,4.3,3.9,3.9,4.0\n"
            "2024-02-01,5.3,5.1,4.2,3.8,3.8,4.1,9.9,9.9\n"
        )
        store = CurveStore()
        assert load_curve_csv(store, path, tenors=LEGACY_TENORS)
        assert store.date() == "2024-02-01"
        assert len(store) == 6
        assert store.yields().max() == 5.3

    def test_short_row_skipped(self, tmp_path):
        path = tmp_path / "short.csv"
        path.write_text(
            "Date,3MO,6MO,2Y,5Y,10Y,30Y\n"
            "2024-01-01,5.4,5.2,4.3,3.9,3.9,4.0\n"
            "2024-02-01,5.3\n"
        )

        rows = read_curve_rows(path)
        assert rows[1] == ["2024-02-01", "5.3"]

        store = CurveStore()
        assert load_curve_csv(store, path, tenors=LEGACY_TENORS)
        assert store.date() == "2024-01-01"
        assert len(store) == 6

    def test_blank_fields_are_not_short(self, tmp_path):
        """Trailing blanks written out with commas keep the row full width."""
        path = tmp_path / "blanks.csv"
        path.write_text(
            "Date,3MO,6MO,2Y,5Y,10Y,30Y\n"
            "2024-01-01,5.4,5.2,4.3,3.9,,\n"
        )
        rows = read_curve_rows(path)
        assert rows == [["2024-01-01", "5.4", "5.2", "4.3", "3.9", "", ""]]
