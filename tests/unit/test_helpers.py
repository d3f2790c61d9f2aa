"""Tests for ingest options, date windows and chunked writes."""

from datetime import date

import duckdb
import pytest
from pydantic import ValidationError

from etl.helpers import (
    IngestOptions,
    agenda_dates,
    chunked,
    days_between,
    enrich,
    guarded,
    scrutin_window,
    write_chunks,
)

TODAY = date(2024, 11, 5)


class TestIngestOptions:
    def test_defaults(self):
        options = IngestOptions()
        assert options.legislature == "17"
        assert not options.dry_run
        assert options.day is None

    def test_json_aliases(self):
        options = IngestOptions.model_validate({"date": "2024-11-05", "dryRun": True, "legislature": 16})
        assert options.day == TODAY
        assert options.dry_run
        assert options.legislature == "16"

    def test_field_names(self):
        assert IngestOptions(from_date=TODAY, to_date=TODAY).from_date == TODAY

    def test_all_legislatures(self):
        assert IngestOptions(legislature="ALL").legislature == "all"

    @pytest.mark.parametrize("legislature", ["13", "18", "x"])
    def test_invalid_legislature(self, legislature):
        with pytest.raises(ValidationError):
            IngestOptions(legislature=legislature)

    def test_range_needs_both_ends(self):
        with pytest.raises(ValidationError):
            IngestOptions(fromDate="2024-11-01")

    def test_range_order(self):
        with pytest.raises(ValidationError):
            IngestOptions(fromDate="2024-11-05", toDate="2024-11-01")

    def test_bad_date(self):
        with pytest.raises(ValidationError):
            IngestOptions(date="05/11/2024")


class TestWindows:
    def test_days_between(self):
        assert days_between(date(2024, 2, 28), date(2024, 3, 1)) == [
            date(2024, 2, 28),
            date(2024, 2, 29),
            date(2024, 3, 1),
        ]

    def test_agenda_default_window(self):
        dates = agenda_dates(IngestOptions(), today=TODAY)
        assert dates[0] == date(2024, 11, 4)
        assert dates[-1] == date(2024, 11, 11)
        assert len(dates) == 8

    def test_agenda_single_date(self):
        assert agenda_dates(IngestOptions(date=TODAY), today=TODAY) == [TODAY]

    def test_agenda_range(self):
        options = IngestOptions(fromDate="2024-01-15", toDate="2024-01-15")
        assert agenda_dates(options, today=TODAY) == [date(2024, 1, 15)]

    def test_scrutin_default_window(self):
        assert scrutin_window(IngestOptions(), today=TODAY) == (date(2024, 10, 29), TODAY)

    def test_scrutin_range_beats_date(self):
        options = IngestOptions(date=TODAY, fromDate="2024-11-01", toDate="2024-11-02")
        assert scrutin_window(options, today=TODAY) == (date(2024, 11, 1), date(2024, 11, 2))

    def test_scrutin_single_date(self):
        assert scrutin_window(IngestOptions(date=TODAY)) == (TODAY, TODAY)


class TestChunkedWrites:
    def test_chunked(self):
        assert list(chunked(list(range(5)), 2)) == [[0, 1], [2, 3], [4]]

    def test_failed_chunk_is_skipped(self):
        seen = []

        def write(chunk):
            seen.append(chunk)
            if 3 in chunk:
                raise duckdb.ConstraintException("duplicate key")
            return len(chunk)

        assert write_chunks(list(range(6)), 2, write, "Rows") == 4
        assert len(seen) == 3

    def test_guarded(self):
        def fail():
            raise duckdb.CatalogException("no such table")

        assert guarded("Write", fail) is None
        assert guarded("Write", lambda x: x + 1, 1) == 2

    def test_enrich_swallows_any_error(self):
        def fail(text):
            raise ValueError(text)

        assert enrich("Tagging", fail, "bad keyword") is None
        assert enrich("Tagging", lambda x: x * 2, 3) == 6

    def test_other_errors_propagate(self):
        def fail(chunk):
            raise KeyError("id")

        with pytest.raises(KeyError):
            write_chunks([1], 1, fail, "Rows")
