"""ETL helper functions - date windows, options and guarded writes."""

from collections.abc import Callable, Iterator
from datetime import date, timedelta
from typing import Any

import duckdb
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from settings import (
    AGENDA_LOOKAHEAD_DAYS,
    AGENDA_LOOKBACK_DAYS,
    DEFAULT_LEGISLATURE,
    LEGISLATURES_WITH_AGENDAS,
    SCRUTINS_LOOKBACK_DAYS,
)


class IngestOptions(BaseModel):
    """Options shared by every job (CLI flags or JSON trigger body)."""

    model_config = ConfigDict(populate_by_name=True)

    day: date | None = Field(default=None, alias="date")
    from_date: date | None = Field(default=None, alias="fromDate")
    to_date: date | None = Field(default=None, alias="toDate")
    dry_run: bool = Field(default=False, alias="dryRun")
    legislature: str = DEFAULT_LEGISLATURE
    force: bool = False

    @field_validator("legislature", mode="before")
    @classmethod
    def check_legislature(cls, value):
        value = str(value).strip().lower()
        if value != "all" and value not in LEGISLATURES_WITH_AGENDAS:
            raise ValueError(f"legislature must be one of {', '.join(LEGISLATURES_WITH_AGENDAS)} or all")
        return value

    @model_validator(mode="after")
    def check_range(self):
        if (self.from_date is None) != (self.to_date is None):
            raise ValueError("fromDate and toDate must be given together")
        if self.from_date and self.to_date and self.from_date > self.to_date:
            raise ValueError("fromDate must not be after toDate")
        return self


def days_between(start: date, end: date) -> list[date]:
    """Every day in [start, end]."""
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def agenda_dates(options: IngestOptions, today: date | None = None) -> list[date]:
    """Explicit date, explicit range, or the default window around today."""
    if options.day:
        return [options.day]
    if options.from_date and options.to_date:
        return days_between(options.from_date, options.to_date)
    today = today or date.today()
    return days_between(today - timedelta(days=AGENDA_LOOKBACK_DAYS), today + timedelta(days=AGENDA_LOOKAHEAD_DAYS))


def scrutin_window(options: IngestOptions, today: date | None = None) -> tuple[date, date]:
    """Explicit range, a single date, or the trailing SCRUTINS_LOOKBACK_DAYS."""
    if options.from_date and options.to_date:
        return options.from_date, options.to_date
    if options.day:
        return options.day, options.day
    today = today or date.today()
    return today - timedelta(days=SCRUTINS_LOOKBACK_DAYS), today


def chunked(rows: list, size: int) -> Iterator[list]:
    for i in range(0, len(rows), size):
        yield rows[i : i + size]


def guarded(label: str, write: Callable[..., Any], *args) -> Any | None:
    """Run one store write; a failure is logged and reported as None."""
    try:
        return write(*args)
    except duckdb.Error as e:
        logger.error("{} failed: {}", label, e)
        return None


def enrich(label: str, step: Callable[..., Any], *args) -> Any | None:
    """Run a non-essential step (bill link, tags, source metadata); any failure is logged and reported as None."""
    try:
        return step(*args)
    except Exception as e:
        logger.warning("{} failed: {!r}", label, e)
        return None


def write_chunks(rows: list[dict], size: int, write: Callable[[list[dict]], int], label: str) -> int:
    """Write rows chunk by chunk; failed chunks are logged and skipped. Returns rows written."""
    written = 0
    for i, chunk in enumerate(chunked(rows, size)):
        count = guarded(f"{label} chunk {i + 1} (offset {i * size}, {len(chunk)} rows)", write, chunk)
        if count is not None:
            written += count
    logger.info("{}: {}/{} rows written", label, written, len(rows))
    return written
