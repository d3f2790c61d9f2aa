"""Tests for the DuckDB repositories."""

from datetime import date, datetime

import pytest

from app.repositories import (
    BaseRepository,
    BillRepository,
    IngestionLogRepository,
    OrganeRepository,
    SittingRepository,
)
from app.repositories.base import dedupe_by_key


def organe(uid, libelle="Commission", type_organe="COMPER"):
    return {"id": uid, "libelle": libelle, "libelle_abrege": None, "type_organe": type_organe, "official_url": None}


def sitting(uid, day=date(2024, 11, 5)):
    return {
        "id": uid,
        "legislature": 17,
        "date": day,
        "start_time": "15:00:00",
        "end_time": None,
        "type": "seance_type",
        "title": "Première séance",
        "description": "Première séance",
        "location": None,
        "organe_ref": None,
    }


def item(sitting_id, numero, title="Point"):
    return {
        "sitting_id": sitting_id,
        "numero": numero,
        "scheduled_time": None,
        "title": title,
        "description": title,
        "category": "autre",
        "reference_code": None,
        "official_url": None,
    }


class TestDedupeByKey:
    def test_last_row_wins_first_position_kept(self):
        rows = [{"k": 1, "v": "a"}, {"k": 2, "v": "b"}, {"k": 1, "v": "c"}]
        assert dedupe_by_key(rows, ["k"]) == [{"k": 1, "v": "c"}, {"k": 2, "v": "b"}]


class TestUpsert:
    def test_idempotent(self, conn):
        repo = OrganeRepository(conn)
        rows = [organe("PO1"), organe("PO2")]
        repo.upsert_organes(rows)
        first = conn.execute("SELECT * FROM organe ORDER BY id").fetchall()
        repo.upsert_organes(rows)
        assert conn.execute("SELECT * FROM organe ORDER BY id").fetchall() == first

    def test_updates_existing_rows(self, conn):
        repo = OrganeRepository(conn)
        repo.upsert_organes([organe("PO1", "Ancien")])
        repo.upsert_organes([organe("PO1", "Nouveau")])
        assert conn.execute("SELECT libelle FROM organe").fetchall() == [("Nouveau",)]

    def test_duplicate_keys_in_batch(self, conn):
        written = OrganeRepository(conn).upsert_organes([organe("PO1", "A"), organe("PO1", "B")])
        assert written == 1
        assert conn.execute("SELECT libelle FROM organe").fetchall() == [("B",)]

    def test_do_nothing_keeps_existing(self, conn):
        repo = BillRepository(conn)
        row = {
            "id": "b",
            "title": "Titre officiel",
            "short_title": None,
            "type": None,
            "origin": None,
            "legislature": 17,
            "official_url": None,
        }
        repo.upsert_bills([row])
        repo.ensure_bill({**row, "title": "autre titre"})
        assert repo.get_title("b") == "Titre officiel"

    def test_empty_batch(self, conn):
        assert OrganeRepository(conn).upsert_organes([]) == 0

    def test_read_only(self, conn):
        repo = OrganeRepository(conn, read_only=True)
        with pytest.raises(RuntimeError):
            repo.upsert_organes([organe("PO1")])


class TestPaginate:
    def test_pages_until_short_page(self, conn):
        repo = OrganeRepository(conn)
        repo.upsert_organes([organe(f"PO{i:02d}") for i in range(5)])
        base = BaseRepository(conn)
        pages = list(base.paginate("SELECT id FROM organe ORDER BY id", page_size=2))
        assert [len(p) for p in pages] == [2, 2, 1]

    def test_exact_multiple(self, conn):
        OrganeRepository(conn).upsert_organes([organe(f"PO{i}") for i in range(4)])
        pages = list(BaseRepository(conn).paginate("SELECT id FROM organe ORDER BY id", page_size=2))
        assert [len(p) for p in pages] == [2, 2]

    def test_valid_ids(self, conn):
        repo = OrganeRepository(conn)
        repo.upsert_organes([organe("PO1"), organe("PO2")])
        assert repo.get_valid_ids() == {"PO1", "PO2"}


class TestSittingRepository:
    def test_replace_agenda_items(self, conn):
        repo = SittingRepository(conn)
        repo.upsert_sittings([sitting("S1")])
        repo.replace_agenda_items(["S1"], [item("S1", 1), item("S1", 2), item("S1", 3)])
        repo.replace_agenda_items(["S1"], [item("S1", 1, "Nouveau")])
        assert repo.agenda_items("S1") == [(1, "Nouveau", "autre", None)]

    def test_replace_with_nothing_clears(self, conn):
        repo = SittingRepository(conn)
        repo.upsert_sittings([sitting("S1")])
        repo.replace_agenda_items(["S1"], [item("S1", 1)])
        repo.replace_agenda_items(["S1"], [])
        assert repo.agenda_items("S1") == []

    def test_find_sitting_id(self, conn):
        repo = SittingRepository(conn)
        repo.upsert_sittings([sitting("S2"), sitting("S1"), sitting("S3", date(2024, 11, 6))])
        assert repo.find_sitting_id("S3", date(2024, 11, 5)) == "S3"
        assert repo.find_sitting_id("unknown", date(2024, 11, 5)) == "S1"
        assert repo.find_sitting_id(None, date(2024, 1, 1)) is None


class TestIngestionLogRepository:
    def test_lifecycle(self, conn):
        repo = IngestionLogRepository(conn)
        started = datetime(2024, 11, 5, 6, 0, 0)
        first = repo.create("ingest", "cron", started)
        second = repo.create("ingest", "manual", started)
        assert second != first
        assert repo.get(first)["status"] == "running"
        assert repo.get_started_at(first) == started

        repo.finish(first, "success", datetime(2024, 11, 5, 6, 0, 3), 3000, details={"totalSittings": 2})
        entry = repo.get(first)
        assert entry["status"] == "success"
        assert entry["duration_ms"] == 3000
        assert entry["details"] == {"totalSittings": 2}
        assert entry["error_message"] is None

    def test_missing(self, conn):
        assert IngestionLogRepository(conn).get(404) is None
