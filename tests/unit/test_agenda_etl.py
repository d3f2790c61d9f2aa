"""Tests for the agenda ETL."""

import asyncio
from datetime import date, datetime

from an_client.agenda.schemas import (
    COMMISSION_TYPE,
    SEANCE_TYPE,
    AgendaPointSchema,
    ParticipantSchema,
    ReunionSchema,
)
from an_client.legislation.schemas import DossierSchema
from app.repositories import OrganeRepository, SittingRepository
from etl.agenda import build_sitting_bundle, checksum, filter_hosted, ingest, ingest_agenda
from etl.helpers import IngestOptions


def plenary(uid="RUANR5L16S2024IDS27000", day=date(2024, 1, 15), points=None):
    return ReunionSchema(
        uid=uid,
        legislature=16,
        date_seance=day,
        start_time="15:00:00",
        type=SEANCE_TYPE,
        title="Première séance",
        points=points or [],
    )


def commission(uid="RUANR5L16S2024IDC400000", organe_ref="PO59051", day=date(2024, 1, 15)):
    return ReunionSchema(
        uid=uid,
        legislature=16,
        date_seance=day,
        type=COMMISSION_TYPE,
        title="Audition",
        organe_ref=organe_ref,
        participants=[ParticipantSchema(acteur_ref="PA1", presence="présent")],
    )


class FakeAgendaClient:
    def __init__(self, reunions):
        self._reunions = reunions
        self.calls = []

    async def reunions_between(self, start, end, legislature):
        self.calls.append((start, end, legislature))
        return [r for r in self._reunions if start <= r.date_seance <= end]


class FakeLegislationClient:
    def __init__(self, dossiers=None):
        self._dossiers = dossiers or []

    async def dossiers(self, legislature):
        return self._dossiers


def count(conn, table):
    return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]


class TestBuildSittingBundle:
    def test_sitting_without_items(self):
        synced = datetime(2024, 1, 15, 8, 0)
        bundle = build_sitting_bundle(plenary(), synced_at=synced)
        assert bundle["sitting"]["id"] == "RUANR5L16S2024IDS27000"
        assert bundle["sitting"]["date"] == date(2024, 1, 15)
        assert bundle["sitting"]["description"] == "Première séance"
        assert bundle["agenda_items"] == []
        assert bundle["attendance"] == []
        metadata = bundle["source_metadata"]
        assert metadata["checksum"] == checksum(plenary())
        assert metadata["original_source_url"].endswith("/2024-01-15")
        assert metadata["last_synced_at"] == synced

    def test_items_and_description(self):
        points = [
            AgendaPointSchema(numero=1, title="Questions au Gouvernement"),
            AgendaPointSchema(numero=2, title="PLF 2025", category="Discussion", reference_code="DLR5L16N1"),
        ]
        bundle = build_sitting_bundle(plenary(points=points))
        assert bundle["sitting"]["description"] == "Première séance - 2 point(s) à l'ordre du jour"
        assert [i["numero"] for i in bundle["agenda_items"]] == [1, 2]
        assert bundle["agenda_items"][0]["official_url"] is None
        assert bundle["agenda_items"][1]["official_url"].endswith("/16/dossiers_/DLR5L16N1")

    def test_attendance(self):
        bundle = build_sitting_bundle(commission())
        assert bundle["attendance"] == [
            {"sitting_id": "RUANR5L16S2024IDC400000", "acteur_ref": "PA1", "presence": "présent"}
        ]

    def test_checksum_changes_with_content(self):
        assert checksum(plenary()) == checksum(plenary())
        assert checksum(plenary()) != checksum(plenary(points=[AgendaPointSchema(numero=1, title="X")]))


class TestFilterHosted:
    def test_unknown_organes_are_dropped(self):
        kept = filter_hosted([plenary(), commission(), commission(uid="R2", organe_ref="PO404")], {"PO59051"})
        assert [r.uid for r in kept] == ["RUANR5L16S2024IDS27000", "RUANR5L16S2024IDC400000"]


class TestIngestAgenda:
    def options(self, **kwargs):
        return IngestOptions(fromDate=date(2024, 1, 15), toDate=date(2024, 1, 16), legislature="16", **kwargs)

    def test_writes_sittings_items_attendance(self, conn):
        lois = {"id": "PO59051", "libelle": "Lois", "libelle_abrege": None, "type_organe": "COMPER"}
        OrganeRepository(conn).upsert_organes([{**lois, "official_url": None}])
        points = [AgendaPointSchema(numero=1, title="Point")]
        client = FakeAgendaClient(
            [plenary(points=points), commission(), plenary(uid="LATER", day=date(2024, 1, 20))]
        )
        result = asyncio.run(ingest_agenda(client, conn, self.options()))
        assert result == {"totalSittings": 2, "totalItems": 1}
        assert client.calls == [(date(2024, 1, 15), date(2024, 1, 16), "16")]
        assert count(conn, "sitting") == 2
        assert count(conn, "sitting_attendance") == 1
        assert count(conn, "source_metadata") == 2

    def test_rerun_is_idempotent(self, conn):
        client = FakeAgendaClient([plenary(points=[AgendaPointSchema(numero=1, title="Point")])])
        asyncio.run(ingest_agenda(client, conn, self.options()))
        before = conn.execute("SELECT * FROM sitting").fetchall()
        asyncio.run(ingest_agenda(client, conn, self.options()))
        assert conn.execute("SELECT * FROM sitting").fetchall() == before
        assert count(conn, "agenda_item") == 1

    def test_drops_unknown_organes(self, conn):
        result = asyncio.run(ingest_agenda(FakeAgendaClient([commission()]), conn, self.options()))
        assert result == {"totalSittings": 0, "totalItems": 0}
        assert count(conn, "sitting") == 0

    def test_dry_run_writes_nothing(self, conn):
        client = FakeAgendaClient([plenary(points=[AgendaPointSchema(numero=1, title="Point")])])
        result = asyncio.run(ingest_agenda(client, conn, self.options(dryRun=True)))
        assert result == {"totalSittings": 1, "totalItems": 1}
        assert count(conn, "sitting") == 0

    def test_ingest_job_includes_dossiers(self, conn):
        dossier = DossierSchema(uid="DLR5L16N1", legislature="16", titre="Projet de loi de finances pour 2024")
        result = asyncio.run(
            ingest(FakeAgendaClient([plenary()]), FakeLegislationClient([dossier]), conn, self.options())
        )
        assert result == {"success": True, "totalSittings": 1, "totalItems": 0, "totalDossiers": 1}
        assert count(conn, "bill") == 1
