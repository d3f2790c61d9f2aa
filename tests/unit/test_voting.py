"""Tests for vote extraction and scrutin rows."""

from datetime import date

from an_client.voting.schemas import GroupBallotSchema, ScrutinSchema
from app.models.voting import VotePosition
from app.services.voting import extract_votes, normalize_outcome, scrutin_row, vote_rows


def scrutin(**kwargs):
    values = {"uid": "VTANR5L17V1", "numero": 1, "date_scrutin": date(2024, 11, 5)}
    values.update(kwargs)
    return ScrutinSchema(**values)


class TestExtractVotes:
    def test_one_record_per_member(self):
        groupes = [
            GroupBallotSchema(pours=["PA1", "PA2"], abstentions=["PA3"]),
            GroupBallotSchema(contres=["PA4"], non_votants=["PA5"]),
        ]
        votes = {v.acteur_ref: v.position for v in extract_votes(groupes)}
        assert votes == {
            "PA1": VotePosition.POUR,
            "PA2": VotePosition.POUR,
            "PA3": VotePosition.ABSTENTION,
            "PA4": VotePosition.CONTRE,
            "PA5": VotePosition.NON_VOTANT,
        }

    def test_first_occurrence_wins_within_group(self):
        votes = extract_votes([GroupBallotSchema(pours=["PA1"], contres=["PA1"])])
        assert [(v.acteur_ref, v.position) for v in votes] == [("PA1", VotePosition.POUR)]

    def test_first_occurrence_wins_across_groups(self):
        groupes = [GroupBallotSchema(abstentions=["PA1"]), GroupBallotSchema(pours=["PA1", "PA2"])]
        votes = extract_votes(groupes)
        assert len(votes) == 2
        assert votes[0].position == VotePosition.ABSTENTION

    def test_empty(self):
        assert extract_votes([]) == []


class TestNormalizeOutcome:
    def test_known(self):
        assert normalize_outcome("adopté") == "adopté"
        assert normalize_outcome("Rejeté") == "rejeté"

    def test_unknown_defaults_to_adopted(self):
        assert normalize_outcome("inconnu", "V1") == "adopté"
        assert normalize_outcome(None) == "adopté"


class TestScrutinRow:
    def test_row(self):
        s = scrutin(
            legislature=17,
            sort_code="rejeté",
            titre="la motion de censure",
            pour=120,
            groupes=[GroupBallotSchema(pours=["PA1"], contres=["PA2"])],
        )
        row = scrutin_row(s, "RUANR5L17S2024IDS28000", "17")
        assert row["sitting_id"] == "RUANR5L17S2024IDS28000"
        assert row["sort_code"] == "rejeté"
        assert row["pour"] == 120
        assert row["official_url"].endswith("/17/scrutins/1")

    def test_title_falls_back_to_subject(self):
        assert scrutin_row(scrutin(objet_libelle="le projet de loi"), None, "17")["titre"] == "le projet de loi"
        assert scrutin_row(scrutin(), None, "17")["titre"] == "Scrutin"

    def test_legislature_from_option(self):
        assert scrutin_row(scrutin(), None, "16")["legislature"] == 16

    def test_vote_rows(self):
        s = scrutin(groupes=[GroupBallotSchema(pours=["PA1"], contres=["PA1", "PA2"])])
        assert vote_rows(s) == [
            {"scrutin_id": "VTANR5L17V1", "acteur_ref": "PA1", "position": "pour"},
            {"scrutin_id": "VTANR5L17V1", "acteur_ref": "PA2", "position": "contre"},
        ]
