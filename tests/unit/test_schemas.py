"""Tests for field helpers and the archive decoders."""

from datetime import date

import pytest

from an_client.agenda import schemas as agenda_schemas
from an_client.agenda.schemas import COMMISSION_TYPE, SEANCE_TYPE, decode_reunion, decode_reunions
from an_client.core import schemas as core_schemas
from an_client.core.schemas import decode_acteurs, decode_organes
from an_client.fields import as_list, decode_each, dig, text, to_date, to_int, unwrap_entities
from an_client.geo.schemas import decode_features
from an_client.legislation import schemas as legislation_schemas
from an_client.legislation.schemas import decode_dossiers
from an_client.voting.schemas import decode_scrutins


class TestFields:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("  Paris ", "Paris"),
            ({"#text": "Paris"}, "Paris"),
            (12, "12"),
            ("", None),
            ({"@xsi:nil": "true"}, None),
            (None, None),
            (["a"], None),
        ],
    )
    def test_text(self, value, expected):
        assert text(value) == expected

    def test_as_list(self):
        assert as_list(None) == []
        assert as_list({"a": 1}) == [{"a": 1}]
        assert as_list([1, 2]) == [1, 2]

    def test_dig(self):
        doc = {"a": {"b": {"c": 1}}}
        assert dig(doc, "a", "b", "c") == 1
        assert dig(doc, "a", "x", "c") is None
        assert dig({"a": "leaf"}, "a", "b") is None

    def test_to_int(self):
        assert to_int("42") == 42
        assert to_int({"#text": "7"}) == 7
        assert to_int(None) == 0
        assert to_int("n/a") == 0

    def test_to_date(self):
        assert to_date("2024-11-05") == date(2024, 11, 5)
        assert to_date("2024-11-05T15:00:00.000+01:00") == date(2024, 11, 5)
        assert to_date("2024-11-05+01:00") == date(2024, 11, 5)
        assert to_date("not a date") is None
        assert to_date(None) is None


class TestUnwrapEntities:
    entity = {"uid": "PA1"}

    def test_composite_export(self):
        doc = {"export": {"acteurs": {"acteur": [self.entity, {"uid": "PA2"}]}}}
        assert [e["uid"] for e in unwrap_entities(doc, "acteurs", "acteur")] == ["PA1", "PA2"]

    def test_plural_container(self):
        doc = {"acteurs": {"acteur": self.entity}}
        assert unwrap_entities(doc, "acteurs", "acteur") == [self.entity]

    def test_one_entity_per_file(self):
        assert unwrap_entities({"acteur": self.entity}, "acteurs", "acteur") == [self.entity]

    def test_root_is_entity(self):
        assert unwrap_entities(self.entity, "acteurs", "acteur") == [self.entity]

    def test_unknown_shape(self):
        assert unwrap_entities({"other": 1}, "acteurs", "acteur") == []
        assert unwrap_entities([], "acteurs", "acteur") == []


ACTEUR = {
    "uid": {"#text": "PA842279"},
    "etatCivil": {
        "ident": {"civ": "Mme", "nom": "Dupont", "prenom": "Marie"},
        "infoNaissance": {"dateNais": "1980-03-14", "villeNais": "Lyon"},
    },
    "profession": {"libelleCourant": "Avocate"},
    "mandats": {
        "mandat": {
            "uid": "PM1",
            "typeOrgane": "ASSEMBLEE",
            "organes": {"organeRef": "PO838901"},
            "dateDebut": "2024-07-18",
            "dateFin": None,
            "legislature": "17",
            "infosQualite": {"libQualiteSex": "Députée"},
            "election": {
                "lieu": {"departement": "Paris", "numDepartement": "75", "numCirco": "5"},
                "refCirconscription": "7505",
            },
        }
    },
}

ORGANE = {"uid": "PO845401", "codeType": "GP", "libelle": "Ensemble pour la République", "libelleAbrev": "EPR"}


class TestCoreSchemas:
    def test_acteur(self):
        [acteur] = decode_acteurs([{"acteur": ACTEUR}])
        assert acteur.uid == "PA842279"
        assert acteur.nom == "Dupont"
        assert acteur.date_naissance == date(1980, 3, 14)
        assert acteur.lieu_naissance == "Lyon"
        assert acteur.sexe == "Mme"
        [mandat] = acteur.mandats
        assert mandat.organe_ref == "PO838901"
        assert mandat.ref_circonscription == "7505"
        assert mandat.qualite == "Députée"
        assert mandat.has_election_place

    def test_organes_skip_acteurs(self):
        docs = [{"export": {"organes": {"organe": [ORGANE]}}}, {"acteur": ACTEUR}]
        organes = decode_organes(docs)
        assert [o.uid for o in organes] == ["PO845401"]
        assert organes[0].type_organe == "GP"
        assert organes[0].libelle_abrege == "EPR"

    def test_acteurs_skip_organes(self):
        assert decode_acteurs([{"organe": ORGANE}]) == []

    def test_organe_type_fallback(self):
        [organe] = decode_organes([{"organe": {"uid": "PO1", "libelle": "X"}}])
        assert organe.type_organe == "ORGANE"


def reunion(uid="RUANR5L17S2024IDS28000", etat="Confirmé", **extra):
    raw = {
        "uid": uid,
        "timeStampDebut": "2024-11-05T15:00:00.000+01:00",
        "timeStampFin": "2024-11-05T20:00:00.000+01:00",
        "cycleDeVie": {"etat": etat},
        "identifiants": {"DateSeance": "2024-11-05+01:00", "quantieme": "Première"},
        "lieu": {"libelleLong": "Salle des séances"},
        "ODJ": {
            "pointsODJ": {
                "pointODJ": [
                    {
                        "cycleDeVie": {"etat": "Confirmé"},
                        "objet": "Questions au Gouvernement",
                        "typePointODJ": "Questions au Gouvernement",
                    },
                    {"cycleDeVie": {"etat": "Supprimé"}, "objet": "Point retiré"},
                    {
                        "cycleDeVie": {"etat": "Confirmé"},
                        "objet": "Projet de loi de finances pour 2025",
                        "typePointODJ": "Discussion",
                        "dossiersLegislatifsRefs": {"dossierRef": "DLR5L17N50000"},
                    },
                ]
            }
        },
    }
    raw.update(extra)
    return raw


class TestReunionSchema:
    def test_plenary(self):
        r = decode_reunion(reunion(**{"@xsi:type": "seance_type"}))
        assert r.type == SEANCE_TYPE
        assert r.legislature == 17
        assert r.date_seance == date(2024, 11, 5)
        assert (r.start_time, r.end_time) == ("15:00:00", "20:00:00")
        assert r.title == "Première séance"
        assert r.location == "Salle des séances"
        assert [(p.numero, p.reference_code) for p in r.points] == [(1, None), (2, "DLR5L17N50000")]

    def test_legacy_entry_typed_from_uid(self):
        assert decode_reunion(reunion()).type == SEANCE_TYPE
        commission = decode_reunion(reunion(uid="RUANR5L14S2014IDC123456"))
        assert commission.type == COMMISSION_TYPE
        assert commission.legislature == 14

    def test_unconfirmed_is_dropped(self):
        assert decode_reunion(reunion(etat="Annulé")) is None

    def test_other_kind_is_dropped(self):
        assert decode_reunion(reunion(**{"@xsi:type": "reunionInterne_type"})) is None

    def test_participants(self):
        raw = reunion(
            uid="RUANR5L17S2024IDC400000",
            participants={
                "participantsInternes": {
                    "participantInterne": [
                        {"acteurRef": "PA1", "presence": "présent"},
                        {"acteurRef": "PA2", "presence": "absent"},
                    ]
                }
            },
        )
        r = decode_reunion(raw)
        assert [(p.acteur_ref, p.presence) for p in r.participants] == [("PA1", "présent"), ("PA2", "absent")]

    def test_legacy_single_file(self):
        doc = {"reunions": {"reunion": [reunion(), reunion(uid="RUANR5L14S2014IDC1")]}}
        assert len(decode_reunions([doc])) == 2


SCRUTIN = {
    "scrutin": {
        "uid": "VTANR5L17V1234",
        "numero": "1234",
        "legislature": "17",
        "dateScrutin": "2024-11-05",
        "seanceRef": "RUANR5L17S2024IDS28000",
        "typeVote": {"codeTypeVote": "SPO", "libelleTypeVote": "scrutin public ordinaire"},
        "sort": {"code": "adopté", "libelle": "l'Assemblée nationale a adopté"},
        "titre": "l'ensemble de la proposition de loi relative au logement (première lecture).",
        "objet": {"libelle": "la proposition de loi relative au logement"},
        "syntheseVote": {
            "decompte": {"pour": "2", "contre": "1", "abstentions": "0", "nonVotants": "1"}
        },
        "ventilationVotes": {
            "organe": {
                "groupes": {
                    "groupe": [
                        {
                            "organeRef": "PO1",
                            "vote": {
                                "decompteNominatif": {
                                    "pours": {"votant": [{"acteurRef": "PA1"}, {"acteurRef": "PA2"}]},
                                    "contres": None,
                                    "nonVotants": {"votant": {"acteurRef": "PA4"}},
                                }
                            },
                        },
                        {
                            "organeRef": "PO2",
                            "vote": {"decompteNominatif": {"contres": {"votant": {"acteurRef": "PA3"}}}},
                        },
                    ]
                }
            }
        },
    }
}


class TestScrutinSchema:
    def test_decode(self):
        [s] = decode_scrutins([SCRUTIN])
        assert s.uid == "VTANR5L17V1234"
        assert s.numero == 1234
        assert s.legislature == 17
        assert s.seance_ref == "RUANR5L17S2024IDS28000"
        assert (s.pour, s.contre, s.abstentions, s.non_votants) == (2, 1, 0, 1)
        assert s.groupes[0].pours == ["PA1", "PA2"]
        assert s.groupes[0].non_votants == ["PA4"]
        assert s.groupes[1].contres == ["PA3"]

    def test_undated_is_dropped(self):
        assert decode_scrutins([{"scrutin": {"uid": "V1", "numero": "1"}}]) == []


class TestDossierSchema:
    dossier = {
        "uid": "DLR5L17N50000",
        "legislature": "17",
        "titreDossier": {"titre": "Projet de loi de finances pour 2025", "titreChemin": "plf2025"},
        "procedureParlementaire": {"libelle": "Projet de loi de finances de l'année"},
    }

    def test_composite(self):
        doc = {"export": {"dossiersLegislatifs": {"dossier": [{"dossierParlementaire": self.dossier}]}}}
        [d] = decode_dossiers([doc])
        assert d.uid == "DLR5L17N50000"
        assert d.titre_chemin == "plf2025"

    def test_single_file(self):
        assert len(decode_dossiers([{"dossierParlementaire": self.dossier}])) == 1

    def test_without_title(self):
        assert decode_dossiers([{"dossierParlementaire": {"uid": "DL1"}}]) == []


class TestGeoSchema:
    def test_features(self):
        collection = {
            "features": [
                {
                    "properties": {"codeDepartement": "75", "nomDepartement": "Paris", "codeCirconscription": "75005"},
                    "geometry": {"type": "Polygon", "coordinates": [[[2.3, 48.8], [2.4, 48.8], [2.3, 48.9]]]},
                },
                {
                    "properties": {
                        "codeDepartement": "971",
                        "nomDepartement": "Guadeloupe",
                        "codeCirconscription": "9711",
                    },
                    "geometry": {"type": "Point", "coordinates": [0, 0]},
                },
                {"properties": {"codeDepartement": "75"}},
            ]
        }
        features = decode_features(collection)
        assert [f.code_circonscription for f in features] == ["75005", "9711"]
        assert features[0].geometry["type"] == "Polygon"
        assert features[1].geometry is None


def failing_on(bad_uid, decode):
    """Wrap `decode` so it breaks on one uid the way an unexpected shape would."""

    def wrapped(raw):
        if text(raw.get("uid")) == bad_uid:
            raise AttributeError("'str' object has no attribute 'get'")
        return decode(raw)

    return wrapped


class TestMalformedEntities:
    def test_decode_each_skips_and_keeps_order(self):
        def decode(raw):
            return int(raw["n"])

        raws = [{"uid": "A", "n": "1"}, {"uid": "B", "n": "x"}, {"uid": "C"}, {"uid": "D", "n": "4"}]
        assert decode_each(raws, decode, "thing") == [1, 4]

    def test_acteur_with_string_lieu(self):
        bad = {**ACTEUR, "uid": "PA2", "mandats": {"mandat": {"uid": "PM2", "election": {"lieu": "Paris"}}}}
        assert [a.uid for a in decode_acteurs([{"acteur": ACTEUR}, {"acteur": bad}])] == ["PA842279"]

    def test_acteur_with_scalar_ident(self):
        bad = {"uid": "PA2", "etatCivil": {"ident": "Dupont"}}
        assert [a.uid for a in decode_acteurs([{"acteur": bad}, {"acteur": ACTEUR}])] == ["PA842279"]

    def test_organe(self, monkeypatch):
        monkeypatch.setattr(core_schemas, "decode_organe", failing_on("PO1", core_schemas.decode_organe))
        docs = [{"organe": {"uid": "PO1", "libelle": "X"}}, {"organe": ORGANE}]
        assert [o.uid for o in decode_organes(docs)] == ["PO845401"]

    def test_scrutin_with_list_decompte(self):
        bad = {
            "uid": "VTANR5L17V1",
            "dateScrutin": "2024-11-05",
            "ventilationVotes": {
                "organe": {"groupes": {"groupe": {"vote": {"decompteNominatif": [{"pours": None}]}}}}
            },
        }
        assert [s.uid for s in decode_scrutins([{"scrutin": bad}, SCRUTIN])] == ["VTANR5L17V1234"]

    def test_reunion(self, monkeypatch):
        monkeypatch.setattr(agenda_schemas, "decode_reunion", failing_on("RUANR5L14S2014IDC1", decode_reunion))
        doc = {"reunions": {"reunion": [reunion(), reunion(uid="RUANR5L14S2014IDC1")]}}
        assert [r.uid for r in decode_reunions([doc])] == ["RUANR5L17S2024IDS28000"]

    def test_dossier(self, monkeypatch):
        decode = failing_on("DL1", legislation_schemas.decode_dossier)
        monkeypatch.setattr(legislation_schemas, "decode_dossier", decode)
        docs = [
            {"dossierParlementaire": {"uid": "DL1", "titreDossier": {"titre": "Bad"}}},
            {"dossierParlementaire": {"uid": "DL2", "titreDossier": {"titre": "Good"}}},
        ]
        assert [d.uid for d in decode_dossiers(docs)] == ["DL2"]

    def test_feature_with_scalar_properties(self):
        good = {"properties": {"codeDepartement": "75", "nomDepartement": "Paris", "codeCirconscription": "75005"}}
        features = decode_features({"features": [{"properties": "75005"}, good]})
        assert [f.code_circonscription for f in features] == ["75005"]
