"""Vote extraction - flatten group ballots into per-deputy positions."""

from loguru import logger

from an_client.voting.schemas import GroupBallotSchema, ScrutinSchema
from app.models.voting import ExtractedVote, ScrutinOutcome, VotePosition
from settings import SITE_BASE_URL

# ballot category -> position, in the order categories are read
CATEGORIES = (
    ("pours", VotePosition.POUR),
    ("contres", VotePosition.CONTRE),
    ("abstentions", VotePosition.ABSTENTION),
    ("non_votants", VotePosition.NON_VOTANT),
)


def extract_votes(groupes: list[GroupBallotSchema]) -> list[ExtractedVote]:
    """One position per deputy; the first occurrence in the document wins."""
    seen: set[str] = set()
    votes = []
    for groupe in groupes:
        for category, position in CATEGORIES:
            for acteur_ref in getattr(groupe, category):
                if acteur_ref in seen:
                    continue
                seen.add(acteur_ref)
                votes.append(ExtractedVote(acteur_ref=acteur_ref, position=position))
    return votes


def vote_rows(scrutin: ScrutinSchema) -> list[dict]:
    return [v.to_row(scrutin_id=scrutin.uid) for v in extract_votes(scrutin.groupes)]


def normalize_outcome(code: str | None, scrutin_id: str = "") -> str:
    """`adopté` / `rejeté`; anything else is coerced to `adopté`."""
    lowered = (code or "").lower()
    if lowered in (ScrutinOutcome.ADOPTE, ScrutinOutcome.REJETE):
        return lowered
    logger.warning("Scrutin {}: unknown sort code {!r}, defaulting to adopté", scrutin_id, code)
    return str(ScrutinOutcome.ADOPTE)


def scrutin_row(scrutin: ScrutinSchema, sitting_id: str | None, legislature: str) -> dict:
    leg = scrutin.legislature or (int(legislature) if legislature.isdigit() else None)
    return {
        "id": scrutin.uid,
        "numero": scrutin.numero,
        "legislature": leg,
        "sitting_id": sitting_id,
        "date_scrutin": scrutin.date_scrutin,
        "type_vote_code": scrutin.type_vote_code,
        "type_vote_libelle": scrutin.type_vote_libelle,
        "sort_code": normalize_outcome(scrutin.sort_code, scrutin.uid),
        "sort_libelle": scrutin.sort_libelle,
        "titre": scrutin.titre or scrutin.objet_libelle or "Scrutin",
        "objet_libelle": scrutin.objet_libelle,
        "demandeur_texte": scrutin.demandeur_texte,
        "pour": scrutin.pour,
        "contre": scrutin.contre,
        "abstentions": scrutin.abstentions,
        "non_votants": scrutin.non_votants,
        "official_url": f"{SITE_BASE_URL}/{leg or legislature}/scrutins/{scrutin.numero}",
    }
