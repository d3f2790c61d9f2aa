"""Bill linking - bills from dossiers and bill keys derived from scrutin subjects."""

import re

from an_client.legislation.schemas import DossierSchema
from app.models.legislation import BillOrigin, BillReference, BillType, LinkRole
from app.services.text import normalize_text, slugify
from settings import SITE_BASE_URL

SHORT_TITLE_MAX = 160

_BILL_START_RE = re.compile(r"proposition de loi|projet de loi|r[ée]solution", re.IGNORECASE)
_READING_RE = re.compile(r"\s*\([^)]*lecture[^)]*\)$", re.IGNORECASE)
_TRAILING_PUNCT_RE = re.compile(r"[\s.,;:]+$")

# first keyword found in the scrutin title decides the role
ROLE_KEYWORDS = (
    ("ensemble", LinkRole.ENSEMBLE),
    ("amendement", LinkRole.AMENDEMENT),
    ("article", LinkRole.ARTICLE),
    ("motion", LinkRole.MOTION),
)


def extract_bill_title(subject: str | None) -> str | None:
    """`l'ensemble de la proposition de loi X (première lecture).` -> `proposition de loi X`."""
    match = _BILL_START_RE.search(subject or "")
    if not match:
        return None
    title = subject[match.start() :].rstrip(". \t\n")
    title = _READING_RE.sub("", title)
    title = _TRAILING_PUNCT_RE.sub("", title)
    return title or None


def bill_reference(titre: str | None, objet: str | None = None) -> BillReference | None:
    """Bill key for a scrutin, from its title or else its subject."""
    title = extract_bill_title(titre) or extract_bill_title(objet)
    if not title:
        return None
    slug = slugify(title)
    return BillReference(slug=slug, title=title) if slug else None


def link_role(titre: str | None) -> str | None:
    normalized = normalize_text(titre or "")
    for keyword, role in ROLE_KEYWORDS:
        if keyword in normalized:
            return str(role)
    return None


def infer_type_and_origin(label: str | None) -> tuple[str | None, str | None]:
    lower = (label or "").lower()
    if "projet de loi" in lower:
        return str(BillType.PROJET_DE_LOI), str(BillOrigin.GOUVERNEMENT)
    if "proposition de loi" in lower:
        return str(BillType.PROPOSITION_DE_LOI), str(BillOrigin.PARLEMENTAIRE)
    if "résolution" in lower:
        return str(BillType.RESOLUTION), None
    return None, None


def short_title(title: str) -> str:
    if len(title) > SHORT_TITLE_MAX:
        return f"{title[: SHORT_TITLE_MAX - 3]}…"
    return title


def dossier_bill_row(dossier: DossierSchema) -> dict:
    bill_type, origin = infer_type_and_origin(dossier.procedure_libelle or dossier.titre)
    leg = dossier.legislature or "17"
    return {
        "id": dossier.uid,
        "title": dossier.titre,
        "short_title": short_title(dossier.titre),
        "type": bill_type,
        "origin": origin,
        "legislature": int(leg) if leg.isdigit() else None,
        "official_url": f"{SITE_BASE_URL}/{leg}/dossiers/{dossier.titre_chemin}" if dossier.titre_chemin else None,
    }


def reference_bill_row(reference: BillReference, legislature: int | None) -> dict:
    """Bill row for a slug-keyed bill derived from a scrutin."""
    bill_type, origin = infer_type_and_origin(reference.title)
    return {
        "id": reference.slug,
        "title": reference.title,
        "short_title": short_title(reference.title),
        "type": bill_type,
        "origin": origin,
        "legislature": legislature,
        "official_url": None,
    }
