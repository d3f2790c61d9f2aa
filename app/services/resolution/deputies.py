"""Deputy resolution: current mandate, constituency, group and commission memberships."""

from datetime import date

from an_client.core.schemas import ActeurSchema, MandateSchema, OrganeSchema
from app.models.core import Constituency, ResolvedMandate
from app.services.resolution.circonscriptions import (
    DEPARTEMENTS,
    canonical_id,
    display_name,
    format_id,
    format_label,
)
from app.services.text import normalize_text
from settings import SITE_BASE_URL

ASSEMBLEE = "ASSEMBLEE"
GROUP_TYPE = "GP"
# permanent/european/special commissions, information missions, delegations, study and friendship groups
MEMBERSHIP_TYPES = frozenset({"COMPER", "COMEU", "COSP", "MINS", "DELE", "GE", "GA"})


def is_active(mandate: MandateSchema, today: date) -> bool:
    return mandate.date_fin is None or mandate.date_fin >= today


def _end_key(mandate: MandateSchema) -> tuple[date, date]:
    # open-ended mandates sort last
    return mandate.date_fin or date.max, mandate.date_debut or date.min


def pick_current(mandates: list[MandateSchema], today: date) -> MandateSchema | None:
    """The single active mandate, else the one ending last."""
    if not mandates:
        return None
    active = [m for m in mandates if is_active(m, today)]
    if len(active) == 1:
        return active[0]
    return max(mandates, key=_end_key)


def seat_candidates(mandates: list[MandateSchema]) -> list[MandateSchema]:
    """Assembly seats with an election place, else deputy-qualified mandates, else all."""
    seats = [m for m in mandates if m.type_organe == ASSEMBLEE and m.has_election_place]
    if seats:
        return seats
    qualified = [m for m in mandates if "depute" in normalize_text(m.qualite or "")]
    return qualified or mandates


def _department_code(raw: str | None) -> str | None:
    code = (raw or "").strip().upper()
    if code.isdigit() and len(code) < 2:
        code = code.zfill(2)
    return code if code in DEPARTEMENTS else None


def constituency_of(mandate: MandateSchema) -> Constituency | None:
    """Constituency described by a mandate's election data, if any."""
    dept_code = _department_code(mandate.num_departement)
    num = int(mandate.num_circo) if (mandate.num_circo or "").isdigit() else None
    dept_name = mandate.departement or (DEPARTEMENTS[dept_code] if dept_code else None)

    canonical = canonical_id(mandate.ref_circonscription)
    if canonical is None and dept_code and num:
        canonical = format_id(dept_code, num)

    if dept_name and num:
        label = format_label(dept_name, num)
    elif canonical:
        label = display_name(canonical)
    else:
        label = dept_name or mandate.region or display_name(mandate.ref_circonscription)
    if label is None:
        return None
    if canonical is None:
        canonical = canonical_id(label)
    return Constituency(label=label, canonical_id=canonical, departement=dept_name)


def resolve_mandate(mandates: list[MandateSchema], today: date) -> ResolvedMandate:
    """Derive a deputy's current seat fields from their raw mandates."""
    candidates = seat_candidates(mandates)
    chosen = pick_current(candidates, today)
    if chosen is None:
        return ResolvedMandate()

    place = constituency_of(chosen)
    if place is None:
        # backfill the place only; dates stay those of the chosen mandate
        for other in [*candidates, *mandates]:
            if other is chosen:
                continue
            place = constituency_of(other)
            if place is not None:
                break

    group = pick_current([m for m in mandates if m.type_organe == GROUP_TYPE], today)
    return ResolvedMandate(
        circonscription=place.label if place else None,
        ref_circonscription=place.canonical_id if place else None,
        departement=place.departement if place else None,
        date_debut=chosen.date_debut,
        date_fin=chosen.date_fin,
        legislature=int(chosen.legislature) if (chosen.legislature or "").isdigit() else None,
        groupe_ref=group.organe_ref if group else None,
    )


def group_label(groupe_ref: str | None, organes: dict[str, OrganeSchema]) -> str | None:
    """Short group label preferred over the full one."""
    organe = organes.get(groupe_ref) if groupe_ref else None
    if organe is None:
        return None
    return organe.libelle_abrege or organe.libelle


def deputy_row(acteur: ActeurSchema, organes: dict[str, OrganeSchema], today: date) -> dict:
    resolved = resolve_mandate(acteur.mandats, today)
    return {
        "acteur_ref": acteur.uid,
        "civil_nom": acteur.nom,
        "civil_prenom": acteur.prenom,
        "date_naissance": acteur.date_naissance,
        "lieu_naissance": acteur.lieu_naissance,
        "profession": acteur.profession,
        "sexe": acteur.sexe,
        "groupe_politique": group_label(resolved.groupe_ref, organes),
        "groupe_ref": resolved.groupe_ref,
        "circonscription": resolved.circonscription,
        "ref_circonscription": resolved.ref_circonscription,
        "departement": resolved.departement,
        "date_debut_mandat": resolved.date_debut,
        "date_fin_mandat": resolved.date_fin,
        "legislature": resolved.legislature,
        "official_url": f"{SITE_BASE_URL}/deputes/{acteur.uid}",
    }


def membership_rows(acteur: ActeurSchema, valid_organes: set[str]) -> list[dict]:
    """Allow-listed commission memberships, one per organe (latest or open end wins)."""
    best: dict[str, MandateSchema] = {}
    for mandate in acteur.mandats:
        ref = mandate.organe_ref
        if mandate.type_organe not in MEMBERSHIP_TYPES or not ref or ref not in valid_organes:
            continue
        current = best.get(ref)
        if current is None or (mandate.date_fin or date.max) > (current.date_fin or date.max):
            best[ref] = mandate
    return [
        {
            "acteur_ref": acteur.uid,
            "organe_ref": ref,
            "date_debut": m.date_debut,
            "date_fin": m.date_fin,
        }
        for ref, m in best.items()
    ]
