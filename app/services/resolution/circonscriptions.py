"""Constituency canonicalization: raw codes, display names and canonical ids.

A canonical id is the department code followed by the constituency number
padded to two digits (`7505`, `2A01`, `97101`). Raw codes come in several
forms (`7505`, `PO7500501`, `9711`) and display names look like
`Paris - 5e circonscription`.
"""

import re

DEPARTEMENTS = {
    "01": "Ain",
    "02": "Aisne",
    "03": "Allier",
    "04": "Alpes-de-Haute-Provence",
    "05": "Hautes-Alpes",
    "06": "Alpes-Maritimes",
    "07": "Ardèche",
    "08": "Ardennes",
    "09": "Ariège",
    "10": "Aube",
    "11": "Aude",
    "12": "Aveyron",
    "13": "Bouches-du-Rhône",
    "14": "Calvados",
    "15": "Cantal",
    "16": "Charente",
    "17": "Charente-Maritime",
    "18": "Cher",
    "19": "Corrèze",
    "21": "Côte-d'Or",
    "22": "Côtes-d'Armor",
    "23": "Creuse",
    "24": "Dordogne",
    "25": "Doubs",
    "26": "Drôme",
    "27": "Eure",
    "28": "Eure-et-Loir",
    "29": "Finistère",
    "2A": "Corse-du-Sud",
    "2B": "Haute-Corse",
    "30": "Gard",
    "31": "Haute-Garonne",
    "32": "Gers",
    "33": "Gironde",
    "34": "Hérault",
    "35": "Ille-et-Vilaine",
    "36": "Indre",
    "37": "Indre-et-Loire",
    "38": "Isère",
    "39": "Jura",
    "40": "Landes",
    "41": "Loir-et-Cher",
    "42": "Loire",
    "43": "Haute-Loire",
    "44": "Loire-Atlantique",
    "45": "Loiret",
    "46": "Lot",
    "47": "Lot-et-Garonne",
    "48": "Lozère",
    "49": "Maine-et-Loire",
    "50": "Manche",
    "51": "Marne",
    "52": "Haute-Marne",
    "53": "Mayenne",
    "54": "Meurthe-et-Moselle",
    "55": "Meuse",
    "56": "Morbihan",
    "57": "Moselle",
    "58": "Nièvre",
    "59": "Nord",
    "60": "Oise",
    "61": "Orne",
    "62": "Pas-de-Calais",
    "63": "Puy-de-Dôme",
    "64": "Pyrénées-Atlantiques",
    "65": "Hautes-Pyrénées",
    "66": "Pyrénées-Orientales",
    "67": "Bas-Rhin",
    "68": "Haut-Rhin",
    "69": "Rhône",
    "70": "Haute-Saône",
    "71": "Saône-et-Loire",
    "72": "Sarthe",
    "73": "Savoie",
    "74": "Haute-Savoie",
    "75": "Paris",
    "76": "Seine-Maritime",
    "77": "Seine-et-Marne",
    "78": "Yvelines",
    "79": "Deux-Sèvres",
    "80": "Somme",
    "81": "Tarn",
    "82": "Tarn-et-Garonne",
    "83": "Var",
    "84": "Vaucluse",
    "85": "Vendée",
    "86": "Vienne",
    "87": "Haute-Vienne",
    "88": "Vosges",
    "89": "Yonne",
    "90": "Territoire de Belfort",
    "91": "Essonne",
    "92": "Hauts-de-Seine",
    "93": "Seine-Saint-Denis",
    "94": "Val-de-Marne",
    "95": "Val-d'Oise",
    "971": "Guadeloupe",
    "972": "Martinique",
    "973": "Guyane",
    "974": "La Réunion",
    "976": "Mayotte",
}

CODES_BY_NAME = {name: code for code, name in DEPARTEMENTS.items()}
# longest first so "Eure" never matches inside "Eure-et-Loir"
_NAMES_BY_LENGTH = sorted(CODES_BY_NAME, key=len, reverse=True)

_CODE_PATTERNS = (
    re.compile(r"^(\d{2})(\d{1,2})$"),
    re.compile(r"^(2[AB])(\d{1,2})$", re.IGNORECASE),
    re.compile(r"^(97[1-6])(\d{1,2})$"),
)
_NAME_SUFFIX_RE = re.compile(r"^(\d+)(?:ère|re|er|ème|e) circonscription$", re.IGNORECASE)
_NAME_SHAPE_RE = re.compile(r"^\S+ - \d+(?:ère|e) circonscription$", re.IGNORECASE)
_ID_SHAPE_RE = re.compile(r"^[A-Z0-9]{4,12}$", re.IGNORECASE)
_PO_SHAPE_RE = re.compile(r"^PO[A-Z0-9]+$", re.IGNORECASE)


def _match_code(code: str) -> tuple[str, int] | None:
    for pattern in _CODE_PATTERNS:
        match = pattern.match(code)
        if match:
            dept, num = match.group(1).upper(), int(match.group(2))
            if dept in DEPARTEMENTS and num >= 1:
                return dept, num
    return None


def parse_code(raw: str | None) -> tuple[str, int] | None:
    """(department code, number) from a raw constituency code, or None."""
    code = (raw or "").strip()
    if not code:
        return None
    code = re.sub(r"^PO", "", code, flags=re.IGNORECASE)
    code = re.sub(r"\D+$", "", code)
    parsed = _match_code(code)
    if parsed is None and len(code) >= 4:
        # longer composite code: retry on its first four characters
        parsed = _match_code(code[:4])
    return parsed


def parse_name(name: str | None) -> tuple[str, int] | None:
    """(department code, number) from a `Dept - Ne circonscription` label."""
    raw = (name or "").strip()
    for dept_name in _NAMES_BY_LENGTH:
        prefix = f"{dept_name} - "
        if not raw.startswith(prefix):
            continue
        match = _NAME_SUFFIX_RE.match(raw[len(prefix) :])
        if match and int(match.group(1)) >= 1:
            return CODES_BY_NAME[dept_name], int(match.group(1))
    return None


def ordinal(num: int) -> str:
    return "1ère" if num == 1 else f"{num}e"


def format_id(dept: str, num: int) -> str:
    return f"{dept}{num:02d}"


def format_label(dept_name: str, num: int) -> str:
    return f"{dept_name} - {ordinal(num)} circonscription"


def looks_like_id(value: str | None) -> bool:
    """True for short codes (`7505`, `PO7500501`), False for display names."""
    s = (value or "").strip()
    if not s or "circonscription" in s.lower() or _NAME_SHAPE_RE.match(s):
        return False
    return bool(_ID_SHAPE_RE.match(s) or _PO_SHAPE_RE.match(s))


def display_name(value: str | None) -> str | None:
    """Human label for a raw code; names (and unparseable codes) are returned as-is."""
    s = (value or "").strip()
    if not s:
        return None
    if looks_like_id(s):
        parsed = parse_code(s)
        if parsed:
            return format_label(DEPARTEMENTS[parsed[0]], parsed[1])
    return s


def canonical_id(value: str | None) -> str | None:
    """Canonical id from either a raw code or a display name."""
    s = (value or "").strip()
    if not s:
        return None
    if looks_like_id(s):
        parsed = parse_code(s)
    else:
        name = display_name(s) or s
        parsed = parse_name(name) or parse_code(name)
    return format_id(*parsed) if parsed else None


def labels_for_id(circonscription_id: str | None) -> list[str]:
    """Every label spelling that may already be stored for a canonical id."""
    parsed = parse_code(circonscription_id)
    if not parsed:
        return []
    dept, num = parsed
    dept_name = DEPARTEMENTS[dept]
    labels = [format_label(dept_name, num), f"{dept_name} - {num}e circonscription"]
    if num != 1:
        labels.append(f"{dept_name} - {num}ème circonscription")
    return list(dict.fromkeys(labels))


def feature_id(code_circonscription: str, code_departement: str) -> tuple[str, int] | None:
    """(canonical id, number) for a data.gouv.fr constituency feature."""
    code, dept = code_circonscription.strip(), code_departement.strip()
    if not code or not dept:
        return None
    if re.match(r"^97[1-6]", code):
        digits = code[-1:] if len(code) == 4 else code[-2:]
    else:
        digits = code[-2:]
    if not digits.isdigit() or int(digits) < 1:
        return None
    num = int(digits)
    return format_id(dept, num), num
