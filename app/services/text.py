"""Text normalization shared by bill linking and tagging."""

import re
import unicodedata

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def strip_accents(text: str) -> str:
    """NFD-decompose and drop combining marks."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def normalize_text(text: str) -> str:
    """Lowercase, accent-free form used for keyword matching."""
    return strip_accents(text.lower())


def slugify(text: str) -> str:
    """`Proposition de loi relative à l'eau` -> `proposition-de-loi-relative-a-l-eau`."""
    return _NON_ALNUM_RE.sub("-", normalize_text(text)).strip("-")
