"""Thematic tagger - per-entity tagging and the pure batch matching pass."""

from collections.abc import Iterable

from loguru import logger

from app.models.common import TtlCache
from app.models.tagging import TagDefinition, TagMatch
from app.repositories import BillRepository, ScrutinRepository, TagRepository
from app.services.tagging.matching import entity_text, match_tags
from settings import TAG_CACHE_TTL
from settings.tags import get_tag_keywords

AUTO_SOURCE = "auto"


def assignment_rows(kind: str, entity_id: str, matches: list[TagMatch]) -> list[dict]:
    return [m.to_row(**{f"{kind}_id": entity_id}, source=AUTO_SOURCE) for m in matches]


def match_all(
    entities: Iterable[tuple[str, str, str | None]],
    catalog: list[TagDefinition],
    skip: set[str] | None = None,
) -> dict[str, list[TagMatch]]:
    """Match every (id, text, secondary text) not in `skip`. No I/O."""
    skip = skip or set()
    return {
        entity_id: match_tags(entity_text(primary, secondary), catalog)
        for entity_id, primary, secondary in entities
        if entity_id not in skip
    }


class ThematicTagger:
    """Keyword-based tagging of scrutins and bills against the tag catalog."""

    def __init__(
        self,
        tags: TagRepository,
        scrutins: ScrutinRepository | None = None,
        bills: BillRepository | None = None,
        cache: TtlCache | None = None,
    ):
        self.tags = tags
        self.scrutins = scrutins
        self.bills = bills
        self._cache = cache if cache is not None else TtlCache(ttl_seconds=TAG_CACHE_TTL)

    def catalog(self) -> list[TagDefinition]:
        """Tag catalog with keywords, cached for TAG_CACHE_TTL."""
        cached = self._cache.get("catalog")
        if cached is not None:
            return cached
        catalog = [
            TagDefinition(id=tag_id, slug=slug, keywords=get_tag_keywords(slug))
            for tag_id, slug in self.tags.get_catalog()
        ]
        if not catalog:
            logger.warning("No thematic tags in store; run `sync_data.py seed-tags`")
        self._cache.set("catalog", catalog)
        return catalog

    def _tag_entity(self, kind: str, entity_id: str, primary: str, secondary: str | None) -> int:
        catalog = self.catalog()
        if not catalog:
            return 0
        matches = match_tags(entity_text(primary, secondary), catalog)
        self.tags.delete_assignments(kind, [entity_id])
        written = self.tags.upsert_assignments(kind, assignment_rows(kind, entity_id, matches))
        logger.debug("Tagged {} {} with {} tag(s)", kind, entity_id, written)
        return written

    def tag_scrutin(self, scrutin_id: str, titre: str | None = None, objet: str | None = None) -> int:
        """Replace a scrutin's tags; text is read from the store when not given."""
        if titre is None:
            stored = self.scrutins.get_text(scrutin_id)
            if stored is None:
                logger.warning("Scrutin {} not found", scrutin_id)
                return 0
            titre, objet = stored
        return self._tag_entity("scrutin", scrutin_id, titre, objet)

    def tag_bill(self, bill_id: str, title: str | None = None, secondary: str | None = None) -> int:
        if title is None:
            stored = self.bills.get_text(bill_id)
            if stored is None:
                logger.warning("Bill {} not found", bill_id)
                return 0
            title, secondary = stored
        return self._tag_entity("bill", bill_id, title, secondary)
