"""Models package - DDL and entities for all domains."""

from app.models.agenda import AGENDA_ITEM_DDL, SITTING_ATTENDANCE_DDL, SITTING_DDL, SOURCE_METADATA_DDL
from app.models.common import INGESTION_LOG_DDL, INGESTION_LOG_SEQ_DDL, BaseEntity, TtlCache
from app.models.core import (
    CIRCONSCRIPTION_DDL,
    DEPUTY_DDL,
    DEPUTY_ORGANE_DDL,
    ORGANE_DDL,
    Constituency,
    ResolvedMandate,
)
from app.models.legislation import BILL_DDL, BILL_SCRUTIN_DDL, BillReference
from app.models.tagging import (
    BILL_THEMATIC_TAG_DDL,
    SCRUTIN_THEMATIC_TAG_DDL,
    THEMATIC_TAG_DDL,
    TagDefinition,
    TagMatch,
)
from app.models.voting import SCRUTIN_DDL, SCRUTIN_VOTE_DDL, ExtractedVote, VotePosition

ALL_DDL = [
    # Core
    DEPUTY_DDL,
    ORGANE_DDL,
    DEPUTY_ORGANE_DDL,
    CIRCONSCRIPTION_DDL,
    # Agenda
    SITTING_DDL,
    AGENDA_ITEM_DDL,
    SOURCE_METADATA_DDL,
    SITTING_ATTENDANCE_DDL,
    # Voting
    SCRUTIN_DDL,
    SCRUTIN_VOTE_DDL,
    # Legislation
    BILL_DDL,
    BILL_SCRUTIN_DDL,
    # Tagging
    THEMATIC_TAG_DDL,
    SCRUTIN_THEMATIC_TAG_DDL,
    BILL_THEMATIC_TAG_DDL,
    # Common
    INGESTION_LOG_SEQ_DDL,
    INGESTION_LOG_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "TtlCache",
    "INGESTION_LOG_DDL",
    "INGESTION_LOG_SEQ_DDL",
    # Core
    "DEPUTY_DDL",
    "ORGANE_DDL",
    "DEPUTY_ORGANE_DDL",
    "CIRCONSCRIPTION_DDL",
    "Constituency",
    "ResolvedMandate",
    # Agenda
    "SITTING_DDL",
    "AGENDA_ITEM_DDL",
    "SOURCE_METADATA_DDL",
    "SITTING_ATTENDANCE_DDL",
    # Voting
    "SCRUTIN_DDL",
    "SCRUTIN_VOTE_DDL",
    "ExtractedVote",
    "VotePosition",
    # Legislation
    "BILL_DDL",
    "BILL_SCRUTIN_DDL",
    "BillReference",
    # Tagging
    "THEMATIC_TAG_DDL",
    "SCRUTIN_THEMATIC_TAG_DDL",
    "BILL_THEMATIC_TAG_DDL",
    "TagDefinition",
    "TagMatch",
    # All DDL
    "ALL_DDL",
]
