"""Core domain models - deputies, organes, constituencies."""

from app.models.core.circonscription import CIRCONSCRIPTION_DDL
from app.models.core.deputy import DEPUTY_DDL
from app.models.core.entities import Constituency, ResolvedMandate
from app.models.core.organe import DEPUTY_ORGANE_DDL, ORGANE_DDL

__all__ = [
    "DEPUTY_DDL",
    "ORGANE_DDL",
    "DEPUTY_ORGANE_DDL",
    "CIRCONSCRIPTION_DDL",
    "Constituency",
    "ResolvedMandate",
]
