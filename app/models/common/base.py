"""Base class for domain entities that end up as store rows."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


@dataclass
class BaseEntity:
    """Base class for all entities."""

    def to_row(self, **columns: Any) -> dict[str, Any]:
        """Fields as a row dict (enums as their values), plus extra `columns`."""
        row = {k: v.value if isinstance(v, Enum) else v for k, v in asdict(self).items()}
        row.update(columns)
        return row
