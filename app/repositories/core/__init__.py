"""Core repositories - deputies, organes, constituencies."""

from app.repositories.core.circonscriptions import CirconscriptionRepository
from app.repositories.core.deputies import DeputyRepository
from app.repositories.core.organes import OrganeRepository

__all__ = ["DeputyRepository", "OrganeRepository", "CirconscriptionRepository"]
