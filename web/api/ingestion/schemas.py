"""Ingestion API response schemas."""

from pydantic import BaseModel


class IngestResponse(BaseModel):
    """Agenda and dossiers run."""

    success: bool = True
    totalSittings: int = 0
    totalItems: int = 0
    totalDossiers: int = 0


class IngestScrutinsResponse(BaseModel):
    scrutins: int = 0
    scrutinVotes: int = 0


class IngestDeputiesResponse(BaseModel):
    deputies: int = 0
