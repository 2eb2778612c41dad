"""Pydantic response schemas for the FastAPI endpoints."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AnalysisResponse(BaseModel):
    """Response schema for a successful document analysis.

    Serialized with camelCase keys: ``text``, ``summary``, ``keyTerms``,
    ``riskAssessment``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    text: str
    summary: str
    key_terms: str
    risk_assessment: str


class ErrorResponse(BaseModel):
    """Body returned with every 4xx/5xx response."""

    error: str


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    ocr_configured: bool
    generation_model: str
