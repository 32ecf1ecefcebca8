"""Liveness endpoint."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from loan_api.core.config import settings

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str = Field(..., examples=["loan-api"])
    version: str


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Reports that the process is up. Does not touch the financial data store.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(service=settings.app_name, version=settings.app_version)
