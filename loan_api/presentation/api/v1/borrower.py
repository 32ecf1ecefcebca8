"""Borrower API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from loan_api.application.services import BorrowerRegistry, BorrowingCapacityService
from loan_api.core.dependencies import get_borrower_registry, get_borrowing_capacity_service
from loan_api.core.metrics import record_borrower_registration, track_latency
from loan_api.domain.entities import Borrower
from loan_api.presentation.schemas import (
    BorrowerResponseSchema,
    BorrowerSchema,
    CalculationHistoryResponseSchema,
    CalculationSchema,
    ErrorResponseSchema,
)

borrower_router = APIRouter(
    prefix="/borrower",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Bad Request"},
        500: {"model": ErrorResponseSchema, "description": "Internal Server Error"},
    },
)


@borrower_router.post(
    "",
    response_model=BorrowerResponseSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Create a borrower",
    responses={
        200: {"model": BorrowerResponseSchema, "description": "Borrower already exists"},
        201: {"description": "Borrower created"},
    },
)
async def create_borrower(
    request: BorrowerSchema,
    response: Response,
    registry: Annotated[BorrowerRegistry, Depends(get_borrower_registry)],
) -> BorrowerResponseSchema:
    """
    Register a borrower, or return the existing identity for a known email.
    """
    borrower = Borrower(
        name=request.name,
        dob=request.dob,
        email=request.email,
        credit_score=request.credit_score,
    )

    with track_latency("create_borrower"):
        registration = await registry.create_or_get(borrower)

    record_borrower_registration(registration.created)

    if not registration.created:
        response.status_code = status.HTTP_200_OK

    return BorrowerResponseSchema(email=registration.email)


@borrower_router.get(
    "/{email}/borrowingCapacity",
    response_model=CalculationHistoryResponseSchema,
    summary="Get Borrowing Capacity History",
    description="""
    Retrieve the borrowing capacity calculations recorded for a borrower.

    Returns the calculations in the order they were made (oldest first).
    """,
)
async def get_calculation_history(
    email: Annotated[str, Path(description="Email of the borrower")],
    capacity_service: Annotated[
        BorrowingCapacityService,
        Depends(get_borrowing_capacity_service),
    ],
) -> CalculationHistoryResponseSchema:
    history = await capacity_service.get_history(email)

    return CalculationHistoryResponseSchema(
        borrower_email=history.borrower_email,
        calculations=[
            CalculationSchema(
                calculation_id=c.calculation_id,
                estimated_borrowing_capacity=c.estimated_borrowing_capacity,
                gross_annual_income=c.gross_annual_income,
                employment_status=c.employment_status,
                timestamp=c.timestamp,
            )
            for c in history.calculations
        ],
    )
