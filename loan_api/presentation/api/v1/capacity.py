"""Borrowing capacity API endpoints."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from loan_api.application.dto import BorrowingCapacityRequest
from loan_api.application.services import BorrowingCapacityService
from loan_api.core.dependencies import get_borrowing_capacity_service
from loan_api.core.metrics import record_capacity_estimate, track_latency
from loan_api.presentation.schemas import BorrowingCapacityResponseSchema, ErrorResponseSchema

capacity_router = APIRouter(
    prefix="/borrowingCapacity",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Bad Request"},
        500: {"model": ErrorResponseSchema, "description": "Internal Server Error"},
    },
)


@capacity_router.get(
    "",
    response_model=BorrowingCapacityResponseSchema,
    summary="Get an estimate of your borrowing power",
    description="Calculates borrowing capacity based on input",
)
async def get_borrowing_capacity(
    age: Annotated[int, Query(description="Age of the borrower")],
    gross_income: Annotated[
        int,
        Query(alias="grossIncome", description="Gross annual income of the borrower"),
    ],
    employment_status: Annotated[
        str,
        Query(
            alias="employmentStatus",
            description="Current employment status of the borrower",
        ),
    ],
    capacity_service: Annotated[
        BorrowingCapacityService,
        Depends(get_borrowing_capacity_service),
    ],
    borrower_email: Annotated[
        Optional[str],
        Query(
            alias="borrowerEmail",
            description="Record the calculation in this borrower's history",
        ),
    ] = None,
) -> BorrowingCapacityResponseSchema:
    dto = BorrowingCapacityRequest(
        age=age,
        gross_income=gross_income,
        employment_status=employment_status,
        borrower_email=borrower_email,
    )

    with track_latency("estimate_borrowing_capacity"):
        response = await capacity_service.estimate(dto)

    record_capacity_estimate(
        employment_status=employment_status,
        estimated_capacity=response.estimated_borrowing_capacity,
        recorded=borrower_email is not None,
    )

    return BorrowingCapacityResponseSchema(
        estimated_borrowing_capacity=response.estimated_borrowing_capacity,
    )
