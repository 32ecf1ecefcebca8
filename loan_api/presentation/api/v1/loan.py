"""Loan application API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from loan_api.application.services import LoanApplicationService
from loan_api.core.dependencies import get_loan_application_service
from loan_api.core.metrics import record_assessment, track_latency
from loan_api.domain.entities import LoanApplication
from loan_api.presentation.schemas import (
    ErrorResponseSchema,
    LoanApplicationResponseSchema,
    LoanApplicationSchema,
)

loan_router = APIRouter(
    prefix="/loan",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Bad Request"},
    },
)


@loan_router.post(
    "",
    response_model=LoanApplicationResponseSchema,
    summary="Apply for a loan",
    description="Assesses a borrowers loan application",
)
async def apply_for_loan(
    request: LoanApplicationSchema,
    loan_service: Annotated[LoanApplicationService, Depends(get_loan_application_service)],
) -> LoanApplicationResponseSchema:
    """
    Assess a loan application as APPROVED, REJECTED or REVIEW.
    """
    application = LoanApplication(
        age=request.age,
        gross_income=request.gross_income,
        employment_status=request.employment_status,
        credit_score=request.credit_score,
        monthly_expenses=request.monthly_expenses,
    )

    with track_latency("apply_for_loan"):
        response = loan_service.apply(application)

    record_assessment(response.loan_application_status)

    return LoanApplicationResponseSchema(
        loan_application_status=response.loan_application_status,
    )
