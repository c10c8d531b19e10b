"""POST /v1/loan/decision - loan decision endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from decision_gateway.api.v1.schemas import LoanDecisionRequest, LoanDecisionResponse
from decision_gateway.api.dependencies import get_decision_engine, get_request_id
from decision_gateway.domain.decision_engine import DecisionEngine, get_segment, get_segment_name
from decision_gateway.domain.exceptions import (
    DomainException,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidPersonalCodeError,
    NoValidLoanError,
)
from decision_gateway.domain.models import Decision, LoanRequest
from decision_gateway.infrastructure.observability.metrics import record_decision
from decision_gateway.infrastructure.observability.logging import log_decision

router = APIRouter()

# Rejection outcome label and HTTP status per domain error
ERROR_RESPONSES = {
    InvalidPersonalCodeError: ("invalid_personal_code", 400),
    InvalidLoanAmountError: ("invalid_loan_amount", 400),
    InvalidLoanPeriodError: ("invalid_loan_period", 400),
    NoValidLoanError: ("no_valid_loan", 404),
}


def to_response(decision: Decision) -> LoanDecisionResponse:
    return LoanDecisionResponse(
        loan_amount=decision.loan_amount,
        loan_period=decision.loan_period,
        error_message=decision.error_message,
    )


def rejection(status_code: int, error_message: str) -> JSONResponse:
    response = to_response(Decision.rejected(error_message))
    return JSONResponse(status_code=status_code, content=response.model_dump())


@router.post("/loan/decision", response_model=LoanDecisionResponse)
def create_decision(
    request_body: LoanDecisionRequest,
    request: Request,
    engine: DecisionEngine = Depends(get_decision_engine),
):
    """
    Make a loan decision for the applicant.

    Flow:
    1. Validate personal code, age, amount and period
    2. Resolve credit modifier from the personal code segment
    3. Find the highest amount at the shortest acceptable period
    4. Return the approved offer, or the rejection reason
    """
    start_time = time.time()
    request_id = get_request_id(request)
    loan_request = LoanRequest(
        personal_code=request_body.personal_code,
        loan_amount=request_body.loan_amount,
        loan_period=request_body.loan_period,
    )

    try:
        decision = engine.evaluate(loan_request)

    except DomainException as e:
        outcome, status_code = ERROR_RESPONSES[type(e)]
        record_decision(outcome)
        logging.warning(f"Loan rejected: {e.message}", extra={"request_id": request_id, "outcome": outcome})
        return rejection(status_code, e.message)

    except Exception as e:
        record_decision("error")
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        return rejection(500, "An unexpected error occurred")

    duration_ms = (time.time() - start_time) * 1000
    segment = get_segment_name(get_segment(engine.validator.compact(loan_request.personal_code)))
    record_decision("approved", decision.loan_amount)
    log_decision(request_id, "approved", segment, decision.loan_amount, decision.loan_period, duration_ms)

    return to_response(decision)
