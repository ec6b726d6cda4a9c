from typing import List
from fastapi import APIRouter, HTTPException, status
from transport_quote.core.logger import get_logger
from transport_quote.models.form_state import FormPhase
from transport_quote.models.quote import (
    EstimateResponse,
    RequestSummary,
    SubmitResponse,
    ValidationResponse,
)
from transport_quote.models.transport_request import SubmittedTransportRequest, TransportRequest
from transport_quote.services import form_state
from transport_quote.services.estimator import estimate_cost
from transport_quote.services.stats_service import summarize_requests
from transport_quote.services.submission_service import submit_form
from transport_quote.services.validation import validate

quote_router = APIRouter(prefix="/quote", tags=["Quote"])

logger = get_logger(__name__)


@quote_router.post("/estimate", response_model=EstimateResponse)
async def estimate(payload: TransportRequest):
    quote = estimate_cost(payload)
    if quote is None:
        return EstimateResponse(message="Fill in quantity and unit to see an estimate")
    return EstimateResponse(estimated_cost=quote.estimated_cost, breakdown=quote.breakdown)


@quote_router.post("/validate", response_model=ValidationResponse)
async def validate_request(payload: TransportRequest):
    result = validate(payload)
    return ValidationResponse(valid=result.is_valid, errors=result.errors)


@quote_router.post("/submit", response_model=SubmitResponse, status_code=status.HTTP_201_CREATED)
async def submit(payload: TransportRequest):
    """
    Validate, price and forward a transport request to the request backend.
    """
    state = await submit_form(form_state.from_request(payload))

    if state.phase == FormPhase.SUBMITTED:
        logger.info(f"Transport request {state.submitted.request_number} submitted")
        return SubmitResponse(success=True, request=state.submitted)

    if form_state.SUBMIT_ERROR_KEY in state.errors:
        raise HTTPException(status_code=502, detail=state.errors[form_state.SUBMIT_ERROR_KEY])

    raise HTTPException(
        status_code=422,
        detail={"message": "Transport request is incomplete", "errors": state.errors},
    )


@quote_router.post("/summary", response_model=RequestSummary)
async def summary(payload: List[SubmittedTransportRequest]):
    return summarize_requests(payload)
