import random
import string
import time
from datetime import datetime, timezone
from typing import Optional

import httpx

from transport_quote.core.config import settings
from transport_quote.core.logger import get_logger
from transport_quote.models.form_state import FormPhase, RequestFormState
from transport_quote.models.quote import QuoteEstimate, SubmissionResponse
from transport_quote.models.transport_request import SubmittedTransportRequest, TransportRequest
from transport_quote.services import form_state
from transport_quote.services.event_bus import (
    TRANSPORT_REQUEST_SUBMISSION_FAILED,
    TRANSPORT_REQUEST_SUBMITTED,
    EventBus,
    event_bus,
)

logger = get_logger(__name__)

_SUFFIX_ALPHABET = string.digits + string.ascii_uppercase


class SubmissionError(Exception):
    def __init__(self, message: str, status_code: int = 502):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def generate_request_number(now: Optional[datetime] = None) -> str:
    millis = int((now.timestamp() if now else time.time()) * 1000)
    suffix = "".join(random.choices(_SUFFIX_ALPHABET, k=5))
    return f"REQ-{millis}-{suffix}"


def stamp_request(
    request: TransportRequest,
    estimate: Optional[QuoteEstimate],
    now: Optional[datetime] = None,
) -> SubmittedTransportRequest:
    """Freeze a validated request into the record handed to the request backend."""
    created_at = now or datetime.now(timezone.utc)
    return SubmittedTransportRequest(
        **request.model_dump(),
        request_number=generate_request_number(created_at),
        estimated_cost=estimate.estimated_cost if estimate else 0,
        status="pending",
        created_at=created_at,
    )


def _headers() -> dict:
    headers = {"Content-Type": "application/json"}
    if settings.TRANSPORT_REQUEST_API_TOKEN:
        headers["Authorization"] = f"Bearer {settings.TRANSPORT_REQUEST_API_TOKEN}"
    return headers


async def submit_transport_request(
    record: SubmittedTransportRequest,
    client: Optional[httpx.AsyncClient] = None,
) -> SubmissionResponse:
    """
    POST a stamped request to the transport-request endpoint.

    Raises SubmissionError when the endpoint cannot be reached, answers
    with an error status, or replies with ``success: false``.
    """
    url = settings.TRANSPORT_REQUEST_API_URL
    payload = record.model_dump(mode="json", by_alias=True)
    logger.info(f"Submitting transport request {record.request_number} to {url}")

    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(timeout=settings.SUBMISSION_TIMEOUT_SECONDS)
    try:
        resp = await client.post(url, headers=_headers(), json=payload)
    except httpx.TimeoutException:
        logger.error(f"Transport request endpoint timed out for {record.request_number}")
        raise SubmissionError("Transport request service timed out", status_code=504)
    except httpx.RequestError as e:
        logger.error(f"Transport request endpoint unreachable: {e}")
        raise SubmissionError(f"Transport request service unavailable: {e}", status_code=503)
    finally:
        if owns_client:
            await client.aclose()

    if resp.status_code >= 400:
        logger.error(f"Transport request endpoint error {resp.status_code}: {resp.text}")
        raise SubmissionError(f"Transport request service returned {resp.status_code}")

    try:
        body = SubmissionResponse.model_validate(resp.json())
    except ValueError:
        logger.error(f"Unexpected transport request response: {resp.text}")
        raise SubmissionError("Unexpected transport request service response")

    if not body.success:
        raise SubmissionError(body.message or "Transport request was not accepted")

    logger.info(f"Transport request {record.request_number} accepted")
    return body


async def submit_form(
    state: RequestFormState,
    client: Optional[httpx.AsyncClient] = None,
    bus: EventBus = event_bus,
) -> RequestFormState:
    """
    Drive one submit attempt through the form state machine.

    An invalid form comes back still editing with its errors; a
    collaborator failure comes back editing with a retryable ``submit``
    error; success leaves the form submitted.
    """
    state = form_state.begin_submit(state)
    if state.phase != FormPhase.SUBMITTING:
        logger.info(f"Transport request rejected with {len(state.errors)} validation error(s)")
        return state

    record = stamp_request(state.request, state.estimate)
    try:
        response = await submit_transport_request(record, client=client)
    except SubmissionError as e:
        await bus.publish(
            TRANSPORT_REQUEST_SUBMISSION_FAILED,
            {"requestNumber": record.request_number, "message": e.message, "statusCode": e.status_code},
        )
        return form_state.submission_failed(state)

    await bus.publish(
        TRANSPORT_REQUEST_SUBMITTED,
        {"request": record.model_dump(mode="json", by_alias=True), "response": response.data},
    )
    return form_state.submission_succeeded(state, record)
