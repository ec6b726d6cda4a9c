from __future__ import annotations

from typing import Any

from pydantic.alias_generators import to_camel

from transport_quote.models.form_state import FormPhase, RequestFormState
from transport_quote.models.transport_request import SubmittedTransportRequest, TransportRequest
from transport_quote.services.estimator import estimate_cost
from transport_quote.services.validation import validate

SUBMIT_ERROR_KEY = "submit"
SUBMIT_ERROR_MESSAGE = "Failed to submit request. Please try again."


class FormStateError(ValueError):
    pass


def _require(state: RequestFormState, phase: FormPhase, action: str) -> None:
    if state.phase != phase:
        raise FormStateError(f"Cannot {action} while form is {state.phase.value}")


def _field_key(field: str) -> str:
    if field not in TransportRequest.model_fields:
        raise FormStateError(f"Unknown transport request field: {field}")
    return to_camel(field)


def new_form() -> RequestFormState:
    return RequestFormState()


def from_request(request: TransportRequest) -> RequestFormState:
    return RequestFormState(request=request, estimate=estimate_cost(request))


def update_field(state: RequestFormState, field: str, value: Any) -> RequestFormState:
    """Set one request field, re-price from scratch and drop that field's error."""
    _require(state, FormPhase.EDITING, "edit fields")
    key = _field_key(field)

    data = state.request.model_dump()
    data[field] = value
    request = TransportRequest.model_validate(data)

    errors = {k: v for k, v in state.errors.items() if k != key}
    return state.model_copy(
        update={"request": request, "errors": errors, "estimate": estimate_cost(request)}
    )


def begin_submit(state: RequestFormState) -> RequestFormState:
    _require(state, FormPhase.EDITING, "submit")
    result = validate(state.request)
    if not result.is_valid:
        return state.model_copy(update={"errors": result.errors})
    return state.model_copy(
        update={
            "phase": FormPhase.SUBMITTING,
            "errors": {},
            "estimate": estimate_cost(state.request),
        }
    )


def submission_failed(state: RequestFormState, message: str = SUBMIT_ERROR_MESSAGE) -> RequestFormState:
    _require(state, FormPhase.SUBMITTING, "fail a submission")
    return state.model_copy(
        update={"phase": FormPhase.EDITING, "errors": {SUBMIT_ERROR_KEY: message}}
    )


def submission_succeeded(state: RequestFormState, record: SubmittedTransportRequest) -> RequestFormState:
    _require(state, FormPhase.SUBMITTING, "complete a submission")
    return state.model_copy(update={"phase": FormPhase.SUBMITTED, "submitted": record})


def reset(state: RequestFormState) -> RequestFormState:
    # the caller owns the reset delay (settings.FORM_RESET_DELAY_SECONDS)
    _require(state, FormPhase.SUBMITTED, "reset")
    return new_form()
