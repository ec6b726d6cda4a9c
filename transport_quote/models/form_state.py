from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from transport_quote.models.quote import QuoteEstimate
from transport_quote.models.transport_request import SubmittedTransportRequest, TransportRequest


class FormPhase(str, Enum):
    EDITING = "editing"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"


class RequestFormState(BaseModel):
    """
    Snapshot of one transport-request form.

    Instances are never mutated; every transition in
    ``services.form_state`` returns a new snapshot.
    """

    model_config = ConfigDict(frozen=True)

    phase: FormPhase = FormPhase.EDITING
    request: TransportRequest = Field(default_factory=TransportRequest)
    errors: Dict[str, str] = Field(default_factory=dict)
    estimate: Optional[QuoteEstimate] = None
    submitted: Optional[SubmittedTransportRequest] = None
