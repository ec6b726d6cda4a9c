from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from transport_quote.models.transport_request import QuantityUnit, SubmittedTransportRequest


class QuoteBreakdown(BaseModel):
    base_rate: float = Field(..., description="Price per unit after the volume breakpoint")
    urgency_multiplier: float
    vehicle_multiplier: float
    special_multiplier: float = Field(..., description="Product of the special-handling factors")


class QuoteEstimate(BaseModel):
    estimated_cost: int = Field(..., ge=0)
    quantity: float
    quantity_unit: QuantityUnit
    urgency: str
    vehicle_type: str
    temperature_control: bool
    hazardous_material: bool
    insurance_required: bool
    breakdown: QuoteBreakdown


class EstimateResponse(BaseModel):
    estimated_cost: Optional[int] = None
    breakdown: Optional[QuoteBreakdown] = None
    message: Optional[str] = None


class ValidationResult(BaseModel):
    errors: Dict[str, str] = Field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


class ValidationResponse(BaseModel):
    valid: bool
    errors: Dict[str, str]


class SubmissionResponse(BaseModel):
    success: bool
    data: Optional[dict] = None
    message: Optional[str] = None


class SubmitResponse(BaseModel):
    success: bool
    request: SubmittedTransportRequest


class StatusStat(BaseModel):
    status: str
    count: int
    total_estimated_cost: float


class UrgencyStat(BaseModel):
    urgency: str
    count: int


class RequestSummary(BaseModel):
    total_requests: int
    total_estimated_value: float
    average_quantity: float
    status_stats: List[StatusStat]
    urgency_stats: List[UrgencyStat]
