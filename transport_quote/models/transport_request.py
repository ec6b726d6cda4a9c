from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

QuantityUnit = Literal["liters", "tons", "barrels"]
Urgency = Literal["low", "medium", "high", "urgent"]
RequestStatus = Literal[
    "pending", "approved", "rejected", "assigned", "in_progress", "completed", "cancelled"
]

MATERIAL_TYPES = (
    "Crude Oil",
    "Diesel",
    "Petrol",
    "Kerosene",
    "Lubricants",
    "Chemical Waste",
    "Industrial Oil",
    "Biofuel",
    "Other",
)

VEHICLE_TYPES = (
    "Tanker Truck",
    "Container Truck",
    "Refrigerated Truck",
    "Hazardous Material Truck",
    "Standard Truck",
)


class TransportRequest(BaseModel):
    """
    A transport request as filled in by a company user.

    Defaults describe the blank form, so an instance may be incomplete;
    completeness is checked by ``services.validation.validate``.
    Serialized with camelCase keys to match the request endpoint.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    material_type: str = ""
    quantity: float = Field(0, allow_inf_nan=False)
    quantity_unit: Optional[QuantityUnit] = "liters"
    pickup_location: str = ""
    drop_location: str = ""
    preferred_date: Optional[datetime] = None
    urgency: Urgency = "medium"
    vehicle_type: str = ""
    temperature_control: bool = False
    hazardous_material: bool = False
    insurance_required: bool = False
    contact_person: str = ""
    contact_phone: str = ""
    special_instructions: str = ""
    estimated_budget: float = Field(0, ge=0, allow_inf_nan=False)

    @field_validator("quantity", mode="before")
    @classmethod
    def _blank_quantity(cls, value):
        # number inputs post "" when cleared
        if value is None or value == "":
            return 0
        return value

    @field_validator("quantity_unit", "preferred_date", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if value == "":
            return None
        return value


class SubmittedTransportRequest(TransportRequest):
    """A request stamped for hand-off to the request backend."""

    request_number: str
    estimated_cost: int = 0
    status: RequestStatus = "pending"
    created_at: datetime
