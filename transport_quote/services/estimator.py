import math
from typing import Optional

from transport_quote.models.quote import QuoteBreakdown, QuoteEstimate
from transport_quote.models.transport_request import TransportRequest

# unit -> (volume breakpoint, rate above breakpoint, rate otherwise)
BASE_RATES = {
    "liters": (10_000, 2.5, 3.0),
    "tons": (20, 150.0, 180.0),
    "barrels": (100, 25.0, 30.0),
}

URGENCY_MULTIPLIERS = {
    "low": 0.8,
    "medium": 1.0,
    "high": 1.3,
    "urgent": 1.8,
}

VEHICLE_MULTIPLIERS = {
    "Hazardous Material Truck": 1.5,
    "Refrigerated Truck": 1.3,
}

TEMPERATURE_CONTROL_MULTIPLIER = 1.2
HAZARDOUS_MATERIAL_MULTIPLIER = 1.4
INSURANCE_MULTIPLIER = 1.1


def base_rate(quantity: float, unit: str) -> float:
    breakpoint, discounted, standard = BASE_RATES[unit]
    return discounted if quantity > breakpoint else standard


def special_multiplier(request: TransportRequest) -> float:
    return (
        (TEMPERATURE_CONTROL_MULTIPLIER if request.temperature_control else 1.0)
        * (HAZARDOUS_MATERIAL_MULTIPLIER if request.hazardous_material else 1.0)
        * (INSURANCE_MULTIPLIER if request.insurance_required else 1.0)
    )


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def estimate_cost(request: TransportRequest) -> Optional[QuoteEstimate]:
    """
    Price a transport request.

    Returns None while the request lacks a positive quantity or a known
    unit, or when the price does not fit a finite float; an incomplete
    form has no estimate rather than an error.
    The vehicle multiplier and the special-handling flags are applied
    independently, so a hazardous-material truck carrying flagged
    hazardous cargo is charged both factors.
    """
    if not request.quantity or request.quantity <= 0:
        return None
    if request.quantity_unit not in BASE_RATES:
        return None

    rate = base_rate(request.quantity, request.quantity_unit)
    urgency = URGENCY_MULTIPLIERS.get(request.urgency, 1.0)
    vehicle = VEHICLE_MULTIPLIERS.get(request.vehicle_type, 1.0)
    special = special_multiplier(request)

    raw = request.quantity * rate * urgency * vehicle * special
    if not math.isfinite(raw):
        return None
    cost = _round_half_up(raw)

    return QuoteEstimate(
        estimated_cost=cost,
        quantity=request.quantity,
        quantity_unit=request.quantity_unit,
        urgency=request.urgency,
        vehicle_type=request.vehicle_type,
        temperature_control=request.temperature_control,
        hazardous_material=request.hazardous_material,
        insurance_required=request.insurance_required,
        breakdown=QuoteBreakdown(
            base_rate=rate,
            urgency_multiplier=urgency,
            vehicle_multiplier=vehicle,
            special_multiplier=special,
        ),
    )
