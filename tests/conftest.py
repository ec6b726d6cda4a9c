from __future__ import annotations

from datetime import datetime

import pytest

from transport_quote.models.transport_request import TransportRequest


def make_request(**overrides) -> TransportRequest:
    data = {
        "material_type": "Diesel",
        "quantity": 5000,
        "quantity_unit": "liters",
        "pickup_location": "Mumbai",
        "drop_location": "Pune",
        "preferred_date": datetime(2026, 11, 2, 9, 0),
        "urgency": "medium",
        "vehicle_type": "Standard Truck",
        "temperature_control": False,
        "hazardous_material": False,
        "insurance_required": False,
        "contact_person": "Asha Patil",
        "contact_phone": "+91 (22) 5555-0101",
    }
    data.update(overrides)
    return TransportRequest(**data)


@pytest.fixture()
def valid_request() -> TransportRequest:
    return make_request()
