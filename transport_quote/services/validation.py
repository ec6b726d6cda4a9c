import re

from transport_quote.models.quote import ValidationResult
from transport_quote.models.transport_request import TransportRequest

PHONE_PATTERN = re.compile(r"\+?[0-9\s\-()]+")


def validate(request: TransportRequest) -> ValidationResult:
    """Check every submission rule and collect all failures, keyed by wire field name."""
    errors = {}

    if not request.material_type:
        errors["materialType"] = "Material type is required"
    if not request.quantity or request.quantity <= 0:
        errors["quantity"] = "Quantity must be greater than 0"
    if not request.pickup_location.strip():
        errors["pickupLocation"] = "Pickup location is required"
    if not request.drop_location.strip():
        errors["dropLocation"] = "Drop location is required"
    if request.preferred_date is None:
        errors["preferredDate"] = "Preferred date is required"
    if not request.contact_person.strip():
        errors["contactPerson"] = "Contact person is required"
    if not request.contact_phone.strip():
        errors["contactPhone"] = "Contact phone is required"
    elif not PHONE_PATTERN.fullmatch(request.contact_phone):
        errors["contactPhone"] = "Please enter a valid phone number"
    if not request.vehicle_type:
        errors["vehicleType"] = "Vehicle type is required"

    if request.pickup_location.strip().lower() == request.drop_location.strip().lower():
        errors["dropLocation"] = "Drop location must be different from pickup location"

    return ValidationResult(errors=errors)
