from typing import get_args
from fastapi import APIRouter
from transport_quote.models.response import CatalogOption, CatalogResponse
from transport_quote.models.transport_request import MATERIAL_TYPES, VEHICLE_TYPES, QuantityUnit

catalog_router = APIRouter(prefix="/catalog", tags=["Catalog"])

URGENCY_OPTIONS = [
    CatalogOption(value="low", label="Low", delivery_window="7-10 days"),
    CatalogOption(value="medium", label="Medium", delivery_window="3-5 days"),
    CatalogOption(value="high", label="High", delivery_window="1-2 days"),
    CatalogOption(value="urgent", label="Urgent", delivery_window="Same day"),
]


def _listing(options):
    return CatalogResponse(count=len(options), options=options)


@catalog_router.get("/materials", response_model=CatalogResponse)
async def list_materials():
    return _listing([CatalogOption(value=m, label=m) for m in MATERIAL_TYPES])


@catalog_router.get("/vehicles", response_model=CatalogResponse)
async def list_vehicles():
    return _listing([CatalogOption(value=v, label=v) for v in VEHICLE_TYPES])


@catalog_router.get("/units", response_model=CatalogResponse)
async def list_units():
    return _listing([CatalogOption(value=u, label=u.capitalize()) for u in get_args(QuantityUnit)])


@catalog_router.get("/urgency", response_model=CatalogResponse)
async def list_urgency():
    """
    Urgency levels with the delivery window each one promises.
    """
    return _listing(URGENCY_OPTIONS)
