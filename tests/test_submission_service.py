from __future__ import annotations

import asyncio
import json
import re
from datetime import datetime, timezone

import httpx
import pytest

from transport_quote.models.form_state import FormPhase
from transport_quote.services import form_state
from transport_quote.services.estimator import estimate_cost
from transport_quote.services.event_bus import (
    TRANSPORT_REQUEST_SUBMISSION_FAILED,
    TRANSPORT_REQUEST_SUBMITTED,
    EventBus,
)
from transport_quote.services.submission_service import (
    SubmissionError,
    generate_request_number,
    stamp_request,
    submit_form,
    submit_transport_request,
)

from tests.conftest import make_request

NOW = datetime(2026, 10, 19, 8, 30, tzinfo=timezone.utc)


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def _record():
    request = make_request(hazardous_material=True, vehicle_type="Hazardous Material Truck")
    return stamp_request(request, estimate_cost(request), now=NOW)


def test_request_number_format():
    number = generate_request_number(NOW)
    assert re.fullmatch(rf"REQ-{int(NOW.timestamp() * 1000)}-[0-9A-Z]{{5}}", number)


def test_stamp_sets_pending_status_cost_and_timestamp():
    record = _record()
    assert record.status == "pending"
    assert record.estimated_cost == 31500
    assert record.created_at == NOW
    assert record.material_type == "Diesel"


def test_stamp_without_estimate_uses_zero():
    assert stamp_request(make_request(), None, now=NOW).estimated_cost == 0


def test_submit_posts_camel_case_payload():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = json.loads(request.content)
        return httpx.Response(201, json={"success": True, "data": {"id": 7}, "message": "created"})

    async def run():
        async with _client(handler) as client:
            return await submit_transport_request(_record(), client=client)

    response = asyncio.run(run())
    assert response.success is True
    assert response.data == {"id": 7}

    body = seen["body"]
    assert body["estimatedCost"] == 31500
    assert body["status"] == "pending"
    assert body["createdAt"].startswith("2026-10-19T08:30:00")
    assert body["quantityUnit"] == "liters"
    assert body["hazardousMaterial"] is True
    assert body["requestNumber"].startswith("REQ-")


def test_submit_raises_on_error_status():
    async def run():
        async with _client(lambda r: httpx.Response(500, text="boom")) as client:
            await submit_transport_request(_record(), client=client)

    with pytest.raises(SubmissionError) as exc:
        asyncio.run(run())
    assert exc.value.status_code == 502


def test_submit_raises_when_backend_declines():
    async def run():
        async with _client(lambda r: httpx.Response(200, json={"success": False, "message": "No quota"})) as client:
            await submit_transport_request(_record(), client=client)

    with pytest.raises(SubmissionError, match="No quota"):
        asyncio.run(run())


def test_submit_raises_when_backend_unreachable():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async def run():
        async with _client(handler) as client:
            await submit_transport_request(_record(), client=client)

    with pytest.raises(SubmissionError) as exc:
        asyncio.run(run())
    assert exc.value.status_code == 503


def test_submit_form_success_publishes_event():
    bus = EventBus()
    events = []
    bus.subscribe(TRANSPORT_REQUEST_SUBMITTED, events.append)

    async def run():
        async with _client(lambda r: httpx.Response(201, json={"success": True})) as client:
            return await submit_form(form_state.from_request(make_request()), client=client, bus=bus)

    state = asyncio.run(run())
    assert state.phase == FormPhase.SUBMITTED
    assert state.submitted.estimated_cost == 15000
    assert len(events) == 1
    assert events[0].data["request"]["requestNumber"] == state.submitted.request_number


def test_submit_form_failure_returns_to_editing():
    bus = EventBus()
    failures = []
    bus.subscribe(TRANSPORT_REQUEST_SUBMISSION_FAILED, failures.append)

    async def run():
        async with _client(lambda r: httpx.Response(503)) as client:
            return await submit_form(form_state.from_request(make_request()), client=client, bus=bus)

    state = asyncio.run(run())
    assert state.phase == FormPhase.EDITING
    assert "submit" in state.errors
    assert failures[0].data["statusCode"] == 502


def test_submit_form_invalid_never_calls_backend():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(201, json={"success": True})

    async def run():
        async with _client(handler) as client:
            return await submit_form(form_state.new_form(), client=client, bus=EventBus())

    state = asyncio.run(run())
    assert state.phase == FormPhase.EDITING
    assert calls == []
    assert "materialType" in state.errors
