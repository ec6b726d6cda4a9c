from datetime import datetime, timezone

from transport_quote.services.estimator import estimate_cost
from transport_quote.services.stats_service import summarize_requests
from transport_quote.services.submission_service import stamp_request

from tests.conftest import make_request

NOW = datetime(2026, 10, 19, tzinfo=timezone.utc)


def _stamped(status="pending", **overrides):
    request = make_request(**overrides)
    record = stamp_request(request, estimate_cost(request), now=NOW)
    return record.model_copy(update={"status": status})


def test_summary_of_no_requests():
    s = summarize_requests([])
    assert s.total_requests == 0
    assert s.total_estimated_value == 0.0
    assert s.average_quantity == 0.0
    assert s.status_stats == []
    assert s.urgency_stats == []


def test_summary_groups_by_status_and_urgency():
    records = [
        _stamped(quantity=5000),
        _stamped(quantity=3000, urgency="urgent"),
        _stamped(status="approved", quantity=1000, urgency="low"),
    ]
    s = summarize_requests(records)

    assert s.total_requests == 3
    assert s.total_estimated_value == 15000 + 16200 + 2400
    assert s.average_quantity == 3000

    by_status = {st.status: st for st in s.status_stats}
    assert by_status["pending"].count == 2
    assert by_status["pending"].total_estimated_cost == 31200
    assert by_status["approved"].count == 1

    assert [(u.urgency, u.count) for u in s.urgency_stats] == [("low", 1), ("medium", 1), ("urgent", 1)]
