from collections import Counter, defaultdict
from typing import Sequence

from transport_quote.models.quote import RequestSummary, StatusStat, UrgencyStat
from transport_quote.models.transport_request import SubmittedTransportRequest


def summarize_requests(records: Sequence[SubmittedTransportRequest]) -> RequestSummary:
    """Totals plus per-status and per-urgency breakdowns, sorted by key."""
    status_counts = Counter(r.status for r in records)
    status_costs = defaultdict(float)
    for r in records:
        status_costs[r.status] += r.estimated_cost
    urgency_counts = Counter(r.urgency for r in records)

    total = len(records)
    return RequestSummary(
        total_requests=total,
        total_estimated_value=float(sum(r.estimated_cost for r in records)),
        average_quantity=(sum(r.quantity for r in records) / total) if total else 0.0,
        status_stats=[
            StatusStat(status=s, count=status_counts[s], total_estimated_cost=status_costs[s])
            for s in sorted(status_counts)
        ],
        urgency_stats=[
            UrgencyStat(urgency=u, count=urgency_counts[u]) for u in sorted(urgency_counts)
        ],
    )
