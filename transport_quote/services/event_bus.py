from __future__ import annotations

import inspect
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Dict, List, Union

from transport_quote.core.logger import get_logger

logger = get_logger(__name__)

TRANSPORT_REQUEST_SUBMITTED = "transport_request.submitted"
TRANSPORT_REQUEST_SUBMISSION_FAILED = "transport_request.submission_failed"


@dataclass(frozen=True)
class Event:
    type: str
    data: Dict[str, Any]
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


Handler = Callable[[Event], Union[None, Awaitable[None]]]


class EventBus:
    """
    In-process publish/subscribe channel for request notifications.

    Handlers may be plain functions or coroutines. A failing handler is
    logged and does not stop delivery to the remaining subscribers.
    """

    def __init__(self) -> None:
        self._subscribers: Dict[str, List[Handler]] = defaultdict(list)

    def subscribe(self, event_type: str, handler: Handler) -> Callable[[], None]:
        self._subscribers[event_type].append(handler)

        def unsubscribe() -> None:
            handlers = self._subscribers.get(event_type, [])
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def subscriber_count(self, event_type: str) -> int:
        return len(self._subscribers.get(event_type, []))

    async def publish(self, event_type: str, data: Dict[str, Any]) -> Event:
        event = Event(type=event_type, data=data)
        handlers = list(self._subscribers.get(event_type, []))
        logger.info(f"Publishing {event_type} to {len(handlers)} subscriber(s)")
        for handler in handlers:
            try:
                result = handler(event)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.exception(f"Subscriber {getattr(handler, '__name__', handler)} failed on {event_type}: {e}")
        return event


event_bus = EventBus()
