import asyncio
import aiohttp
from transport_quote.core.config import settings
from transport_quote.core.logger import get_logger
from transport_quote.services.event_bus import Event

logger = get_logger(__name__)

WEBHOOK_TIMEOUT = aiohttp.ClientTimeout(total=10)

# strong references to in-flight webhook tasks until they finish
_pending_tasks = set()


async def forward_event(event: Event) -> None:
    """Push a bus event to the configured notification webhook."""
    webhook_url = settings.NOTIFICATION_WEBHOOK_URL
    if not webhook_url:
        return

    payload = {
        "type": event.type,
        "data": event.data,
        "timestamp": event.timestamp.isoformat(),
    }
    try:
        async with aiohttp.ClientSession(timeout=WEBHOOK_TIMEOUT) as session:
            async with session.post(webhook_url, json=payload) as res:
                text = await res.text()
                logger.info(f"Webhook {event.type}: {res.status} {text}")
    except Exception as e:
        logger.exception(f"Error forwarding {event.type} to webhook: {e}")


def schedule_forward(event: Event) -> None:
    # fire and forget, the submit response does not wait on the webhook
    if not settings.NOTIFICATION_WEBHOOK_URL:
        return
    task = asyncio.create_task(forward_event(event))
    _pending_tasks.add(task)
    task.add_done_callback(_pending_tasks.discard)
    logger.info(f"Started webhook task for {event.type}")
