
import time
from fastapi import Request
from transport_quote.core.logger import get_logger

logger = get_logger("request_logger")

async def log_requests(request: Request, call_next):
    start_time = time.perf_counter()
    client_host = request.client.host if request.client else "unknown"
    logger.info(f"Started request {request.method} {request.url.path} from {client_host}")
    try:
        response = await call_next(request)
    except Exception:
        duration = time.perf_counter() - start_time
        logger.exception(f"Unhandled error on {request.method} {request.url.path} after {duration:.3f}s")
        raise
    duration = time.perf_counter() - start_time
    logger.info(
        f"Completed request {request.method} {request.url.path} "
        f"with status={response.status_code} in {duration:.3f}s"
    )
    return response
