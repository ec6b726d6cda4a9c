from fastapi import FastAPI
from transport_quote.routes.quote_router import quote_router
from transport_quote.routes.catalog_router import catalog_router
from contextlib import asynccontextmanager
from transport_quote.core.config import settings
from transport_quote.core.logger import get_logger
from transport_quote.core.middleware import log_requests
from transport_quote.services.event_bus import TRANSPORT_REQUEST_SUBMITTED, event_bus
from transport_quote.services.notification_service import schedule_forward
from fastapi.middleware.cors import CORSMiddleware

logger = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):

    unsubscribe = event_bus.subscribe(TRANSPORT_REQUEST_SUBMITTED, schedule_forward)
    logger.info(" Application startup complete")

    yield

    unsubscribe()
    logger.info(" Application shutdown initiated")

app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log_requests)
app.include_router(quote_router)
app.include_router(catalog_router)
