"""KCD disease search FastAPI application with a lifespan-managed upstream client."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kcd_search.clients.kcd_client import KCDClient
from kcd_search.config import settings
from kcd_search.middleware.timing import SearchTimingMiddleware
from kcd_search.routes.health import router as health_router
from kcd_search.routes.search import router as search_router
from kcd_search.services.search import DiseaseSearchService

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the KCD client and search service, close the client on shutdown."""
    kcd = KCDClient(
        base_url=settings.kcd_proxy_url,
        timeout=settings.request_timeout_seconds,
        last_index=settings.upstream_last_index,
    )
    app.state.search_service = DiseaseSearchService(
        kcd,
        max_query_length=settings.max_query_length,
        max_result_count=settings.max_result_count,
    )

    logger.info("KCD search started — upstream %s", settings.kcd_proxy_url)
    yield

    await kcd.close()
    logger.info("KCD search shutdown — client closed")


app = FastAPI(title="KCD Disease Search", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(SearchTimingMiddleware)

app.include_router(health_router)
app.include_router(search_router)
