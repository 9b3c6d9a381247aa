"""Search timing middleware — logs elapsed time for disease search requests."""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

SEARCH_PATH = "/api/diseases/search"


class SearchTimingMiddleware(BaseHTTPMiddleware):
    """Logs one line with status and elapsed seconds per search request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path != SEARCH_PATH:
            response: Response = await call_next(request)
            return response

        start = time.monotonic()
        response = await call_next(request)
        elapsed = time.monotonic() - start

        logger.info(
            "%s %s -> %d in %.3fs",
            request.method,
            SEARCH_PATH,
            response.status_code,
            elapsed,
        )
        return response
