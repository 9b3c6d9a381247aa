"""Disease search pipeline: normalize the query, look it up, rank the rows."""

import logging
from typing import Any, Protocol

from kcd_search.schemas.search import DiseaseSearchResponse
from kcd_search.services.normalizer import MAX_QUERY_LENGTH, prepare_query
from kcd_search.services.ranker import MAX_RESULT_COUNT, rank_rows

logger = logging.getLogger(__name__)


class RowSource(Protocol):
    async def fetch_rows(self, query: str) -> list[Any]: ...


class DiseaseSearchService:
    """Runs one independent lookup per call; holds no per-request state."""

    def __init__(
        self,
        client: RowSource,
        max_query_length: int = MAX_QUERY_LENGTH,
        max_result_count: int = MAX_RESULT_COUNT,
    ) -> None:
        self.client = client
        self.max_query_length = max_query_length
        self.max_result_count = max_result_count

    async def search(self, query: str | None) -> DiseaseSearchResponse:
        """Return ranked items for ``query``; blank queries never reach upstream."""
        prepared = prepare_query(query, self.max_query_length)
        if prepared is None:
            return DiseaseSearchResponse(items=[])

        rows = await self.client.fetch_rows(prepared)
        items = rank_rows(prepared, rows, limit=self.max_result_count)
        logger.debug(
            "KCD search %r: %d upstream rows, %d items", prepared, len(rows), len(items)
        )
        return DiseaseSearchResponse(items=items)
