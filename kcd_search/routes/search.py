"""Disease search endpoint — type-ahead suggestions from the KCD lookup."""

from fastapi import APIRouter, Request, Response

from kcd_search.schemas.search import DiseaseSearchResponse
from kcd_search.services.search import DiseaseSearchService

router = APIRouter()


@router.get("/api/diseases/search", response_model=DiseaseSearchResponse)
async def search_diseases(request: Request, response: Response, q: str | None = None):
    """Rank KCD diseases matching ``q``. Always 200; upstream trouble yields no items."""
    service: DiseaseSearchService = request.app.state.search_service
    response.headers["Cache-Control"] = "no-store"
    return await service.search(q)
