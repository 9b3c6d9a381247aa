"""Liveness probe."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/healthz", response_class=PlainTextResponse)
async def healthz():
    return PlainTextResponse("ok", headers={"Cache-Control": "no-store"})
