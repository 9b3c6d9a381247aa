"""KCD disease lookup using the KSSC classification mobile proxy."""

import asyncio
import logging
from typing import Any

import httpx

from kcd_search.clients.base import upstream_fallback

logger = logging.getLogger(__name__)

KCD_PROXY_URL = "https://kssc.mods.go.kr:8443/ksscNew_web/mobileProxy.do"

# Call type, classification category and degree for a KCD disease-name search.
KCD_LOOKUP_FIELDS = {
    "CALL_ID": "9",
    "CATEGORY_NAME_CODE": "004",
    "CATEGORY_DEGREE": "09",
    "SEARCH_COND": "KCD",
    "SEARCH_COND2": "0",
}

FORM_HEADERS = {
    "Content-Type": "application/x-www-form-urlencoded; charset=UTF-8",
    "Cache-Control": "no-store",
}


class KCDClient:
    """Searches KCD disease codes via the KSSC mobile proxy (no auth required).

    Every failure mode (network error, deadline expiry, non-2xx status,
    non-JSON or non-array body) comes back as an empty row list.
    """

    def __init__(
        self,
        base_url: str = KCD_PROXY_URL,
        timeout: float = 8.0,
        last_index: int = 150,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.last_index = last_index
        self.http = httpx.AsyncClient(timeout=timeout)

    def build_form(self, query: str) -> dict[str, str]:
        """Form body for one lookup: fixed protocol fields plus the search key."""
        return {
            **KCD_LOOKUP_FIELDS,
            "SEARCH_KEY": query,
            "firstIndex": "1",
            "lastIndex": str(self.last_index),
        }

    @upstream_fallback
    async def fetch_rows(
        self, query: str, timeout: float | None = None
    ) -> list[Any]:
        """POST a single lookup and return the raw row array.

        ``timeout`` overrides the client's default deadline (seconds). The
        deadline covers sending the request and reading the whole body; when
        it expires the in-flight request is cancelled.
        """
        deadline = self.timeout if timeout is None else timeout
        async with asyncio.timeout(deadline):
            resp = await self.http.post(
                self.base_url, data=self.build_form(query), headers=FORM_HEADERS
            )

        if not resp.is_success:
            logger.warning("KCD proxy returned HTTP %d", resp.status_code)
            return []

        try:
            payload = resp.json()
        except ValueError:
            logger.warning("KCD proxy returned a body that is not JSON")
            return []

        if not isinstance(payload, list):
            logger.warning(
                "KCD proxy returned %s instead of a row array", type(payload).__name__
            )
            return []

        return payload

    async def close(self) -> None:
        await self.http.aclose()
