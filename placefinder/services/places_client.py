from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence, Tuple

import httpx

PLACES_BASE = "https://maps.googleapis.com/maps/api/place"

DETAILS_FIELDS: Tuple[str, ...] = (
    "name",
    "rating",
    "reviews",
    "photos",
    "formatted_address",
    "user_ratings_total",
)

logger = logging.getLogger(__name__)


class PlacesClient:
    """Thin async wrapper over the Places web service (legacy JSON endpoints)."""

    def __init__(
        self,
        api_key: str,
        timeout: float = 20.0,
        language: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.language = language
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def __aenter__(self) -> "PlacesClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def _get(self, path: str, params: Dict[str, Any], follow_redirects: bool = False) -> httpx.Response:
        url = f"{PLACES_BASE}/{path}"
        logger.debug("GET %s", url)
        resp = await self._client.get(
            url,
            params={**params, "key": self.api_key},
            follow_redirects=follow_redirects,
        )
        # Anything outside 2xx is a transport failure, whatever the body says
        if not resp.is_success:
            raise httpx.HTTPStatusError(
                f"Places API error {resp.status_code}", request=resp.request, response=resp
            )
        return resp

    async def text_search(self, query: str) -> Dict[str, Any]:
        resp = await self._get("textsearch/json", {"query": query})
        return resp.json()

    async def get_place_details(self, place_id: str, fields: Sequence[str] = DETAILS_FIELDS) -> Dict[str, Any]:
        params: Dict[str, Any] = {"place_id": place_id, "fields": ",".join(fields)}
        if self.language:
            params["language"] = self.language
        resp = await self._get("details/json", params)
        return resp.json()

    async def get_photo(self, photo_reference: str, max_width: int) -> Tuple[bytes, str]:
        """
        Fetch photo bytes. The endpoint answers with a redirect to the image host.
        """
        resp = await self._get(
            "photo",
            {"photo_reference": photo_reference, "maxwidth": max_width},
            follow_redirects=True,
        )
        return resp.content, resp.headers.get("content-type", "image/jpeg")

    async def aclose(self) -> None:
        await self._client.aclose()
