from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import httpx

from placefinder.config import Settings
from placefinder.services.places_client import DETAILS_FIELDS, PlacesClient
from placefinder.utils.errors import (
    MissingParameter,
    ProxyError,
    ServerMisconfiguration,
    TransportError,
    UnexpectedError,
    UpstreamError,
)
from placefinder.utils.sorting import SortOption, sort_places

logger = logging.getLogger(__name__)


class _BaseProxy:
    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self.settings = settings
        self.transport = transport

    def _client(self, api_key: str, language: Optional[str] = None) -> PlacesClient:
        return PlacesClient(
            api_key,
            timeout=self.settings.timeout_seconds,
            language=language,
            transport=self.transport,
        )


class SearchProxy(_BaseProxy):
    """Text search: forwards ``q`` and returns upstream results untouched."""

    async def search(self, query: Optional[str], sort: Optional[SortOption] = None) -> Dict[str, Any]:
        try:
            if not query or not query.strip():
                logger.error('Query parameter "q" is missing')
                raise MissingParameter('Query parameter "q" is missing')

            api_key = self.settings.search_api_key
            if not api_key:
                logger.error("GOOGLE_PLACE_KEY is not configured")
                raise ServerMisconfiguration("Server configuration error")

            async with self._client(api_key) as client:
                try:
                    data = await client.text_search(query)
                except httpx.HTTPError as e:
                    logger.error("Places text search transport failure: %s", e)
                    raise TransportError("Server error")

            if data.get("status") != "OK":
                message = data.get("error_message") or "Places API error"
                logger.warning("Places API error for %r: %s (%s)", query, data.get("status"), message)
                raise UpstreamError(message, data=data)

            results = data.get("results", [])
            if sort is not None:
                results = sort_places(results, sort)
            logger.info('%d results found for "%s"', len(results), query)
            return {"results": results}
        except ProxyError:
            raise
        except Exception as e:
            logger.exception("Unexpected error during search: %s", e)
            raise UnexpectedError("Server error")


class DetailsProxy(_BaseProxy):
    """Details lookup by ``place_id`` with a fixed field selection."""

    async def details(self, place_id: Optional[str]) -> Dict[str, Any]:
        try:
            if not place_id or not place_id.strip():
                raise MissingParameter("place_id parameter is required")

            api_key = self.settings.details_api_key
            if not api_key:
                logger.error("GOOGLE_PLACE_DETAILS_KEY is not configured")
                raise ServerMisconfiguration("API key not found")

            logger.info("Fetching place details: %s", place_id)
            async with self._client(api_key, language=self.settings.language) as client:
                try:
                    data = await client.get_place_details(place_id, DETAILS_FIELDS)
                except httpx.HTTPStatusError as e:
                    logger.error("Place details transport failure: %s", e)
                    raise TransportError(f"Google API error: {e.response.status_code}", status="ERROR")

            upstream_status = data.get("status")
            if upstream_status != "OK":
                logger.warning("Place details upstream status: %s", upstream_status)
                raise UpstreamError(f"Google API error: {upstream_status}", status=upstream_status)

            logger.info("Place details fetched: %s", place_id)
            return {"status": "OK", "result": data.get("result")}
        except ProxyError:
            raise
        except Exception as e:
            logger.exception("Place details error: %s", e)
            raise UnexpectedError(str(e) or "Unknown error", status="ERROR")


class PhotoProxy(_BaseProxy):
    """Serves place photos without handing the key to the browser."""

    async def photo(self, photo_reference: Optional[str], max_width: Optional[int] = None) -> Tuple[bytes, str]:
        try:
            if not photo_reference or not photo_reference.strip():
                raise MissingParameter("photo_reference parameter is required")

            api_key = self.settings.details_api_key
            if not api_key:
                logger.error("GOOGLE_PLACE_DETAILS_KEY is not configured")
                raise ServerMisconfiguration("API key not found")

            width = max_width or self.settings.photo_max_width
            async with self._client(api_key) as client:
                try:
                    return await client.get_photo(photo_reference, width)
                except httpx.HTTPError as e:
                    logger.error("Place photo transport failure: %s", e)
                    raise TransportError("Photo could not be fetched")
        except ProxyError:
            raise
        except Exception as e:
            logger.exception("Place photo error: %s", e)
            raise UnexpectedError("Server error")
