import logging
import os
from datetime import datetime
from typing import Optional

import httpx
from fastapi import Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from placefinder.config import Settings, get_settings, log_missing_keys
from placefinder.models.schemas import (
    DetailsErrorResponse,
    DetailsResponse,
    ErrorResponse,
    SearchErrorResponse,
    SearchResponse,
)
from placefinder.services.proxies import DetailsProxy, PhotoProxy, SearchProxy
from placefinder.utils.errors import ProxyError
from placefinder.utils.sorting import SortOption

settings = get_settings()

logging.basicConfig(
    level=settings.log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
# httpx and httpcore log full request URLs, and the key travels as a query parameter
for _name in ("httpx", "httpcore"):
    logging.getLogger(_name).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

log_missing_keys(settings)

# Initialize FastAPI app
app = FastAPI(title="Place Finder", version="1.0.0")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.exception_handler(ProxyError)
async def proxy_error_handler(request: Request, exc: ProxyError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "; ".join(f"{'.'.join(str(p) for p in e['loc'][1:])}: {e['msg']}" for e in errors)
    return JSONResponse(status_code=400, content={"error": message or "Invalid request"})


# Dependencies

def get_transport() -> Optional[httpx.AsyncBaseTransport]:
    """Outbound transport; None means the real network."""
    return None


def get_search_proxy(
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_transport),
) -> SearchProxy:
    return SearchProxy(settings, transport)


def get_details_proxy(
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_transport),
) -> DetailsProxy:
    return DetailsProxy(settings, transport)


def get_photo_proxy(
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_transport),
) -> PhotoProxy:
    return PhotoProxy(settings, transport)


# Routes

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "timestamp": datetime.now().isoformat()}


@app.get(
    "/api/google-place-api",
    response_model=SearchResponse,
    responses={400: {"model": SearchErrorResponse}, 500: {"model": ErrorResponse}},
)
async def search_places(
    q: Optional[str] = Query(default=None, description="Free-text search, e.g. 'Hotels New York'"),
    sort: Optional[SortOption] = Query(default=None, description="Optional server-side ordering"),
    proxy: SearchProxy = Depends(get_search_proxy),
):
    """Text search proxied to the Places API"""
    # Returned as JSONResponse so the upstream payload bypasses response_model filtering
    return JSONResponse(await proxy.search(q, sort))


@app.get(
    "/api/google-place-details",
    response_model=DetailsResponse,
    responses={400: {"model": DetailsErrorResponse}, 500: {"model": DetailsErrorResponse}},
)
async def place_details(
    place_id: Optional[str] = Query(default=None),
    proxy: DetailsProxy = Depends(get_details_proxy),
):
    """Details and reviews for one place"""
    return JSONResponse(await proxy.details(place_id))


@app.get(
    "/api/google-place-photo",
    response_class=Response,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def place_photo(
    photo_reference: Optional[str] = Query(default=None),
    maxwidth: Optional[int] = Query(default=None, ge=1, le=1600),
    proxy: PhotoProxy = Depends(get_photo_proxy),
):
    """Photo bytes for a photo_reference from a search or details result"""
    content, media_type = await proxy.photo(photo_reference, maxwidth)
    return Response(content=content, media_type=media_type)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))
