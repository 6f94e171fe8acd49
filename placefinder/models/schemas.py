from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Upstream(BaseModel):
    # Upstream payloads are passed through; unknown fields must survive
    model_config = ConfigDict(extra="allow")


class LatLng(_Upstream):
    lat: float
    lng: float


class Geometry(_Upstream):
    location: Optional[LatLng] = None


class PlacePhoto(_Upstream):
    photo_reference: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


class Review(_Upstream):
    author_name: Optional[str] = None
    rating: Optional[float] = None
    text: Optional[str] = None
    time: Optional[int] = None
    relative_time_description: Optional[str] = None
    profile_photo_url: Optional[str] = None


class PlaceSummary(_Upstream):
    place_id: Optional[str] = None
    name: Optional[str] = None
    formatted_address: Optional[str] = None
    rating: Optional[float] = None  # 0 to 5
    photos: List[PlacePhoto] = Field(default_factory=list)
    user_ratings_total: Optional[int] = None
    geometry: Optional[Geometry] = None
    business_status: Optional[str] = None


class PlaceDetail(PlaceSummary):
    reviews: List[Review] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str


class SearchResponse(BaseModel):
    results: List[PlaceSummary]


class SearchErrorResponse(ErrorResponse):
    data: Dict[str, Any]


class DetailsResponse(BaseModel):
    status: str = "OK"
    result: PlaceDetail


class DetailsErrorResponse(ErrorResponse):
    status: str
