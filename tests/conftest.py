from typing import Callable, List

import httpx
import pytest
from fastapi.testclient import TestClient

from placefinder.config import Settings, get_settings
from placefinder.main import app, get_transport


class FakeUpstream:
    """Records outbound requests and answers them with a configurable responder."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={"status": "OK", "results": []}
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    def respond_json(self, payload, status_code: int = 200) -> None:
        self.responder = lambda request: httpx.Response(status_code, json=payload)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def call_count(self) -> int:
        return len(self.requests)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def settings() -> Settings:
    return Settings(search_api_key="search-key", details_api_key="details-key")


@pytest.fixture
def client(settings, upstream):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_transport] = lambda: upstream.transport
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def place_factory():
    def make(place_id: str, name: str, rating=None, user_ratings_total=None, **extra):
        place = {
            "place_id": place_id,
            "name": name,
            "formatted_address": f"{name} Street, New York, NY",
            "business_status": "OPERATIONAL",
        }
        if rating is not None:
            place["rating"] = rating
        if user_ratings_total is not None:
            place["user_ratings_total"] = user_ratings_total
        place.update(extra)
        return place

    return make
