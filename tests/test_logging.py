import logging

import httpx

from placefinder.config import Settings, get_settings, log_missing_keys


def test_api_keys_never_reach_the_logs(client, upstream, caplog):
    caplog.set_level(logging.DEBUG)

    def responder(request):
        if request.url.path.endswith("textsearch/json"):
            return httpx.Response(200, json={"status": "OK", "results": []})
        if request.url.path.endswith("details/json"):
            return httpx.Response(200, json={"status": "OK", "result": {"name": "Plaza"}})
        return httpx.Response(200, content=b"img", headers={"content-type": "image/jpeg"})

    upstream.responder = responder

    assert client.get("/api/google-place-api", params={"q": "hotels"}).status_code == 200
    assert client.get("/api/google-place-details", params={"place_id": "abc"}).status_code == 200
    assert client.get("/api/google-place-photo", params={"photo_reference": "ref-1"}).status_code == 200

    assert caplog.records
    for record in caplog.records:
        message = record.getMessage()
        assert "search-key" not in message
        assert "details-key" not in message


def test_request_loggers_are_quieted():
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING


def test_missing_keys_are_reported_on_demand(caplog):
    caplog.set_level(logging.ERROR)

    log_missing_keys(Settings())

    messages = [r.getMessage() for r in caplog.records]
    assert any("GOOGLE_PLACE_KEY" in m for m in messages)
    assert any("GOOGLE_PLACE_DETAILS_KEY" in m for m in messages)


def test_reading_settings_does_not_log(monkeypatch, caplog):
    caplog.set_level(logging.DEBUG)
    for name in ("GOOGLE_PLACE_KEY", "GOOGLE_PLACE_DETAILS_KEY", "GOOGLE_MAPS_API_KEY", "GOOGLE_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()

    try:
        settings = get_settings()
    finally:
        get_settings.cache_clear()

    assert settings.search_api_key is None
    assert not [r for r in caplog.records if r.name == "placefinder.config"]
