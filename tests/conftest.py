import json
import random

import httpx
import pytest
from fastapi.testclient import TestClient

from image_api.core.settings import Settings
from image_api.main import create_app
from image_api.search.google_cse import GoogleImageSearch
from image_api.search.vocabulary import QueryPicker

SECRET = "s3cret"


class FakeGoogle:
    """MockTransport handler that records every outbound request."""

    def __init__(self, status_code=200, payload=None, body=None, exc=None):
        self.status_code = status_code
        self.payload = payload if payload is not None else {"items": []}
        self.body = body
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.body is not None:
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, content=json.dumps(self.payload).encode())


def cse_item(display_link="www.cosmos.so", link="https://cdn.cosmos.so/a.jpg",
             title="A picture", thumb="https://encrypted-tbn0.gstatic.com/t.jpg"):
    return {
        "title": title,
        "link": link,
        "displayLink": display_link,
        "image": {"contextLink": "https://www.cosmos.so/e/1", "thumbnailLink": thumb},
    }


@pytest.fixture
def cfg():
    return Settings(
        _env_file=None,
        api_key=SECRET,
        google_api_key="g-key",
        google_search_engine_id="cx-id",
        allowed_sources=["cosmos.so"],
    )


@pytest.fixture
def fake_google():
    return FakeGoogle(payload={"items": [cse_item()]})


@pytest.fixture
def make_client(cfg):
    def _make(fake, settings=None):
        settings = settings or cfg
        search = GoogleImageSearch(
            allowed_sources=settings.resolved_allow_list(),
            client=httpx.Client(transport=httpx.MockTransport(fake)),
            endpoint=settings.google_endpoint,
        )
        app = create_app(settings=settings, picker=QueryPicker(rng=random.Random(7)), search_client=search)
        return TestClient(app)
    return _make


@pytest.fixture
def client(make_client, fake_google):
    return make_client(fake_google)


@pytest.fixture
def auth():
    return {"Authorization": f"Bearer {SECRET}"}
