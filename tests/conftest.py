import json
from pathlib import Path

import httpx
import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def get_fixture(filename):
    """Reads and returns the decoded content of a JSON fixture file."""
    with open(FIXTURES_DIR / filename, "r", encoding="utf-8") as f:
        return json.load(f)


def make_item(video_id=None, title=None, description=None, published_at=None):
    """Builds a raw search result, leaving out any field passed as None."""
    item = {"kind": "youtube#searchResult", "id": {"kind": "youtube#video"}, "snippet": {}}
    if video_id is not None:
        item["id"]["videoId"] = video_id
    for key, value in (("title", title), ("description", description), ("publishedAt", published_at)):
        if value is not None:
            item["snippet"][key] = value
    return item


class PagedSearchServer:
    """
    Serves a fixed list of responses in order and records every request.

    Each response is either a JSON-able dict (served with status 200), an
    `httpx.Response`, or an exception instance to raise.
    """

    def __init__(self, responses):
        self.responses = list(responses)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses[len(self.requests) - 1]
        if isinstance(response, Exception):
            raise response
        if isinstance(response, httpx.Response):
            return response
        return httpx.Response(200, json=response)

    @property
    def page_tokens(self):
        return [request.url.params.get("pageToken") for request in self.requests]

    def session(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self))


@pytest.fixture
def search_page_1():
    return get_fixture("search_page_1.json")


@pytest.fixture
def search_page_2():
    return get_fixture("search_page_2.json")


@pytest.fixture
def search_error():
    return get_fixture("search_error.json")


@pytest.fixture
def two_page_responses():
    """The two-page scenario: `abc` then `xyz`, the second page without a token."""
    return [
        {
            "items": [make_item("abc", "T1", "D1", "2020-01-01T00:00:00Z")],
            "nextPageToken": "p2",
        },
        {
            "items": [make_item("xyz", "T2", "D2", "2020-01-02T00:00:00Z")],
        },
    ]


@pytest.fixture
def api_key_env(monkeypatch, tmp_path):
    """Sets a fake API key and runs the test from an empty directory (no .env)."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("YOUTUBE_API_KEY", "test-key")
    return "test-key"
