import json
from urllib.parse import parse_qs, urlparse

import pytest

from services.spotify_service import SpotifyClient

API = "https://api.spotify.com/v1"


class FakeResponse:
    def __init__(self, payload=None, status_code=200, content=None):
        self.status_code = status_code
        if content is None:
            content = b"" if payload is None else json.dumps(payload).encode()
        self.content = content

    def json(self):
        return json.loads(self.content)


class FakeSpotify:
    """Sesion HTTP en memoria que imita los cuatro endpoints usados."""

    def __init__(self, user_id="u1", playlist_id="p1", uris=(), page_size=50):
        self.user_id = user_id
        self.playlist_id = playlist_id
        self.uris = list(uris)
        self.page_size = page_size
        self.calls = []

    def request(self, method, url, headers=None, data=None, timeout=None):
        body = json.loads(data) if data is not None else None
        self.calls.append({"method": method, "url": url, "headers": headers, "body": body})
        path = urlparse(url).path

        if method == "GET" and path == "/v1/me":
            return FakeResponse({} if self.user_id is None else {"id": self.user_id})
        if method == "POST" and path.endswith("/playlists") and path.startswith("/v1/users/"):
            return FakeResponse({"id": self.playlist_id})
        if method == "GET" and path == "/v1/me/tracks":
            qs = parse_qs(urlparse(url).query)
            offset = int(qs["offset"][0])
            limit = int(qs["limit"][0])
            page = self.uris[offset:offset + limit]
            return FakeResponse({
                "items": [{"added_at": "2020-01-01T00:00:00Z", "track": {"uri": u}} for u in page],
                "next": None,
            })
        if method == "POST" and path.startswith("/v1/playlists/"):
            return FakeResponse({"snapshot_id": "snap"}, status_code=201)
        raise AssertionError(f"unexpected request {method} {url}")

    def calls_to(self, method, path_suffix):
        return [c for c in self.calls
                if c["method"] == method and urlparse(c["url"]).path.endswith(path_suffix)]

    @property
    def track_pages(self):
        return [c for c in self.calls if urlparse(c["url"]).path == "/v1/me/tracks"]

    @property
    def publishes(self):
        return [c for c in self.calls
                if c["method"] == "POST" and urlparse(c["url"]).path.startswith("/v1/playlists/")]


def make_uris(n):
    return [f"spotify:track:{i:05d}" for i in range(n)]


@pytest.fixture
def fake_session():
    return FakeSpotify(uris=make_uris(73))


@pytest.fixture
def client(fake_session):
    return SpotifyClient("tok", session=fake_session)
