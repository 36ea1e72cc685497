"""
Shared pytest fixtures.
Provides a fake song.link session and sample payloads so tests never reach the network.
"""
from typing import Any, Dict, List

import pytest
from yarl import URL

from songlink.managers import cache
from web.app import create_app


class FakeSession:
    """Stands in for the aiohttp session, answering every request with `payload`"""

    def __init__(self, payload: Any = None):
        self.payload = payload
        self.requests: List[URL] = []

    async def request(self, method: str, url: Any, **kwargs) -> Any:
        self.requests.append(URL(url))
        if isinstance(self.payload, Exception):
            raise self.payload

        return self.payload


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def spotify_payload() -> Dict:
    """Primary entity from iTunes, plus a Spotify match"""
    return {
        "entityUniqueId": "X",
        "pageUrl": "https://song.link/abc",
        "entitiesByUniqueId": {
            "X": {"title": "Foo", "artistName": "Bar", "apiProvider": "itunes"},
            "Y": {"title": "Foo", "artistName": "Bar", "apiProvider": "spotify"},
        },
    }


@pytest.fixture
def primary_payload() -> Dict:
    """No Spotify match, primary entity present"""
    return {
        "entityUniqueId": "ITUNES_SONG::1",
        "pageUrl": "https://song.link/i/1",
        "userCountry": "US",
        "entitiesByUniqueId": {
            "DEEZER_SONG::2": {
                "title": "Other Title",
                "artistName": "Other Artist",
                "apiProvider": "deezer",
            },
            "ITUNES_SONG::1": {
                "title": "Primary Title",
                "artistName": "Primary Artist",
                "apiProvider": "itunes",
                "thumbnailUrl": "https://example.com/cover.jpg",
            },
        },
        "linksByPlatform": {},
    }


@pytest.fixture
def orphan_payload() -> Dict:
    """Neither a Spotify match nor the primary entity"""
    return {
        "entityUniqueId": "Z",
        "pageUrl": "https://song.link/z",
        "entitiesByUniqueId": {
            "X": {"title": "Foo", "artistName": "Bar", "apiProvider": "itunes"},
        },
    }


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
async def clear_cache():
    await cache.clear()
    yield
    await cache.clear()


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def app(session: FakeSession):
    app = create_app()
    app.session = session
    return app


@pytest.fixture
def client(app):
    return app.test_client()
