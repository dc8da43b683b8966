"""
Pytest fixtures for now-playing capture tests

No test touches the network: HTTP sessions and lookups are replaced with
mocks.
"""

from unittest.mock import Mock

import pytest
import requests

from nowplaying.assembly import RecordAssembler
from nowplaying.models import CatalogMatch, ResolverResult, StationSnapshot


@pytest.fixture
def station():
    """Station config entry"""
    return {
        "id": "kfm",
        "name": "KFM",
        "url": "https://www.radio-south-africa.co.za/kfm",
        "scraper": "radio_south_africa",
    }


@pytest.fixture
def make_response():
    """Build a fake requests.Response"""

    def _make(text="", json_data=None, status_code=200):
        response = Mock()
        response.status_code = status_code
        response.text = text
        if json_data is None:
            response.json.side_effect = ValueError("No JSON object could be decoded")
        else:
            response.json.return_value = json_data
        if status_code >= 400:
            response.raise_for_status.side_effect = requests.HTTPError(
                f"{status_code} Error"
            )
        return response

    return _make


@pytest.fixture
def queen_match():
    """Catalog match for Bohemian Rhapsody"""
    return CatalogMatch(
        artwork_url="https://is1-ssl.mzstatic.com/image/thumb/Music/600x600bb.jpg",
        source_url="https://music.apple.com/us/album/bohemian-rhapsody/1440650428?i=1440650711",
        matched_artist="Queen",
        matched_track="Bohemian Rhapsody",
    )


@pytest.fixture
def fake_resolver():
    """Resolver stub returning nothing unless configured"""
    resolver = Mock()
    resolver.resolve.return_value = ResolverResult()
    return resolver


@pytest.fixture
def assembler(fake_resolver):
    return RecordAssembler(resolver=fake_resolver)


@pytest.fixture
def make_snapshot():
    """Build a success snapshot for kfm"""

    def _make(artist=None, title=None, raw_now="", captured_at="2026-10-19T08:00:00+00:00"):
        return StationSnapshot(
            station_id="kfm",
            station_name="KFM",
            source_url="https://www.radio-south-africa.co.za/kfm",
            captured_at=captured_at,
            raw_now=raw_now,
            artist=artist,
            title=title,
            links={"youtubeSearch": "https://www.youtube.com/results?search_query=x"},
        )

    return _make
