"""
Configuration for pytest tests.
"""

import pytest
from unittest.mock import MagicMock

from ytdigest.core.transcript.base import TranscriptAdapter
from ytdigest.core.video_url import build_video_reference
from ytdigest.models.schemas import TranscriptSource


class FakeAdapter(TranscriptAdapter):
    """Adapter that returns canned text or raises a canned error."""

    def __init__(self, source: TranscriptSource, text: str = "", error: Exception = None):
        self.source = source
        self.text = text
        self.error = error
        self.calls = []

    def _fetch(self, reference):
        self.calls.append(reference)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture(scope="session")
def video_id():
    """Return a test YouTube video ID."""
    return "dQw4w9WgXcQ"


@pytest.fixture(scope="session")
def watch_url(video_id):
    """Return a canonical watch URL."""
    return f"https://www.youtube.com/watch?v={video_id}"


@pytest.fixture(scope="session")
def short_url(video_id):
    """Return a short link for the same video, with a share tracking parameter."""
    return f"https://youtu.be/{video_id}?si=-InVol0JhtWji-6R"


@pytest.fixture
def video_reference(watch_url):
    return build_video_reference(watch_url)


@pytest.fixture
def make_adapter():
    """Factory for fake transcript adapters."""
    def _make(source=TranscriptSource.YOUTUBE_LOADER, text="", error=None):
        return FakeAdapter(source, text=text, error=error)
    return _make


@pytest.fixture
def make_response():
    """Factory for fake requests responses."""
    def _make(json_data=None, status_code=200, text=""):
        response = MagicMock()
        response.status_code = status_code
        response.ok = 200 <= status_code < 300
        response.text = text
        response.json.return_value = json_data if json_data is not None else {}
        return response
    return _make
