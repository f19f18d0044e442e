"""
Tests for the captioned video search.
"""

import pytest
from unittest.mock import MagicMock

import requests

from ytdigest.core.search import VideoSearchFilter
from ytdigest.utils.error_handling import ConfigurationError, MissingQueryError, UpstreamError


def _search_item(video_id):
    return {"id": {"kind": "youtube#video", "videoId": video_id}}


def _details_item(video_id, caption):
    return {
        "id": video_id,
        "contentDetails": {"caption": caption},
        "snippet": {
            "title": f"Video {video_id}",
            "description": "A description",
            "channelTitle": "Channel",
            "publishedAt": "2024-01-01T00:00:00Z",
            "thumbnails": {
                "default": {"url": f"https://i.ytimg.com/vi/{video_id}/default.jpg"},
                "medium": {"url": f"https://i.ytimg.com/vi/{video_id}/mqdefault.jpg"},
            },
        },
    }


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def search_filter(session):
    return VideoSearchFilter(api_key="yt-key", api_url="https://yt.example/v3/", session=session, timeout=5)


def test_blank_query_is_rejected(search_filter, session):
    with pytest.raises(MissingQueryError) as excinfo:
        search_filter.search("   ")

    assert excinfo.value.message == "Search query is required"
    session.get.assert_not_called()


def test_missing_api_key(session):
    with pytest.raises(ConfigurationError):
        VideoSearchFilter(api_key="", session=session).search("python")

    session.get.assert_not_called()


def test_keeps_captioned_videos_in_search_order(search_filter, session, make_response):
    ids = [f"video{n:06d}" for n in range(10)]
    captioned = {ids[n] for n in (9, 1, 2, 4, 5, 7, 8)}
    session.get.side_effect = [
        make_response({"items": [_search_item(video_id) for video_id in ids]}),
        # Details come back in a different order than the search ranking
        make_response({"items": [
            _details_item(video_id, "true" if video_id in captioned else "false")
            for video_id in reversed(ids)
        ]}),
    ]

    results = search_filter.search("  python tutorial ")

    assert [result.id for result in results] == [ids[1], ids[2], ids[4], ids[5], ids[7]]
    first = results[0]
    assert first.url == f"https://www.youtube.com/watch?v={ids[1]}"
    assert first.thumbnail_url.endswith("mqdefault.jpg")
    assert first.title == f"Video {ids[1]}"
    assert first.channel_title == "Channel"


def test_search_request_parameters(search_filter, session, make_response):
    session.get.side_effect = [
        make_response({"items": [_search_item("abcdefghijk"), _search_item("abcdefghijk")]}),
        make_response({"items": [_details_item("abcdefghijk", True)]}),
    ]

    results = search_filter.search("cats")

    assert len(results) == 1
    search_call, details_call = session.get.call_args_list
    assert search_call[0][0] == "https://yt.example/v3/search"
    assert search_call[1]["params"] == {
        "part": "snippet", "type": "video", "q": "cats", "maxResults": 10, "key": "yt-key",
    }
    assert details_call[0][0] == "https://yt.example/v3/videos"
    assert details_call[1]["params"]["id"] == "abcdefghijk"
    assert details_call[1]["params"]["part"] == "contentDetails,snippet"


def test_no_candidates_skips_details_request(search_filter, session, make_response):
    session.get.return_value = make_response({"items": []})

    assert search_filter.search("nothing matches") == []
    assert session.get.call_count == 1


def test_no_captioned_videos(search_filter, session, make_response):
    session.get.side_effect = [
        make_response({"items": [_search_item("abcdefghijk")]}),
        make_response({"items": [_details_item("abcdefghijk", "false")]}),
    ]

    assert search_filter.search("cats") == []


def test_http_error_status(search_filter, session, make_response):
    session.get.return_value = make_response(status_code=403)

    with pytest.raises(UpstreamError) as excinfo:
        search_filter.search("cats")

    assert excinfo.value.message == "Failed to search videos: YouTube API error: 403"


def test_network_failure(search_filter, session):
    session.get.side_effect = requests.ConnectionError("unreachable")

    with pytest.raises(UpstreamError) as excinfo:
        search_filter.search("cats")

    assert "unreachable" in excinfo.value.message
