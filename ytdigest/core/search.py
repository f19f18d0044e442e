"""
Keyword search over YouTube that only keeps videos with captions.
"""

from typing import Any, Dict, List, Optional

import requests

from ytdigest.config import config
from ytdigest.core.video_url import WATCH_URL_TEMPLATE
from ytdigest.models.schemas import VideoSearchResult
from ytdigest.utils.error_handling import (
    ConfigurationError,
    MissingQueryError,
    UpstreamError,
    require_text,
)
from ytdigest.utils.logger import logging


def _has_captions(item: Dict[str, Any]) -> bool:
    # The details endpoint reports the flag as the string "true" / "false"
    caption = (item.get("contentDetails") or {}).get("caption")
    return caption is True or caption == "true"


def _thumbnail_url(snippet: Dict[str, Any]) -> Optional[str]:
    thumbnails = snippet.get("thumbnails") or {}
    for size in ("medium", "high", "default"):
        url = (thumbnails.get(size) or {}).get("url")
        if url:
            return url
    return None


class VideoSearchFilter:
    """Search YouTube by keyword and keep the results that carry captions."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        candidate_limit: Optional[int] = None,
        result_limit: Optional[int] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.api_key = api_key if api_key is not None else config.YOUTUBE_API_KEY
        self.api_url = (api_url or config.YOUTUBE_API_URL).rstrip("/")
        self.candidate_limit = candidate_limit or config.SEARCH_CANDIDATE_LIMIT
        self.result_limit = result_limit or config.SEARCH_RESULT_LIMIT
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else config.HTTP_TIMEOUT

    def _get(self, endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = self.session.get(
                f"{self.api_url}/{endpoint}",
                params={**params, "key": self.api_key},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise UpstreamError(f"Failed to search videos: {e}") from e

        if not response.ok:
            raise UpstreamError(f"Failed to search videos: YouTube API error: {response.status_code}")
        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(f"Failed to search videos: {e}") from e

    def search(self, query: str) -> List[VideoSearchResult]:
        """
        Search for videos with captions.

        Args:
            query: Search keywords

        Returns:
            Up to ``result_limit`` captioned videos in search ranking order
        """
        query = require_text(query, "Search query is required", MissingQueryError)
        if not self.api_key:
            raise ConfigurationError("Missing YOUTUBE_API_KEY environment variable")

        search_data = self._get("search", {
            "part": "snippet",
            "type": "video",
            "q": query,
            "maxResults": self.candidate_limit,
        })
        candidate_ids = []
        for item in search_data.get("items", []):
            video_id = (item.get("id") or {}).get("videoId")
            if video_id and video_id not in candidate_ids:
                candidate_ids.append(video_id)

        if not candidate_ids:
            logging.info(f"[search] no candidates for query={query!r}")
            return []

        details_data = self._get("videos", {
            "part": "contentDetails,snippet",
            "id": ",".join(candidate_ids),
        })
        details = {item.get("id"): item for item in details_data.get("items", [])}

        results = []
        for video_id in candidate_ids:
            item = details.get(video_id)
            if item is None or not _has_captions(item):
                continue
            snippet = item.get("snippet") or {}
            results.append(VideoSearchResult(
                id=video_id,
                title=snippet.get("title", ""),
                description=snippet.get("description", ""),
                thumbnail_url=_thumbnail_url(snippet),
                channel_title=snippet.get("channelTitle", ""),
                published_at=snippet.get("publishedAt"),
                url=WATCH_URL_TEMPLATE.format(video_id=video_id),
            ))
            if len(results) >= self.result_limit:
                break

        logging.info(f"[search] query={query!r} candidates={len(candidate_ids)} kept={len(results)}")
        return results
