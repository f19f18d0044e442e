"""
API client for communicating with the transcript digest backend.
"""

import requests
from typing import Dict, List, Any, Optional
from urllib.parse import urljoin
from ytdigest.config import config


class ApiError(Exception):
    """Raised when the API answers with an error; carries the user-facing message."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ApiClient:
    """Client for interacting with the transcript digest API."""

    def __init__(self, base_url: str = config.PUBLIC_URL, session: Optional[requests.Session] = None):
        """
        Initialize the API client.

        Args:
            base_url: Base URL of the API
            session: Optional requests session
        """
        self.base_url = base_url
        self.api_base = urljoin(base_url, "/api/v1/")
        self.session = session or requests.Session()

    def _url(self, endpoint: str) -> str:
        """Get the full URL for an endpoint."""
        return urljoin(self.api_base, endpoint)

    @staticmethod
    def _handle(response: requests.Response) -> Any:
        """Return the JSON body, or raise ApiError with the server's message."""
        if response.ok:
            return response.json()
        try:
            detail = response.json().get("detail")
        except ValueError:
            detail = None
        raise ApiError(detail or f"Request failed with status {response.status_code}", response.status_code)

    def list_models(self) -> List[Dict[str, str]]:
        """Get the selectable completion models."""
        return self._handle(self.session.get(self._url("models")))

    def get_transcript(self, url: str) -> Dict[str, Any]:
        """Fetch the transcript of a video."""
        return self._handle(self.session.post(self._url("transcript"), json={"url": url}))

    def summarize_video(self, url: str, language: str = "english", model: Optional[str] = None) -> Dict[str, Any]:
        """
        Request a video summary.

        Args:
            url: YouTube video URL
            language: Summary language, ``english`` or ``chinese``
            model: Completion model identifier

        Returns:
            Dictionary with video ID, canonical URL and summary
        """
        payload = {"url": url, "language": language}
        if model:
            payload["model"] = model
        return self._handle(self.session.post(self._url("summarize"), json=payload))

    def ask_question(self, url: str, question: str, model: Optional[str] = None) -> Dict[str, Any]:
        """
        Ask a question about a video.

        Args:
            url: YouTube video URL
            question: User question
            model: Completion model identifier

        Returns:
            Dictionary with the answer
        """
        payload = {"url": url, "question": question}
        if model:
            payload["model"] = model
        return self._handle(self.session.post(self._url("ask"), json=payload))

    def search_videos(self, query: str) -> List[Dict[str, Any]]:
        """
        Search for videos that have captions.

        Args:
            query: Search keywords

        Returns:
            List of matching videos
        """
        data = self._handle(self.session.get(self._url("search"), params={"q": query}))
        return data.get("results", [])
