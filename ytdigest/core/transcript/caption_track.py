"""
Transcript source that reads the caption track XML straight from YouTube.

The caption markup is handled with regular expressions in ``extract_caption_text``;
swap that function for a real parser without touching the adapter.
"""

import re
import json
from typing import Any, Dict, List, Optional

import requests

from ytdigest.config import config
from ytdigest.core.transcript.base import TranscriptAdapter
from ytdigest.models.schemas import TranscriptSegment, TranscriptSource, VideoReference
from ytdigest.utils.error_handling import NO_TRANSCRIPT_MESSAGE, NoTranscriptAvailableError

REQUEST_HEADERS = {
    "User-Agent": "Mozilla/5.0",
    "Accept-Language": "en-US,en;q=0.9",
}

_CAPTION_TRACKS_MARKER = '"captionTracks":'
_TEXT_PATTERN = re.compile(r"<text\b([^>]*)>(.*?)</text>", re.DOTALL)
_START_PATTERN = re.compile(r'start="([\d.]+)"')
_DUR_PATTERN = re.compile(r'dur="([\d.]+)"')
_ENTITY_PATTERN = re.compile(r"&(amp|lt|gt|quot|#39|nbsp);")
_ENTITIES = {
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "quot": '"',
    "#39": "'",
    "nbsp": " ",
}


def decode_entities(text: str) -> str:
    """Decode the HTML entities used in caption markup, in a single pass."""
    return _ENTITY_PATTERN.sub(lambda match: _ENTITIES[match.group(1)], text)


def extract_caption_tracks(html: str) -> List[Dict[str, Any]]:
    """Pull the caption track list out of a watch page."""
    index = html.find(_CAPTION_TRACKS_MARKER)
    if index == -1:
        return []
    start = index + len(_CAPTION_TRACKS_MARKER)
    tracks, _ = json.JSONDecoder().raw_decode(html[start:])
    return tracks if isinstance(tracks, list) else []


def extract_caption_text(xml: str) -> List[TranscriptSegment]:
    """Extract timed text segments from caption XML, in document order."""
    segments = []
    for attributes, body in _TEXT_PATTERN.findall(xml):
        text = decode_entities(body).replace("\n", " ").strip()
        if not text:
            continue
        start = _START_PATTERN.search(attributes)
        duration = _DUR_PATTERN.search(attributes)
        segments.append(TranscriptSegment(
            text=text,
            start=float(start.group(1)) if start else 0.0,
            duration=float(duration.group(1)) if duration else 0.0,
        ))
    return segments


class CaptionTrackAdapter(TranscriptAdapter):
    """Download the first caption track listed on the watch page."""

    source = TranscriptSource.CAPTION_TRACK

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else config.HTTP_TIMEOUT

    def _get(self, url: str) -> str:
        response = self.session.get(url, headers=REQUEST_HEADERS, timeout=self.timeout)
        response.raise_for_status()
        return response.text

    def _fetch(self, reference: VideoReference) -> str:
        html = self._get(reference.canonical_url)
        tracks = extract_caption_tracks(html)
        if not tracks or not tracks[0].get("baseUrl"):
            raise NoTranscriptAvailableError(NO_TRANSCRIPT_MESSAGE)

        xml = self._get(tracks[0]["baseUrl"])
        segments = extract_caption_text(xml)
        return " ".join(segment.text for segment in segments)
