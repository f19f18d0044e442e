"""
Transcript source backed by youtube-transcript-api.
"""

from typing import List, Optional

from youtube_transcript_api import NoTranscriptFound, YouTubeTranscriptApi

from ytdigest.config import config
from ytdigest.core.transcript.base import TranscriptAdapter
from ytdigest.models.schemas import TranscriptSegment, TranscriptSource, VideoReference
from ytdigest.utils.logger import logging


class TranscriptApiAdapter(TranscriptAdapter):
    """Fetch transcript segments by video ID and join them with spaces."""

    source = TranscriptSource.TRANSCRIPT_API

    def __init__(self, languages: Optional[List[str]] = None, api: Optional[YouTubeTranscriptApi] = None):
        self.languages = languages or list(config.TRANSCRIPT_LANGUAGES)
        self._api = api or YouTubeTranscriptApi()

    def _fetch(self, reference: VideoReference) -> str:
        transcripts = self._api.list(reference.video_id)
        try:
            transcript = transcripts.find_transcript(self.languages)
        except NoTranscriptFound:
            # Fall back to whatever track the video has, e.g. a non-English one
            transcript = next(iter(transcripts), None)
            if transcript is None:
                raise
            logging.info(f"[{self.name}] no preferred language for {reference.video_id}, "
                         f"using {transcript.language_code}")

        segments = [
            TranscriptSegment(
                text=raw.get("text", ""),
                start=float(raw.get("start", 0.0)),
                duration=float(raw.get("duration", 0.0)),
            )
            for raw in transcript.fetch().to_raw_data()
        ]
        return " ".join(segment.text.strip() for segment in segments if segment.text.strip())
