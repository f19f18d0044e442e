"""
Common interface for transcript sources.
"""

from abc import ABC, abstractmethod

from youtube_transcript_api import NoTranscriptFound, TranscriptsDisabled

from ytdigest.models.schemas import TranscriptSource, VideoReference
from ytdigest.utils.error_handling import (
    NO_TRANSCRIPT_MESSAGE,
    NoTranscriptAvailableError,
    UpstreamError,
    YTDigestError,
)
from ytdigest.utils.logger import logging


class TranscriptAdapter(ABC):
    """
    One way of retrieving the transcript of a video.

    Subclasses implement ``_fetch``. ``fetch`` guarantees that callers only ever see
    non-empty text, NoTranscriptAvailableError or UpstreamError.
    """

    source: TranscriptSource

    @property
    def name(self) -> str:
        return self.source.value

    def fetch(self, reference: VideoReference) -> str:
        """
        Retrieve the transcript text for a video.

        Args:
            reference: Video to fetch captions for

        Returns:
            Transcript text, segments in chronological order
        """
        logging.info(f"[{self.name}] fetching transcript for {reference.video_id}")
        try:
            text = self._fetch(reference)
        except YTDigestError:
            raise
        except (TranscriptsDisabled, NoTranscriptFound) as e:
            raise NoTranscriptAvailableError(NO_TRANSCRIPT_MESSAGE) from e
        except Exception as e:
            raise UpstreamError(f"{self.name}: {e}") from e

        if not text or not text.strip():
            raise NoTranscriptAvailableError(NO_TRANSCRIPT_MESSAGE)

        logging.info(f"[{self.name}] transcript length={len(text)} for {reference.video_id}")
        return text

    @abstractmethod
    def _fetch(self, reference: VideoReference) -> str:
        """Fetch the raw transcript text from the upstream source."""
