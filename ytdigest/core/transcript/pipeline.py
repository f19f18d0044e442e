"""
Transcript acquisition with ordered fallback across transcript sources.
"""

from typing import Dict, Iterable, List, Optional, Sequence, Type

from ytdigest.config import config
from ytdigest.core.transcript.base import TranscriptAdapter
from ytdigest.core.transcript.caption_track import CaptionTrackAdapter
from ytdigest.core.transcript.transcript_api import TranscriptApiAdapter
from ytdigest.core.transcript.youtube_loader import YoutubeLoaderAdapter
from ytdigest.core.video_url import build_video_reference, normalize_url
from ytdigest.models.schemas import Transcript
from ytdigest.utils.error_handling import (
    NO_TRANSCRIPT_MESSAGE,
    NoTranscriptAvailableError,
    TranscriptFetchFailedError,
    UpstreamError,
    YTDigestError,
    is_no_transcript_message,
    log_diagnostic_info,
    require_text,
)
from ytdigest.utils.logger import logging

ADAPTERS: Dict[str, Type[TranscriptAdapter]] = {
    YoutubeLoaderAdapter.source.value: YoutubeLoaderAdapter,
    CaptionTrackAdapter.source.value: CaptionTrackAdapter,
    TranscriptApiAdapter.source.value: TranscriptApiAdapter,
}


def build_adapters(names: Optional[Iterable[str]] = None) -> List[TranscriptAdapter]:
    """
    Instantiate transcript adapters in the given order.

    Args:
        names: Adapter names, defaults to the configured TRANSCRIPT_SOURCES

    Returns:
        List of adapters in fallback order
    """
    adapters = []
    for name in names if names is not None else config.TRANSCRIPT_SOURCES:
        try:
            adapters.append(ADAPTERS[name]())
        except KeyError:
            raise ValueError(f"Unknown transcript source: {name!r}. "
                             f"Choose from {', '.join(ADAPTERS)}") from None
    return adapters


class TranscriptPipeline:
    """Fetch a transcript, falling back through the adapters one at a time."""

    def __init__(self, adapters: Optional[Sequence[TranscriptAdapter]] = None):
        self.adapters = list(adapters) if adapters is not None else build_adapters()
        if not self.adapters:
            raise ValueError("At least one transcript adapter is required")

    def fetch(self, url: str) -> Transcript:
        """
        Get the transcript for a YouTube URL.

        Args:
            url: YouTube video URL as entered by the user

        Returns:
            Transcript from the first adapter that produced text

        Raises:
            MissingInputError: The URL is blank
            InvalidURLError: The URL has no recognizable video ID
            NoTranscriptAvailableError: A source reported captions disabled or absent
            TranscriptFetchFailedError: Every source failed for another reason
        """
        url = require_text(url, "Please enter a YouTube URL")
        reference = build_video_reference(normalize_url(url))

        failures: List[YTDigestError] = []
        for adapter in self.adapters:
            try:
                text = adapter.fetch(reference)
            except YTDigestError as e:
                logging.warning(f"[pipeline] {adapter.name} failed for {reference.video_id} "
                                f"({type(e).__name__}): {e}")
                failures.append(e)
                continue
            except Exception as e:
                logging.warning(f"[pipeline] {adapter.name} raised unexpectedly for "
                                f"{reference.video_id}: {e}")
                failures.append(UpstreamError(f"{adapter.name}: {e}"))
                continue

            logging.info(f"[pipeline] transcript for {reference.video_id} from {adapter.name}")
            return Transcript(
                video_id=reference.video_id,
                url=reference.canonical_url,
                text=text,
                source=adapter.source,
            )

        log_diagnostic_info({
            "video_id": reference.video_id,
            "failures": [f"{type(failure).__name__}: {failure}" for failure in failures],
        })
        raise self._classify(failures)

    @staticmethod
    def _classify(failures: List[YTDigestError]) -> YTDigestError:
        """Turn the per-adapter failures into the single error shown to the user."""
        last = failures[-1]
        for failure in failures:
            if isinstance(failure, NoTranscriptAvailableError) or is_no_transcript_message(str(failure)):
                error = NoTranscriptAvailableError(NO_TRANSCRIPT_MESSAGE)
                error.__cause__ = failure
                return error

        error = TranscriptFetchFailedError(f"Could not fetch transcript: {last}")
        error.__cause__ = last
        return error
