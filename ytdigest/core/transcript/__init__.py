"""
Transcript sources and the fallback pipeline that drives them.
"""

from ytdigest.core.transcript.base import TranscriptAdapter
from ytdigest.core.transcript.caption_track import CaptionTrackAdapter
from ytdigest.core.transcript.pipeline import ADAPTERS, TranscriptPipeline, build_adapters
from ytdigest.core.transcript.transcript_api import TranscriptApiAdapter
from ytdigest.core.transcript.youtube_loader import YoutubeLoaderAdapter

__all__ = [
    "ADAPTERS",
    "CaptionTrackAdapter",
    "TranscriptAdapter",
    "TranscriptApiAdapter",
    "TranscriptPipeline",
    "YoutubeLoaderAdapter",
    "build_adapters",
]
