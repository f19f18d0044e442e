"""
Data models for the transcript digest application.
"""
import re
from enum import Enum
from typing import Optional
from pydantic import BaseModel, field_validator

from ytdigest.config import config

VIDEO_ID_PATTERN = re.compile(r"^[0-9A-Za-z_-]{11}$")


class Language(str, Enum):
    """Languages a summary can be written in."""
    ENGLISH = "english"
    CHINESE = "chinese"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Language":
        """Map a user supplied value onto a language, defaulting to English."""
        if isinstance(value, cls):
            return value
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.ENGLISH


class TranscriptSource(str, Enum):
    """Upstream mechanisms a transcript can be retrieved from."""
    YOUTUBE_LOADER = "youtube_loader"
    CAPTION_TRACK = "caption_track"
    TRANSCRIPT_API = "transcript_api"


class VideoReference(BaseModel):
    """A YouTube URL together with its canonical form and video ID."""
    url: str
    canonical_url: str
    video_id: str

    @field_validator('video_id')
    def validate_video_id(cls, v):
        if not VIDEO_ID_PATTERN.fullmatch(v):
            raise ValueError('video_id must be an 11 character YouTube identifier')
        return v


class TranscriptSegment(BaseModel):
    """A timestamped span of spoken text."""
    text: str
    start: float = 0.0
    duration: float = 0.0


class Transcript(BaseModel):
    """Flattened transcript text for one video."""
    video_id: str
    url: str
    text: str
    source: TranscriptSource


class PromptRequest(BaseModel):
    """A system/user prompt pair addressed to one model."""
    system_prompt: str
    user_prompt: str
    model: str
    max_tokens: int = config.MAX_OUTPUT_TOKENS


class VideoSearchResult(BaseModel):
    """A search hit that is confirmed to carry captions."""
    id: str
    title: str
    description: str = ""
    thumbnail_url: Optional[str] = None
    channel_title: str = ""
    published_at: Optional[str] = None
    url: str
