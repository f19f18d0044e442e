from pydantic import BaseModel
from typing import Optional, List

from ytdigest.models.schemas import Language, TranscriptSource, VideoSearchResult


class TranscriptRequest(BaseModel):
    """Model for requesting a transcript."""
    url: str = ""


class SummarizeRequest(BaseModel):
    """Model for requesting video summarization."""
    url: str = ""
    language: Optional[str] = Language.ENGLISH.value
    model: Optional[str] = None


class AskRequest(BaseModel):
    """Model for questions about a video."""
    url: str = ""
    question: str = ""
    model: Optional[str] = None


class TranscriptResponse(BaseModel):
    """Model for transcript responses."""
    video_id: str
    url: str
    transcript: str
    source: TranscriptSource


class SummaryResponse(BaseModel):
    """Model for summary responses."""
    video_id: str
    url: str
    language: Language
    model: str
    summary: str


class AnswerResponse(BaseModel):
    """Model for answer responses."""
    video_id: str
    url: str
    model: str
    question: str
    answer: str


class SearchResponse(BaseModel):
    """Model for captioned video search responses."""
    query: str
    results: List[VideoSearchResult] = []


class ModelChoice(BaseModel):
    """A selectable completion model."""
    id: str
    name: str
