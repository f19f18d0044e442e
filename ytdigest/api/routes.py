"""
API routes for the YouTube transcript digest application.
"""

from typing import List

from fastapi import APIRouter, Depends, Query

from ytdigest import main
from ytdigest.api.schemas import (
    AnswerResponse,
    AskRequest,
    ModelChoice,
    SearchResponse,
    SummarizeRequest,
    SummaryResponse,
    TranscriptRequest,
    TranscriptResponse,
)
from ytdigest.config import config
from ytdigest.core.chat.handler import ChatHandler
from ytdigest.core.search import VideoSearchFilter
from ytdigest.core.summarizer import TranscriptSummarizer
from ytdigest.core.transcript import TranscriptPipeline
from ytdigest.models.schemas import Language
from ytdigest.utils.error_handling import require_text
from ytdigest.utils.logger import logging

router = APIRouter(prefix="/api/v1", tags=["youtube"])


# Dependency providers, overridden in tests
def get_pipeline() -> TranscriptPipeline:
    return TranscriptPipeline()


def get_summarizer() -> TranscriptSummarizer:
    return TranscriptSummarizer()


def get_chat_handler() -> ChatHandler:
    return ChatHandler()


def get_search_filter() -> VideoSearchFilter:
    return VideoSearchFilter()


@router.get("/models", response_model=List[ModelChoice])
async def list_models():
    """List the completion models the user can pick from."""
    return config.model_choices()


@router.post("/transcript", response_model=TranscriptResponse)
async def get_transcript(
    request: TranscriptRequest,
    pipeline: TranscriptPipeline = Depends(get_pipeline),
):
    """Fetch the plain-text transcript of a video."""
    transcript = await main.get_transcript(request.url, pipeline)
    return TranscriptResponse(
        video_id=transcript.video_id,
        url=transcript.url,
        transcript=transcript.text,
        source=transcript.source,
    )


@router.post("/summarize", response_model=SummaryResponse)
async def summarize_video(
    request: SummarizeRequest,
    pipeline: TranscriptPipeline = Depends(get_pipeline),
    summarizer: TranscriptSummarizer = Depends(get_summarizer),
):
    """Summarize a YouTube video by URL."""
    require_text(request.url, "Please enter a YouTube URL")
    language = Language.parse(request.language)
    model = request.model or config.DEFAULT_SUMMARY_MODEL

    transcript = await main.get_transcript(request.url, pipeline)
    summary = await main.summarize(transcript.text, language.value, model, summarizer)
    logging.info(f"Summarized video {transcript.video_id} with {model} ({language.value})")

    return SummaryResponse(
        video_id=transcript.video_id,
        url=transcript.url,
        language=language,
        model=model,
        summary=summary,
    )


@router.post("/ask", response_model=AnswerResponse)
async def ask_video(
    request: AskRequest,
    pipeline: TranscriptPipeline = Depends(get_pipeline),
    chat_handler: ChatHandler = Depends(get_chat_handler),
):
    """Answer a question about a video using its transcript as context."""
    # Both inputs are checked before any network call
    require_text(request.url, "Please enter a YouTube URL and question")
    question = require_text(request.question, "Please enter a YouTube URL and question")
    model = request.model or config.DEFAULT_QA_MODEL

    transcript = await main.get_transcript(request.url, pipeline)
    answer = await main.answer(transcript.text, question, model, chat_handler)

    return AnswerResponse(
        video_id=transcript.video_id,
        url=transcript.url,
        model=model,
        question=question,
        answer=answer,
    )


@router.get("/search", response_model=SearchResponse)
async def search_videos(
    q: str = Query("", description="Search keywords"),
    search_filter: VideoSearchFilter = Depends(get_search_filter),
):
    """Search YouTube for videos that have captions."""
    results = await main.search_captioned_videos(q, search_filter)
    return SearchResponse(query=q.strip(), results=results)
