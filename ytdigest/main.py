"""
Entry points used by the presentation layer.

Each entry point is a coroutine that runs the blocking core in a worker thread
and either returns a value or raises a classified YTDigestError.
"""

import asyncio
from typing import List, Optional

from ytdigest.core.chat.handler import ChatHandler
from ytdigest.core.search import VideoSearchFilter
from ytdigest.core.summarizer import TranscriptSummarizer
from ytdigest.core.transcript import TranscriptPipeline
from ytdigest.models.schemas import Language, Transcript, VideoSearchResult
from ytdigest.utils.logger import logging


async def get_transcript(url: str, pipeline: Optional[TranscriptPipeline] = None) -> Transcript:
    """Fetch the transcript for a URL, keeping the video ID and source."""
    pipeline = pipeline or TranscriptPipeline()
    logging.info(f"Fetching transcript for: {url}")
    return await asyncio.to_thread(pipeline.fetch, url)


async def fetch_transcript(url: str, pipeline: Optional[TranscriptPipeline] = None) -> str:
    """Fetch the transcript text for a YouTube URL."""
    transcript = await get_transcript(url, pipeline)
    return transcript.text


async def summarize(
    text: str,
    language: str = Language.ENGLISH.value,
    model: Optional[str] = None,
    summarizer: Optional[TranscriptSummarizer] = None,
) -> str:
    """Summarize a transcript in English or Chinese."""
    summarizer = summarizer or TranscriptSummarizer()
    return await asyncio.to_thread(summarizer.summarize, text, language, model)


async def answer(
    text: str,
    question: str,
    model: Optional[str] = None,
    chat_handler: Optional[ChatHandler] = None,
) -> str:
    """Answer a question using the transcript as context."""
    chat_handler = chat_handler or ChatHandler()
    return await asyncio.to_thread(chat_handler.answer, text, question, model)


async def search_captioned_videos(
    query: str,
    search_filter: Optional[VideoSearchFilter] = None,
) -> List[VideoSearchResult]:
    """Search YouTube for up to five videos that carry captions."""
    search_filter = search_filter or VideoSearchFilter()
    return await asyncio.to_thread(search_filter.search, query)
