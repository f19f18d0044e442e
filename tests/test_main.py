"""
Tests for the async entry points.
"""

import asyncio
import pytest
from unittest.mock import MagicMock

from ytdigest import main
from ytdigest.core.transcript import TranscriptPipeline
from ytdigest.models.schemas import TranscriptSource
from ytdigest.utils.error_handling import InvalidURLError, MissingQueryError


def test_fetch_transcript_returns_text(make_adapter, short_url):
    pipeline = TranscriptPipeline([make_adapter(text="spoken words")])

    assert asyncio.run(main.fetch_transcript(short_url, pipeline)) == "spoken words"


def test_get_transcript_keeps_source(make_adapter, watch_url, video_id):
    pipeline = TranscriptPipeline([make_adapter(TranscriptSource.CAPTION_TRACK, text="spoken words")])

    transcript = asyncio.run(main.get_transcript(watch_url, pipeline))

    assert transcript.video_id == video_id
    assert transcript.source == TranscriptSource.CAPTION_TRACK


def test_fetch_transcript_raises_classified_error(make_adapter):
    pipeline = TranscriptPipeline([make_adapter(text="unused")])

    with pytest.raises(InvalidURLError):
        asyncio.run(main.fetch_transcript("https://example.com/video", pipeline))


def test_summarize_passes_language_and_model():
    summarizer = MagicMock()
    summarizer.summarize.return_value = "summary"

    result = asyncio.run(main.summarize("text", "chinese", "vendor/model:free", summarizer))

    assert result == "summary"
    summarizer.summarize.assert_called_once_with("text", "chinese", "vendor/model:free")


def test_answer_delegates_to_chat_handler():
    chat_handler = MagicMock()
    chat_handler.answer.return_value = "answer"

    assert asyncio.run(main.answer("text", "question?", chat_handler=chat_handler)) == "answer"
    chat_handler.answer.assert_called_once_with("text", "question?", None)


def test_search_propagates_missing_query():
    search_filter = MagicMock()
    search_filter.search.side_effect = MissingQueryError("Search query is required")

    with pytest.raises(MissingQueryError):
        asyncio.run(main.search_captioned_videos("", search_filter))
