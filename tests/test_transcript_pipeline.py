"""
Tests for the transcript fallback pipeline.
"""

import pytest

from ytdigest.core.transcript import (
    ADAPTERS,
    CaptionTrackAdapter,
    TranscriptApiAdapter,
    TranscriptPipeline,
    YoutubeLoaderAdapter,
    build_adapters,
)
from ytdigest.models.schemas import TranscriptSource
from ytdigest.utils.error_handling import (
    NO_TRANSCRIPT_MESSAGE,
    InvalidURLError,
    MissingInputError,
    NoTranscriptAvailableError,
    TranscriptFetchFailedError,
    UpstreamError,
)


@pytest.mark.parametrize("url", ["", "   ", None])
def test_blank_url_is_rejected_before_any_adapter(url, make_adapter):
    adapter = make_adapter(text="unused")
    pipeline = TranscriptPipeline([adapter])

    with pytest.raises(MissingInputError) as excinfo:
        pipeline.fetch(url)

    assert excinfo.value.message == "Please enter a YouTube URL"
    assert adapter.calls == []


def test_invalid_url_is_rejected_before_any_adapter(make_adapter):
    adapter = make_adapter(text="unused")

    with pytest.raises(InvalidURLError):
        TranscriptPipeline([adapter]).fetch("https://vimeo.com/123456")

    assert adapter.calls == []


def test_first_success_stops_the_chain(make_adapter, short_url, watch_url, video_id):
    first = make_adapter(TranscriptSource.YOUTUBE_LOADER, text="from the loader")
    second = make_adapter(TranscriptSource.TRANSCRIPT_API, text="from the api")

    transcript = TranscriptPipeline([first, second]).fetch(short_url)

    assert transcript.text == "from the loader"
    assert transcript.source == TranscriptSource.YOUTUBE_LOADER
    assert transcript.video_id == video_id
    assert transcript.url == watch_url
    assert second.calls == []


def test_falls_back_to_next_adapter(make_adapter, watch_url):
    first = make_adapter(TranscriptSource.YOUTUBE_LOADER, error=UpstreamError("loader: timed out"))
    second = make_adapter(TranscriptSource.TRANSCRIPT_API, text="from the api")

    transcript = TranscriptPipeline([first, second]).fetch(watch_url)

    assert transcript.text == "from the api"
    assert transcript.source == TranscriptSource.TRANSCRIPT_API
    assert len(first.calls) == 1


def test_every_adapter_sees_the_normalized_reference(make_adapter, short_url, watch_url):
    first = make_adapter(error=UpstreamError("boom"))
    second = make_adapter(error=UpstreamError("boom"))
    third = make_adapter(text="ok")

    TranscriptPipeline([first, second, third]).fetch(short_url)

    references = first.calls + second.calls + third.calls
    assert len(references) == 3
    assert all(reference.canonical_url == watch_url for reference in references)


def test_all_adapters_without_captions(make_adapter, watch_url):
    adapters = [
        make_adapter(error=NoTranscriptAvailableError(NO_TRANSCRIPT_MESSAGE)),
        make_adapter(error=NoTranscriptAvailableError(NO_TRANSCRIPT_MESSAGE)),
    ]

    with pytest.raises(NoTranscriptAvailableError) as excinfo:
        TranscriptPipeline(adapters).fetch(watch_url)

    assert excinfo.value.message == NO_TRANSCRIPT_MESSAGE


def test_missing_captions_wins_over_network_failures(make_adapter, watch_url):
    """One source reporting absent captions is enough to tell the user so."""
    adapters = [
        make_adapter(error=NoTranscriptAvailableError(NO_TRANSCRIPT_MESSAGE)),
        make_adapter(error=UpstreamError("transcript_api: connection refused")),
    ]

    with pytest.raises(NoTranscriptAvailableError):
        TranscriptPipeline(adapters).fetch(watch_url)


def test_caption_wording_in_upstream_message_is_no_transcript(make_adapter, watch_url):
    adapters = [make_adapter(error=UpstreamError("youtube_loader: Transcripts are disabled for this video"))]

    with pytest.raises(NoTranscriptAvailableError) as excinfo:
        TranscriptPipeline(adapters).fetch(watch_url)

    assert isinstance(excinfo.value.__cause__, UpstreamError)


def test_all_network_failures_report_the_last_one(make_adapter, watch_url):
    adapters = [
        make_adapter(error=UpstreamError("youtube_loader: timed out")),
        make_adapter(error=UpstreamError("transcript_api: connection refused")),
    ]

    with pytest.raises(TranscriptFetchFailedError) as excinfo:
        TranscriptPipeline(adapters).fetch(watch_url)

    assert excinfo.value.message == "Could not fetch transcript: transcript_api: connection refused"
    assert excinfo.value.status_code == 502


def test_empty_text_counts_as_no_transcript(make_adapter, watch_url):
    with pytest.raises(NoTranscriptAvailableError):
        TranscriptPipeline([make_adapter(text="   ")]).fetch(watch_url)


def test_unclassified_exception_is_wrapped(make_adapter, watch_url):
    adapter = make_adapter(error=RuntimeError("parser exploded"))

    with pytest.raises(TranscriptFetchFailedError) as excinfo:
        TranscriptPipeline([adapter]).fetch(watch_url)

    assert "parser exploded" in excinfo.value.message


def test_pipeline_requires_adapters():
    with pytest.raises(ValueError):
        TranscriptPipeline([])


def test_build_adapters_keeps_order():
    adapters = build_adapters(["transcript_api", "caption_track", "youtube_loader"])

    assert [type(adapter) for adapter in adapters] == [
        TranscriptApiAdapter,
        CaptionTrackAdapter,
        YoutubeLoaderAdapter,
    ]


def test_build_adapters_rejects_unknown_name():
    with pytest.raises(ValueError, match="Unknown transcript source"):
        build_adapters(["youtube_loader", "whisper"])


def test_registry_names_match_sources():
    assert set(ADAPTERS) == {source.value for source in TranscriptSource}
