"""
Transcript source backed by langchain's YoutubeLoader document loader.
"""

from typing import List, Optional

from langchain_community.document_loaders import YoutubeLoader

from ytdigest.config import config
from ytdigest.core.transcript.base import TranscriptAdapter
from ytdigest.models.schemas import TranscriptSource, VideoReference


class YoutubeLoaderAdapter(TranscriptAdapter):
    """Load the transcript as langchain documents and join them line by line."""

    source = TranscriptSource.YOUTUBE_LOADER

    def __init__(self, languages: Optional[List[str]] = None):
        self.languages = languages or list(config.TRANSCRIPT_LANGUAGES)

    def _fetch(self, reference: VideoReference) -> str:
        loader = YoutubeLoader.from_youtube_url(
            reference.canonical_url,
            add_video_info=False,
            language=self.languages,
        )
        documents = loader.load()
        return "\n".join(doc.page_content for doc in documents if doc.page_content)
