"""
Module for summarizing transcripts using LLM models.
"""

from typing import Optional, Union

from ytdigest.config import config
from ytdigest.core.completion import CompletionRequester
from ytdigest.core.prompts import (
    NO_SUMMARY_FALLBACK,
    SUMMARY_SYSTEM_PROMPT_EN,
    SUMMARY_SYSTEM_PROMPT_ZH,
    SUMMARY_USER_TEMPLATE,
)
from ytdigest.models.schemas import Language, PromptRequest
from ytdigest.utils.error_handling import require_text

SYSTEM_PROMPTS = {
    Language.ENGLISH: SUMMARY_SYSTEM_PROMPT_EN,
    Language.CHINESE: SUMMARY_SYSTEM_PROMPT_ZH,
}


class TranscriptSummarizer:
    """Class to handle transcript summarization operations."""

    def __init__(self, requester: Optional[CompletionRequester] = None):
        """
        Initialize the summarizer.

        Args:
            requester: Completion requester (a default one is built from config if None)
        """
        self.requester = requester or CompletionRequester()

    def build_prompt(self, transcript_text: str,
                     language: Union[Language, str, None] = Language.ENGLISH,
                     model: Optional[str] = None) -> PromptRequest:
        """Build the summary prompt for a transcript."""
        return PromptRequest(
            system_prompt=SYSTEM_PROMPTS[Language.parse(language)],
            user_prompt=SUMMARY_USER_TEMPLATE.format(transcript=transcript_text),
            model=model or config.DEFAULT_SUMMARY_MODEL,
        )

    def summarize(self, transcript_text: str,
                  language: Union[Language, str, None] = Language.ENGLISH,
                  model: Optional[str] = None) -> str:
        """
        Summarize a transcript text.

        Args:
            transcript_text: Full transcript text to summarize
            language: ``english`` (default) or ``chinese``
            model: Model identifier, defaults to DEFAULT_SUMMARY_MODEL

        Returns:
            Summarized text
        """
        transcript_text = require_text(transcript_text, "Transcript is required")
        prompt = self.build_prompt(transcript_text, language, model)
        return self.requester.complete(prompt, fallback=NO_SUMMARY_FALLBACK)
