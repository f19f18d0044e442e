"""
Question answering over a video transcript.

The whole transcript is sent as context; there is no retrieval step.
"""

from typing import Optional

from ytdigest.config import config
from ytdigest.core.completion import CompletionRequester
from ytdigest.core.prompts import NO_ANSWER_FALLBACK, QA_SYSTEM_PROMPT, QA_USER_TEMPLATE
from ytdigest.models.schemas import PromptRequest
from ytdigest.utils.error_handling import require_text
from ytdigest.utils.logger import logging


class ChatHandler:
    """Handler for questions about a video transcript."""

    def __init__(self, requester: Optional[CompletionRequester] = None):
        self.requester = requester or CompletionRequester()

    @staticmethod
    def build_prompt(transcript_text: str, question: str, model: Optional[str] = None) -> PromptRequest:
        """Build the question answering prompt."""
        return PromptRequest(
            system_prompt=QA_SYSTEM_PROMPT,
            user_prompt=QA_USER_TEMPLATE.format(context=transcript_text, question=question),
            model=model or config.DEFAULT_QA_MODEL,
        )

    def answer(self, transcript_text: str, question: str, model: Optional[str] = None) -> str:
        """
        Answer a question about a video.

        Args:
            transcript_text: Full transcript of the video
            question: User question
            model: Model identifier, defaults to DEFAULT_QA_MODEL

        Returns:
            The model's answer
        """
        transcript_text = require_text(transcript_text, "Transcript and question are required")
        question = require_text(question, "Transcript and question are required")

        logging.info(f"Processing question: {question}")
        prompt = self.build_prompt(transcript_text, question, model)
        return self.requester.complete(prompt, fallback=NO_ANSWER_FALLBACK)
